from __future__ import annotations

import typing as tp

from pydantic import BaseModel, ConfigDict

from .shared import TimerState, Command

class KeyBinding(BaseModel):
    keys: tuple[str, ...]
    help_key: str
    help_desc: str
    enabled: bool = True

    model_config = ConfigDict(
        frozen=True,
    )

    @property
    def label(self) -> str:
        return f'{self.help_key} {self.help_desc}'

    def matches(self, key: str) -> bool:
        return self.enabled and key in self.keys

    def withEnabled(self, enabled: bool) -> KeyBinding:
        if enabled == self.enabled:
            return self
        return self.model_copy(update=dict(enabled=enabled))

class KeyMap(BaseModel):
    start: KeyBinding
    stop: KeyBinding
    reset: KeyBinding
    quit: KeyBinding

    model_config = ConfigDict(
        frozen=True,
    )

    def forState(self, state: TimerState) -> KeyMap:
        '''
        Start and stop share a key; at most one of them is enabled.
        '''
        return KeyMap(
            start=self.start.withEnabled(not state.running and not state.timed_out),
            stop=self.stop.withEnabled(state.running),
            reset=self.reset.withEnabled(True),
            quit=self.quit.withEnabled(True),
        )

    def inHelpOrder(self) -> tuple[KeyBinding, ...]:
        return (self.start, self.stop, self.reset, self.quit)

    def allKeys(self) -> tp.Iterator[str]:
        seen: set[str] = set()
        for binding in self.inHelpOrder():
            for key in binding.keys:
                if key not in seen:
                    seen.add(key)
                    yield key

DEFAULT_KEYMAP = KeyMap(
    start=KeyBinding(keys=('s', ), help_key='s', help_desc='start/stop the timer'),
    stop=KeyBinding(keys=('s', ), help_key='s', help_desc='start/stop the timer'),
    reset=KeyBinding(keys=('r', ), help_key='r', help_desc='reset the timer'),
    quit=KeyBinding(keys=('q', 'ctrl+c'), help_key='q', help_desc='quit the program'),
)

def dispatch(keymap: KeyMap, key: str) -> Command.Base | None:
    '''
    `keymap` must already reflect the current state, see `KeyMap.forState`.
    Precedence: quit, reset, start/stop.
    '''
    if keymap.quit.matches(key):
        return Command.Quit()
    if keymap.reset.matches(key):
        return Command.Reset()
    if keymap.start.matches(key) or keymap.stop.matches(key):
        return Command.StartStop()
    return None
