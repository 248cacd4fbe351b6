from __future__ import annotations

from datetime import datetime, timedelta

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Static

from .shared import TimerState, Event, TICK_INTERVAL
from .engine import transition, toggle
from .keymap import KeyMap, DEFAULT_KEYMAP, dispatch
from .render import render
from .config import TimerConfig

class UI(App):
    CSS_PATH = "styles.tcss"
    # Every key goes through `dispatch`, which knows which bindings are enabled.
    BINDINGS = [
        Binding(key, f"key_command({key!r})", show=False, priority=True)
        for key in DEFAULT_KEYMAP.allKeys()
    ]

    def __init__(
        self,
        total_duration: timedelta,
        tick_interval: timedelta = TICK_INTERVAL,
        exit_on_timeout: bool = True,
        start_paused: bool = False,
    ) -> None:
        '''
        `tick_interval` is both the period of the tick source and
        the time each tick takes off the countdown.
        The countdown starts on mount unless `start_paused`.
        '''
        super().__init__()

        self.total_duration = total_duration
        self.tick_interval = tick_interval
        self.exit_on_timeout = exit_on_timeout
        self.start_paused = start_paused

        self.state = TimerState.fresh(total_duration)
        self.keymap: KeyMap = DEFAULT_KEYMAP.forState(self.state)
        self.started_at = datetime.now()
        self.frame = ''
        self.frames_drawn = 0

        self.title = "Countdown"

    @classmethod
    def fromConfig(cls, config: TimerConfig) -> UI:
        return cls(
            total_duration=config.total_duration,
            tick_interval=config.tick_interval,
            exit_on_timeout=config.exit_on_timeout,
            start_paused=config.start_paused,
        )

    def compose(self) -> ComposeResult:
        with Container(id="timer-pane"):
            yield Static("", id="frame")

    def on_mount(self) -> None:
        self.log(f'Timer of {self.total_duration} mounted, ticking every {self.tick_interval}')
        # Lives as long as the app. Reset never re-registers it.
        self.set_interval(self.tick_interval.total_seconds(), self.onTick)
        if not self.start_paused:
            self.state = toggle(self.state)
            self.keymap = self.keymap.forState(self.state)
        self.myUpdate()

    def onTick(self, elapsed: timedelta | None = None) -> None:
        self.apply(Event.Tick(
            self.tick_interval if elapsed is None else elapsed,
        ))

    def action_key_command(self, key: str) -> None:
        if self.state.quitting:
            return
        command = dispatch(self.keymap, key)
        if command is None:
            return
        self.log(f'{key!r} -> {command}')
        self.apply(Event.KeyPress(command))

    def apply(self, event: Event.Base) -> None:
        if self.state.quitting:
            return
        old = self.state
        self.state = transition(old, event, self.exit_on_timeout)
        if self.state.timed_out and not old.timed_out:
            self.log("Time's up")
        self.keymap = self.keymap.forState(self.state)
        self.myUpdate()
        if self.state.quitting:
            self.log('Quitting')
            self.exit(return_code=0)

    def myUpdate(self) -> None:
        self.frame = render(self.state, self.started_at, self.keymap)
        self.frames_drawn += 1
        sFrame: Static = self.query_one('#frame', Static)
        sFrame.update(self.frame)
