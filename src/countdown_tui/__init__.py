from .UI import UI as CountdownUI
from .config import TimerConfig
from .shared import TimerState, Command, Event
from .keymap import KeyBinding, KeyMap, DEFAULT_KEYMAP, dispatch
from .engine import tick, toggle, reset, requestQuit, transition
from .render import render

__all__ = [
    "CountdownUI", "TimerConfig", "TimerState", "Command", "Event",
    "KeyBinding", "KeyMap", "DEFAULT_KEYMAP", "dispatch",
    "tick", "toggle", "reset", "requestQuit", "transition", "render",
]
