import math
from datetime import datetime, timedelta

from .shared import TimerState, BIG_TEXT_STYLE, TIMESTAMP_FORMAT, TIMES_UP
from .keymap import KeyMap

HELP_SEPARATOR = ' • '

def big(text: str) -> str:
    return f'[{BIG_TEXT_STYLE}]{text}[/]'

def formatRemaining(remaining: timedelta) -> str:
    '''
    `MM:SS`, seconds rounded up so that `00:00` only shows once time is up.
    Hours fold into minutes.
    '''
    total = math.ceil(remaining.total_seconds())
    minutes, seconds = divmod(max(total, 0), 60)
    return f'{minutes:02d}:{seconds:02d}'

def helpLine(keymap: KeyMap) -> str:
    return HELP_SEPARATOR.join(
        b.label for b in keymap.inHelpOrder() if b.enabled
    )

def render(
    state: TimerState, started_at: datetime, keymap: KeyMap,
) -> str:
    '''
    `keymap` is drawn as given, see `KeyMap.forState` for its enabled flags.
    '''
    if state.timed_out:
        s = big(TIMES_UP)
    else:
        s = (
            f'Timer initialized: {started_at.strftime(TIMESTAMP_FORMAT)}\n'
            f'Time Remaining: {big(formatRemaining(state.remaining))}'
        )
    return s + '\n\n' + helpLine(keymap)
