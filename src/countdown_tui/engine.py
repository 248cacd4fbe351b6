from datetime import timedelta

from .shared import TimerState, Command, Event

ZERO = timedelta(0)

def tick(state: TimerState, elapsed: timedelta) -> TimerState:
    '''
    Called unconditionally by the tick source.
    Returns `state` itself when the countdown is not advancing.
    '''
    if elapsed < ZERO:
        raise ValueError(f'elapsed must not be negative, got {elapsed}')
    if not state.running or state.timed_out:
        return state
    remaining = max(state.remaining - elapsed, ZERO)
    if remaining == ZERO:
        return state.model_copy(update=dict(
            remaining=ZERO, running=False, timed_out=True,
        ))
    return state.model_copy(update=dict(remaining=remaining))

def toggle(state: TimerState) -> TimerState:
    if state.timed_out:
        return state
    return state.model_copy(update=dict(running=not state.running))

def reset(state: TimerState, total_duration: timedelta) -> TimerState:
    return TimerState(
        total_duration=total_duration,
        remaining=total_duration,
        running=False,
        timed_out=False,
        quitting=state.quitting,
    )

def requestQuit(state: TimerState) -> TimerState:
    return state.model_copy(update=dict(quitting=True))

def transition(
    state: TimerState, event: Event.Base,
    exit_on_timeout: bool = True,
) -> TimerState:
    '''
    The only way the driver changes state.
    Nothing happens after `quitting` is set.
    '''
    if state.quitting:
        return state
    match event:
        case Event.Tick(elapsed=elapsed):
            new_state = tick(state, elapsed)
            if exit_on_timeout and new_state.timed_out and not state.timed_out:
                new_state = requestQuit(new_state)
            return new_state
        case Event.KeyPress(command=Command.StartStop()):
            return toggle(state)
        case Event.KeyPress(command=Command.Reset()):
            return reset(state, state.total_duration)
        case Event.KeyPress(command=Command.Quit()):
            return requestQuit(state)
        case _:
            raise ValueError(f'Unknown event: {event}')
