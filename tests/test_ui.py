"""Tests for the Textual driver, run headless through the pilot."""
import pytest
from datetime import timedelta

from countdown_tui import CountdownUI, TimerConfig

SEC = timedelta(seconds=1)
# Long enough that the real interval never fires during a test.
NO_TICKS = timedelta(hours=1)


def makeUI(total: timedelta, **kw) -> CountdownUI:
    kw.setdefault('start_paused', True)
    return CountdownUI(total_duration=total, tick_interval=NO_TICKS, **kw)


@pytest.mark.asyncio
async def test_first_frame_on_mount():
    app = makeUI(60 * SEC)
    async with app.run_test():
        assert app.frames_drawn == 1
        assert 'Timer initialized: ' in app.frame
        assert '01:00' in app.frame


@pytest.mark.asyncio
async def test_counts_down_from_mount():
    """Without start_paused the timer is already running on the first frame."""
    app = makeUI(60 * SEC, start_paused=False)
    async with app.run_test() as pilot:
        assert app.state.running
        assert app.keymap.stop.enabled and not app.keymap.start.enabled
        app.onTick(10 * SEC)
        assert app.state.remaining == 50 * SEC
        await pilot.press('s')
        assert not app.state.running


@pytest.mark.asyncio
async def test_real_ticks_survive_reset_and_time_out():
    """The interval set up on mount drives the countdown to exit, across a reset."""
    app = CountdownUI(total_duration=SEC, tick_interval=timedelta(milliseconds=50))
    async with app.run_test() as pilot:
        await pilot.pause(0.2)
        assert app.state.running
        assert app.state.remaining < SEC
        await pilot.press('r')
        assert app.state.remaining == SEC
        assert not app.state.running
        await pilot.pause(0.2)
        assert app.state.remaining == SEC
        await pilot.press('s')
        await pilot.pause(3.0)
        assert app.state.timed_out
        assert app.state.quitting
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_start_tick_stop():
    app = makeUI(60 * SEC)
    async with app.run_test() as pilot:
        await pilot.press('s')
        assert app.state.running
        assert app.keymap.stop.enabled and not app.keymap.start.enabled
        app.onTick(10 * SEC)
        assert app.state.remaining == 50 * SEC
        assert '00:50' in app.frame
        await pilot.press('s')
        assert not app.state.running
        app.onTick(10 * SEC)
        assert app.state.remaining == 50 * SEC


@pytest.mark.asyncio
async def test_reset_mid_countdown():
    app = makeUI(60 * SEC)
    async with app.run_test() as pilot:
        await pilot.press('s')
        app.onTick(55 * SEC)
        assert app.state.remaining == 5 * SEC
        await pilot.press('r')
        assert app.state.remaining == 60 * SEC
        assert not app.state.running
        assert not app.state.timed_out
        # ticking keeps working after a reset
        await pilot.press('s')
        app.onTick(SEC)
        assert app.state.remaining == 59 * SEC


@pytest.mark.asyncio
async def test_default_tick_uses_interval():
    app = CountdownUI(
        total_duration=60 * SEC, tick_interval=timedelta(hours=2), start_paused=True,
    )
    async with app.run_test() as pilot:
        await pilot.press('s')
        app.onTick(59 * SEC)
        assert app.state.remaining == SEC
        app.onTick()
        assert app.state.timed_out


@pytest.mark.asyncio
async def test_timeout_exits():
    app = makeUI(SEC)
    async with app.run_test() as pilot:
        await pilot.press('s')
        app.onTick(SEC)
        assert app.state.remaining == timedelta(0)
        assert app.state.timed_out
        assert not app.state.running
        assert app.state.quitting
        assert "Time's up!" in app.frame
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_timeout_without_exit_waits_for_reset():
    app = makeUI(SEC, exit_on_timeout=False)
    async with app.run_test() as pilot:
        await pilot.press('s')
        app.onTick(SEC)
        assert app.state.timed_out
        assert not app.state.quitting
        await pilot.press('s')
        assert not app.state.running
        await pilot.press('r')
        assert app.state.remaining == SEC
        assert not app.state.timed_out


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ['q', 'ctrl+c'])
@pytest.mark.parametrize("start", [False, True])
async def test_quit_renders_once_more(key, start):
    app = makeUI(60 * SEC)
    async with app.run_test() as pilot:
        if start:
            await pilot.press('s')
        drawn = app.frames_drawn
        await pilot.press(key)
        assert app.state.quitting
        assert app.state.running == start
        assert app.frames_drawn == drawn + 1
        app.onTick(SEC)
        assert app.frames_drawn == drawn + 1
        assert app.state.remaining == 60 * SEC
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_unbound_key_is_ignored():
    app = makeUI(60 * SEC)
    async with app.run_test() as pilot:
        before = app.state
        await pilot.press('x')
        assert app.state is before


def test_from_config():
    app = CountdownUI.fromConfig(TimerConfig(duration_minutes=3, exit_on_timeout=False))
    assert app.state.total_duration == timedelta(minutes=3)
    assert app.state.remaining == timedelta(minutes=3)
    assert app.tick_interval == timedelta(milliseconds=100)
    assert not app.exit_on_timeout
    assert not app.start_paused
