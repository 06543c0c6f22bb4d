"""
Unit tests for the two-stage SessionTimeout
"""

import pytest

from src.session.session_timeout import SessionTimeout


@pytest.fixture
def session(scheduler):
    events = []
    countdown = []
    timeout = SessionTimeout(
        scheduler,
        warning_time_ms=45000,
        timeout_time_ms=60000,
        on_warning=lambda: events.append(("warning", scheduler.now)),
        on_timeout=lambda: events.append(("timeout", scheduler.now)),
        on_countdown=countdown.append,
    )
    timeout.start()
    return timeout, events, countdown


def test_warning_then_timeout_once_each(scheduler, session):
    """Test warning at 45s and reset at 60s with no interruption"""
    timeout, events, _ = session

    scheduler.advance(44999)
    assert events == []

    scheduler.advance(1)
    assert events == [("warning", 45000)]
    assert timeout.show_warning

    scheduler.advance(15000)
    assert events == [("warning", 45000), ("timeout", 60000)]
    assert not timeout.show_warning


def test_countdown_ticks_every_second(scheduler, session):
    timeout, _, countdown = session

    scheduler.advance(45000)
    assert countdown == [15]
    assert timeout.seconds_remaining == 15

    scheduler.advance(3000)
    assert countdown == [15, 14, 13, 12]

    scheduler.advance(12000)
    assert countdown[-1] == 1
    assert timeout.seconds_remaining == 0


def test_continue_session_restarts_both_stages(scheduler, session):
    """Test that continuing at 50s pushes warning to 95s and reset to 110s"""
    timeout, events, _ = session

    scheduler.advance(50000)
    timeout.continue_session()
    assert not timeout.show_warning

    scheduler.advance(44999)
    assert events == [("warning", 45000)]

    scheduler.advance(1)
    assert events[-1] == ("warning", 95000)

    scheduler.advance(15000)
    assert events[-1] == ("timeout", 110000)
    assert [e for e, _ in events].count("timeout") == 1


def test_activity_restarts_before_warning(scheduler, session):
    timeout, events, _ = session

    scheduler.advance(40000)
    timeout.record_activity()
    scheduler.advance(40000)
    assert events == []

    scheduler.advance(5000)
    assert events == [("warning", 85000)]


def test_activity_ignored_while_warning_shown(scheduler, session):
    """Test that only an explicit continue dismisses the warning"""
    timeout, events, _ = session

    scheduler.advance(46000)
    timeout.record_activity()
    assert timeout.show_warning

    scheduler.advance(14000)
    assert events[-1] == ("timeout", 60000)


def test_reset_session_times_out_now(scheduler, session):
    timeout, events, _ = session

    scheduler.advance(47000)
    timeout.reset_session()

    assert events == [("warning", 45000), ("timeout", 47000)]
    assert not timeout.show_warning
    # Restarted from zero
    scheduler.advance(45000)
    assert events[-1] == ("warning", 92000)


def test_timeout_restarts_cycle(scheduler, session):
    _, events, _ = session
    scheduler.advance(120000)
    assert [e for e, _ in events] == ["warning", "timeout", "warning", "timeout"]


def test_repeated_resets_leave_two_pending_timers(scheduler, session):
    """Test clear-before-set: one warning and one reset timer at most"""
    timeout, _, _ = session
    for _ in range(10):
        timeout.reset_timer()
    assert scheduler.pending == 2


def test_stop_cancels_everything(scheduler, session):
    timeout, events, _ = session
    scheduler.advance(46000)
    timeout.stop()
    assert scheduler.pending == 0
    scheduler.advance(100000)
    assert events == [("warning", 45000)]


@pytest.mark.parametrize("warn, reset", [(0, 1000), (1000, 1000), (2000, 1000)])
def test_rejects_bad_durations(scheduler, warn, reset):
    with pytest.raises(ValueError):
        SessionTimeout(scheduler, warn, reset)
