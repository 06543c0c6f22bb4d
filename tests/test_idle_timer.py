"""
Unit tests for IdleTimer
"""

import pytest

from src.session.idle_timer import IdleTimer


def _timer(scheduler, idle_ms=30000):
    events = []
    timer = IdleTimer(
        scheduler,
        idle_ms,
        on_idle=lambda: events.append("idle"),
        on_active=lambda: events.append("active"),
    )
    return timer, events


def test_goes_idle_once_after_quiet_window(scheduler):
    """Test that silence for the full window fires idle exactly once"""
    timer, events = _timer(scheduler)
    timer.start()

    scheduler.advance(29999)
    assert events == []

    scheduler.advance(1)
    assert events == ["idle"]
    assert timer.is_idle

    scheduler.advance(120000)
    assert events == ["idle"]


def test_activity_just_before_window_keeps_active(scheduler):
    """Test that events every D - 1 ms never reach idle"""
    timer, events = _timer(scheduler, 1000)
    timer.start()

    for _ in range(50):
        scheduler.advance(999)
        timer.reset_timer()

    assert events == []
    assert not timer.is_idle


def test_activity_after_idle_returns_to_active(scheduler):
    timer, events = _timer(scheduler, 1000)
    timer.start()
    scheduler.advance(1000)

    timer.reset_timer()
    assert events == ["idle", "active"]
    assert not timer.is_idle

    scheduler.advance(1000)
    assert events == ["idle", "active", "idle"]


def test_reset_never_leaves_two_pending_timeouts(scheduler):
    """Test clear-before-set on repeated resets"""
    timer, _ = _timer(scheduler)
    timer.start()
    for _ in range(10):
        timer.reset_timer()
    assert scheduler.pending == 1


def test_stop_cancels(scheduler):
    timer, events = _timer(scheduler, 1000)
    timer.start()
    timer.stop()
    scheduler.advance(5000)
    assert events == []
    assert scheduler.pending == 0

    timer.reset_timer()
    assert scheduler.pending == 0


def test_set_idle_time_restarts_window(scheduler):
    timer, events = _timer(scheduler, 1000)
    timer.start()
    scheduler.advance(500)
    timer.set_idle_time(2000)

    scheduler.advance(1999)
    assert events == []
    scheduler.advance(1)
    assert events == ["idle"]


def test_rejects_non_positive_duration(scheduler):
    with pytest.raises(ValueError):
        IdleTimer(scheduler, 0)
    timer = IdleTimer(scheduler, 10)
    with pytest.raises(ValueError):
        timer.set_idle_time(-1)
