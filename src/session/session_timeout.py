# src/session/session_timeout.py
import logging
from typing import Any, Callable, Optional

from src.session.scheduler import Scheduler

logger = logging.getLogger(__name__)

COUNTDOWN_TICK_MS = 1000


class SessionTimeout:
    """
    Two-stage inactivity timeout.

    At ``warning_time_ms`` the warning is shown and a per-second countdown
    starts; at ``timeout_time_ms`` ``on_timeout`` fires and both stages start
    over. While the warning is up, plain activity does not count: only
    ``continue_session`` (or ``reset_session``) does.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        warning_time_ms: int = 45000,
        timeout_time_ms: int = 60000,
        on_warning: Optional[Callable[[], None]] = None,
        on_timeout: Optional[Callable[[], None]] = None,
        on_countdown: Optional[Callable[[int], None]] = None,
    ):
        if not 0 < warning_time_ms < timeout_time_ms:
            raise ValueError("warning_time_ms must be positive and smaller than timeout_time_ms")
        self.scheduler = scheduler
        self.warning_time_ms = warning_time_ms
        self.timeout_time_ms = timeout_time_ms
        self.on_warning = on_warning
        self.on_timeout = on_timeout
        self.on_countdown = on_countdown

        self.show_warning = False
        self.seconds_remaining = 0

        self._warning_handle: Any = None
        self._timeout_handle: Any = None
        self._countdown_handle: Any = None
        self._running = False

    def start(self) -> None:
        self._running = True
        self.reset_timer()

    def reset_timer(self) -> None:
        """Hide the warning and restart both stages from zero."""
        self._clear_timers()
        self.show_warning = False
        self.seconds_remaining = 0
        if not self._running:
            return
        self._warning_handle = self.scheduler.call_later(self.warning_time_ms, self._on_warning_due)
        self._timeout_handle = self.scheduler.call_later(self.timeout_time_ms, self._on_timeout_due)

    def continue_session(self) -> None:
        logger.info("Session continued")
        self.reset_timer()

    def reset_session(self) -> None:
        """User asked to start over: same as reaching the timeout now."""
        self._expire()

    def record_activity(self) -> None:
        if not self.show_warning:
            self.reset_timer()

    def stop(self) -> None:
        self._running = False
        self._clear_timers()
        self.show_warning = False
        self.seconds_remaining = 0

    # --- internals ---
    def _clear_timers(self) -> None:
        for attr in ("_warning_handle", "_timeout_handle", "_countdown_handle"):
            handle = getattr(self, attr)
            if handle is not None:
                self.scheduler.cancel(handle)
                setattr(self, attr, None)

    def _on_warning_due(self) -> None:
        self._warning_handle = None
        self.show_warning = True
        self.seconds_remaining = (self.timeout_time_ms - self.warning_time_ms) // 1000
        logger.info(f"Session warning: {self.seconds_remaining}s until reset")
        if self.on_warning:
            self.on_warning()
        if self.on_countdown:
            self.on_countdown(self.seconds_remaining)
        self._countdown_handle = self.scheduler.call_later(COUNTDOWN_TICK_MS, self._tick)

    def _tick(self) -> None:
        self._countdown_handle = None
        self.seconds_remaining = max(0, self.seconds_remaining - 1)
        if self.on_countdown:
            self.on_countdown(self.seconds_remaining)
        if self.seconds_remaining > 0:
            self._countdown_handle = self.scheduler.call_later(COUNTDOWN_TICK_MS, self._tick)

    def _on_timeout_due(self) -> None:
        self._timeout_handle = None
        self._expire()

    def _expire(self) -> None:
        self._clear_timers()
        self.show_warning = False
        self.seconds_remaining = 0
        logger.info("Session timed out, returning to home")
        if self.on_timeout:
            self.on_timeout()
        self.reset_timer()
