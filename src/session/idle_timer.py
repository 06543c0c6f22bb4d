# src/session/idle_timer.py
import logging
from typing import Any, Callable, Optional

from src.session.scheduler import Scheduler

logger = logging.getLogger(__name__)


class IdleTimer:
    """
    Active -> Idle after ``idle_time_ms`` without activity; any activity goes back to Active.

    ``on_idle`` fires once per quiet window. Every reset cancels the pending
    timeout before scheduling a new one.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        idle_time_ms: int = 30000,
        on_idle: Optional[Callable[[], None]] = None,
        on_active: Optional[Callable[[], None]] = None,
    ):
        if idle_time_ms <= 0:
            raise ValueError("idle_time_ms must be positive")
        self.scheduler = scheduler
        self.idle_time_ms = idle_time_ms
        self.on_idle = on_idle
        self.on_active = on_active

        self.is_idle = False
        self._handle: Any = None
        self._running = False

    def start(self) -> None:
        self._running = True
        self.reset_timer()

    def reset_timer(self) -> None:
        """Record user activity."""
        if not self._running:
            return

        if self.is_idle:
            self.is_idle = False
            logger.debug("Idle timer: active")
            if self.on_active:
                self.on_active()

        self._cancel()
        self._handle = self.scheduler.call_later(self.idle_time_ms, self._fire)

    def set_idle_time(self, idle_time_ms: int) -> None:
        if idle_time_ms <= 0:
            raise ValueError("idle_time_ms must be positive")
        self.idle_time_ms = idle_time_ms
        if self._running and not self.is_idle:
            self.reset_timer()

    def stop(self) -> None:
        self._running = False
        self._cancel()

    def _cancel(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        if not self._running or self.is_idle:
            return
        self.is_idle = True
        logger.info(f"Idle after {self.idle_time_ms} ms without activity")
        if self.on_idle:
            self.on_idle()
