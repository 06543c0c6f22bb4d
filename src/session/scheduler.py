# src/session/scheduler.py
from typing import Any, Callable, Protocol


class Scheduler(Protocol):
    """
    One-shot timers on the UI event loop.

    ``call_later`` returns a handle that ``cancel`` accepts; cancelling a
    handle that already fired, or None, does nothing.
    """

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...
