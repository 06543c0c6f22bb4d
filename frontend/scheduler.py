# frontend/scheduler.py
import tkinter
from typing import Any, Callable

# Tk event sequences that count as user activity (pointer, keyboard, scroll, touch)
ACTIVITY_EVENTS = (
    "<ButtonPress>",
    "<Motion>",
    "<KeyPress>",
    "<MouseWheel>",
    "<Button-4>",  # X11 scroll up
    "<Button-5>",  # X11 scroll down
)


class TkScheduler:
    """Scheduler backed by a Tk widget's ``after``/``after_cancel``."""

    def __init__(self, widget):
        self.widget = widget

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        return self.widget.after(int(delay_ms), callback)

    def cancel(self, handle: Any) -> None:
        if handle is None:
            return
        try:
            self.widget.after_cancel(handle)
        except tkinter.TclError:
            # Widget already destroyed
            pass
