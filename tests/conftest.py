"""
Pytest configuration and fixtures for all tests
"""

import heapq
import itertools
import os
import sys
import tempfile

import pytest

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Settings are read at import time; keep them away from a real kiosk folder
os.environ.setdefault("APP_DIR", tempfile.mkdtemp(prefix="kiosk-app-"))

from src.core.models import Category, MediaFile, Product  # noqa: E402


class FakeScheduler:
    """Manual clock for timer tests: callbacks run only inside ``advance``."""

    def __init__(self):
        self.now = 0
        self._queue = []
        self._seq = itertools.count()
        self._cancelled = set()

    def call_later(self, delay_ms, callback):
        handle = next(self._seq)
        heapq.heappush(self._queue, (self.now + delay_ms, handle, callback))
        return handle

    def cancel(self, handle):
        self._cancelled.add(handle)

    @property
    def pending(self):
        return sum(1 for _, h, _ in self._queue if h not in self._cancelled)

    def advance(self, ms):
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, handle, callback = heapq.heappop(self._queue)
            if handle in self._cancelled:
                continue
            self.now = due
            callback()
        self.now = target


@pytest.fixture
def scheduler():
    return FakeScheduler()


# --- content tree helpers ---

def write_file(path, data=b"x"):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    mode = "wb" if isinstance(data, bytes) else "w"
    with open(path, mode) as f:
        f.write(data)
    return path


@pytest.fixture
def make_file():
    return write_file


def make_product(name="Widget", path=None, media_count=1):
    path = path or f"/kiosk/Sources/{name}"
    media = [
        MediaFile(id=f"{name}-{i}", type="image", filename=f"{i}.jpg", path=f"{path}/Photos/{i}.jpg")
        for i in range(media_count)
    ]
    return Product(id=name, name=name, path=path, media=media)


def make_category(name, subcategories=(), products=(), parent="/kiosk/Sources"):
    return Category(
        id=name,
        name=name,
        path=f"{parent}/{name}",
        subcategories=list(subcategories),
        products=list(products),
    )


@pytest.fixture
def catalog_tree():
    """Home > Tools > Power > Drills(product), and a separate Garden root."""
    drill = make_product("Drill", path="/kiosk/Sources/Tools/Power/Drill")
    power = make_category("Power", products=[drill], parent="/kiosk/Sources/Tools")
    hammer = make_product("Hammer", path="/kiosk/Sources/Tools/Hammer")
    tools = make_category("Tools", subcategories=[power], products=[hammer])
    garden = make_category("Garden", products=[make_product("Rake", path="/kiosk/Sources/Garden/Rake")])
    return {"tools": tools, "power": power, "garden": garden, "drill": drill, "hammer": hammer}
