import threading
from contextlib import contextmanager


class SaveInProgress(Exception):
    """Another save for the same item has not finished yet."""


class InFlightGuard:
    """Tracks saves currently talking to the backend, keyed per session and item."""

    def __init__(self):
        self._lock = threading.Lock()
        self._active = set()

    @contextmanager
    def hold(self, key):
        with self._lock:
            if key in self._active:
                raise SaveInProgress(key)
            self._active.add(key)
        try:
            yield
        finally:
            with self._lock:
                self._active.discard(key)

    def is_active(self, key):
        with self._lock:
            return key in self._active
