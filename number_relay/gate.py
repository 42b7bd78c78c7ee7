import threading
import time
from typing import Callable, Optional

CACHE_DURATION = 0.5


class CacheGate:
    """Short-circuits requests that arrive within ``duration`` seconds of the last admitted one."""

    def __init__(self, duration: float = CACHE_DURATION, clock: Callable[[], float] = time.monotonic) -> None:
        self.duration = duration
        self._clock = clock
        self._last_admitted: Optional[float] = None
        self._lock = threading.Lock()

    def should_short_circuit(self, now: float) -> bool:
        if self._last_admitted is None:
            return False
        return now - self._last_admitted < self.duration

    def admit(self, now: Optional[float] = None) -> bool:
        """Return True and record the admission time unless the request is short-circuited."""
        with self._lock:
            if now is None:
                now = self._clock()
            if self.should_short_circuit(now):
                return False
            self._last_admitted = now
            return True
