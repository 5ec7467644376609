# pyheads/timings.py
import logging
import time
from contextlib import contextmanager
from typing import Dict

logger = logging.getLogger(__name__)


class Timings:
    """Per-stage wall clock durations of one head request, in milliseconds."""

    def __init__(self):
        self._timings: Dict[str, float] = {}
        self._pending: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self._pending[name] = time.perf_counter()

    def stop(self, name: str) -> float:
        end = time.perf_counter()
        try:
            start = self._pending.pop(name)
        except KeyError:
            raise RuntimeError(f"Timing {name} not started") from None

        duration = (end - start) * 1000
        self._timings[name] = duration
        logger.debug("%s: %.2fms", name, duration)
        return duration

    @contextmanager
    def measure(self, name: str):
        self.start(name)
        try:
            yield
        finally:
            self.stop(name)

    @property
    def durations(self) -> Dict[str, float]:
        return dict(self._timings)

    def to_header(self) -> str:
        """Render as a Server-Timing header value."""
        return ", ".join(f"{name};dur={duration:.2f}" for name, duration in self._timings.items())
