"""
Wall-clock timing of computation phases.

Backends split a computation into named phases (sorting, centring,
binning, ...) and attach the per-phase durations to their Result.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Phase timer.

    A run is bracketed by start() and stop(); phases inside it are timed
    with ``section(name)``. Timing the same phase twice adds the durations.

        timer = Timer().start()
        with timer.section('counts'):
            counts = np.bincount(index)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'counts': ...}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._began: float | None = None
        self._total: float | None = None

    def start(self) -> 'Timer':
        self._began = time.perf_counter()
        self._total = None
        return self

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the ``with`` block to phase ``name``."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (time.perf_counter() - began)

    def result(self) -> dict[str, float]:
        """
        ``total_seconds`` followed by every phase, in order of first use.

        Raises:
            RuntimeError: If the run has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}

