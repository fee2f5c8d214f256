"""Elapsed-time bookkeeping for the active stage."""

import time


def monotonic_ms() -> float:
    """Current monotonic timestamp in milliseconds."""
    return time.perf_counter() * 1000


class PipelineClock:
    """Converts wall-clock timestamps into time elapsed in the current stage.

    All timestamps are milliseconds. ``reference`` is the instant the stage
    would have started had it never been paused, so ``now - reference`` is the
    time the stage has actually been running.
    """

    def __init__(self):
        self._reference = 0.0
        self._frozen = 0.0

    @property
    def reference(self) -> float:
        return self._reference

    @property
    def frozen(self) -> float:
        """Elapsed time stored by the last ``freeze``."""
        return self._frozen

    def begin(self, now: float) -> None:
        """Start timing a stage at ``now``."""
        self._reference = now
        self._frozen = 0.0

    def sample(self, now: float) -> float:
        """Elapsed time at ``now``. Does not move the reference."""
        return max(0.0, now - self._reference)

    def freeze(self, elapsed: float) -> None:
        """Hold ``elapsed`` while the stage is suspended."""
        self._frozen = max(0.0, elapsed)

    def rebase(self, now: float, frozen_elapsed: float | None = None) -> None:
        """Move the reference so that ``sample(now)`` returns the frozen elapsed time."""
        elapsed = self._frozen if frozen_elapsed is None else frozen_elapsed
        self._reference = now - elapsed
