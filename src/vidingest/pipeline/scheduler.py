"""Recurring frame drivers for the pipeline controller."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

from vidingest.config import get_settings
from vidingest.models.errors import ConfigurationError

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class Scheduler(ABC):
    """Runs one callback at the next frame.

    At most one callback is outstanding: scheduling replaces the previous one,
    and nothing scheduled before ``cancel()`` fires after it.
    """

    @abstractmethod
    def schedule_next(self, callback: FrameCallback) -> None:
        """Run ``callback`` once at the next frame."""
        ...

    @abstractmethod
    def cancel(self) -> None:
        """Drop the outstanding callback, if any."""
        ...

    @property
    @abstractmethod
    def pending(self) -> bool:
        """Whether a callback is waiting to fire."""
        ...


class ThreadingScheduler(Scheduler):
    """Frame scheduler backed by ``threading.Timer``."""

    def __init__(self, interval_seconds: float | None = None):
        interval = (
            interval_seconds
            if interval_seconds is not None
            else get_settings().frame_interval_seconds
        )
        if interval <= 0:
            raise ConfigurationError(
                f"Frame interval must be positive, got {interval}",
                details={"interval_seconds": interval},
            )
        self.interval = interval
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._generation = 0

    def schedule_next(self, callback: FrameCallback) -> None:
        with self._lock:
            self._cancel_locked()
            timer = threading.Timer(self.interval, self._fire, args=(self._generation, callback))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _cancel_locked(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation: int, callback: FrameCallback) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropped stale frame callback")
                return
            self._timer = None
        callback()
