"""Shared test fixtures: a controllable clock and a hand-driven scheduler."""

import pytest

from vidingest.models.stages import DEFAULT_STAGES, Stage, StageTable
from vidingest.models.upload import SelectedFile
from vidingest.pipeline.controller import PipelineController
from vidingest.pipeline.scheduler import FrameCallback, Scheduler


class FakeClock:
    """Millisecond time source that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


class ManualScheduler(Scheduler):
    """Holds the pending callback until the test fires it."""

    def __init__(self):
        self.callback: FrameCallback | None = None
        self.scheduled = 0
        self.cancelled = 0

    def schedule_next(self, callback: FrameCallback) -> None:
        self.callback = callback
        self.scheduled += 1

    def cancel(self) -> None:
        self.callback = None
        self.cancelled += 1

    @property
    def pending(self) -> bool:
        return self.callback is not None

    def fire(self) -> bool:
        """Run the pending callback, if any. Returns whether one ran."""
        callback, self.callback = self.callback, None
        if callback is None:
            return False
        callback()
        return True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def sample_file():
    return SelectedFile(
        name="interview.mp4", size_bytes=150 * 1024 * 1024, content_type="video/mp4"
    )


@pytest.fixture
def short_stages():
    """Three stages with easy-to-reason-about durations."""
    return StageTable(
        [
            Stage(key="a", label="Stage A", duration_ms=100),
            Stage(key="b", label="Stage B", duration_ms=200),
            Stage(key="c", label="Stage C", duration_ms=100),
        ]
    )


@pytest.fixture
def controller(clock, sample_file):
    """Default six-stage controller, file selected, driven by hand."""
    ctrl = PipelineController(DEFAULT_STAGES, time_source=clock)
    ctrl.select_file(sample_file)
    return ctrl


@pytest.fixture
def scheduled_controller(clock, scheduler, short_stages, sample_file):
    """Three-stage controller whose frames go through the manual scheduler."""
    ctrl = PipelineController(short_stages, scheduler=scheduler, time_source=clock)
    ctrl.select_file(sample_file)
    return ctrl
