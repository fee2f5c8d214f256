"""Pipeline controller: the state machine driving simulated stage progress."""

import logging
import threading
from collections.abc import Callable
from functools import partial

from vidingest.models.pipeline import (
    PipelineSnapshot,
    PipelineState,
    PipelineStatus,
    StageStatus,
    StageView,
)
from vidingest.models.stages import DEFAULT_STAGES, StageTable
from vidingest.models.upload import SelectedFile
from vidingest.pipeline.clock import PipelineClock, monotonic_ms
from vidingest.pipeline.scheduler import Scheduler

logger = logging.getLogger(__name__)

# Floor for stage durations so progress math never divides by zero
MIN_DURATION_MS = 1


class PipelineController:
    """Owns the pipeline state and advances it through the stage table.

    ``start``/``pause``/``resume`` are guarded: called in the wrong state they
    change nothing and return ``False``. With a scheduler attached, the
    controller drives its own ``tick`` every frame while running; without one
    the caller drives ``tick`` directly.
    """

    def __init__(
        self,
        stages: StageTable = DEFAULT_STAGES,
        scheduler: Scheduler | None = None,
        time_source: Callable[[], float] = monotonic_ms,
    ):
        self.stages = stages
        self.scheduler = scheduler
        self._now = time_source
        self.clock = PipelineClock()
        self.state = PipelineState()
        self.file: SelectedFile | None = None
        self._lock = threading.RLock()
        # Bumped on every transition; frames carry the value they were scheduled with
        self._generation = 0

    @property
    def status(self) -> PipelineStatus:
        with self._lock:
            return self.state.status

    @property
    def current_stage_index(self) -> int:
        with self._lock:
            return self.state.current_stage_index

    @property
    def stage_progress(self) -> float:
        with self._lock:
            return self.state.stage_progress

    @property
    def elapsed_ms(self) -> float:
        with self._lock:
            return self.state.elapsed_ms

    def select_file(self, file: SelectedFile) -> None:
        """Make ``file`` the pipeline target and discard any run in progress."""
        with self._lock:
            self.file = file
            self.reset()
        logger.info(f"Selected {file.name} ({file.size_label})")

    def start(self) -> bool:
        """Begin a fresh run at the first stage."""
        with self._lock:
            if self.file is None:
                logger.debug("Start ignored: no file selected")
                return False
            if self.state.status not in (PipelineStatus.NOT_STARTED, PipelineStatus.COMPLETED):
                logger.debug(f"Start ignored while {self.state.status}")
                return False

            self.state = PipelineState(status=PipelineStatus.RUNNING, current_stage_index=0)
            self.clock.begin(self._now())
            self._schedule_frame()
        logger.info(f"Pipeline started for {self.file.name} ({len(self.stages)} stages)")
        return True

    def pause(self) -> bool:
        """Suspend the active stage, freezing its elapsed time."""
        with self._lock:
            if self.state.status != PipelineStatus.RUNNING:
                return False
            self.state.status = PipelineStatus.PAUSED
            self.clock.freeze(self.state.elapsed_ms)
            self._cancel_frames()
        logger.debug(
            f"Paused stage {self.state.current_stage_index} at {self.state.stage_progress:.1f}%"
        )
        return True

    def resume(self) -> bool:
        """Continue a paused stage from exactly where it stopped."""
        with self._lock:
            if self.state.status != PipelineStatus.PAUSED:
                return False
            self.state.status = PipelineStatus.RUNNING
            self.clock.rebase(self._now(), self.clock.frozen)
            self._schedule_frame()
        logger.debug(f"Resumed stage {self.state.current_stage_index}")
        return True

    def reset(self) -> None:
        """Return to not-started from any state and stop scheduling."""
        with self._lock:
            self._cancel_frames()
            self.state = PipelineState()
            self.clock = PipelineClock()
        logger.info("Pipeline reset")

    def close(self) -> None:
        """Teardown: make sure no frame fires after the owner goes away."""
        with self._lock:
            self._cancel_frames()

    def tick(self, now: float) -> bool:
        """Recompute progress at ``now``. Returns whether to keep scheduling."""
        with self._lock:
            state = self.state
            if state.status != PipelineStatus.RUNNING:
                return False

            stage = self.stages[state.current_stage_index]
            elapsed = max(state.elapsed_ms, self.clock.sample(now))
            state.elapsed_ms = elapsed
            duration = max(MIN_DURATION_MS, stage.duration_ms)
            state.stage_progress = min(100.0, 100 * elapsed / duration)
            if state.stage_progress < 100:
                return True

            if state.current_stage_index + 1 < len(self.stages):
                # Swap in a fresh state so the next stage appears in one step
                self.state = PipelineState(
                    status=PipelineStatus.RUNNING,
                    current_stage_index=state.current_stage_index + 1,
                )
                self.clock.begin(now)
                next_key = self.stages[self.state.current_stage_index].key
                logger.debug(f"Stage {stage.key} done, starting {next_key}")
                return True

            state.status = PipelineStatus.COMPLETED
        logger.info("Pipeline completed")
        return False

    def stage_status(self, index: int) -> StageStatus:
        with self._lock:
            current = self.state.current_stage_index
            status = self.state.status
        if current == -1:
            return StageStatus.IDLE
        if index < current:
            return StageStatus.DONE
        if index == current:
            if status == PipelineStatus.RUNNING:
                return StageStatus.ACTIVE
            if status == PipelineStatus.PAUSED:
                return StageStatus.PAUSED
            return StageStatus.DONE
        return StageStatus.PENDING

    def overall_progress(self) -> float:
        """Progress across all stages, each weighted equally, in percent."""
        with self._lock:
            status = self.state.status
            index = self.state.current_stage_index
            progress = self.state.stage_progress
        if status == PipelineStatus.COMPLETED:
            return 100.0
        weight = self.stages.weight
        completed = max(0, index) * weight
        active = (progress / 100) * weight
        return min(100.0, max(0.0, completed + active))

    def snapshot(self) -> PipelineSnapshot:
        with self._lock:
            return PipelineSnapshot(
                status=self.state.status,
                file=self.file,
                current_stage_index=self.state.current_stage_index,
                stage_progress=self.state.stage_progress,
                overall_progress=self.overall_progress(),
                stages=[
                    StageView(key=s.key, label=s.label, status=self.stage_status(i))
                    for i, s in enumerate(self.stages)
                ],
            )

    def _schedule_frame(self) -> None:
        self._generation += 1
        if self.scheduler is not None:
            self.scheduler.schedule_next(partial(self._on_frame, self._generation))

    def _cancel_frames(self) -> None:
        self._generation += 1
        if self.scheduler is not None:
            self.scheduler.cancel()

    def _on_frame(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            if self.tick(self._now()):
                self._schedule_frame()
