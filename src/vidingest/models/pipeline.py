"""Pipeline state and stage models."""

from enum import StrEnum

from pydantic import BaseModel, Field

from vidingest.models.upload import SelectedFile


class PipelineStatus(StrEnum):
    """Lifecycle of one run."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class StageStatus(StrEnum):
    """How a single stage renders relative to the current stage."""

    IDLE = "idle"
    PENDING = "pending"
    ACTIVE = "active"
    PAUSED = "paused"
    DONE = "done"


class PipelineState(BaseModel):
    """Mutable state of the current run. Owned by the controller."""

    status: PipelineStatus = Field(default=PipelineStatus.NOT_STARTED)
    current_stage_index: int = Field(default=-1, ge=-1)
    stage_progress: float = Field(default=0.0, ge=0, le=100)
    elapsed_ms: float = Field(default=0.0, ge=0)


class StageView(BaseModel):
    """A stage as the view layer renders it."""

    key: str
    label: str
    status: StageStatus


class PipelineSnapshot(BaseModel):
    """Everything a view needs to render the pipeline after a state change."""

    status: PipelineStatus
    file: SelectedFile | None = None
    current_stage_index: int = Field(..., ge=-1)
    stage_progress: float = Field(..., ge=0, le=100)
    overall_progress: float = Field(..., ge=0, le=100)
    stages: list[StageView] = Field(default_factory=list)
