"""Data models for vidingest."""

from vidingest.models.errors import (
    ConfigurationError,
    ErrorResponse,
    ValidationError,
    VidIngestError,
)
from vidingest.models.pipeline import (
    PipelineSnapshot,
    PipelineState,
    PipelineStatus,
    StageStatus,
    StageView,
)
from vidingest.models.stages import DEFAULT_STAGES, Stage, StageTable
from vidingest.models.upload import (
    SelectedFile,
    UploadPlan,
    UploadSessionRequest,
    format_bytes,
)

__all__ = [
    "DEFAULT_STAGES",
    "ConfigurationError",
    "ErrorResponse",
    "PipelineSnapshot",
    "PipelineState",
    "PipelineStatus",
    "SelectedFile",
    "Stage",
    "StageStatus",
    "StageTable",
    "StageView",
    "UploadPlan",
    "UploadSessionRequest",
    "ValidationError",
    "VidIngestError",
    "format_bytes",
]
