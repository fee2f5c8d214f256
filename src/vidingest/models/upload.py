"""Upload planning and file selection models."""

from pydantic import BaseModel, ConfigDict, Field

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def format_bytes(size_bytes: int) -> str:
    """Format a byte count as a human-readable string, e.g. ``1.5 MB``."""
    i = 0
    while i < len(_SIZE_UNITS) - 1 and size_bytes >= 1024 ** (i + 1):
        i += 1
    return f"{max(size_bytes, 0) / 1024**i:.1f} {_SIZE_UNITS[i]}"


class UploadPlan(BaseModel):
    """How a file is split into parts for a segmented upload."""

    model_config = ConfigDict(frozen=True)

    chunk_size_bytes: int = Field(..., gt=0)
    chunk_count: int = Field(..., ge=1)


class SelectedFile(BaseModel):
    """The media file the user picked."""

    name: str = Field(..., min_length=1)
    size_bytes: int = Field(..., ge=0)
    content_type: str = Field(default="application/octet-stream")

    @property
    def size_label(self) -> str:
        return format_bytes(self.size_bytes)


class UploadSessionRequest(BaseModel):
    """Request body for registering an upload session with the storage backend."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(..., alias="fileName")
    content_type: str = Field(..., alias="contentType")
    part_count: int = Field(..., ge=1, alias="partCount")

    @classmethod
    def for_file(cls, file: SelectedFile, plan: UploadPlan) -> "UploadSessionRequest":
        return cls(file_name=file.name, content_type=file.content_type, part_count=plan.chunk_count)
