"""Stage definitions for the simulated ingest pipeline."""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from vidingest.models.errors import ValidationError


class Stage(BaseModel):
    """One named step of the pipeline with a fixed nominal duration."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Unique stage identifier")
    label: str = Field(..., min_length=1, description="Display text")
    duration_ms: int = Field(..., gt=0, description="Nominal duration in milliseconds")


class StageTable:
    """Immutable, ordered sequence of stages. Order is execution order."""

    def __init__(self, stages: Iterable[Stage]):
        stages = tuple(stages)
        if not stages:
            raise ValidationError("A stage table needs at least one stage")
        keys = [s.key for s in stages]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValidationError(
                f"Duplicate stage keys: {duplicates}", details={"duplicates": duplicates}
            )
        self._stages = stages

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[Stage]:
        return iter(self._stages)

    def __getitem__(self, index: int) -> Stage:
        return self._stages[index]

    @property
    def keys(self) -> list[str]:
        return [s.key for s in self._stages]

    @property
    def weight(self) -> float:
        """Share of overall progress each stage contributes, in percent."""
        return 100 / len(self._stages)


DEFAULT_STAGES = StageTable(
    [
        Stage(key="extract", label="Extract audio (ffmpeg)", duration_ms=2000),
        Stage(key="transcribe", label="Transcribe (Whisper)", duration_ms=3000),
        Stage(key="parse", label="Parse fields (AI+rules)", duration_ms=2000),
        Stage(key="merge", label="Merge top/bottom", duration_ms=1500),
        Stage(key="screenshots", label="Auto screenshots", duration_ms=1500),
        Stage(key="excel", label="Build Excel report", duration_ms=1500),
    ]
)
