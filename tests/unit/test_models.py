"""Tests for Pydantic data models and the stage table."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from vidingest.models.errors import (
    ConfigurationError,
    ErrorResponse,
    ValidationError,
    VidIngestError,
)
from vidingest.models.pipeline import PipelineState, PipelineStatus
from vidingest.models.stages import DEFAULT_STAGES, Stage, StageTable
from vidingest.models.upload import (
    SelectedFile,
    UploadPlan,
    UploadSessionRequest,
    format_bytes,
)
from vidingest.upload.validators import validate_media_type

# --- Stage / StageTable ---


class TestStage:
    def test_valid_construction(self):
        stage = Stage(key="extract", label="Extract", duration_ms=2000)
        assert stage.duration_ms == 2000

    def test_zero_duration_rejected(self):
        with pytest.raises(PydanticValidationError):
            Stage(key="extract", label="Extract", duration_ms=0)

    def test_empty_key_rejected(self):
        with pytest.raises(PydanticValidationError):
            Stage(key="", label="Extract", duration_ms=10)

    def test_frozen(self):
        stage = Stage(key="extract", label="Extract", duration_ms=2000)
        with pytest.raises(PydanticValidationError):
            stage.duration_ms = 5


class TestStageTable:
    def test_default_table(self):
        assert DEFAULT_STAGES.keys == [
            "extract",
            "transcribe",
            "parse",
            "merge",
            "screenshots",
            "excel",
        ]
        assert DEFAULT_STAGES[1].duration_ms == 3000
        assert DEFAULT_STAGES.weight == pytest.approx(100 / 6)

    def test_empty_table_rejected(self):
        with pytest.raises(ValidationError):
            StageTable([])

    def test_duplicate_keys_rejected(self):
        stage = Stage(key="a", label="A", duration_ms=10)
        with pytest.raises(ValidationError) as exc_info:
            StageTable([stage, stage])
        assert exc_info.value.details["duplicates"] == ["a"]

    def test_iteration_order(self, short_stages):
        assert [s.key for s in short_stages] == ["a", "b", "c"]
        assert len(short_stages) == 3


# --- PipelineState ---


class TestPipelineState:
    def test_defaults(self):
        state = PipelineState()
        assert state.status == PipelineStatus.NOT_STARTED
        assert state.current_stage_index == -1
        assert state.stage_progress == 0
        assert state.elapsed_ms == 0

    def test_progress_out_of_range(self):
        with pytest.raises(PydanticValidationError):
            PipelineState(stage_progress=120)


# --- Upload models ---


class TestFormatBytes:
    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0.0 Bytes"),
            (1023, "1023.0 Bytes"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (150 * 1024 * 1024, "150.0 MB"),
            (3 * 1024**3, "3.0 GB"),
            (1024**5, "1024.0 TB"),
        ],
    )
    def test_format(self, size, expected):
        assert format_bytes(size) == expected


class TestSelectedFile:
    def test_size_label(self, sample_file):
        assert sample_file.size_label == "150.0 MB"

    def test_negative_size_rejected(self):
        with pytest.raises(PydanticValidationError):
            SelectedFile(name="a.mp4", size_bytes=-1)

    def test_media_types(self):
        validate_media_type(SelectedFile(name="a.mp4", size_bytes=1, content_type="video/mp4"))
        validate_media_type(SelectedFile(name="a.mp3", size_bytes=1, content_type="audio/mpeg"))

    def test_non_media_rejected(self):
        doc = SelectedFile(name="notes.txt", size_bytes=1, content_type="text/plain")
        with pytest.raises(ValidationError):
            validate_media_type(doc)

    def test_custom_prefixes(self):
        doc = SelectedFile(name="notes.txt", size_bytes=1, content_type="text/plain")
        validate_media_type(doc, ["text/"])


class TestUploadModels:
    def test_plan_requires_a_chunk(self):
        with pytest.raises(PydanticValidationError):
            UploadPlan(chunk_size_bytes=1024, chunk_count=0)

    def test_session_request_aliases(self, sample_file):
        plan = UploadPlan(chunk_size_bytes=8 * 1024 * 1024, chunk_count=19)
        body = UploadSessionRequest.for_file(sample_file, plan).model_dump(by_alias=True)
        assert body == {"fileName": "interview.mp4", "contentType": "video/mp4", "partCount": 19}


# --- Errors ---


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(ValidationError, VidIngestError)
        assert issubclass(ConfigurationError, VidIngestError)

    def test_components(self):
        assert ValidationError("x").component == "validation"
        assert ConfigurationError("x").component == "configuration"

    def test_error_response_from_exception(self):
        err = ValidationError("bad file", details={"content_type": "text/plain"})
        resp = ErrorResponse.from_exception(err, guidance="pick media")
        assert resp.error_type == "ValidationError"
        assert resp.details == {"content_type": "text/plain"}
        assert resp.actionable_guidance == "pick media"
        assert resp.retry_possible is False
