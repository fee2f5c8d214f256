"""File selection endpoint."""

from fastapi import APIRouter, Depends

from vidingest.api.dependencies import get_app_settings, get_controller
from vidingest.config import Settings
from vidingest.models.upload import SelectedFile, UploadSessionRequest
from vidingest.pipeline.controller import PipelineController
from vidingest.upload.planner import compute_plan
from vidingest.upload.validators import validate_media_type

router = APIRouter(prefix="/api/v1", tags=["files"])


@router.post("/files")
def select_file(
    file: SelectedFile,
    controller: PipelineController = Depends(get_controller),
    settings: Settings = Depends(get_app_settings),
):
    """Select the media file to run the pipeline on. Resets any run in progress."""
    validate_media_type(file, settings.allowed_media_prefixes)
    plan = compute_plan(file.size_bytes, settings.base_chunk_bytes, settings.max_chunks)
    # Only touch the pipeline once nothing else can fail
    controller.select_file(file)

    return {
        "file": file.model_dump(),
        "size_label": file.size_label,
        "plan": plan.model_dump(),
        "upload_request": UploadSessionRequest.for_file(file, plan).model_dump(by_alias=True),
        "pipeline": controller.snapshot().model_dump(),
    }
