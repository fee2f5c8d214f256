"""Upload planning endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from vidingest.api.dependencies import get_app_settings
from vidingest.config import Settings
from vidingest.upload.planner import compute_plan

router = APIRouter(prefix="/api/v1", tags=["upload"])


class PlanRequest(BaseModel):
    size_bytes: int = Field(..., ge=0)


@router.post("/upload/plan")
async def plan_upload(
    request: PlanRequest,
    settings: Settings = Depends(get_app_settings),
):
    """Compute how many parts a file of the given size uploads in."""
    plan = compute_plan(request.size_bytes, settings.base_chunk_bytes, settings.max_chunks)
    return plan.model_dump()
