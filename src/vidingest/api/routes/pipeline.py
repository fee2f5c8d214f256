"""Pipeline control endpoints.

Actions invalid in the current state are no-ops and still return the
(unchanged) snapshot, mirroring the controller's guard clauses.
"""

from fastapi import APIRouter, Depends

from vidingest.api.dependencies import get_controller
from vidingest.pipeline.controller import PipelineController

router = APIRouter(prefix="/api/v1", tags=["pipeline"])


@router.get("/stages")
def list_stages(controller: PipelineController = Depends(get_controller)):
    """List the configured stages in execution order."""
    return [stage.model_dump() for stage in controller.stages]


@router.get("/pipeline")
def get_pipeline(controller: PipelineController = Depends(get_controller)):
    """Current pipeline snapshot."""
    return controller.snapshot().model_dump()


@router.post("/pipeline/start")
def start_pipeline(controller: PipelineController = Depends(get_controller)):
    accepted = controller.start()
    return {"accepted": accepted, "pipeline": controller.snapshot().model_dump()}


@router.post("/pipeline/pause")
def pause_pipeline(controller: PipelineController = Depends(get_controller)):
    accepted = controller.pause()
    return {"accepted": accepted, "pipeline": controller.snapshot().model_dump()}


@router.post("/pipeline/resume")
def resume_pipeline(controller: PipelineController = Depends(get_controller)):
    accepted = controller.resume()
    return {"accepted": accepted, "pipeline": controller.snapshot().model_dump()}


@router.post("/pipeline/reset")
def reset_pipeline(controller: PipelineController = Depends(get_controller)):
    controller.reset()
    return {"accepted": True, "pipeline": controller.snapshot().model_dump()}
