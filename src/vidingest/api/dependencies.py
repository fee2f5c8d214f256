"""Dependency injection providers for FastAPI."""

from functools import lru_cache

from vidingest.config import Settings, get_settings
from vidingest.pipeline.controller import PipelineController
from vidingest.pipeline.scheduler import ThreadingScheduler


@lru_cache
def get_controller() -> PipelineController:
    return PipelineController(scheduler=ThreadingScheduler())


def get_app_settings() -> Settings:
    return get_settings()
