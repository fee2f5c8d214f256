"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vidingest.api.dependencies import get_controller
from vidingest.api.middleware import vidingest_error_handler
from vidingest.api.routes import files, pipeline, upload
from vidingest.models.errors import VidIngestError

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # No frame may fire once the app is gone; skip if no request ever built one
    if get_controller.cache_info().currsize:
        get_controller().close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="vidingest",
        description="Control surface for a simulated media ingest pipeline",
        version=VERSION,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    app.add_exception_handler(VidIngestError, vidingest_error_handler)

    # Routes
    app.include_router(files.router)
    app.include_router(pipeline.router)
    app.include_router(upload.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": VERSION}

    return app


app = create_app()
