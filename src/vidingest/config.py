"""Application configuration using Pydantic BaseSettings."""

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings

from vidingest.models.errors import ConfigurationError


class Settings(BaseSettings):
    """vidingest configuration loaded from environment variables."""

    model_config = {"env_prefix": "VIDINGEST_", "env_file": ".env", "extra": "ignore"}

    # Upload planning
    base_chunk_bytes: int = Field(default=8 * 1024 * 1024, gt=0)
    max_chunks: int = Field(default=10_000, gt=0)

    # File selection
    allowed_media_prefixes: list[str] = ["video/", "audio/"]

    # Frame pacing for the progress driver (one display refresh)
    frame_interval_seconds: float = Field(default=1 / 60, gt=0)


def get_settings() -> Settings:
    """Return a settings instance, rejecting values the pipeline cannot run with."""
    try:
        return Settings()
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid settings: {', '.join(fields)}", details={"fields": fields}
        ) from e
