"""Validation of user-selected media files."""

from vidingest.config import get_settings
from vidingest.models.errors import ValidationError
from vidingest.models.upload import SelectedFile


def validate_media_type(file: SelectedFile, allowed_prefixes: list[str] | None = None) -> None:
    """Validate that the file is audio or video."""
    prefixes = allowed_prefixes or get_settings().allowed_media_prefixes
    content_type = file.content_type.lower()
    if not any(content_type.startswith(p) for p in prefixes):
        raise ValidationError(
            f"Unsupported media type: {file.content_type}. Allowed: {prefixes}",
            details={"content_type": file.content_type, "allowed": prefixes},
        )
