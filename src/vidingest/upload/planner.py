"""Part-count planning for chunked uploads."""

import logging

from vidingest.models.errors import ValidationError
from vidingest.models.upload import UploadPlan

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_BYTES = 8 * 1024 * 1024
DEFAULT_MAX_CHUNKS = 10_000


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def compute_plan(
    size_bytes: int,
    base_chunk_bytes: int = DEFAULT_CHUNK_BYTES,
    max_chunks: int = DEFAULT_MAX_CHUNKS,
) -> UploadPlan:
    """Split ``size_bytes`` into fixed-size parts, never more than ``max_chunks``.

    When the base chunk size would need too many parts, the chunk size grows to
    ``ceil(size / max_chunks)`` and the count is derived again from it. A
    zero-byte file is planned as a single part.
    """
    if base_chunk_bytes <= 0:
        raise ValidationError(
            f"base_chunk_bytes must be positive, got {base_chunk_bytes}",
            details={"base_chunk_bytes": base_chunk_bytes},
        )
    if max_chunks <= 0:
        raise ValidationError(
            f"max_chunks must be positive, got {max_chunks}", details={"max_chunks": max_chunks}
        )

    size = max(1, size_bytes)
    chunk_size = base_chunk_bytes
    count = _ceil_div(size, chunk_size)
    if count > max_chunks:
        chunk_size = _ceil_div(size, max_chunks)
        count = _ceil_div(size, chunk_size)
        logger.debug(f"Raised chunk size to {chunk_size} bytes to stay within {max_chunks} parts")

    return UploadPlan(chunk_size_bytes=chunk_size, chunk_count=count)

