"""
Random byte buffers for demo content.

Bytes come from the platform CSPRNG (os.urandom). Nothing here is used as key
material; the requirement is only a uniform distribution and a clear failure
when no entropy source is available.
"""
from __future__ import annotations

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

MIN_LENGTH = 1
MAX_LENGTH = 255  # slider bound in the interactive front end
DEFAULT_LENGTH = 8

GENERATION_FAILED_MESSAGE = "failed to generate random numbers."


class GenerationFailure(RuntimeError):
    """No buffer could be produced (bad length or entropy source unavailable)."""


def clamp_length(value: Any) -> int:
    """Coerce a requested length to int and clamp it into [MIN_LENGTH, MAX_LENGTH]."""
    try:
        n = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("length must be an integer") from exc
    return max(MIN_LENGTH, min(MAX_LENGTH, n))


def generate(length: int) -> bytes:
    """Return exactly ``length`` uniformly random bytes.

    Raises:
        GenerationFailure: length is not a positive integer, or the entropy
            source is unavailable. No partial or zero-filled data is returned.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise GenerationFailure(f"length must be an integer (got {type(length).__name__})")
    if length < MIN_LENGTH:
        raise GenerationFailure(f"length must be a positive integer (got {length})")
    try:
        buf = os.urandom(length)
    except (NotImplementedError, OSError) as exc:
        logger.warning("entropy source unavailable: %s", exc)
        raise GenerationFailure(GENERATION_FAILED_MESSAGE) from exc
    if len(buf) != length:
        raise GenerationFailure(f"entropy source returned {len(buf)} of {length} bytes")
    logger.debug("generated %d random bytes", length)
    return buf
