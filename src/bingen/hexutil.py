"""
Hex text <-> byte buffer helpers (small, focused)

Goals
- Decode arbitrary user keystrokes into bytes without raising: a single
  non-hex character anywhere invalidates the whole text.
- Encode buffers to the canonical form: uppercase, two digits per byte,
  no separators.
- Provide a strict raising variant and a "text or file" reader for CLI flags.
"""
from __future__ import annotations

import logging
import re
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input."

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


class InvalidInput(ValueError):
    """Text contains a character outside 0-9, a-f, A-F."""


class DecodeResult(NamedTuple):
    ok: bool
    data: Optional[bytes]
    reason: Optional[str]


def valid(data: bytes) -> DecodeResult:
    return DecodeResult(True, bytes(data), None)


def invalid(reason: str = INVALID_INPUT_MESSAGE) -> DecodeResult:
    return DecodeResult(False, None, reason)


def is_hex_str(s: str) -> bool:
    return bool(_HEX_RE.fullmatch(s or ""))


def decode(text: str) -> DecodeResult:
    """Decode hex text two characters at a time.

    Case-insensitive. A trailing unpaired character is dropped, not an error.
    Empty text is a valid, empty buffer.
    """
    if text and not is_hex_str(text):
        logger.debug("rejecting non-hex text of length %d", len(text))
        return invalid()
    even = len(text) - len(text) % 2
    return valid(bytes.fromhex(text[:even]))


def encode(data: bytes) -> str:
    return bytes(data).hex().upper()


def parse_hex(name: str, s: Optional[str], length: Optional[int] = None) -> bytes:
    """Parse hex text into bytes, raising on invalid input.

    Args:
        name: human-readable name for error messages.
        s: hex text (case-insensitive; a trailing odd digit is dropped).
        length: expected length in bytes (optional). If set, enforce exact length.

    Returns:
        Decoded bytes.
    """
    if s is None:
        raise ValueError(f"{name} is required")
    res = decode(s)
    if not res.ok or res.data is None:
        raise InvalidInput(f"Invalid hex for {name}")
    if length is not None and len(res.data) != length:
        raise ValueError(f"{name} must be {length} bytes (got {len(res.data)})")
    return res.data


def text_or_file(name: str, text: Optional[str], file_path: Optional[str]) -> str:
    """Return hex text from an argument or a text file.

    Precedence: text if provided; otherwise file_path is read.
    Raises if neither is provided.
    """
    if text is not None:
        return text
    if file_path:
        with open(file_path, 'rt', encoding='utf-8') as f:
            return f.read().rstrip('\r\n')
    raise ValueError(f"{name} required")


def format_buffer(data: bytes) -> str:
    """Render a buffer as a decimal list, e.g. ``[15, 255]``."""
    return "[" + ", ".join(str(b) for b in data) + "]"
