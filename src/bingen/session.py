"""
Headless editing session: the text field and the buffer derived from it.

The session owns one hex text and one optional decoded buffer. Typing keeps
the text authoritative (EDITING); the generate action makes the buffer
authoritative and rewrites the text from it (GENERATED). Both directions go
through the same codec functions.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .hexutil import DecodeResult, decode, encode, format_buffer
from .randbuf import (
    DEFAULT_LENGTH,
    GENERATION_FAILED_MESSAGE,
    GenerationFailure,
    clamp_length,
    generate,
)

logger = logging.getLogger(__name__)

DEFAULT_TEXT = "0FFF"


class Mode(Enum):
    EDITING = "editing"       # text is authoritative
    GENERATED = "generated"   # buffer is authoritative


@dataclass
class BufferSession:
    """Current text, last valid buffer and the error to show, if any.

    Attributes:
        text: raw hex text as typed or generated.
        length: byte count for the generate action (1-255).
        buffer: last valid decode of ``text`` or the last generated buffer.
        error: user-facing message, or None when the text is valid.
        mode: which of text/buffer is authoritative.
    """
    text: str = DEFAULT_TEXT
    length: int = DEFAULT_LENGTH
    buffer: Optional[bytes] = None
    error: Optional[str] = None
    mode: Mode = field(default=Mode.EDITING)

    def __post_init__(self) -> None:
        self.length = clamp_length(self.length)
        self.refresh()

    def refresh(self) -> DecodeResult:
        res = decode(self.text)
        if res.ok:
            self.buffer = res.data
            self.error = None
        else:
            # keep the previous buffer
            self.error = res.reason
        return res

    def set_text(self, text: str) -> DecodeResult:
        self.text = text
        self.mode = Mode.EDITING
        return self.refresh()

    def set_length(self, value: Any) -> int:
        self.length = clamp_length(value)
        return self.length

    def generate(self) -> Optional[bytes]:
        try:
            buf = generate(self.length)
        except GenerationFailure as exc:
            logger.warning("generate failed: %s", exc)
            self.error = GENERATION_FAILED_MESSAGE
            return None
        self.buffer = buf
        self.text = encode(buf)
        self.mode = Mode.GENERATED
        self.error = None
        return buf

    def canonical_text(self) -> Optional[str]:
        return None if self.buffer is None else encode(self.buffer)

    def export(self) -> bytes:
        """Raw bytes of the current buffer, as handed to a clipboard blob."""
        if self.buffer is None:
            raise ValueError("no buffer to export")
        return bytes(self.buffer)

    def display(self) -> str:
        return "" if self.buffer is None else format_buffer(self.buffer)
