"""Collects raw error payload bytes from a streamed response."""

from __future__ import annotations

import io
from typing import Any


class ErrorAccumulatorError(Exception):
    """Raised when the underlying buffer refuses a write."""


class ErrorAccumulator:
    """Accumulates bytes written to it into a buffer.

    The buffer needs ``write(data)`` and ``getvalue()``; an in-memory
    ``io.BytesIO`` is used when none is given.
    """

    def __init__(self, buffer: Any = None) -> None:
        self.buffer = io.BytesIO() if buffer is None else buffer

    def write(self, data: bytes) -> None:
        """Append ``data`` to the buffer, wrapping any failure."""
        try:
            self.buffer.write(data)
        except Exception as exc:
            raise ErrorAccumulatorError(f"error accumulator write error, {exc}") from exc

    def getvalue(self) -> bytes:
        """Return everything written so far (empty bytes when nothing was)."""
        return bytes(self.buffer.getvalue())