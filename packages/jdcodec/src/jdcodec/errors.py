# packages/jdcodec/src/jdcodec/errors.py
from __future__ import annotations

__all__ = ["FixtureError", "LengthOverflowError", "EncodingDefectError"]


class FixtureError(Exception):
    """Base class: any failure aborts the generation run."""


class LengthOverflowError(FixtureError, ValueError):
    """Encoded modified UTF-8 does not fit the u16 length prefix."""

    def __init__(self, length: int, limit: int = 0xFFFF) -> None:
        super().__init__(f"encoded string too long: {length} bytes (max {limit})")
        self.length = length
        self.limit = limit


class EncodingDefectError(FixtureError, ValueError):
    """Invariant violation in the static case table or in the encoders."""
