# packages/jdcodec/src/jdcodec/__init__.py
from __future__ import annotations

"""jdcodec - encodeurs java.io.DataOutput (surface publique).

Entiers big-endian à largeur fixe, flottants IEEE-754 et modified UTF-8.
"""

__version__ = "0.1.0"

from .config import FixtureConfig
from .errors import FixtureError, LengthOverflowError, EncodingDefectError
from .primitives import (
    encode_signed_byte, encode_signed_short, encode_unsigned_short,
    encode_signed_int, encode_signed_long, encode_float, encode_double,
)
from .mutf8 import MAX_UTF_LENGTH, encode_code_point, encode_text, utf_length
from .output import DataOutput

__all__ = [
    "__version__",
    "FixtureConfig",
    "FixtureError", "LengthOverflowError", "EncodingDefectError",
    "encode_signed_byte", "encode_signed_short", "encode_unsigned_short",
    "encode_signed_int", "encode_signed_long", "encode_float", "encode_double",
    "MAX_UTF_LENGTH", "encode_code_point", "encode_text", "utf_length",
    "DataOutput",
]
