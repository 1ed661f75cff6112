# packages/jdcodec/src/jdcodec/primitives.py
from __future__ import annotations
import math, struct

import numpy as np

__all__ = [
    "DTYPES", "WIDTHS", "ENCODERS",
    "encode_signed_byte", "encode_signed_short", "encode_unsigned_short",
    "encode_signed_int", "encode_signed_long",
    "encode_float", "encode_double",
]

_BE = ">"  # big-endian, comme DataOutput

# kind -> dtype numpy lu par un DataInput conforme
DTYPES: dict[str, str] = {
    "byte": ">i1",
    "short": ">i2",
    "unsigned_short": ">u2",
    "int": ">i4",
    "long": ">i8",
    "float": ">f4",
    "double": ">f8",
}
WIDTHS: dict[str, int] = {k: np.dtype(dt).itemsize for k, dt in DTYPES.items()}

_CANONICAL_NAN_F32 = bytes.fromhex("7fc00000")
_CANONICAL_NAN_F64 = bytes.fromhex("7ff8000000000000")


def _pack_wrapped(fmt: str, width: int, value: int) -> bytes:
    # troncature en complément à deux : on garde les `width*8` bits bas
    mask = (1 << (8 * width)) - 1
    return struct.pack(_BE + fmt, int(value) & mask)


def encode_signed_byte(value: int) -> bytes:
    """1 octet : les 8 bits bas de `value`."""
    return _pack_wrapped("B", 1, value)


def encode_signed_short(value: int) -> bytes:
    """2 octets big-endian : les 16 bits bas de `value`."""
    return _pack_wrapped("H", 2, value)


def encode_unsigned_short(value: int) -> bytes:
    # même représentation que le short signé, seule la lecture diffère
    return _pack_wrapped("H", 2, value)


def encode_signed_int(value: int) -> bytes:
    """4 octets big-endian : les 32 bits bas de `value`."""
    return _pack_wrapped("I", 4, value)


def encode_signed_long(value: int) -> bytes:
    """8 octets big-endian : les 64 bits bas de `value`."""
    return _pack_wrapped("Q", 8, value)


def encode_float(value: float) -> bytes:
    """
    IEEE-754 binary32, big-endian.

    Le rétrécissement double -> float32 arrondit au plus proche et sature en
    ±inf (struct lèverait OverflowError, d'où numpy). Tout NaN est écrit en
    NaN canonique.
    """
    value = float(value)
    if math.isnan(value):
        return _CANONICAL_NAN_F32
    with np.errstate(over="ignore"):
        return np.array([value], dtype=">f4").tobytes()


def encode_double(value: float) -> bytes:
    """IEEE-754 binary64, big-endian; NaN canonique."""
    value = float(value)
    if math.isnan(value):
        return _CANONICAL_NAN_F64
    return struct.pack(_BE + "d", value)


# kind -> encodeur (dispatch utilisé par DataOutput et les cas)
ENCODERS = {
    "byte": encode_signed_byte,
    "short": encode_signed_short,
    "unsigned_short": encode_unsigned_short,
    "int": encode_signed_int,
    "long": encode_signed_long,
    "float": encode_float,
    "double": encode_double,
}
