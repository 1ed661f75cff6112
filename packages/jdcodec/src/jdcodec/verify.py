# packages/jdcodec/src/jdcodec/verify.py
# Relecture de contrôle : on ne vérifie que nos propres fixtures, avant émission.
from __future__ import annotations
import math, struct
from typing import List

import numpy as np

from .errors import EncodingDefectError
from .mutf8 import Text, iter_code_points, to_utf16_units
from .primitives import DTYPES, WIDTHS

__all__ = ["read_primitive", "read_utf16_units", "check_primitive", "check_text"]


def read_primitive(kind: str, data: bytes):
    """Relit `data` comme un DataInput conforme (dtype numpy big-endian)."""
    if len(data) != WIDTHS[kind]:
        raise EncodingDefectError(
            f"{kind}: expected {WIDTHS[kind]} bytes, got {len(data)}"
        )
    return np.frombuffer(data, dtype=DTYPES[kind])[0].item()


def read_utf16_units(body: bytes) -> List[int]:
    """Décode un corps modified UTF-8 en unités UTF-16 (sans recombiner les paires)."""
    units: List[int] = []
    i, n = 0, len(body)

    def cont(j: int) -> int:
        if j >= n or body[j] >> 6 != 0b10:
            raise EncodingDefectError(f"writeUTF: bad continuation byte at {j}")
        return body[j] & 0x3F

    while i < n:
        b0 = body[i]
        if b0 >> 7 == 0:
            units.append(b0)
            i += 1
        elif b0 >> 5 == 0b110:
            units.append((b0 & 0x1F) << 6 | cont(i + 1))
            i += 2
        elif b0 >> 4 == 0b1110:
            units.append((b0 & 0x0F) << 12 | cont(i + 1) << 6 | cont(i + 2))
            i += 3
        else:
            raise EncodingDefectError(f"writeUTF: bad lead byte {b0:#x} at {i}")
    return units


def check_primitive(kind: str, value, data: bytes) -> None:
    decoded = read_primitive(kind, data)
    if kind in ("float", "double"):
        with np.errstate(over="ignore"):
            expected = np.array([float(value)], dtype=DTYPES[kind])[0].item()
        same = decoded == expected or (math.isnan(decoded) and math.isnan(expected))
    else:
        bits = 8 * WIDTHS[kind]
        expected = int(value) & ((1 << bits) - 1)
        if DTYPES[kind].startswith(">i") and expected >= 1 << (bits - 1):
            expected -= 1 << bits
        same = decoded == expected
    if not same:
        raise EncodingDefectError(f"{kind}: {value!r} reads back as {decoded!r}")


def check_text(text: Text, data: bytes) -> None:
    """Vérifie le préfixe u16, l'absence d'octet nul et le contenu relu."""
    if len(data) < 2:
        raise EncodingDefectError("writeUTF: missing length prefix")
    (n,) = struct.unpack(">H", data[:2])
    body = data[2:]
    if n != len(body):
        raise EncodingDefectError(f"writeUTF: prefix says {n}, body has {len(body)}")
    if 0 in body:
        raise EncodingDefectError("writeUTF: literal NUL byte in body")
    expected = [u for cp in iter_code_points(text) for u in to_utf16_units(cp)]
    if read_utf16_units(body) != expected:
        raise EncodingDefectError("writeUTF: body does not read back as the input text")
