# packages/jdcodec/src/jdcodec/mutf8.py
# -----------------------------------------------------------------------------
# "Modified UTF-8" (DataOutput.writeUTF) - variante historique, PAS de l'UTF-8 :
#   - U+0000 sur deux octets (C0 80), jamais d'octet nul ;
#   - les caractères > U+FFFF passent par leur paire de substitution UTF-16,
#     chaque moitié encodée sur 3 octets (6 octets au total) ;
#   - préfixe u16 big-endian = nombre d'octets encodés (pas de caractères).
# -----------------------------------------------------------------------------
from __future__ import annotations
import io, logging, struct
from typing import Iterable, Iterator, Union

from .errors import EncodingDefectError, LengthOverflowError

__all__ = [
    "MAX_UTF_LENGTH",
    "iter_code_points", "to_utf16_units", "encode_code_point",
    "utf_length", "encode_text_body", "encode_text",
]

log = logging.getLogger(__name__)

MAX_UTF_LENGTH = 0xFFFF
MAX_CODE_POINT = 0x10FFFF

Text = Union[str, Iterable[int]]


def iter_code_points(text: Text) -> Iterator[int]:
    """Yield the code points of `text` (a str or an iterable of ints), validated."""
    items = (ord(ch) for ch in text) if isinstance(text, str) else text
    for cp in items:
        if isinstance(cp, bool) or not isinstance(cp, int):
            raise EncodingDefectError(f"code point must be an int, got {cp!r}")
        if not (0 <= cp <= MAX_CODE_POINT):
            raise EncodingDefectError(f"code point out of range: {cp:#x}")
        yield cp


def to_utf16_units(cp: int) -> tuple[int, ...]:
    """Unités UTF-16 de `cp` : une seule en BMP, sinon (haute, basse)."""
    (cp,) = iter_code_points((cp,))
    if cp <= 0xFFFF:
        return (cp,)
    v = cp - 0x10000
    return (0xD800 | (v >> 10), 0xDC00 | (v & 0x3FF))


def _encode_unit(u: int) -> bytes:
    if 0x0001 <= u <= 0x007F:
        return bytes((u,))
    if u <= 0x07FF:
        # U+0000 tombe ici aussi : 110_00000 10_000000 = C0 80
        return bytes((0xC0 | (u >> 6), 0x80 | (u & 0x3F)))
    return bytes((
        0xE0 | (u >> 12),
        0x80 | ((u >> 6) & 0x3F),
        0x80 | (u & 0x3F),
    ))


def encode_code_point(cp: int) -> bytes:
    """Encode un seul code point (1, 2, 3 ou 6 octets), sans préfixe."""
    return b"".join(_encode_unit(u) for u in to_utf16_units(cp))


def _unit_length(u: int) -> int:
    if 0x0001 <= u <= 0x007F:
        return 1
    return 2 if u <= 0x07FF else 3


def utf_length(text: Text) -> int:
    """Nombre d'octets encodés (hors préfixe)."""
    return sum(_unit_length(u) for cp in iter_code_points(text) for u in to_utf16_units(cp))


def encode_text_body(text: Text) -> bytes:
    """Corps modified UTF-8 de `text`, sans préfixe de longueur."""
    buf = io.BytesIO()
    for cp in iter_code_points(text):
        for u in to_utf16_units(cp):
            buf.write(_encode_unit(u))
    return buf.getvalue()


def encode_text(text: Text) -> bytes:
    """
    Encode `text` comme `DataOutput.writeUTF` : u16 big-endian (longueur en
    octets) suivi du corps modified UTF-8.

    Lève LengthOverflowError si le corps dépasse 65535 octets, et
    EncodingDefectError pour un code point hors [0, 0x10FFFF].
    """
    body = encode_text_body(text)
    if len(body) > MAX_UTF_LENGTH:
        raise LengthOverflowError(len(body), MAX_UTF_LENGTH)
    log.debug("writeUTF: %d bytes", len(body))
    return struct.pack(">H", len(body)) + body
