# packages/jdcodec/src/jdcodec/output.py
from __future__ import annotations
import io

from .mutf8 import Text, encode_text
from .primitives import ENCODERS

__all__ = ["DataOutput"]


class DataOutput:
    """Puits d'octets append-only, calqué sur java.io.DataOutputStream.

    Chaque `write_*` ajoute l'encodage big-endian de la valeur ; les erreurs
    d'encodage remontent telles quelles et rien n'est ajouté dans ce cas.
    """

    def __init__(self) -> None:
        self._buf = io.BytesIO()

    def _write(self, kind: str, value) -> None:
        self._buf.write(ENCODERS[kind](value))

    def write_byte(self, value: int) -> None:
        self._write("byte", value)

    def write_short(self, value: int) -> None:
        # sert aussi pour les u16 : seuls les 16 bits bas comptent
        self._write("short", value)

    def write_int(self, value: int) -> None:
        self._write("int", value)

    def write_long(self, value: int) -> None:
        self._write("long", value)

    def write_float(self, value: float) -> None:
        self._write("float", value)

    def write_double(self, value: float) -> None:
        self._write("double", value)

    def write_utf(self, text: Text) -> None:
        self._buf.write(encode_text(text))

    def size(self) -> int:
        return self._buf.tell()

    def to_bytes(self) -> bytes:
        return self._buf.getvalue()
