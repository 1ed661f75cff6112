# packages/jdwf/src/jdwf/cases.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Protocol, Union
import re

from jdcodec.errors import EncodingDefectError
from jdcodec.mutf8 import iter_code_points
from jdcodec.output import DataOutput

from .formatter import rust_string_literal

__all__ = [
    "Encoder", "WritePrimitive", "WriteText", "TestCase",
    "DEFAULT_CASES", "FLOAT_CASES", "validate_cases",
]

_IDENT = re.compile(r"^[a-z_][a-z0-9_]*$")

# kind -> méthode du puits DataOutput
_WRITERS = {
    "byte": DataOutput.write_byte,
    "short": DataOutput.write_short,
    "unsigned_short": DataOutput.write_short,
    "int": DataOutput.write_int,
    "long": DataOutput.write_long,
    "float": DataOutput.write_float,
    "double": DataOutput.write_double,
}


class Encoder(Protocol):
    def encode(self, sink: DataOutput) -> None: ...


@dataclass(frozen=True)
class WritePrimitive:
    kind: str
    value: Union[int, float]

    def __post_init__(self) -> None:
        if self.kind not in _WRITERS:
            raise EncodingDefectError(f"unknown primitive kind: {self.kind!r}")

    def encode(self, sink: DataOutput) -> None:
        _WRITERS[self.kind](sink, self.value)


@dataclass(frozen=True)
class WriteText:
    code_points: tuple[int, ...]

    @staticmethod
    def of(text: Union[str, Iterable[int]]) -> "WriteText":
        return WriteText(tuple(iter_code_points(text)))

    def encode(self, sink: DataOutput) -> None:
        sink.write_utf(self.code_points)


@dataclass(frozen=True)
class TestCase:
    """Un cas : nom de l'opération du lecteur, littéral attendu, encodage."""

    __test__ = False  # pas une classe de test pytest

    name: str
    expected: str
    op: Encoder

    def encode(self) -> bytes:
        # un puits neuf à chaque appel : aucun état ne survit entre deux encodages
        sink = DataOutput()
        self.op.encode(sink)
        return sink.to_bytes()


def validate_cases(cases: Iterable[TestCase]) -> tuple[TestCase, ...]:
    """Contrôle la table statique : identifiants valides, noms uniques."""
    out = tuple(cases)
    seen: set[str] = set()
    for c in out:
        if not _IDENT.match(c.name):
            raise EncodingDefectError(f"case name is not an identifier: {c.name!r}")
        if c.name in seen:
            raise EncodingDefectError(f"duplicate case name: {c.name}")
        seen.add(c.name)
    return out


# U+0041 A (1 octet), U+03BC μ (2), U+0000 NUL (2), U+121F ሟ (3)
_UTF_SAMPLE = (0x0041, 0x03BC, 0x0000, 0x121F)

DEFAULT_CASES: tuple[TestCase, ...] = validate_cases((
    TestCase("read_byte", "-64", WritePrimitive("byte", -64)),
    TestCase("read_short", "-16384", WritePrimitive("short", -16384)),
    TestCase("read_unsigned_short", "32767", WritePrimitive("unsigned_short", 32767)),
    TestCase("read_int", "-1073741824", WritePrimitive("int", -1073741824)),
    TestCase("read_long", "-4611686018427387904", WritePrimitive("long", -4611686018427387904)),
    TestCase("read_utf", rust_string_literal(_UTF_SAMPLE), WriteText(_UTF_SAMPLE)),
))

FLOAT_CASES: tuple[TestCase, ...] = validate_cases((
    TestCase("read_float", "-1.5", WritePrimitive("float", -1.5)),
    TestCase("read_double", "-1.5", WritePrimitive("double", -1.5)),
))
