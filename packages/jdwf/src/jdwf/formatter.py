# packages/jdwf/src/jdwf/formatter.py
from __future__ import annotations
from typing import Iterable, Union

from jdcodec.config import FixtureConfig
from jdcodec.errors import EncodingDefectError
from jdcodec.mutf8 import iter_code_points

__all__ = ["bytes_literal", "rust_string_literal", "render_case"]


def bytes_literal(data: bytes) -> str:
    """`[0xc0, 0x0, ...]` : un littéral hexa par octet, style `%#x`."""
    return "[" + ", ".join("%#x" % b for b in data) + "]"


def rust_string_literal(text: Union[str, Iterable[int]]) -> str:
    """Littéral Rust `"\\u{0041}..."`, un échappement par code point."""
    cps = list(iter_code_points(text))
    for cp in cps:
        # Rust refuse \u{D800}..\u{DFFF} : pas de surrogate isolé dans un str
        if 0xD800 <= cp <= 0xDFFF:
            raise EncodingDefectError(f"lone surrogate has no Rust literal: {cp:#x}")
    return '"' + "".join("\\u{%04X}" % cp for cp in cps) + '"'


def render_case(name: str, expected: str, data: bytes, cfg: FixtureConfig | None = None) -> str:
    """
    Bloc de test complet pour l'opération `name` du lecteur.

    Le dernier assert vérifie que le lecteur a consommé exactement
    `len(data)` octets.
    """
    cfg = cfg or FixtureConfig()
    pad = " " * cfg.indent
    const, reader = cfg.const_name, cfg.reader_name
    lines = [
        "#[test]",
        f"fn {name}() {{",
        f"{pad}pub const {const}: [u8; {len(data)}] = {bytes_literal(data)};",
        f"{pad}let mut {reader} = Cursor::new(&{const});",
        f"{pad}assert_eq!({expected}, {reader}.{name}().unwrap());",
        f"{pad}assert_eq!({const}.len(), {reader}.position() as usize);",
        "}",
    ]
    return "\n".join(lines) + "\n"
