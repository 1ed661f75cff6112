# packages/jdwf/src/jdwf/__init__.py
from __future__ import annotations

from .api import atomic_write, atomic_write_text
from .cases import DEFAULT_CASES, FLOAT_CASES, TestCase, WritePrimitive, WriteText
from .driver import generate, render_all
from .formatter import bytes_literal, render_case, rust_string_literal

__all__ = [
    "atomic_write", "atomic_write_text",
    "DEFAULT_CASES", "FLOAT_CASES", "TestCase", "WritePrimitive", "WriteText",
    "generate", "render_all",
    "bytes_literal", "render_case", "rust_string_literal",
    # on n'importe PAS le sous-module cli ici
]

__version__ = "0.1.0"
