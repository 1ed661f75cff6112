# packages/jdcodec/src/jdcodec/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
import re

__all__ = ["FixtureConfig"]

_IDENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True, slots=True)
class FixtureConfig:
    """
    Configuration du rendu des fixtures.

    Champs
    ------
    indent : int, default=4
        Indentation (espaces) du corps de chaque fonction de test.
    const_name : str, default="DATA"
        Nom de la constante qui porte le tableau d'octets.
    reader_name : str, default="reader"
        Nom de la variable curseur passée au lecteur.
    self_check : bool, default=True
        Relit chaque fixture (`jdcodec.verify`) avant toute écriture.

    ENV
    ---
    JDFIX_INDENT, JDFIX_SELF_CHECK (lus par `from_env`).

    Les validations lèvent une `ValueError`, aucune correction n'est appliquée.
    """

    indent: int = 4
    const_name: str = "DATA"
    reader_name: str = "reader"
    self_check: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"FixtureConfig.indent must be an int, got {self.indent!r}")
        if not (0 <= self.indent <= 16):
            raise ValueError("FixtureConfig.indent must be in [0..16]")
        for field_name in ("const_name", "reader_name"):
            v = getattr(self, field_name)
            if not isinstance(v, str) or not _IDENT.match(v):
                raise ValueError(f"FixtureConfig.{field_name} must be an identifier, got {v!r}")

    @staticmethod
    def from_env() -> "FixtureConfig":
        kw: dict = {}
        indent = os.getenv("JDFIX_INDENT")
        if indent:
            kw["indent"] = int(indent)
        check = os.getenv("JDFIX_SELF_CHECK")
        if check:
            kw["self_check"] = _parse_bool("JDFIX_SELF_CHECK", check)
        return FixtureConfig(**kw)


def _parse_bool(name: str, v: str) -> bool:
    s = v.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name}: expected a boolean, got {v!r}")
