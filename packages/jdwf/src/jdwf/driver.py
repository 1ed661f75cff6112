# packages/jdwf/src/jdwf/driver.py
from __future__ import annotations
import logging
from typing import Iterable, List, TextIO

from jdcodec.config import FixtureConfig
from jdcodec.errors import EncodingDefectError
from jdcodec.verify import check_primitive, check_text

from .cases import TestCase, WritePrimitive, WriteText, validate_cases
from .formatter import render_case

__all__ = ["render_all", "generate"]

log = logging.getLogger(__name__)


def _self_check(case: TestCase, data: bytes) -> None:
    op = case.op
    if isinstance(op, WritePrimitive):
        check_primitive(op.kind, op.value, data)
    elif isinstance(op, WriteText):
        check_text(op.code_points, data)
    else:
        raise EncodingDefectError(f"{case.name}: no self-check for {type(op).__name__}")


def render_all(cases: Iterable[TestCase], cfg: FixtureConfig | None = None) -> List[str]:
    """
    Encode et met en forme tous les cas, dans l'ordre d'enregistrement.

    Toute erreur remonte avant le moindre rendu partiel.
    """
    cfg = cfg or FixtureConfig()
    blocks: List[str] = []
    for case in validate_cases(cases):
        data = case.encode()
        if cfg.self_check:
            _self_check(case, data)
        log.debug("%s: %d bytes", case.name, len(data))
        blocks.append(render_case(case.name, case.expected, data, cfg))
    return blocks


def generate(cases: Iterable[TestCase], stream: TextIO, cfg: FixtureConfig | None = None) -> int:
    """Écrit un bloc par cas sur `stream`, séparés par une ligne vide. Retourne le nombre de cas."""
    blocks = render_all(cases, cfg)
    stream.write("\n".join(blocks))
    log.info("fixtures: %d cases written", len(blocks))
    return len(blocks)
