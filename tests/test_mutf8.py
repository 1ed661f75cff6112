# tests/test_mutf8.py
import struct

import pytest

from jdcodec.errors import EncodingDefectError, FixtureError, LengthOverflowError
from jdcodec.mutf8 import (
    MAX_UTF_LENGTH, encode_code_point, encode_text, encode_text_body,
    to_utf16_units, utf_length,
)


def test_writeutf_sample_exact_bytes():
    b = encode_text([0x41, 0x03BC, 0x0000, 0x121F])
    assert b[:2] == b"\x00\x08"
    assert b[2:] == bytes([0x41, 0xCE, 0xBC, 0xC0, 0x80, 0xE1, 0x88, 0x9F])
    # str et code points donnent les mêmes octets
    assert encode_text("A\u03bc\x00\u121f") == b


def test_single_code_points():
    for cp in range(0x01, 0x80):
        assert encode_code_point(cp) == bytes([cp])
    assert encode_code_point(0x0000) == b"\xc0\x80"
    assert encode_code_point(0x03BC) == b"\xce\xbc"
    assert encode_code_point(0x0080) == b"\xc2\x80"
    assert encode_code_point(0x07FF) == b"\xdf\xbf"
    assert encode_code_point(0x0800) == b"\xe0\xa0\x80"
    assert encode_code_point(0x121F) == b"\xe1\x88\x9f"
    assert encode_code_point(0xFFFF) == b"\xef\xbf\xbf"


def test_supplementary_uses_surrogate_halves():
    # U+1F600 -> D83D DE00 -> deux groupes de 3 octets
    assert to_utf16_units(0x1F600) == (0xD83D, 0xDE00)
    assert encode_code_point(0x1F600) == bytes.fromhex("eda0bdedb880")
    assert encode_code_point(0x10000) == bytes.fromhex("eda080edb080")
    assert encode_code_point(0x10FFFF) == bytes.fromhex("edafbfedbfbf")
    b = encode_text("\U0001F600")
    assert b == b"\x00\x06" + bytes.fromhex("eda0bdedb880")
    # ce n'est pas de l'UTF-8 standard
    assert b[2:] != "\U0001F600".encode("utf-8")


def test_lone_surrogate_is_three_bytes():
    assert encode_code_point(0xD800) == b"\xed\xa0\x80"


def test_prefix_counts_bytes_not_chars():
    text = "\u00e9" * 10 + "\u121f" * 3
    b = encode_text(text)
    (n,) = struct.unpack(">H", b[:2])
    assert n == 10 * 2 + 3 * 3 == len(b) - 2 == utf_length(text)
    assert encode_text("") == b"\x00\x00"


def test_no_literal_zero_byte_in_body():
    assert 0 not in encode_text_body("\x00" * 5)


def test_idempotent():
    s = "A\u03bc\x00\u121f\U0001F600"
    assert encode_text(s) == encode_text(s)


def test_length_limit():
    assert len(encode_text("a" * MAX_UTF_LENGTH)) == MAX_UTF_LENGTH + 2
    with pytest.raises(LengthOverflowError) as ei:
        encode_text("a" * (MAX_UTF_LENGTH + 1))
    assert ei.value.length == MAX_UTF_LENGTH + 1
    assert isinstance(ei.value, FixtureError) and isinstance(ei.value, ValueError)
    # 21846 * 3 = 65538 > 65535
    with pytest.raises(LengthOverflowError):
        encode_text("\u121f" * 21846)


def test_invalid_code_points():
    with pytest.raises(EncodingDefectError):
        encode_text([0x110000])
    with pytest.raises(EncodingDefectError):
        encode_text([-1])
    with pytest.raises(EncodingDefectError):
        encode_code_point("A")


def test_utf16_units_rejects_out_of_range():
    assert to_utf16_units(0x41) == (0x41,)
    with pytest.raises(EncodingDefectError):
        to_utf16_units(0x110000)
    with pytest.raises(EncodingDefectError):
        to_utf16_units(-5)
