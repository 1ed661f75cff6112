# tests/test_driver_and_cli.py
import io

import pytest

from jdcodec.config import FixtureConfig
from jdcodec.errors import EncodingDefectError, LengthOverflowError
from jdwf.cases import DEFAULT_CASES, FLOAT_CASES, TestCase, WritePrimitive, WriteText
from jdwf.driver import generate, render_all


EXPECTED_UTF_BLOCK = (
    "#[test]\n"
    "fn read_utf() {\n"
    "    pub const DATA: [u8; 10] = [0x0, 0x8, 0x41, 0xce, 0xbc, 0xc0, 0x80, 0xe1, 0x88, 0x9f];\n"
    "    let mut reader = Cursor::new(&DATA);\n"
    '    assert_eq!("\\u{0041}\\u{03BC}\\u{0000}\\u{121F}", reader.read_utf().unwrap());\n'
    "    assert_eq!(DATA.len(), reader.position() as usize);\n"
    "}\n"
)


def test_generate_default_cases():
    buf = io.StringIO()
    n = generate(DEFAULT_CASES, buf)
    out = buf.getvalue()
    assert n == 6
    assert out.count("#[test]") == 6
    assert out.endswith(EXPECTED_UTF_BLOCK)
    # ordre d'enregistrement, blocs séparés par une ligne vide
    names = [line.split()[1].split("(")[0] for line in out.splitlines() if line.startswith("fn ")]
    assert names == [c.name for c in DEFAULT_CASES]
    assert "}\n\n#[test]" in out
    assert "pub const DATA: [u8; 8] = [0xc0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0];" in out


def test_generate_writes_nothing_on_failure():
    cases = DEFAULT_CASES + (TestCase("read_utf_big", '""', WriteText((0x41,) * 70000)),)
    buf = io.StringIO()
    with pytest.raises(LengthOverflowError):
        generate(cases, buf)
    assert buf.getvalue() == ""


def test_self_check_rejects_foreign_ops():
    class Opaque:
        def encode(self, sink):
            sink.write_byte(1)

    with pytest.raises(EncodingDefectError):
        render_all([TestCase("read_byte", "1", Opaque())])
    # sans auto-contrôle, l'op est simplement encodée
    blocks = render_all([TestCase("read_byte", "1", Opaque())], FixtureConfig(self_check=False))
    assert "[0x1]" in blocks[0]


def test_float_cases_render():
    blocks = render_all(FLOAT_CASES)
    assert "pub const DATA: [u8; 4] = [0xbf, 0xc0, 0x0, 0x0];" in blocks[0]
    assert "reader.read_double()" in blocks[1]


def test_cli_stdout(capsys):
    from jdwf.cli.create_test_data import main
    rc = main([])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.count("#[test]") == 6
    assert "read_float" not in out


def test_cli_out_file_with_floats(tmp_path):
    from jdwf.cli.create_test_data import main
    target = tmp_path / "fixtures" / "java_read_tests.rs"
    rc = main(["--out", str(target), "--with-floats", "--log-file", str(tmp_path / "run.log")])
    assert rc == 0
    text = target.read_text(encoding="utf-8")
    assert text.count("#[test]") == 8
    assert not target.with_suffix(".rs.tmp").exists()


def test_cli_bad_env_fails(monkeypatch, capsys):
    from jdwf.cli.create_test_data import main
    monkeypatch.setenv("JDFIX_INDENT", "99")
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_umbrella_namespace():
    import jdfix as jf
    assert jf.encode_signed_byte(-64) == b"\xc0"
    assert jf.codec.encode_text("") == b"\x00\x00"
    assert jf.DEFAULT_CASES is jf.wf.DEFAULT_CASES
    b = jf.DataOutput(); b.write_utf("\U0001F600")
    assert b.to_bytes() == b"\x00\x06" + bytes.fromhex("eda0bdedb880")


def test_cli_out_unwritable_leaves_no_partial_file(tmp_path):
    from jdwf.cli.create_test_data import main
    target = tmp_path / "fixtures.rs"
    target.mkdir()  # une cible répertoire : os.replace échoue
    rc = main(["--out", str(target)])
    assert rc == 1
    assert target.is_dir()
    assert list(tmp_path.glob("*.tmp")) == []


def test_atomic_write_cleans_tmp_on_failure(tmp_path):
    from jdwf.api import atomic_write
    target = tmp_path / "out.bin"
    target.mkdir()
    with pytest.raises(OSError):
        atomic_write(target, b"\x00")
    assert not (tmp_path / "out.bin.tmp").exists()
