"""CLI tests for the blockgen entry point."""

import io
import json
import subprocess
import sys
from pathlib import Path

import pytest

from blockgen.cli import USAGE, main

ROOT_DIR = Path(__file__).parent.parent

PROGRAM = """\
<xml>
  <block type="variables_set">
    <field name="VAR">x</field>
    <value name="VALUE"><block type="math_number"><field name="NUM">5</field></block></value>
    <next>
      <block type="controls_if">
        <value name="IF0"><block type="logic_boolean"><field name="BOOL">TRUE</field></block></value>
        <statement name="DO0">
          <block type="text_print">
            <value name="TEXT"><block type="variables_get"><field name="VAR">x</field></block></value>
          </block>
        </statement>
      </block>
    </next>
  </block>
</xml>
"""

EXPECTED = "x = 5\nif True:\n    print(x)\n"


@pytest.fixture
def program_file(tmp_path: Path) -> Path:
    path = tmp_path / "program.xml"
    path.write_text(PROGRAM)
    return path


def _stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_generates_from_file(program_file: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(program_file)]) == 0
    out = capsys.readouterr()
    assert out.out == EXPECTED
    assert out.err == ""


def test_generates_from_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    _stdin(monkeypatch, PROGRAM.encode("utf-8"))
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_output_file(program_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    target = tmp_path / "out.py"
    assert main([str(program_file), "-o", str(target)]) == 0
    assert target.read_text() == EXPECTED
    assert capsys.readouterr().out == ""


def test_indent_option(program_file: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["--indent", "2", str(program_file)]) == 0
    assert "if True:\n  print(x)\n" in capsys.readouterr().out


def test_stop_at_parse_prints_json(program_file: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["--stop-at", "parse", str(program_file)]) == 0
    tree = json.loads(capsys.readouterr().out)
    assert tree[0]["type"] == "variables_set"
    assert tree[0]["next"]["type"] == "controls_if"


def test_help(capsys: pytest.CaptureFixture[str]):
    assert main(["--help"]) == 0
    assert capsys.readouterr().out == USAGE


@pytest.mark.parametrize(
    "args,message",
    [
        (["--bogus"], "error: unknown flag '--bogus'\n"),
        (["--stop-at"], "error: --stop-at requires an argument\n"),
        (["--stop-at", "lowering"], "error: unknown phase 'lowering'\n"),
        (["--indent", "0"], "error: invalid indent '0'\n"),
        (["--indent", "-4"], "error: invalid indent '-4'\n"),
        (["a.xml", "b.xml"], "error: unexpected argument 'b.xml'\n"),
    ],
)
def test_usage_errors(args: list[str], message: str, capsys: pytest.CaptureFixture[str]):
    assert main(args) == 2
    assert capsys.readouterr().err == message


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    missing = tmp_path / "nope.xml"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().err == "error: cannot open '" + str(missing) + "'\n"


def test_unwritable_output(program_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(program_file), "-o", str(tmp_path)]) == 1
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err == "error: cannot write '" + str(tmp_path) + "'\n"


def test_blank_input_is_usage_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    blank = tmp_path / "blank.xml"
    blank.write_text("  \n\t\n")
    assert main([str(blank)]) == 2
    assert capsys.readouterr().err == "error: no input provided\n"


def test_empty_input(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    _stdin(monkeypatch, b"")
    assert main([]) == 2
    assert capsys.readouterr().err == "error: no input provided\n"


def test_invalid_utf8(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    _stdin(monkeypatch, b"\xff\xfe<xml/>")
    assert main([]) == 1
    assert capsys.readouterr().err == "error: invalid utf-8 in input\n"


def test_malformed_xml(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    _stdin(monkeypatch, b"<xml><block type='text'></xml>")
    assert main([]) == 1
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err.startswith("error: 1:")
    assert "malformed XML" in out.err


def test_generation_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    _stdin(monkeypatch, b'<xml><block type="no_such_block" id="k"/></xml>')
    assert main([]) == 1
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err == "error: unsupported block type (block 'no_such_block', id 'k')\n"


def test_module_entry_point(program_file: Path):
    result = subprocess.run(
        [sys.executable, "-m", "blockgen.cli", str(program_file)],
        capture_output=True,
        text=True,
        cwd=ROOT_DIR,
    )
    assert result.returncode == 0
    assert result.stdout == EXPECTED
    assert result.stderr == ""
