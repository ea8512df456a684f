import io
import re

from synk.cli import main
from synk.highlighter import BLUE, RESET, highlight, render
from synk.languages.registry import available_languages

ANSI = re.compile(r"\x1b\[\d+m")


def test_highlights_file(tmp_path, capsys):
    path = tmp_path / "code.rs"
    code = "fn main() {\n    let x = 42;\n}\n"
    path.write_text(code, encoding="utf-8")
    assert main(["-l", "rust", str(path)]) == 0
    out = capsys.readouterr().out
    assert out == render(highlight(code, "rust"))
    assert f"{BLUE}fn{RESET}" in out


def test_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("def f(x):\n    return x\n"))
    assert main(["--language", "python"]) == 0
    out = capsys.readouterr().out
    assert ANSI.sub("", out) == "def f(x):\n    return x\n"
    assert f"{BLUE}def{RESET}" in out


def test_dash_means_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("let a = 1;\n"))
    assert main(["-"]) == 0
    assert ANSI.sub("", capsys.readouterr().out) == "let a = 1;\n"


def test_missing_file_reports_error(tmp_path, capsys):
    status = main([str(tmp_path / "absent.rs")])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ""
    assert captured.err.startswith("synk:")


def test_list_prints_languages(capsys):
    assert main(["--list"]) == 0
    assert capsys.readouterr().out.splitlines() == available_languages()