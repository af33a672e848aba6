from pathlib import Path

import pytest

from equations.cli import main


def test_prints_variables(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "equations.txt"
    path.write_text("b = 3 + 4\na = b / 2\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "(a=3.5,b=7)\n"


def test_reports_malformed_lines(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "equations.txt"
    path.write_text("1 = 2\na = 1\n")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Something went wrong, file structure is malformed.")
    assert lines[1] == "(a=1)"


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().out.startswith("Could not read file")


def test_empty_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert main([str(path), "--verbose"]) == 1
    assert capsys.readouterr().out == "Did not find any equations to evaluate!\n"
