"""Tests for the command-line entrypoint."""

import subprocess
import sys

import pytest

from newline_converter import __version__
from newline_converter.cli import main


def test_converts_to_derived_path(tmp_path, capsys):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"hello\\nworld\n")

    exit_code = main([str(source), "--encoding", "utf-8"])

    assert exit_code == 0
    assert (tmp_path / "notes - copy.txt").read_bytes() == b"hello\nworld\n"
    assert capsys.readouterr().out == ""


def test_out_file_option(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"a\\nb")
    target = tmp_path / "result.txt"

    assert main([str(source), "-o", str(target), "-e", "utf-8", "--no-sync"]) == 0
    assert target.read_bytes() == b"a\nb\n"


def test_missing_input_exits_with_one(tmp_path, capsys):
    source = tmp_path / "missing.txt"

    exit_code = main([str(source)])

    assert exit_code == 1
    output = capsys.readouterr().out.strip().splitlines()
    assert len(output) == 1
    assert output[0].startswith(f"Error when reading '{source}':")
    assert not (tmp_path / "missing - copy.txt").exists()


def test_create_error_is_reported(tmp_path, capsys):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"x")
    target = tmp_path / "absent" / "out.txt"

    assert main([str(source), "--out-file", str(target)]) == 1
    assert "Error when creating file" in capsys.readouterr().out


def test_unknown_encoding_exits_with_one(tmp_path, capsys):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"x")

    assert main([str(source), "-e", "no-such-codec"]) == 1

    output = capsys.readouterr().out.strip().splitlines()
    assert len(output) == 1
    assert output[0].startswith(f"Error when reading '{source}':")
    assert "no-such-codec" in output[0]


def test_unknown_encoding_from_environment(tmp_path, capsys, monkeypatch):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"x")
    monkeypatch.setenv("NEWLINE_CONVERTER_ENCODING", "bogus")

    assert main([str(source)]) == 1
    assert "Error when reading" in capsys.readouterr().out


def test_missing_argument_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_module_invocation(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"one\\ntwo")

    result = subprocess.run(
        [sys.executable, "-m", "newline_converter", str(source), "-e", "utf-8"],
        capture_output=True,
        text=True
    )

    assert result.returncode == 0
    assert (tmp_path / "notes - copy.txt").read_bytes() == b"one\ntwo\n"


def test_module_invocation_failure(tmp_path):
    result = subprocess.run(
        [sys.executable, "-m", "newline_converter", str(tmp_path / "nope.txt")],
        capture_output=True,
        text=True
    )

    assert result.returncode == 1
    assert "Error when reading" in result.stdout
