"""Tests for file validation, reads and atomic writes."""

import os
import stat
from pathlib import Path
from unittest.mock import patch
import pytest
from ssmresolve.exceptions import InputError, OutputError
from ssmresolve.lib.fileio import file_validate, text_read, text_write


def test_validate_ok(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("abc")
    assert file_validate(str(path), max_size=3) is None


@pytest.mark.parametrize("name", ["", "missing.txt"])
def test_validate_missing(tmp_path: Path, name: str) -> None:
    path = str(tmp_path / name) if name else ""
    with pytest.raises(InputError):
        file_validate(path, max_size=100)


def test_validate_directory(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="Not a regular file"):
        file_validate(str(tmp_path), max_size=100)


def test_validate_size(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("abcd")
    with pytest.raises(InputError, match="too large"):
        file_validate(str(path), max_size=3)


def test_read_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "doc.bin"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(InputError, match="not valid UTF-8"):
        text_read(str(path))


def test_write_replaces_file(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("old")
    text_write("new", str(path))
    assert path.read_text() == "new"
    assert os.listdir(tmp_path) == ["out.txt"]


def test_write_failure_keeps_original(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("old")
    with patch("ssmresolve.lib.fileio.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OutputError, match="disk full"):
            text_write("new", str(path))
    assert path.read_text() == "old"
    assert os.listdir(tmp_path) == ["out.txt"]


def test_write_keeps_existing_mode(tmp_path: Path) -> None:
    path = tmp_path / "deploy.sh"
    path.write_text("old")
    path.chmod(0o755)
    text_write("new", str(path))
    assert stat.S_IMODE(path.stat().st_mode) == 0o755


def test_write_new_file_follows_umask(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    umask = os.umask(0o022)
    try:
        text_write("new", str(path))
    finally:
        os.umask(umask)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_line_endings_preserved(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"x=1\r\ny=2\n")
    content = text_read(str(path))
    assert content == "x=1\r\ny=2\n"
    text_write(content, str(path))
    assert path.read_bytes() == b"x=1\r\ny=2\n"
