"""Tests for the reusable read buffer."""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from mdorphan.reader import ReadBuffer
from mdorphan.types import FileIdentity


def test_reads_content_and_identity(tmp_path: Path) -> None:
    path = tmp_path / "a.md"
    path.write_bytes(b"# Title\n")
    identity, view = ReadBuffer().read(str(path))
    assert bytes(view) == b"# Title\n"
    assert identity == FileIdentity.from_stat(os.stat(path))


def test_grows_for_large_files_and_never_truncates(tmp_path: Path) -> None:
    small = tmp_path / "small.md"
    small.write_bytes(b"abc")
    large = tmp_path / "large.md"
    payload = b"x" * 1000
    large.write_bytes(payload)

    buffer = ReadBuffer(capacity=16)
    assert bytes(buffer.read(str(small))[1]) == b"abc"
    assert bytes(buffer.read(str(large))[1]) == payload
    assert buffer.capacity >= 1000
    assert bytes(buffer.read(str(small))[1]) == b"abc"


def test_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.md"
    path.write_bytes(b"")
    _, view = ReadBuffer().read(str(path))
    assert len(view) == 0


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        ReadBuffer().read(str(tmp_path / "missing.md"))
