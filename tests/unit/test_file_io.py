import os
from pathlib import Path

import pytest

from scheduler_studio.core.utils import FileIO


def test_get_path_prefers_explicit_directory(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(FileIO.DOCUMENTS_DIR_ENV, "/somewhere/else")

    assert FileIO.getPath("a.plist", str(tmp_path)) == os.path.join(str(tmp_path), "a.plist")


def test_get_path_falls_back_to_cwd_documents(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(FileIO.DOCUMENTS_DIR_ENV, raising=False)
    monkeypatch.chdir(tmp_path)

    assert FileIO.getPath("a.plist") == os.path.join(str(tmp_path), "Documents", "a.plist")


def test_write_atomic_creates_directory_and_replaces(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "a.plist"

    FileIO.writeAtomic(b"first", str(target))
    FileIO.writeAtomic(b"second", str(target))

    assert FileIO.readBytes(str(target)) == b"second"
    assert not (tmp_path / "nested" / "a.plist.tmp").exists()


def test_write_atomic_failure_keeps_previous_contents(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "a.plist"
    target.write_bytes(b"original")

    def failing_replace(src, dst):
        raise OSError("no space left")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(OSError):
        FileIO.writeAtomic(b"new", str(target))

    assert target.read_bytes() == b"original"
    assert not (tmp_path / "a.plist.tmp").exists()
