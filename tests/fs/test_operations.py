"""Unit tests for mediastamp.fs.operations.

Covers:
- Basic rename on the same filesystem
- Already-canonical names are left alone
- Windows long path support
- Overwrite protection (FileExistsError)
- Dry-run and recording adapters never touch the disk
"""

import errno
import sys
from pathlib import Path
from typing import Any

import pytest

from mediastamp.fs.operations import (
    WIN_MAX_PATH,
    DryRunFileSystem,
    RealFileSystem,
    RecordingFileSystem,
    filesystem_for,
    get_win_long_path_prefix,
)


def test_rename_basic(tmp_path: Path) -> None:
    """Test that RealFileSystem renames a file on the same filesystem."""
    src = tmp_path / "source.txt"
    dst = tmp_path / "dest.txt"
    src.write_text("hello world")

    RealFileSystem().rename(src, dst)

    assert not src.exists()
    assert dst.read_text() == "hello world"


def test_rename_onto_itself_is_a_no_op(tmp_path: Path) -> None:
    """Test that a file already carrying its target name is left in place."""
    path = tmp_path / "2021-10-10_12.34.56.JPG"
    path.write_text("photo")

    RealFileSystem(overwrite=False).rename(path, path)
    RealFileSystem().rename(path, path)

    assert path.read_text() == "photo"
    assert [p.name for p in tmp_path.iterdir()] == [path.name]


def test_cross_device_errors_propagate(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    src = tmp_path / "source.txt"
    src.write_text("stay")

    def raise_exdev(self: Path, target: Any) -> None:
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    monkeypatch.setattr(Path, "rename", raise_exdev)

    with pytest.raises(OSError) as excinfo:
        RealFileSystem().rename(src, tmp_path / "dest.txt")

    assert excinfo.value.errno == errno.EXDEV
    assert src.read_text() == "stay"


def test_other_os_errors_propagate(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        RealFileSystem().rename(tmp_path / "missing.JPG", tmp_path / "x.JPG")


def test_long_paths_windows(mocker: Any, tmp_path: Path) -> None:
    """Test that the Windows long path prefix is added for long paths."""
    if sys.platform != "win32":
        pytest.skip("Windows-only test")

    src = tmp_path / ("a" * (WIN_MAX_PATH + 1))
    dst = tmp_path / ("b" * (WIN_MAX_PATH + 1))
    called = {}

    def fake_rename(self: Path, target: str) -> None:
        called["src"] = str(self)
        called["dst"] = str(target)

    mocker.patch.object(Path, "rename", fake_rename)
    RealFileSystem().rename(src, dst)

    prefix = get_win_long_path_prefix()
    assert called["src"].startswith(prefix)
    assert called["dst"].startswith(prefix)


def test_no_overwrite_refuses_existing_destination(tmp_path: Path) -> None:
    src = tmp_path / "a.JPG"
    dst = tmp_path / "b.JPG"
    src.write_text("new")
    dst.write_text("old")

    with pytest.raises(FileExistsError):
        RealFileSystem(overwrite=False).rename(src, dst)

    assert src.read_text() == "new"
    assert dst.read_text() == "old"


def test_overwrite_by_default(tmp_path: Path) -> None:
    if sys.platform == "win32":
        pytest.skip("Path.rename does not replace on Windows")
    src = tmp_path / "a.JPG"
    dst = tmp_path / "b.JPG"
    src.write_text("new")
    dst.write_text("old")

    RealFileSystem().rename(src, dst)

    assert dst.read_text() == "new"


def test_dry_run_is_a_no_op(tmp_path: Path, mocker: Any) -> None:
    src = tmp_path / "a.JPG"
    src.write_text("x")
    rename = mocker.patch.object(Path, "rename")

    DryRunFileSystem().rename(src, tmp_path / "b.JPG")

    assert src.exists()
    assert not (tmp_path / "b.JPG").exists()
    rename.assert_not_called()


def test_recording_filesystem_records_and_fails(tmp_path: Path) -> None:
    fs = RecordingFileSystem(fail_on=[tmp_path / "bad"])
    fs.rename(tmp_path / "good", tmp_path / "new")

    with pytest.raises(PermissionError):
        fs.rename(tmp_path / "bad", tmp_path / "new2")

    assert fs.renamed == [(tmp_path / "good", tmp_path / "new")]


def test_filesystem_for_picks_adapter() -> None:
    assert isinstance(filesystem_for(False), DryRunFileSystem)
    real = filesystem_for(True, overwrite=False)
    assert isinstance(real, RealFileSystem)
    assert real.overwrite is False
