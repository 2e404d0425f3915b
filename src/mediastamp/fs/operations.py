"""Filesystem adapters for renaming files.

The renamer only ever calls ``FileSystem.rename``. Swapping the adapter is how
a dry run is made: the same classification and rename protocol runs, but
nothing on disk changes.

- RealFileSystem: renames on disk, with Windows long path support. Every
  rename stays inside one directory, so it never crosses a device.
- DryRunFileSystem: logs the intended rename and does nothing.
- RecordingFileSystem: records renames in memory and can be told to fail on
  chosen sources (tests).
"""

import errno
import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

WIN_MAX_PATH = 259  # Windows MAX_PATH limit for NTFS long paths


def get_win_long_path_prefix() -> str:
    """Return the Windows NTFS long path prefix (avoids static backslash pattern).

    This avoids static string patterns for Windows compatibility checks.
    """
    bslash = chr(92)
    return bslash + bslash + "?" + bslash


def _win_long_path(path: Path) -> str:
    s = str(path)
    prefix = get_win_long_path_prefix()
    if sys.platform == "win32" and len(s) > WIN_MAX_PATH and not s.startswith(prefix):
        return prefix + s
    return s


def _same_file(src: Path, dst: Path) -> bool:
    return src.exists() and src.samefile(dst)


class FileSystem(ABC):
    """The one filesystem capability the renamer needs."""

    @abstractmethod
    def rename(self, src: Path, dst: Path) -> None:
        """Rename *src* to *dst*.

        Raises:
            OSError: If the rename fails for any reason.
        """


class RealFileSystem(FileSystem):
    """Rename files on disk.

    Args:
        overwrite: When False, refuse to rename onto an existing file. The
            default keeps plain ``rename`` semantics, where an existing
            destination is replaced on POSIX systems.
    """

    def __init__(self, *, overwrite: bool = True) -> None:
        self.overwrite = overwrite

    def rename(self, src: Path, dst: Path) -> None:
        """Rename *src* to *dst*.

        A file that already has its destination name is left alone.

        Raises:
            FileExistsError: If another file exists at *dst* and overwrite is
                False.
            FileNotFoundError: If *src* is missing.
            OSError: For any other filesystem error.

        Example:
            >>> from pathlib import Path
            >>> from mediastamp.fs.operations import RealFileSystem
            >>> src = Path('a.txt')
            >>> src.write_text('hello')
            >>> RealFileSystem().rename(src, Path('b.txt'))
            >>> Path('b.txt').read_text()
            'hello'
        """
        if src == dst:
            return
        # Case-insensitive filesystems report a case-only rename as existing.
        if not self.overwrite and dst.exists() and not _same_file(src, dst):
            raise FileExistsError(
                errno.EEXIST, "Destination exists and overwrite is off", str(dst)
            )
        Path(_win_long_path(src)).rename(_win_long_path(dst))


class DryRunFileSystem(FileSystem):
    """Accept every rename without touching the disk."""

    def rename(self, src: Path, dst: Path) -> None:
        logger.debug("[dry run] Would move %s -> %s", src, dst)


class RecordingFileSystem(FileSystem):
    """Record renames in memory.

    Args:
        fail_on: Sources whose rename raises ``OSError`` instead of being
            recorded. Used to exercise rollback.
    """

    def __init__(self, fail_on: Optional[Iterable[Path]] = None) -> None:
        self.renamed: List[Tuple[Path, Path]] = []
        self.fail_on: Set[Path] = set(fail_on or ())

    def rename(self, src: Path, dst: Path) -> None:
        if src in self.fail_on:
            raise PermissionError(errno.EACCES, "Permission denied", str(src))
        self.renamed.append((src, dst))


def filesystem_for(execute: bool, *, overwrite: bool = True) -> FileSystem:
    """Pick the adapter for a run: real when executing, no-op otherwise."""
    if execute:
        return RealFileSystem(overwrite=overwrite)
    return DryRunFileSystem()
