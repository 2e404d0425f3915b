"""Transactional rename engine for one file group.

This module renames every member of a group to the group's canonical stem and
rolls the group back when any rename fails.
- Renames run in list order and stop at the first failure.
- On failure, every file already renamed is renamed back, in the order it was
  renamed. A failed rollback is reported and never retried.
- Groups are independent: a failure here never affects another group.
"""

import logging
import time as time_mod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from mediastamp.core.naming import next_path
from mediastamp.core.notifier import Notifier
from mediastamp.errors import RenameFailure, RollbackFailure
from mediastamp.fs.operations import FileSystem
from mediastamp.models.core import FileRecord
from mediastamp.models.group import RenamableGroup

logger = logging.getLogger(__name__)


@dataclass
class RenameResult:
    """Result of renaming one group."""

    key: str
    stem: str
    renamed: int = 0
    """Files left in their renamed state."""
    failed: bool = False
    """Whether a forward rename failed and rollback was attempted."""
    rollback_failures: int = 0
    duration: float = 0.0

    @property
    def success(self) -> bool:
        return not self.failed


def _rollback(
    fs: FileSystem, notifier: Notifier, processed: Sequence[Tuple[Path, Path]]
) -> int:
    """Rename every processed file back. Return how many could not be restored."""
    stranded = 0
    # Forward order, oldest rename first.
    for old, new in processed:
        try:
            fs.rename(new, old)
        except OSError as e:
            failure = RollbackFailure(new, e)
            logger.error("Rollback failed, file left as %s: %s", new, failure.error)
            notifier.rollback_error(new, str(e))
            stranded += 1
            continue
        notifier.rollback_success(new, old)
    return stranded


def rename_with_rollback(
    fs: FileSystem,
    notifier: Notifier,
    records: Sequence[FileRecord],
    stem: str,
) -> int:
    """Rename *records* to *stem*, rolling back on the first failure.

    Each destination is ``{parent}/{stem}.{extension}``. Every file gets at
    most one forward attempt and at most one rollback attempt.

    Args:
        fs: Filesystem adapter performing the renames.
        notifier: Receives one event per rename and rollback attempt.
        records: Group members, governing primary file first.
        stem: Canonical stem shared by the whole group.

    Returns:
        int: Number of files left in the renamed state. This is
        ``len(records)`` on success, and on rollback the number of files whose
        rollback failed.
    """
    processed: List[Tuple[Path, Path]] = []
    rollback = False
    for record in records:
        old = record.path
        new = next_path(record, stem)
        try:
            fs.rename(old, new)
        except OSError as e:
            failure = RenameFailure(old, e)
            logger.warning("Rename failed, rolling back group: %s", failure)
            notifier.rename_error(old, str(e))
            rollback = True
            break
        notifier.rename_success(old, new)
        processed.append((old, new))

    if not rollback:
        return len(processed)
    return _rollback(fs, notifier, processed)


def rename_group(
    fs: FileSystem, notifier: Notifier, group: RenamableGroup, stem: str
) -> RenameResult:
    """Rename every member of a renamable group to *stem*.

    Args:
        fs: Filesystem adapter.
        notifier: Event sink.
        group: An Image, Video or LiveImage group.
        stem: Canonical stem derived from the group's governing file.

    Returns:
        RenameResult: Outcome counts for the group.
    """
    start = time_mod.time()
    members = group.rename_members()
    renamed = rename_with_rollback(fs, notifier, members, stem)
    failed = renamed != len(members)
    # On rollback, anything still renamed is a file that could not be restored.
    result = RenameResult(
        key=group.key,
        stem=stem,
        renamed=renamed,
        failed=failed,
        rollback_failures=renamed if failed else 0,
        duration=time_mod.time() - start,
    )
    logger.debug(
        "Group %s -> %s: %d renamed, failed=%s", group.key, stem, renamed, failed
    )
    return result


__all__ = ["rename_with_rollback", "rename_group", "RenameResult"]
