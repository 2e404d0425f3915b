"""Directory collector for media files.

This module walks a file or directory and builds a FileRecord for every regular
file found. Unlike a media library scan nothing is filtered out: sidecar files
matter because they follow their primary file's new name.
"""

import logging
from pathlib import Path
from typing import List

from mediastamp.core.classifier import classify_path
from mediastamp.models.core import FileRecord

# Logger for this module
logger = logging.getLogger(__name__)


def _walk(current_dir: Path, base_dir: Path, records: List[FileRecord]) -> None:
    """Append records for every regular file below *current_dir*.

    Entries are visited in sorted order so repeated runs see files in the
    same order. Unreadable directories are logged and skipped.
    """
    try:
        entries = sorted(current_dir.iterdir())
    except (PermissionError, OSError) as e:
        logger.warning("Error accessing directory %s: %s", current_dir, e)
        return

    for entry in entries:
        try:
            if entry.is_symlink():
                continue
            if entry.is_file():
                records.append(classify_path(entry, base_dir))
            elif entry.is_dir():
                _walk(entry, base_dir, records)
        except (PermissionError, OSError) as e:
            logger.warning("Error accessing %s: %s", entry, e)


def collect_files(path: Path) -> List[FileRecord]:
    """Collect every regular file at *path*.

    Args:
        path: A single file, or a directory walked recursively.

    Returns:
        List of FileRecord, relative to *path*.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If *path* is neither a regular file nor a directory.
    """
    if not path.exists():
        raise FileNotFoundError(f"Path does not exist: {path}")

    path = path.absolute()
    if path.is_file():
        return [classify_path(path, path)]
    if not path.is_dir():
        raise ValueError(f"Path is neither a file nor a directory: {path}")

    records: List[FileRecord] = []
    _walk(path, path, records)
    logger.debug("Collected %d files under %s", len(records), path)
    return records


def list_extensions(path: Path) -> List[str]:
    """Return the distinct file extensions found at *path*, sorted.

    Extensions keep their original case, so ``JPG`` and ``jpg`` are listed
    separately. Files without an extension are not counted.
    """
    found = {record.extension for record in collect_files(path) if record.extension}
    return sorted(found)
