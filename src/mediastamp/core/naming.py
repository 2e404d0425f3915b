"""Canonical name derivation.

A renamable group converges on one stem derived from its governing file's
timestamp. Each member keeps its own original extension.
"""

from pathlib import Path
from typing import Optional

from mediastamp.models.core import FileRecord, TimestampCandidates

# Zero-padded, 24-hour clock, e.g. 2021-10-10_12.34.56
STEM_FORMAT = "%Y-%m-%d_%H.%M.%S"


def next_stem(timestamps: TimestampCandidates) -> Optional[str]:
    """Derive the canonical stem from a file's timestamps.

    Capture time wins over creation time.

    Returns:
        The formatted stem, or None if neither timestamp is known.
    """
    preferred = timestamps.preferred
    if preferred is None:
        return None
    return preferred.strftime(STEM_FORMAT)


def next_file_name(record: FileRecord, stem: str) -> str:
    """Return ``{stem}.{extension}``, or just *stem* when there is no extension."""
    if not record.extension:
        return stem
    return f"{stem}.{record.extension}"


def next_path(record: FileRecord, stem: str) -> Path:
    """Destination path: same directory, new name."""
    return record.path.with_name(next_file_name(record, stem))
