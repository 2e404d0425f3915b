"""Core domain models for mediastamp.

This module defines the foundational data structures for collecting, grouping
and renaming media files.
- FileRecord is created once per file during collection and never mutated.
- TimestampCandidates carries the two embedded timestamps a metadata provider
  can return for a file.
- All file paths are absolute so renames never depend on the working
  directory.

Design:
- MediaCategory is a str Enum so it serializes cleanly in JSON output.
- Models are frozen pydantic models; changing a value means building a new one.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class MediaCategory(str, Enum):
    """Category of a file, derived from its extension only.

    Image and video files are primary; everything else is secondary.
    """

    IMAGE = "image"
    VIDEO = "video"
    OTHER = "other"

    @property
    def is_primary(self) -> bool:
        """Whether files of this category can govern a rename."""
        return self is not MediaCategory.OTHER


class FileRecord(BaseModel):
    """A regular file discovered during collection.

    The stem is the grouping key: files that share it (exact, case-sensitive)
    are renamed together.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    """Absolute path to the file."""

    relative_path: Path
    """Path relative to the collection root, for display only."""

    stem: str
    """File name without its final extension."""

    extension: str
    """Text after the last dot, original case preserved; empty if none."""

    category: MediaCategory
    """Media category from the extension policy."""

    @property
    def is_primary(self) -> bool:
        """Whether this file is an image or a video."""
        return self.category.is_primary

    @model_validator(mode="after")
    def validate_path(self) -> "FileRecord":
        """Ensure the path is absolute.

        Raises:
            ValueError: If the path is not absolute.
        """
        if not self.path.is_absolute():
            raise ValueError(f"Path must be absolute: {self.path}")
        return self

    def __str__(self) -> str:
        return str(self.path)


class TimestampCandidates(BaseModel):
    """Timestamps a metadata provider found for one file.

    Both values are naive local datetimes with no sub-second precision.
    Capture time takes precedence over creation time when both exist.
    """

    model_config = ConfigDict(frozen=True)

    capture: Optional[datetime] = None
    """Embedded capture time ("date/time original")."""

    creation: Optional[datetime] = None
    """Embedded creation time ("creation date")."""

    @property
    def preferred(self) -> Optional[datetime]:
        """The timestamp that governs naming, or None."""
        return self.capture if self.capture is not None else self.creation

    @property
    def is_empty(self) -> bool:
        """Whether neither timestamp is known."""
        return self.capture is None and self.creation is None
