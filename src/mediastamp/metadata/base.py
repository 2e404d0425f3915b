"""Base abstraction for metadata providers.

A provider answers one question for the core: which timestamps are embedded in
this file? Providers never raise on failure. A file they cannot read simply
has no timestamps, and the pipeline reports "no clear timestamp found".
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional

from mediastamp.models.core import TimestampCandidates


class MetadataProvider(ABC):
    """Abstract base class for metadata providers.

    Used for dependency injection: the pipeline and the background collector
    only depend on this interface.
    """

    @abstractmethod
    def fetch(self, path: Path) -> TimestampCandidates:
        """Return the timestamps embedded in *path*.

        Args:
            path: Absolute path of a media file.

        Returns:
            TimestampCandidates, empty when the file cannot be read.
        """
        raise NotImplementedError


class StaticProvider(MetadataProvider):
    """Provider answering from a fixed mapping of path to timestamps."""

    def __init__(
        self, timestamps: Optional[Mapping[Path, TimestampCandidates]] = None
    ) -> None:
        self._timestamps = dict(timestamps or {})
        self.calls: list[Path] = []

    def fetch(self, path: Path) -> TimestampCandidates:
        self.calls.append(path)
        return self._timestamps.get(path, TimestampCandidates())
