"""Domain models for the mediastamp application."""

from mediastamp.models.core import FileRecord, MediaCategory, TimestampCandidates
from mediastamp.models.group import (
    FileGroup,
    GroupVariant,
    ImageGroup,
    LiveImageGroup,
    RenamableGroup,
    UncertainGroup,
    UnsupportedGroup,
    VideoGroup,
)
from mediastamp.models.rename import OutcomeKind, RenameEvent, RunSummary

__all__ = [
    "FileRecord",
    "MediaCategory",
    "TimestampCandidates",
    "FileGroup",
    "GroupVariant",
    "ImageGroup",
    "LiveImageGroup",
    "RenamableGroup",
    "UncertainGroup",
    "UnsupportedGroup",
    "VideoGroup",
    "OutcomeKind",
    "RenameEvent",
    "RunSummary",
]
