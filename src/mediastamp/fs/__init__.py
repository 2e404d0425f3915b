"""Filesystem adapters for mediastamp."""

from mediastamp.fs.operations import (
    DryRunFileSystem,
    FileSystem,
    RealFileSystem,
    RecordingFileSystem,
    filesystem_for,
)

__all__ = [
    "FileSystem",
    "RealFileSystem",
    "DryRunFileSystem",
    "RecordingFileSystem",
    "filesystem_for",
]
