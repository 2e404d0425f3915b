"""Rename pipeline.

Drives classified groups through metadata lookup, name derivation and the
transactional renamer, reporting every file to a notifier.

Groups are processed one at a time and independently: whatever goes wrong in
one group is reported and the run moves on to the next.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, cast

from mediastamp.core.apply import rename_group
from mediastamp.core.grouper import classify_records
from mediastamp.core.naming import next_stem
from mediastamp.core.notifier import Notifier, TallyNotifier
from mediastamp.core.scanner import collect_files
from mediastamp.errors import AmbiguousGroup, NoPrimaryFile
from mediastamp.fs.operations import FileSystem
from mediastamp.metadata.base import MetadataProvider
from mediastamp.models.core import FileRecord, TimestampCandidates
from mediastamp.models.group import (
    GroupVariant,
    RenamableGroup,
    UncertainGroup,
    UnsupportedGroup,
)
from mediastamp.models.rename import RunSummary

logger = logging.getLogger(__name__)


def governing_record(group: GroupVariant) -> FileRecord:
    """Return the file whose timestamp names *group*.

    Raises:
        AmbiguousGroup: For an Uncertain group.
        NoPrimaryFile: For an Unsupported group.
    """
    if isinstance(group, UncertainGroup):
        raise AmbiguousGroup(
            f"{group.key}: {len(group.primary)} primary files, none governs"
        )
    if isinstance(group, UnsupportedGroup):
        raise NoPrimaryFile(f"{group.key}: no image or video file")
    return group.governing


def _report_skipped(group: GroupVariant, notifier: Notifier) -> None:
    if isinstance(group, UncertainGroup):
        for record in group.members():
            notifier.uncertain(record.path)
    else:
        for record in group.members():
            notifier.unsupported(record.path)


def process_group(
    group: GroupVariant,
    provider: MetadataProvider,
    fs: FileSystem,
    notifier: Notifier,
    timestamps: Optional[TimestampCandidates] = None,
) -> int:
    """Process one classified group.

    Args:
        group: The classified group.
        provider: Source of timestamps for the governing file.
        fs: Filesystem adapter.
        notifier: Event sink.
        timestamps: Already-fetched timestamps for the governing file; the
            provider is only called when this is None.

    Returns:
        int: Number of files left renamed.
    """
    try:
        governing = governing_record(group)
    except (AmbiguousGroup, NoPrimaryFile) as e:
        logger.info("Skipping group: %s", e)
        _report_skipped(group, notifier)
        return 0

    if timestamps is None:
        timestamps = provider.fetch(governing.path)
    stem = next_stem(timestamps)
    if stem is None:
        logger.info("No clear timestamp for group %s", group.key)
        for record in group.members():
            notifier.no_timestamp(record.path)
        return 0

    return rename_group(fs, notifier, cast(RenamableGroup, group), stem).renamed


def process_groups(
    groups: Iterable[GroupVariant],
    provider: MetadataProvider,
    fs: FileSystem,
    notifier: Notifier,
    prefetched: Optional[Mapping[str, TimestampCandidates]] = None,
) -> RunSummary:
    """Process every group in order and summarize the run.

    Args:
        groups: Classified groups.
        provider: Timestamp source for groups missing from *prefetched*.
        fs: Filesystem adapter.
        notifier: Event sink.
        prefetched: Timestamps already collected, keyed by group key.

    Returns:
        RunSummary: Groups and files left renamed, and event counts.
    """
    tally = TallyNotifier(notifier)
    summary = RunSummary()
    for group in groups:
        timestamps = (prefetched or {}).get(group.key)
        renamed = process_group(group, provider, fs, tally, timestamps)
        if renamed:
            summary.group_count += 1
            summary.file_count += renamed
    summary.by_outcome = dict(tally.counts)
    return summary


def run_rename(
    root: Path,
    provider: MetadataProvider,
    fs: FileSystem,
    notifier: Notifier,
) -> RunSummary:
    """Collect files under *root*, classify them and rename every group.

    Raises:
        FileNotFoundError: If *root* does not exist.
        ValueError: If *root* is neither a file nor a directory.
    """
    records: List[FileRecord] = collect_files(root)
    groups = classify_records(records)
    logger.info(
        "Found %d files in %d groups under %s", len(records), len(groups), root
    )
    return process_groups(groups, provider, fs, notifier)
