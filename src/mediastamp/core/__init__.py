"""Core functionality for mediastamp.

This package exposes the grouping, classification and rename API used by the
CLI and other front ends.
- collect_files: Collects FileRecords from a file or directory tree.
- classify_records: Buckets records by stem and classifies each group.
- rename_with_rollback: Renames one group transactionally.
- process_groups / run_rename: Drive whole runs through a notifier.

See pipeline.py for how the pieces fit together.
"""

from mediastamp.core.apply import RenameResult, rename_group, rename_with_rollback
from mediastamp.core.collector import CollectedGroup, MetadataCollector
from mediastamp.core.grouper import classify_group, classify_records, group_records
from mediastamp.core.naming import next_file_name, next_path, next_stem
from mediastamp.core.pipeline import process_group, process_groups, run_rename
from mediastamp.core.scanner import collect_files, list_extensions

__all__ = [
    "collect_files",
    "list_extensions",
    "group_records",
    "classify_group",
    "classify_records",
    "next_stem",
    "next_file_name",
    "next_path",
    "rename_with_rollback",
    "rename_group",
    "RenameResult",
    "process_group",
    "process_groups",
    "run_rename",
    "MetadataCollector",
    "CollectedGroup",
]
