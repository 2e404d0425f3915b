"""Grouping and classification of same-stem files.

- group_records: buckets FileRecords by stem into primary and secondary sets.
- classify_group: maps one bucket to exactly one of the five group variants.

Classification looks only at how many primary files a group has and their
categories. When it is unclear which file's timestamp should name the group,
the group is routed to Uncertain for human review instead of being resolved
by a heuristic.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from mediastamp.models.core import FileRecord, MediaCategory
from mediastamp.models.group import (
    FileGroup,
    GroupVariant,
    ImageGroup,
    LiveImageGroup,
    UncertainGroup,
    UnsupportedGroup,
    VideoGroup,
)

logger = logging.getLogger(__name__)


def group_records(records: Iterable[FileRecord]) -> Dict[str, FileGroup]:
    """Bucket *records* by stem in a single pass.

    Order inside each bucket follows the input. Groups are keyed in order of
    first appearance of their stem.
    """
    buckets: Dict[str, Tuple[List[FileRecord], List[FileRecord]]] = {}
    for record in records:
        primary, secondary = buckets.setdefault(record.stem, ([], []))
        (primary if record.is_primary else secondary).append(record)
    return {
        key: FileGroup(key=key, primary=tuple(primary), secondary=tuple(secondary))
        for key, (primary, secondary) in buckets.items()
    }


def classify_group(group: FileGroup) -> GroupVariant:
    """Classify a bucket into its group variant.

    Args:
        group: The same-stem bucket. Must hold at least one file.

    Returns:
        ImageGroup or VideoGroup for a single primary file, LiveImageGroup for
        exactly one image plus one video, UncertainGroup for any other set of
        two or more primary files, UnsupportedGroup when there is no primary
        file at all.

    Raises:
        ValueError: If the group is empty.
    """
    primary = group.primary
    config = group.secondary

    if len(primary) == 1:
        (only,) = primary
        if only.category == MediaCategory.IMAGE:
            return ImageGroup(key=group.key, image=only, config=config)
        return VideoGroup(key=group.key, video=only, config=config)

    if len(primary) == 2:
        images = group.count(MediaCategory.IMAGE)
        videos = group.count(MediaCategory.VIDEO)
        if images == 1 and videos == 1:
            image, video = sorted(
                primary, key=lambda r: r.category != MediaCategory.IMAGE
            )
            return LiveImageGroup(
                key=group.key, image=image, video=video, config=config
            )
        return UncertainGroup(key=group.key, primary=primary, config=config)

    if len(primary) > 2:
        return UncertainGroup(key=group.key, primary=primary, config=config)

    if not config:
        raise ValueError(f"Cannot classify an empty group: {group.key!r}")
    return UnsupportedGroup(key=group.key, config=config)


def classify_records(records: Iterable[FileRecord]) -> List[GroupVariant]:
    """Group *records* by stem and classify every group."""
    variants = [classify_group(group) for group in group_records(records).values()]
    logger.debug("Classified %d groups", len(variants))
    return variants
