"""Background metadata collection.

Metadata lookups are the slow part of a run (one exiftool process per group),
so they can run on a worker thread while the caller shows progress. The worker
never shares mutable state with the caller: for each renamable group it sends
an immutable CollectedGroup snapshot over a queue.

A provider that raises is logged and its group gets empty timestamps, so
every renamable group yields exactly one snapshot.

Cancellation is advisory. The flag is checked once per group boundary, so a
lookup already in progress always completes.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from mediastamp.core.naming import next_stem
from mediastamp.metadata.base import MetadataProvider
from mediastamp.models.core import TimestampCandidates
from mediastamp.models.group import (
    GroupVariant,
    ImageGroup,
    LiveImageGroup,
    RenamableGroup,
    VideoGroup,
)

logger = logging.getLogger(__name__)

_DONE = None


@dataclass(frozen=True)
class CollectedGroup:
    """Timestamps fetched for one renamable group."""

    index: int
    """Position of the group in the list given to ``start``."""
    group: RenamableGroup
    timestamps: TimestampCandidates

    @property
    def next_stem(self) -> Optional[str]:
        """Canonical stem for the group, or None without a timestamp."""
        return next_stem(self.timestamps)


class MetadataCollector:
    """Fetch timestamps for renamable groups on a worker thread.

    Usage:
        collector = MetadataCollector(provider)
        collector.start(groups)
        for collected in collector.results():
            ...
    """

    def __init__(self, provider: MetadataProvider) -> None:
        self.provider = provider
        self._queue: "queue.Queue[Optional[CollectedGroup]]" = queue.Queue()
        self._cancel = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def start(self, groups: Sequence[GroupVariant]) -> None:
        """Start collecting for *groups*.

        Raises:
            RuntimeError: If a collection is already running.
        """
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("Metadata collection already running")
        snapshot = tuple(groups)
        self._thread = threading.Thread(
            target=self._work,
            args=(snapshot,),
            name="mediastamp-metadata",
            daemon=True,
        )
        self._thread.start()

    def _fetch(self, group: RenamableGroup) -> TimestampCandidates:
        # A failed lookup becomes "no timestamp" for its group only.
        try:
            return self.provider.fetch(group.governing.path)
        except Exception:
            logger.exception("Metadata lookup failed for %s", group.governing.path)
            return TimestampCandidates()

    def _work(self, groups: Sequence[GroupVariant]) -> None:
        try:
            for index, group in enumerate(groups):
                if self._cancel.is_set():
                    logger.info("Metadata collection cancelled at group %d", index)
                    break
                if not isinstance(group, (ImageGroup, VideoGroup, LiveImageGroup)):
                    continue
                timestamps = self._fetch(group)
                self._queue.put(CollectedGroup(index, group, timestamps))
        finally:
            self._queue.put(_DONE)

    def results(self) -> Iterator[CollectedGroup]:
        """Yield snapshots as they arrive until the worker finishes."""
        while True:
            item = self._queue.get()
            if item is _DONE:
                return
            yield item

    def cancel(self) -> None:
        """Ask the worker to stop at the next group boundary and wait for it."""
        self._cancel.set()
        if self._thread is not None:
            self._thread.join()

    def collect_all(self, groups: Sequence[GroupVariant]) -> List[CollectedGroup]:
        """Collect for *groups* and wait for every snapshot."""
        self.start(groups)
        return list(self.results())
