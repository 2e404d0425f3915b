"""Notifier interface for per-file rename outcomes.

The renamer and the pipeline report every outcome through a Notifier. Calls
are fire-and-forget: nothing they return is consulted, so implementations can
print to a console, log, or record events for tests and JSON output.
"""

import logging
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import List

from mediastamp.models.rename import OutcomeKind, RenameEvent

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Abstract sink for rename outcome events."""

    @abstractmethod
    def rename_success(self, old: Path, new: Path) -> None:
        """A file was renamed from *old* to *new*."""

    @abstractmethod
    def rename_error(self, old: Path, err: str) -> None:
        """Renaming *old* failed; the group is being rolled back."""

    @abstractmethod
    def rollback_success(self, new: Path, old: Path) -> None:
        """A renamed file was restored from *new* to *old*."""

    @abstractmethod
    def rollback_error(self, new: Path, err: str) -> None:
        """Restoring *new* failed; the file is stranded under its new name."""

    @abstractmethod
    def uncertain(self, path: Path) -> None:
        """*path* belongs to a group with more than one possible primary file."""

    @abstractmethod
    def unsupported(self, path: Path) -> None:
        """*path* belongs to a group with no primary file."""

    @abstractmethod
    def no_timestamp(self, path: Path) -> None:
        """No clear timestamp was found for the group *path* belongs to."""


class RecordingNotifier(Notifier):
    """Notifier that keeps every event in memory."""

    def __init__(self) -> None:
        self.events: List[RenameEvent] = []

    def _record(self, kind: OutcomeKind, source: Path, **fields: object) -> None:
        self.events.append(RenameEvent(kind=kind, source=source, **fields))

    def rename_success(self, old: Path, new: Path) -> None:
        self._record(OutcomeKind.RENAMED, old, target=new)

    def rename_error(self, old: Path, err: str) -> None:
        self._record(OutcomeKind.ERROR, old, error=err)

    def rollback_success(self, new: Path, old: Path) -> None:
        self._record(OutcomeKind.ROLLED_BACK, new, target=old)

    def rollback_error(self, new: Path, err: str) -> None:
        self._record(OutcomeKind.ROLLBACK_ERROR, new, error=err)

    def uncertain(self, path: Path) -> None:
        self._record(OutcomeKind.UNCERTAIN, path)

    def unsupported(self, path: Path) -> None:
        self._record(OutcomeKind.UNSUPPORTED, path)

    def no_timestamp(self, path: Path) -> None:
        self._record(OutcomeKind.NO_TIMESTAMP, path)

    def kinds(self) -> List[OutcomeKind]:
        """Outcome kinds in the order they were reported."""
        return [event.kind for event in self.events]


class LoggingNotifier(Notifier):
    """Notifier that writes events to the ``mediastamp`` logger."""

    def rename_success(self, old: Path, new: Path) -> None:
        logger.info("%s -> %s", old, new)

    def rename_error(self, old: Path, err: str) -> None:
        logger.error("%s -> %s", old, err)

    def rollback_success(self, new: Path, old: Path) -> None:
        logger.info("%s -> %s (ROLLBACK)", new, old)

    def rollback_error(self, new: Path, err: str) -> None:
        logger.error("ERROR: rolling back the %s: %s", new, err)

    def uncertain(self, path: Path) -> None:
        logger.warning("%s -> Uncertain Primary file", path)

    def unsupported(self, path: Path) -> None:
        logger.warning("%s -> Unsupported file", path)

    def no_timestamp(self, path: Path) -> None:
        logger.warning("%s -> No clear timestamp found", path)


class TallyNotifier(Notifier):
    """Forward every event to another notifier while counting outcomes."""

    def __init__(self, inner: Notifier) -> None:
        self.inner = inner
        self.counts: Counter[OutcomeKind] = Counter()

    def rename_success(self, old: Path, new: Path) -> None:
        self.counts[OutcomeKind.RENAMED] += 1
        self.inner.rename_success(old, new)

    def rename_error(self, old: Path, err: str) -> None:
        self.counts[OutcomeKind.ERROR] += 1
        self.inner.rename_error(old, err)

    def rollback_success(self, new: Path, old: Path) -> None:
        self.counts[OutcomeKind.ROLLED_BACK] += 1
        self.inner.rollback_success(new, old)

    def rollback_error(self, new: Path, err: str) -> None:
        self.counts[OutcomeKind.ROLLBACK_ERROR] += 1
        self.inner.rollback_error(new, err)

    def uncertain(self, path: Path) -> None:
        self.counts[OutcomeKind.UNCERTAIN] += 1
        self.inner.uncertain(path)

    def unsupported(self, path: Path) -> None:
        self.counts[OutcomeKind.UNSUPPORTED] += 1
        self.inner.unsupported(path)

    def no_timestamp(self, path: Path) -> None:
        self.counts[OutcomeKind.NO_TIMESTAMP] += 1
        self.inner.no_timestamp(path)
