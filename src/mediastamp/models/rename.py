"""Models for rename outcomes.

Every file handled by a run ends in exactly one terminal outcome. Rollback
outcomes are recorded in addition to the ``renamed`` outcome they undo.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class OutcomeKind(str, Enum):
    """Outcome reported for a single file."""

    RENAMED = "renamed"
    ERROR = "error"
    ROLLED_BACK = "rolled_back"
    ROLLBACK_ERROR = "rollback_error"
    UNCERTAIN = "uncertain"
    UNSUPPORTED = "unsupported"
    NO_TIMESTAMP = "no_timestamp"


class RenameEvent(BaseModel):
    """One notifier event, as recorded for JSON output and tests."""

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    source: Path
    """The path the event is about (old name, or new name for rollbacks)."""

    target: Optional[Path] = None
    """The other side of a rename, when there is one."""

    error: Optional[str] = None
    """Error message for failed renames and rollbacks."""


class RunSummary(BaseModel):
    """Totals for one rename run."""

    group_count: int = 0
    """Groups whose files were renamed (and stayed renamed)."""

    file_count: int = 0
    """Files left in their renamed state."""

    by_outcome: Dict[OutcomeKind, int] = Field(default_factory=dict)
    """Count of notifier events per outcome."""

    @property
    def failed(self) -> bool:
        """Whether any forward rename or rollback failed."""
        return bool(
            self.by_outcome.get(OutcomeKind.ERROR)
            or self.by_outcome.get(OutcomeKind.ROLLBACK_ERROR)
        )
