"""Internal data models for label synchronization."""

from dataclasses import dataclass, field
from enum import Enum

from github_label_sync.schemas.labels import LabelModel


class SyncDecision(Enum):
    """Enum for sync decisions."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    NOOP = "noop"


@dataclass(frozen=True)
class LabelSyncAction:
    """A single decision about one label. For deletions, label is the current label being removed."""

    decision: SyncDecision
    label: LabelModel


@dataclass
class LabelSyncPlan:
    """The actions computed for one reconciliation run, grouped by execution phase."""

    deletions: list[LabelSyncAction] = field(default_factory=list)
    changes: list[LabelSyncAction] = field(default_factory=list)
    noops: list[LabelSyncAction] = field(default_factory=list)

    def count(self, decision: SyncDecision) -> int:
        """Count the actions with the given decision."""
        return sum(1 for action in self.deletions + self.changes + self.noops if action.decision == decision)
