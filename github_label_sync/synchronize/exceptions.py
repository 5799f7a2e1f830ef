"""Custom exceptions for the synchronize module."""

from github_label_sync.synchronize.models import SyncDecision


class LabelSyncError(Exception):
    """Base class for errors raised while synchronizing labels."""


class PatternError(LabelSyncError):
    """Raised when the label exclusion pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid label exclusion pattern {pattern!r}: {reason}")
        self.pattern = pattern


class RemoteListError(LabelSyncError):
    """Raised when the current labels of a repository cannot be listed."""

    def __init__(self, owner: str, repo: str, reason: str) -> None:
        super().__init__(f"Unable to list labels on {owner}/{repo}: {reason}")
        self.owner = owner
        self.repo = repo


class RemoteMutationError(LabelSyncError):
    """Raised when creating, updating, or deleting a single label fails."""

    def __init__(self, owner: str, repo: str, decision: SyncDecision, label_name: str, reason: str) -> None:
        super().__init__(f"Unable to {decision.value} label {label_name!r} on {owner}/{repo}: {reason}")
        self.owner = owner
        self.repo = repo
        self.decision = decision
        self.label_name = label_name
