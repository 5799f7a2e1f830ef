"""Contains results of label synchronization."""

from github_label_sync.synchronize.models import LabelSyncPlan, SyncDecision


class LabelSynchronizationResult:
    """Contains the plan that was applied (or reported, in dry-run) to one repository."""

    def __init__(self, owner: str, repo: str, plan: LabelSyncPlan, dry_run: bool) -> None:
        """Initialize the result with the repository, the executed plan, and the dry-run flag."""
        self.owner = owner
        self.repo = repo
        self.plan = plan
        self.dry_run = dry_run

    @property
    def created(self) -> int:
        """Number of labels created (or that would be, in dry-run)."""
        return self.plan.count(SyncDecision.CREATE)

    @property
    def updated(self) -> int:
        """Number of labels updated (or that would be, in dry-run)."""
        return self.plan.count(SyncDecision.UPDATE)

    @property
    def deleted(self) -> int:
        """Number of labels deleted (or that would be, in dry-run)."""
        return self.plan.count(SyncDecision.DELETE)

    @property
    def unchanged(self) -> int:
        """Number of labels already up to date."""
        return self.plan.count(SyncDecision.NOOP)


class SyncLabelsWorkflowResult:
    """Contains results of the sync-labels workflow across one or more repositories."""

    def __init__(self, results: list[LabelSynchronizationResult] | None = None, errors: dict[str, Exception] | None = None) -> None:
        """Initialize with per-repository results and the error that stopped each failed repository."""
        self.results = results or []
        self.errors = errors or {}
