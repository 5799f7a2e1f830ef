"""Contains synchronization logic for GitHub labels."""

import asyncio
from typing import Awaitable, Sequence

import structlog

from github_label_sync.github.abc import LabelRepositoryBase
from github_label_sync.schemas.labels import LabelModel
from github_label_sync.synchronize.exceptions import RemoteListError, RemoteMutationError
from github_label_sync.synchronize.exclusion import compile_exclude_pattern, filter_excluded_labels
from github_label_sync.synchronize.models import LabelSyncAction, LabelSyncPlan, SyncDecision
from github_label_sync.synchronize.results import LabelSynchronizationResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def index_labels_by_name(labels: Sequence[LabelModel]) -> dict[str, LabelModel]:
    """Map label names to labels. A later label with a duplicate name replaces the earlier one."""
    return {label.name: label for label in labels}


def decide_github_label_sync_action(desired_label: LabelModel, github_label: LabelModel | None = None) -> SyncDecision:
    """Compare a YAML label and a GitHub label, and decide whether to create, update, or no-op.

    Key is label name, so callers only pass a GitHub label whose name is equal.
    """
    if github_label is None:
        return SyncDecision.CREATE
    if github_label.description != desired_label.description or github_label.color != desired_label.color:
        return SyncDecision.UPDATE
    return SyncDecision.NOOP


def plan_label_sync(desired_labels: Sequence[LabelModel], current_labels: Sequence[LabelModel], prune: bool) -> LabelSyncPlan:
    """Compute the actions that make current_labels converge on desired_labels.

    Current labels absent from the manifest are deleted only when prune is set. Labels
    present on both sides are never deleted, whatever their attributes. Each desired name
    is decided once, in manifest order, using the attributes of its last occurrence.
    """
    desired_by_name = index_labels_by_name(desired_labels)
    current_by_name = index_labels_by_name(current_labels)
    plan = LabelSyncPlan()

    if prune:
        for name, current_label in current_by_name.items():
            if name not in desired_by_name:
                plan.deletions.append(LabelSyncAction(SyncDecision.DELETE, current_label))

    for name, desired_label in desired_by_name.items():
        decision = decide_github_label_sync_action(desired_label, current_by_name.get(name))
        action = LabelSyncAction(decision, desired_label)
        if decision == SyncDecision.NOOP:
            plan.noops.append(action)
        else:
            plan.changes.append(action)
    return plan


async def run_concurrently(operations: Sequence[Awaitable[None]]) -> None:
    """Run every operation as its own task and wait for all of them.

    Tasks are never cancelled. If any fail, the first failure observed is raised once
    every task has finished; later failures are logged and dropped.
    """
    if not operations:
        return
    tasks = [asyncio.ensure_future(operation) for operation in operations]
    first_error: Exception | None = None
    for finished in asyncio.as_completed(tasks):
        try:
            await finished
        except Exception as exc:
            if first_error is None:
                first_error = exc
            else:
                logger.debug("Dropping additional error from the same batch", error=str(exc))
    if first_error is not None:
        raise first_error


async def apply_label_sync_action(
    owner: str,
    repo: str,
    action: LabelSyncAction,
    label_repository: LabelRepositoryBase,
    dry_run: bool = False,
) -> None:
    """Apply one create, update, or delete action, or only report it in dry-run mode."""
    label = action.label
    if dry_run:
        logger.info(
            f"DRY RUN: would {action.decision.value} label",
            owner=owner,
            repo=repo,
            label_name=label.name,
            color=label.color,
            description=label.description,
        )
        return
    try:
        if action.decision == SyncDecision.DELETE:
            await label_repository.delete_label(owner, repo, label.name)
        elif action.decision == SyncDecision.CREATE:
            await label_repository.create_label(owner, repo, label)
        elif action.decision == SyncDecision.UPDATE:
            await label_repository.update_label(owner, repo, label.name, label)
        else:
            raise ValueError(f"No remote call exists for sync decision {action.decision.value}")
    except Exception as exc:
        logger.error(
            f"Failed to {action.decision.value} label",
            owner=owner,
            repo=repo,
            label_name=label.name,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise RemoteMutationError(owner, repo, action.decision, label.name, str(exc)) from exc


async def execute_label_sync_plan(
    owner: str,
    repo: str,
    plan: LabelSyncPlan,
    label_repository: LabelRepositoryBase,
    dry_run: bool = False,
) -> None:
    """Execute a plan: deletions first as one concurrent batch, then creations and updates as a second.

    The second batch only starts after every deletion has finished, and not at all if any
    deletion failed.
    """
    for action in plan.noops:
        logger.info("Label is up to date", owner=owner, repo=repo, label_name=action.label.name)

    await run_concurrently([apply_label_sync_action(owner, repo, action, label_repository, dry_run) for action in plan.deletions])
    await run_concurrently([apply_label_sync_action(owner, repo, action, label_repository, dry_run) for action in plan.changes])


async def sync_labels(
    owner: str,
    repo: str,
    desired_labels: Sequence[LabelModel],
    label_repository: LabelRepositoryBase,
    prune: bool = False,
    exclude_pattern: str = "",
    dry_run: bool = False,
) -> LabelSynchronizationResult:
    """Synchronize the labels of owner/repo with desired_labels.

    Current labels whose name matches exclude_pattern are left untouched: they are never
    updated or deleted. The pattern does not apply to desired_labels, so a desired label
    sharing its name with an excluded label is still created.

    Raises:
        PatternError: exclude_pattern is not a valid regular expression. No remote call is made.
        RemoteListError: the current labels could not be listed.
        RemoteMutationError: the first create, update, or delete failure observed.
    """
    matcher = compile_exclude_pattern(exclude_pattern)

    try:
        current_labels = await label_repository.list_labels(owner, repo)
    except Exception as exc:
        logger.error("Failed to list labels", owner=owner, repo=repo, error=str(exc), error_type=type(exc).__name__)
        raise RemoteListError(owner, repo, str(exc)) from exc
    logger.info("Fetched current labels", owner=owner, repo=repo, label_count=len(current_labels))

    current_labels = filter_excluded_labels(current_labels, matcher)

    plan = plan_label_sync(desired_labels, current_labels, prune)
    logger.info(
        "Planned label synchronization",
        owner=owner,
        repo=repo,
        create=plan.count(SyncDecision.CREATE),
        update=plan.count(SyncDecision.UPDATE),
        delete=plan.count(SyncDecision.DELETE),
        unchanged=plan.count(SyncDecision.NOOP),
        prune=prune,
        dry_run=dry_run,
    )
    await execute_label_sync_plan(owner, repo, plan, label_repository, dry_run)
    return LabelSynchronizationResult(owner, repo, plan, dry_run)
