"""Orchestrates the synchronization of GitHub labels across repositories."""

import time
from pathlib import Path
from typing import Sequence

import structlog

from github_label_sync.configuration.exceptions import GitHubClientSetupError
from github_label_sync.configuration.models import GitHubAuthenticationType
from github_label_sync.github.abc import LabelRepositoryBase
from github_label_sync.github.adapter import GitHubKitAdapter
from github_label_sync.processing.manifest import ManifestLoader
from github_label_sync.schemas.labels import LabelModel
from github_label_sync.synchronize.exceptions import LabelSyncError
from github_label_sync.synchronize.exclusion import compile_exclude_pattern
from github_label_sync.synchronize.labels import sync_labels
from github_label_sync.synchronize.results import SyncLabelsWorkflowResult
from github_label_sync.utils.github import split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def sync_labels_to_repositories(
    repos: Sequence[str],
    desired_labels: Sequence[LabelModel],
    label_repository: LabelRepositoryBase,
    prune: bool = False,
    exclude_pattern: str = "",
    dry_run: bool = False,
) -> SyncLabelsWorkflowResult:
    """Synchronize the same desired labels to each repository in turn.

    Repositories are processed one after another to stay within the GitHub API rate
    limit. A failure on one repository is recorded and the next repository still runs.
    """
    # An invalid pattern fails every repository the same way, so reject it up front.
    compile_exclude_pattern(exclude_pattern)

    workflow_result = SyncLabelsWorkflowResult()
    for repo in repos:
        start_time = time.time()
        try:
            owner, repo_name = await split_repository_in_configuration(repo)
            result = await sync_labels(
                owner,
                repo_name,
                desired_labels,
                label_repository,
                prune=prune,
                exclude_pattern=exclude_pattern,
                dry_run=dry_run,
            )
        except (LabelSyncError, ValueError) as exc:
            logger.error("Unable to sync labels", repo=repo, error=str(exc), error_type=type(exc).__name__)
            workflow_result.errors[repo] = exc
            continue
        logger.info(
            "Synchronized labels",
            repo=repo,
            duration=round(time.time() - start_time, 2),
            created=result.created,
            updated=result.updated,
            deleted=result.deleted,
            unchanged=result.unchanged,
            dry_run=dry_run,
        )
        workflow_result.results.append(result)
    return workflow_result


async def run_sync_labels_workflow(
    repos: Sequence[str],
    manifest_path: Path,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None = None,
    github_app_id: int | None = None,
    github_app_private_key_path: Path | None = None,
    github_app_installation_id: int | None = None,
    github_api_url: str = "https://api.github.com",
    prune: bool = False,
    exclude_pattern: str = "",
    dry_run: bool = False,
) -> SyncLabelsWorkflowResult:
    """Run the sync-labels workflow: load the manifest, then synchronize it to every repository.

    Manifest errors (ManifestNotFoundError, ManifestParseError) and an invalid exclusion
    pattern (PatternError) propagate before any GitHub client is created. A client that
    cannot be created raises GitHubClientSetupError.
    """
    desired_labels = ManifestLoader().load(manifest_path)
    compile_exclude_pattern(exclude_pattern)
    if not repos:
        raise ValueError("At least one repository in the format 'owner/repo' is required.")

    # GitHub App installations are looked up through the first repository.
    try:
        github_adapter = await GitHubKitAdapter.create(
            repo=repos[0],
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
    except (ValueError, RuntimeError) as exc:
        logger.error("Unable to create GitHub client", repo=repos[0], auth_type=github_auth_type.value, error=str(exc))
        raise GitHubClientSetupError(f"Unable to create GitHub client: {exc}") from exc
    return await sync_labels_to_repositories(
        repos,
        desired_labels,
        github_adapter,
        prune=prune,
        exclude_pattern=exclude_pattern,
        dry_run=dry_run,
    )
