"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_label_sync.configuration.env import ActionSettings
from github_label_sync.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError, GitHubClientSetupError
from github_label_sync.configuration.models import GitHubAuthenticationType
from github_label_sync.configuration.reconcile import validate_github_authentication_configuration
from github_label_sync.processing.exceptions import ManifestNotFoundError, ManifestParseError
from github_label_sync.synchronize.driver import run_sync_labels_workflow
from github_label_sync.synchronize.exceptions import PatternError
from github_label_sync.synchronize.results import SyncLabelsWorkflowResult
from github_label_sync.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Synchronize GitHub labels with a YAML manifest.")

# Errors raised before any repository is synchronized.
SETUP_ERRORS = (ManifestNotFoundError, ManifestParseError, PatternError, GitHubClientSetupError)


def echo_workflow_summary(result: SyncLabelsWorkflowResult) -> None:
    """Print one line per synchronized repository."""
    for repo_result in result.results:
        prefix = "[dry run] " if repo_result.dry_run else ""
        typer.echo(
            f"{prefix}{repo_result.owner}/{repo_result.repo}: "
            f"{repo_result.created} created, {repo_result.updated} updated, "
            f"{repo_result.deleted} deleted, {repo_result.unchanged} unchanged"
        )


# --- Repository commands ---
repo_app = typer.Typer(help="Repository-related commands")


def repo_callback(
    ctx: typer.Context,
    repo: Annotated[str, Argument(help="Repository name (owner/repo).")],
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = "https://api.github.com",
    github_pat_token: Annotated[str | None, Option(envvar="GITHUB_PAT_TOKEN", help="GitHub Personal Access Token.")] = None,
    github_app_id: Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")] = None,
    github_app_private_key_path: Annotated[Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")] = None,
    github_app_installation_id: Annotated[int | None, Option(envvar="GITHUB_APP_INSTALLATION_ID", help="GitHub App Installation ID.")] = None,
) -> None:
    """Set the repository and GitHub credentials for the current context."""
    ctx.ensure_object(dict)
    ctx.obj["repo"] = repo
    ctx.obj["github_api_url"] = github_api_url
    ctx.obj["github_pat_token"] = github_pat_token
    ctx.obj["github_app_id"] = github_app_id
    ctx.obj["github_app_private_key_path"] = github_app_private_key_path
    ctx.obj["github_app_installation_id"] = github_app_installation_id
    try:
        ctx.obj["github_auth_type"] = asyncio.run(
            validate_github_authentication_configuration(
                github_pat_token=github_pat_token,
                github_app_id=github_app_id,
                github_app_private_key_path=github_app_private_key_path,
                github_app_installation_id=github_app_installation_id,
            )
        )
    except GitHubAuthenticationConfigurationUndefinedError as e:
        typer.echo(str(e), err=True)
        sys.exit(1)


repo_app.callback()(repo_callback)


@repo_app.command(name="sync-labels")
def sync_labels_cli(
    ctx: typer.Context,
    manifest_path: Annotated[Path, Argument(envvar="MANIFEST_PATH", help="Path to the YAML label manifest.")],
    prune: Annotated[bool, Option(envvar="PRUNE", help="Delete labels that are not in the manifest.")] = False,
    exclude_pattern: Annotated[
        str,
        Option(envvar="LABEL_EXCLUDE_PATTERN", help="Regular expression; matching labels on GitHub are never updated or deleted."),
    ] = "",
    dry_run: Annotated[bool, Option(envvar="DRY_RUN", help="Report the changes without applying them.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Synchronizes the labels of a GitHub repository with a YAML manifest."""
    configure_logging(debug)
    repo: str = ctx.obj["repo"]
    if dry_run:
        typer.echo("Dry run is enabled - no labels will be created, updated, or deleted")

    try:
        result = asyncio.run(
            run_sync_labels_workflow(
                repos=[repo],
                manifest_path=manifest_path,
                github_auth_type=ctx.obj["github_auth_type"],
                github_pat_token=ctx.obj["github_pat_token"],
                github_app_id=ctx.obj["github_app_id"],
                github_app_private_key_path=ctx.obj["github_app_private_key_path"],
                github_app_installation_id=ctx.obj["github_app_installation_id"],
                github_api_url=ctx.obj["github_api_url"],
                prune=prune,
                exclude_pattern=exclude_pattern,
                dry_run=dry_run,
            )
        )
    except SETUP_ERRORS as e:
        typer.echo(str(e), err=True)
        sys.exit(1)

    echo_workflow_summary(result)
    if result.errors:
        typer.echo("Error(s) encountered while synchronizing labels:", err=True)
        for failed_repo, err in result.errors.items():
            typer.echo(f"{failed_repo}: {err}", err=True)
        sys.exit(1)


typer_app.add_typer(repo_app, name="repo")


@typer_app.command(name="action")
def action_cli() -> None:
    """Synchronizes labels as a GitHub Actions step, configured through INPUT_* environment variables."""
    settings = ActionSettings()
    configure_logging(settings.DEBUG)

    repos = settings.repositories
    if not repos:
        typer.echo("::error::No repository given - set the repository input or GITHUB_REPOSITORY.")
        sys.exit(1)
    if not settings.token:
        typer.echo("::error::No token given - set the token input or GITHUB_TOKEN.")
        sys.exit(1)

    try:
        result = asyncio.run(
            run_sync_labels_workflow(
                repos=repos,
                manifest_path=settings.INPUT_MANIFEST,
                github_auth_type=GitHubAuthenticationType.PAT,
                github_pat_token=settings.token,
                github_api_url=settings.GITHUB_API_URL,
                prune=settings.INPUT_PRUNE,
                exclude_pattern=settings.INPUT_LABEL_EXCLUDE_PATTERN,
                dry_run=settings.INPUT_DRY_RUN,
            )
        )
    except SETUP_ERRORS as e:
        typer.echo(f"::error::{e}")
        sys.exit(1)

    echo_workflow_summary(result)
    for failed_repo, err in result.errors.items():
        typer.echo(f"::error::unable to sync labels on {failed_repo}: {err}")
    if result.errors:
        sys.exit(1)


if __name__ == "__main__":
    typer_app()
