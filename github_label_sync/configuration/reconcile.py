"""Reconcile GitHub authentication configuration from CLI options and the environment."""

from pathlib import Path
from typing import Any, NamedTuple

from github_label_sync.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_label_sync.configuration.models import GitHubAuthenticationType


class AppSetting(NamedTuple):
    """Describes one GitHub App setting for error messages."""

    name: str
    cli_name: str
    env_name: str


GITHUB_APP_SETTINGS = (
    AppSetting("GitHub App ID", "--github-app-id", "GITHUB_APP_ID"),
    AppSetting("GitHub App private key path", "--github-app-private-key-path", "GITHUB_APP_PRIVATE_KEY_PATH"),
    AppSetting("GitHub App installation ID", "--github-app-installation-id", "GITHUB_APP_INSTALLATION_ID"),
)


async def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Decide which GitHub authentication type the provided settings describe.

    Args:
        github_pat_token: The GitHub personal access token.
        github_app_id: The GitHub App ID.
        github_app_private_key_path: The path to the GitHub App private key.
        github_app_installation_id: The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If both a token and App settings are given,
            if the App settings are incomplete, or if nothing is given.

    Returns:
        GitHubAuthenticationType: PAT when only a token is set, APP when every App setting is set.
    """
    app_values: tuple[Any, ...] = (github_app_id, github_app_private_key_path, github_app_installation_id)
    any_app_value = any(app_values)

    if github_pat_token and any_app_value:
        raise GitHubAuthenticationConfigurationUndefinedError("Both PAT and GitHub App configurations are defined. Please use one or the other.")
    if github_pat_token:
        return GitHubAuthenticationType.PAT
    if all(app_values):
        return GitHubAuthenticationType.APP
    if any_app_value:
        missing = [setting for setting, value in zip(GITHUB_APP_SETTINGS, app_values) if not value]
        raise GitHubAuthenticationConfigurationUndefinedError(
            "Incomplete GitHub App configuration - missing settings include "
            + ", ".join(f"{s.name} (command line option {s.cli_name}, environment variable {s.env_name})" for s in missing)
        )
    raise GitHubAuthenticationConfigurationUndefinedError(
        "No GitHub authentication configuration provided. Please provide either a PAT or a GitHub App configuration."
    )
