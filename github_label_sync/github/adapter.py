"""GitHub label repository adapter for the githubkit library."""

from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Label

from github_label_sync.configuration.models import GitHubAuthenticationType
from github_label_sync.schemas.labels import LabelModel

from .abc import LabelRepositoryBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

LABELS_PER_PAGE = 100


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except ValueError:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=str(getattr(exc.response, "url", None)),
                    status_code=422,
                )
                raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc
            raise

    return wrapper  # type: ignore


def label_from_github(label: Label) -> LabelModel:
    """Convert a githubkit Label into the LabelModel compared during reconciliation."""
    return LabelModel(name=label.name, description=label.description or "", color=label.color or "")


class GitHubKitAdapter(LabelRepositoryBase):
    """Label repository adapter for the githubkit library."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the adapter with an already-initialized client."""
        self.client = client

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new adapter.

        Args:
            repo: Repository in 'owner/repo' format, used to look up the GitHub App installation
            github_auth_type: Type of authentication (PAT or APP)
            github_pat_token: Personal access token (required for PAT auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_app_installation_id: Installation ID (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url, repo=repo, auth_type=github_auth_type.value)
        client = await get_github_client(
            repo=repo,
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client)

    async def list_labels(self, owner: str, repo: str) -> list[LabelModel]:
        """List all labels for a repository, handling pagination."""
        all_labels: list[LabelModel] = []
        page: int = 1
        while True:
            response: Response[list[Label]] = await self.client.rest.issues.async_list_labels_for_repo(
                owner=owner,
                repo=repo,
                per_page=LABELS_PER_PAGE,
                page=page,
            )
            labels = response.parsed_data
            all_labels.extend(label_from_github(label) for label in labels)
            if len(labels) < LABELS_PER_PAGE:
                break
            page += 1
        logger.debug("Listed labels", owner=owner, repo=repo, label_count=len(all_labels), pages=page)
        return all_labels

    @handle_github_422
    async def create_label(self, owner: str, repo: str, label: LabelModel) -> None:
        """Create a label for a repository. An empty color lets GitHub pick one."""
        params = self._omit_null_parameters(
            name=label.name,
            color=label.color or None,
            description=label.description,
        )
        await self.client.rest.issues.async_create_label(owner=owner, repo=repo, **params)
        logger.info("Created label", owner=owner, repo=repo, label_name=label.name, color=label.color, description=label.description)

    @handle_github_422
    async def update_label(self, owner: str, repo: str, name: str, label: LabelModel) -> None:
        """Update a label for a repository. An empty color leaves the current color in place."""
        params = self._omit_null_parameters(
            new_name=label.name,
            color=label.color or None,
            description=label.description,
        )
        await self.client.rest.issues.async_update_label(owner=owner, repo=repo, name=name, **params)
        logger.info("Updated label", owner=owner, repo=repo, label_name=name, new_name=label.name, color=label.color, description=label.description)

    async def delete_label(self, owner: str, repo: str, name: str) -> None:
        """Delete a label from a repository."""
        await self.client.rest.issues.async_delete_label(owner=owner, repo=repo, name=name)
        logger.info("Deleted label", owner=owner, repo=repo, label_name=name)
