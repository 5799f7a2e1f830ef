"""Pydantic Settings model for running as a GitHub Actions step."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_label_sync.utils.github import parse_repository_list


class ActionSettings(BaseSettings):
    """Inputs of the GitHub Actions step, read from INPUT_* and GITHUB_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    INPUT_MANIFEST: Path = Path(".github/labels.yml")
    INPUT_REPOSITORY: str = ""
    INPUT_TOKEN: str = ""
    INPUT_PRUNE: bool = True
    INPUT_DRY_RUN: bool = False
    INPUT_LABEL_EXCLUDE_PATTERN: str = ""

    # Provided by the GitHub Actions runner
    GITHUB_REPOSITORY: str = ""
    GITHUB_TOKEN: str = ""
    GITHUB_API_URL: str = "https://api.github.com"

    DEBUG: bool = Field(default=False, validation_alias="RUNNER_DEBUG")

    @property
    def repositories(self) -> list[str]:
        """Repositories to synchronize, falling back to the repository running the workflow."""
        return parse_repository_list(self.INPUT_REPOSITORY or self.GITHUB_REPOSITORY)

    @property
    def token(self) -> str:
        """Token to authenticate with, falling back to the workflow's GITHUB_TOKEN."""
        return self.INPUT_TOKEN or self.GITHUB_TOKEN
