"""Unit tests for the GitHub Actions settings."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from github_label_sync.configuration.env import ActionSettings

ACTION_ENV_VARS = [
    "INPUT_MANIFEST",
    "INPUT_REPOSITORY",
    "INPUT_TOKEN",
    "INPUT_PRUNE",
    "INPUT_DRY_RUN",
    "INPUT_LABEL_EXCLUDE_PATTERN",
    "GITHUB_REPOSITORY",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "RUNNER_DEBUG",
]


@pytest.fixture(autouse=True)
def clean_action_environment(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Run each test without inherited action variables or a local .env file."""
    for name in ACTION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    """Defaults match the action's documented inputs."""
    settings = ActionSettings()
    assert settings.INPUT_MANIFEST == Path(".github/labels.yml")
    assert settings.INPUT_PRUNE is True
    assert settings.INPUT_DRY_RUN is False
    assert settings.INPUT_LABEL_EXCLUDE_PATTERN == ""
    assert settings.GITHUB_API_URL == "https://api.github.com"
    assert settings.repositories == []
    assert settings.DEBUG is False


def test_inputs_take_precedence_over_workflow_variables(monkeypatch: MonkeyPatch) -> None:
    """The repository and token inputs override the workflow's own repository and token."""
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/self")
    monkeypatch.setenv("GITHUB_TOKEN", "workflow-token")
    monkeypatch.setenv("INPUT_REPOSITORY", "owner/one\n\nowner/two\n")
    monkeypatch.setenv("INPUT_TOKEN", "input-token")

    settings = ActionSettings()

    assert settings.repositories == ["owner/one", "owner/two"]
    assert settings.token == "input-token"


def test_falls_back_to_workflow_variables(monkeypatch: MonkeyPatch) -> None:
    """Without inputs, the workflow's repository and token are used."""
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/self")
    monkeypatch.setenv("GITHUB_TOKEN", "workflow-token")

    settings = ActionSettings()

    assert settings.repositories == ["owner/self"]
    assert settings.token == "workflow-token"


def test_boolean_inputs_and_empty_values(monkeypatch: MonkeyPatch) -> None:
    """Boolean inputs parse the strings GitHub Actions passes and empty inputs keep defaults."""
    monkeypatch.setenv("INPUT_PRUNE", "false")
    monkeypatch.setenv("INPUT_DRY_RUN", "true")
    monkeypatch.setenv("INPUT_MANIFEST", "")
    monkeypatch.setenv("RUNNER_DEBUG", "1")

    settings = ActionSettings()

    assert settings.INPUT_PRUNE is False
    assert settings.INPUT_DRY_RUN is True
    assert settings.INPUT_MANIFEST == Path(".github/labels.yml")
    assert settings.DEBUG is True
