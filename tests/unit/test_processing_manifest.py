"""Unit tests for the ManifestLoader class."""

from pathlib import Path

import pytest
from _pytest.logging import LogCaptureFixture

from github_label_sync.processing.exceptions import ManifestNotFoundError, ManifestParseError
from github_label_sync.processing.manifest import ManifestLoader
from github_label_sync.schemas.labels import LabelModel

VALID_MANIFEST = """
- name: bug
  description: Something isn't working
  color: d73a4a
- name: documentation
  color: "0075ca"
- name: question
"""

MAPPING_MANIFEST = """
labels:
  - name: bug
    color: d73a4a
"""

MANIFEST_EXTRA_FIELDS = """
- name: bug
  color: d73a4a
  aliases: [defect]
"""

MANIFEST_NULL_FIELDS = """
- name: bug
  description:
  color: ~
- name: enhancement
  description: null
"""

MANIFEST_MISSING_NAME = """
- name: bug
- description: no name here
- 12345
"""

MANIFEST_MISSING_LABELS_KEY = """
not_labels:
  - name: bug
"""

MANIFEST_SCALAR = """
just a string
"""

MALFORMED_YAML = "- name: [bug"


def write_manifest(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "labels.yml"
    path.write_text(content)
    return path


def test_load_valid_manifest_preserves_order(tmp_path: Path) -> None:
    """Labels are loaded in file order with optional fields defaulting to empty strings."""
    labels = ManifestLoader().load(write_manifest(tmp_path, VALID_MANIFEST))
    assert labels == [
        LabelModel(name="bug", description="Something isn't working", color="d73a4a"),
        LabelModel(name="documentation", description="", color="0075ca"),
        LabelModel(name="question", description="", color=""),
    ]


def test_load_mapping_with_labels_key(tmp_path: Path) -> None:
    """A mapping with a top-level 'labels' key is accepted."""
    labels = ManifestLoader().load(write_manifest(tmp_path, MAPPING_MANIFEST))
    assert labels == [LabelModel(name="bug", color="d73a4a")]


def test_load_accepts_string_path(tmp_path: Path) -> None:
    """The path may be given as a string."""
    labels = ManifestLoader().load(str(write_manifest(tmp_path, MAPPING_MANIFEST)))
    assert [label.name for label in labels] == ["bug"]


def test_empty_manifest_has_no_labels(tmp_path: Path) -> None:
    """An empty file is an empty manifest."""
    assert ManifestLoader().load(write_manifest(tmp_path, "")) == []


def test_duplicate_names_are_kept_in_order(tmp_path: Path) -> None:
    """The loader keeps duplicates; the reconciler resolves them by last-write-wins."""
    labels = ManifestLoader().load(write_manifest(tmp_path, "- name: bug\n  color: '000000'\n- name: bug\n  color: ffffff\n"))
    assert [label.color for label in labels] == ["000000", "ffffff"]


def test_null_description_and_color_become_empty(tmp_path: Path) -> None:
    """Null descriptions and colors, written any way YAML allows, become empty strings."""
    labels = ManifestLoader().load(write_manifest(tmp_path, MANIFEST_NULL_FIELDS))
    assert labels == [LabelModel(name="bug", description="", color=""), LabelModel(name="enhancement", description="", color="")]


@pytest.mark.parametrize(
    "color",
    [
        pytest.param("008672", id="leading zeros"),
        pytest.param("000000", id="all zeros"),
        pytest.param("123456", id="only digits"),
        pytest.param("5319e7", id="scientific notation"),
        pytest.param("0075ca", id="hex letters"),
    ],
)
def test_unquoted_color_keeps_its_text(tmp_path: Path, color: str) -> None:
    """Unquoted colors are read exactly as written, never as numbers."""
    labels = ManifestLoader().load(write_manifest(tmp_path, f"- name: help wanted\n  color: {color}\n"))
    assert labels == [LabelModel(name="help wanted", color=color)]


def test_unquoted_scalars_are_not_resolved(tmp_path: Path) -> None:
    """Names and descriptions that look like booleans or numbers stay as written."""
    labels = ManifestLoader().load(write_manifest(tmp_path, "- name: yes\n  description: 1.10\n"))
    assert labels == [LabelModel(name="yes", description="1.10")]


def test_null_name_is_reported(tmp_path: Path) -> None:
    """A label with a null name is invalid."""
    with pytest.raises(ManifestParseError) as exc_info:
        ManifestLoader().load(write_manifest(tmp_path, "- name: ~\n  color: ffffff\n"))
    assert [error["label_index"] for error in exc_info.value.errors] == [0]


def test_empty_labels_key_has_no_labels(tmp_path: Path) -> None:
    """A 'labels' key with no value is an empty manifest."""
    assert ManifestLoader().load(write_manifest(tmp_path, "labels:\n")) == []


def test_extra_fields_logged_and_ignored(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    """Unknown keys are logged as a warning and ignored."""
    labels = ManifestLoader().load(write_manifest(tmp_path, MANIFEST_EXTRA_FIELDS))
    assert labels == [LabelModel(name="bug", color="d73a4a")]
    assert "Extra fields in label will be ignored" in caplog.text


def test_missing_file_raises_manifest_not_found(tmp_path: Path) -> None:
    """A missing manifest raises ManifestNotFoundError, which is also a FileNotFoundError."""
    path = tmp_path / "missing.yml"
    with pytest.raises(ManifestNotFoundError) as exc_info:
        ManifestLoader().load(path)
    assert exc_info.value.path == path
    assert isinstance(exc_info.value, FileNotFoundError)


def test_directory_raises_manifest_not_found(tmp_path: Path) -> None:
    """A directory is not a manifest."""
    with pytest.raises(ManifestNotFoundError):
        ManifestLoader().load(tmp_path)


def test_malformed_yaml_raises_parse_error(tmp_path: Path) -> None:
    """YAML syntax errors raise ManifestParseError."""
    with pytest.raises(ManifestParseError) as exc_info:
        ManifestLoader().load(write_manifest(tmp_path, MALFORMED_YAML))
    assert len(exc_info.value.errors) == 1


def test_invalid_entries_are_all_reported(tmp_path: Path) -> None:
    """Every invalid entry is collected before raising."""
    with pytest.raises(ManifestParseError) as exc_info:
        ManifestLoader().load(write_manifest(tmp_path, MANIFEST_MISSING_NAME))
    assert [error["label_index"] for error in exc_info.value.errors] == [1, 2]
    assert exc_info.value.errors[1]["error"] == "Label entry is not a mapping"


@pytest.mark.parametrize(
    "content, message",
    [
        pytest.param(MANIFEST_MISSING_LABELS_KEY, "Missing top-level 'labels' key", id="mapping without labels key"),
        pytest.param(MANIFEST_SCALAR, "YAML file is neither a list nor a mapping", id="scalar document"),
        pytest.param("labels: bug\n", "Top-level 'labels' key is not a list", id="labels key is not a list"),
    ],
)
def test_wrong_document_shape_raises_parse_error(tmp_path: Path, content: str, message: str) -> None:
    """Documents that are not a list of labels raise ManifestParseError."""
    with pytest.raises(ManifestParseError) as exc_info:
        ManifestLoader().load(write_manifest(tmp_path, content))
    assert exc_info.value.errors == [{"file": str(tmp_path / "labels.yml"), "error": message}]
