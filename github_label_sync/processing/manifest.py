"""Handles reading and validating the YAML label manifest.

This module provides the ManifestLoader class, which loads labels from a YAML file and
validates each entry against the LabelModel schema. The manifest is either a top-level
sequence of label mappings or a mapping with a 'labels' key holding that sequence. All
validation errors are collected before a single ManifestParseError is raised. All
logging is performed using structlog.
"""

from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError
from ruamel.yaml.error import YAMLError
from structlog.stdlib import BoundLogger

from github_label_sync.processing.exceptions import ManifestNotFoundError, ManifestParseError
from github_label_sync.schemas.labels import LabelModel, LabelsYAMLModel
from github_label_sync.utils.yaml import is_yaml_null, load_yaml_file

logger: BoundLogger = structlog.get_logger(__name__)  # type: ignore


class ManifestLoader:
    """Loads the ordered list of desired labels from a YAML manifest."""

    def load(self, path: Path | str) -> list[LabelModel]:
        """Load and validate the labels in the manifest at the given path, preserving file order."""
        return self.load_labels_model(path).labels

    def load_labels_model(self, path: Path | str) -> LabelsYAMLModel:
        """Load and validate the manifest at the given path, returning a LabelsYAMLModel."""
        path = Path(path)
        if not path.is_file():
            logger.error("Label manifest not found", path=str(path))
            raise ManifestNotFoundError(path)

        try:
            data = load_yaml_file(path)
        except YAMLError as exc:
            logger.error("Failed to parse YAML file", path=str(path), error=str(exc))
            raise ManifestParseError(path, [{"file": str(path), "error": str(exc)}]) from exc

        errors: list[dict[str, Any]] = []
        labels: list[LabelModel] = []
        for idx, label_dict in enumerate(self._extract_labels(data, path, errors)):
            if not isinstance(label_dict, dict):
                logger.warning(
                    "Label entry is not a mapping",
                    file=str(path),
                    label_index=idx,
                    actual_type=type(label_dict).__name__,
                )
                errors.append({"file": str(path), "label_index": idx, "error": "Label entry is not a mapping"})
                continue
            extra_fields = set(label_dict.keys()) - set(LabelModel.model_fields.keys())
            if extra_fields:
                logger.warning(
                    "Extra fields in label will be ignored",
                    file=str(path),
                    label_index=idx,
                    extra_fields=sorted(str(field) for field in extra_fields),
                )
            # A null name stays missing so validation reports it; a null description or color is empty.
            filtered = {
                k: ("" if is_yaml_null(v) else v)
                for k, v in label_dict.items()
                if k in LabelModel.model_fields and not (k == "name" and is_yaml_null(v))
            }
            try:
                labels.append(LabelModel(**filtered))
            except ValidationError as ve:
                logger.error("Validation error for label", file=str(path), label_index=idx, error=ve.errors())
                errors.append({"file": str(path), "label_index": idx, "error": ve.errors()})

        if errors:
            logger.error("One or more errors occurred while parsing the label manifest", errors=errors)
            raise ManifestParseError(path, errors)

        logger.info("Loaded label manifest", path=str(path), label_count=len(labels))
        return LabelsYAMLModel(labels=labels)

    def _extract_labels(self, data: Any, path: Path, errors: list[dict[str, Any]]) -> list[Any]:
        # An empty document is an empty manifest.
        if is_yaml_null(data):
            return []
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            if "labels" not in data:
                logger.error("YAML mapping missing top-level 'labels' key", path=str(path))
                errors.append({"file": str(path), "error": "Missing top-level 'labels' key"})
                return []
            labels = data["labels"]
            if is_yaml_null(labels):
                return []
            if not isinstance(labels, list):
                logger.error("Top-level 'labels' key is not a list", path=str(path))
                errors.append({"file": str(path), "error": "Top-level 'labels' key is not a list"})
                return []
            return labels
        logger.error("YAML file is neither a list nor a mapping", path=str(path))
        errors.append({"file": str(path), "error": "YAML file is neither a list nor a mapping"})
        return []
