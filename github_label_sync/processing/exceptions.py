"""Custom exceptions for the processing module."""

from pathlib import Path
from typing import Any


class ManifestNotFoundError(FileNotFoundError):
    """Raised when the label manifest file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Label manifest not found: {path}")
        self.path = path


class ManifestParseError(Exception):
    """Raised when errors are encountered while parsing the label manifest."""

    def __init__(self, path: Path, errors: list[dict[str, Any]]) -> None:
        super().__init__(f"Errors encountered while parsing label manifest {path}: {errors}")
        self.path = path
        self.errors = errors
