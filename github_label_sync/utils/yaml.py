"""Contains utility functions for working with YAML files."""

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

# Every scalar is loaded as the text written in the file, so label colors such as
# 008672 or 5319e7 are never read as numbers.
yaml = YAML(typ="base")

YAML_NULL_LITERALS = frozenset({"", "~", "null", "Null", "NULL"})


def is_yaml_null(value: Any) -> bool:
    """Return True if value is a YAML null, given as None or as its unresolved scalar text."""
    return value is None or (isinstance(value, str) and value in YAML_NULL_LITERALS)


def load_yaml_file(path: Path) -> Any:
    """Loads a YAML file and returns the parsed document with scalars kept as strings."""
    with open(path, encoding="utf-8") as f:
        return yaml.load(f)
