"""Utility modules for shared functionality."""

from .github import parse_repository_list, split_repository_in_configuration
from .logging import configure_logging
from .yaml import is_yaml_null, load_yaml_file

__all__ = [
    "configure_logging",
    "is_yaml_null",
    "load_yaml_file",
    "parse_repository_list",
    "split_repository_in_configuration",
]
