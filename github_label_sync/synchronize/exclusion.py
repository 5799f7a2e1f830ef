"""Filters current GitHub labels out of synchronization by name."""

import re
from typing import Protocol, Sequence, runtime_checkable

import structlog

from github_label_sync.schemas.labels import LabelModel
from github_label_sync.synchronize.exceptions import PatternError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@runtime_checkable
class LabelMatcher(Protocol):
    """Protocol for objects deciding whether a label name is excluded from synchronization."""

    def matches(self, name: str) -> bool:
        """Return True if the label called name must be left untouched."""
        ...


class RegexLabelMatcher:
    """Excludes label names matching a regular expression anywhere in the name (re.search semantics)."""

    def __init__(self, pattern: str) -> None:
        """Compile the pattern, raising PatternError if it is not a valid regular expression."""
        try:
            self.regex = re.compile(pattern)
        except re.error as exc:
            raise PatternError(pattern, str(exc)) from exc
        self.pattern = pattern

    def matches(self, name: str) -> bool:
        """Return True if the pattern matches any part of name."""
        return self.regex.search(name) is not None


def compile_exclude_pattern(pattern: str) -> LabelMatcher | None:
    """Build the matcher for an exclusion pattern, or None when the pattern is empty."""
    if not pattern:
        return None
    return RegexLabelMatcher(pattern)


def filter_excluded_labels(current_labels: Sequence[LabelModel], exclude: str | LabelMatcher | None) -> list[LabelModel]:
    """Drop the current labels excluded by a pattern or an already-built matcher.

    A pattern string is compiled first, so an invalid pattern raises PatternError before
    any label is examined. An empty pattern or None keeps every label. The result is a
    new list in the original order.
    """
    matcher = compile_exclude_pattern(exclude) if isinstance(exclude, str) else exclude
    if matcher is None:
        return list(current_labels)
    logger.info("Excluding labels matching pattern", pattern=getattr(matcher, "pattern", None))
    kept: list[LabelModel] = []
    for label in current_labels:
        if matcher.matches(label.name):
            logger.info("Excluding label from sync", label_name=label.name, color=label.color, description=label.description)
        else:
            logger.info("Including label in sync", label_name=label.name, color=label.color, description=label.description)
            kept.append(label)
    return kept
