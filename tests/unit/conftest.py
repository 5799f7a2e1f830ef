"""Fixtures for unit tests."""

from typing import Generator
from unittest.mock import AsyncMock

import pytest
import structlog

from github_label_sync.github.abc import LabelRepositoryBase


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog and structlog.testing.capture_logs."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def label_repository() -> AsyncMock:
    """A mocked label repository with no labels."""
    repository = AsyncMock(spec=LabelRepositoryBase)
    repository.list_labels.return_value = []
    return repository
