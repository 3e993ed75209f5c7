"""Root pytest configuration."""
import logging

import pytest

from config_cascade.utils.logging import NullHandler, StructuredJSONFormatter
from tests.factories import ConfigTreeFactory, create_env


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that exercise the full cascade on disk"
    )


@pytest.fixture
def config_tree(tmp_path):
    """Empty config directory wrapped in a ConfigTreeFactory."""
    return ConfigTreeFactory(tmp_path / "config")


@pytest.fixture
def empty_env():
    """Environment lookup with no variables set."""
    return create_env()


@pytest.fixture
def restore_logging():
    """Remove handlers installed by configure_logging() after the test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if isinstance(handler, NullHandler) or isinstance(
            handler.formatter, StructuredJSONFormatter
        ):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
