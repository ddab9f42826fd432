"""Pytest configuration and shared fixtures for the delta2html test suite."""

import logging
import os

import pytest
from utils import ANTHEM_FORMATS, BASIC_FORMATS

from delta2html import FormatRegistry

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will be skipped
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logging changes made by the CLI so later tests see default propagation."""
    package_logger = logging.getLogger("delta2html")
    yield
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def basic_formats() -> FormatRegistry:
    """Provide the basic format catalog."""
    return BASIC_FORMATS


@pytest.fixture
def anthem_formats() -> FormatRegistry:
    """Provide the editorial format catalog with asset embeds."""
    return ANTHEM_FORMATS


@pytest.fixture
def list_formats() -> FormatRegistry:
    """Provide a registry with ordered and bulleted line formats."""
    return FormatRegistry(
        {
            "list": {"category": "line", "tag": "li", "parentTag": "ol"},
            "bullet": {"category": "line", "tag": "li", "parentTag": "ul"},
        }
    )
