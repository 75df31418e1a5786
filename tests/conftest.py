"""Pytest configuration and shared fixtures for the bvmarkup test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from bvmarkup.diagnostics import DiagnosticCollector
from bvmarkup.options import ComponentOptions
from bvmarkup.transforms import TransformRegistry

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package logger after tests that call configure_logging."""
    package_logger = logging.getLogger("bvmarkup")
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)


@pytest.fixture
def collector() -> DiagnosticCollector:
    """Provide an empty diagnostic collector to use as a sink."""
    return DiagnosticCollector()


@pytest.fixture
def plain_options() -> ComponentOptions:
    """Provide options with Markdown rendering turned off.

    Returns
    -------
    ComponentOptions
        Default options except that migrated text is inserted verbatim.

    """
    return ComponentOptions(render_markdown=False)


@pytest.fixture
def fresh_registry() -> TransformRegistry:
    """Provide a registry with only the built-in transformers."""
    return TransformRegistry()
