"""Pytest configuration and shared fixtures for the events2md test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import logging
import os
from typing import Callable

import pytest

from events2md.events import BeginDocument, EndDocument, Event
from events2md.logging_utils import PACKAGE_LOGGER_NAME
from events2md.options import MarkdownRendererOptions
from events2md.renderers.markdown import MarkdownEventRenderer

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def render() -> Callable[..., str]:
    """Render a list of events wrapped in BeginDocument/EndDocument.

    Keyword arguments are passed to MarkdownRendererOptions.
    """

    def _render(events: list[Event], **option_values) -> str:
        options = MarkdownRendererOptions(**option_values) if option_values else None
        renderer = MarkdownEventRenderer(options)
        return renderer.render_to_string([BeginDocument(), *events, EndDocument()])

    return _render


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty directory with no home configuration and no config env var."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    monkeypatch.delenv("EVENTS2MD_CONFIG", raising=False)
    return work


@pytest.fixture(autouse=True)
def restore_package_logger():
    """The CLI reconfigures the events2md logger; put its previous state back afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
