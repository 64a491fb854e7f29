"""Pytest configuration and shared fixtures for the jsoncolordiff test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import json
import logging
import os
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove environment variables that change CLI defaults."""
    for key in list(os.environ):
        if key.startswith("JSONCOLORDIFF_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Provide a helper that writes a value as a JSON file under tmp_path.

    Returns
    -------
    Callable[[str, object], Path]
        Function taking a file name and a JSON-serializable value.

    """

    def _write(name: str, value: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(value), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cat_and_dog() -> tuple[bytes, bytes]:
    """Provide two documents that differ in a single scalar field.

    Returns
    -------
    tuple[bytes, bytes]
        Expected and actual JSON documents.

    """
    return b'{"name": "Cat", "id": 3}', b'{"name": "Dog", "id": 3}'


@pytest.fixture
def nested_documents() -> tuple[bytes, bytes]:
    """Provide two documents that differ deep inside a nested mapping.

    Returns
    -------
    tuple[bytes, bytes]
        Expected and actual JSON documents.

    """
    return (
        b'{"level1": {"level2": {"name": "Cat", "id": 3}}}',
        b'{"level1": {"level2": {"name": "Dog", "id": 3}}}',
    )


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers and level changed by configure_logging()."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers:
            if handler not in handlers:
                handler.close()
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
