"""Pytest configuration and shared fixtures for the jsbeautify test suite.

This module provides shared fixtures, test configuration, and the Hypothesis
profiles used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import write_fake_bundles

from jsbeautify.constants import ENV_ASSETS_DIR, ENV_CONFIG_PATH, ENV_LOG_LEVEL

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
    config.addinivalue_line("markers", "engine: Tests that run the embedded JavaScript interpreter")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the developer's jsbeautify environment variables out of tests."""
    for name in (ENV_ASSETS_DIR, ENV_CONFIG_PATH, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_assets_dir(tmp_path) -> Path:
    """Provide a directory holding stand-in js-beautify bundles.

    Returns
    -------
    Path
        Directory containing beautify.min.js, beautify-css.min.js and
        beautify-html.min.js stand-ins.

    """
    return write_fake_bundles(tmp_path / "assets")


@pytest.fixture
def quickjs_module():
    """Skip the test when the embedded interpreter is not installed."""
    return pytest.importorskip("quickjs")
