#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for dependency checking and the DEBUG timer."""

import logging

import pytest

from jsbeautify.exceptions import DependencyError
from jsbeautify.utils import check_version_requirement, debug_timer, get_package_version, requires_dependencies


@pytest.mark.unit
class TestPackageVersions:
    """Test installed version lookup."""

    def test_installed_package(self):
        assert get_package_version("pytest") is not None

    def test_missing_package(self):
        assert get_package_version("definitely-not-installed-package-xyz") is None

    def test_requirement_met(self):
        meets, installed = check_version_requirement("pytest", ">=1.0")
        assert meets is True
        assert installed is not None

    def test_requirement_not_met(self):
        meets, installed = check_version_requirement("pytest", "<1.0")
        assert meets is False
        assert installed is not None

    def test_requirement_for_missing_package(self):
        assert check_version_requirement("definitely-not-installed-package-xyz", ">=1") == (False, None)

    def test_invalid_specifier(self):
        with pytest.raises(ValueError):
            check_version_requirement("pytest", "not a spec")


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the dependency-checking decorator."""

    def test_passes_through_when_available(self):
        @requires_dependencies("engine", [("pytest", "pytest", ">=1.0")])
        def build(value):
            return value * 2

        assert build(21) == 42

    def test_missing_package(self):
        """Test a missing module raises DependencyError with an install hint."""

        @requires_dependencies("engine", [("quickjs-missing", "quickjs_missing_module_xyz", ">=1.19")])
        def build():
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            build()

        error = exc_info.value
        assert error.missing_packages == [("quickjs-missing", ">=1.19")]
        assert error.component_name == "engine"
        assert "pip install" in error.install_command
        assert isinstance(error.original_import_error, ImportError)

    def test_version_mismatch(self):
        @requires_dependencies("engine", [("pytest", "pytest", "<1.0")])
        def build():
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            build()

        assert exc_info.value.version_mismatches[0][0] == "pytest"
        assert "Version mismatches" in str(exc_info.value)


@pytest.mark.unit
class TestDebugTimer:
    """Test timing logs."""

    def test_logs_when_debug_enabled(self, caplog):
        logger = logging.getLogger("jsbeautify.tests.timer")
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            with debug_timer(logger, "Evaluating beautify.min.js"):
                pass

        assert "Evaluating beautify.min.js completed in" in caplog.text

    def test_silent_otherwise(self, caplog):
        logger = logging.getLogger("jsbeautify.tests.timer")
        with caplog.at_level(logging.INFO, logger=logger.name):
            with debug_timer(logger, "Evaluating beautify.min.js"):
                pass

        assert caplog.text == ""
