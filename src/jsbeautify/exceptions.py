#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the jsbeautify library.

This module defines specialized exception classes for the error conditions
that can occur while building option maps, loading configuration files and
driving the embedded js-beautify interpreter.

Exception Hierarchy
-------------------
- JSBeautifyError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionValueError (typed option outside its allowed choices)
    - OptionConversionError (value not representable as an OptionValue)

  - ConfigError (configuration file discovery and parsing)

  - EngineError (embedded interpreter failures)
    - EngineUnavailableError (interpreter or bundles could not be initialized)
    - FormattingError (formatter returned no result)

  - DependencyError (missing/incompatible packages)

Notes
-----
Negative numeric option values are never reported as errors. They are
clamped to zero when the option map is built.

"""

from typing import Any


class JSBeautifyError(Exception):
    """Base exception class for all jsbeautify-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(JSBeautifyError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionValueError(ValidationError):
    """Exception raised when a typed option is set outside its allowed choices.

    Parameters
    ----------
    parameter_name : str
        Name of the option field
    parameter_value : any
        The rejected value
    choices : sequence of str
        The accepted values for the field

    """

    def __init__(self, parameter_name: str, parameter_value: Any, choices: tuple[str, ...] | list[str]):
        """Initialize with the field name, rejected value and the accepted choices."""
        self.choices = tuple(choices)
        message = f"Invalid value for {parameter_name}: {parameter_value!r}. Expected one of: {', '.join(self.choices)}"
        super().__init__(message, parameter_name=parameter_name, parameter_value=parameter_value)


class OptionConversionError(ValidationError):
    """Exception raised when a value cannot be represented as an OptionValue.

    Conversion is all-or-nothing: a single failing element aborts the whole
    conversion, and ``path`` points at that element.

    Parameters
    ----------
    parameter_value : any
        The element that could not be converted
    path : str, default ""
        Location of the failing element inside the converted structure,
        e.g. ``"[2]"`` or ``".templating[0]"``
    reason : str, optional
        Short explanation of why the element was rejected

    """

    def __init__(self, parameter_value: Any, path: str = "", reason: str | None = None):
        """Initialize with the failing value and its location."""
        self.path = path
        location = f" at {path}" if path else ""
        detail = reason or f"unsupported type {type(parameter_value).__name__}"
        super().__init__(
            f"Cannot convert value{location} to an option value: {detail}",
            parameter_value=parameter_value,
        )


class ConfigError(JSBeautifyError):
    """Exception raised when a configuration file cannot be found or parsed.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the configuration file involved
    original_error : Exception, optional
        The underlying parser or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error with the file path."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class EngineError(JSBeautifyError):
    """Base class for failures of the embedded js-beautify interpreter."""


class EngineUnavailableError(EngineError):
    """Exception raised when the formatting engine cannot be initialized.

    Raised when a bundled script is missing or unreadable, fails to evaluate,
    or does not define the expected global formatter function.

    Parameters
    ----------
    message : str
        Description of the failure
    asset_path : str, optional
        Path of the asset involved, if any
    original_error : Exception, optional
        The underlying interpreter or I/O error

    """

    def __init__(self, message: str, asset_path: str | None = None, original_error: Exception | None = None):
        """Initialize the error with the asset path."""
        super().__init__(message, original_error=original_error)
        self.asset_path = asset_path


class FormattingError(EngineError):
    """Exception raised when the formatter produced no result for an input.

    js-beautify signals unusable input by returning ``undefined`` rather than
    throwing. The condition is recoverable: the engine remains usable.

    Parameters
    ----------
    language : str
        Which formatter was invoked ("js", "css" or "html")
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The interpreter exception, when the formatter threw

    """

    def __init__(self, language: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the formatter language."""
        self.language = language
        super().__init__(message or f"The {language} formatter returned no result", original_error=original_error)


class DependencyError(JSBeautifyError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    component_name : str
        Name of the component requiring the dependencies
    missing_packages : list of tuple
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list of tuple, optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command
    message : str, optional
        Custom error message
    original_import_error : ImportError, optional
        The original ImportError that triggered this exception

    """

    def __init__(
        self,
        component_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package information."""
        self.version_mismatches = version_mismatches or []

        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{pkg}{spec}'" for pkg, spec in missing_packages)
                message_parts.append(f"'{component_name}' requires the following packages: {pkg_list}")

            if self.version_mismatches:
                mismatch_list = ", ".join(
                    f"'{pkg}' (requires {req}, installed {inst})" for pkg, req, inst in self.version_mismatches
                )
                message_parts.append(f"Version mismatches: {mismatch_list}")

            message = ". ".join(message_parts) + "."

            if not install_command:
                install_command = "pip install " + " ".join(
                    [f"'{pkg}{spec}'" for pkg, spec in missing_packages]
                    + [f"'{pkg}{req}'" for pkg, req, _ in self.version_mismatches]
                )

            message += f"\nInstall with: {install_command}"

        super().__init__(message, original_error=original_import_error)
        self.component_name = component_name
        self.missing_packages = missing_packages
        self.install_command = install_command
        self.original_import_error = original_import_error
