"""jsbeautify - js-beautify for Python on an embedded JavaScript interpreter.

jsbeautify runs the upstream js-beautify bundles inside QuickJS and puts a
typed configuration layer in front of them. The formatting itself is done
entirely by js-beautify; this package decides which options it receives.

Key Features
------------
- Typed, validated, immutable :class:`FormattingOptions` that normalize
  deterministically into the exact option map js-beautify consumes
- An escape hatch (``additional``) for any option the typed layer does not model
- JSON-shaped :class:`OptionValue` model with strict, all-or-nothing conversion
- Thread-safe and asyncio-friendly wrappers around the single-threaded engine
- ``.jsbeautifyrc``, TOML, YAML and ``pyproject.toml`` configuration files

Requirements
------------
- Python 3.10+
- The ``quickjs`` package and the three js-beautify bundles
  (see ``scripts/update_js_beautify.py``)

Examples
--------
Formatting with the shared process-wide engine:

    >>> import jsbeautify
    >>> jsbeautify.beautify_js("function f(){return 1}")
    'function f() {\\n    return 1\\n}'

Typed options:

    >>> from jsbeautify import FormattingOptions, Spaces
    >>> options = FormattingOptions(indentation=Spaces(2), brace_style="expand")
    >>> jsbeautify.beautify_css("a{color:red}", options)
    'a\\n{\\n  color: red\\n}'

Options from a ``.jsbeautifyrc`` found in the current directory or its parents:

    >>> from jsbeautify import load_config_with_priority, options_for_language
    >>> config = load_config_with_priority()
    >>> jsbeautify.beautify_html("<p>hi</p>", options_for_language(config, "html"))

See Also
--------
jsbeautify.engine : The interpreter-backed formatter
jsbeautify.workers : Thread and asyncio wrappers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "jsbeautify requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from jsbeautify.config import (
    discover_config_file,
    load_config_file,
    load_config_with_priority,
    options_for_language,
)
from jsbeautify.constants import Language
from jsbeautify.engine import Beautifier, bundled_assets_available
from jsbeautify.exceptions import (
    ConfigError,
    DependencyError,
    EngineError,
    EngineUnavailableError,
    FormattingError,
    InvalidOptionValueError,
    JSBeautifyError,
    OptionConversionError,
    ValidationError,
)
from jsbeautify.options import (
    AllowNewlines,
    BeautifyOptions,
    FormattingOptions,
    LineWrap,
    OptionsLike,
    RemoveAllNewlines,
    Spaces,
    Tabs,
)
from jsbeautify.values import (
    NULL,
    BoolValue,
    ListValue,
    MapValue,
    NullValue,
    NumberValue,
    OptionValue,
    StringValue,
    from_generic,
    to_generic,
    try_from_generic,
)
from jsbeautify.workers import AsyncBeautifier, SharedBeautifier, get_default_beautifier, reset_default_beautifier


def beautify_js(source: str, options: OptionsLike = None) -> str:
    """Format JavaScript with the shared process-wide engine.

    Parameters
    ----------
    source : str
        JavaScript source text
    options : FormattingOptions, BeautifyOptions, Mapping or None
        Formatting options; None uses js-beautify's defaults

    Returns
    -------
    str
        Formatted source

    Raises
    ------
    FormattingError
        If the formatter produces no result
    EngineUnavailableError
        If the shared engine cannot be created

    """
    return get_default_beautifier().beautify_js(source, options)


def beautify_css(source: str, options: OptionsLike = None) -> str:
    """Format CSS with the shared process-wide engine."""
    return get_default_beautifier().beautify_css(source, options)


def beautify_html(source: str, options: OptionsLike = None) -> str:
    """Format HTML with the shared process-wide engine."""
    return get_default_beautifier().beautify_html(source, options)


def default_options(language: Language) -> BeautifyOptions:
    """Return js-beautify's built-in defaults for ``language``."""
    return get_default_beautifier().default_options(language)


__all__ = [
    "__version__",
    # Formatting
    "beautify_js",
    "beautify_css",
    "beautify_html",
    "default_options",
    "Beautifier",
    "SharedBeautifier",
    "AsyncBeautifier",
    "get_default_beautifier",
    "reset_default_beautifier",
    "bundled_assets_available",
    # Options
    "FormattingOptions",
    "BeautifyOptions",
    "OptionsLike",
    "Tabs",
    "Spaces",
    "RemoveAllNewlines",
    "AllowNewlines",
    "LineWrap",
    # Values
    "OptionValue",
    "StringValue",
    "NumberValue",
    "BoolValue",
    "ListValue",
    "MapValue",
    "NullValue",
    "NULL",
    "from_generic",
    "to_generic",
    "try_from_generic",
    # Configuration
    "load_config_file",
    "load_config_with_priority",
    "discover_config_file",
    "options_for_language",
    # Exceptions
    "JSBeautifyError",
    "ValidationError",
    "InvalidOptionValueError",
    "OptionConversionError",
    "ConfigError",
    "EngineError",
    "EngineUnavailableError",
    "FormattingError",
    "DependencyError",
]
