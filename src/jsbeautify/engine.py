#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsbeautify/engine.py
"""Embedded js-beautify formatting engine.

This module loads the upstream js-beautify browser bundles into a QuickJS
interpreter and exposes the three formatter functions, ``js_beautify``,
``css_beautify`` and ``html_beautify``, together with their
``defaultOptions()`` helpers.

Options cross the interpreter boundary as a JSON document. Every value in a
:class:`~jsbeautify.options.BeautifyOptions` is JSON-safe by construction,
so serialization cannot fail.

Thread safety
-------------
A :class:`Beautifier` owns one interpreter context and must not be used by
two threads at once. Use :mod:`jsbeautify.workers` to share an engine across
threads or from asyncio code.

Asset lookup
------------
1. The ``assets_dir`` argument
2. The ``JSBEAUTIFY_ASSETS_DIR`` environment variable
3. The ``assets`` directory shipped inside the ``jsbeautify`` package
"""

from __future__ import annotations

import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any

from jsbeautify.constants import (
    ASSETS_PACKAGE_DIR,
    BUNDLE_NAMES,
    ENV_ASSETS_DIR,
    FORMATTER_GLOBALS,
    LANGUAGES,
    Language,
)
from jsbeautify.exceptions import EngineUnavailableError, FormattingError, InvalidOptionValueError
from jsbeautify.options import BeautifyOptions, OptionsLike, resolve_options
from jsbeautify.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

QUICKJS_REQUIREMENT = ("quickjs", "quickjs", ">=1.19")

# Browser globals expected by the bundles, a console that forwards to Python
# logging, and small entry points that keep JS objects inside the interpreter.
_PRELUDE = """
var window = this;
var self = this;
var global = this;

function __jsbeautify_str(arg) {
    return typeof arg === 'object' ? JSON.stringify(arg) : String(arg);
}

function __jsbeautify_console(level) {
    return function () {
        var parts = Array.prototype.slice.call(arguments).map(__jsbeautify_str);
        __jsbeautify_log(level, parts.join(' '));
    };
}

var console = {
    log: __jsbeautify_console('log'),
    info: __jsbeautify_console('info'),
    warn: __jsbeautify_console('warn'),
    error: __jsbeautify_console('error')
};

function __jsbeautify_has(name) {
    return typeof globalThis[name] === 'function';
}

function __jsbeautify_call(name, source, optionsJson) {
    var formatter = globalThis[name];
    var result = optionsJson === null ? formatter(source) : formatter(source, JSON.parse(optionsJson));
    if (result === undefined || result === null) {
        return null;
    }
    return String(result);
}

function __jsbeautify_defaults(name) {
    var formatter = globalThis[name];
    if (!formatter || typeof formatter.defaultOptions !== 'function') {
        return null;
    }
    return JSON.stringify(formatter.defaultOptions());
}
"""


def resolve_assets_dir(assets_dir: str | os.PathLike[str] | None = None) -> Path:
    """Return the directory holding the js-beautify bundles.

    Parameters
    ----------
    assets_dir : str or PathLike, optional
        Explicit directory. When omitted, ``JSBEAUTIFY_ASSETS_DIR`` is
        consulted, then the package's own ``assets`` directory.

    Returns
    -------
    Path
        The resolved directory (not checked for existence)

    """
    if assets_dir is not None:
        return Path(assets_dir)
    env_dir = os.environ.get(ENV_ASSETS_DIR, "").strip()
    if env_dir:
        return Path(env_dir)
    return Path(str(resources.files("jsbeautify") / ASSETS_PACKAGE_DIR))


def bundled_assets_available(assets_dir: str | os.PathLike[str] | None = None) -> bool:
    """Check whether all three js-beautify bundles are present."""
    directory = resolve_assets_dir(assets_dir)
    return all((directory / name).is_file() for name in BUNDLE_NAMES)


class Beautifier:
    """js-beautify running inside an embedded QuickJS interpreter.

    Construction either returns a ready engine or raises; a half-initialized
    engine is never handed out.

    Parameters
    ----------
    assets_dir : str or PathLike, optional
        Directory containing ``beautify.min.js``, ``beautify-css.min.js``
        and ``beautify-html.min.js``. See :func:`resolve_assets_dir`.

    Raises
    ------
    DependencyError
        If the ``quickjs`` package is not installed
    EngineUnavailableError
        If a bundle is missing, unreadable or fails to evaluate, or if a
        formatter function is not defined after loading

    Examples
    --------
        >>> engine = Beautifier()
        >>> engine.beautify_js("function f(){return 1}")
        'function f() {\\n    return 1\\n}'
        >>> engine.beautify_css("a{color:red}", FormattingOptions(indentation=Spaces(2)))
        'a {\\n  color: red\\n}'

    """

    @requires_dependencies("engine", [QUICKJS_REQUIREMENT])
    def __init__(self, assets_dir: str | os.PathLike[str] | None = None):
        import quickjs

        self._jsexception = quickjs.JSException
        self.assets_dir = resolve_assets_dir(assets_dir)

        context = quickjs.Context()
        context.add_callable("__jsbeautify_log", _forward_console)
        try:
            context.eval(_PRELUDE)
        except quickjs.JSException as e:
            raise EngineUnavailableError("Failed to initialize the interpreter prelude", original_error=e) from e

        for name in BUNDLE_NAMES:
            path = self.assets_dir / name
            source = self._read_asset(path)
            with debug_timer(logger, f"Evaluating {name}"):
                try:
                    context.eval(source)
                except quickjs.JSException as e:
                    raise EngineUnavailableError(
                        f"Failed to evaluate {name}: {e}", asset_path=str(path), original_error=e
                    ) from e

        has_function = context.get("__jsbeautify_has")
        for language, global_name in FORMATTER_GLOBALS.items():
            if not has_function(global_name):
                raise EngineUnavailableError(
                    f"{global_name} is not defined after loading the {language} bundle",
                    asset_path=str(self.assets_dir),
                )

        self._context = context
        self._call = context.get("__jsbeautify_call")
        self._defaults = context.get("__jsbeautify_defaults")
        logger.debug("js-beautify engine ready (assets: %s)", self.assets_dir)

    @staticmethod
    def _read_asset(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise EngineUnavailableError(f"Missing js-beautify asset: {path}", asset_path=str(path), original_error=e) from e
        except (OSError, UnicodeDecodeError) as e:
            raise EngineUnavailableError(
                f"Could not read js-beautify asset {path}: {e}", asset_path=str(path), original_error=e
            ) from e

    def beautify(self, language: Language, source: str, options: OptionsLike = None) -> str:
        """Format ``source`` with the formatter for ``language``.

        Parameters
        ----------
        language : {"js", "css", "html"}
            Which formatter to run
        source : str
            Text to format
        options : FormattingOptions, BeautifyOptions, Mapping or None
            Formatting options. An empty option map lets js-beautify apply
            its own defaults.

        Returns
        -------
        str
            The formatted text

        Raises
        ------
        FormattingError
            If the formatter returns no result or throws. The engine stays
            usable afterwards.
        InvalidOptionValueError
            If ``language`` is not one of the supported languages

        """
        if language not in FORMATTER_GLOBALS:
            raise InvalidOptionValueError("language", language, LANGUAGES)

        option_map = resolve_options(options)
        options_json = json.dumps(option_map.to_dict()) if option_map else None

        try:
            result = self._call(FORMATTER_GLOBALS[language], source, options_json)
        except self._jsexception as e:
            raise FormattingError(language, f"The {language} formatter raised: {e}", original_error=e) from e

        if result is None:
            raise FormattingError(language)
        return str(result)

    def beautify_js(self, source: str, options: OptionsLike = None) -> str:
        """Format JavaScript source text."""
        return self.beautify("js", source, options)

    def beautify_css(self, source: str, options: OptionsLike = None) -> str:
        """Format CSS source text."""
        return self.beautify("css", source, options)

    def beautify_html(self, source: str, options: OptionsLike = None) -> str:
        """Format HTML source text, including embedded scripts and styles."""
        return self.beautify("html", source, options)

    def default_options(self, language: Language) -> BeautifyOptions:
        """Return the formatter's built-in defaults.

        Entries whose values cannot be represented as option values are
        dropped.

        Raises
        ------
        EngineUnavailableError
            If the loaded bundle exposes no ``defaultOptions()``

        """
        if language not in FORMATTER_GLOBALS:
            raise InvalidOptionValueError("language", language, LANGUAGES)

        global_name = FORMATTER_GLOBALS[language]
        try:
            raw = self._defaults(global_name)
        except self._jsexception as e:
            raise EngineUnavailableError(f"{global_name}.defaultOptions() failed: {e}", original_error=e) from e
        if raw is None:
            raise EngineUnavailableError(f"{global_name} does not provide defaultOptions()")

        decoded: Any = json.loads(raw)
        if not isinstance(decoded, dict):
            raise EngineUnavailableError(f"{global_name}.defaultOptions() did not return an object")
        return BeautifyOptions.from_dict(decoded)

    def default_js_options(self) -> BeautifyOptions:
        """Return js_beautify's built-in defaults."""
        return self.default_options("js")

    def default_css_options(self) -> BeautifyOptions:
        """Return css_beautify's built-in defaults."""
        return self.default_options("css")

    def default_html_options(self) -> BeautifyOptions:
        """Return html_beautify's built-in defaults."""
        return self.default_options("html")

    def available_resources(self, suffix: str = "js") -> list[str]:
        """List asset base names with the given file suffix.

        Parameters
        ----------
        suffix : str, default "js"
            Extension without the leading dot

        Returns
        -------
        list of str
            Sorted file names with ``.<suffix>`` stripped, e.g. ``"beautify.min"``

        """
        extension = f".{suffix}"
        return sorted(
            path.name[: -len(extension)]
            for path in self.assets_dir.iterdir()
            if path.is_file() and path.name.endswith(extension)
        )


def _forward_console(level: str, message: str) -> None:
    logger.debug("[js:%s] %s", level, message)
