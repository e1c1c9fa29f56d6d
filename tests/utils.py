"""Test utilities for the jsbeautify test suite.

This module provides stand-in js-beautify bundles so that engine tests can
run the embedded interpreter without the real upstream assets.

Each stand-in formatter echoes its input as ``"<language>:<source>"``
followed by a newline and the JSON encoding of the options object it
received (``null`` when called without options). Special inputs trigger
the formatter's failure modes:

- ``"__undefined__"`` makes the formatter return ``undefined``
- ``"__throw__"`` makes the formatter throw
- ``"__log__"`` makes the formatter write to ``console.log`` first
"""

import json
from pathlib import Path

_FORMATTER_TEMPLATE = """
(function (root) {{
    function {name}(source, options) {{
        if (source === "__undefined__") {{
            return undefined;
        }}
        if (source === "__throw__") {{
            throw new Error("stand-in {language} formatter failure");
        }}
        if (source === "__log__") {{
            console.log("formatting", {{language: "{language}"}});
        }}
        var received = options === undefined ? null : options;
        return "{language}:" + source + "\\n" + JSON.stringify(received);
    }}
    {defaults}
    root.{name} = {name};
}})(typeof window !== "undefined" ? window : this);
"""

_DEFAULTS_TEMPLATE = """
    {name}.defaultOptions = function () {{
        return {defaults};
    }};
"""

FAKE_DEFAULTS = {
    "js": {"indent_size": 4, "indent_char": " ", "brace_style": "collapse", "templating": ["auto"]},
    "css": {"indent_size": 4, "selector_separator_newline": True, "newline_between_rules": True},
    "html": {"indent_size": 4, "wrap_attributes": "auto", "inline": ["a", "b"], "unformatted_content_delimiter": None},
}

BUNDLE_FILES = {
    "js": ("beautify.min.js", "js_beautify"),
    "css": ("beautify-css.min.js", "css_beautify"),
    "html": ("beautify-html.min.js", "html_beautify"),
}


def fake_bundle_source(language: str, with_defaults: bool = True) -> str:
    """Build the source of a stand-in bundle for ``language``."""
    _, name = BUNDLE_FILES[language]
    defaults = ""
    if with_defaults:
        defaults = _DEFAULTS_TEMPLATE.format(name=name, defaults=json.dumps(FAKE_DEFAULTS[language]))
    return _FORMATTER_TEMPLATE.format(name=name, language=language, defaults=defaults)


def write_fake_bundles(directory: Path, skip: tuple[str, ...] = (), overrides: dict | None = None) -> Path:
    """Write stand-in bundles into ``directory``.

    Parameters
    ----------
    directory : Path
        Target directory (created if needed)
    skip : tuple of str
        Languages whose bundle file should not be written
    overrides : dict, optional
        Language to replacement bundle source

    Returns
    -------
    Path
        ``directory``

    """
    overrides = overrides or {}
    directory.mkdir(parents=True, exist_ok=True)
    for language, (filename, _) in BUNDLE_FILES.items():
        if language in skip:
            continue
        source = overrides.get(language, fake_bundle_source(language))
        (directory / filename).write_text(source, encoding="utf-8")
    return directory


def split_echo(result: str) -> tuple[str, object]:
    """Split a stand-in formatter result into the echoed source and options."""
    head, _, options_json = result.rpartition("\n")
    return head, json.loads(options_json)
