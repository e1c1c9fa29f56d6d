#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the jsbeautify library.

This module centralizes the option vocabulary understood by js-beautify,
the default values used by the typed configuration layer, and the names of
the bundled assets loaded into the embedded interpreter.

Constants are organized by category:
1. Type Definitions - Literal types for enumerated options
2. Encodings - Mapping from typed choices to js-beautify strings
3. Formatting Defaults - Default values for FormattingOptions
4. Engine and Assets - Bundle file names, global function names, env vars
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

BraceStyle = Literal["collapse", "expand", "end-expand", "none"]
ScriptIndentation = Literal["keep", "add-one-indent", "separate"]
WrapAttributes = Literal[
    "auto",
    "force",
    "force-aligned",
    "force-expand-multiline",
    "aligned-multiple",
    "preserve",
    "preserve-aligned",
]
TemplatingEngine = Literal["django", "erb", "handlebars", "php", "smarty"]
TemplatingMode = Literal["auto", "none"]
Language = Literal["js", "css", "html"]

BRACE_STYLES: tuple[str, ...] = ("collapse", "expand", "end-expand", "none")
SCRIPT_INDENTATIONS: tuple[str, ...] = ("keep", "add-one-indent", "separate")
WRAP_ATTRIBUTES_MODES: tuple[str, ...] = (
    "auto",
    "force",
    "force-aligned",
    "force-expand-multiline",
    "aligned-multiple",
    "preserve",
    "preserve-aligned",
)
TEMPLATING_ENGINES: tuple[str, ...] = ("django", "erb", "handlebars", "php", "smarty")
TEMPLATING_MODES: tuple[str, ...] = ("auto", "none")
LANGUAGES: tuple[str, ...] = ("js", "css", "html")

# =============================================================================
# Encodings
# =============================================================================

# "add-one-indent" is spelled "normal" by js-beautify
SCRIPT_INDENTATION_ENCODING: dict[str, str] = {
    "keep": "keep",
    "add-one-indent": "normal",
    "separate": "separate",
}

# =============================================================================
# Formatting Defaults
# =============================================================================

TAB_INDENT_SIZE = 4

DEFAULT_INDENT_SIZE = 4
DEFAULT_MAX_PRESERVE_NEWLINES = 5
DEFAULT_WRAP_LINE_LENGTH = 0
DEFAULT_BRACE_STYLE: BraceStyle = "collapse"
DEFAULT_SCRIPT_INDENTATION: ScriptIndentation = "add-one-indent"

DEFAULT_END_WITH_NEWLINE = False
DEFAULT_E4X = False
DEFAULT_COMMA_FIRST = False
DEFAULT_DETECT_PACKERS = False
DEFAULT_PRESERVE_INLINE = False
DEFAULT_KEEP_ARRAY_INDENTATION = False
DEFAULT_BREAK_CHAINED_METHODS = False
DEFAULT_SPACE_BEFORE_CONDITIONAL = True
DEFAULT_UNESCAPE_STRINGS = False
DEFAULT_JSLINT_HAPPY = False
DEFAULT_INDENT_HEAD_AND_BODY = False
DEFAULT_INDENT_EMPTY_LINES = False

DEFAULT_INDENT_INNER_HTML = False
DEFAULT_INDENT_HEAD_INNER_HTML = False
DEFAULT_INDENT_BODY_INNER_HTML = False
DEFAULT_INDENT_HANDLEBARS = True
DEFAULT_WRAP_ATTRIBUTES: WrapAttributes = "auto"
DEFAULT_WRAP_ATTRIBUTES_MIN_ATTRS = 2
DEFAULT_INLINE_CUSTOM_ELEMENTS = True
DEFAULT_TEMPLATING: TemplatingMode = "auto"

DEFAULT_EXTRA_LINERS: tuple[str, ...] = ("head", "body", "/html")

DEFAULT_INLINE_ELEMENTS: tuple[str, ...] = (
    "a",
    "abbr",
    "area",
    "audio",
    "b",
    "bdi",
    "bdo",
    "br",
    "button",
    "canvas",
    "cite",
    "code",
    "data",
    "datalist",
    "del",
    "dfn",
    "em",
    "embed",
    "i",
    "iframe",
    "img",
    "input",
    "ins",
    "kbd",
    "keygen",
    "label",
    "map",
    "mark",
    "math",
    "meter",
    "noscript",
    "object",
    "output",
    "progress",
    "q",
    "ruby",
    "s",
    "samp",
    "select",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "svg",
    "template",
    "textarea",
    "time",
    "u",
    "var",
    "video",
    "wbr",
    "text",
    # obsolete inline tags
    "acronym",
    "big",
    "strike",
    "tt",
)

DEFAULT_VOID_ELEMENTS: tuple[str, ...] = (
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "menuitem",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
    "!doctype",
    "?xml",
    "basefont",
    "isindex",
)

DEFAULT_UNFORMATTED: tuple[str, ...] = ()
DEFAULT_CONTENT_UNFORMATTED: tuple[str, ...] = ("pre", "textarea")

# =============================================================================
# Engine and Assets
# =============================================================================

JS_BUNDLE_NAME = "beautify.min.js"
CSS_BUNDLE_NAME = "beautify-css.min.js"
HTML_BUNDLE_NAME = "beautify-html.min.js"

# Load order matters: the HTML bundle looks up the JS and CSS formatters
BUNDLE_NAMES: tuple[str, ...] = (JS_BUNDLE_NAME, CSS_BUNDLE_NAME, HTML_BUNDLE_NAME)

FORMATTER_GLOBALS: dict[str, str] = {
    "js": "js_beautify",
    "css": "css_beautify",
    "html": "html_beautify",
}

ASSETS_PACKAGE_DIR = "assets"

ENV_ASSETS_DIR = "JSBEAUTIFY_ASSETS_DIR"
ENV_CONFIG_PATH = "JSBEAUTIFY_CONFIG"
ENV_LOG_LEVEL = "JSBEAUTIFY_LOG_LEVEL"

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_FILENAMES: tuple[str, ...] = (
    ".jsbeautifyrc",
    ".jsbeautify.toml",
    ".jsbeautify.yaml",
    ".jsbeautify.yml",
    ".jsbeautify.json",
)
PYPROJECT_SECTION = "jsbeautify"
