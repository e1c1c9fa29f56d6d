#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Typed formatting options for js-beautify.

This module defines :class:`FormattingOptions`, a frozen dataclass with one
field per documented js-beautify setting, and the normalization that turns
it into the flat option map the formatter consumes.

Normalization rules
-------------------
- Numeric settings are clamped to zero from below; they are never rejected.
  js-beautify tolerates loose input and a formatting preference is not worth
  failing a run over. There is no upper bound.
- ``Tabs()`` always produces an indent size of 4.
- ``indent_head_and_body=True`` forces both the head and body inner-HTML
  toggles on, regardless of the individual fields.
- ``html_wrap_attributes_indent_size`` falls back to the active indentation
  width while it is unset.
- ``html_unformatted_content_delimiter`` is omitted from the map while unset.
- ``additional`` is applied last and wins over every typed field.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from jsbeautify.constants import (
    BRACE_STYLES,
    DEFAULT_BRACE_STYLE,
    DEFAULT_BREAK_CHAINED_METHODS,
    DEFAULT_COMMA_FIRST,
    DEFAULT_CONTENT_UNFORMATTED,
    DEFAULT_DETECT_PACKERS,
    DEFAULT_E4X,
    DEFAULT_END_WITH_NEWLINE,
    DEFAULT_EXTRA_LINERS,
    DEFAULT_INDENT_BODY_INNER_HTML,
    DEFAULT_INDENT_EMPTY_LINES,
    DEFAULT_INDENT_HANDLEBARS,
    DEFAULT_INDENT_HEAD_AND_BODY,
    DEFAULT_INDENT_HEAD_INNER_HTML,
    DEFAULT_INDENT_INNER_HTML,
    DEFAULT_INDENT_SIZE,
    DEFAULT_INLINE_CUSTOM_ELEMENTS,
    DEFAULT_INLINE_ELEMENTS,
    DEFAULT_JSLINT_HAPPY,
    DEFAULT_KEEP_ARRAY_INDENTATION,
    DEFAULT_MAX_PRESERVE_NEWLINES,
    DEFAULT_PRESERVE_INLINE,
    DEFAULT_SCRIPT_INDENTATION,
    DEFAULT_SPACE_BEFORE_CONDITIONAL,
    DEFAULT_TEMPLATING,
    DEFAULT_UNESCAPE_STRINGS,
    DEFAULT_UNFORMATTED,
    DEFAULT_VOID_ELEMENTS,
    DEFAULT_WRAP_ATTRIBUTES,
    DEFAULT_WRAP_ATTRIBUTES_MIN_ATTRS,
    DEFAULT_WRAP_LINE_LENGTH,
    SCRIPT_INDENTATION_ENCODING,
    SCRIPT_INDENTATIONS,
    TAB_INDENT_SIZE,
    TEMPLATING_ENGINES,
    TEMPLATING_MODES,
    WRAP_ATTRIBUTES_MODES,
    BraceStyle,
    ScriptIndentation,
    TemplatingEngine,
    TemplatingMode,
    WrapAttributes,
)
from jsbeautify.exceptions import InvalidOptionValueError, ValidationError
from jsbeautify.options.base import BeautifyOptions, CloneFrozenMixin


def _non_negative(value: int) -> int:
    return value if value > 0 else 0


def _require_int(owner: str, name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{owner}.{name} must be an int, got {type(value).__name__}",
            parameter_name=name,
            parameter_value=value,
        )


# =============================================================================
# Option variants
# =============================================================================


@dataclass(frozen=True)
class Tabs:
    """Indent with tab characters.

    The indent size reported to js-beautify is fixed at 4 and cannot be
    changed.
    """

    @property
    def width(self) -> int:
        return TAB_INDENT_SIZE


@dataclass(frozen=True)
class Spaces:
    """Indent with ``width`` spaces per level (negative widths clamp to 0)."""

    width: int = DEFAULT_INDENT_SIZE

    def __post_init__(self) -> None:
        _require_int("Spaces", "width", self.width)


Indentation = Union[Tabs, Spaces]


@dataclass(frozen=True)
class RemoveAllNewlines:
    """Collapse every run of blank lines between tokens."""


@dataclass(frozen=True)
class AllowNewlines:
    """Keep blank-line runs between tokens, up to ``maximum`` lines each."""

    maximum: int = DEFAULT_MAX_PRESERVE_NEWLINES

    def __post_init__(self) -> None:
        _require_int("AllowNewlines", "maximum", self.maximum)


NewlinePolicy = Union[RemoveAllNewlines, AllowNewlines]


@dataclass(frozen=True)
class LineWrap:
    """Wrap lines longer than ``length`` columns; 0 disables wrapping."""

    length: int = DEFAULT_WRAP_LINE_LENGTH

    def __post_init__(self) -> None:
        _require_int("LineWrap", "length", self.length)


Templating = Union[TemplatingMode, tuple[TemplatingEngine, ...]]


# =============================================================================
# Formatting options
# =============================================================================


@dataclass(frozen=True)
class FormattingOptions(CloneFrozenMixin):
    """Strongly typed js-beautify configuration.

    One field per documented js-beautify option, each with the library's own
    default. The same object serves the JavaScript, CSS and HTML formatters;
    each formatter ignores the keys it does not understand.

    Parameters
    ----------
    indentation : Tabs or Spaces, default Spaces(4)
        Indentation style. ``Tabs()`` always reports an indent size of 4.
    newlines_between_tokens : RemoveAllNewlines or AllowNewlines, default AllowNewlines(5)
        Whether blank-line runs are kept, and how many lines each may keep.
    line_wrap : LineWrap, default LineWrap(0)
        Column at which lines are wrapped; 0 means never wrap.
    brace_style : {"collapse", "expand", "end-expand", "none"}, default "collapse"
        Placement of braces in JavaScript and CSS.
    script_indentation : {"keep", "add-one-indent", "separate"}, default "add-one-indent"
        Indentation of ``<script>`` and ``<style>`` contents in HTML:
        - "keep": keep the content's own indentation
        - "add-one-indent": indent one level deeper than the tag
        - "separate": indent as an independent block
    end_with_newline : bool, default False
        Terminate output with a newline.
    support_e4x : bool, default False
        Pass E4X/JSX XML literals through untouched.
    comma_first : bool, default False
        Put commas at the start of continuation lines.
    detect_packers : bool, default False
        Detect and unpack minifier/packer output before formatting.
    preserve_inline : bool, default False
        Keep inline braces and code blocks on one line.
    keep_array_indentation : bool, default False
        Preserve the source indentation of array literals.
    break_chained_methods : bool, default False
        Break chained method calls across lines.
    space_before_conditional : bool, default True
        Emit a space between ``if``/``while`` and the opening parenthesis.
    unescape_strings : bool, default False
        Decode ``\\xNN`` escapes in string literals.
    jslint_happy : bool, default False
        Enable jslint-stricter mode.
    indent_head_and_body : bool, default False
        Indent both ``<head>`` and ``<body>`` sections. When True this
        overrides ``html_indent_head_inner_html`` and
        ``html_indent_body_inner_html``.
    indent_empty_lines : bool, default False
        Keep indentation on empty lines.
    html_indent_inner_html : bool, default False
        Indent the contents of ``<html>``.
    html_indent_head_inner_html : bool, default False
        Indent the contents of ``<head>``.
    html_indent_body_inner_html : bool, default False
        Indent the contents of ``<body>``.
    html_indent_handlebars : bool, default True
        Indent ``{{#...}}`` handlebars blocks.
    html_wrap_attributes : str, default "auto"
        Attribute wrapping policy, one of "auto", "force", "force-aligned",
        "force-expand-multiline", "aligned-multiple", "preserve",
        "preserve-aligned".
    html_wrap_attributes_min_attrs : int, default 2
        Minimum attribute count before "force" wrapping kicks in.
    html_wrap_attributes_indent_size : int or None, default None
        Indent of wrapped attributes. None uses the active indentation width.
    html_extra_liners : tuple of str, default ("head", "body", "/html")
        Tags preceded by an extra blank line.
    html_inline_elements : tuple of str
        Tags treated as inline content.
    html_inline_custom_elements : bool, default True
        Treat custom elements (tags containing a dash) as inline.
    html_void_elements : tuple of str
        Tags that never have a closing tag.
    html_unformatted : tuple of str, default ()
        Tags whose markup is left unformatted.
    html_content_unformatted : tuple of str, default ("pre", "textarea")
        Tags whose content is left unformatted.
    html_unformatted_content_delimiter : str or None, default None
        Marker that keeps the enclosed content unformatted.
    html_templating : "auto", "none" or tuple of engine names, default "auto"
        Template languages to recognise. Engine names are "django", "erb",
        "handlebars", "php" and "smarty".
    additional : BeautifyOptions, default empty
        Raw options merged over the typed fields. Any key set here wins.

    Examples
    --------
    Two-space indentation with attribute wrapping:
        >>> options = FormattingOptions(
        ...     indentation=Spaces(2),
        ...     html_wrap_attributes="force",
        ...     html_wrap_attributes_min_attrs=1,
        ... )
        >>> options.to_dict()["indent_size"]
        2

    Tabs, collapsed blank lines, and a raw override:
        >>> options = FormattingOptions(
        ...     indentation=Tabs(),
        ...     newlines_between_tokens=RemoveAllNewlines(),
        ...     additional=BeautifyOptions({"space_in_paren": True}),
        ... )

    """

    indentation: Indentation = field(
        default_factory=Spaces,
        metadata={"help": "Tabs() or Spaces(width)", "importance": "core"},
    )
    newlines_between_tokens: NewlinePolicy = field(
        default_factory=AllowNewlines,
        metadata={"help": "RemoveAllNewlines() or AllowNewlines(maximum)", "importance": "core"},
    )
    line_wrap: LineWrap = field(
        default_factory=LineWrap,
        metadata={"help": "Wrap lines at this column (0 disables wrapping)", "importance": "core"},
    )
    brace_style: BraceStyle = field(
        default=DEFAULT_BRACE_STYLE,
        metadata={"help": "Brace placement", "choices": BRACE_STYLES, "importance": "core"},
    )
    script_indentation: ScriptIndentation = field(
        default=DEFAULT_SCRIPT_INDENTATION,
        metadata={
            "help": "Indentation of <script>/<style> content in HTML",
            "choices": SCRIPT_INDENTATIONS,
            "importance": "advanced",
        },
    )

    end_with_newline: bool = field(
        default=DEFAULT_END_WITH_NEWLINE,
        metadata={"help": "End output with a newline", "importance": "core"},
    )
    support_e4x: bool = field(
        default=DEFAULT_E4X,
        metadata={"help": "Pass E4X/JSX XML literals through untouched", "importance": "advanced"},
    )
    comma_first: bool = field(
        default=DEFAULT_COMMA_FIRST,
        metadata={"help": "Put commas at the start of continuation lines", "importance": "advanced"},
    )
    detect_packers: bool = field(
        default=DEFAULT_DETECT_PACKERS,
        metadata={"help": "Detect and unpack packed/minified scripts", "importance": "advanced"},
    )
    preserve_inline: bool = field(
        default=DEFAULT_PRESERVE_INLINE,
        metadata={"help": "Keep inline braces and code blocks on one line", "importance": "advanced"},
    )
    keep_array_indentation: bool = field(
        default=DEFAULT_KEEP_ARRAY_INDENTATION,
        metadata={"help": "Preserve array literal indentation", "importance": "advanced"},
    )
    break_chained_methods: bool = field(
        default=DEFAULT_BREAK_CHAINED_METHODS,
        metadata={"help": "Break chained method calls across lines", "importance": "advanced"},
    )
    space_before_conditional: bool = field(
        default=DEFAULT_SPACE_BEFORE_CONDITIONAL,
        metadata={"help": "Space between if/while and the opening parenthesis", "importance": "advanced"},
    )
    unescape_strings: bool = field(
        default=DEFAULT_UNESCAPE_STRINGS,
        metadata={"help": "Decode printable \\xNN escapes in strings", "importance": "advanced"},
    )
    jslint_happy: bool = field(
        default=DEFAULT_JSLINT_HAPPY,
        metadata={"help": "Enable jslint-stricter mode", "importance": "advanced"},
    )
    indent_head_and_body: bool = field(
        default=DEFAULT_INDENT_HEAD_AND_BODY,
        metadata={"help": "Indent both <head> and <body> (overrides the individual toggles)", "importance": "core"},
    )
    indent_empty_lines: bool = field(
        default=DEFAULT_INDENT_EMPTY_LINES,
        metadata={"help": "Keep indentation on empty lines", "importance": "advanced"},
    )

    html_indent_inner_html: bool = field(
        default=DEFAULT_INDENT_INNER_HTML,
        metadata={"help": "Indent <html> contents", "importance": "core"},
    )
    html_indent_head_inner_html: bool = field(
        default=DEFAULT_INDENT_HEAD_INNER_HTML,
        metadata={"help": "Indent <head> contents", "importance": "advanced"},
    )
    html_indent_body_inner_html: bool = field(
        default=DEFAULT_INDENT_BODY_INNER_HTML,
        metadata={"help": "Indent <body> contents", "importance": "advanced"},
    )
    html_indent_handlebars: bool = field(
        default=DEFAULT_INDENT_HANDLEBARS,
        metadata={"help": "Indent {{#...}} handlebars blocks", "importance": "advanced"},
    )
    html_wrap_attributes: WrapAttributes = field(
        default=DEFAULT_WRAP_ATTRIBUTES,
        metadata={"help": "Attribute wrapping policy", "choices": WRAP_ATTRIBUTES_MODES, "importance": "core"},
    )
    html_wrap_attributes_min_attrs: int = field(
        default=DEFAULT_WRAP_ATTRIBUTES_MIN_ATTRS,
        metadata={"help": "Minimum attribute count for forced wrapping", "type": int, "importance": "advanced"},
    )
    html_wrap_attributes_indent_size: int | None = field(
        default=None,
        metadata={
            "help": "Indent of wrapped attributes (defaults to the indentation width)",
            "type": int,
            "importance": "advanced",
        },
    )
    html_extra_liners: tuple[str, ...] = field(
        default=DEFAULT_EXTRA_LINERS,
        metadata={"help": "Tags preceded by an extra blank line", "importance": "advanced"},
    )
    html_inline_elements: tuple[str, ...] = field(
        default=DEFAULT_INLINE_ELEMENTS,
        metadata={"help": "Tags treated as inline content", "importance": "advanced"},
    )
    html_inline_custom_elements: bool = field(
        default=DEFAULT_INLINE_CUSTOM_ELEMENTS,
        metadata={"help": "Treat custom elements as inline", "importance": "advanced"},
    )
    html_void_elements: tuple[str, ...] = field(
        default=DEFAULT_VOID_ELEMENTS,
        metadata={"help": "Tags without a closing tag", "importance": "advanced"},
    )
    html_unformatted: tuple[str, ...] = field(
        default=DEFAULT_UNFORMATTED,
        metadata={"help": "Tags whose markup is left as-is", "importance": "advanced"},
    )
    html_content_unformatted: tuple[str, ...] = field(
        default=DEFAULT_CONTENT_UNFORMATTED,
        metadata={"help": "Tags whose content is left as-is", "importance": "advanced"},
    )
    html_unformatted_content_delimiter: str | None = field(
        default=None,
        metadata={"help": "Marker that keeps enclosed content unformatted", "importance": "advanced"},
    )
    html_templating: Templating = field(
        default=DEFAULT_TEMPLATING,
        metadata={
            "help": "Template languages: auto, none, or a tuple of engine names",
            "choices": TEMPLATING_MODES + TEMPLATING_ENGINES,
            "importance": "advanced",
        },
    )

    additional: BeautifyOptions = field(
        default_factory=BeautifyOptions,
        metadata={"help": "Raw js-beautify options merged over the typed fields", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate enumerated fields and normalize collection fields.

        Raises
        ------
        InvalidOptionValueError
            If an enumerated field holds a value outside its choices.
        ValidationError
            If a variant or collection field has the wrong type.

        """
        if not isinstance(self.indentation, (Tabs, Spaces)):
            raise ValidationError(
                "indentation must be Tabs() or Spaces(width)",
                parameter_name="indentation",
                parameter_value=self.indentation,
            )
        if not isinstance(self.newlines_between_tokens, (RemoveAllNewlines, AllowNewlines)):
            raise ValidationError(
                "newlines_between_tokens must be RemoveAllNewlines() or AllowNewlines(maximum)",
                parameter_name="newlines_between_tokens",
                parameter_value=self.newlines_between_tokens,
            )
        if not isinstance(self.line_wrap, LineWrap):
            raise ValidationError(
                "line_wrap must be a LineWrap", parameter_name="line_wrap", parameter_value=self.line_wrap
            )

        if self.brace_style not in BRACE_STYLES:
            raise InvalidOptionValueError("brace_style", self.brace_style, BRACE_STYLES)
        if self.script_indentation not in SCRIPT_INDENTATIONS:
            raise InvalidOptionValueError("script_indentation", self.script_indentation, SCRIPT_INDENTATIONS)
        if self.html_wrap_attributes not in WRAP_ATTRIBUTES_MODES:
            raise InvalidOptionValueError("html_wrap_attributes", self.html_wrap_attributes, WRAP_ATTRIBUTES_MODES)

        _require_int("FormattingOptions", "html_wrap_attributes_min_attrs", self.html_wrap_attributes_min_attrs)
        if self.html_wrap_attributes_indent_size is not None:
            _require_int(
                "FormattingOptions", "html_wrap_attributes_indent_size", self.html_wrap_attributes_indent_size
            )

        for name in (
            "html_extra_liners",
            "html_inline_elements",
            "html_void_elements",
            "html_unformatted",
            "html_content_unformatted",
        ):
            object.__setattr__(self, name, self._tag_tuple(name, getattr(self, name)))

        object.__setattr__(self, "html_templating", self._templating_value(self.html_templating))

        if not isinstance(self.additional, BeautifyOptions):
            if not isinstance(self.additional, Mapping):
                raise ValidationError(
                    "additional must be a BeautifyOptions or mapping",
                    parameter_name="additional",
                    parameter_value=self.additional,
                )
            object.__setattr__(self, "additional", BeautifyOptions(self.additional))

    @staticmethod
    def _tag_tuple(name: str, value: Any) -> tuple[str, ...]:
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise ValidationError(f"{name} must be a sequence of tag names", parameter_name=name, parameter_value=value)
        if not all(isinstance(tag, str) for tag in value):
            raise ValidationError(f"{name} must contain only strings", parameter_name=name, parameter_value=value)
        return tuple(value)

    @staticmethod
    def _templating_value(value: Any) -> Templating:
        if isinstance(value, str):
            if value not in TEMPLATING_MODES:
                raise InvalidOptionValueError("html_templating", value, TEMPLATING_MODES)
            return value
        if not isinstance(value, Sequence):
            raise InvalidOptionValueError("html_templating", value, TEMPLATING_MODES + TEMPLATING_ENGINES)
        for engine in value:
            if engine not in TEMPLATING_ENGINES:
                raise InvalidOptionValueError("html_templating", engine, TEMPLATING_ENGINES)
        return tuple(value)

    @property
    def active_indent_size(self) -> int:
        """Indent size implied by ``indentation``, after clamping."""
        if isinstance(self.indentation, Tabs):
            return TAB_INDENT_SIZE
        return _non_negative(self.indentation.width)

    def to_option_map(self) -> BeautifyOptions:
        """Normalize these options into the map js-beautify consumes.

        The result is deterministic and never fails. ``additional`` is laid
        over the typed fields last, so its keys win.

        Returns
        -------
        BeautifyOptions
            The normalized option map

        """
        output: dict[str, Any] = {}
        indent_size = self.active_indent_size

        if isinstance(self.indentation, Tabs):
            output["indent_with_tabs"] = True
            output["indent_char"] = "\t"
        else:
            output["indent_with_tabs"] = False
            output["indent_char"] = " "
        output["indent_size"] = indent_size

        if isinstance(self.newlines_between_tokens, RemoveAllNewlines):
            output["preserve_newlines"] = False
            output["max_preserve_newlines"] = 0
        else:
            output["preserve_newlines"] = True
            output["max_preserve_newlines"] = _non_negative(self.newlines_between_tokens.maximum)

        output["wrap_line_length"] = _non_negative(self.line_wrap.length)
        output["brace_style"] = self.brace_style
        output["indent_scripts"] = SCRIPT_INDENTATION_ENCODING[self.script_indentation]

        output["end_with_newline"] = self.end_with_newline
        output["e4x"] = self.support_e4x
        output["comma_first"] = self.comma_first
        output["detect_packers"] = self.detect_packers
        output["preserve_inline"] = self.preserve_inline
        output["keep_array_indentation"] = self.keep_array_indentation
        output["break_chained_methods"] = self.break_chained_methods
        output["space_before_conditional"] = self.space_before_conditional
        output["unescape_strings"] = self.unescape_strings
        output["jslint_happy"] = self.jslint_happy
        output["indent_empty_lines"] = self.indent_empty_lines

        output["indent_inner_html"] = self.html_indent_inner_html
        if self.indent_head_and_body:
            output["indent_head_inner_html"] = True
            output["indent_body_inner_html"] = True
        else:
            output["indent_head_inner_html"] = self.html_indent_head_inner_html
            output["indent_body_inner_html"] = self.html_indent_body_inner_html
        output["indent_handlebars"] = self.html_indent_handlebars

        output["wrap_attributes"] = self.html_wrap_attributes
        output["wrap_attributes_min_attrs"] = _non_negative(self.html_wrap_attributes_min_attrs)
        attribute_indent = self.html_wrap_attributes_indent_size
        output["wrap_attributes_indent_size"] = _non_negative(
            indent_size if attribute_indent is None else attribute_indent
        )

        output["extra_liners"] = list(self.html_extra_liners)
        output["inline"] = list(self.html_inline_elements)
        output["inline_custom_elements"] = self.html_inline_custom_elements
        output["void_elements"] = list(self.html_void_elements)
        output["unformatted"] = list(self.html_unformatted)
        output["content_unformatted"] = list(self.html_content_unformatted)
        if self.html_unformatted_content_delimiter is not None:
            output["unformatted_content_delimiter"] = self.html_unformatted_content_delimiter

        if isinstance(self.html_templating, str):
            output["templating"] = [self.html_templating]
        else:
            output["templating"] = list(self.html_templating)

        options = BeautifyOptions(output)
        if self.additional:
            options = options.merged(self.additional)
        return options

    def to_dict(self) -> dict[str, Any]:
        """Normalize to plain Python data; see :meth:`to_option_map`."""
        return self.to_option_map().to_dict()
