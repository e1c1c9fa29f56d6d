#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the js-beautify formatters.

Two layers are provided:

- :class:`BeautifyOptions`, the raw option map passed to js-beautify as-is
- :class:`FormattingOptions`, a typed, validated front door that normalizes
  into a :class:`BeautifyOptions` via ``to_option_map()``
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from jsbeautify.options.base import BeautifyOptions, CloneFrozenMixin
from jsbeautify.options.formatting import (
    AllowNewlines,
    FormattingOptions,
    Indentation,
    LineWrap,
    NewlinePolicy,
    RemoveAllNewlines,
    Spaces,
    Tabs,
    Templating,
)

OptionsLike = Union[FormattingOptions, BeautifyOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> BeautifyOptions:
    """Coerce any accepted options argument into a raw option map.

    Parameters
    ----------
    options : FormattingOptions, BeautifyOptions, Mapping or None
        Typed options are normalized, mappings are converted strictly, and
        None yields an empty map.

    Returns
    -------
    BeautifyOptions
        The option map to hand to the formatter

    Raises
    ------
    OptionConversionError
        If a plain mapping contains a value that cannot be converted
    TypeError
        If ``options`` is of an unsupported type

    """
    if options is None:
        return BeautifyOptions()
    if isinstance(options, FormattingOptions):
        return options.to_option_map()
    if isinstance(options, BeautifyOptions):
        return options
    if isinstance(options, Mapping):
        return BeautifyOptions(options)
    raise TypeError(f"Unsupported options type: {type(options).__name__}")


__all__ = [
    "AllowNewlines",
    "BeautifyOptions",
    "CloneFrozenMixin",
    "FormattingOptions",
    "Indentation",
    "LineWrap",
    "NewlinePolicy",
    "OptionsLike",
    "RemoveAllNewlines",
    "Spaces",
    "Tabs",
    "Templating",
    "resolve_options",
]
