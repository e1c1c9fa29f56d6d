#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for js-beautify options.

This module defines the cloning mixin shared by the frozen option
dataclasses and :class:`BeautifyOptions`, the raw option map handed to the
js-beautify formatter functions.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from jsbeautify.exceptions import OptionConversionError
from jsbeautify.values import OptionValue, from_generic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


class BeautifyOptions(Mapping[str, OptionValue]):
    """Immutable map of js-beautify option names to option values.

    This is the exact shape the formatter consumes: a flat, string-keyed
    object whose values are JSON-safe. Keys outside the documented vocabulary
    are allowed and passed through untouched; js-beautify ignores unknown
    keys and fills in defaults for missing ones.

    Parameters
    ----------
    values : Mapping[str, Any], optional
        Initial options. Values that are not already :class:`OptionValue`
        instances are converted with :func:`~jsbeautify.values.from_generic`.

    Raises
    ------
    OptionConversionError
        If any value cannot be converted. Use :meth:`from_dict` to drop
        unconvertible entries instead.

    Examples
    --------
        >>> opts = BeautifyOptions({"indent_size": 2, "end_with_newline": True})
        >>> opts["indent_size"]
        NumberValue(value=2)
        >>> opts.to_dict()
        {'indent_size': 2, 'end_with_newline': True}

    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None):
        converted: dict[str, OptionValue] = {}
        for key, value in (values or {}).items():
            if not isinstance(key, str):
                raise OptionConversionError(key, reason=f"option name {key!r} is not a string")
            converted[key] = from_generic(value)
        self._values = converted

    @classmethod
    def from_dict(cls, values: Mapping[Any, Any]) -> BeautifyOptions:
        """Build options from loosely typed data, dropping what cannot be converted.

        Each entry is converted on its own: an entry with a non-string key or
        an unconvertible value is skipped, the rest are kept. Within a single
        entry conversion stays all-or-nothing.

        Parameters
        ----------
        values : Mapping
            Raw option data, e.g. the result of ``defaultOptions()``

        Returns
        -------
        BeautifyOptions
            The convertible subset of ``values``

        """
        converted: dict[str, OptionValue] = {}
        for key, value in values.items():
            if not isinstance(key, str):
                logger.debug("Skipping option with non-string name %r", key)
                continue
            try:
                converted[key] = from_generic(value)
            except OptionConversionError as e:
                logger.debug("Skipping option %s: %s", key, e.message)
        return cls(converted)

    def __getitem__(self, key: str) -> OptionValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain Python data suitable for the interpreter.

        Returns
        -------
        dict[str, Any]
            Option names mapped to generic values

        """
        return {key: value.to_generic() for key, value in self._values.items()}

    def merged(self, other: Mapping[str, Any]) -> BeautifyOptions:
        """Return a new map with ``other`` laid over this one.

        Keys present in both take the value from ``other``.
        """
        combined: dict[str, Any] = dict(self._values)
        combined.update(other)
        return BeautifyOptions(combined)

    def with_value(self, key: str, value: Any) -> BeautifyOptions:
        """Return a copy with ``key`` set to ``value``."""
        return self.merged({key: value})

    def without(self, *keys: str) -> BeautifyOptions:
        """Return a copy with the given keys removed."""
        return BeautifyOptions({key: value for key, value in self._values.items() if key not in keys})
