#  Copyright (c) 2025 Tom Villani, Ph.D.
"""JSON-safe option values exchanged with the js-beautify interpreter.

js-beautify reads its settings from a loosely typed JavaScript object. This
module confines that dynamic typing to one boundary: every option value is
one of six immutable node types, and two conversion functions move values
between that closed model and plain Python data.

Value types
-----------
- StringValue: text
- NumberValue: a finite ``int`` or ``float``
- BoolValue: ``True`` / ``False``
- ListValue: ordered tuple of option values
- MapValue: string-keyed mapping of option values (key order is irrelevant)
- NullValue: explicit null

Examples
--------
    >>> from_generic({"indent_size": 2, "templating": ["auto"]}).to_generic()
    {'indent_size': 2, 'templating': ['auto']}
    >>> from_generic(["erb", object()])
    Traceback (most recent call last):
    ...
    jsbeautify.exceptions.OptionConversionError: Cannot convert value at [1] to an option value: unsupported type object

"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from jsbeautify.exceptions import OptionConversionError


class OptionValue:
    """Base class for the closed set of JSON-safe option value types."""

    __slots__ = ()

    def to_generic(self) -> Any:
        """Convert this value to plain Python data.

        Returns
        -------
        Any
            ``str``, ``int``/``float``, ``bool``, ``list``, ``dict`` or ``None``

        """
        raise NotImplementedError

    @staticmethod
    def of(value: Any) -> OptionValue:
        """Build an option value from plain Python data.

        Shorthand for :func:`from_generic`.
        """
        return from_generic(value)


@dataclass(frozen=True)
class StringValue(OptionValue):
    """A string option value."""

    value: str

    def to_generic(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumberValue(OptionValue):
    """A numeric option value.

    Integral numbers keep their ``int`` type so that option maps read back
    the way they were written; ``NumberValue(4) == NumberValue(4.0)``.

    Raises
    ------
    OptionConversionError
        If the value is a bool, not a real number, or not finite

    """

    value: int | float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise OptionConversionError(self.value, reason="NumberValue requires an int or float")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise OptionConversionError(self.value, reason="non-finite numbers are not JSON-representable")

    def to_generic(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class BoolValue(OptionValue):
    """A boolean option value."""

    value: bool

    def to_generic(self) -> bool:
        return self.value


@dataclass(frozen=True)
class ListValue(OptionValue):
    """An ordered list of option values."""

    items: tuple[OptionValue, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for index, item in enumerate(items):
            if not isinstance(item, OptionValue):
                raise OptionConversionError(item, f"[{index}]", "ListValue items must be option values")
        object.__setattr__(self, "items", items)

    def to_generic(self) -> list[Any]:
        return [item.to_generic() for item in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True)
class MapValue(OptionValue):
    """A string-keyed mapping of option values.

    The entries are stored behind a read-only proxy; equality ignores
    insertion order.
    """

    entries: Mapping[str, OptionValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        entries = dict(self.entries)
        for key, item in entries.items():
            if not isinstance(key, str):
                raise OptionConversionError(entries, reason=f"mapping key {key!r} is not a string")
            if not isinstance(item, OptionValue):
                raise OptionConversionError(item, f".{key}", "MapValue entries must be option values")
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapValue):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def to_generic(self) -> dict[str, Any]:
        return {key: item.to_generic() for key, item in self.entries.items()}

    def __getitem__(self, key: str) -> OptionValue:
        return self.entries[key]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


@dataclass(frozen=True)
class NullValue(OptionValue):
    """The explicit null option value."""

    def to_generic(self) -> None:
        return None


NULL = NullValue()

OptionValueType = Union[StringValue, NumberValue, BoolValue, ListValue, MapValue, NullValue]


def to_generic(value: OptionValue) -> Any:
    """Convert an option value tree to plain Python data.

    Conversion is total: every well-formed option value converts. List
    order and map contents are preserved.

    Parameters
    ----------
    value : OptionValue
        The value to convert

    Returns
    -------
    Any
        Nested ``str``/``int``/``float``/``bool``/``list``/``dict``/``None`` data

    """
    return value.to_generic()


def from_generic(value: Any) -> OptionValue:
    """Convert plain Python data to an option value tree.

    Supported shapes are strings, booleans (including numpy-style scalars
    whose dtype is boolean), real numbers, non-string sequences, mappings
    with string keys, ``None`` and existing :class:`OptionValue` instances.

    Parameters
    ----------
    value : Any
        The value to convert

    Returns
    -------
    OptionValue
        The converted value

    Raises
    ------
    OptionConversionError
        If the value, or any element nested inside it, cannot be converted.
        No partial result is ever returned.

    """
    return _convert_root(value)


def try_from_generic(value: Any) -> OptionValue | None:
    """Convert plain Python data, returning None when it is not convertible.

    Note that a convertible ``None`` input yields :data:`NULL`, never None.
    """
    try:
        return _convert_root(value)
    except OptionConversionError:
        return None


def _convert_root(value: Any) -> OptionValue:
    try:
        return _convert(value, "", set())
    except RecursionError as e:
        raise OptionConversionError(value, reason="nesting is too deep") from e


def _is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    # numpy.bool_ and friends are not numbers.Number but carry a boolean dtype
    dtype = getattr(value, "dtype", None)
    return getattr(dtype, "kind", None) == "b" and getattr(value, "ndim", 0) == 0


def _convert(value: Any, path: str, active: set[int]) -> OptionValue:
    if isinstance(value, OptionValue):
        return value
    if value is None:
        return NULL
    if isinstance(value, str):
        return StringValue(value)
    if _is_boolean(value):
        return BoolValue(bool(value))
    if isinstance(value, numbers.Integral):
        return NumberValue(int(value))
    if isinstance(value, numbers.Real):
        number = float(value)
        if not math.isfinite(number):
            raise OptionConversionError(value, path, "non-finite numbers are not JSON-representable")
        return NumberValue(number)
    if isinstance(value, Mapping):
        with _visiting(value, path, active):
            entries: dict[str, OptionValue] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise OptionConversionError(value, path, f"mapping key {key!r} is not a string")
                entries[key] = _convert(item, f"{path}.{key}", active)
        return MapValue(entries)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        with _visiting(value, path, active):
            items = tuple(_convert(item, f"{path}[{index}]", active) for index, item in enumerate(value))
        return ListValue(items)
    raise OptionConversionError(value, path)


@contextmanager
def _visiting(container: Any, path: str, active: set[int]) -> Iterator[None]:
    # ids of the containers on the current recursion path
    marker = id(container)
    if marker in active:
        raise OptionConversionError(container, path, "cyclic reference")
    active.add(marker)
    try:
        yield
    finally:
        active.discard(marker)
