#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the JSON-safe option value model.

Covers conversion between plain Python data and OptionValue trees, the
bool-before-number rule, and all-or-nothing failure on unsupported input.
"""

import math
from collections import OrderedDict
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsbeautify.exceptions import OptionConversionError, ValidationError
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

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(),
    lambda children: st.lists(children, max_size=5) | st.dictionaries(st.text(), children, max_size=5),
    max_leaves=20,
)


class _FakeNumpyBool:
    """Scalar that reports a boolean dtype, like numpy.bool_."""

    class dtype:
        kind = "b"

    ndim = 0

    def __init__(self, value):
        self._value = value

    def __bool__(self):
        return self._value


@pytest.mark.unit
class TestFromGeneric:
    """Test conversion from plain Python data."""

    def test_scalars(self):
        """Test each scalar shape maps to its value type."""
        assert from_generic("collapse") == StringValue("collapse")
        assert from_generic(4) == NumberValue(4)
        assert from_generic(2.5) == NumberValue(2.5)
        assert from_generic(True) == BoolValue(True)
        assert from_generic(None) is NULL

    def test_bool_is_not_a_number(self):
        """Test booleans become BoolValue even though bool subclasses int."""
        assert isinstance(from_generic(True), BoolValue)
        assert isinstance(from_generic(False), BoolValue)
        assert from_generic(True) != NumberValue(1)

    def test_numpy_style_boolean_scalar(self):
        """Test values carrying a boolean dtype are treated as booleans."""
        assert from_generic(_FakeNumpyBool(True)) == BoolValue(True)
        assert from_generic(_FakeNumpyBool(False)) == BoolValue(False)

    def test_integral_numbers_stay_int(self):
        """Test integral values keep int type through conversion."""
        result = from_generic(10)
        assert isinstance(result, NumberValue)
        assert type(result.value) is int

    def test_other_real_numbers(self):
        """Test non-float reals convert to float numbers."""
        assert from_generic(Fraction(1, 2)) == NumberValue(0.5)

    def test_nested_structures(self):
        """Test lists and mappings convert recursively."""
        result = from_generic({"templating": ["auto"], "inline": {"a": True}})

        assert isinstance(result, MapValue)
        assert result["templating"] == ListValue((StringValue("auto"),))
        assert result["inline"] == MapValue({"a": BoolValue(True)})

    def test_tuple_is_a_sequence(self):
        """Test tuples convert like lists."""
        assert from_generic(("a", "b")) == ListValue((StringValue("a"), StringValue("b")))

    def test_option_values_pass_through(self):
        """Test already converted values are returned unchanged."""
        value = ListValue((NumberValue(1),))
        assert from_generic(value) is value

    def test_of_shorthand(self):
        """Test OptionValue.of is from_generic."""
        assert OptionValue.of({"a": 1}) == from_generic({"a": 1})


@pytest.mark.unit
class TestConversionFailure:
    """Test that unsupported input fails the whole conversion."""

    @pytest.mark.parametrize("value", [object(), b"bytes", {1, 2}, 3 + 4j, math.nan, math.inf])
    def test_unsupported_scalars(self, value):
        """Test values outside the JSON model are rejected."""
        with pytest.raises(OptionConversionError):
            from_generic(value)

    def test_failure_inside_list_reports_path(self):
        """Test a single bad list element fails the entire list."""
        with pytest.raises(OptionConversionError) as exc_info:
            from_generic(["erb", "php", object()])

        assert exc_info.value.path == "[2]"

    def test_failure_inside_map_reports_path(self):
        """Test a single bad map entry fails the entire map."""
        with pytest.raises(OptionConversionError) as exc_info:
            from_generic({"outer": {"inner": [1, object()]}})

        assert exc_info.value.path == ".outer.inner[1]"

    def test_non_string_keys_rejected(self):
        """Test mappings with non-string keys are rejected."""
        with pytest.raises(OptionConversionError):
            from_generic({1: "one"})

    def test_is_a_validation_error(self):
        """Test conversion failures belong to the validation hierarchy."""
        with pytest.raises(ValidationError):
            from_generic(object())

    def test_try_from_generic_returns_none(self):
        """Test the non-raising variant signals failure with None."""
        assert try_from_generic([1, object()]) is None

    def test_try_from_generic_null_is_not_failure(self):
        """Test a convertible None is NULL, not a failure."""
        assert try_from_generic(None) is NULL

    def test_self_referencing_list(self):
        """Test a list that contains itself is rejected instead of recursing forever."""
        value = ["auto"]
        value.append(value)

        with pytest.raises(OptionConversionError, match="cyclic reference") as exc_info:
            from_generic(value)

        assert exc_info.value.path == "[1]"
        assert try_from_generic(value) is None

    def test_self_referencing_map(self):
        value = {"indent_size": 2}
        value["nested"] = {"back": value}

        with pytest.raises(OptionConversionError, match="cyclic reference") as exc_info:
            from_generic(value)

        assert exc_info.value.path == ".nested.back"
        assert try_from_generic(value) is None

    def test_shared_container_is_not_a_cycle(self):
        """Test the same list appearing twice side by side still converts."""
        shared = ["erb"]

        assert from_generic({"a": shared, "b": shared}).to_generic() == {"a": ["erb"], "b": ["erb"]}

    def test_excessive_nesting(self):
        value = []
        for _ in range(100_000):
            value = [value]

        with pytest.raises(OptionConversionError, match="nesting is too deep"):
            from_generic(value)
        assert try_from_generic(value) is None


@pytest.mark.unit
class TestValueTypes:
    """Test behaviour of the individual value classes."""

    def test_number_value_rejects_bool(self):
        """Test NumberValue cannot wrap a boolean directly."""
        with pytest.raises(OptionConversionError):
            NumberValue(True)

    def test_number_value_rejects_non_finite(self):
        """Test NumberValue rejects NaN and infinity."""
        with pytest.raises(OptionConversionError):
            NumberValue(float("inf"))

    def test_values_are_frozen(self):
        """Test value instances cannot be mutated."""
        value = StringValue("x")
        with pytest.raises(AttributeError):
            value.value = "y"  # type: ignore[misc]

    def test_map_equality_ignores_order(self):
        """Test MapValue equality does not depend on key order."""
        first = MapValue(OrderedDict([("a", NumberValue(1)), ("b", NumberValue(2))]))
        second = MapValue(OrderedDict([("b", NumberValue(2)), ("a", NumberValue(1))]))

        assert first == second
        assert hash(first) == hash(second)

    def test_map_entries_are_read_only(self):
        """Test MapValue entries cannot be modified in place."""
        value = MapValue({"a": NumberValue(1)})
        with pytest.raises(TypeError):
            value.entries["b"] = NumberValue(2)  # type: ignore[index]

    def test_list_value_is_iterable(self):
        """Test ListValue exposes its items in order."""
        value = ListValue([StringValue("a"), StringValue("b")])
        assert isinstance(value.items, tuple)
        assert [item.value for item in value] == ["a", "b"]
        assert len(value) == 2

    def test_list_value_rejects_plain_items(self):
        """Test direct construction keeps every item inside the option value model."""
        with pytest.raises(OptionConversionError) as exc_info:
            ListValue([StringValue("a"), "b"])  # type: ignore[list-item]

        assert exc_info.value.path == "[1]"

    def test_map_value_rejects_plain_entries(self):
        with pytest.raises(OptionConversionError) as exc_info:
            MapValue({"indent_size": 2})  # type: ignore[dict-item]

        assert exc_info.value.path == ".indent_size"

    def test_map_value_rejects_non_string_keys(self):
        with pytest.raises(OptionConversionError):
            MapValue({1: NumberValue(1)})  # type: ignore[dict-item]

    def test_null_singleton_equality(self):
        """Test every NullValue compares equal to NULL."""
        assert NullValue() == NULL


@pytest.mark.unit
class TestToGeneric:
    """Test conversion back to plain Python data."""

    def test_nested_round_trip(self):
        """Test a nested structure converts back unchanged."""
        data = {"indent_size": 2, "templating": ["django", "erb"], "flag": False, "none": None, "ratio": 0.5}
        assert to_generic(from_generic(data)) == data

    def test_list_order_preserved(self):
        """Test list order survives conversion."""
        assert to_generic(from_generic(["c", "a", "b"])) == ["c", "a", "b"]

    def test_tuples_come_back_as_lists(self):
        """Test sequences always convert back to lists."""
        assert to_generic(from_generic(("a",))) == ["a"]

    @given(json_values)
    def test_round_trip_property(self, value):
        """Test to_generic(from_generic(v)) == v for JSON-shaped data."""
        result = to_generic(from_generic(value))
        assert result == value
        # bool must never collapse into a number
        if isinstance(value, bool):
            assert isinstance(result, bool)
