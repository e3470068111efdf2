from __future__ import annotations

from typing import Any

from selective_assertions.driver import assert_field_equal
from selective_assertions.fields import field_names, resolve_fields


def assert_eq_selected(actual: Any, expected: Any, *fields: str):
    """ Assert that specific fields of two values are equal

    Only the listed fields are compared, one by one, in the order given.
    Other fields are never even read: the values may differ in any other way.

    Fields are read with getter methods (`user.name()`, `user.get_name()`), or as attributes, or as keys of a dict.

    Example:
        user1 = User(id=1, name='Alice', age=7)
        user2 = User(id=1, name='Alice', age=8)

        assert_eq_selected(user1, user2, 'id', 'name')  # passes
        assert_eq_selected(user1, user2, 'age')  # fails: Field `age` does not match

    Args:
        actual: The actual value to compare
        expected: The expected value to compare against
        fields: Names of the fields to compare

    Raises:
        FieldMismatchError: the first field that does not match
        FieldResolutionError: a field cannot be read
    """
    __tracebackhide__ = True

    names = field_names(fields)
    actual_fields = resolve_fields(actual, names, read=True)
    expected_fields = resolve_fields(expected, names, read=True)

    for name in names:
        assert_field_equal(name, actual_fields.read(name), expected_fields.read(name))


def assert_eq_only(actual: Any, expected: Any, *fields: str):
    """ Assert that only the specified fields of two values are equal

    Same as assert_eq_selected()
    """
    __tracebackhide__ = True
    assert_eq_selected(actual, expected, *fields)
