from __future__ import annotations

import copy
import logging
from typing import Any

from selective_assertions.description import description
from selective_assertions.driver import assert_equal
from selective_assertions.fields import field_names, resolve_fields


logger = logging.getLogger(__name__)


def assert_eq_excluding(actual: Any, expected: Any, *fields: str):
    """ Assert that two values are equal, excluding the specified fields

    The excluded fields of `actual` are overwritten with the values copied from `expected`,
    and then the two values are compared as a whole.
    Neither `actual` nor `expected` is modified: a clone of `actual` is used.

    Example:
        user1 = User(id=1, name='Alice', age=7)
        user2 = User(id=1, name='Alice', age=8)

        assert_eq_excluding(user1, user2, 'age')  # passes

    Args:
        actual: The actual value to compare
        expected: The expected value to compare against
        fields: Names of the fields to exclude from the comparison

    Raises:
        SelectiveAssertionError: the values differ in some field that's not excluded
        FieldResolutionError: a field cannot be read from `expected` or written to `actual`
    """
    __tracebackhide__ = True

    names = field_names(fields)
    actual_fields = resolve_fields(actual, names, write=True, compare=True)
    expected_fields = resolve_fields(expected, names, read=True, compare=True)

    # Copy expected values: the clone must not share mutable values with `expected`
    logger.debug('Excluding fields %s: copying values from the expected value', names)
    actual_clone = actual_fields.replaced(copy.deepcopy(expected_fields.values()))

    assert_equal(actual_clone, expected, description(None, names), fields=names)
