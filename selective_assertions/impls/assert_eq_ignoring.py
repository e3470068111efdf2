from __future__ import annotations

import logging
from typing import Any, Optional

from selective_assertions.description import description
from selective_assertions.driver import assert_equal
from selective_assertions.fields import field_names, resolve_fields


logger = logging.getLogger(__name__)


def assert_eq_ignoring(actual: Any, expected: Any, *fields: str, case_name: Optional[str] = None):
    """ Assert that two values are equal, ignoring the specified fields

    The ignored fields are set to their default values on clones of both values,
    and then the clones are compared as a whole.
    This allows you to assert that all other fields are equal, while ignoring the specified ones:
    their values are never compared, not even to each other.

    Default values are: the field's declared default, if any; otherwise, a neutral value for the field's type:
    `0` for `int`, `''` for `str`, `None` for `Optional[...]` fields, and so on.

    Example:
        user1 = User(id=1, name='Alice', age=7)
        user2 = User(id=1, name='Alice', age=8)

        assert_eq_ignoring(user1, user2, 'age')  # passes
        assert_eq_ignoring(user1, user2, 'id', 'name', case_name='Alice grows up')  # fails

    Args:
        actual: The actual value to compare
        expected: The expected value to compare against
        fields: Names of the fields to ignore during the comparison
        case_name: A label for the test case, included in the failure message

    Raises:
        SelectiveAssertionError: the values differ in some field that's not ignored
        FieldResolutionError: a field cannot be written, or has no default value
    """
    __tracebackhide__ = True

    names = field_names(fields)
    actual_fields = resolve_fields(actual, names, write=True, default=True, compare=True)
    expected_fields = resolve_fields(expected, names, write=True, default=True, compare=True)

    logger.debug('Ignoring fields %s: resetting them to defaults', names)
    actual_clone = actual_fields.replaced(actual_fields.defaults)
    expected_clone = expected_fields.replaced(expected_fields.defaults)

    assert_equal(actual_clone, expected_clone, description(case_name, names), fields=names, case_name=case_name)
