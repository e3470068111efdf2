""" Assertion driver: the final equality check """

from __future__ import annotations

import logging
from collections import abc
from typing import Any

from .description import field_mismatch
from .errors import SelectiveAssertionError, FieldMismatchError
from .settings import get_settings


logger = logging.getLogger(__name__)


def assert_equal(actual: Any, expected: Any, message: str, *, fields: abc.Sequence[str] = (), case_name: str = None):
    """ Assert that two whole values are equal

    Raises:
        SelectiveAssertionError: the values differ
    """
    __tracebackhide__ = True  # pytest: report the failure at the caller

    if actual == expected:
        return

    logger.debug('Values differ: %s', message)
    raise SelectiveAssertionError(
        failure_message(message, actual, expected),
        actual=actual,
        expected=expected,
        fields=fields,
        case_name=case_name,
    )


def assert_field_equal(field: str, actual_value: Any, expected_value: Any):
    """ Assert that the values of one field are equal

    Raises:
        FieldMismatchError: the values differ
    """
    __tracebackhide__ = True

    if actual_value == expected_value:
        return

    logger.debug('Field `%s` differs', field)
    raise FieldMismatchError(
        failure_message(field_mismatch(field), actual_value, expected_value),
        field=field,
        actual=actual_value,
        expected=expected_value,
    )


def failure_message(message: str, actual: Any, expected: Any) -> str:
    """ Format a failure message: the description, then both values """
    settings = get_settings()
    if not settings.SHOW_VALUES:
        return message
    return f'{message}: {_repr(actual, settings.MAXREPR)} != {_repr(expected, settings.MAXREPR)}'


def _repr(value: Any, maxlen: int) -> str:
    text = repr(value)
    if maxlen and len(text) > maxlen:
        return text[:maxlen] + '...'
    return text
