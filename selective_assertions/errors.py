""" Errors raised by selective assertions

There are two kinds of errors, and they should never be confused:

* Assertion failures (`SelectiveAssertionError`): the values differ. This is a normal test failure.
  It inherits from `AssertionError`, so test runners report it as "failed", not "error".
* Contract violations (`RecordContractError`): the assertion was used wrongly.
  A field name does not exist, a field cannot be written, a record kind is not supported.
  These are programming errors in the test itself, and they are raised before any comparison is made.
"""

from __future__ import annotations

from collections import abc
from typing import Any, Optional


class SelectiveAssertionError(AssertionError):
    """ Two records are not equal under the selected comparison policy

    Attributes:
        actual: The actual value that was compared (for exclude strategies: the prepared clone)
        expected: The expected value that was compared
        fields: The field names that were excluded or selected
        case_name: The test case label, if one was given
    """
    actual: Any
    expected: Any
    fields: tuple[str, ...]
    case_name: Optional[str]

    def __init__(self, message: str, *, actual: Any, expected: Any, fields: abc.Sequence[str] = (), case_name: str = None):
        super().__init__(message)
        self.actual = actual
        self.expected = expected
        self.fields = tuple(fields)
        self.case_name = case_name


class FieldMismatchError(SelectiveAssertionError):
    """ One selected field has different values in the two records """
    field: str

    def __init__(self, message: str, *, field: str, actual: Any, expected: Any):
        super().__init__(message, actual=actual, expected=expected, fields=(field,))
        self.field = field


class RecordContractError(TypeError):
    """ A record does not support what the assertion needs from it

    Every error has two messages:
    the "error" field tells what has gone wrong, and the "fixit" field tells what to do to fix it.
    The "info" field contains raw, structured, data associated with the error.

    Example:
        raise FieldResolutionError(
            'Field `age` cannot be written',
            'Make the field writable or add a `set_age()` method',
            record_type='User',
            field='age',
        )
    """
    # Error message: what has gone wrong
    error: str

    # Suggestion: what to do in order to fix it
    fixit: Optional[str]

    # Additional information about the error
    info: dict

    def __init__(self, /, error: str, fixit: str = None, **info):
        super().__init__(error)
        self.error = error
        self.fixit = fixit or getattr(self, 'fixit', None)  # get the default from a class-level value, if any
        self.info = info

    def __str__(self):
        if self.fixit:
            return f'{self.error}. {self.fixit}'
        return self.error


class FieldResolutionError(RecordContractError):
    """ A field name cannot be resolved on a record """
    fixit = 'Check the field name for typos'


class UnsupportedRecordError(RecordContractError):
    """ A record cannot be used with selective assertions at all """
