""" Failure descriptions: tell the developer which fields were left out of the comparison """

from collections import abc
from typing import Optional


def description(case_name: Optional[str], fields: abc.Sequence[str]) -> str:
    """ Describe the excluded fields, for an assertion failure message

    Example:
        description(None, ['age']) == '(Fields `age` is updated by default)'
        description('case A', ['a', 'b', 'c']) == 'case A (Fields `a`, `b`, and `c` are updated by default)'

    Args:
        case_name: Label of the test case, if any. Included verbatim.
        fields: Names of the fields, in the order they were given
    Raises:
        ValueError: no fields given
    """
    if not fields:
        raise ValueError('At least one field name is required')

    text = f'(Fields {fields_list(fields)} {verb(len(fields))} updated by default)'

    if case_name is not None:
        return f'{case_name} {text}'
    return text


def field_mismatch(field: str) -> str:
    """ Describe a single field that did not match """
    return f'Field `{field}` does not match'


def verb(count: int) -> str:
    return 'is' if count == 1 else 'are'


def fields_list(fields: abc.Sequence[str]) -> str:
    """ Render field names as an English list: `a`, `b`, and `c` """
    quoted = [f'`{name}`' for name in fields]

    if len(quoted) == 1:
        return quoted[0]
    elif len(quoted) == 2:
        return f'{quoted[0]} and {quoted[1]}'
    else:
        *head, last = quoted
        return ', '.join(head) + f', and {last}'
