""" Selective assertions: compare records while excluding some fields, or comparing only some fields

Example:
    user1 = User(id=1, name='Alice', age=7)
    user2 = User(id=1, name='Alice', age=8)

    # Exclude fields: compare everything but the `age`
    assert_eq_excluding(user1, user2, 'age')
    assert_eq_ignoring(user1, user2, 'age', case_name='Alice grows up')

    # Select fields: compare only `id` and `name`
    assert_eq_selected(user1, user2, 'id', 'name')

Records may be pydantic models, dataclasses, dicts, or any objects with getters and setters.
"""

from .impls import (
    assert_eq_excluding,
    assert_eq_ignoring,
    assert_eq_only,
    assert_eq_selected,
)
from .description import description
from .errors import (
    SelectiveAssertionError,
    FieldMismatchError,
    RecordContractError,
    FieldResolutionError,
    UnsupportedRecordError,
)
from .settings import Settings, get_settings, override_settings
