from __future__ import annotations

import logging
from collections import abc
from dataclasses import dataclass, field
from typing import Any

from selective_assertions.errors import FieldResolutionError, UnsupportedRecordError
from selective_assertions.settings import get_settings
from .accessor import RecordAccessor, accessor_for


logger = logging.getLogger(__name__)


@dataclass
class FieldSelection:
    """ A record with a set of its fields resolved: every field is known to support the requested operations """
    # The record
    record: Any

    # Its accessor
    accessor: RecordAccessor

    # Field names, in the order they were given
    names: tuple[str, ...]

    # Neutral values of the fields. Only when resolved with `default=True`
    defaults: dict[str, Any] = field(default_factory=dict)

    def read(self, name: str) -> Any:
        """ Get the value of one field """
        return self.accessor.read(self.record, name)

    def values(self) -> dict[str, Any]:
        """ Get the values of all selected fields """
        return {name: self.read(name) for name in self.names}

    def replaced(self, values: abc.Mapping[str, Any]) -> Any:
        """ Get a clone of the record, with some field values replaced

        The record itself is never modified.
        """
        clone = self.accessor.clone(self.record)
        for name, value in values.items():
            clone = self.accessor.write(clone, name, value)
        return clone


def field_names(fields: abc.Iterable[str]) -> tuple[str, ...]:
    """ Validate the field names given to an assertion

    Duplicate names are collapsed (first one wins), unless `STRICT_FIELDS` is set.

    Raises:
        ValueError: no field names, or duplicate names with `STRICT_FIELDS`
        TypeError: a field name is not a string
    """
    names = tuple(fields)

    if not names:
        raise ValueError('At least one field name is required')

    for name in names:
        if not isinstance(name, str):
            raise TypeError(f'Field names must be strings, got: {name!r}')

    unique_names = tuple(dict.fromkeys(names))
    if len(unique_names) != len(names) and get_settings().STRICT_FIELDS:
        duplicates = sorted({name for name in names if names.count(name) > 1})
        raise ValueError(f'Duplicate field names: {", ".join(duplicates)}')

    return unique_names


def resolve_fields(record: Any, names: abc.Sequence[str], *,
                   read: bool = False, write: bool = False, default: bool = False, compare: bool = False,
                   ) -> FieldSelection:
    """ Resolve field names on a record, making sure it supports everything that will be done with them

    All checks are done at once, before any value is compared:
    an assertion with a typo in a field name will never pass or fail; it will raise an error.

    Args:
        record: The record to resolve fields on
        names: Field names
        read: Fields will be read
        write: Fields will be written
        default: Fields will be reset to their neutral values. Those are computed now.
        compare: The whole record will be compared with `==`
    Raises:
        FieldResolutionError: a field is missing, or does not support a requested operation
        UnsupportedRecordError: the record itself cannot be used
    """
    accessor = accessor_for(record)
    record_type = type(record).__name__

    if compare and not accessor.has_structural_eq(record):
        raise UnsupportedRecordError(
            f'{record_type} objects are compared by identity',
            'Implement __eq__(), or use a @dataclass',
            record_type=record_type,
        )

    for name in names:
        if not accessor.has_field(record, name):
            raise FieldResolutionError(
                f'{record_type} has no field `{name}`',
                record_type=record_type,
                field=name,
            )
        if read and not accessor.can_read(record, name):
            raise FieldResolutionError(
                f'Field `{name}` of {record_type} cannot be read',
                f'Make it readable or add a `{name}()` method',
                record_type=record_type,
                field=name,
            )
        if write and not accessor.can_write(record, name):
            raise FieldResolutionError(
                f'Field `{name}` of {record_type} cannot be written',
                f'Make it writable or add a `set_{name}()` method',
                record_type=record_type,
                field=name,
            )

    selection = FieldSelection(record=record, accessor=accessor, names=tuple(names))
    if default:
        selection.defaults = {name: accessor.default(record, name) for name in names}

    logger.debug('Resolved %s fields %s on %s', accessor.kind, selection.names, record_type)
    return selection
