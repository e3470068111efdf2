""" Record accessors: read, write, clone and reset fields of records of different kinds

Records come from different libraries, and each one has its own way to access fields:

* pydantic models: attributes; `model_copy()` to clone and to write, frozen or not
* dataclasses: plain attributes; frozen dataclasses
* mappings: `record['field']`
* plain objects: getter and setter methods (`name()`, `get_name()`, `set_name(value)`), or plain attributes

`accessor_for(record)` picks the right accessor for a record.
"""

from __future__ import annotations

import copy
import dataclasses
import inspect
import logging
import types
import typing
from collections import abc
from typing import Any

import pydantic as pd

from selective_assertions.errors import FieldResolutionError, UnsupportedRecordError
from .defaults import neutral_default
from .singledispatch_lambda import singledispatch_lambda


logger = logging.getLogger(__name__)


class RecordAccessor:
    """ Field-level access to plain Python objects

    Reading a field `name` tries, in order:
    * a getter method: `record.name()`
    * a getter method: `record.get_name()`
    * an attribute or a property: `record.name`

    Writing a field `name` tries, in order:
    * a setter method: `record.set_name(value)`
    * an attribute, a slot, or a property with a setter: `record.name = value`

    Other accessors customize this behavior for specific record kinds.
    """
    # Name of the record kind, for messages
    kind = 'object'

    def has_field(self, record: Any, name: str) -> bool:
        """ Does the record have this field at all? """
        return self.can_read(record, name) or self.can_write(record, name)

    def can_read(self, record: Any, name: str) -> bool:
        # Setters are never fields
        if name.startswith('set_') and _has_method(record, name):
            return False
        if _has_method(record, name):
            return _is_getter(record, name)
        return hasattr(record, name) or _is_getter(record, f'get_{name}')

    def can_write(self, record: Any, name: str) -> bool:
        if _has_method(record, f'set_{name}'):
            return True

        attr = inspect.getattr_static(record, name, _MISSING)
        if isinstance(attr, property):
            return attr.fset is not None
        return (
            # instance attribute
            name in getattr(record, '__dict__', {}) or
            # slot
            isinstance(attr, types.MemberDescriptorType)
        )

    def read(self, record: Any, name: str) -> Any:
        """ Get the current value of a field """
        if _has_method(record, name):
            return getattr(record, name)()
        elif not hasattr(record, name) and _has_method(record, f'get_{name}'):
            return getattr(record, f'get_{name}')()
        else:
            return getattr(record, name)

    def write(self, record: Any, name: str, value: Any) -> Any:
        """ Set the value of a field

        Returns:
            The record with the new value. Mutable records are modified in place and returned.
            Immutable records are copied.
        """
        if _has_method(record, f'set_{name}'):
            getattr(record, f'set_{name}')(value)
        else:
            setattr(record, name, value)
        return record

    def clone(self, record: Any) -> Any:
        """ Get an independent copy of the record: modifying it never affects the original """
        return copy.deepcopy(record)

    def default(self, record: Any, name: str) -> Any:
        """ Get a neutral value for a field

        Raises:
            FieldResolutionError: the field's type has no neutral value
        """
        annotation = self.annotation(record, name)
        try:
            return neutral_default(annotation)
        except TypeError as e:
            raise FieldResolutionError(
                f'Field `{name}` of {self.kind} {type(record).__name__} has no default value: {e}',
                f'Give `{name}` a default value, or make it Optional',
                record_type=type(record).__name__,
                field=name,
            ) from e

    def annotation(self, record: Any, name: str) -> Any:
        """ Get the type annotation of a field, or `None` if unknown """
        hints = _type_hints(type(record))
        if name in hints:
            return hints[name]

        # Setter argument annotation: `def set_age(self, age: int)`
        if _has_method(record, f'set_{name}'):
            setter_hints = _type_hints(getattr(record, f'set_{name}'))
            setter_hints.pop('return', None)
            if setter_hints:
                return next(iter(setter_hints.values()))

        return None

    def has_structural_eq(self, record: Any) -> bool:
        """ Is the record compared by value, not by identity? """
        return type(record).__eq__ is not object.__eq__


class DataclassRecordAccessor(RecordAccessor):
    """ Field-level access to dataclass instances

    Only dataclass fields are fields. Setter methods are used when available.
    Frozen dataclasses are supported: their clones are modified directly.
    """
    kind = 'dataclass'

    def has_field(self, record, name):
        return name in _dataclass_fields(record)

    def can_read(self, record, name):
        return self.has_field(record, name)

    def can_write(self, record, name):
        return self.has_field(record, name)

    def read(self, record, name):
        return getattr(record, name)

    def write(self, record, name, value):
        if record.__dataclass_params__.frozen:
            # Only ever called on clones
            object.__setattr__(record, name, value)
            return record
        return super().write(record, name, value)

    def default(self, record, name):
        field = _dataclass_fields(record)[name]
        if field.default is not dataclasses.MISSING:
            return field.default
        if field.default_factory is not dataclasses.MISSING:
            return field.default_factory()
        return super().default(record, name)


class PydanticRecordAccessor(RecordAccessor):
    """ Field-level access to pydantic models

    Values are replaced with `model_copy(update=...)`, without validation:
    frozen models, frozen fields, and `validate_assignment` models are all written the same way.
    """
    kind = 'pydantic model'

    def has_field(self, record: pd.BaseModel, name):
        return name in type(record).model_fields

    def can_read(self, record, name):
        return self.has_field(record, name)

    def can_write(self, record, name):
        return self.has_field(record, name)

    def read(self, record, name):
        return getattr(record, name)

    def write(self, record: pd.BaseModel, name, value):
        # Unvalidated: frozen fields and field constraints do not apply to clones
        return record.model_copy(update={name: value})

    def clone(self, record: pd.BaseModel):
        return record.model_copy(deep=True)

    def default(self, record: pd.BaseModel, name):
        field = type(record).model_fields[name]
        if not field.is_required():
            return field.get_default(call_default_factory=True)
        return super().default(record, name)

    def annotation(self, record, name):
        return type(record).model_fields[name].annotation


class MappingRecordAccessor(RecordAccessor):
    """ Field-level access to dicts: keys are fields

    Mappings carry no type information, so the neutral value for every key is `None`.
    """
    kind = 'mapping'

    def has_field(self, record: abc.Mapping, name):
        return name in record

    def can_read(self, record, name):
        return name in record

    def can_write(self, record, name):
        return isinstance(record, abc.MutableMapping) and name in record

    def read(self, record: abc.Mapping, name):
        return record[name]

    def write(self, record: abc.MutableMapping, name, value):
        record[name] = value
        return record

    def default(self, record, name):
        return None

    def has_structural_eq(self, record):
        return True


@singledispatch_lambda().decorator
def accessor_for(record: Any) -> RecordAccessor:
    """ Get a field accessor for the record """
    return OBJECT_ACCESSOR


@accessor_for.register(lambda v: isinstance(v, type))
def accessor_for_class(record: type) -> RecordAccessor:
    raise UnsupportedRecordError(
        f'Expected a record instance, got a class: {record.__name__}',
        'Pass an instance of the class',
        record_type=record.__name__,
    )


@accessor_for.register(lambda v: isinstance(v, pd.BaseModel))
def accessor_for_pydantic_model(record: pd.BaseModel) -> RecordAccessor:
    return PYDANTIC_ACCESSOR


@accessor_for.register(dataclasses.is_dataclass)
def accessor_for_dataclass(record: Any) -> RecordAccessor:
    return DATACLASS_ACCESSOR


@accessor_for.register(lambda v: isinstance(v, abc.Mapping))
def accessor_for_mapping(record: abc.Mapping) -> RecordAccessor:
    return MAPPING_ACCESSOR


# Accessors are stateless: share them
OBJECT_ACCESSOR = RecordAccessor()
DATACLASS_ACCESSOR = DataclassRecordAccessor()
PYDANTIC_ACCESSOR = PydanticRecordAccessor()
MAPPING_ACCESSOR = MappingRecordAccessor()


def _has_method(record: Any, name: str) -> bool:
    """ Does the record have a method with this name? """
    return inspect.isroutine(inspect.getattr_static(type(record), name, None))


def _is_getter(record: Any, name: str) -> bool:
    """ Is there a method with this name that can be called without arguments? """
    if not _has_method(record, name):
        return False

    try:
        signature = inspect.signature(getattr(record, name))
    except (TypeError, ValueError):
        return False

    return not any(
        param.default is inspect.Parameter.empty and param.kind not in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
        for param in signature.parameters.values()
    )


def _dataclass_fields(record: Any) -> dict[str, dataclasses.Field]:
    return {field.name: field for field in dataclasses.fields(record)}


def _type_hints(obj: Any) -> dict[str, Any]:
    """ Get resolved type hints; empty when they cannot be resolved """
    try:
        return typing.get_type_hints(obj, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug('Cannot resolve type hints of %r: %s', obj, e)
        return {}


_MISSING = object()
