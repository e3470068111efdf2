""" Field-set resolver: access fields of records by name """

from .accessor import (
    accessor_for,
    RecordAccessor,
    DataclassRecordAccessor,
    PydanticRecordAccessor,
    MappingRecordAccessor,
)
from .defaults import neutral_default
from .resolve import FieldSelection, field_names, resolve_fields
