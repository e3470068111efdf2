""" Neutral default values: what a field of a given type is reset to when it's ignored """

from __future__ import annotations

import enum
import types
from collections import abc
from typing import Annotated, Any, Literal, Union
from typing import get_args, get_origin


def neutral_default(annotation: Any) -> Any:
    """ Get a neutral value for a type annotation

    Rules:
    * Unannotated, `Any`, `None`, `Optional[T]` => None
    * `Union[A, B]` => the default of `A`
    * `Literal['a', 'b']` => 'a'
    * An Enum => its first member
    * Generic aliases like `list[int]` => an empty container of the origin type
    * Any other type => `T()`, called with no arguments

    Raises:
        TypeError: this type has no neutral value (e.g. a class with required constructor arguments)
    """
    # Annotated[T, ...]: only T matters
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]

    # Nothing known
    if annotation is None or annotation is Any or annotation is type(None):
        return None

    origin = get_origin(annotation)

    # Optional[T], Union[A, B], A | B
    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        if type(None) in args:
            return None
        return neutral_default(args[0])

    # Literal['a', 'b']
    if origin is Literal:
        return get_args(annotation)[0]

    # list[int], dict[str, int], abc.Sequence[str]
    if origin is not None:
        return neutral_default(origin)

    if isinstance(annotation, type):
        # Abstract containers: use a concrete one
        if annotation in ABSTRACT_CONTAINERS:
            return ABSTRACT_CONTAINERS[annotation]()

        # Enums cannot be called without a value: use the first member
        if issubclass(annotation, enum.Enum):
            try:
                return next(iter(annotation))
            except StopIteration:
                raise TypeError(f'Enum {annotation.__name__} has no members') from None

        try:
            return annotation()
        except (TypeError, ValueError) as e:
            raise TypeError(f'Type {annotation.__name__} cannot be created without arguments: {e}') from e

    raise TypeError(f'Cannot make a neutral value for {annotation!r}')


# Abstract container types, mapped to concrete ones
ABSTRACT_CONTAINERS: dict[type, abc.Callable[[], Any]] = {
    abc.Iterable: list,
    abc.Collection: list,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Set: frozenset,
    abc.MutableSet: set,
    abc.Mapping: dict,
    abc.MutableMapping: dict,
}
