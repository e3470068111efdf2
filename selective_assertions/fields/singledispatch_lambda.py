from collections import abc
from typing import Any, Optional


class singledispatch_lambda:
    """ singledispatch, where every implementation has a custom lambda that checks whether it's applicable

    functools.singledispatch works with types only. Records come in kinds that are not types:
    "any dataclass instance", "any pydantic model", "any mapping".
    Here, you register implementations together with a `check` function that decides whether it's applicable.

    Checks are tried in registration order: the first one that gives `True` wins.
    If none matches, the default implementation (the decorated function) is used.

    Example:
        @singledispatch_lambda().decorator
        def accessor_for(record):
            raise NotImplementedError

        @accessor_for.register(dataclasses.is_dataclass)
        def accessor_for_dataclass(record):
            ...
    """
    def __init__(self):
        self.dispatchers: list[tuple[abc.Callable[[Any], bool], abc.Callable]] = []
        self.default_callback: Optional[abc.Callable] = None

    def __call__(self, value, *args, **kwargs):
        return self.dispatch(value)(value, *args, **kwargs)

    def dispatch(self, value) -> abc.Callable:
        """ Find the implementation applicable to `value` """
        for check, cb in self.dispatchers:
            if check(value):
                return cb
        if self.default_callback is None:
            raise TypeError(f'No implementation for {type(value).__name__}')
        return self.default_callback

    def decorator(self, cb: abc.Callable):
        self.default_callback = cb
        return self

    def register(self, check: abc.Callable[[Any], bool]):
        """ Register an implementation that kicks in only when `check` gives `True` """
        def decorator(cb: abc.Callable):
            self.dispatchers.append((check, cb))
            return cb
        return decorator
