import inspect
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
IndexedPredicate = Union[Callable[[T], bool], Callable[[T, int], bool]]
Selector = Callable[[T], U]
IndexedSelector = Union[Callable[[T], U], Callable[[T, int], U]]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Combiner = Callable[[T, U], V]

# bool is an int subclass but never counts as a number here
_NUMERIC_TYPES = (int, float, np.integer, np.floating)


class TypeDescriptor:
    """the element type of an enumerable, captured once at construction"""

    __slots__ = ('type', 'name', 'is_numeric')

    def __init__(self, element_type: type):
        self.type = element_type
        self.name = element_type.__name__
        self.is_numeric = (issubclass(element_type, _NUMERIC_TYPES)
                           and not issubclass(element_type, (bool, np.bool_)))

    @classmethod
    def of(cls, value: Any) -> 'TypeDescriptor':
        return cls(type(value))

    def matches(self, value: Any) -> bool:
        return type(value) is self.type

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, TypeDescriptor) and self.type is other.type

    def __hash__(self) -> int:
        return hash(self.type)

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.name}, numeric={self.is_numeric})"


def type_name(value: Any) -> str:
    return type(value).__name__


def _accepts_index(func: Callable) -> bool:
    """true when func requires a second positional argument, or takes *args"""
    if isinstance(func, type):
        # classes used as selectors (str, int, Decimal) are single-value conversions
        return False
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # some builtins have no introspectable signature
        return False

    positional = 0
    for param in params:
        if param.kind == param.VAR_POSITIONAL:
            return True
        # optional parameters (str.strip chars, round ndigits) never receive the index
        if (param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
                and param.default is param.empty):
            positional += 1
    return positional >= 2


def with_index(func: Callable[..., U]) -> Callable[[Any, int], U]:
    """
    adapts a callable so it can always be invoked as func(item, index).
    callables taking a single argument are called with the item only.
    """
    if _accepts_index(func):
        return func
    return lambda item, _index: func(item)
