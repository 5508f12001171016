from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .comparison import sort_key
from .errors import TypeInconsistencyError

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.zip import _ZipOperations
from .extensions.stats import _StatsOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Tuple[T, ...]:
        """get the underlying elements as a tuple"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, items: Iterable[T] = ()):
        """init from any iterable, validating that every element shares one type"""
        data = tuple(items)
        self._descriptor = self._validate(data)
        self._items = data

    @staticmethod
    def _validate(data: Tuple[T, ...]) -> Optional[TypeDescriptor]:
        if not data:
            return None

        descriptor = TypeDescriptor.of(data[0])
        for index, item in enumerate(data):
            if not descriptor.matches(item):
                logger.debug("rejected %s at index %d in a collection of %s",
                             type_name(item), index, descriptor.name)
                raise TypeInconsistencyError(descriptor.name, type_name(item), index)
        return descriptor

    def _get_data(self) -> Tuple[T, ...]:
        return self._items

    @property
    def element_type(self) -> Optional[type]:
        """the shared runtime type of the elements, None when empty"""
        return self._descriptor.type if self._descriptor is not None else None

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _ZipOperations[T],
    _StatsOperations[T],
    _TerminalOperations[T]
):
    """an immutable, type-homogeneous, linq-inspired sequence."""
    def __init__(self, items: Iterable[T] = ()):
        super().__init__(items)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IEnumerable):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self._items)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: Iterable[T], sort_keys: List[Tuple[Callable, bool]]):
        source = tuple(source)
        data = list(source)
        # python's sort is stable, so we sort from the last key to the first
        for key_selector, is_descending in reversed(sort_keys):
            data.sort(key=key_selector, reverse=is_descending)
        super().__init__(data)
        self._source = source
        self._sort_keys = sort_keys

    def then_by(self, key_selector: KeySelector[T, K],
                comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        new_keys = self._sort_keys + [(sort_key(key_selector, comparer), False)]
        return OrderedEnumerable(self._source, new_keys)

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        new_keys = self._sort_keys + [(sort_key(key_selector, comparer), True)]
        return OrderedEnumerable(self._source, new_keys)

# --- grouping class ---

class Grouping(Enumerable[T], Generic[K, T]):
    """
    the elements sharing one key, as produced by group_by.
    == and hash come from Enumerable and compare the members only, so two
    groupings with different keys but the same members are equal.
    """

    def __init__(self, key: K, items: Iterable[T]):
        super().__init__(items)
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r}, items={list(self._items)!r})"
