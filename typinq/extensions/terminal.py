from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..comparison import strict_equals
from ..errors import (
    EmptyCollectionError, IndexOutOfBoundsError, MultipleMatchesError, NoMatchError
)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _as_tuple(other: Iterable[T]) -> Tuple[T, ...]:
    get_data = getattr(other, '_get_data', None)
    return get_data() if get_data is not None else tuple(other)


class _TerminalOperations(Generic[T]):
    # --- quantifiers ---

    def count(self: 'Enumerable[T]') -> int:
        """number of elements"""
        return len(self._get_data())

    def count_by(self: 'Enumerable[T]', predicate: Predicate[T]) -> int:
        """number of elements satisfying predicate"""
        return sum(1 for x in self._get_data() if predicate(x))

    def all(self: 'Enumerable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition; true for an empty sequence"""
        return all(predicate(x) for x in self._get_data())

    def any(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def contains(self: 'Enumerable[T]', value: Union[T, Predicate[T]]) -> bool:
        """
        membership test under strict equality (1 does not match 1.0 or True).
        a callable argument is treated as a predicate instead, so
        contains(lambda x: x > 2) behaves like any(lambda x: x > 2).
        """
        data = self._get_data()
        if callable(value):
            return any(value(x) for x in data)
        return any(strict_equals(x, value) for x in data)

    # --- element access ---

    def item_at(self: 'Enumerable[T]', index: int) -> T:
        """element at index; negative indices are out of bounds"""
        data = self._get_data()
        if not 0 <= index < len(data):
            raise IndexOutOfBoundsError(index, len(data))
        return data[index]

    def item_at_or_default(self: 'Enumerable[T]', index: int, default: Optional[T] = None) -> Optional[T]:
        data = self._get_data()
        return data[index] if 0 <= index < len(data) else default

    def first(self: 'Enumerable[T]') -> T:
        """get first element"""
        data = self._get_data()
        if not data: raise EmptyCollectionError()
        return data[0]

    def first_or_default(self: 'Enumerable[T]', default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        data = self._get_data()
        return data[0] if data else default

    def last(self: 'Enumerable[T]') -> T:
        """get last element"""
        data = self._get_data()
        if not data: raise EmptyCollectionError()
        return data[-1]

    def last_or_default(self: 'Enumerable[T]', default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        data = self._get_data()
        return data[-1] if data else default

    def _matches(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> List[T]:
        test = with_index(predicate)
        return [item for index, item in enumerate(self._get_data()) if test(item, index)]

    def single(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> T:
        """get the only element matching predicate, erroring if not exactly one"""
        matches = self._matches(predicate)
        if len(matches) == 0: raise NoMatchError()
        if len(matches) > 1: raise MultipleMatchesError(len(matches))
        return matches[0]

    def single_or_default(self: 'Enumerable[T]', predicate: IndexedPredicate[T],
                          default: Optional[T] = None) -> Optional[T]:
        """like single, but returns default when nothing matches. still errors on several matches."""
        matches = self._matches(predicate)
        if len(matches) == 0: return default
        if len(matches) > 1: raise MultipleMatchesError(len(matches))
        return matches[0]

    # --- equality ---

    def equal(self: 'Enumerable[T]', other: Iterable[T]) -> bool:
        """same length and strictly equal elements at every index"""
        return self.equal_by(other, strict_equals)

    def equal_by(self: 'Enumerable[T]', other: Iterable[U], comparator: Callable[[T, U], Any]) -> bool:
        """same length and comparator(a, b) truthy at every index"""
        data, other_data = self._get_data(), _as_tuple(other)
        if len(data) != len(other_data):
            return False
        return all(comparator(a, b) for a, b in zip(data, other_data))

    # --- conversion ---

    def to_array(self: 'Enumerable[T]') -> List[T]:
        """a fresh list of the elements; mutating it does not affect the enumerable"""
        return list(self._get_data())


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return self._enumerable._get_data()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later elements win on duplicate keys"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._enumerable._get_data()))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._enumerable._get_data()))
