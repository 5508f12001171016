from __future__ import annotations
import typing
from itertools import chain, takewhile, dropwhile
from ..types import *
from ..comparison import sort_key
from ..errors import InvalidArgumentError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidArgumentError(f"Count must be non-negative, got {count}")


def _identity(item):
    return item


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """filter elements with predicate(item) or predicate(item, index)"""
        from ..enumerable import Enumerable
        test = with_index(predicate)
        return Enumerable([item for index, item in enumerate(self._get_data()) if test(item, index)])

    def select(self: 'Enumerable[T]', selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
        """
        project each element to a new form with selector(item) or selector(item, index).
        the projected values must share one type, like any other enumerable.
        """
        from ..enumerable import Enumerable
        project = with_index(selector)
        return Enumerable([project(item, index) for index, item in enumerate(self._get_data())])

    def order(self: 'Enumerable[T]') -> 'OrderedEnumerable[T]':
        """sort elements by their natural ordering"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data(), [(_identity, False)])

    def order_descending(self: 'Enumerable[T]') -> 'OrderedEnumerable[T]':
        """sort elements by their natural ordering, largest first"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data(), [(_identity, True)])

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                 comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """stable sort by a key, optionally compared with a three-way comparer"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data(), [(sort_key(key_selector, comparer), False)])

    def order_descending_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                            comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """stable sort by a key in descending order; equal keys keep their original order"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data(), [(sort_key(key_selector, comparer), True)])

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        _check_count(count)
        return Enumerable(self._get_data()[:count])

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        _check_count(count)
        return Enumerable(self._get_data()[count:])

    def take_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the last 'count' elements"""
        from ..enumerable import Enumerable
        _check_count(count)
        data = self._get_data()
        return Enumerable(data[max(len(data) - count, 0):])

    def skip_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """drop the last 'count' elements"""
        from ..enumerable import Enumerable
        _check_count(count)
        data = self._get_data()
        return Enumerable(data[:max(len(data) - count, 0)])

    def take_while(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true; stops at the first failure"""
        from ..enumerable import Enumerable
        test = with_index(predicate)
        taken = takewhile(lambda pair: test(pair[1], pair[0]), enumerate(self._get_data()))
        return Enumerable([item for _, item in taken])

    def skip_while(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true; everything after the first failure is kept"""
        from ..enumerable import Enumerable
        test = with_index(predicate)
        remaining = dropwhile(lambda pair: test(pair[1], pair[0]), enumerate(self._get_data()))
        return Enumerable([item for _, item in remaining])

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(reversed(self._get_data()))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a single value to the end of the sequence"""
        from ..enumerable import Enumerable
        # lists and enumerables are appended as one element, use concat to splice
        return Enumerable(chain(self._get_data(), [element]))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a single value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(chain([element], self._get_data()))
