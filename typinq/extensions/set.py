from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..comparison import StrictSet

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _SetOperations(Generic[T]):
    """
    set-theoretic operations under strict equality.
    except_ and intersect keep duplicates from the first sequence;
    distinct and union keep the first occurrence of every value.
    unhashable elements (dicts, lists) are supported through a linear fallback.
    """

    def distinct(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        seen = StrictSet()
        # add() reports whether the value was new, which doubles as the filter
        return Enumerable([item for item in self._get_data() if seen.add(item)])

    def distinct_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """keep the first element seen for every distinct key."""
        from ..enumerable import Enumerable
        seen = StrictSet()
        return Enumerable([item for item in self._get_data() if seen.add(key_selector(item))])

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        return Enumerable(chain(self._get_data(), other))

    def except_(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        other_set = StrictSet(other)
        return Enumerable([item for item in self._get_data() if item not in other_set])

    def intersect(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """return elements from the first sequence that also appear in the second."""
        from ..enumerable import Enumerable
        other_set = StrictSet(other)
        return Enumerable([item for item in self._get_data() if item in other_set])

    def union(self: 'Enumerable[T]', second: Iterable[T]) -> 'Enumerable[T]':
        """
        return the order-preserving union of two sequences (distinct elements).
        both sequences must hold the same element type; a mismatch is reported
        at its index in the concatenation.
        """
        return self.concat(second).distinct()
