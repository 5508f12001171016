from __future__ import annotations
import typing
from itertools import batched
from ..types import *
from ..comparison import StrictIndex
from ..errors import InvalidArgumentError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'Enumerable[Grouping[K, T]]':
        """
        group elements by a key.
        groups come out in the order their key was first seen and keep the
        encounter order of their elements.
        """
        from ..enumerable import Enumerable, Grouping
        index = StrictIndex()
        keys: List[K] = []
        buckets: List[List[T]] = []
        for item in self._get_data():
            key = key_selector(item)
            position, is_new = index.add(key)
            if is_new:
                keys.append(key)
                buckets.append([])
            buckets[position].append(item)
        return Enumerable([Grouping(key, bucket) for key, bucket in zip(keys, buckets)])

    def chunk(self: 'Enumerable[T]', length: int) -> 'Enumerable[Enumerable[T]]':
        """
        split into consecutive chunks of at most 'length' elements.
        the last chunk may be shorter.
        """
        from ..enumerable import Enumerable
        if length <= 0:
            raise InvalidArgumentError(f"Chunk length must be positive, got {length}")
        return Enumerable([Enumerable(batch) for batch in batched(self._get_data(), length)])
