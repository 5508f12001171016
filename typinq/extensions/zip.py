from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _ZipOperations(Generic[T]):
    def zip(self: 'Enumerable[T]', second: Iterable[U], combiner: Combiner[T, U, V]) -> 'Enumerable[V]':
        """combine elements pairwise; stops at the end of the shorter sequence"""
        from ..enumerable import Enumerable
        return Enumerable([combiner(t, u) for t, u in zip(self._get_data(), second)])
