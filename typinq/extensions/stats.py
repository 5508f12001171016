from __future__ import annotations
import typing
import numpy as np
from ..types import *
from ..errors import EmptyCollectionError, NonNumericError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _StatsOperations(Generic[T]):
    def _get_values(self: 'Enumerable[T]', operation: str) -> Tuple[Union[int, float], ...]:
        """
        helper to get the numeric values for an aggregate.
        the element type was fixed at construction, so checking the descriptor
        is the same as checking the first element.
        """
        data = self._get_data()
        if not data:
            raise EmptyCollectionError(operation)
        if not self._descriptor.is_numeric:
            raise NonNumericError(operation)
        return data

    def _total(self: 'Enumerable[T]', operation: str) -> Union[int, float]:
        values = self._get_values(operation)
        if issubclass(self._descriptor.type, (int, np.integer)):
            # python ints never overflow, int64 accumulators would
            return sum(int(x) for x in values)
        return np.sum(np.asarray(values, dtype=np.float64)).item()

    def sum(self: 'Enumerable[T]') -> Union[int, float]:
        """calc sum; int for int elements, float for float elements"""
        return self._total('sum')

    def average(self: 'Enumerable[T]') -> float:
        """calc average, always a float"""
        total = self._total('average')
        return total / len(self._get_data())

    def min(self: 'Enumerable[T]') -> Union[int, float]:
        """find minimum"""
        return min(self._get_values('min'))

    def max(self: 'Enumerable[T]') -> Union[int, float]:
        """find maximum"""
        return max(self._get_values('max'))
