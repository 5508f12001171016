from functools import cmp_to_key
from .types import *


def strict_equals(a: Any, b: Any) -> bool:
    """
    identity-aware equality: 1, 1.0 and True are three different values.
    lists, tuples, dicts and sets are compared element by element under the
    same rule, so [1] does not match [1.0] and {'a': 1} does not match {'a': True}.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(strict_equals(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        if len(a) != len(b):
            return False
        others = {_strict_key(k): v for k, v in b.items()}
        for k, v in a.items():
            key = _strict_key(k)
            if key not in others or not strict_equals(v, others[key]):
                return False
        return True
    if isinstance(a, (set, frozenset)):
        return {_strict_key(x) for x in a} == {_strict_key(x) for x in b}
    return bool(a == b)


def _strict_key(value: Any) -> Tuple[type, Any]:
    # raises TypeError for unhashable values, callers fall back to a scan
    if isinstance(value, tuple):
        key = (type(value), tuple(_strict_key(x) for x in value))
    elif isinstance(value, (set, frozenset)):
        key = (type(value), frozenset(_strict_key(x) for x in value))
    else:
        key = (type(value), value)
    hash(key)
    return key


class StrictIndex(Generic[T]):
    """
    assigns positions to distinct values under strict_equals, in first-seen order.
    hashable values are looked up through a dict; unhashable ones (dicts, lists)
    are kept in a list and scanned linearly.
    """

    def __init__(self):
        self._hashed: Dict[Tuple[type, Any], int] = {}
        self._unhashable: List[Tuple[T, int]] = []
        self._size = 0

    def find(self, value: T) -> Optional[int]:
        try:
            return self._hashed.get(_strict_key(value))
        except TypeError:
            for seen, position in self._unhashable:
                if strict_equals(value, seen):
                    return position
            return None

    def add(self, value: T) -> Tuple[int, bool]:
        """returns (position, is_new) for value"""
        position = self.find(value)
        if position is not None:
            return position, False

        position = self._size
        try:
            self._hashed[_strict_key(value)] = position
        except TypeError:
            self._unhashable.append((value, position))
        self._size += 1
        return position, True

    def __len__(self) -> int:
        return self._size


class StrictSet(Generic[T]):
    """membership under strict_equals, usable with unhashable values"""

    def __init__(self, values: Iterable[T] = ()):
        self._index: StrictIndex[T] = StrictIndex()
        for value in values:
            self._index.add(value)

    def add(self, value: T) -> bool:
        """adds value, returning False when it was already present"""
        _, is_new = self._index.add(value)
        return is_new

    def __contains__(self, value: Any) -> bool:
        return self._index.find(value) is not None

    def __len__(self) -> int:
        return len(self._index)


def sort_key(key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> Callable[[T], Any]:
    """builds a key for sorted() from a key selector and an optional three-way comparer"""
    if comparer is None:
        return key_selector
    wrapped = cmp_to_key(comparer)
    return lambda item: wrapped(key_selector(item))
