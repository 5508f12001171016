from typing import Optional


class EnumerableError(Exception):
    """base class for every error raised by typinq"""


class TypeInconsistencyError(EnumerableError, TypeError):
    """raised when elements of an enumerable do not share one runtime type"""

    def __init__(self, expected: str, actual: str, index: int):
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            f'Collection items must be of the same type. '
            f'Expected "{expected}", got "{actual}" at index {index}.'
        )


class EmptyCollectionError(EnumerableError, ValueError):
    """raised by aggregates and element access on an empty enumerable"""

    def __init__(self, operation: Optional[str] = None):
        self.operation = operation
        if operation is None:
            super().__init__("Collection is empty")
        else:
            super().__init__(f"Cannot calculate {operation} of an empty collection")


class NonNumericError(EnumerableError, TypeError):
    """raised by aggregates when the element type is not a number"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot calculate {operation} of non-numeric values")


class IndexOutOfBoundsError(EnumerableError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of bounds for collection of size {size}")


class NoMatchError(EnumerableError, ValueError):
    def __init__(self):
        super().__init__("No item found that matches the condition")


class MultipleMatchesError(EnumerableError, ValueError):
    def __init__(self, found: int):
        self.found = found
        super().__init__(f"Expected exactly one item, found {found}")


class ParseError(EnumerableError, ValueError):
    """raised by from_json when the text is not a json array"""


class InvalidArgumentError(EnumerableError, ValueError):
    """raised for structurally nonsensical arguments (negative counts, zero steps)"""
