r"""
'    __                  _
'   / /___ _____  (_)___  ____ _
'  / __/ / / / __ \/ / __ \/ __ `/
' / /_/ /_/ / /_/ / / / / / /_/ /
' \__/\__, / .___/_/_/ /_/\__, /
'    /____/_/               /_/
"""

import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, Grouping

# expose the factory functions
from .factories import (
    from_array,
    from_iterable,
    from_json,
    from_range,
    repeat,
    empty,
    Q
)

# expose the error taxonomy
from .errors import (
    EnumerableError,
    TypeInconsistencyError,
    EmptyCollectionError,
    NonNumericError,
    IndexOutOfBoundsError,
    NoMatchError,
    MultipleMatchesError,
    ParseError,
    InvalidArgumentError
)

# silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "Grouping",
    "from_array",
    "from_iterable",
    "from_json",
    "from_range",
    "repeat",
    "empty",
    "Q",
    "EnumerableError",
    "TypeInconsistencyError",
    "EmptyCollectionError",
    "NonNumericError",
    "IndexOutOfBoundsError",
    "NoMatchError",
    "MultipleMatchesError",
    "ParseError",
    "InvalidArgumentError"
]
