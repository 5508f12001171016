import json
import logging
import typing
import numpy as np
from .types import *
from .errors import InvalidArgumentError, ParseError

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

logger = logging.getLogger(__name__)


def from_array(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from a list or any other iterable"""
    from .enumerable import Enumerable
    return Enumerable(data)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable()

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """
    create enumerable with repeated item.
    the item is not copied: every position holds the same object, so
    mutating one element of repeat([], 3) shows up in all three.
    """
    from .enumerable import Enumerable
    if count < 0:
        raise InvalidArgumentError(f"Count must be non-negative, got {count}")
    return Enumerable([item] * count)

def from_json(text: Union[str, bytes, bytearray]) -> 'Enumerable[Any]':
    """
    create enumerable from a json array.
    malformed json and documents that are not arrays raise ParseError;
    arrays mixing element types raise TypeInconsistencyError as usual.
    """
    from .enumerable import Enumerable
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("could not decode json input: %s", e)
        raise ParseError(f"Malformed JSON: {e.msg} at line {e.lineno} column {e.colno}") from e
    except (ValueError, RecursionError) as e:
        # undecodable bytes, or nesting deeper than the decoder can follow
        logger.debug("could not decode json input: %s", e)
        raise ParseError(f"Malformed JSON: {e}") from e

    if not isinstance(data, list):
        logger.debug("json input decoded to %s instead of an array", type_name(data))
        raise ParseError(f"JSON document must be an array, got {type_name(data)}")
    return Enumerable(data)

def _is_integral(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)

def from_range(start: Union[int, float], stop: Union[int, float],
               step: Union[int, float] = 1) -> 'Enumerable[Union[int, float]]':
    """
    create enumerable from an inclusive range.
    the direction follows start and stop, so only the magnitude of step
    matters: from_range(5, 1) and from_range(5, 1, -1) both count down.
    """
    from .enumerable import Enumerable
    if step == 0:
        raise InvalidArgumentError("Range step must not be zero")

    step = abs(step)
    direction = 1 if stop >= start else -1
    if _is_integral(start) and _is_integral(stop) and _is_integral(step):
        return Enumerable(range(int(start), int(stop) + direction, int(step) * direction))

    # float ranges: count whole steps, tolerating representation error at the end
    count = int(np.floor(abs(stop - start) / step + 1e-9)) + 1
    values = float(start) + direction * float(step) * np.arange(count)
    return Enumerable(values.tolist())

# --- aliases ---
from_iterable = from_array
Q = from_array
