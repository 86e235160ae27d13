"""Collection generators: lists of random numbers and random picks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import msgspec

from take_chance.errors import EmptyCollectionError
from take_chance.scalar import random_float, random_int
from take_chance.source import EntropySource

__all__ = [
    'from_array',
    'from_object',
    'multiple_float',
    'multiple_int',
]


def multiple_int(
    length: int,
    low: float = 0,
    high: float = 100,
    *,
    source: EntropySource | None = None,
) -> list[int]:
    """Return ``length`` independent ``random_int(low, high)`` draws.

    A length of zero or less gives an empty list.
    """
    return [random_int(low, high, source=source) for _ in range(length)]


def multiple_float(
    length: int,
    low: float = 0,
    high: float = 1,
    *,
    source: EntropySource | None = None,
) -> list[float]:
    """Return ``length`` independent ``random_float(low, high)`` draws.

    A length of zero or less gives an empty list.
    """
    return [random_float(low, high, source=source) for _ in range(length)]


def from_array[T](
    array: Sequence[T],
    low: int = 0,
    high: int | None = None,
    *,
    source: EntropySource | None = None,
) -> T:
    """Pick an element of ``array`` from the indexes ``low`` to ``high``.

    Both bounds are clamped into ``[0, len(array) - 1]`` before drawing, so
    out-of-range bounds can never produce an invalid index. If ``low`` ends up
    above ``high`` the pick comes from ``array[high:low + 1]``.

    Args:
        array: The sequence to choose from.
        low: Smallest index to consider. Defaults to the first element.
        high: Largest index to consider. Defaults to the last element.
        source: Entropy source, the process default if None.

    Returns:
        The chosen element.

    Raises:
        EmptyCollectionError: If ``array`` is empty.

    Example:
        ```python
        from_array(['rock', 'paper', 'scissors'])
        # 'paper'
        from_array([1, 2, 3], 5, 1)
        # 2 or 3
        ```
    """
    if not array:
        raise EmptyCollectionError(type(array).__name__)

    last = len(array) - 1
    if high is None:
        high = last
    low = min(max(low, 0), last)
    high = min(max(high, 0), last)
    return array[random_int(low, high, source=source)]


def _keys_of(obj: Any) -> list[Any]:
    if isinstance(obj, Mapping):
        return list(obj)
    if isinstance(obj, msgspec.Struct):
        return list(obj.__struct_fields__)
    return list(vars(obj))


def from_object(obj: Any, *, source: EntropySource | None = None) -> Any:
    """Pick a random key of ``obj``.

    Keys are a mapping's keys in iteration order, a ``msgspec.Struct``'s field
    names, or the instance attributes of any other object.

    Raises:
        EmptyCollectionError: If ``obj`` has no keys.
        TypeError: If ``obj`` is neither a mapping nor has attributes.
    """
    keys = _keys_of(obj)
    if not keys:
        raise EmptyCollectionError(type(obj).__name__)
    return from_array(keys, source=source)
