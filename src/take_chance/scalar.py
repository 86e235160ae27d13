"""Scalar generators: floats, integers, booleans, dice and a skewed bell curve.

Ranges are ``(low, high)`` pairs and are never reordered: passing
``low > high`` yields values between ``high`` and ``low`` wherever the
arithmetic allows it.
"""

from __future__ import annotations

import math

from take_chance.errors import InvalidArgumentError
from take_chance.source import EntropySource, resolve_source

__all__ = [
    'binomial',
    'boolean',
    'die',
    'random_float',
    'random_int',
    'secure_int',
]


def random_float(low: float = 0, high: float = 1, *, source: EntropySource | None = None) -> float:
    """Return a float drawn uniformly from ``[low, high)``.

    Example:
        ```python
        random_float(-1, 1)
        # 0.4213...
        ```
    """
    return resolve_source(source).uniform() * (high - low) + low


def random_int(low: float = 0, high: float = 100, *, source: EntropySource | None = None) -> int:
    """Return ``random_float(low, high)`` rounded half-up to an integer.

    The two end points only collect half a unit of the continuous range each,
    so they come up about half as often as interior values. Use
    ``secure_int`` when exact uniformity over the integers matters.
    """
    return math.floor(random_float(low, high, source=source) + 0.5)


def _scale_to_int(r: float, low: float, high: float) -> int:
    lo = math.ceil(low)
    hi = math.floor(high)
    return math.floor(r * (hi - lo + 1)) + lo


def secure_int(low: float = 0, high: float = 100, *, source: EntropySource | None = None) -> int:
    """Return an integer drawn uniformly from ``[ceil(low), floor(high)]``.

    Uses the secure half of the source. Unlike ``random_int`` every integer in
    the range is equally likely.
    """
    return _scale_to_int(resolve_source(source).secure_uniform(), low, high)


def boolean(probability: float = 0.5, *, source: EntropySource | None = None) -> bool:
    """Return True with the given probability.

    Probabilities at or below 0 never return True; at or above 1 always do.
    """
    return resolve_source(source).uniform() < probability


def _nonzero_uniform(source: EntropySource) -> float:
    value = 0.0
    while value == 0.0:
        value = source.uniform()
    return value


def binomial(
    low: float = 0,
    high: float = 1,
    skew: float = 1,
    *,
    source: EntropySource | None = None,
) -> float:
    """Return a bell-curve distributed float between ``low`` and ``high``.

    A standard normal sample is produced with the Box-Muller transform, squeezed
    to ``n / 10 + 0.5`` and redrawn until it lands in [0, 1]. The accepted
    value is raised to ``skew`` before being stretched over the range, so
    ``skew > 1`` pulls results towards ``low`` and ``skew < 1`` towards ``high``.

    Args:
        low: Lower end of the range.
        high: Upper end of the range.
        skew: Exponent applied to the normalized sample. Must be positive.
        source: Entropy source, the process default if None.

    Returns:
        A float within ``[low, high]``.

    Raises:
        InvalidArgumentError: If ``skew <= 0``.
    """
    if skew <= 0:
        raise InvalidArgumentError('skew', 'must be greater than 0')

    src = resolve_source(source)
    while True:
        u = _nonzero_uniform(src)
        v = _nonzero_uniform(src)
        num = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
        num = num / 10.0 + 0.5
        if 0.0 <= num <= 1.0:
            return num**skew * (high - low) + low


def die(n: int = 6, *, source: EntropySource | None = None) -> int:
    """Roll an ``n``-sided die, returning a value from 1 to ``n``.

    Every face is equally likely; unlike ``random_int(1, n)`` the end faces
    are not half-weighted.
    """
    return _scale_to_int(resolve_source(source).uniform(), 1, n)
