"""Uniform entropy sources.

Every generator in take-chance is built on two primitives that map entropy
onto the half-open interval [0, 1):

* ``uniform()`` - fast, non-cryptographic (``random.Random``).
* ``secure_uniform()`` - one unsigned 32-bit value from the OS CSPRNG
  (``secrets``), divided by 2**32.

Sources are plain values passed to generators rather than hidden globals, so a
scripted source can stand in for the system one in tests. A process-wide
default exists for convenience and can be swapped with ``set_default_source``.

Seeding is intentionally not part of the contract: ``SystemEntropy`` seeds
itself from the host and exposes no way to replay a sequence.
"""

from __future__ import annotations

import random
import secrets
from typing import Protocol, runtime_checkable

__all__ = [
    'EntropySource',
    'SystemEntropy',
    'default_source',
    'resolve_source',
    'set_default_source',
]

_U32_SPAN = 0xFFFFFFFF + 1


@runtime_checkable
class EntropySource(Protocol):
    """Protocol for the two uniform [0, 1) generators every draw starts from."""

    def uniform(self) -> float:
        """Return a fast, non-cryptographic float in [0, 1)."""
        ...

    def secure_uniform(self) -> float:
        """Return a cryptographically secure float in [0, 1)."""
        ...


class SystemEntropy:
    """Host-backed entropy: ``random.Random`` for fast draws, ``secrets`` for secure ones.

    Each instance owns its own ``random.Random``, seeded from the operating
    system, so secure draws never share state with fast ones.
    """

    __slots__ = ('_fast',)

    def __init__(self) -> None:
        self._fast = random.Random()

    def uniform(self) -> float:
        return self._fast.random()

    def secure_uniform(self) -> float:
        return secrets.randbits(32) / _U32_SPAN

    def __repr__(self) -> str:
        return 'SystemEntropy()'


_default: EntropySource = SystemEntropy()


def default_source() -> EntropySource:
    """Return the process-wide default source."""
    return _default


def set_default_source(source: EntropySource) -> EntropySource:
    """Replace the process-wide default source.

    Args:
        source: The new default.

    Returns:
        The previous default, so callers can restore it.

    Raises:
        TypeError: If ``source`` does not implement ``EntropySource``.
    """
    global _default  # noqa: PLW0603

    if not isinstance(source, EntropySource):
        msg = f'Expected an EntropySource, got {type(source).__name__}'
        raise TypeError(msg)
    previous, _default = _default, source
    return previous


def resolve_source(source: EntropySource | None) -> EntropySource:
    """Map ``None`` to the current default source."""
    return _default if source is None else source
