"""Error types: dual struct+exception for structured logs and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'ConfigurationError',
    'ConfigurationException',
    'EmptyCollection',
    'EmptyCollectionError',
    'InvalidArgument',
    'InvalidArgumentError',
    'UnsatisfiableConstraints',
    'UnsatisfiableConstraintsError',
]


# --- Argument Errors ---


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """Argument outside its accepted domain - struct variant."""

    name: str
    reason: str

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.name, self.reason)


class InvalidArgumentError(ValueError):
    """Argument outside its accepted domain - exception variant."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for Result-based code."""
        return InvalidArgument(self.name, self.reason)


# --- Selection Errors ---


class EmptyCollection(msgspec.Struct, frozen=True, gc=False):
    """Nothing to choose from - struct variant."""

    kind: str = 'sequence'

    def to_exception(self) -> EmptyCollectionError:
        """Convert to exception for raise-based code."""
        return EmptyCollectionError(self.kind)


class EmptyCollectionError(IndexError):
    """Nothing to choose from - exception variant."""

    def __init__(self, kind: str = 'sequence') -> None:
        self.kind = kind
        super().__init__(f'Cannot choose from an empty {kind}')

    def to_struct(self) -> EmptyCollection:
        """Convert to struct for Result-based code."""
        return EmptyCollection(self.kind)


# --- Character Set Errors ---


class ConfigurationError(msgspec.Struct, frozen=True, gc=False):
    """Character set configuration is unusable - struct variant."""

    message: str

    def to_exception(self) -> ConfigurationException:
        """Convert to exception for raise-based code."""
        return ConfigurationException(self.message)


class ConfigurationException(ValueError):
    """Character set configuration is unusable - exception variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> ConfigurationError:
        """Convert to struct for Result-based code."""
        return ConfigurationError(self.message)


# --- Rejection Sampling Errors ---


class UnsatisfiableConstraints(msgspec.Struct, frozen=True, gc=False):
    """Rejection sampling gave up - struct variant."""

    generator: str
    length: int
    attempts: int

    def to_exception(self) -> UnsatisfiableConstraintsError:
        """Convert to exception for raise-based code."""
        return UnsatisfiableConstraintsError(self.generator, self.length, self.attempts)


class UnsatisfiableConstraintsError(RuntimeError):
    """Rejection sampling gave up - exception variant.

    ``attempts`` is 0 when the constraints were rejected up front because no
    string of the requested length can satisfy them.
    """

    def __init__(self, generator: str, length: int, attempts: int) -> None:
        self.generator = generator
        self.length = length
        self.attempts = attempts
        if attempts:
            msg = f'{generator}(length={length}): constraints not met after {attempts} attempts'
        else:
            msg = f'{generator}(length={length}): constraints cannot be met at this length'
        super().__init__(msg)

    def to_struct(self) -> UnsatisfiableConstraints:
        """Convert to struct for Result-based code."""
        return UnsatisfiableConstraints(self.generator, self.length, self.attempts)
