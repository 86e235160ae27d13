"""Tests for the error taxonomy."""

from __future__ import annotations

import msgspec
import pytest
from take_chance.errors import (
    ConfigurationError,
    ConfigurationException,
    EmptyCollection,
    EmptyCollectionError,
    InvalidArgument,
    InvalidArgumentError,
    UnsatisfiableConstraints,
    UnsatisfiableConstraintsError,
)


class TestBuiltinBases:
    """Exceptions can be caught as the matching builtin."""

    @pytest.mark.parametrize(
        ('exc', 'base'),
        [
            (InvalidArgumentError('skew', 'must be greater than 0'), ValueError),
            (EmptyCollectionError(), IndexError),
            (ConfigurationException('empty'), ValueError),
            (UnsatisfiableConstraintsError('password', 3, 0), RuntimeError),
        ],
    )
    def test_base_class(self, exc: Exception, base: type[Exception]) -> None:
        assert isinstance(exc, base)


class TestMessages:
    """Tests for exception messages."""

    def test_invalid_argument(self) -> None:
        assert str(InvalidArgumentError('skew', 'must be greater than 0')) == (
            "Invalid argument 'skew': must be greater than 0"
        )

    def test_empty_collection(self) -> None:
        assert str(EmptyCollectionError('tuple')) == 'Cannot choose from an empty tuple'

    def test_unsatisfiable_up_front(self) -> None:
        assert 'cannot be met' in str(UnsatisfiableConstraintsError('password', 3, 0))

    def test_unsatisfiable_after_attempts(self) -> None:
        assert 'after 10 attempts' in str(UnsatisfiableConstraintsError('password', 16, 10))


class TestStructConversion:
    """Struct and exception variants convert into each other."""

    def test_invalid_argument(self) -> None:
        struct = InvalidArgumentError('skew', 'bad').to_struct()
        assert struct == InvalidArgument('skew', 'bad')
        assert struct.to_exception().name == 'skew'

    def test_empty_collection(self) -> None:
        assert EmptyCollection('dict').to_exception().kind == 'dict'
        assert EmptyCollectionError().to_struct() == EmptyCollection()

    def test_configuration(self) -> None:
        assert ConfigurationException('no chars').to_struct() == ConfigurationError('no chars')
        assert ConfigurationError('no chars').to_exception().message == 'no chars'

    def test_unsatisfiable(self) -> None:
        exc = UnsatisfiableConstraints('password', 16, 5).to_exception()
        assert (exc.generator, exc.length, exc.attempts) == ('password', 16, 5)

    def test_structs_are_json_encodable(self) -> None:
        encoded = msgspec.json.encode(UnsatisfiableConstraints('password', 16, 5))
        assert encoded == b'{"generator":"password","length":16,"attempts":5}'

    def test_structs_are_frozen(self) -> None:
        struct = InvalidArgument('skew', 'bad')
        with pytest.raises(AttributeError):
            struct.name = 'other'  # type: ignore[misc]
