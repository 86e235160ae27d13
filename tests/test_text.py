"""Tests for character, string, id and password generators."""

from __future__ import annotations

import string as stdlib_string

import pytest
from hypothesis import given
from scripted import ScriptedSource
from strategies import lengths
from take_chance import _config
from take_chance.charset import DIGITS, SPECIAL, CharacterSet
from take_chance.errors import ConfigurationException, InvalidArgumentError, UnsatisfiableConstraintsError
from take_chance.text import character, html_id, password, string


def _class_counts(value: str) -> tuple[int, int, int, int]:
    return (
        sum(ch in stdlib_string.ascii_lowercase for ch in value),
        sum(ch in stdlib_string.ascii_uppercase for ch in value),
        sum(ch in DIGITS for ch in value),
        sum(ch in SPECIAL for ch in value),
    )


class TestCharacter:
    """Tests for character()."""

    def test_numbers_only(self) -> None:
        for _ in range(1000):
            assert character({'numbers': True}) in DIGITS

    def test_explicit_plus_letters(self) -> None:
        for _ in range(1000):
            assert character({'from': 'xyz', 'letters': True}) in stdlib_string.ascii_letters

    def test_keyword_options(self) -> None:
        assert character(from_='q') == 'q'

    def test_struct_config(self) -> None:
        assert character(CharacterSet(from_='abc'), source=ScriptedSource(fast=[0.99])) == 'c'

    def test_empty_config_raises(self) -> None:
        with pytest.raises(ConfigurationException):
            character({})

    def test_config_not_mutated(self) -> None:
        config = {'from': 'ab'}
        character(config)
        assert config == {'from': 'ab'}


class TestString:
    """Tests for string()."""

    @given(lengths)
    def test_length(self, length: int) -> None:
        value = string(length, letters=True)
        assert len(value) == max(length, 0)
        assert all(ch in stdlib_string.ascii_letters for ch in value)

    def test_non_positive_length_is_empty(self) -> None:
        assert string(0, numbers=True) == ''
        assert string(-3, numbers=True) == ''

    def test_scripted_draws(self) -> None:
        source = ScriptedSource(fast=[0.0, 0.5, 0.99])
        assert string(3, {'from': 'abc'}, source=source) == 'abc'

    def test_secure_draws(self) -> None:
        source = ScriptedSource(secure=[0.0, 0.99])
        assert string(2, from_='abc', secure=True, source=source) == 'ac'
        assert source.fast_draws == 0
        assert source.secure_draws == 2

    def test_empty_config_raises(self) -> None:
        with pytest.raises(ConfigurationException):
            string(3)

    def test_multi_character_entries_rejected(self) -> None:
        with pytest.raises(ConfigurationException, match='single characters'):
            string(3, {'from': ['ab', 'cd']})
        with pytest.raises(ConfigurationException, match='single characters'):
            character(CharacterSet(from_=('ab',)))


class TestHtmlId:
    """Tests for html_id()."""

    def test_default_length(self) -> None:
        assert len(html_id()) == 10

    def test_shape(self) -> None:
        allowed = set(stdlib_string.ascii_letters + DIGITS + '-_')
        for _ in range(10_000):
            value = html_id(10)
            assert len(value) == 10
            assert value[0] in stdlib_string.ascii_letters
            assert set(value) <= allowed

    def test_first_character_redrawn(self) -> None:
        # Universe is '-', '_', a-z, A-Z, 0-9; 0.0 picks '-', 2/63 picks 'a'
        source = ScriptedSource(fast=[0.0, 2 / 63])
        assert html_id(1, source=source) == 'a'
        assert source.fast_draws == 2

    def test_digit_first_redrawn(self) -> None:
        # 1.0 - tiny picks the last entry, '9'
        source = ScriptedSource(fast=[0.9999, 2 / 63])
        assert html_id(1, source=source) == 'a'

    def test_rest_may_use_any_character(self) -> None:
        # after 'a', the remaining draws land on '-' and '9'
        source = ScriptedSource(fast=[2 / 63, 0.0, 0.9999])
        assert html_id(3, source=source) == 'a-9'

    @pytest.mark.parametrize('length', [1, 0, -5])
    def test_short_lengths_return_one_letter(self, length: int) -> None:
        value = html_id(length)
        assert len(value) == 1
        assert value in stdlib_string.ascii_letters


class TestPassword:
    """Tests for password()."""

    def test_default_minimums(self) -> None:
        for _ in range(1000):
            value = password()
            assert len(value) == 16
            lower, upper, digits, special = _class_counts(value)
            assert lower >= 4
            assert upper >= 4
            assert digits >= 3
            assert special >= 2

    @pytest.mark.parametrize('length', [4, 6, 7, 8, 10, 24, 64])
    def test_minimums_for_length(self, length: int) -> None:
        for _ in range(50):
            value = password(length)
            assert len(value) == length
            lower, upper, digits, special = _class_counts(value)
            assert lower >= length / 4
            assert upper >= length / 4
            assert digits >= length / 6
            assert special >= length / 8

    def test_secure_password(self) -> None:
        for _ in range(50):
            lower, upper, digits, special = _class_counts(password(16, secure=True))
            assert lower >= 4
            assert upper >= 4
            assert digits >= 3
            assert special >= 2

    @pytest.mark.parametrize('length', [0, -1])
    def test_non_positive_length_is_empty(self, length: int) -> None:
        assert password(length) == ''

    @pytest.mark.parametrize('length', [1, 2, 3, 5, 9])
    def test_impossible_lengths_raise_without_sampling(self, length: int) -> None:
        source = ScriptedSource(fast=[0.5])
        with pytest.raises(UnsatisfiableConstraintsError) as excinfo:
            password(length, source=source)
        assert excinfo.value.attempts == 0
        assert excinfo.value.length == length
        assert source.fast_draws == 0

    def test_attempt_cap(self) -> None:
        # 0.0 always picks 'a', so no candidate ever qualifies
        source = ScriptedSource(fast=[0.0])
        with pytest.raises(UnsatisfiableConstraintsError) as excinfo:
            password(16, max_attempts=3, source=source)
        assert excinfo.value.attempts == 3
        assert source.fast_draws == 3 * 16

    def test_attempt_cap_from_config(self) -> None:
        _config.init(password_max_attempts=2)
        source = ScriptedSource(fast=[0.0])
        with pytest.raises(UnsatisfiableConstraintsError) as excinfo:
            password(8, source=source)
        assert excinfo.value.attempts == 2

    def test_non_positive_max_attempts_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match='max_attempts'):
            password(16, max_attempts=0)

    def test_error_is_runtime_error(self) -> None:
        with pytest.raises(RuntimeError, match='password'):
            password(1)
