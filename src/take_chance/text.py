"""Character and string generators: characters, strings, HTML ids and passwords."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

import msgspec

from take_chance._config import get_config
from take_chance._logging import get_logger
from take_chance.charset import DIGITS, LOWERCASE, SPECIAL, UPPERCASE, CharacterSet, build_universe
from take_chance.collection import from_array
from take_chance.errors import InvalidArgumentError, UnsatisfiableConstraintsError
from take_chance.scalar import secure_int
from take_chance.source import EntropySource, resolve_source

__all__ = [
    'ID_CHARSET',
    'PASSWORD_CHARSET',
    'character',
    'html_id',
    'password',
    'string',
]

logger = get_logger(__name__)

ID_CHARSET = CharacterSet(from_='-_', letters=True, numbers=True)
PASSWORD_CHARSET = CharacterSet(letters=True, numbers=True, special=True)

_ID_FORBIDDEN_FIRST = frozenset(DIGITS + '-_')
_LOWER = frozenset(LOWERCASE)
_UPPER = frozenset(UPPERCASE)
_DIGIT = frozenset(DIGITS)
_SPECIAL = frozenset(SPECIAL)


def _pick(universe: tuple[str, ...], source: EntropySource, secure: bool) -> str:
    if secure:
        return universe[secure_int(0, len(universe) - 1, source=source)]
    return from_array(universe, source=source)


def character(
    config: CharacterSet | Mapping[str, Any] | None = None,
    *,
    source: EntropySource | None = None,
    **options: Any,
) -> str:
    """Return one random character from a character set.

    The set may be given as a ``CharacterSet``, a mapping using the same keys
    (``from``, ``letters``, ``uppercase``, ``lowercase``, ``numbers``,
    ``special``), or keyword options.

    Raises:
        ConfigurationException: If the character set is empty or malformed.

    Example:
        ```python
        character(numbers=True)
        # '7'
        character({'from': 'xyz', 'letters': True})
        # 'Q'
        ```
    """
    return from_array(build_universe(config, **options), source=source)


def string(
    length: int,
    config: CharacterSet | Mapping[str, Any] | None = None,
    *,
    secure: bool = False,
    source: EntropySource | None = None,
    **options: Any,
) -> str:
    """Return ``length`` random characters from a character set, joined.

    The character universe is built once per call. With ``secure=True`` each
    index is drawn with ``secure_int`` instead of the fast generator.
    A length of zero or less gives an empty string.

    Raises:
        ConfigurationException: If the character set is empty or malformed.
    """
    universe = build_universe(config, **options)
    src = resolve_source(source)
    return ''.join(_pick(universe, src, secure) for _ in range(length))


def html_id(length: int = 10, *, source: EntropySource | None = None) -> str:
    """Return a random string usable as an HTML ``id`` attribute.

    Characters come from a-z, A-Z, 0-9, ``-`` and ``_``. The first character
    is redrawn until it is a letter. A length of 1 or less returns just that
    first letter.
    """
    universe = build_universe(ID_CHARSET)
    src = resolve_source(source)

    first = from_array(universe, source=src)
    while first in _ID_FORBIDDEN_FIRST:
        first = from_array(universe, source=src)

    return first + ''.join(from_array(universe, source=src) for _ in range(length - 1))


def _meets_password_minimums(candidate: str, length: int) -> bool:
    lower = upper = digits = special = 0
    for ch in candidate:
        if ch in _LOWER:
            lower += 1
        elif ch in _UPPER:
            upper += 1
        elif ch in _DIGIT:
            digits += 1
        elif ch in _SPECIAL:
            special += 1
    return (
        lower >= length / 4
        and upper >= length / 4
        and digits >= length / 6
        and special >= length / 8
    )


def _password_minimums_fit(length: int) -> bool:
    needed = 2 * math.ceil(length / 4) + math.ceil(length / 6) + math.ceil(length / 8)
    return needed <= length


def _unsatisfiable(length: int, attempts: int) -> UnsatisfiableConstraintsError:
    error = UnsatisfiableConstraintsError('password', length, attempts)
    logger.warning('password.unsatisfiable', **msgspec.structs.asdict(error.to_struct()))
    return error


def password(
    length: int = 16,
    *,
    secure: bool = False,
    max_attempts: int | None = None,
    source: EntropySource | None = None,
) -> str:
    """Return a random password with a mix of character classes.

    Whole candidates are drawn from letters, digits and punctuation until one
    holds at least ``length / 4`` lowercase letters, ``length / 4`` uppercase
    letters, ``length / 6`` digits and ``length / 8`` punctuation characters.

    Args:
        length: Number of characters. Zero or less gives an empty string.
        secure: Draw characters from the secure half of the source.
        max_attempts: Candidate cap for this call. Defaults to
            ``ChanceConfig.password_max_attempts``; None there means no cap.
        source: Entropy source, the process default if None.

    Returns:
        The accepted password.

    Raises:
        UnsatisfiableConstraintsError: If no string of ``length`` can meet the
            minimums (lengths 1, 2, 3, 5 and 9), or the attempt cap is exhausted.
        InvalidArgumentError: If ``max_attempts`` is below 1.
    """
    if length <= 0:
        return ''
    if not _password_minimums_fit(length):
        raise _unsatisfiable(length, 0)

    if max_attempts is None:
        max_attempts = get_config().password_max_attempts
    elif max_attempts < 1:
        raise InvalidArgumentError('max_attempts', 'must be at least 1 or None')

    universe = build_universe(PASSWORD_CHARSET)
    src = resolve_source(source)
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = ''.join(_pick(universe, src, secure) for _ in range(length))
        if _meets_password_minimums(candidate, length):
            return candidate

    raise _unsatisfiable(length, attempts)
