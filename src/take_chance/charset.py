"""Character set configuration and the character universe built from it.

A ``CharacterSet`` names where characters come from: an explicit ``from``
list plus any of the built-in classes. ``build_universe`` turns it into a
tuple of unique characters, keeping the first occurrence of each in this
order: ``from``, lowercase, uppercase, digits, punctuation.

Example:
    ```python
    from take_chance.charset import CharacterSet, build_universe

    build_universe(CharacterSet(from_='xyz', numbers=True))
    # ('x', 'y', 'z', '0', '1', ..., '9')

    build_universe({'from': '-_', 'letters': True})
    # ('-', '_', 'a', ..., 'z', 'A', ..., 'Z')
    ```
"""

from __future__ import annotations

import string as _string
from collections.abc import Mapping
from typing import Any

import msgspec

from take_chance.errors import ConfigurationException

__all__ = [
    'DIGITS',
    'LOWERCASE',
    'SPECIAL',
    'UPPERCASE',
    'CharacterSet',
    'build_universe',
    'coerce_charset',
]

LOWERCASE = _string.ascii_lowercase
UPPERCASE = _string.ascii_uppercase
DIGITS = _string.digits
# !"#$%&'()*+,-./:;<=>?@[\]^_`{|}~
SPECIAL = _string.punctuation


class CharacterSet(msgspec.Struct, frozen=True, kw_only=True):
    """Which characters a string generator may use.

    Attributes:
        from_: Explicit characters, as a string or a sequence of strings.
            Encoded as ``from`` so plain mappings can use the natural key.
        letters: Include a-z and A-Z.
        uppercase: Include A-Z.
        lowercase: Include a-z.
        numbers: Include 0-9.
        special: Include ASCII punctuation.
    """

    from_: str | tuple[str, ...] = msgspec.field(default='', name='from')
    letters: bool = False
    uppercase: bool = False
    lowercase: bool = False
    numbers: bool = False
    special: bool = False


def _check_single_characters(charset: CharacterSet) -> CharacterSet:
    for ch in charset.from_:
        if len(ch) != 1:
            msg = f'Invalid character set: `from` entries must be single characters, got {ch!r}'
            raise ConfigurationException(msg)
    return charset


def coerce_charset(config: CharacterSet | Mapping[str, Any] | None = None, **options: Any) -> CharacterSet:
    """Build a ``CharacterSet`` from a struct, a mapping, or keyword options.

    Keyword options override entries of ``config``; ``from_`` and ``from`` are
    both accepted. The caller's objects are never modified.

    Raises:
        ConfigurationException: If the options do not describe a character set.
    """
    if isinstance(config, CharacterSet) and not options:
        return _check_single_characters(config)

    if config is None:
        merged: dict[str, Any] = {}
    elif isinstance(config, CharacterSet):
        merged = msgspec.to_builtins(config)
    elif isinstance(config, Mapping):
        merged = dict(config)
    else:
        msg = f'Expected a CharacterSet or a mapping, got {type(config).__name__}'
        raise ConfigurationException(msg)

    merged.update(options)
    if 'from_' in merged:
        merged['from'] = merged.pop('from_')
    if isinstance(merged.get('from'), list):
        merged['from'] = tuple(merged['from'])

    try:
        charset = msgspec.convert(merged, CharacterSet)
    except msgspec.ValidationError as exc:
        raise ConfigurationException(f'Invalid character set: {exc}') from exc

    return _check_single_characters(charset)


def build_universe(config: CharacterSet | Mapping[str, Any] | None = None, **options: Any) -> tuple[str, ...]:
    """Return the deduplicated characters described by a character set.

    Raises:
        ConfigurationException: If the character set is empty.
    """
    charset = coerce_charset(config, **options)

    chars: list[str] = list(charset.from_)
    if charset.letters or charset.lowercase:
        chars.extend(LOWERCASE)
    if charset.letters or charset.uppercase:
        chars.extend(UPPERCASE)
    if charset.numbers:
        chars.extend(DIGITS)
    if charset.special:
        chars.extend(SPECIAL)

    universe = tuple(dict.fromkeys(chars))
    if not universe:
        msg = 'Character set is empty; pass from_ or enable at least one character class'
        raise ConfigurationException(msg)
    return universe
