"""Composite generators: dates and colors."""

from __future__ import annotations

from datetime import datetime

import msgspec

from take_chance.charset import CharacterSet
from take_chance.scalar import random_int
from take_chance.source import EntropySource, resolve_source
from take_chance.text import string

__all__ = [
    'HEX_CHARSET',
    'RGBColor',
    'hex_color',
    'random_date',
    'rgb_color',
]

HEX_CHARSET = CharacterSet(from_='abcdef', numbers=True)


class RGBColor(msgspec.Struct, frozen=True):
    """An RGB color with 0-255 channels.

    Encodes as ``{"r": ..., "g": ..., "b": ...}`` with ``msgspec.json``.
    """

    r: int
    g: int
    b: int

    def as_dict(self) -> dict[str, int]:
        return msgspec.structs.asdict(self)

    def to_hex(self) -> str:
        """Return the color as ``#rrggbb``."""
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


def _to_millis(value: datetime) -> int:
    return round(value.timestamp() * 1000)


def random_date(
    low: datetime,
    high: datetime | None = None,
    *,
    source: EntropySource | None = None,
) -> datetime:
    """Return a datetime between ``low`` and ``high`` at millisecond precision.

    The instant is ``random_int`` over the two millisecond timestamps, so it
    shares that function's end point bias and does not reorder ``low > high``.
    The result uses ``low``'s timezone; naive inputs give naive local results.

    Args:
        low: Earliest datetime.
        high: Latest datetime. Defaults to now, in ``low``'s timezone.
        source: Entropy source, the process default if None.
    """
    if high is None:
        high = datetime.now(tz=low.tzinfo)
    millis = random_int(_to_millis(low), _to_millis(high), source=source)
    return datetime.fromtimestamp(millis / 1000, tz=low.tzinfo)


def rgb_color(*, source: EntropySource | None = None) -> RGBColor:
    """Return a random ``RGBColor``."""
    src = resolve_source(source)
    return RGBColor(
        r=random_int(0, 255, source=src),
        g=random_int(0, 255, source=src),
        b=random_int(0, 255, source=src),
    )


def hex_color(*, source: EntropySource | None = None) -> str:
    """Return a random color as ``#rrggbb`` with lowercase digits."""
    return '#' + string(6, HEX_CHARSET, source=source)
