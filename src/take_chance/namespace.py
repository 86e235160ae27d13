"""The ``Chance`` namespace: every generator bound to one entropy source."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from take_chance import collection, composite, scalar, text
from take_chance.charset import CharacterSet
from take_chance.composite import RGBColor
from take_chance.source import EntropySource, resolve_source

__all__ = ['Chance']


class Chance:
    """All generators under their short names, drawing from one source.

    ``Chance()`` follows the process default source (see
    ``take_chance.source.set_default_source``); ``Chance(source)`` pins a
    specific one, which is how tests get deterministic output.

    Example:
        ```python
        from take_chance import Chance

        chance = Chance()
        chance.die(20)
        # 14
        chance.id()
        # 'kT3-x_0aQe'
        ```
    """

    __slots__ = ('_source',)

    def __init__(self, source: EntropySource | None = None) -> None:
        self._source = source

    @property
    def source(self) -> EntropySource:
        return resolve_source(self._source)

    def __repr__(self) -> str:
        return f'Chance({self._source!r})'

    # --- Scalars ---

    def float(self, low: float = 0, high: float = 1) -> float:
        return scalar.random_float(low, high, source=self.source)

    def int(self, low: float = 0, high: float = 100) -> int:
        return scalar.random_int(low, high, source=self.source)

    def secure_int(self, low: float = 0, high: float = 100) -> int:
        return scalar.secure_int(low, high, source=self.source)

    def boolean(self, probability: float = 0.5) -> bool:
        return scalar.boolean(probability, source=self.source)

    def binomial(self, low: float = 0, high: float = 1, skew: float = 1) -> float:
        return scalar.binomial(low, high, skew, source=self.source)

    def die(self, n: int = 6) -> int:
        return scalar.die(n, source=self.source)

    # --- Collections ---

    def multiple_int(self, length: int, low: float = 0, high: float = 100) -> list[int]:
        return collection.multiple_int(length, low, high, source=self.source)

    def multiple_float(self, length: int, low: float = 0, high: float = 1) -> list[float]:
        return collection.multiple_float(length, low, high, source=self.source)

    def from_array[T](self, array: Sequence[T], low: int = 0, high: int | None = None) -> T:
        return collection.from_array(array, low, high, source=self.source)

    def from_object(self, obj: Any) -> Any:
        return collection.from_object(obj, source=self.source)

    # --- Text ---

    def character(self, config: CharacterSet | Mapping[str, Any] | None = None, **options: Any) -> str:
        return text.character(config, source=self.source, **options)

    def string(
        self,
        length: int,
        config: CharacterSet | Mapping[str, Any] | None = None,
        *,
        secure: bool = False,
        **options: Any,
    ) -> str:
        return text.string(length, config, secure=secure, source=self.source, **options)

    def id(self, length: int = 10) -> str:
        return text.html_id(length, source=self.source)

    def password(self, length: int = 16, *, secure: bool = False, max_attempts: int | None = None) -> str:
        return text.password(length, secure=secure, max_attempts=max_attempts, source=self.source)

    # --- Composites ---

    def date(self, low: datetime, high: datetime | None = None) -> datetime:
        return composite.random_date(low, high, source=self.source)

    def rgb_color(self) -> RGBColor:
        return composite.rgb_color(source=self.source)

    def hex_color(self) -> str:
        return composite.hex_color(source=self.source)
