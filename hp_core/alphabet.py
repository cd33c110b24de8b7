"""Ordered symbol set used as the digits of hint tags."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from hp_common.errors import ConfigurationError

logger = logging.getLogger(__name__)

MIN_ALPHABET_SIZE = 2


class TagAlphabet:
    """Immutable ordered set of single-character symbols.

    The first symbol acts as the digit zero when tags are counted. Duplicate
    symbols keep their first position and are recorded in ``duplicates``.
    """

    __slots__ = ("_symbols", "_index", "_duplicates")

    def __init__(self, symbols: Iterable[str]) -> None:
        ordered: list[str] = []
        index: dict[str, int] = {}
        duplicates: list[str] = []
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ConfigurationError(
                    "Alphabet symbols must be single characters",
                    context={"symbol": symbol},
                )
            if symbol in index:
                duplicates.append(symbol)
                continue
            index[symbol] = len(ordered)
            ordered.append(symbol)

        if duplicates:
            logger.warning(
                "Alphabet contains duplicate symbols, ignoring: %s",
                "".join(duplicates),
            )
        if len(ordered) < MIN_ALPHABET_SIZE:
            raise ConfigurationError(
                f"Alphabet must have at least {MIN_ALPHABET_SIZE} unique symbols",
                context={"symbols": "".join(ordered), "duplicates": duplicates},
            )

        self._symbols = tuple(ordered)
        self._index = index
        self._duplicates = tuple(duplicates)

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    @property
    def duplicates(self) -> tuple[str, ...]:
        """Symbols dropped because they appeared more than once."""
        return self._duplicates

    @property
    def base(self) -> int:
        return len(self._symbols)

    @property
    def zero(self) -> str:
        return self._symbols[0]

    @property
    def last(self) -> str:
        return self._symbols[-1]

    def index_of(self, symbol: str) -> int:
        try:
            return self._index[symbol]
        except KeyError:
            raise ConfigurationError(
                "Symbol is not part of the alphabet", context={"symbol": symbol}
            ) from None

    def successor(self, symbol: str) -> str:
        """Next symbol in alphabet order, wrapping from ``last`` to ``zero``."""
        return self._symbols[(self.index_of(symbol) + 1) % self.base]

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagAlphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return "".join(self._symbols)

    def __repr__(self) -> str:
        return f"TagAlphabet({str(self)!r})"
