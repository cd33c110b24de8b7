"""Fixed-width hint tag generation.

Tags are numerals in a mixed-radix system whose digits are the alphabet
symbols. Counting from zero and left-padding with the zero symbol yields
``count`` distinct tags of equal width, in increasing alphabet order.
"""

from __future__ import annotations

from typing import Sequence

from hp_common.errors import InvalidCountError
from hp_core.alphabet import TagAlphabet


def min_digits(count: int, base: int) -> int:
    """Least width ``w >= 1`` such that ``base ** w >= count``."""
    if count < 0:
        raise InvalidCountError("Count must be non-negative", context={"count": count})
    width = 1
    capacity = base
    while capacity < count:
        width += 1
        capacity *= base
    return width


class TagGenerator:
    """Produces hint tags over a ``TagAlphabet``."""

    def __init__(self, alphabet: TagAlphabet | str) -> None:
        if not isinstance(alphabet, TagAlphabet):
            alphabet = TagAlphabet(alphabet)
        self._alphabet = alphabet

    @property
    def alphabet(self) -> TagAlphabet:
        return self._alphabet

    def tag_width(self, count: int) -> int:
        return min_digits(count, self._alphabet.base)

    def generate(self, count: int) -> list[str]:
        width = self.tag_width(count)
        zero = self._alphabet.zero

        tags: list[str] = []
        numeral = [zero]
        for _ in range(count):
            lead = zero * (width - len(numeral))
            tags.append(lead + "".join(numeral))
            self._increment(numeral)
        return tags

    def annotate(self, labels: Sequence[str]) -> list[tuple[str, str]]:
        """Pair each label with its tag in row order."""
        return list(zip(self.generate(len(labels)), labels))

    def _increment(self, numeral: list[str]) -> None:
        alphabet = self._alphabet
        pos = len(numeral) - 1
        # carry through digits that wrap around
        while pos >= 0 and numeral[pos] == alphabet.last:
            numeral[pos] = alphabet.zero
            pos -= 1

        if pos < 0:
            numeral.insert(0, alphabet.zero)
            pos = 0
        numeral[pos] = alphabet.successor(numeral[pos])
