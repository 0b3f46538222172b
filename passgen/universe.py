"""
Symbol universes: the deduplicated, indexable sets that passwords and
passphrases draw their characters and words from.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable

from .config import DEFAULT_CONFIG
from .errors import InvalidCasingPolicyError, InvalidUniverseError


def _title(word: str) -> str:
    # Words are whitespace-delimited; digits and apostrophes do not start
    # a new word ("don't" -> "Don't", "hello2world" -> "Hello2world").
    return re.sub(r"\S+", lambda m: m[0][:1].upper() + m[0][1:].lower(), word)


class Casing(enum.Enum):
    """Word casing applied before deduplication."""

    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    NONE = "none"

    @classmethod
    def parse(cls, value: Casing | str) -> Casing:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            raise InvalidCasingPolicyError(
                f"invalid word casing {value!r} (expected one of: {choices})"
            ) from None

    def apply(self, word: str) -> str:
        if self is Casing.LOWER:
            return word.lower()
        if self is Casing.UPPER:
            return word.upper()
        if self is Casing.TITLE:
            return _title(word)
        return word


def bits_per_symbol(universe_size: int) -> int:
    """
    Minimum number of bits able to address every index of a universe,
    i.e. ceil(log2(universe_size)).
    """
    # (n - 1).bit_length() is the exact integer ceil(log2(n)) for n >= 1.
    return (universe_size - 1).bit_length()


@dataclass(frozen=True)
class SymbolUniverse:
    """
    Ordered, duplicate-free collection of symbols.

    Symbols keep the order of their first occurrence in the input, so an
    index always resolves to the same symbol for a given input.
    """

    symbols: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.symbols) < 2:
            raise InvalidUniverseError("a universe must contain at least 2 unique symbols")
        if len(set(self.symbols)) != len(self.symbols):
            raise InvalidUniverseError("universe symbols must be unique")

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, index: int) -> str:
        return self.symbols[index]

    def __iter__(self):
        return iter(self.symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbols

    @property
    def bits_per_symbol(self) -> int:
        return bits_per_symbol(len(self.symbols))

    @classmethod
    def from_alphabet(cls, alphabet: Iterable[str], minimum: int | None = None) -> SymbolUniverse:
        """
        Build a character universe. Deduplication is by exact code point.
        """
        if minimum is None:
            minimum = DEFAULT_CONFIG.alphabet_min
        chars = tuple(dict.fromkeys("".join(alphabet)))
        if len(chars) < minimum:
            raise InvalidUniverseError(
                f"alphabet must contain at least {minimum} unique characters"
            )
        return cls(chars)

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        casing: Casing | str = Casing.NONE,
        minimum: int | None = None,
    ) -> SymbolUniverse:
        """
        Build a word universe. Casing is applied first, so words that only
        differ in case may collapse into a single entry.
        """
        if minimum is None:
            minimum = DEFAULT_CONFIG.word_list_min
        policy = Casing.parse(casing)
        unique = tuple(dict.fromkeys(policy.apply(word) for word in words))
        if len(unique) < minimum:
            raise InvalidUniverseError(
                f"word list must contain at least {minimum} unique words"
            )
        return cls(unique)
