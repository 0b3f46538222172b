"""
High-level generator functions.

Both artifact types run through the same pipeline:

- Validate the request bounds.
- Build the symbol universe and its bit plan once per call.
- For every artifact, read a fresh random buffer, slice it into indices
  and join the looked-up symbols.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List

from .config import DEFAULT_CONFIG, PassgenConfig
from .entropy import BitPlan, RandomSource, SystemRandomSource, random_buffer
from .errors import InvalidSeparatorError, OutOfRangeError
from .mapping import extract_indices, indices_to_symbols
from .universe import Casing, SymbolUniverse

__all__ = [
    "GenerationMeta",
    "GenerationRequest",
    "generate",
    "generate_passphrases",
    "generate_passwords",
    "generate_with_meta",
]

logger = logging.getLogger(__name__)

_SYSTEM_SOURCE = SystemRandomSource()


def _check_bounds(parameter: str, value: int, minimum: int, maximum: int) -> None:
    if not minimum <= value <= maximum:
        raise OutOfRangeError(parameter, minimum, maximum)


@dataclass(frozen=True)
class GenerationRequest:
    """
    A validated, immutable description of one generation call.

    `separator` is placed between symbols; it is empty for passwords.
    """

    count: int
    length: int
    universe: SymbolUniverse
    separator: str = ""

    def __post_init__(self) -> None:
        # Configured bounds are checked by the for_* constructors; these are
        # the limits below which no artifact can be produced at all.
        if self.count < 1:
            raise OutOfRangeError("count", 1)
        if self.length < 1:
            raise OutOfRangeError("length", 1)
        if not isinstance(self.universe, SymbolUniverse):
            raise TypeError(f"universe must be a SymbolUniverse, not {type(self.universe).__name__}")
        if len(self.separator) > 1:
            raise InvalidSeparatorError("separator must be at most one character")

    @classmethod
    def for_passwords(
        cls,
        count: int,
        length: int,
        alphabet: Iterable[str],
        config: PassgenConfig | None = None,
    ) -> GenerationRequest:
        cfg = config or DEFAULT_CONFIG
        _check_bounds("count", count, cfg.count_min, cfg.count_max)
        _check_bounds("length", length, cfg.password_length_min, cfg.password_length_max)
        universe = SymbolUniverse.from_alphabet(alphabet, cfg.alphabet_min)
        return cls(count, length, universe)

    @classmethod
    def for_passphrases(
        cls,
        count: int,
        word_count: int,
        separator: str,
        casing: Casing | str,
        word_list: Iterable[str],
        config: PassgenConfig | None = None,
    ) -> GenerationRequest:
        cfg = config or DEFAULT_CONFIG
        _check_bounds("count", count, cfg.count_min, cfg.count_max)
        _check_bounds("word count", word_count, cfg.word_count_min, cfg.word_count_max)
        if len(separator) != 1:
            raise InvalidSeparatorError("separator must be a single character")
        universe = SymbolUniverse.from_words(word_list, casing, cfg.word_list_min)
        return cls(count, word_count, universe, separator)

    @property
    def plan(self) -> BitPlan:
        return BitPlan.for_universe(len(self.universe), self.length)


@dataclass
class GenerationMeta:
    """
    Full result of one generation call.
    """

    artifacts: list[str]
    plan: BitPlan
    universe_size: int

    # Straight bit count: length * log2(universe size).
    entropy_bits: float


def generate_with_meta(
    request: GenerationRequest,
    source: RandomSource | None = None,
) -> GenerationMeta:
    """
    Run the extraction pipeline for every requested artifact.

    Any failure propagates before a result is returned, so callers either
    get all `request.count` artifacts or none.
    """
    rng = source or _SYSTEM_SOURCE
    universe = request.universe
    plan = request.plan

    logger.debug(
        "Generating %d artifact(s) of %d symbols from %d unique symbols "
        "(%d bits/symbol, %d bytes/artifact)",
        request.count,
        request.length,
        len(universe),
        plan.bits_per_symbol,
        plan.bytes_per_artifact,
    )

    artifacts: list[str] = []
    for _ in range(request.count):
        buf = random_buffer(rng, plan.bytes_per_artifact)
        indices = extract_indices(buf, plan.bits_per_symbol, request.length, len(universe))
        artifacts.append(request.separator.join(indices_to_symbols(indices, universe.symbols)))

    return GenerationMeta(
        artifacts=artifacts,
        plan=plan,
        universe_size=len(universe),
        entropy_bits=request.length * math.log2(len(universe)),
    )


def generate(
    request: GenerationRequest,
    source: RandomSource | None = None,
) -> List[str]:
    meta = generate_with_meta(request, source)
    return meta.artifacts


def generate_passwords(
    count: int,
    length: int,
    alphabet: Iterable[str],
    source: RandomSource | None = None,
    config: PassgenConfig | None = None,
) -> List[str]:
    """
    Generate `count` passwords of `length` characters drawn from `alphabet`.

    Duplicate characters in the alphabet are ignored.
    """
    request = GenerationRequest.for_passwords(count, length, alphabet, config)
    return generate(request, source)


def generate_passphrases(
    count: int,
    word_count: int,
    separator: str,
    casing: Casing | str,
    word_list: Iterable[str],
    source: RandomSource | None = None,
    config: PassgenConfig | None = None,
) -> List[str]:
    """
    Generate `count` passphrases of `word_count` words joined by `separator`.

    `casing` is applied to every word before duplicates are dropped.
    """
    request = GenerationRequest.for_passphrases(
        count, word_count, separator, casing, word_list, config
    )
    return generate(request, source)
