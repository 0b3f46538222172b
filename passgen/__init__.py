"""
Password and passphrase generator package.

Random bytes from the OS CSPRNG are sliced into fixed-width bit groups and
mapped onto a deduplicated alphabet or word list.
"""

__version__ = "1.0.0"

from .config import PassgenConfig, DEFAULT_CONFIG
from .entropy import BitPlan, RandomSource, StreamRandomSource, SystemRandomSource
from .errors import (
    InsufficientEntropyError,
    InvalidCasingPolicyError,
    InvalidSeparatorError,
    InvalidUniverseError,
    OutOfRangeError,
    PassgenError,
    WordListError,
)
from .generator import (
    GenerationMeta,
    GenerationRequest,
    generate,
    generate_passphrases,
    generate_passwords,
    generate_with_meta,
)
from .universe import Casing, SymbolUniverse, bits_per_symbol
from .words import WORD_LIST_DEFAULT, load_word_list

__all__ = [
    "BitPlan",
    "Casing",
    "DEFAULT_CONFIG",
    "GenerationMeta",
    "GenerationRequest",
    "InsufficientEntropyError",
    "InvalidCasingPolicyError",
    "InvalidSeparatorError",
    "InvalidUniverseError",
    "OutOfRangeError",
    "PassgenConfig",
    "PassgenError",
    "RandomSource",
    "StreamRandomSource",
    "SymbolUniverse",
    "SystemRandomSource",
    "WORD_LIST_DEFAULT",
    "WordListError",
    "__version__",
    "bits_per_symbol",
    "generate",
    "generate_passphrases",
    "generate_passwords",
    "generate_with_meta",
    "load_word_list",
]
