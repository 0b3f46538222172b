"""
Configuration for the password and passphrase generators.
"""

from dataclasses import dataclass

# Characters that are easily confused with one another when read or typed.
AMBIGUOUS_CHARACTERS = "lIO01"

ALPHABET_LOWER_AMBIGUOUS = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_UPPER_AMBIGUOUS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_NUMERIC_AMBIGUOUS = "0123456789"

ALPHABET_LOWER = "abcdefghijkmnopqrstuvwxyz"
ALPHABET_UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
ALPHABET_NUMERIC = "23456789"
ALPHABET_SPECIAL = "!@#$%^&*()-_=+[]{};:,.<>?/|~"

ALPHABET_DEFAULT = ALPHABET_LOWER + ALPHABET_UPPER + ALPHABET_NUMERIC
ALPHABET_DEFAULT_AMBIGUOUS = (
    ALPHABET_LOWER_AMBIGUOUS + ALPHABET_UPPER_AMBIGUOUS + ALPHABET_NUMERIC_AMBIGUOUS
)


@dataclass(frozen=True)
class PassgenConfig:
    # How many artifacts a single call may produce.
    count_min: int = 1
    count_max: int = 1000
    count_default: int = 1

    # Password length, in characters.
    password_length_min: int = 1
    password_length_max: int = 1000
    password_length_default: int = 24

    # Passphrase length, in words.
    word_count_min: int = 1
    word_count_max: int = 1000
    word_count_default: int = 6

    # Minimum number of unique symbols after deduplication.
    # Below two there is nothing to choose between.
    alphabet_min: int = 2
    word_list_min: int = 2

    alphabet: str = ALPHABET_DEFAULT
    separator: str = "-"
    casing: str = "lower"


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PassgenConfig()
