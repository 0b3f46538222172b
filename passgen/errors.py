"""
Exceptions raised by the password and passphrase generators.

Every failure aborts the whole generation call; nothing is retried.
"""

from __future__ import annotations


class PassgenError(Exception):
    """Generic generation error."""


class OutOfRangeError(PassgenError, ValueError):
    """
    A count or length parameter is outside its configured bounds.

    `parameter` names the offending argument ("count", "length",
    "word count") so callers can tell them apart.
    """

    def __init__(self, parameter: str, minimum: int, maximum: int | None = None) -> None:
        self.parameter = parameter
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            message = f"{parameter} must be at least {minimum}"
        else:
            message = f"{parameter} must be at least {minimum} and at most {maximum}"
        super().__init__(message)


class InvalidUniverseError(PassgenError, ValueError):
    """Too few unique symbols to draw from, or duplicate symbols."""


class InvalidCasingPolicyError(PassgenError, ValueError):
    """Unrecognized word casing selector."""


class InvalidSeparatorError(PassgenError, ValueError):
    """Passphrase separator is not exactly one character."""


class InsufficientEntropyError(PassgenError):
    """The random source could not supply the requested number of bytes."""


class WordListError(PassgenError, ValueError):
    """A word list file could not be decoded."""
