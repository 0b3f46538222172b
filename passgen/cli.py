"""
Command-line interface: `passgen password` and `passgen passphrase`.
"""

from __future__ import annotations

import argparse
import logging
import sys

import tracerite

from . import __version__
from .config import (
    ALPHABET_DEFAULT,
    ALPHABET_DEFAULT_AMBIGUOUS,
    ALPHABET_LOWER,
    ALPHABET_LOWER_AMBIGUOUS,
    ALPHABET_NUMERIC,
    ALPHABET_NUMERIC_AMBIGUOUS,
    ALPHABET_SPECIAL,
    ALPHABET_UPPER,
    ALPHABET_UPPER_AMBIGUOUS,
    DEFAULT_CONFIG,
)
from .errors import PassgenError
from .generator import generate_passphrases, generate_passwords
from .universe import Casing
from .words import WORD_LIST_DEFAULT, load_word_list

tracerite.load()

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_USAGE = 2


def build_alphabet(args) -> str:
    """Assemble the password alphabet from the character class flags."""
    if args.alphabet:
        return args.alphabet

    ambiguous = args.ambiguous
    parts = []
    if args.lowercase:
        parts.append(ALPHABET_LOWER_AMBIGUOUS if ambiguous else ALPHABET_LOWER)
    if args.uppercase:
        parts.append(ALPHABET_UPPER_AMBIGUOUS if ambiguous else ALPHABET_UPPER)
    if args.numeric:
        parts.append(ALPHABET_NUMERIC_AMBIGUOUS if ambiguous else ALPHABET_NUMERIC)
    if args.special:
        parts.append(ALPHABET_SPECIAL)

    if not parts:
        return ALPHABET_DEFAULT_AMBIGUOUS if ambiguous else ALPHABET_DEFAULT
    return "".join(parts)


def select_casing(args) -> Casing:
    if args.casing is None:
        return Casing.parse(DEFAULT_CONFIG.casing)
    return args.casing


def run_password(args) -> list[str]:
    length = DEFAULT_CONFIG.password_length_default if args.length is None else args.length
    count = DEFAULT_CONFIG.count_default if args.count is None else args.count
    return generate_passwords(count, length, build_alphabet(args))


def run_passphrase(args) -> list[str]:
    word_count = DEFAULT_CONFIG.word_count_default if args.word_count is None else args.word_count
    count = DEFAULT_CONFIG.count_default if args.count is None else args.count
    separator = DEFAULT_CONFIG.separator if args.separator is None else args.separator
    if args.word_list:
        word_list = load_word_list(args.word_list)
        logger.debug("Loaded %d words from %s", len(word_list), args.word_list)
    else:
        word_list = WORD_LIST_DEFAULT
    return generate_passphrases(count, word_count, separator, select_casing(args), word_list)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen", description="Generate passwords and passphrases"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose mode: log the bit plan of each generation to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    pw = sub.add_parser("password", aliases=["pw", "word"], help="Generate passwords")
    pw.add_argument("length", type=int, nargs="?", default=None, help="Password length")
    pw.add_argument("count", type=int, nargs="?", default=None, help="Number of passwords")
    pw.add_argument(
        "-l", "--lowercase", action="store_true", help="Allow lowercase letters in passwords"
    )
    pw.add_argument(
        "-u", "--uppercase", action="store_true", help="Allow uppercase letters in passwords"
    )
    pw.add_argument(
        "-n", "--numeric", action="store_true", help="Allow numeric characters in passwords"
    )
    pw.add_argument(
        "-s", "--special", action="store_true", help="Allow special characters in passwords"
    )
    pw.add_argument(
        "-a",
        "--ambiguous",
        action="store_true",
        help="Allow ambiguous characters in passwords",
    )
    pw.add_argument(
        "--alphabet",
        type=str,
        default=None,
        help="Alphabet to use for password generation (supersedes other flags)",
    )
    pw.set_defaults(func=run_password)

    pp = sub.add_parser("passphrase", aliases=["pp", "phrase"], help="Generate passphrases")
    pp.add_argument(
        "word_count", type=int, nargs="?", default=None, help="Number of words per passphrase"
    )
    pp.add_argument("count", type=int, nargs="?", default=None, help="Number of passphrases")
    pp.add_argument(
        "-s",
        "--separator",
        type=str,
        default=None,
        help=f"Passphrase word separator (default: {DEFAULT_CONFIG.separator!r})",
    )
    casing = pp.add_mutually_exclusive_group()
    casing.add_argument(
        "-l",
        "--lowercase",
        dest="casing",
        action="store_const",
        const=Casing.LOWER,
        help="Generate lowercase passphrases",
    )
    casing.add_argument(
        "-u",
        "--uppercase",
        dest="casing",
        action="store_const",
        const=Casing.UPPER,
        help="Generate uppercase passphrases",
    )
    casing.add_argument(
        "-t",
        "--title-case",
        dest="casing",
        action="store_const",
        const=Casing.TITLE,
        help="Generate title-case passphrases",
    )
    casing.add_argument(
        "-n",
        "--no-casing",
        dest="casing",
        action="store_const",
        const=Casing.NONE,
        help="Generate passphrases without applying any case transformation",
    )
    pp.add_argument(
        "-w",
        "--word-list",
        type=str,
        default=None,
        help="File containing a newline-delimited word list",
    )
    pp.set_defaults(func=run_passphrase)

    return parser


def _main(argv=None):
    """Internal main function that may raise exceptions."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s"
        )

    for artifact in args.func(args):
        print(artifact)


def main(argv=None):
    """Main entry point for the CLI with exception handling."""
    try:
        _main(argv)
    except (KeyboardInterrupt, BrokenPipeError):
        sys.exit(1)
    except (PassgenError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)


if __name__ == "__main__":
    main()
