"""Tests for the passgen command-line interface."""

import pytest

from passgen import __version__
from passgen.cli import main
from passgen.config import (
    ALPHABET_DEFAULT,
    ALPHABET_NUMERIC,
    ALPHABET_NUMERIC_AMBIGUOUS,
    DEFAULT_CONFIG,
)
from passgen.errors import WordListError
from passgen.words import WORD_LIST_DEFAULT, load_word_list


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out.splitlines()


def run_failing(capsys, *argv):
    with pytest.raises(SystemExit) as excinfo:
        main(list(argv))
    return excinfo.value.code, capsys.readouterr().err


def test_password_defaults(capsys):
    lines = run(capsys, "password")
    assert len(lines) == DEFAULT_CONFIG.count_default
    for line in lines:
        assert len(line) == DEFAULT_CONFIG.password_length_default
        assert set(line) <= set(ALPHABET_DEFAULT)


@pytest.mark.parametrize("command", ["password", "pw", "word"])
def test_password_length_and_count(capsys, command):
    lines = run(capsys, command, "10", "3")
    assert len(lines) == 3
    assert all(len(line) == 10 for line in lines)


def test_password_numeric(capsys):
    (line,) = run(capsys, "password", "-n", "64")
    assert set(line) <= set(ALPHABET_NUMERIC)


def test_password_numeric_ambiguous(capsys):
    (line,) = run(capsys, "password", "-n", "-a", "64")
    assert set(line) <= set(ALPHABET_NUMERIC_AMBIGUOUS)


def test_password_alphabet_supersedes_flags(capsys):
    (line,) = run(capsys, "password", "-u", "--alphabet", "xyz", "32")
    assert set(line) <= set("xyz")


@pytest.mark.parametrize(
    "argv",
    [
        ["password", "0"],
        ["password", "10", "0"],
        ["password", "--alphabet", "x"],
        ["password", "x"],
        ["password", "1", "2", "3"],
    ],
)
def test_password_errors(capsys, argv):
    code, _ = run_failing(capsys, *argv)
    assert code == 2


def test_generation_error_message(capsys):
    code, err = run_failing(capsys, "password", "0")
    assert code == 2
    assert err.startswith("Error: length must be at least")


def test_passphrase_defaults(capsys):
    (line,) = run(capsys, "passphrase")
    words = line.split(DEFAULT_CONFIG.separator)
    assert len(words) == DEFAULT_CONFIG.word_count_default
    assert set(words) <= set(WORD_LIST_DEFAULT)


@pytest.mark.parametrize("command", ["passphrase", "pp", "phrase"])
def test_passphrase_title_case(capsys, command):
    lines = run(capsys, command, "-t", "-s", ".", "4", "2")
    assert len(lines) == 2
    for line in lines:
        words = line.split(".")
        assert len(words) == 4
        assert all(word == word.title() for word in words)
        assert {word.lower() for word in words} <= set(WORD_LIST_DEFAULT)


def test_passphrase_word_list_file(capsys, tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbravo\n\n  charlie  \nalpha\n", encoding="utf-8")
    lines = run(capsys, "passphrase", "-u", "-w", str(path), "5", "3")
    assert len(lines) == 3
    for line in lines:
        assert set(line.split("-")) <= {"ALPHA", "BRAVO", "CHARLIE"}


@pytest.mark.parametrize(
    "argv",
    [
        ["passphrase", "-u", "-t"],
        ["passphrase", "-t", "-n"],
        ["passphrase", "-s", "::"],
        ["passphrase", "0"],
        ["passphrase", "-w", "/nonexistent/words.txt"],
    ],
)
def test_passphrase_errors(capsys, argv):
    code, _ = run_failing(capsys, *argv)
    assert code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_verbose(capsys):
    (line,) = run(capsys, "-v", "pw", "12")
    assert len(line) == 12


def test_load_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(" one \r\ntwo\n\n\tthree\n", encoding="utf-8")
    assert load_word_list(path) == ["one", "two", "three"]


def test_passphrase_word_list_not_utf8(capsys, tmp_path):
    path = tmp_path / "words.bin"
    path.write_bytes(b"alfa\nbr\xffavo\ncharlie\n")
    code, err = run_failing(capsys, "passphrase", "-w", str(path))
    assert code == 2
    assert err.startswith("Error: word list")
    assert "UTF-8" in err


def test_load_word_list_not_utf8(tmp_path):
    path = tmp_path / "words.bin"
    path.write_bytes(b"\xff")
    with pytest.raises(WordListError) as excinfo:
        load_word_list(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
