import logging

import pytest

from passcode.dictionary import (
    DictionaryUnavailableError,
    build_dictionary,
    default_dictionary,
    load_dictionary,
    load_dictionary_or_empty,
)


def test_build_dictionary_folds_and_filters():
    lines = ["  Password ", "", "# comment", "   #indented comment", "password", "QWERTY\n"]
    assert build_dictionary(lines) == frozenset({"password", "qwerty"})


def test_load_dictionary_from_file(tmp_path):
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("# header\nLetMeIn\n\n  dragon  \nletmein\n", encoding="utf-8")
    assert load_dictionary(str(wordlist)) == frozenset({"letmein", "dragon"})


def test_missing_file_raises(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(DictionaryUnavailableError) as exc_info:
        load_dictionary(missing)
    assert isinstance(exc_info.value, OSError)
    assert exc_info.value.path == missing


def test_undecodable_file_raises(tmp_path):
    wordlist = tmp_path / "latin1.txt"
    wordlist.write_bytes(b"caf\xe9\n")
    with pytest.raises(DictionaryUnavailableError):
        load_dictionary(str(wordlist))


def test_fallback_to_empty_logs_warning(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="passcode.dictionary"):
        words = load_dictionary_or_empty(str(tmp_path / "nope.txt"))
    assert words == frozenset()
    assert "common-password check disabled" in caplog.text


def test_bundled_dictionary():
    words = load_dictionary()
    assert {"password", "123456", "qwerty"} <= words
    assert not any(w.startswith("#") or w != w.strip().lower() for w in words)


def test_default_dictionary_is_loaded_once():
    assert default_dictionary() is default_dictionary()
    assert "password" in default_dictionary()
