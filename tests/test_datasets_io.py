from pathlib import Path

import pytest
from wordle_guesser.datasets import (load_dictionary, read_dictionary, bundled_dictionary,
                                     write_dictionary, word_to_letters)
from wordle_guesser.datasets.io import BUNDLED_DICTIONARY_PATH
from wordle_guesser.errors import DecodeError


def test_word_to_letters():
    assert word_to_letters("crane") == ("c", "r", "a", "n", "e")


def test_load_dictionary_splits_on_crlf():
    d = load_dictionary(b"crane\r\nraise\r\nstare")
    assert d == (tuple("crane"), tuple("raise"), tuple("stare"))


def test_load_dictionary_drops_blank_lines():
    assert load_dictionary(b"crane\r\n\r\nraise\r\n") == (tuple("crane"), tuple("raise"))


def test_load_dictionary_passes_odd_lines_through():
    # length and charset are the validator's concern
    assert load_dictionary(b"cranes\r\nab1") == (tuple("cranes"), tuple("ab1"))


def test_load_dictionary_bad_utf8():
    with pytest.raises(DecodeError):
        load_dictionary(b"crane\r\n\xff\xfe")


def test_read_dictionary_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_dictionary(tmp_path / "nope.txt")


def test_write_then_read_twice_is_stable(tmp_path: Path):
    p = tmp_path / "words.txt"
    write_dictionary(["crane", "raise", "stare"], p)
    assert p.read_bytes() == b"crane\r\nraise\r\nstare"
    assert read_dictionary(p) == read_dictionary(p)
    assert [("".join(w)) for w in read_dictionary(p)] == ["crane", "raise", "stare"]


def test_bundled_dictionary_is_loaded_once():
    d = bundled_dictionary()
    assert d is bundled_dictionary()
    assert d == read_dictionary(BUNDLED_DICTIONARY_PATH)
    assert len(d) > 500
    assert all(len(w) == 5 for w in d)
