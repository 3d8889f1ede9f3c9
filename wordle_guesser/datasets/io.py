"""
Dictionary loading.

A dictionary file is UTF-8 text with one word per line and CRLF ("\\r\\n")
as the line delimiter. Loading turns it into a Dictionary: an immutable,
order-preserving tuple of Words, each Word a tuple of single-character
strings.

Blank lines (including the empty piece left by a trailing delimiter) are
dropped. Word length and character set are NOT checked here; run
`validate_dictionary` over a file to audit it.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, Tuple

from wordle_guesser.errors import DecodeError

logger = logging.getLogger(__name__)

Word = Tuple[str, ...]
Dictionary = Tuple[Word, ...]

DELIMITER = "\r\n"
BUNDLED_DICTIONARY_PATH = Path(__file__).parent / "data" / "five_letter_words.txt"


def word_to_letters(word: str) -> Word:
    """Decompose a word string into its letters: "crane" -> ("c", "r", "a", "n", "e")."""
    return tuple(word)


def load_dictionary(raw: bytes) -> Dictionary:
    """
    Parse a raw CRLF-delimited byte buffer into a Dictionary.

    Raises DecodeError if `raw` is not valid UTF-8.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"dictionary is not valid UTF-8: {e}") from e
    return tuple(word_to_letters(line) for line in text.split(DELIMITER) if line)


def read_dictionary(p: Path | str) -> Dictionary:
    """
    Read and parse a dictionary file.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    dictionary = load_dictionary(p.read_bytes())
    logger.debug("loaded %d words from %s", len(dictionary), p)
    return dictionary


_bundled: Dictionary | None = None
_bundled_lock = threading.Lock()


def bundled_dictionary() -> Dictionary:
    """
    The word list shipped with the package.

    Loaded on first use and shared process-wide afterwards; the tuple is
    immutable, so concurrent readers need no further locking.
    """
    global _bundled
    if _bundled is None:
        with _bundled_lock:
            if _bundled is None:
                _bundled = read_dictionary(BUNDLED_DICTIONARY_PATH)
    return _bundled


def write_dictionary(words: Iterable[str], p: Path | str) -> str:
    """
    Write words as a CRLF-delimited UTF-8 file (no trailing delimiter).
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(DELIMITER.join(words).encode("utf-8"))
    return str(p)
