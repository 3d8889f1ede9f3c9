"""
Guess generation: every dictionary word consistent with the constraints.

Pipeline per call:
  1) normalize caller input (lowercase, decompose) into Constraints
  2) pick the dictionary (injected, or the bundled word list)
  3) validate constraint shapes against the expected word length
  4) filter; large dictionaries are cut into contiguous chunks that are
     filtered on a thread pool
  5) join survivors into UPPERCASE strings, in dictionary order

Nothing is shared for writing between chunks: each worker reads the same
immutable Constraints and returns its own list, and `Executor.map` hands
results back in submission order.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Sequence

from wordle_guesser.config import DEFAULT_CHUNK_SIZE, DEFAULT_WORD_LENGTH, default_workers
from wordle_guesser.datasets.io import Dictionary, Word, bundled_dictionary
from wordle_guesser.errors import ConfigError
from .constraints import Constraints, filter_candidates
from .validation import validate_constraints

logger = logging.getLogger(__name__)


def _chunks(dictionary: Sequence[Word], size: int) -> List[Sequence[Word]]:
    return [dictionary[i:i + size] for i in range(0, len(dictionary), size)]


def filter_dictionary(dictionary: Sequence[Word], constraints: Constraints, *,
                      workers: int | None = None,
                      chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[Word]:
    """
    Filter `dictionary` against `constraints`, in parallel when worthwhile.

    Result order always equals dictionary order.
    """
    if chunk_size < 1:
        raise ConfigError(f"chunk_size must be positive; got {chunk_size}")
    workers = default_workers() if workers is None else workers

    chunks = _chunks(dictionary, chunk_size)
    if workers <= 1 or len(chunks) <= 1:
        return filter_candidates(dictionary, constraints)

    with ThreadPoolExecutor(max_workers=min(workers, len(chunks))) as pool:
        parts = pool.map(lambda chunk: filter_candidates(chunk, constraints), chunks)
        return [w for part in parts for w in part]


def generate_guesses(
        state: str,
        excluded_letters: Iterable[str],
        unplaced_letters: Iterable[str],
        excluded_placements: Iterable[str] | None = None,
        *,
        dictionary: Dictionary | None = None,
        workers: int | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        word_length: int = DEFAULT_WORD_LENGTH,
) -> List[str]:
    """
    Return every dictionary word consistent with the given constraints.

    Args:
      state               : known pattern, '_' for unknown positions (any case)
      excluded_letters    : letters absent from the answer (any case)
      unplaced_letters    : letters present but not yet placed (any case)
      excluded_placements : masks like "_a___" ruling a letter out of a position
      dictionary          : word pool; defaults to the bundled word list
      workers, chunk_size : parallel filter tuning
      word_length         : expected word length; dictionary lines of any other
                            length never match

    Returns:
      List[str] of matching words, UPPERCASE, in dictionary order.

    Raises:
      MalformedInput if the constraints don't fit `word_length`.
      ConfigError if `chunk_size` is below 1.
      DecodeError if the bundled dictionary cannot be decoded.
    """
    constraints = Constraints.build(state, excluded_letters, unplaced_letters,
                                    excluded_placements)
    if dictionary is None:
        dictionary = bundled_dictionary()

    validate_constraints(constraints, word_length)
    logger.debug("constraints: %s", constraints)

    t0 = time.perf_counter()
    survivors = filter_dictionary(dictionary, constraints, workers=workers,
                                  chunk_size=chunk_size)
    guesses = ["".join(w).upper() for w in survivors]

    dt = (time.perf_counter() - t0) * 1000.0
    logger.info("matched %d of %d words in %.2f ms", len(guesses), len(dictionary), dt)
    return guesses
