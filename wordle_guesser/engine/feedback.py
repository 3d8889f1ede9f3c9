"""
Turn game feedback into suggestion constraints.

Players usually know "I guessed CRANE and got --Y-G" rather than the four
constraint fields. `constraints_from_history` folds any number of
(guess, pattern) pairs into exactly those fields, shaped like a service
request body. `score` produces the pattern a given answer would show,
which is handy when replaying a game whose answer is known.

Per position i of each guess:
  G -> state[i] = letter
  Y -> letter is unplaced, and a mask rules it out at i
  - -> letter is excluded; if the same guess also marks that letter G or Y,
       a mask rules it out at i as well (the answer has fewer copies)
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from wordle_guesser.config import DEFAULT_WORD_LENGTH
from .constraints import WILDCARD
from .validation import validate_feedback

History = Iterable[Tuple[str, str]]  # (guess, pattern)


def score(guess: str, answer: str) -> str:
    """
    Feedback pattern for `guess` against `answer`: G (right spot), Y (elsewhere),
    - (absent, or every copy already accounted for).

    Greens claim their letters first; the answer letters left over are then
    handed out as yellows from left to right.

      score("belle", "level") -> "-GYYY"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer lengths differ: {guess!r} vs {answer!r}")

    greens = [g == a for g, a in zip(guess, answer)]
    spare = Counter(a for a, hit in zip(answer, greens) if not hit)

    marks = []
    for g, hit in zip(guess, greens):
        if hit:
            marks.append("G")
        elif spare[g]:
            spare[g] -= 1
            marks.append("Y")
        else:
            marks.append("-")
    return "".join(marks)


def _mask(N: int, i: int, letter: str) -> str:
    return WILDCARD * i + letter + WILDCARD * (N - i - 1)


def constraints_from_history(history: History, N: int = DEFAULT_WORD_LENGTH) -> Dict:
    """
    Fold (guess, pattern) pairs into request fields.

    Returns a dict with keys current_state, excluded_letters,
    unplaced_letters, excluded_placements (lowercase, deterministic order).

    Raises MalformedInput on a guess / pattern that isn't N long.
    """
    history = [(g, p) for g, p in history]
    validate_feedback(history, N)

    state = [WILDCARD] * N
    excluded: List[str] = []
    unplaced: List[str] = []
    masks: List[str] = []

    def add(bucket: List[str], item: str) -> None:
        if item not in bucket:
            bucket.append(item)

    for guess, pattern in history:
        guess = guess.lower()
        pattern = pattern.upper()
        present = {g for g, p in zip(guess, pattern) if p in "GY"}
        for i, (g, p) in enumerate(zip(guess, pattern)):
            if p == "G":
                state[i] = g
            elif p == "Y":
                add(unplaced, g)
                add(masks, _mask(N, i, g))
            else:
                add(excluded, g)
                if g in present:
                    add(masks, _mask(N, i, g))

    return {
        "current_state": "".join(state),
        "excluded_letters": excluded,
        "unplaced_letters": unplaced,
        "excluded_placements": masks,
    }
