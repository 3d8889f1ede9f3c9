"""
Shape checks on caller input.

The matcher assumes well-formed data; these functions answer "is this
request usable for words of length N?" and raise MalformedInput with a
message naming the offending value when it isn't.

Letter *consistency* (e.g. a letter both excluded and unplaced) is not
checked: inconsistent input is legal and simply yields fewer suggestions.
"""

from typing import Iterable, Tuple

from wordle_guesser.errors import MalformedInput
from .constraints import Constraints

PATTERN_CHARS = frozenset("GY-")


def validate_constraints(constraints: Constraints, N: int) -> None:
    """
    Raise MalformedInput unless:
      - the state has exactly N positions
      - every excluded / unplaced entry is a single character
      - no excluded-placement mask is longer than N (shorter masks are
        allowed; their missing tail positions are unconstrained)
    """
    state = "".join(constraints.state)
    if len(constraints.state) != N:
        raise MalformedInput(f"current_state must have {N} characters; got {state!r}")

    for name, letters in (("excluded_letters", constraints.excluded),
                          ("unplaced_letters", constraints.unplaced)):
        bad = sorted(s for s in letters if len(s) != 1)
        if bad:
            raise MalformedInput(f"{name} entries must be single characters; got {bad}")

    for mask in constraints.excluded_placements:
        if len(mask) > N:
            raise MalformedInput(
                f"excluded_placements entries must have at most {N} characters; "
                f"got {''.join(mask)!r}")


def validate_feedback(history: Iterable[Tuple[str, str]], N: int) -> None:
    """
    Raise MalformedInput unless every (guess, pattern) pair has an alphabetic
    guess of length N and a pattern of N characters drawn from 'G', 'Y', '-'.
    """
    for guess, pattern in history:
        if not isinstance(guess, str) or len(guess) != N or not guess.isalpha():
            raise MalformedInput(f"guess must be {N} letters; got {guess!r}")
        if (not isinstance(pattern, str) or len(pattern) != N
                or not set(pattern.upper()) <= PATTERN_CHARS):
            raise MalformedInput(
                f"pattern must be {N} characters of 'G', 'Y', '-'; got {pattern!r}")
