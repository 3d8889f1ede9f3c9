"""
Candidate filtering given what is known about the answer.

Given:
  - state               : the answer pattern so far, letters plus '_' wildcards
  - excluded letters    : letters confirmed absent ("grey")
  - unplaced letters    : letters confirmed present, position unknown ("yellow")
  - excluded placements : word-shaped masks, each letter in a mask marks a
                          position that letter is known NOT to occupy

Return:
  - whether one candidate word is consistent with all of it (`matches`), or
    the consistent subset of a word pool (`filter_candidates`).

All letters are compared lowercase; `Constraints.build` normalizes caller
input so the matcher never has to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Tuple

from wordle_guesser.datasets.io import Word, word_to_letters

WILDCARD = "_"


@dataclass(frozen=True)
class Constraints:
    """Normalized (lowercased, decomposed) constraint set for one query."""
    state: Word
    excluded: FrozenSet[str]
    unplaced: FrozenSet[str]
    excluded_placements: Tuple[Word, ...] = ()

    @classmethod
    def build(
            cls,
            state: str,
            excluded_letters: Iterable[str],
            unplaced_letters: Iterable[str],
            excluded_placements: Iterable[str] | None = None,
    ) -> "Constraints":
        """
        Lowercase every input and decompose state / masks into Words.

        `excluded_placements=None` is the same as an empty list: requests that
        predate placement masks go through the same path.
        """
        return cls(
            state=word_to_letters(state.lower()),
            excluded=frozenset(s.lower() for s in excluded_letters),
            unplaced=frozenset(s.lower() for s in unplaced_letters),
            excluded_placements=tuple(
                word_to_letters(m.lower()) for m in (excluded_placements or ())
            ),
        )

    @property
    def N(self) -> int:
        return len(self.state)


def matches(state: Word, candidate: Word, excluded: FrozenSet[str],
            unplaced: FrozenSet[str], excluded_placements: Iterable[Word] = ()) -> bool:
    """
    Return True if `candidate` is consistent with every constraint.

    Checks run in this order and stop at the first failure:
      1) positions: a known letter must match exactly; at a wildcard the
         candidate may not hold an excluded letter, unless that letter is
         also unplaced (grey at one spot, yellow at another)
      2) every unplaced letter occurs somewhere in the candidate (one
         occurrence is enough, multiplicity is not checked)
      3) no mask puts its letter at a position where the candidate has it

    A candidate whose length differs from the state never matches.
    Masks shorter than the candidate only constrain their own positions.
    """
    if len(candidate) != len(state):
        return False

    for s, c in zip(state, candidate):
        if s == WILDCARD:
            if c in excluded and c not in unplaced:
                return False
        elif s != c:
            return False

    for letter in unplaced:
        if letter not in candidate:
            return False

    for mask in excluded_placements:
        for m, c in zip(mask, candidate):
            if m != WILDCARD and m == c:
                return False

    return True


def filter_candidates(words: Iterable[Word], constraints: Constraints) -> List[Word]:
    """
    Keep only the words consistent with `constraints`, preserving input order.
    """
    state = constraints.state
    excluded = constraints.excluded
    unplaced = constraints.unplaced
    masks = constraints.excluded_placements
    return [w for w in words if matches(state, w, excluded, unplaced, masks)]
