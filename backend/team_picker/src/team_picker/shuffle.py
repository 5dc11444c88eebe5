"""
Roster shuffling.

Every generator draws a fresh shuffled copy of its source roster, so the
randomness lives here. Pass a seeded `random.Random` (see `build_rng`) to
replay a draw.
"""

from __future__ import annotations

import random
from typing import List, Sequence


def build_rng(seed: int | None = None) -> random.Random:
    """Return a random generator; deterministic when a seed is given."""
    return random.Random(seed)


def shuffle_roster(roster: Sequence[str], rng: random.Random | None = None) -> List[str]:
    """
    Return a shuffled copy of `roster` using a Fisher-Yates pass.

    Walks from the last index down to 1 and swaps each slot with one picked
    uniformly from 0..i inclusive. The input sequence is left untouched.
    """
    rng = rng or random.Random()
    shuffled = list(roster)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
