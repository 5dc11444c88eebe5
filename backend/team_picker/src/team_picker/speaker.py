from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from team_picker.errors import PartitionError


@dataclass(frozen=True)
class SpeakerPick:
    speaker: str
    eligible: int


def eligible_speakers(roster: Sequence[str], exclude: Iterable[str] = ()) -> list[str]:
    excluded = {name.strip() for name in exclude}
    return [name for name in roster if name.strip() and name.strip() not in excluded]


def pick_speaker(roster: Sequence[str], exclude: Iterable[str] = (), rng: random.Random | None = None) -> SpeakerPick:
    """Pick one speaker uniformly from the roster, skipping excluded and blank names."""
    candidates = eligible_speakers(roster, exclude)
    if not candidates:
        raise PartitionError("No eligible speakers left to pick")
    rng = rng or random.Random()
    return SpeakerPick(speaker=candidates[rng.randrange(len(candidates))], eligible=len(candidates))
