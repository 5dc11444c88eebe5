from __future__ import annotations

import pytest

from team_picker.errors import PartitionError
from team_picker.generator import generate_speaker
from team_picker.speaker import eligible_speakers, pick_speaker
from team_picker.shuffle import build_rng


def test_pick_is_from_roster() -> None:
    names = ["Asha", "Ben", "Caro"]
    pick = pick_speaker(names, rng=build_rng(1))
    assert pick.speaker in names
    assert pick.eligible == 3


def test_exclusions_and_blanks_are_skipped() -> None:
    assert eligible_speakers(["Asha", "", "  ", "Ben"], exclude=[" Ben "]) == ["Asha"]
    assert pick_speaker(["Asha", "Ben", ""], exclude=["Ben"]).speaker == "Asha"


def test_no_eligible_speaker_is_an_error() -> None:
    with pytest.raises(PartitionError, match="No eligible speakers"):
        pick_speaker(["Asha"], exclude=["Asha"])
    with pytest.raises(PartitionError):
        pick_speaker([])


def test_seeded_pick_is_repeatable() -> None:
    names = [f"S{i}" for i in range(20)]
    assert generate_speaker(names, seed=9) == generate_speaker(names, seed=9)
