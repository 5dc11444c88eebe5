from __future__ import annotations

from collections import Counter

from team_picker.shuffle import build_rng, shuffle_roster

NAMES = ["Alice", "Bob", "Cara", "Dev", "Eli", "Fay", "Gus", "Hana"]


def test_shuffle_is_permutation_and_leaves_input_alone() -> None:
    original = list(NAMES)
    shuffled = shuffle_roster(NAMES, build_rng(7))
    assert NAMES == original
    assert shuffled is not NAMES
    assert Counter(shuffled) == Counter(NAMES)


def test_shuffle_keeps_duplicate_names() -> None:
    roster = ["Sam", "Sam", "Lee"]
    assert Counter(shuffle_roster(roster, build_rng(3))) == Counter(roster)


def test_shuffle_empty_and_single() -> None:
    assert shuffle_roster([]) == []
    assert shuffle_roster(["Solo"]) == ["Solo"]


def test_same_seed_replays_the_draw() -> None:
    assert shuffle_roster(NAMES, build_rng(42)) == shuffle_roster(NAMES, build_rng(42))


def test_shuffle_reaches_every_ordering_of_three() -> None:
    rng = build_rng(0)
    seen = {tuple(shuffle_roster(["a", "b", "c"], rng)) for _ in range(300)}
    assert len(seen) == 6
