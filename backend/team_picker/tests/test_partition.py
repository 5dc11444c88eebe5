from __future__ import annotations

from collections import Counter

import pytest

from team_picker.errors import PartitionError
from team_picker.partition import (
    block_size_for_mode,
    coerce_group_size,
    pair_into_matches,
    partition_into_groups,
)


def roster(n: int) -> list[str]:
    return [f"P{i}" for i in range(1, n + 1)]


def test_groups_of_three_from_ten() -> None:
    result = partition_into_groups(roster(10), 3)
    assert result.groups == (("P1", "P2", "P3"), ("P4", "P5", "P6"), ("P7", "P8", "P9"))
    assert result.leftover == ("P10",)
    assert result.used == frozenset(roster(9))


@pytest.mark.parametrize("n,k", [(0, 2), (1, 2), (7, 2), (12, 4), (13, 5), (4, 6)])
def test_groups_cover_roster_exactly_once(n: int, k: int) -> None:
    names = roster(n)
    groups, leftover = partition_into_groups(names, k)
    assert all(len(group) == k and len(set(group)) == k for group in groups)
    assert len(leftover) < k
    placed = [name for group in groups for name in group] + list(leftover)
    assert Counter(placed) == Counter(names)


def test_groups_keep_duplicate_slots() -> None:
    groups, leftover = partition_into_groups(["Sam", "Lee", "Sam", "Ada", "Bo"], 2)
    assert groups == (("Sam", "Lee"), ("Sam", "Ada"))
    assert leftover == ("Bo",)


def test_groups_same_order_same_boundaries() -> None:
    names = roster(11)
    assert partition_into_groups(names, 4) == partition_into_groups(list(names), 4)


@pytest.mark.parametrize("size", [1, 0, -3, "3", 2.5, True, None])
def test_invalid_group_size_rejected(size) -> None:
    with pytest.raises(PartitionError):
        partition_into_groups(roster(6), size)


def test_coerce_group_size() -> None:
    assert coerce_group_size("4") == 4
    assert coerce_group_size(" 3 ") == 3
    assert coerce_group_size(0, clamp=True) == 2
    with pytest.raises(PartitionError):
        coerce_group_size("abc")
    with pytest.raises(PartitionError):
        coerce_group_size("1")


def test_one_v_one_with_seven_players() -> None:
    matches, leftover = pair_into_matches(roster(7), 2)
    assert len(matches) == 3
    assert all(len(m.team1) == 1 and len(m.team2) == 1 for m in matches)
    assert matches[0].team1 == ("P1",)
    assert matches[0].team2 == ("P2",)
    assert leftover == ("P7",)


def test_two_v_two_with_ten_players() -> None:
    result = pair_into_matches(roster(10), 4)
    assert len(result.matches) == 2
    assert result.matches[1].team1 == ("P5", "P6")
    assert result.matches[1].team2 == ("P7", "P8")
    assert result.leftover == ("P9", "P10")
    assert result.used == frozenset(roster(8))


@pytest.mark.parametrize(
    "names,block",
    [
        (roster(0), 2),
        (roster(1), 2),
        (roster(9), 2),
        (roster(12), 4),
        (roster(15), 4),
        (["Sam", "Lee", "Sam", "Ada", "Sam"], 2),
        (["Sam", "Sam", "Lee", "Lee", "Sam", "Ada"], 4),
    ],
)
def test_matches_cover_roster_exactly_once(names: list[str], block: int) -> None:
    matches, leftover = pair_into_matches(names, block)
    assert all(len(m.team1) == len(m.team2) == block // 2 for m in matches)
    assert len(leftover) < block
    assert len(matches) == len(names) // block
    placed = [name for m in matches for name in m.players] + list(leftover)
    assert placed == list(names)
    assert Counter(placed) == Counter(names)


def test_incomplete_block_goes_to_leftovers() -> None:
    matches, leftover = pair_into_matches(roster(3), 4)
    assert matches == ()
    assert leftover == ("P1", "P2", "P3")


@pytest.mark.parametrize("block", [0, 1, 3, 6, True, 2.0, 4.0, "2", None])
def test_invalid_block_size(block) -> None:
    with pytest.raises(PartitionError):
        pair_into_matches(roster(8), block)


def test_block_size_for_mode() -> None:
    assert block_size_for_mode("1v1") == 2
    assert block_size_for_mode("2v2") == 4
    with pytest.raises(PartitionError):
        block_size_for_mode("3v3")
