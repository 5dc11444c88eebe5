"""
Group and match partitioning over an already shuffled roster.

Both partitioners are deterministic: given the same roster order they always
produce the same boundaries. Shuffle first (see `team_picker.shuffle`) to get
a random draw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Sequence, Tuple

from team_picker.errors import PartitionError

MIN_GROUP_SIZE = 2

# Players needed for one match, per game mode.
MATCH_MODES: Dict[str, int] = {
    "1v1": 2,
    "2v2": 4,
}


@dataclass(frozen=True)
class GroupPartition:
    groups: Tuple[Tuple[str, ...], ...]
    leftover: Tuple[str, ...]
    used: FrozenSet[str] = field(default_factory=frozenset)

    def __iter__(self) -> Iterator:
        # Allows `groups, leftover = partition_into_groups(...)`.
        return iter((self.groups, self.leftover))


@dataclass(frozen=True)
class Match:
    team1: Tuple[str, ...]
    team2: Tuple[str, ...]

    @property
    def players(self) -> Tuple[str, ...]:
        return self.team1 + self.team2


@dataclass(frozen=True)
class MatchPairing:
    matches: Tuple[Match, ...]
    leftover: Tuple[str, ...]
    used: FrozenSet[str] = field(default_factory=frozenset)

    def __iter__(self) -> Iterator:
        return iter((self.matches, self.leftover))


def coerce_group_size(raw: object, clamp: bool = False) -> int:
    """
    Turn raw user input into a group size.

    Non-numeric input is always rejected. Numbers below the minimum are
    rejected unless `clamp` is set, in which case they are raised to it.
    """
    if isinstance(raw, bool):
        raise PartitionError("Please set a valid group size!")
    try:
        size = int(str(raw).strip())
    except (TypeError, ValueError):
        raise PartitionError("Please set a valid group size!") from None
    if size < MIN_GROUP_SIZE:
        if clamp:
            return MIN_GROUP_SIZE
        raise PartitionError(f"Group size must be at least {MIN_GROUP_SIZE}, got {size}")
    return size


def _validate_group_size(group_size: object) -> int:
    if isinstance(group_size, bool) or not isinstance(group_size, int):
        raise PartitionError("Please set a valid group size!")
    if group_size < MIN_GROUP_SIZE:
        raise PartitionError(f"Group size must be at least {MIN_GROUP_SIZE}, got {group_size}")
    return group_size


def partition_into_groups(roster: Sequence[str], group_size: int) -> GroupPartition:
    """
    Chunk `roster` into consecutive groups of exactly `group_size`.

    A trailing partial block becomes the leftover list, so every slot of the
    roster lands in exactly one group or in the leftovers. Duplicate names
    are kept as separate slots.
    """
    size = _validate_group_size(group_size)
    players = list(roster)
    full = len(players) - len(players) % size

    groups = tuple(tuple(players[start:start + size]) for start in range(0, full, size))
    leftover = tuple(players[full:])
    used = frozenset(name for group in groups for name in group)
    return GroupPartition(groups=groups, leftover=leftover, used=used)


def block_size_for_mode(mode: str) -> int:
    try:
        return MATCH_MODES[mode]
    except KeyError:
        choices = ", ".join(MATCH_MODES)
        raise PartitionError(f"Unknown game mode '{mode}' (expected one of: {choices})") from None


def pair_into_matches(roster: Sequence[str], block_size: int) -> MatchPairing:
    """
    Pair the roster front to back into matches of `block_size` players.

    Each block is split in half: the first half is team1, the second half
    team2. When fewer than `block_size` players remain they all become
    leftovers; a match is never created with a short team.
    """
    if isinstance(block_size, bool) or not isinstance(block_size, int) or block_size not in MATCH_MODES.values():
        sizes = ", ".join(str(v) for v in MATCH_MODES.values())
        raise PartitionError(f"Match block size must be one of {sizes}, got {block_size!r}")

    players = list(roster)
    half = block_size // 2
    matches = []
    used = set()
    while len(players) >= block_size:
        block, players = players[:block_size], players[block_size:]
        match = Match(team1=tuple(block[:half]), team2=tuple(block[half:]))
        matches.append(match)
        used.update(match.players)

    return MatchPairing(matches=tuple(matches), leftover=tuple(players), used=frozenset(used))
