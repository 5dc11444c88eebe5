"""
Stratified two-team builder.

The source roster is split into labelled pools (e.g. batters / bowlers). Each
pool is shuffled on its own and divided between team A and team B, so both
teams get a fair share of every pool. Anyone outside the pools is shuffled
and split into reserve benches for the two teams.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from team_picker.errors import PartitionError
from team_picker.shuffle import shuffle_roster


class SplitPolicy(str, Enum):
    """Where to cut an odd-sized list between the two teams."""

    CEIL = "ceil"
    FLOOR = "floor"
    STRICT = "strict"


def split_point(count: int, policy: SplitPolicy | str, label: str = "list") -> int:
    try:
        policy = SplitPolicy(policy)
    except ValueError:
        raise PartitionError(f"Unknown split policy '{policy}'") from None
    if count % 2 == 0:
        return count // 2
    if policy is SplitPolicy.STRICT:
        raise PartitionError(f"Cannot split {label} of {count} evenly between two teams")
    if policy is SplitPolicy.CEIL:
        return (count + 1) // 2
    return count // 2


def split_halves(names: Sequence[str], policy: SplitPolicy | str, label: str = "list") -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    cut = split_point(len(names), policy, label)
    return tuple(names[:cut]), tuple(names[cut:])


@dataclass(frozen=True)
class FixedTeams:
    team_a: Tuple[str, ...]
    team_b: Tuple[str, ...]
    reserves_a: Tuple[str, ...] = ()
    reserves_b: Tuple[str, ...] = ()
    contributions: Mapping[str, Tuple[int, int]] = field(default_factory=dict)

    @property
    def reserves(self) -> Tuple[str, ...]:
        return self.reserves_a + self.reserves_b


def pools_from_labels(
    entries: Iterable[Tuple[str, Optional[str]]],
    only: Optional[Iterable[str]] = None,
) -> Tuple[Dict[str, List[str]], List[str]]:
    """
    Group `(name, pool_label)` pairs into pools plus an unpooled list.

    Labels not in `only` (when given) are treated as unpooled. Pool order
    follows first appearance.
    """
    allowed = set(only) if only is not None else None
    pools: Dict[str, List[str]] = {}
    unpooled: List[str] = []
    for name, label in entries:
        if label and (allowed is None or label in allowed):
            pools.setdefault(label, []).append(name)
        else:
            unpooled.append(name)
    if allowed:
        missing = sorted(allowed - set(pools))
        if missing:
            raise PartitionError(f"No participants in pool(s): {', '.join(missing)}")
    return pools, unpooled


def build_fixed_teams(
    pools: Mapping[str, Sequence[str]],
    reserves: Sequence[str] = (),
    pool_split: SplitPolicy | str = SplitPolicy.CEIL,
    reserve_split: SplitPolicy | str = SplitPolicy.CEIL,
    rng: random.Random | None = None,
) -> FixedTeams:
    """Build team A / team B from disjoint pools and split the reserves."""
    rng = rng or random.Random()

    seen: Dict[str, str] = {}
    for label, names in pools.items():
        for name in names:
            if name in seen and seen[name] != label:
                raise PartitionError(f"'{name}' is in both pool '{seen[name]}' and pool '{label}'")
            seen[name] = label

    team_a: List[str] = []
    team_b: List[str] = []
    contributions: Dict[str, Tuple[int, int]] = {}
    for label, names in pools.items():
        first, second = split_halves(shuffle_roster(names, rng), pool_split, label=f"pool '{label}'")
        team_a.extend(first)
        team_b.extend(second)
        contributions[label] = (len(first), len(second))

    if not team_a and not team_b:
        raise PartitionError("No pooled participants to build teams from")

    reserves_a, reserves_b = split_halves(shuffle_roster(reserves, rng), reserve_split, label="reserves")
    return FixedTeams(
        team_a=tuple(team_a),
        team_b=tuple(team_b),
        reserves_a=reserves_a,
        reserves_b=reserves_b,
        contributions=contributions,
    )
