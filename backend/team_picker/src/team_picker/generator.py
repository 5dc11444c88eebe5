"""
Generator functions consumed by the FastAPI layer and the CLI.

Each call draws a fresh shuffle of the source names and returns an immutable
result; nothing here keeps state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from team_picker.composition import FixedTeams, SplitPolicy, build_fixed_teams, pools_from_labels
from team_picker.errors import PartitionError
from team_picker.partition import (
    GroupPartition,
    MatchPairing,
    block_size_for_mode,
    pair_into_matches,
    partition_into_groups,
)
from team_picker.roster_api import convert_roster_from_payload
from team_picker.shuffle import build_rng, shuffle_roster
from team_picker.speaker import SpeakerPick, pick_speaker


@dataclass
class GeneratedParticipant:
    name: str
    pool: Optional[str] = None


@dataclass
class GeneratedRoster:
    name: str
    description: Optional[str]
    source_type: str
    source_ref: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    participants: List[GeneratedParticipant] = field(default_factory=list)
    pools: List[str] = field(default_factory=list)


def generate_roster(
    *,
    mode: str,
    payload: str,
    name: str,
    description: Optional[str] = None,
) -> GeneratedRoster:
    """Parse a roster payload into participants; the slug is derived in the API layer."""
    converted = convert_roster_from_payload(mode, payload)
    participants = [GeneratedParticipant(name=p["name"], pool=p["pool"]) for p in converted["players"]]
    meta = converted.get("meta", {})
    return GeneratedRoster(
        name=name,
        description=description or meta.get("description"),
        source_type=mode,
        source_ref=payload,
        participants=participants,
        pools=list(meta.get("pools") or []),
    )


def _require_players(names: Sequence[str]) -> None:
    if not names:
        raise PartitionError("No players available for this game!")


def generate_groups(names: Sequence[str], group_size: int, seed: int | None = None) -> GroupPartition:
    _require_players(names)
    return partition_into_groups(shuffle_roster(names, build_rng(seed)), group_size)


def generate_matches(names: Sequence[str], mode: str, seed: int | None = None) -> MatchPairing:
    block_size = block_size_for_mode(mode)
    _require_players(names)
    return pair_into_matches(shuffle_roster(names, build_rng(seed)), block_size)


def generate_fixed_teams(
    entries: Iterable[Tuple[str, Optional[str]]],
    pools: Optional[Iterable[str]] = None,
    pool_split: SplitPolicy | str = SplitPolicy.CEIL,
    reserve_split: SplitPolicy | str = SplitPolicy.CEIL,
    seed: int | None = None,
) -> FixedTeams:
    entries = list(entries)
    _require_players(entries)
    pooled, reserves = pools_from_labels(entries, only=pools)
    return build_fixed_teams(
        pooled,
        reserves,
        pool_split=pool_split,
        reserve_split=reserve_split,
        rng=build_rng(seed),
    )


def generate_speaker(names: Sequence[str], exclude: Iterable[str] = (), seed: int | None = None) -> SpeakerPick:
    return pick_speaker(names, exclude=exclude, rng=build_rng(seed))
