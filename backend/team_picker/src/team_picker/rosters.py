from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from team_picker.board import Activity

SPEAKERS: List[str] = [
    "Aarav Mehta",
    "Beatriz Santos",
    "Chen Wei",
    "Dana Okafor",
    "Elif Yilmaz",
    "Farhan Qureshi",
    "Grace Lindqvist",
    "Hiro Tanaka",
    "Ines Moreau",
    "Jonah Fischer",
    "Kavya Nair",
    "Liam O'Connor",
    "Maya Rosen",
    "Nikhil Rao",
    "Olga Petrova",
    "Pedro Alves",
    "Quinn Harper",
    "Rhea Kapoor",
]

CHESS_PLAYERS: List[str] = [
    "Aarav Mehta",
    "Chen Wei",
    "Elif Yilmaz",
    "Hiro Tanaka",
    "Jonah Fischer",
    "Nikhil Rao",
    "Olga Petrova",
]

CARROM_PLAYERS: List[str] = [
    "Beatriz Santos",
    "Dana Okafor",
    "Farhan Qureshi",
    "Kavya Nair",
    "Liam O'Connor",
    "Maya Rosen",
    "Pedro Alves",
    "Rhea Kapoor",
    "Nikhil Rao",
    "Quinn Harper",
]

BADMINTON_PLAYERS: List[str] = [
    "Chen Wei",
    "Grace Lindqvist",
    "Hiro Tanaka",
    "Ines Moreau",
    "Kavya Nair",
    "Maya Rosen",
    "Olga Petrova",
    "Pedro Alves",
]

# (name, pool) pairs; unpooled players end up on the reserve benches.
CRICKET_PLAYERS: List[Tuple[str, Optional[str]]] = [
    ("Aarav Mehta", "batters"),
    ("Farhan Qureshi", "batters"),
    ("Jonah Fischer", "batters"),
    ("Liam O'Connor", "batters"),
    ("Nikhil Rao", "batters"),
    ("Rhea Kapoor", "batters"),
    ("Dana Okafor", "bowlers"),
    ("Hiro Tanaka", "bowlers"),
    ("Kavya Nair", "bowlers"),
    ("Pedro Alves", "bowlers"),
    ("Beatriz Santos", "all-rounders"),
    ("Quinn Harper", "all-rounders"),
    ("Chen Wei", None),
    ("Grace Lindqvist", None),
    ("Maya Rosen", None),
]

DEFAULT_ROSTERS: Dict[str, Dict[str, object]] = {
    "speakers": {
        "name": "Speakers",
        "description": "Everyone on the team; used for groups and the speaker pick",
        "players": [(name, None) for name in SPEAKERS],
    },
    "chess": {
        "name": "Chess",
        "description": "Chess players (1v1)",
        "players": [(name, None) for name in CHESS_PLAYERS],
    },
    "carrom": {
        "name": "Carrom",
        "description": "Carrom players (2v2)",
        "players": [(name, None) for name in CARROM_PLAYERS],
    },
    "badminton": {
        "name": "Badminton",
        "description": "Badminton players (2v2)",
        "players": [(name, None) for name in BADMINTON_PLAYERS],
    },
    "cricket": {
        "name": "Cricket",
        "description": "Cricket squad split by batters, bowlers and all-rounders",
        "players": CRICKET_PLAYERS,
    },
}

DEFAULT_ACTIVITIES: List[Activity] = [
    Activity(name="general", kind="groups", roster="speakers"),
    Activity(name="chess", kind="matches", roster="chess", mode="1v1"),
    Activity(name="carrom", kind="matches", roster="carrom", mode="2v2"),
    Activity(name="badminton", kind="matches", roster="badminton", mode="2v2"),
    Activity(name="cricket", kind="teams", roster="cricket", pools=("batters", "bowlers", "all-rounders")),
    Activity(name="speaker", kind="speaker", roster="speakers"),
]


def default_roster_entries(slug: str) -> List[Tuple[str, Optional[str]]]:
    try:
        return list(DEFAULT_ROSTERS[slug]["players"])  # type: ignore[arg-type]
    except KeyError:
        raise KeyError(f"Unknown built-in roster '{slug}'") from None


def default_roster_names(slug: str) -> List[str]:
    return [name for name, _ in default_roster_entries(slug)]
