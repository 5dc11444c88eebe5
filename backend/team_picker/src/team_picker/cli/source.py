"""Shared roster-source options for the CLI subcommands."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple

from team_picker.roster_api import PAYLOAD_MODES, load_roster_file
from team_picker.rosters import DEFAULT_ROSTERS, default_roster_entries


def configure_source(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file",
        type=Path,
        help="Roster file (.txt one name per line, .json, or .csv with a name column).",
    )
    source.add_argument(
        "--roster",
        choices=sorted(DEFAULT_ROSTERS),
        help="Use a built-in roster instead of a file.",
    )
    parser.add_argument(
        "--format",
        choices=PAYLOAD_MODES,
        default=None,
        help="Roster file format (default: guessed from the file extension).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffle to replay a draw.")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")


def load_entries(args: argparse.Namespace, default_roster: str) -> List[Tuple[str, Optional[str]]]:
    if args.file is not None:
        converted = load_roster_file(args.file, args.format)
        print(f"[team-picker] Loaded {len(converted['players'])} players from {args.file}", file=sys.stderr)
        return [(p["name"], p["pool"]) for p in converted["players"]]
    return default_roster_entries(args.roster or default_roster)


def load_names(args: argparse.Namespace, default_roster: str) -> List[str]:
    return [name for name, _ in load_entries(args, default_roster)]


def _jsonable(value: Any) -> Any:
    if is_dataclass(value):
        return _jsonable(asdict(value))
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_jsonable(v) for v in value)
    return value


def dump_json(value: Any) -> None:
    print(json.dumps(_jsonable(value), indent=2))
