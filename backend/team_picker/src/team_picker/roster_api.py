"""
Roster payload parsing.

Turns the three supported payload formats into participant records shaped
like:

    {
      "players": [{"name": "Asha", "pool": "batters"}, ...],
      "meta": {"description": "..."}
    }

- manual: one name per line (commas also separate), optional "Name | pool"
- json: {"players": [...]} or a bare list; items are names or {"name", "pool"} objects
- csv: a header row with a name column and an optional pool column
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from team_picker.errors import PartitionError

PAYLOAD_MODES = ("manual", "json", "csv")
_NAME_COLUMNS = ("name", "Name", "player", "Player")
_POOL_COLUMNS = ("pool", "Pool", "role", "Role")


def _record(name: Any, pool: Any = None) -> Optional[Dict[str, Optional[str]]]:
    if name is None:
        return None
    text = str(name).strip()
    if not text:
        return None
    label = str(pool).strip() if pool is not None else ""
    return {"name": text, "pool": label or None}


def _parse_manual(payload: str) -> List[Dict[str, Optional[str]]]:
    players = []
    for line in payload.replace(",", "\n").splitlines():
        name, _, pool = line.partition("|")
        record = _record(name, pool)
        if record:
            players.append(record)
    return players


def _parse_json(payload: str) -> List[Dict[str, Optional[str]]]:
    try:
        parsed = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise PartitionError(f"Could not parse roster JSON: {exc}") from exc

    items = parsed.get("players") if isinstance(parsed, dict) else parsed
    if not isinstance(items, list):
        raise PartitionError("Roster JSON must be a list or an object with a 'players' list")

    players = []
    for item in items:
        if isinstance(item, dict):
            record = _record(item.get("name"), item.get("pool"))
        elif isinstance(item, str):
            record = _record(item)
        else:
            continue
        if record:
            players.append(record)
    return players


def _pick_column(columns, candidates) -> Optional[str]:
    for candidate in candidates:
        if candidate in columns:
            return candidate
    return None


def _parse_csv(payload: str) -> List[Dict[str, Optional[str]]]:
    try:
        df = pd.read_csv(io.StringIO(payload), dtype=str, skipinitialspace=True)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise PartitionError(f"Could not parse roster CSV: {exc}") from exc

    name_col = _pick_column(df.columns, _NAME_COLUMNS)
    if name_col is None:
        raise PartitionError("Roster CSV needs a 'name' column")
    pool_col = _pick_column(df.columns, _POOL_COLUMNS)

    df = df.fillna("")
    players = []
    for _, row in df.iterrows():
        record = _record(row.get(name_col), row.get(pool_col) if pool_col else None)
        if record:
            players.append(record)
    return players


def convert_roster_from_payload(mode: str, payload: str) -> Dict[str, Any]:
    """Parse a roster payload; raises PartitionError when nothing usable comes out."""
    if mode == "manual":
        players = _parse_manual(payload)
    elif mode == "json":
        players = _parse_json(payload)
    elif mode == "csv":
        players = _parse_csv(payload)
    else:
        raise PartitionError(f"Unsupported roster format '{mode}' (expected one of: {', '.join(PAYLOAD_MODES)})")

    if not players:
        raise PartitionError("No players available in this roster!")

    pools = sorted({p["pool"] for p in players if p["pool"]})
    description = f"{len(players)} players from {mode} payload"
    if pools:
        description += f" ({len(pools)} pools)"
    return {"players": players, "meta": {"description": description, "pools": pools}}


def guess_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return "csv"
    if suffix == ".json":
        return "json"
    return "manual"


def load_roster_file(path: Path, fmt: Optional[str] = None) -> Dict[str, Any]:
    text = Path(path).read_text(encoding="utf-8")
    return convert_roster_from_payload(fmt or guess_format(Path(path)), text)
