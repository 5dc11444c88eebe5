import os
from pathlib import Path
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

from team_picker.composition import SplitPolicy

# Prefer the backend/.env file so running from the repo root still picks up settings.
# __file__ is backend/app/core/config.py -> parents[2] is backend/
BACKEND_ENV = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(BACKEND_ENV)


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean from the environment with sensible defaults."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return max(0.0, float(raw))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_split(name: str, default: SplitPolicy = SplitPolicy.CEIL) -> str:
    """Read a split policy name; unknown values fall back to the default."""
    raw = (os.getenv(name) or "").strip().lower()
    try:
        return SplitPolicy(raw).value
    except ValueError:
        return default.value


def _env_list(name: str, default: List[str] | None = None) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default or []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _cors_origins() -> List[str]:
    """
    Merge any CORS_ORIGINS env override with the local frontend dev hosts.
    Without an override the API is open (*) so the static frontend can live anywhere.
    """
    base_dev = ["http://localhost:3000", "http://127.0.0.1:3000"]
    env_origins = _env_list("CORS_ORIGINS", [])
    if env_origins:
        merged = env_origins + base_dev
    else:
        merged = ["*"] + base_dev

    seen = set()
    deduped = []
    for origin in merged:
        if origin in seen:
            continue
        seen.add(origin)
        deduped.append(origin)
    return deduped


@dataclass
class Settings:
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Team Picker API"))
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///team_picker_dev.db"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", False))
    cors_origins: List[str] = field(default_factory=_cors_origins)
    seed_default_rosters: bool = field(default_factory=lambda: _env_bool("SEED_DEFAULT_ROSTERS", True))
    generation_delay_seconds: float = field(default_factory=lambda: _env_float("GENERATION_DELAY_SECONDS", 0.0))
    default_group_size: int = field(default_factory=lambda: max(2, _env_int("DEFAULT_GROUP_SIZE", 2)))
    pool_split: str = field(default_factory=lambda: _env_split("POOL_SPLIT"))
    reserve_split: str = field(default_factory=lambda: _env_split("RESERVE_SPLIT"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance sourced from environment variables."""
    return Settings()
