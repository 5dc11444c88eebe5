import os
import sys
from pathlib import Path

# Ensure the backend package is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT, ROOT / "team_picker" / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Keep the startup hook away from the on-disk dev database.
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Register models for metadata creation in tests.
from app import models  # noqa: E402,F401
