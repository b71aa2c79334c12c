"""Load roster rows from CSV or JSON files."""

import csv
import json
from pathlib import Path

from .models import RosterRow


def load_roster(path: Path) -> list[RosterRow]:
    """
    Read roster rows from a .csv or .json file.

    JSON files hold a list of objects. Each row needs at least name and
    player_url.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        with path.open(newline="", encoding="utf-8") as f:
            raw = list(csv.DictReader(f))
    elif suffix == ".json":
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"{path}: expected a JSON list of roster rows")
    else:
        raise ValueError(f"{path}: unsupported roster format {suffix!r}")

    return [RosterRow(**row) for row in raw]
