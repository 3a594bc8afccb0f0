"""Saving and loading universes as JSON files."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Iterator, Optional, Union

import platformdirs

from cosmosgraph.universe import Universe

_APP_DIR = "cosmos"


def _read_universe(path: Path) -> Optional[Universe]:
    try:
        return Universe.from_dict(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, KeyError, TypeError, AttributeError):
        return None


class Storage:
    """A directory holding one ``<id>.json`` file per universe."""

    def __init__(self, data_dir: Union[str, Path, None] = None) -> None:
        if data_dir is None:
            data_dir = platformdirs.user_data_dir(_APP_DIR, appauthor=False)
        self.data_dir = Path(data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print(f"Failed to create data directory: {exc}", file=sys.stderr)

    def _path(self, universe_id: str) -> Path:
        return self.data_dir / f"{universe_id}.json"

    def save_universe(self, universe: Universe, universe_id: str) -> None:
        """Write the universe as pretty-printed JSON under the given id."""
        text = json.dumps(universe.to_dict(), indent=2, ensure_ascii=False)
        self._path(universe_id).write_text(text, encoding="utf-8")

    def load_universe(self, universe_id: str) -> Optional[Universe]:
        """The stored universe, or None if it is missing or unreadable."""
        return _read_universe(self._path(universe_id))

    def universes(self) -> Iterator[Universe]:
        """Every readable universe in the directory."""
        for path in sorted(self.data_dir.glob("*.json")):
            universe = _read_universe(path)
            if universe is not None:
                yield universe

    def delete_universe(self, universe_id: str) -> bool:
        """Remove a stored universe; False if there was nothing to remove."""
        try:
            self._path(universe_id).unlink()
        except OSError:
            return False
        return True