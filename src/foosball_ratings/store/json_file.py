"""JSON file rating store.

Ratings live in a single JSON object keyed by player id::

    {"U1": {"name": "alice", "rating": 1016.0}}

Writes go to a sibling temp file that is then moved over the original, so
the file on disk is always a complete document.
"""

from __future__ import annotations

import asyncio
import json
import logging
import math
import os
import tempfile
from pathlib import Path
from typing import Any

from ..exceptions import PersistenceError
from ..models import MatchResult
from .base import DEFAULT_RATING, BaseRatingStore

logger = logging.getLogger(__name__)


class JsonFileRatingStore(BaseRatingStore):
    """Rating store persisted to a JSON file.

    A missing file is treated as an empty store and created on first save.
    """

    def __init__(self, path: str | Path, initial_rating: float = DEFAULT_RATING):
        """Initialize the store.

        Args:
            path: Location of the ratings file.
            initial_rating: Rating reported for unknown players.
        """
        super().__init__(initial_rating)
        self.path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return "json"

    async def load(self, player_ids: list[str]) -> dict[str, float]:
        data = await asyncio.to_thread(self._read)
        ratings = {}
        for pid in player_ids:
            record = data.get(pid)
            ratings[pid] = float(record["rating"]) if record else self.initial_rating
        return ratings

    async def save(self, match: MatchResult) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            for entry in match.players:
                data[entry.player.id] = {
                    "name": entry.player.name,
                    "rating": entry.new_rating,
                }
            await asyncio.to_thread(self._write, data)
        logger.debug(f"Saved {len(match.players)} ratings to {self.path}")

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not read ratings: {e}", path=str(self.path)) from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Invalid ratings file: {e}", path=str(self.path)) from e

        if not isinstance(data, dict):
            raise PersistenceError(
                f"Invalid ratings file: expected object, got {type(data).__name__}",
                path=str(self.path),
            )
        for pid, record in data.items():
            if not _is_valid_record(record):
                raise PersistenceError(
                    f"Invalid record for player '{pid}'", path=str(self.path)
                )
        return data

    def _write(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, sort_keys=True)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(f"Could not write ratings: {e}", path=str(self.path)) from e


def _is_valid_record(record: Any) -> bool:
    """A record is an object with a finite numeric ``rating``."""
    if not isinstance(record, dict) or "rating" not in record:
        return False
    rating = record["rating"]
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        return False
    return math.isfinite(rating)
