"""In-memory rating store."""

from __future__ import annotations

from ..exceptions import PersistenceError
from ..models import MatchResult
from .base import DEFAULT_RATING, BaseRatingStore


class InMemoryRatingStore(BaseRatingStore):
    """Rating store backed by a dict.

    Example:
        ```python
        store = InMemoryRatingStore({"U1": 1200.0})
        await store.load(["U1", "U2"])  # {"U1": 1200.0, "U2": 1000.0}
        ```
    """

    def __init__(
        self,
        ratings: dict[str, float] | None = None,
        initial_rating: float = DEFAULT_RATING,
        fail_on_save: bool = False,
    ):
        """Initialize the store.

        Args:
            ratings: Starting ratings keyed by player id.
            initial_rating: Rating reported for unknown players.
            fail_on_save: If True, save() raises PersistenceError. Used to
                exercise failure paths.
        """
        super().__init__(initial_rating)
        self.ratings: dict[str, float] = dict(ratings or {})
        self.names: dict[str, str] = {}
        self.fail_on_save = fail_on_save
        self.load_calls = 0
        self.save_calls = 0

    @property
    def name(self) -> str:
        return "memory"

    async def load(self, player_ids: list[str]) -> dict[str, float]:
        self.load_calls += 1
        return {pid: self.ratings.get(pid, self.initial_rating) for pid in player_ids}

    async def save(self, match: MatchResult) -> None:
        self.save_calls += 1
        if self.fail_on_save:
            raise PersistenceError("in-memory store configured to fail")
        for entry in match.players:
            self.ratings[entry.player.id] = entry.new_rating
            self.names[entry.player.id] = entry.player.name
