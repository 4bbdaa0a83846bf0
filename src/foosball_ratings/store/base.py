"""Base rating store interface.

A rating store hydrates rosters before the rating engine runs and persists
the new ratings afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import MatchResult

DEFAULT_RATING = 1000.0


class BaseRatingStore(ABC):
    """Abstract base class for rating persistence.

    Supported stores:
    - InMemoryRatingStore: Dict-backed, for tests and local runs
    - JsonFileRatingStore: A JSON file on disk
    """

    def __init__(self, initial_rating: float = DEFAULT_RATING):
        """Initialize the store.

        Args:
            initial_rating: Rating reported for players never saved before.
        """
        self.initial_rating = initial_rating

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the store's name identifier."""
        ...

    @abstractmethod
    async def load(self, player_ids: list[str]) -> dict[str, float]:
        """Load current ratings.

        Args:
            player_ids: Players to look up.

        Returns:
            Mapping of every requested id to its rating; unknown players get
            ``initial_rating``.

        Raises:
            PersistenceError: If the ratings cannot be read.
        """
        ...

    @abstractmethod
    async def save(self, match: MatchResult) -> None:
        """Persist every player's ``new_rating``.

        The ratings are durably stored when this returns.

        Raises:
            PersistenceError: If the ratings cannot be written.
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the store."""
        pass

    async def __aenter__(self) -> BaseRatingStore:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - cleanup resources."""
        await self.close()
