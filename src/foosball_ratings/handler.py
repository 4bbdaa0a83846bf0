"""Match handler for foosball-ratings.

This module provides the command boundary: it takes slash-command text,
runs it through parsing, rating and rendering, talks to the rating store and
the notifier, and reports a single CommandResult.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import Config
from .exceptions import FormatError, ParseError
from .models import CommandResult, MatchResult, SlashCommand
from .notifier import get_notifier
from .parser import parse
from .reporter import build_message
from .scorer import update_ratings
from .store import get_store

if TYPE_CHECKING:
    from .notifier import BaseNotifier
    from .store import BaseRatingStore

logger = logging.getLogger(__name__)


class MatchHandler:
    """Turns a match command into new ratings and a Slack notification.

    Each call is independent: parse, load ratings, update, save, notify.
    Ratings are saved before the notification is sent, and a command is
    only accepted after both succeeded.

    Example:
        ```python
        handler = MatchHandler.from_config(Config())
        result = await handler.handle_text("<@U1|alice> vs <@U2|bob>")
        result.status_code  # 200
        ```
    """

    def __init__(
        self,
        config: Config | None = None,
        notifier: BaseNotifier | None = None,
        store: BaseRatingStore | None = None,
    ):
        """Initialize the handler.

        Args:
            config: Optional configuration. Uses defaults if not provided.
            notifier: Notification channel. Built from config if not provided.
            store: Rating store. Built from config if not provided.
        """
        self.config = config or Config()
        self.notifier = notifier or self._build_notifier(self.config)
        self.store = store or self._build_store(self.config)

    @classmethod
    def from_config(cls, config: Config) -> MatchHandler:
        """Create a handler after validating the startup settings.

        Raises:
            ConfigError: If the selected collaborators are missing settings.
        """
        config.validate_for_startup()
        return cls(config=config)

    @staticmethod
    def _build_notifier(config: Config) -> BaseNotifier:
        if config.notifier == "slack":
            config.validate_for_startup()
            return get_notifier(
                "slack",
                webhook_url=config.slack_webhook,
                timeout=config.timeout_seconds,
            )
        return get_notifier(config.notifier)

    @staticmethod
    def _build_store(config: Config) -> BaseRatingStore:
        if config.store == "json":
            return get_store(
                "json",
                path=config.ratings_path,
                initial_rating=config.initial_rating,
            )
        return get_store(config.store, initial_rating=config.initial_rating)

    async def handle_command(self, command: SlashCommand) -> CommandResult:
        """Handle a Slack slash-command payload."""
        logger.debug(
            f"Command {command.command} from {command.user_name} in {command.channel_name}"
        )
        return await self.handle_text(command.text)

    async def handle_text(self, text: str | None) -> CommandResult:
        """Handle raw command text.

        Args:
            text: The ``winners vs losers`` command text.

        Returns:
            Accepted with the updated match, RejectedFormat for bad input,
            or RejectedInternal when the store or notifier failed. When the
            notifier fails after a successful save, the new ratings stay
            saved.
        """
        try:
            match = parse(text)
        except FormatError as e:
            logger.warning(f"Rejected command {text!r}: {e.reason}")
            return CommandResult.rejected_format(str(e))
        except ParseError as e:
            logger.warning(f"Rejected command {text!r}: unparseable token {e.token!r}")
            return CommandResult.rejected_format(str(e))

        try:
            updated = await self.record_match(match)
        except Exception as e:
            logger.error(f"Failed to record match {text!r}: {e}")
            return CommandResult.rejected_internal(f"{type(e).__name__}: {e}")

        return CommandResult.accepted(updated)

    async def record_match(self, match: MatchResult) -> MatchResult:
        """Rate a parsed match, persist it and announce it.

        Raises:
            PersistenceError: If ratings could not be loaded or saved.
            DeliveryError: If the notification was not delivered.
        """
        ratings = await self.store.load(match.player_ids)
        hydrated = match.with_ratings(ratings)
        updated = update_ratings(hydrated.winners, hydrated.losers, k=self.config.k_factor)

        await self.store.save(updated)
        await self.notifier.send(build_message(updated, self.config))

        logger.info(
            f"Recorded match: {', '.join(e.player.name for e in updated.winners)} beat "
            f"{', '.join(e.player.name for e in updated.losers)} "
            f"(delta {updated.winners[0].delta:+.2f})"
        )
        return updated

    async def close(self) -> None:
        """Clean up the notifier and store."""
        await self.notifier.close()
        await self.store.close()

    async def __aenter__(self) -> MatchHandler:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
