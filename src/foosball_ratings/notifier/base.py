"""Base notifier interface for delivering match results.

Notifiers take a rendered SlackMessage and hand it to a chat channel.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import SlackMessage


class BaseNotifier(ABC):
    """Abstract base class for notification channels.

    Supported notifiers:
    - SlackWebhookNotifier: Posts to a Slack incoming webhook
    - MockNotifier: Records messages for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the notifier's name identifier."""
        ...

    @abstractmethod
    async def send(self, message: SlackMessage) -> None:
        """Deliver a message.

        Args:
            message: The rendered match message.

        Raises:
            DeliveryError: If the channel did not accept the message.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release any connections held by the notifier."""
        ...

    async def __aenter__(self) -> BaseNotifier:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - cleanup resources."""
        await self.close()
