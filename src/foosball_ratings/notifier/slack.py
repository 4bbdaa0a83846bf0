"""Slack incoming-webhook notifier.

Posts the match message as JSON to the configured webhook URL.
"""

from __future__ import annotations

import logging

import httpx

from ..exceptions import DeliveryError
from ..models import SlackMessage
from .base import BaseNotifier

logger = logging.getLogger(__name__)


class SlackWebhookNotifier(BaseNotifier):
    """Notifier using a Slack incoming webhook.

    Example:
        ```python
        async with SlackWebhookNotifier("https://hooks.slack.com/services/...") as notifier:
            await notifier.send(message)
        ```
    """

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the Slack notifier.

        Args:
            webhook_url: The incoming webhook URL.
            timeout: Request timeout in seconds.
            client: Optional pre-built HTTP client. A client passed in is
                not closed by close().
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def name(self) -> str:
        """Return the notifier's name."""
        return "slack"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def send(self, message: SlackMessage) -> None:
        """Post the message to the webhook.

        Raises:
            DeliveryError: On a transport failure or a non-2xx response.
        """
        client = self._get_client()
        try:
            response = await client.post(self.webhook_url, json=message.to_payload())
        except httpx.HTTPError as e:
            logger.error(f"Slack webhook request failed: {e}")
            raise DeliveryError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"Slack webhook rejected message: {response.status_code} {response.text}")
            raise DeliveryError(
                response.text or "webhook rejected the message",
                status_code=response.status_code,
            )

        logger.info(f"Delivered {len(message.attachments)} attachments to {message.channel}")

    async def close(self) -> None:
        """Close the HTTP client if this notifier created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
