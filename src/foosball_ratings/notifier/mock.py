"""Mock notifier implementation for testing.

Keeps every message in memory instead of posting it anywhere.
"""

from __future__ import annotations

from ..exceptions import DeliveryError
from ..models import SlackMessage
from .base import BaseNotifier


class MockNotifier(BaseNotifier):
    """Notifier that records messages.

    Example:
        ```python
        notifier = MockNotifier()
        await notifier.send(message)
        notifier.sent  # [message]

        failing = MockNotifier(fail=True)  # send() raises DeliveryError
        ```
    """

    def __init__(self, fail: bool = False, error_message: str = "mock delivery failure"):
        """Initialize the mock notifier.

        Args:
            fail: If True, every send() raises DeliveryError.
            error_message: Message of the raised DeliveryError.
        """
        self.fail = fail
        self.error_message = error_message
        self.sent: list[SlackMessage] = []
        self.closed = False

    @property
    def name(self) -> str:
        """Return the notifier's name."""
        return "mock"

    async def send(self, message: SlackMessage) -> None:
        if self.fail:
            raise DeliveryError(self.error_message)
        self.sent.append(message)

    async def close(self) -> None:
        self.closed = True
