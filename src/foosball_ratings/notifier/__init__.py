"""Notification module.

Provides the channels match results are delivered through:
- SlackWebhookNotifier: Slack incoming webhook over HTTP
- MockNotifier: In-memory recorder for testing

Example:
    ```python
    from foosball_ratings.notifier import get_notifier

    notifier = get_notifier("slack", webhook_url="https://hooks.slack.com/services/...")
    await notifier.send(message)
    ```
"""

from .base import BaseNotifier
from .mock import MockNotifier
from .slack import SlackWebhookNotifier


def get_notifier(name: str, **kwargs) -> BaseNotifier:
    """Factory function to get a notifier by name.

    Args:
        name: Notifier name. One of:
            - "slack": Slack incoming webhook
            - "mock": In-memory recorder
        **kwargs: Additional arguments passed to the notifier constructor.

    Raises:
        ValueError: If the notifier name is not recognized.
    """
    notifiers = {
        "slack": SlackWebhookNotifier,
        "mock": MockNotifier,
    }

    if name not in notifiers:
        valid = list(notifiers.keys())
        raise ValueError(f"Unknown notifier '{name}'. Valid notifiers: {valid}")

    return notifiers[name](**kwargs)


__all__ = [
    "BaseNotifier",
    "MockNotifier",
    "SlackWebhookNotifier",
    "get_notifier",
]
