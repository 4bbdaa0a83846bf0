"""Custom exceptions for foosball-ratings.

Every failure the match handler can report maps to one of these classes.
Messages are meant to be shown to the person who typed the command, so they
say what went wrong and what is accepted instead.
"""

from __future__ import annotations

ACCEPTED_FORMATS = (
    "<@ID|name> vs <@ID|name>",
    "<@ID|name> <@ID|name> vs <@ID|name> <@ID|name>",
)


class FoosballRatingsError(Exception):
    """Base exception for all foosball-ratings errors."""

    pass


class FormatError(FoosballRatingsError):
    """Command text is absent or does not match a supported match shape.

    Raised before any player is parsed, so no rating is touched.
    """

    def __init__(self, reason: str, text: str | None = None):
        self.reason = reason
        self.text = text

        full_message = f"Could not read match result: {reason}."
        if text:
            full_message += f"\nReceived: {text!r}"
        full_message += "\nAccepted formats:\n" + "\n".join(
            f"  {fmt}" for fmt in ACCEPTED_FORMATS
        )
        super().__init__(full_message)


class ParseError(FoosballRatingsError):
    """A mention token is present but malformed.

    Raised when a token lacks the ``<@ID|NAME>`` structure or captures an
    empty id or name.
    """

    def __init__(self, message: str, token: str | None = None):
        self.token = token
        full_message = f"Players could not be parsed: {message}"
        if token is not None:
            full_message += f"\nToken: {token!r}"
        super().__init__(full_message)


class DeliveryError(FoosballRatingsError):
    """The notification channel failed to accept a message."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        full_message = f"Notification delivery failed: {message}"
        if status_code is not None:
            full_message += f" (HTTP {status_code})"
        super().__init__(full_message)


class PersistenceError(FoosballRatingsError):
    """Ratings could not be loaded from or saved to the store."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        full_message = f"Rating store error: {message}"
        if path:
            full_message += f"\nPath: {path}"
        super().__init__(full_message)


class ConfigError(FoosballRatingsError):
    """Error in configuration.

    Raised when configuration is invalid or missing required fields.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        full_message = message
        if field:
            full_message = f"Configuration error in '{field}': {message}"
        super().__init__(full_message)
