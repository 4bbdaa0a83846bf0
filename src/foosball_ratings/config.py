"""Configuration for foosball-ratings.

This module provides the Config class that is built once at process startup
and handed to the notifier and rating store when they are constructed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigError

VALID_NOTIFIERS = {"slack", "mock"}
VALID_STORES = {"json", "memory"}


class Config(BaseModel):
    """Configuration for the match handler.

    Attributes:
        slack_webhook: Slack incoming webhook URL (defaults to SLACK_WEBHOOK env var).
        slack_channel: Channel the results are posted to (defaults to SLACK_CHANNEL env var).
        bot_username: Name the bot posts as.
        icon_emoji: Emoji used as the bot avatar.
        k_factor: K-factor for rating updates.
        initial_rating: Rating given to players the store has never seen.
        notifier: Notification channel ("slack" or "mock").
        store: Rating store backend ("json" or "memory").
        ratings_path: File used by the JSON rating store.
        timeout_seconds: Timeout for webhook requests.
    """

    # Slack delivery
    slack_webhook: str | None = None
    slack_channel: str | None = None
    bot_username: str = "csocso-sans-bot"
    icon_emoji: str = ":soccer:"

    # Rating
    k_factor: int = Field(default=32, ge=1, le=100)
    initial_rating: float = Field(default=1000.0, ge=0.0)

    # Collaborators
    notifier: str = "slack"
    store: str = "json"
    ratings_path: str = "ratings.json"
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=300.0)

    @field_validator("notifier")
    @classmethod
    def validate_notifier(cls, v: str) -> str:
        """Validate the notifier name is supported."""
        if v not in VALID_NOTIFIERS:
            raise ValueError(
                f"Invalid notifier '{v}'. Must be one of: {', '.join(sorted(VALID_NOTIFIERS))}"
            )
        return v

    @field_validator("store")
    @classmethod
    def validate_store(cls, v: str) -> str:
        """Validate the store name is supported."""
        if v not in VALID_STORES:
            raise ValueError(
                f"Invalid store '{v}'. Must be one of: {', '.join(sorted(VALID_STORES))}"
            )
        return v

    def model_post_init(self, __context: Any) -> None:
        """Load Slack settings from environment if not provided."""
        if self.slack_webhook is None:
            self.slack_webhook = os.environ.get("SLACK_WEBHOOK")
        if self.slack_channel is None:
            self.slack_channel = os.environ.get("SLACK_CHANNEL")

    def validate_for_startup(self) -> None:
        """Check the settings the selected collaborators need.

        Raises:
            ConfigError: If the Slack notifier is selected without a webhook
                URL or channel.
        """
        if self.notifier != "slack":
            return
        if not self.slack_webhook:
            raise ConfigError(
                "missing env variables. Set SLACK_WEBHOOK or pass slack_webhook to Config.",
                field="slack_webhook",
            )
        if not self.slack_channel:
            raise ConfigError(
                "missing env variables. Set SLACK_CHANNEL or pass slack_channel to Config.",
                field="slack_channel",
            )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Config instance.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            ValueError: If the YAML is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file: expected dict, got {type(data).__name__}")

        return cls(**data)
