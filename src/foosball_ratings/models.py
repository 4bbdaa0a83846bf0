"""Core data models for foosball-ratings.

This module defines the data structures that flow through one command:
- PlayerRef: A player referenced by a Slack mention
- RosterEntry / MatchResult: The two rosters with their ratings
- Attachment / SlackMessage: The render model sent to Slack
- SlashCommand / CommandResult: The handler's input and output
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

SUPPORTED_TEAM_SIZES = (1, 2)


class PlayerRef(BaseModel):
    """A player extracted from a ``<@ID|NAME>`` mention token.

    Attributes:
        id: Stable external identifier (the Slack user id).
        name: Display label.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class RosterEntry(BaseModel):
    """A player on one side of a match with their rating before and after.

    ``new_rating`` defaults to ``old_rating`` until the rating engine runs.

    Attributes:
        player: The player this entry belongs to.
        old_rating: Rating loaded from the store.
        new_rating: Rating after the match.
    """

    player: PlayerRef
    old_rating: float = 0
    new_rating: float = 0

    @model_validator(mode="before")
    @classmethod
    def default_new_rating(cls, data: Any) -> Any:
        if isinstance(data, dict) and "new_rating" not in data and "old_rating" in data:
            data = {**data, "new_rating": data["old_rating"]}
        return data

    @property
    def delta(self) -> float:
        """Rating change caused by the match."""
        return self.new_rating - self.old_rating


class MatchResult(BaseModel):
    """The outcome of a single 1v1 or 2v2 match.

    Attributes:
        winners: Roster of the winning side.
        losers: Roster of the losing side.
    """

    winners: list[RosterEntry]
    losers: list[RosterEntry]

    @model_validator(mode="after")
    def check_rosters(self) -> MatchResult:
        if not self.winners or not self.losers:
            raise ValueError("both rosters must be non-empty")
        if len(self.winners) != len(self.losers):
            raise ValueError(
                f"rosters must be the same size, got {len(self.winners)} vs {len(self.losers)}"
            )
        if len(self.winners) not in SUPPORTED_TEAM_SIZES:
            raise ValueError(f"unsupported team size: {len(self.winners)}")
        ids = self.player_ids
        if len(set(ids)) != len(ids):
            raise ValueError("a player cannot appear more than once in a match")
        return self

    @property
    def players(self) -> list[RosterEntry]:
        """All entries, winners first."""
        return [*self.winners, *self.losers]

    @property
    def player_ids(self) -> list[str]:
        return [entry.player.id for entry in self.players]

    def with_ratings(self, ratings: dict[str, float]) -> MatchResult:
        """Return a copy with every entry's ratings hydrated from ``ratings``.

        Args:
            ratings: Mapping of player id to current rating.

        Raises:
            KeyError: If a player's rating is missing from the mapping.
        """

        def hydrate(roster: list[RosterEntry]) -> list[RosterEntry]:
            return [
                RosterEntry(
                    player=entry.player,
                    old_rating=ratings[entry.player.id],
                )
                for entry in roster
            ]

        return MatchResult(winners=hydrate(self.winners), losers=hydrate(self.losers))


class AttachmentColor(str, Enum):
    """Attachment colours, keyed by how the rating moved."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"

    @property
    def hex(self) -> str:
        """Slack colour code for the attachment bar."""
        return {
            AttachmentColor.GREEN: "#36a64f",
            AttachmentColor.YELLOW: "#ffef60",
            AttachmentColor.RED: "#ff6060",
        }[self]

    @classmethod
    def from_ratings(cls, old_rating: float, new_rating: float) -> AttachmentColor:
        """Classify a rating change."""
        if new_rating > old_rating:
            return cls.GREEN
        elif new_rating == old_rating:
            return cls.YELLOW
        else:
            return cls.RED


class Attachment(BaseModel):
    """One render-ready unit of the notification, one per player.

    Attributes:
        color: How the player's rating moved.
        text: The ``name: old → new (±delta)`` line.
        pretext: Match summary, set on the first attachment only.
    """

    color: AttachmentColor
    text: str
    pretext: str | None = None

    def to_slack(self) -> dict[str, str]:
        """Serialize to the Slack attachment payload."""
        payload = {"color": self.color.hex, "text": self.text}
        if self.pretext is not None:
            payload["pretext"] = self.pretext
        return payload


class SlackMessage(BaseModel):
    """A message for the Slack incoming webhook.

    Attributes:
        username: Bot name shown in the channel.
        icon_emoji: Bot avatar emoji.
        channel: Target channel.
        attachments: One attachment per player.
    """

    username: str
    icon_emoji: str
    channel: str | None = None
    attachments: list[Attachment] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for the webhook POST."""
        payload: dict[str, Any] = {
            "username": self.username,
            "icon_emoji": self.icon_emoji,
            "attachments": [a.to_slack() for a in self.attachments],
        }
        if self.channel:
            payload["channel"] = self.channel
        return payload


class SlashCommand(BaseModel):
    """Form fields Slack posts for a slash command.

    Only ``text`` is used by the handler; the rest is kept for logging.
    """

    token: str | None = None
    team_id: str | None = None
    team_domain: str | None = None
    channel_id: str | None = None
    channel_name: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    command: str | None = None
    text: str | None = None
    response_url: str | None = None


class CommandStatus(str, Enum):
    """Outcome of handling one command."""

    ACCEPTED = "accepted"
    REJECTED_FORMAT = "rejected_format"
    REJECTED_INTERNAL = "rejected_internal"


class CommandResult(BaseModel):
    """The result returned at the command boundary.

    Attributes:
        status: Accepted or the kind of rejection.
        reason: Human-readable rejection reason (None when accepted).
        match: The updated match when accepted.
    """

    status: CommandStatus
    reason: str | None = None
    match: MatchResult | None = None

    @classmethod
    def accepted(cls, match: MatchResult) -> CommandResult:
        return cls(status=CommandStatus.ACCEPTED, match=match)

    @classmethod
    def rejected_format(cls, reason: str) -> CommandResult:
        return cls(status=CommandStatus.REJECTED_FORMAT, reason=reason)

    @classmethod
    def rejected_internal(cls, reason: str) -> CommandResult:
        return cls(status=CommandStatus.REJECTED_INTERNAL, reason=reason)

    @property
    def is_accepted(self) -> bool:
        return self.status == CommandStatus.ACCEPTED

    @property
    def status_code(self) -> int:
        """HTTP-style status: 200 when accepted, 400 for any rejection."""
        return 200 if self.is_accepted else 400
