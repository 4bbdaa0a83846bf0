"""Slack reporter for match results.

Builds the attachments that show how each player's rating moved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Attachment, AttachmentColor, MatchResult, RosterEntry, SlackMessage

if TYPE_CHECKING:
    from ..config import Config


def format_rating(value: float) -> str:
    """Render a rating with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_change(old_rating: float, new_rating: float) -> str:
    """Render the signed change, e.g. ``+16`` or ``-7.5``.

    A nonzero change too small for two decimals renders as ``<0.01`` so it
    still agrees with the attachment colour.
    """
    sign = "+" if new_rating >= old_rating else "-"
    amount = format_rating(abs(new_rating - old_rating))
    if amount == "0" and new_rating != old_rating:
        amount = "<0.01"
    return f"{sign}{amount}"


def render_match_update_text(name: str, old_rating: float, new_rating: float) -> str:
    """Render one player's line, e.g. ``alice: 1000 → 1016 (+16)``."""
    change = format_change(old_rating, new_rating)
    return f"{name}: {format_rating(old_rating)} → {format_rating(new_rating)} ({change})"


def render_vs_label(match: MatchResult) -> str:
    """Both rosters' names around the word ``vs``."""
    winners = " ".join(entry.player.name for entry in match.winners)
    losers = " ".join(entry.player.name for entry in match.losers)
    return f"{winners} vs {losers}"


def render_attachment(entry: RosterEntry, pretext: str | None = None) -> Attachment:
    return Attachment(
        color=AttachmentColor.from_ratings(entry.old_rating, entry.new_rating),
        text=render_match_update_text(entry.player.name, entry.old_rating, entry.new_rating),
        pretext=pretext,
    )


def render_match_update(match: MatchResult) -> list[Attachment]:
    """Build one attachment per player, winners first.

    Only the first attachment carries the match summary as pretext.

    Args:
        match: A match whose ratings have been updated.

    Returns:
        The attachments in ``winners ++ losers`` order.
    """
    pretext = f"Rating changes after {render_vs_label(match)} match:"
    return [
        render_attachment(entry, pretext=pretext if index == 0 else None)
        for index, entry in enumerate(match.players)
    ]


def build_message(match: MatchResult, config: Config) -> SlackMessage:
    """Wrap the match attachments in a message for the configured channel.

    Example:
        ```python
        message = build_message(updated, Config(slack_channel="#foosball"))
        await notifier.send(message)
        ```
    """
    return SlackMessage(
        username=config.bot_username,
        icon_emoji=config.icon_emoji,
        channel=config.slack_channel,
        attachments=render_match_update(match),
    )
