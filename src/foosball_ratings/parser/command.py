"""Command parser for match results.

Turns slash-command text such as ``<@U1|alice> <@U2|bob> vs <@U3|chloe> <@U4|dave>``
into a MatchResult with the winners first and the losers second.
"""

from __future__ import annotations

import re

from foosball_ratings.exceptions import FormatError
from foosball_ratings.models import MatchResult, RosterEntry
from foosball_ratings.parser.mention import parse_mention

VS_DELIMITER = " vs "

# Any whitespace-free <...> token fills a slot; parse_mention checks the inside.
_SLOT = r"<[^\s<>]+>"

SINGLES_PATTERN = re.compile(rf"^{_SLOT} vs {_SLOT}$")
DOUBLES_PATTERN = re.compile(rf"^{_SLOT} {_SLOT} vs {_SLOT} {_SLOT}$")


class CommandParser:
    """Parser for ``winners vs losers`` match commands.

    Supported shapes are 1v1 and 2v2. Every roster entry starts with a
    rating of 0; the rating store fills in real values afterwards.

    Example:
        ```python
        match = CommandParser.parse("<@U1|alice> vs <@U2|bob>")
        match.winners[0].player.name  # "alice"
        ```
    """

    patterns: list[re.Pattern[str]] = [SINGLES_PATTERN, DOUBLES_PATTERN]

    @classmethod
    def parse(cls, text: str | None) -> MatchResult:
        """Parse command text into a MatchResult.

        Args:
            text: The slash-command text.

        Returns:
            The parsed match with zeroed ratings.

        Raises:
            FormatError: If the text is empty or not a 1v1/2v2 shape, or
                names a player twice.
            ParseError: If a mention token is malformed.
        """
        if not text or not text.strip():
            raise FormatError("no text")

        text = text.strip()
        if not cls.matches_shape(text):
            raise FormatError("invalid format", text=text)

        raw_winners, raw_losers = text.split(VS_DELIMITER)
        winners = cls._parse_group(raw_winners)
        losers = cls._parse_group(raw_losers)

        ids = [entry.player.id for entry in winners + losers]
        if len(set(ids)) != len(ids):
            raise FormatError("duplicate player", text=text)

        return MatchResult(winners=winners, losers=losers)

    @classmethod
    def matches_shape(cls, text: str) -> bool:
        """Check if text has the 1v1 or 2v2 layout."""
        return any(pattern.match(text) for pattern in cls.patterns)

    @classmethod
    def _parse_group(cls, group: str) -> list[RosterEntry]:
        return [
            RosterEntry(player=parse_mention(token), old_rating=0, new_rating=0)
            for token in group.split(" ")
        ]


def parse(text: str | None) -> MatchResult:
    """Parse a match command.

    This is a convenience function that delegates to CommandParser.parse().
    """
    return CommandParser.parse(text)
