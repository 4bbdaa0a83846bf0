"""Parser for Slack mention tokens.

Slack rewrites ``@alice`` in slash-command text into ``<@U024BE7LH|alice>``.
This module turns one such token into a PlayerRef.
"""

from __future__ import annotations

import re

from foosball_ratings.exceptions import ParseError
from foosball_ratings.models import PlayerRef

MENTION_PATTERN = re.compile(r"^<@([^|>]*)\|([^|>]*)>$")


def parse_mention(token: str) -> PlayerRef:
    """Parse a ``<@ID|NAME>`` token into a PlayerRef.

    Args:
        token: A single whitespace-free token from the command text.

    Returns:
        The referenced player.

    Raises:
        ParseError: If the token is not a mention or its id or name is empty.
    """
    match = MENTION_PATTERN.match(token)
    if not match:
        raise ParseError("token is not a <@ID|name> mention", token=token)

    player_id, name = match.groups()
    if not player_id:
        raise ParseError("mention has an empty id", token=token)
    if not name:
        raise ParseError("mention has an empty name", token=token)

    return PlayerRef(id=player_id, name=name)


def is_mention(token: str) -> bool:
    """Check if a token is a well-formed mention."""
    try:
        parse_mention(token)
    except ParseError:
        return False
    return True
