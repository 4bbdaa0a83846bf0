"""Command parsing module.

Provides the parser for match-result commands:
- Mention tokens (``<@ID|name>``)
- 1v1 and 2v2 ``winners vs losers`` lines

Example:
    ```python
    from foosball_ratings.parser import parse

    match = parse("<@U1|alice> <@U2|bob> vs <@U3|chloe> <@U4|dave>")
    [e.player.name for e in match.winners]  # ["alice", "bob"]
    ```
"""

from foosball_ratings.parser.command import CommandParser, parse
from foosball_ratings.parser.mention import is_mention, parse_mention

__all__ = [
    "CommandParser",
    "parse",
    "parse_mention",
    "is_mention",
]
