"""foosball-ratings - Team ratings for office foosball, posted to Slack.

Report a match with a slash command and every player's rating moves.

Example:
    ```python
    from foosball_ratings import Config, MatchHandler

    handler = MatchHandler.from_config(Config())
    result = await handler.handle_text("<@U1|alice> <@U2|bob> vs <@U3|chloe> <@U4|dave>")
    print(result.status_code)
    ```
"""

from .config import Config
from .exceptions import (
    ConfigError,
    DeliveryError,
    FoosballRatingsError,
    FormatError,
    ParseError,
    PersistenceError,
)
from .handler import MatchHandler
from .models import (
    Attachment,
    AttachmentColor,
    CommandResult,
    CommandStatus,
    MatchResult,
    PlayerRef,
    RosterEntry,
    SlackMessage,
    SlashCommand,
)
from .notifier import BaseNotifier, MockNotifier, SlackWebhookNotifier
from .parser import CommandParser, parse
from .reporter import build_message, render_match_update
from .scorer import ELO, rating_delta, update_ratings, win_expectancy
from .store import BaseRatingStore, InMemoryRatingStore, JsonFileRatingStore

__version__ = "0.1.0"

__all__ = [
    # Main entry point
    "MatchHandler",
    # Configuration
    "Config",
    # Models
    "PlayerRef",
    "RosterEntry",
    "MatchResult",
    "Attachment",
    "AttachmentColor",
    "SlackMessage",
    "SlashCommand",
    "CommandResult",
    "CommandStatus",
    # Parser
    "CommandParser",
    "parse",
    # Scorer
    "ELO",
    "update_ratings",
    "win_expectancy",
    "rating_delta",
    # Reporter
    "render_match_update",
    "build_message",
    # Notifiers
    "BaseNotifier",
    "SlackWebhookNotifier",
    "MockNotifier",
    # Stores
    "BaseRatingStore",
    "InMemoryRatingStore",
    "JsonFileRatingStore",
    # Exceptions
    "FoosballRatingsError",
    "FormatError",
    "ParseError",
    "DeliveryError",
    "PersistenceError",
    "ConfigError",
]
