"""Reporter module.

Provides the render model for match results:
- render_match_update: Slack attachments, one per player
- build_message: The full webhook message
"""

from .slack import (
    build_message,
    format_rating,
    render_match_update,
    render_match_update_text,
)

__all__ = [
    "build_message",
    "format_rating",
    "render_match_update",
    "render_match_update_text",
]
