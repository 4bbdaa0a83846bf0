"""Scoring module for foosball-ratings.

Components:
    - update_ratings: Applies one match to both rosters
    - win_expectancy / rating_delta: The underlying rating law
    - ELO: Class facade over the functions above

Example:
    ```python
    from foosball_ratings.scorer import update_ratings

    updated = update_ratings(match.winners, match.losers)
    ```
"""

from .elo import (
    ELO,
    K_FACTOR,
    rating_delta,
    team_strength,
    update_ratings,
    win_expectancy,
)

__all__ = [
    "ELO",
    "K_FACTOR",
    "rating_delta",
    "team_strength",
    "update_ratings",
    "win_expectancy",
]
