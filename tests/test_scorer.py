"""Tests for the scorer module."""

import logging

import pytest

from foosball_ratings import ELO, MatchResult, PlayerRef, RosterEntry
from foosball_ratings.scorer import (
    K_FACTOR,
    rating_delta,
    team_strength,
    update_ratings,
    win_expectancy,
)


# ============================================================================
# Test Fixtures
# ============================================================================


def entry(player_id: str, rating: float) -> RosterEntry:
    """Helper to create a hydrated RosterEntry."""
    return RosterEntry(player=PlayerRef(id=player_id, name=player_id.lower()), old_rating=rating)


@pytest.fixture
def even_singles() -> tuple[list[RosterEntry], list[RosterEntry]]:
    """alice (1000) beats bob (1000)."""
    return [entry("U1", 1000)], [entry("U2", 1000)]


@pytest.fixture
def favourite_doubles() -> tuple[list[RosterEntry], list[RosterEntry]]:
    """A 2200 team beats a 2000 team."""
    return [entry("U1", 1200), entry("U2", 1000)], [entry("U3", 1000), entry("U4", 1000)]


# ============================================================================
# Rating Law Tests
# ============================================================================


class TestWinExpectancy:
    """Tests for win_expectancy."""

    def test_even_teams(self):
        """Even strengths give an expectancy of exactly 1."""
        assert win_expectancy(1000, 1000) == 1.0

    def test_linear_gap_regression(self):
        """Pin the inverted, linear formula: 1 / (1 + 10 * gap / 400)."""
        assert win_expectancy(1400, 1000) == pytest.approx(1 / 11)
        assert win_expectancy(2200, 2000) == pytest.approx(1 / 6)
        assert win_expectancy(900, 1000) == pytest.approx(-2 / 3)
        assert win_expectancy(980, 1000) == pytest.approx(2.0)

    def test_not_textbook_elo(self):
        """The favourite's expectancy shrinks as its lead grows."""
        assert win_expectancy(1600, 1000) < win_expectancy(1200, 1000) < 1.0

    def test_zero_denominator(self, caplog):
        """A gap of -40 is treated as no movement and logged."""
        with caplog.at_level(logging.WARNING):
            assert win_expectancy(960, 1000) == 1.0
        assert "Undefined win expectancy" in caplog.text


class TestRatingDelta:
    """Tests for rating_delta."""

    def test_default_k(self):
        """K defaults to 32."""
        assert K_FACTOR == 32
        assert rating_delta(1400, 1000) == pytest.approx(32 * 10 / 11)

    def test_custom_k(self):
        """K scales the delta linearly."""
        assert rating_delta(1400, 1000, k=16) == pytest.approx(16 * 10 / 11)

    def test_even_match_moves_nothing(self):
        """Scenario: 1000 vs 1000 gives a delta of 0."""
        assert rating_delta(1000, 1000) == 0

    def test_large_upset_beats_even_match(self):
        """An upset beyond a 40-point gap moves more than an even match."""
        assert rating_delta(900, 1000) > rating_delta(1000, 1000)
        assert rating_delta(900, 1000) == pytest.approx(32 * 5 / 3)

    def test_small_upset_is_negative(self):
        """Pin current behaviour: a small upset takes points from the winners."""
        assert rating_delta(980, 1000) == pytest.approx(-32)


class TestTeamStrength:
    """Tests for team_strength."""

    def test_sums_ratings(self, favourite_doubles):
        """Team strength is the sum, not the average."""
        winners, losers = favourite_doubles
        assert team_strength(winners) == 2200
        assert team_strength(losers) == 2000


# ============================================================================
# Roster Update Tests
# ============================================================================


class TestUpdateRatings:
    """Tests for update_ratings."""

    def test_even_singles_no_change(self, even_singles):
        """Scenario A: alice and bob both stay at 1000."""
        match = update_ratings(*even_singles)
        assert match.winners[0].new_rating == 1000
        assert match.losers[0].new_rating == 1000

    def test_winners_gain_losers_lose(self, favourite_doubles):
        """Every winner gains and every loser drops by the same delta."""
        match = update_ratings(*favourite_doubles)
        delta = 32 * 5 / 6
        assert [e.new_rating for e in match.winners] == pytest.approx([1200 + delta, 1000 + delta])
        assert [e.new_rating for e in match.losers] == pytest.approx([1000 - delta, 1000 - delta])

    def test_old_ratings_preserved(self, favourite_doubles):
        """old_rating is carried over unchanged."""
        match = update_ratings(*favourite_doubles)
        assert [e.old_rating for e in match.players] == [1200, 1000, 1000, 1000]

    def test_inputs_not_mutated(self, favourite_doubles):
        """The given rosters keep their ratings."""
        winners, losers = favourite_doubles
        update_ratings(winners, losers)
        assert all(e.new_rating == e.old_rating for e in winners + losers)

    def test_returns_match_result(self, even_singles):
        """The result keeps roster order and players."""
        match = update_ratings(*even_singles)
        assert isinstance(match, MatchResult)
        assert match.player_ids == ["U1", "U2"]

    @pytest.mark.parametrize(
        "winner_ratings,loser_ratings",
        [
            ([1000], [1000]),
            ([1500], [1100]),
            ([800], [1300]),
            ([990], [1000]),
            ([1000, 1200], [900, 1400]),
            ([1712.5, 833.25], [1001, 999]),
            ([0, 0], [2000, 2000]),
        ],
    )
    def test_zero_sum(self, winner_ratings, loser_ratings):
        """Total rating across both rosters is conserved."""
        winners = [entry(f"W{i}", r) for i, r in enumerate(winner_ratings)]
        losers = [entry(f"L{i}", r) for i, r in enumerate(loser_ratings)]
        match = update_ratings(winners, losers)

        winner_gain = sum(e.new_rating for e in match.winners) - sum(winner_ratings)
        loser_gain = sum(e.new_rating for e in match.losers) - sum(loser_ratings)
        assert winner_gain == pytest.approx(-loser_gain)


class TestELOFacade:
    """Tests for the ELO class."""

    def test_static_helpers(self):
        """The facade exposes the module functions."""
        assert ELO.expected_score(1400, 1000) == win_expectancy(1400, 1000)
        assert ELO.delta(1400, 1000) == rating_delta(1400, 1000)
        assert ELO.DEFAULT_K == 32
        assert ELO.DEFAULT_SCALE == 400

    def test_update(self, favourite_doubles):
        """ELO.update matches update_ratings."""
        assert ELO.update(*favourite_doubles) == update_ratings(*favourite_doubles)

    def test_update_with_k(self, favourite_doubles):
        """A smaller K moves less."""
        small = ELO.update(*favourite_doubles, k=8)
        large = ELO.update(*favourite_doubles)
        assert small.winners[0].delta < large.winners[0].delta
