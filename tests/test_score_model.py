"""
Tests for the strength score model and rank tiers.
"""

import pytest

from domain.models import TIER_BASE_SCORES, GameStats, RankTier
from domain.services.score_model import round_half_up, strength, team_score, tier_base_score, win_rate
from tests.conftest import make_player


class TestTierTable:
    """Tests for the tier base score table."""

    def test_table_is_strictly_increasing(self):
        """Higher tiers always have a higher base."""
        scores = [TIER_BASE_SCORES[tier] for tier in RankTier]
        assert scores == sorted(scores)
        assert len(set(scores)) == len(scores)

    def test_table_endpoints(self):
        """Table spans 400 (iron IV) to 4000 (challenger)."""
        assert RankTier.IRON_IV.base_score == 400
        assert RankTier.DIAMOND_I.base_score == 3100
        assert RankTier.MASTER.base_score == 3400
        assert RankTier.CHALLENGER.base_score == 4000

    def test_string_tier_lookup(self):
        """Tiers can be given by value, case-insensitively."""
        assert tier_base_score("gold_iv") == 1600
        assert tier_base_score("Gold_IV") == 1600

    def test_unknown_tier_falls_back(self):
        """Unknown tiers use the default base instead of raising."""
        assert tier_base_score("wood_v") == 800
        assert tier_base_score(None) == 800
        assert strength("wood_v", GameStats(total_wins=1, total_losses=1)) == 800


class TestStrength:
    """Tests for the tier/win-rate blend."""

    def test_deterministic(self):
        """Same arguments always produce the same score."""
        stats = GameStats(total_wins=3, total_losses=2)
        assert strength(RankTier.GOLD_IV, stats) == strength(RankTier.GOLD_IV, stats)

    def test_no_stats_is_base(self):
        """Missing stats means tier only."""
        assert strength(RankTier.PLATINUM_II) == RankTier.PLATINUM_II.base_score

    @pytest.mark.parametrize("wins,losses", [(0, 0), (5, 0), (0, 5), (3, 2)])
    def test_five_games_or_fewer_is_base(self, wins, losses):
        """Up to five games the tier is trusted outright."""
        stats = GameStats(total_wins=wins, total_losses=losses)
        assert strength(RankTier.GOLD_IV, stats) == 1600

    def test_six_games_starts_blend(self):
        """Six games switches to the 70/30 blend."""
        stats = GameStats(total_wins=6, total_losses=0)
        # 0.7 * 1600 + 0.3 * 1000
        assert strength(RankTier.GOLD_IV, stats) == 1420

    def test_twenty_games_still_partial_blend(self):
        """Twenty games is the last count on the 70/30 blend."""
        stats = GameStats(total_wins=7, total_losses=13)
        # 0.7 * 1600 + 0.3 * 350
        assert strength(RankTier.GOLD_IV, stats) == 1225

    def test_twenty_one_games_uses_even_blend(self):
        """Past twenty games tier and win rate weigh the same."""
        stats = GameStats(total_wins=14, total_losses=7)
        # 0.5 * 1600 + 0.5 * 666.67
        assert strength(RankTier.GOLD_IV, stats) == 1133

    def test_even_record_on_even_blend(self):
        """A .500 record past twenty games gives half the base plus 250."""
        stats = GameStats(total_wins=11, total_losses=11)
        for tier in (RankTier.IRON_IV, RankTier.GOLD_IV, RankTier.CHALLENGER):
            assert strength(tier, stats) == round_half_up(0.5 * tier.base_score + 250)

    def test_player_strength_matches_model(self):
        """Player.strength_score is the model's output for its tier and stats."""
        player = make_player("p", tier=RankTier.EMERALD_II, wins=9, losses=3)
        assert player.strength_score == strength(RankTier.EMERALD_II, player.stats)


class TestHelpers:
    """Tests for rounding, win rate and team score helpers."""

    def test_round_half_up(self):
        """Halves round up instead of to even."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(1132.5) == 1133
        assert round_half_up(1132.49) == 1132

    def test_win_rate(self):
        """Win rate is wins over games, zero without games."""
        assert win_rate(GameStats(total_wins=3, total_losses=1)) == 0.75
        assert win_rate(GameStats()) == 0.0
        assert win_rate(None) == 0.0

    def test_team_score_sums_strengths(self):
        """Team score is the sum of member strengths."""
        players = [
            make_player("a", tier=RankTier.GOLD_IV),
            make_player("b", tier=RankTier.SILVER_IV),
            make_player("c", tier=RankTier.MASTER),
        ]
        assert team_score(players) == 1600 + 1200 + 3400
        assert team_score([]) == 0
