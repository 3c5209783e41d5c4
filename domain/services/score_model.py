"""
Strength score model.

Turns a rank tier and game history into one comparable number. The tier is
trusted outright for small samples; as games accumulate the observed win rate
takes over a growing share of the score.
"""

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from config import DEFAULT_TIER_BASE, SCORE_MODEL_SETTINGS
from domain.models.tier import RankTier

if TYPE_CHECKING:
    from domain.models.player import GameStats, Player


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def tier_base_score(tier: RankTier | str | None) -> int:
    """
    Look up the base score for a tier.

    Unknown tiers fall back to DEFAULT_TIER_BASE instead of raising.
    """
    resolved = RankTier.lookup(tier)
    if resolved is None:
        return DEFAULT_TIER_BASE
    return resolved.base_score


def win_rate(stats: "GameStats | None") -> float:
    """Wins over total games, 0.0 when no games have been played."""
    if stats is None:
        return 0.0
    total = stats.total_wins + stats.total_losses
    if total == 0:
        return 0.0
    return stats.total_wins / total


def strength(tier: RankTier | str | None, stats: "GameStats | None" = None) -> int:
    """
    Calculate a player's strength score.

    Blend rule by total games played:
    - up to 5 games: tier base only
    - 6 to 20 games: 70% tier base, 30% scaled win rate
    - over 20 games: 50% tier base, 50% scaled win rate

    Args:
        tier: Rank tier (member or string value)
        stats: Game history snapshot, None is treated as no games

    Returns:
        Integer strength score
    """
    base = tier_base_score(tier)
    if stats is None:
        return base

    settings = SCORE_MODEL_SETTINGS
    total_games = stats.total_wins + stats.total_losses
    if total_games <= settings["min_games_for_blend"]:
        return base

    scaled_win_rate = win_rate(stats) * settings["win_rate_scale"]
    if total_games <= settings["full_blend_games"]:
        tier_weight = settings["partial_tier_weight"]
    else:
        tier_weight = settings["full_tier_weight"]

    return round_half_up(tier_weight * base + (1 - tier_weight) * scaled_win_rate)


def team_score(players: Iterable["Player"]) -> int:
    """Sum of strength scores, recomputed from tier and stats."""
    return sum(strength(p.rank_tier, p.stats) for p in players)
