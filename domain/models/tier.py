"""
Rank tier domain model.

Tiers are ordered from lowest (iron_iv) to highest (challenger). Each tier has a
fixed base strength used by the score model.
"""

from enum import Enum


class RankTier(Enum):
    """Ordered rank ladder, lowest first."""

    IRON_IV = "iron_iv"
    IRON_III = "iron_iii"
    IRON_II = "iron_ii"
    IRON_I = "iron_i"
    BRONZE_IV = "bronze_iv"
    BRONZE_III = "bronze_iii"
    BRONZE_II = "bronze_ii"
    BRONZE_I = "bronze_i"
    SILVER_IV = "silver_iv"
    SILVER_III = "silver_iii"
    SILVER_II = "silver_ii"
    SILVER_I = "silver_i"
    GOLD_IV = "gold_iv"
    GOLD_III = "gold_iii"
    GOLD_II = "gold_ii"
    GOLD_I = "gold_i"
    PLATINUM_IV = "platinum_iv"
    PLATINUM_III = "platinum_iii"
    PLATINUM_II = "platinum_ii"
    PLATINUM_I = "platinum_i"
    EMERALD_IV = "emerald_iv"
    EMERALD_III = "emerald_iii"
    EMERALD_II = "emerald_ii"
    EMERALD_I = "emerald_i"
    DIAMOND_IV = "diamond_iv"
    DIAMOND_III = "diamond_iii"
    DIAMOND_II = "diamond_ii"
    DIAMOND_I = "diamond_i"
    MASTER = "master"
    GRANDMASTER = "grandmaster"
    CHALLENGER = "challenger"

    @property
    def base_score(self) -> int:
        return TIER_BASE_SCORES[self]

    @classmethod
    def lookup(cls, value: "RankTier | str | None") -> "RankTier | None":
        """Resolve a tier from a member or string value; None if unknown."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


def _build_base_scores() -> dict[RankTier, int]:
    # Divisional tiers climb in 100-point steps; apex tiers in 300-point steps
    scores: dict[RankTier, int] = {}
    apex = (RankTier.MASTER, RankTier.GRANDMASTER, RankTier.CHALLENGER)
    divisional = [tier for tier in RankTier if tier not in apex]
    for index, tier in enumerate(divisional):
        scores[tier] = 400 + index * 100
    top = scores[divisional[-1]]
    for index, tier in enumerate(apex, start=1):
        scores[tier] = top + index * 300
    return scores


TIER_BASE_SCORES: dict[RankTier, int] = _build_base_scores()
