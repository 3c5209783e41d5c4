"""
Centralized configuration for the Scrim Balancer engine.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Match shape: two teams of five, one player per role
POOL_SIZE = 10
TEAM_SIZE = 5

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

BALANCER_SETTINGS: dict[str, Any] = {
    # Upper bound on team splits scored for one role assignment
    "max_split_combinations": _parse_int("BALANCER_MAX_SPLIT_COMBINATIONS", 1000),
    # Upper bound on role assignments handed to the split optimizer
    "max_role_assignments": _parse_int("BALANCER_MAX_ROLE_ASSIGNMENTS", 100),
    # Captain draft: bonus spread over the roles a drafting team still lacks
    "draft_role_need_weight": _parse_float("DRAFT_ROLE_NEED_WEIGHT", 400.0),
}

# Fallback base score for tiers missing from the tier table (bronze IV)
DEFAULT_TIER_BASE = _parse_int("DEFAULT_TIER_BASE", 800)

SCORE_MODEL_SETTINGS: dict[str, Any] = {
    # At or below this many games the tier is trusted as-is
    "min_games_for_blend": _parse_int("SCORE_MIN_GAMES_FOR_BLEND", 5),
    # Above this many games win rate carries full weight
    "full_blend_games": _parse_int("SCORE_FULL_BLEND_GAMES", 20),
    "partial_tier_weight": _parse_float("SCORE_PARTIAL_TIER_WEIGHT", 0.7),
    "full_tier_weight": _parse_float("SCORE_FULL_TIER_WEIGHT", 0.5),
    # Win rate is scaled onto the tier range before blending
    "win_rate_scale": _parse_float("SCORE_WIN_RATE_SCALE", 1000.0),
}
