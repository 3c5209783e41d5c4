"""
Domain models - pure data structures representing business entities.
"""

from domain.models.balancing import (
    BalancingMethod,
    BalancingResult,
    FeasibilityReport,
    RoleBalance,
    RoleCoverageIssue,
)
from domain.models.formation import RoleCoverage, RoleSuggestions, TeamFormationAnalysis
from domain.models.player import GameStats, Player
from domain.models.role import ROLES, Role
from domain.models.team import AssignedPlayer, RoleAssignmentMap, TeamSplit
from domain.models.tier import TIER_BASE_SCORES, RankTier

__all__ = [
    "AssignedPlayer",
    "BalancingMethod",
    "BalancingResult",
    "FeasibilityReport",
    "GameStats",
    "Player",
    "ROLES",
    "RankTier",
    "Role",
    "RoleAssignmentMap",
    "RoleBalance",
    "RoleCoverage",
    "RoleCoverageIssue",
    "RoleSuggestions",
    "TIER_BASE_SCORES",
    "TeamFormationAnalysis",
    "TeamSplit",
]
