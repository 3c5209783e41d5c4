"""
Balancing result domain models.
"""

from dataclasses import dataclass, field
from enum import Enum

from domain.models.role import Role
from domain.models.team import AssignedPlayer


class BalancingMethod(Enum):
    """How the two teams are formed."""

    SMART = "smart"  # Role-constrained search with snake-draft fallback
    DRAFT = "draft"  # Captains alternately pick the remaining eight
    RANDOM = "random"  # Shuffle and bisect

    @classmethod
    def parse(cls, value: "BalancingMethod | str") -> "BalancingMethod":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class RoleCoverageIssue:
    """A role with fewer eligible players than the two it needs."""

    role: Role
    candidate_count: int


@dataclass(frozen=True)
class FeasibilityReport:
    """Outcome of checking that every role has one candidate per team."""

    feasible: bool
    issues: tuple[RoleCoverageIssue, ...] = ()
    candidate_counts: dict[Role, int] = field(default_factory=dict)

    @property
    def missing_roles(self) -> list[Role]:
        return [issue.role for issue in self.issues]


@dataclass(frozen=True)
class RoleBalance:
    """Head-to-head comparison of the two players holding one role."""

    role: Role
    score_a: int
    score_b: int

    @property
    def score_difference(self) -> int:
        return abs(self.score_a - self.score_b)

    @property
    def balance_ratio(self) -> float:
        """1.0 for a perfectly even matchup, approaching 0 as it skews."""
        top = max(self.score_a, self.score_b)
        if top <= 0:
            return 1.0
        return 1 - self.score_difference / top


@dataclass(frozen=True)
class BalancingResult:
    """
    Final output of the balancing engine, whichever method produced it.

    Attributes:
        team_a: Five players with their roles (role is None when unplaced)
        team_b: Five players with their roles
        score_a: Sum of strength scores for team A
        score_b: Sum of strength scores for team B
        score_difference: abs(score_a - score_b)
        role_feasible: True only if every role appears exactly once per team
        method: Method the caller selected
        message: Human-readable summary, lists missing roles on fallback
        fallback_used: True when the requested method degraded to a fallback
        warning_code: Non-fatal condition code (see services.error_codes)
        missing_roles: Roles that lacked candidates in the pool
        role_balances: Per-role head-to-head breakdown (complete teams only)
        balance_score: 0-100 mean of the per-role balance ratios
    """

    team_a: tuple[AssignedPlayer, ...]
    team_b: tuple[AssignedPlayer, ...]
    score_a: int
    score_b: int
    score_difference: int
    role_feasible: bool
    method: BalancingMethod
    message: str
    fallback_used: bool = False
    warning_code: str | None = None
    missing_roles: tuple[Role, ...] = ()
    role_balances: tuple[RoleBalance, ...] = ()
    balance_score: int = 0

    @property
    def team_a_ids(self) -> list[str]:
        return [member.player.id for member in self.team_a]

    @property
    def team_b_ids(self) -> list[str]:
        return [member.player.id for member in self.team_b]

    @property
    def average_score_a(self) -> int:
        return round(self.score_a / len(self.team_a)) if self.team_a else 0

    @property
    def average_score_b(self) -> int:
        return round(self.score_b / len(self.team_b)) if self.team_b else 0

    def role_of(self, player_id: str) -> Role | None:
        """Role given to a player, or None if unplaced or not in either team."""
        for member in self.team_a + self.team_b:
            if member.player.id == player_id:
                return member.role
        return None
