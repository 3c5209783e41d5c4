"""
Normalizes the output of every balancing path into one BalancingResult.
"""

from collections.abc import Mapping, Sequence

from config import TEAM_SIZE
from domain.models.balancing import BalancingMethod, BalancingResult
from domain.models.player import Player
from domain.models.role import Role
from domain.models.team import AssignedPlayer, TeamSplit, has_full_role_coverage
from domain.services.score_model import team_score
from domain.services.team_balancing_service import TeamBalancingService


class ResultAssembler:
    """
    Builds BalancingResult values.

    Scores and role feasibility are always recomputed here, so results from
    different methods are reported the same way.
    """

    def __init__(self, team_service: TeamBalancingService | None = None):
        self.team_service = team_service or TeamBalancingService()

    def assemble_result(
        self,
        team_a: Sequence[Player],
        team_b: Sequence[Player],
        roles: Mapping[str, Role | None],
        method: BalancingMethod,
        message: str,
        fallback_used: bool = False,
        warning_code: str | None = None,
        missing_roles: Sequence[Role] = (),
    ) -> BalancingResult:
        """
        Assemble the final result for two rosters and their roles.

        Args:
            team_a: Five players for team A
            team_b: Five players for team B
            roles: Player id to role (absent or None for unplaced players)
            method: Method the caller selected
            message: Human-readable summary
            fallback_used: Whether the method degraded to a fallback
            warning_code: Non-fatal condition code
            missing_roles: Roles the pool could not cover

        Returns:
            BalancingResult with recomputed scores and feasibility

        Raises:
            ValueError: If a team is not exactly TEAM_SIZE players or the teams overlap
        """
        if len(team_a) != TEAM_SIZE or len(team_b) != TEAM_SIZE:
            raise ValueError(
                f"Teams must have {TEAM_SIZE} players each, got {len(team_a)} and {len(team_b)}"
            )
        overlap = {p.id for p in team_a} & {p.id for p in team_b}
        if overlap:
            raise ValueError(f"Players on both teams: {', '.join(sorted(overlap))}")

        assigned_a = tuple(AssignedPlayer(player=p, role=roles.get(p.id)) for p in team_a)
        assigned_b = tuple(AssignedPlayer(player=p, role=roles.get(p.id)) for p in team_b)
        return self._build(
            assigned_a,
            assigned_b,
            method,
            message,
            fallback_used=fallback_used,
            warning_code=warning_code,
            missing_roles=missing_roles,
        )

    def from_split(
        self, split: TeamSplit, method: BalancingMethod, message: str
    ) -> BalancingResult:
        """Assemble a result from an optimizer split, keeping its roles."""
        roles = {m.player.id: m.role for m in split.team_a + split.team_b}
        return self.assemble_result(
            [m.player for m in split.team_a],
            [m.player for m in split.team_b],
            roles,
            method,
            message,
        )

    def _build(
        self,
        team_a: tuple[AssignedPlayer, ...],
        team_b: tuple[AssignedPlayer, ...],
        method: BalancingMethod,
        message: str,
        fallback_used: bool,
        warning_code: str | None,
        missing_roles: Sequence[Role],
    ) -> BalancingResult:
        score_a = team_score(m.player for m in team_a)
        score_b = team_score(m.player for m in team_b)
        role_feasible = has_full_role_coverage(team_a) and has_full_role_coverage(team_b)
        balances, balance_score = self.team_service.role_balances(team_a, team_b)

        return BalancingResult(
            team_a=team_a,
            team_b=team_b,
            score_a=score_a,
            score_b=score_b,
            score_difference=abs(score_a - score_b),
            role_feasible=role_feasible,
            method=method,
            message=message,
            fallback_used=fallback_used,
            warning_code=warning_code,
            missing_roles=tuple(missing_roles),
            role_balances=balances,
            balance_score=balance_score,
        )

    def generic_failure(
        self,
        players: Sequence[Player],
        method: BalancingMethod,
        message: str,
        warning_code: str,
    ) -> BalancingResult:
        """
        Bisect the pool in input order with zero scores.

        Used when a path failed unexpectedly; scores are not recomputed because
        the player data itself may be what broke.
        """
        half = len(players) // 2
        team_a = tuple(AssignedPlayer(player=p) for p in players[:half])
        team_b = tuple(AssignedPlayer(player=p) for p in players[half:])
        return BalancingResult(
            team_a=team_a,
            team_b=team_b,
            score_a=0,
            score_b=0,
            score_difference=0,
            role_feasible=False,
            method=method,
            message=message,
            fallback_used=True,
            warning_code=warning_code,
        )
