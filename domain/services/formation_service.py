"""
Team formation analysis.

Scores how comfortably a group of players covers the five roles and suggests
what to change when it does not.
"""

import logging
from collections.abc import Sequence

from domain.models.formation import RoleCoverage, RoleSuggestions, TeamFormationAnalysis
from domain.models.player import Player
from domain.models.role import ROLES, Role
from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.score_model import round_half_up

logger = logging.getLogger("scrim_balancer.formation")

SINGLE_CANDIDATE_SCORE = 85
MULTI_CANDIDATE_BASE = 70
DIVERSITY_BONUS_PER_PLAYER = 10
MAX_DIVERSITY_BONUS = 30
OVER_COVERED_THRESHOLD = 2
LOW_BALANCE_THRESHOLD = 70


def coverage_score(candidate_count: int) -> int:
    """
    Score a role by how many players can fill it.

    0 with nobody, 85 with a single player (playable but fragile), otherwise
    70 plus 10 per player capped at 100.
    """
    if candidate_count == 0:
        return 0
    if candidate_count == 1:
        return SINGLE_CANDIDATE_SCORE
    diversity_bonus = min(candidate_count * DIVERSITY_BONUS_PER_PLAYER, MAX_DIVERSITY_BONUS)
    return min(MULTI_CANDIDATE_BASE + diversity_bonus, 100)


class FormationService:
    """Analyzes role coverage of a player group."""

    def __init__(self, role_service: RoleAssignmentService | None = None):
        self.role_service = role_service or RoleAssignmentService()

    def analyze_team_formation(self, players: Sequence[Player]) -> TeamFormationAnalysis:
        """
        Analyze whether the players can field every role.

        Args:
            players: Any group of players (a team, a pool, a roster)

        Returns:
            TeamFormationAnalysis with per-role coverage and an overall score
        """
        coverage: list[RoleCoverage] = []
        missing: list[Role] = []
        over_covered: list[Role] = []

        for role, candidates in self.role_service.get_role_candidates(players).items():
            count = len(candidates)
            coverage.append(
                RoleCoverage(
                    role=role,
                    available_player_ids=tuple(p.id for p in candidates),
                    coverage_score=coverage_score(count),
                )
            )
            if count == 0:
                missing.append(role)
            elif count > OVER_COVERED_THRESHOLD:
                over_covered.append(role)

        balance_score = round_half_up(sum(c.coverage_score for c in coverage) / len(ROLES))
        logger.debug(
            f"Formation: missing={[str(r) for r in missing]} "
            f"over_covered={[str(r) for r in over_covered]} balance={balance_score}"
        )
        return TeamFormationAnalysis(
            can_form_complete_team=not missing,
            role_coverage=tuple(coverage),
            missing_roles=tuple(missing),
            over_covered_roles=tuple(over_covered),
            balance_score=balance_score,
        )

    def suggest_role_solutions(self, analysis: TeamFormationAnalysis) -> RoleSuggestions:
        """
        Suggest fixes for missing, crowded or inflexible role coverage.

        Args:
            analysis: Result of analyze_team_formation

        Returns:
            RoleSuggestions with messages, roles to recruit for and, per missing
            role, the roles whose players could add it as a sub role
        """
        solutions: list[str] = []
        alternatives: dict[str, tuple[Role, ...]] = {}

        spare_roles = tuple(c.role for c in analysis.role_coverage if c.candidate_count > 1)
        for role in analysis.missing_roles:
            solutions.append(f"Recruit a player who can play {role}.")
            if spare_roles:
                solutions.append(
                    f"Or have some {', '.join(str(r) for r in spare_roles)} players "
                    f"add {role} as a sub role."
                )
                alternatives[role.value] = spare_roles

        for role in analysis.over_covered_roles:
            count = analysis.coverage_for(role).candidate_count
            solutions.append(
                f"{count} players are stacked on {role}. "
                f"Adding other sub roles would make balancing easier."
            )

        if analysis.balance_score < LOW_BALANCE_THRESHOLD:
            solutions.append(
                f"Role balance score is {analysis.balance_score}. "
                f"More sub roles would give the team more flexibility."
            )

        return RoleSuggestions(
            solutions=tuple(solutions),
            recommended_recruitment=tuple(analysis.missing_roles),
            alternative_assignments=alternatives,
        )
