"""
Role assignment domain service.

Handles role eligibility, coverage checks and role assignment, both for the
whole ten-player pool (two players per role) and for a single formed team
(one player per role).
"""

import logging
from collections.abc import Iterator, Sequence

from config import BALANCER_SETTINGS
from domain.models.balancing import FeasibilityReport, RoleCoverageIssue
from domain.models.player import Player
from domain.models.role import ROLES, Role
from domain.models.team import AssignedPlayer, RoleAssignmentMap
from domain.services.search import bounded

logger = logging.getLogger("scrim_balancer.roles")

# One candidate per team
MIN_CANDIDATES_PER_ROLE = 2


class RoleAssignmentService:
    """
    Pure domain service for role assignment logic.

    Responsibilities:
    - Determine which players can fill each role
    - Check that the pool covers every role for both teams
    - Generate pool-wide role assignments (two players per role)
    - Recommend roles for an already-formed team
    """

    def __init__(self, max_role_assignments: int | None = None):
        """
        Initialize the role assignment service.

        Args:
            max_role_assignments: Cap on assignments yielded by the generator
                (default from BALANCER_SETTINGS)
        """
        self.max_role_assignments = (
            max_role_assignments
            if max_role_assignments is not None
            else BALANCER_SETTINGS["max_role_assignments"]
        )

    def candidates_for(self, role: Role, players: Sequence[Player]) -> list[Player]:
        """Players whose main role or sub roles include the role, in input order."""
        return [p for p in players if p.can_play(role)]

    def get_role_candidates(self, players: Sequence[Player]) -> dict[Role, list[Player]]:
        """
        Get which players can play each role.

        Args:
            players: Player pool

        Returns:
            Dictionary mapping every role to its eligible players
        """
        return {role: self.candidates_for(role, players) for role in ROLES}

    def validate_role_coverage(self, players: Sequence[Player]) -> FeasibilityReport:
        """
        Check that every role has at least two eligible players.

        This is necessary but not sufficient for a role-feasible split: two roles
        can compete for the same flexible players.

        Args:
            players: Player pool

        Returns:
            FeasibilityReport listing every under-covered role with its count
        """
        counts = {role: len(cands) for role, cands in self.get_role_candidates(players).items()}
        issues = tuple(
            RoleCoverageIssue(role=role, candidate_count=count)
            for role, count in counts.items()
            if count < MIN_CANDIDATES_PER_ROLE
        )
        logger.debug(
            f"Role candidate counts: {', '.join(f'{role}={count}' for role, count in counts.items())}"
        )
        return FeasibilityReport(feasible=not issues, issues=issues, candidate_counts=counts)

    def describe_coverage_issues(self, report: FeasibilityReport) -> str:
        """Format under-covered roles for display, e.g. 'jungle (1/2), mid (0/2)'."""
        return ", ".join(
            f"{issue.role} ({issue.candidate_count}/{MIN_CANDIDATES_PER_ROLE})"
            for issue in report.issues
        )

    def generate_role_assignments(
        self,
        players: Sequence[Player],
        max_assignments: int | None = None,
    ) -> Iterator[RoleAssignmentMap]:
        """
        Generate pool-wide role assignments with exactly two players per role.

        Uses a scarcity-first greedy pass with no backtracking, so it can miss
        assignments that exist only under a different processing order.

        Args:
            players: The ten-player pool
            max_assignments: Cap on assignments yielded (default from settings)

        Yields:
            Mappings of player id to role covering every player exactly once
        """
        limit = max_assignments if max_assignments is not None else self.max_role_assignments
        yield from bounded(self._scarcity_first_assignment(players), limit)

    def _scarcity_first_assignment(self, players: Sequence[Player]) -> Iterator[RoleAssignmentMap]:
        """
        Lock the two strongest unused candidates of each role, scarcest first.

        Roles are ordered once by their candidate count in the full pool; ties
        keep role declaration order and equal strengths keep input order.
        """
        initial_counts = {role: len(self.candidates_for(role, players)) for role in ROLES}
        order = sorted(ROLES, key=lambda r: initial_counts[r])
        logger.debug(f"Greedy role order: {', '.join(f'{r}={initial_counts[r]}' for r in order)}")

        assignment: RoleAssignmentMap = {}
        for role in order:
            available = [p for p in self.candidates_for(role, players) if p.id not in assignment]

            if len(available) < MIN_CANDIDATES_PER_ROLE:
                logger.info(
                    f"Greedy role assignment failed at {role}: "
                    f"{len(available)}/{MIN_CANDIDATES_PER_ROLE} unused candidates"
                )
                return

            picked = sorted(available, key=lambda p: p.strength_score, reverse=True)[
                :MIN_CANDIDATES_PER_ROLE
            ]
            for player in picked:
                assignment[player.id] = role
            logger.debug(f"Locked {role}: {', '.join(p.display_name for p in picked)}")

        unplaced = [p for p in players if p.id not in assignment]
        if unplaced:
            logger.info(f"Greedy role assignment left {len(unplaced)} players unplaced")
            return

        yield dict(assignment)

    def recommend_roles(self, team: Sequence[Player]) -> dict[str, Role]:
        """
        Assign roles to an already-formed team of up to five players.

        Pass 1 places players who can only play a single role (strongest first
        when several share it). Pass 2 fills each open role with the best
        remaining eligible player, main-role players ahead of sub-role players,
        then by strength. Roles nobody can play stay open.

        Args:
            team: Team members

        Returns:
            Dictionary mapping player id to assigned role (unplaced players absent)
        """
        assignments: dict[str, Role] = {}
        filled: set[Role] = set()

        for role in ROLES:
            exclusive = [
                p for p in team if p.id not in assignments and p.is_exclusive_to(role)
            ]
            if exclusive:
                best = max(exclusive, key=lambda p: p.strength_score)
                assignments[best.id] = role
                filled.add(role)

        for role in ROLES:
            if role in filled:
                continue
            available = [p for p in team if p.id not in assignments and p.can_play(role)]
            if not available:
                continue
            best = max(available, key=lambda p: (p.main_role == role, p.strength_score))
            assignments[best.id] = role
            filled.add(role)

        return assignments

    def assign_team(self, team: Sequence[Player]) -> tuple[AssignedPlayer, ...]:
        """Pair each team member with their recommended role (None if unplaced)."""
        roles = self.recommend_roles(team)
        return tuple(AssignedPlayer(player=p, role=roles.get(p.id)) for p in team)

    def missing_team_roles(self, team: Sequence[Player]) -> list[Role]:
        """Roles the team cannot fill under the recommended assignment."""
        filled = set(self.recommend_roles(team).values())
        return [role for role in ROLES if role not in filled]

    def is_role_complete(self, assignments: dict[str, Role]) -> bool:
        """Check if an assignment gives every role to exactly one player."""
        roles = list(assignments.values())
        return len(roles) == len(ROLES) and set(roles) == set(ROLES)
