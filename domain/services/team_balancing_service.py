"""
Team balancing domain service.

Handles splitting a ten-player pool into two teams: the role-constrained split
search, the snake-draft fallback and the random baseline.
"""

import itertools
import logging
import random
from collections.abc import Sequence

from config import BALANCER_SETTINGS
from domain.exceptions import SearchBudgetExhausted
from domain.models.balancing import RoleBalance
from domain.models.player import Player
from domain.models.role import ROLES, Role
from domain.models.team import AssignedPlayer, RoleAssignmentMap, TeamSplit, has_full_role_coverage
from domain.services.score_model import round_half_up, team_score
from domain.services.search import best_of

logger = logging.getLogger("scrim_balancer.team_split")


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Search the role-constrained splits for the smallest score gap
    - Deal a role-agnostic snake draft when that search cannot run
    - Produce the random baseline split
    - Compare the two teams role by role
    """

    def __init__(self, max_split_combinations: int | None = None):
        """
        Initialize team balancing service.

        Args:
            max_split_combinations: Cap on candidate splits explored
                (default from BALANCER_SETTINGS)
        """
        self.max_split_combinations = (
            max_split_combinations
            if max_split_combinations is not None
            else BALANCER_SETTINGS["max_split_combinations"]
        )

    def group_by_role(
        self, assignment: RoleAssignmentMap, players: Sequence[Player]
    ) -> dict[Role, list[Player]]:
        """
        Group players by their assigned role, keeping input order within a role.

        Raises:
            SearchBudgetExhausted: If a player has no role in the assignment
        """
        groups: dict[Role, list[Player]] = {role: [] for role in ROLES}
        for player in players:
            role = assignment.get(player.id)
            if role is None:
                raise SearchBudgetExhausted(
                    "team split", 0, reason=f"player {player.id} has no assigned role"
                )
            groups[role].append(player)
        return groups

    def optimize_team_split(
        self,
        assignment: RoleAssignmentMap,
        players: Sequence[Player],
        max_combinations: int | None = None,
    ) -> TeamSplit:
        """
        Find the split of each role's pair across the teams with the smallest gap.

        Every role contributes one player to each side; the candidate splits are
        the cross product of ordered picks per role (32 for five pairs). The
        first split found with the minimum gap wins ties, and a perfect split
        ends the search early.

        Args:
            assignment: Player id to role, two players per role
            players: The ten-player pool
            max_combinations: Cap on splits explored (default from settings)

        Returns:
            The best TeamSplit found

        Raises:
            SearchBudgetExhausted: If a role has fewer than two players or no
                complete split could be built
        """
        limit = max_combinations if max_combinations is not None else self.max_split_combinations
        groups = self.group_by_role(assignment, players)

        short = [role for role in ROLES if len(groups[role]) < 2]
        if short:
            raise SearchBudgetExhausted(
                "team split",
                0,
                reason="too few players for " + ", ".join(str(role) for role in short),
            )

        picks_per_role = [list(itertools.permutations(groups[role], 2)) for role in ROLES]
        candidates = (self._build_split(picks) for picks in itertools.product(*picks_per_role))

        outcome = best_of(candidates, key=lambda split: split.score_difference, limit=limit, stop_at=0)
        if not outcome.found:
            raise SearchBudgetExhausted("team split", outcome.explored)

        if outcome.exhausted_budget:
            logger.info(f"Split search stopped at the cap of {limit} candidates")
        logger.info(
            f"Best split after {outcome.explored} candidates: "
            f"{outcome.best.score_a} vs {outcome.best.score_b} "
            f"(diff={outcome.best.score_difference})"
        )
        return outcome.best

    def _build_split(self, picks: tuple[tuple[Player, Player], ...]) -> TeamSplit:
        team_a = tuple(AssignedPlayer(player=a, role=role) for role, (a, _) in zip(ROLES, picks))
        team_b = tuple(AssignedPlayer(player=b, role=role) for role, (_, b) in zip(ROLES, picks))
        return TeamSplit(
            team_a=team_a,
            team_b=team_b,
            score_a=team_score(m.player for m in team_a),
            score_b=team_score(m.player for m in team_b),
        )

    def snake_draft_split(self, players: Sequence[Player]) -> tuple[list[Player], list[Player]]:
        """
        Deal players by strength in the pattern A B B A A B B A A B.

        Role eligibility is ignored; roles are recommended afterwards.

        Args:
            players: Player pool

        Returns:
            Tuple of (team_a, team_b)
        """
        # Stable sort keeps input order among equal strengths
        ordered = sorted(players, key=lambda p: p.strength_score, reverse=True)

        team_a: list[Player] = []
        team_b: list[Player] = []
        for i, player in enumerate(ordered):
            # Snake pattern: 0->A, 1->B, 2->B, 3->A, 4->A, 5->B, ...
            round_num = i // 2
            if round_num % 2 == i % 2:
                team_a.append(player)
            else:
                team_b.append(player)

        logger.debug(
            f"Snake draft: A=[{', '.join(p.id for p in team_a)}] "
            f"B=[{', '.join(p.id for p in team_b)}]"
        )
        return team_a, team_b

    def random_split(
        self, players: Sequence[Player], rng: random.Random | None = None
    ) -> tuple[list[Player], list[Player]]:
        """
        Shuffle a copy of the pool and cut it in half.

        Args:
            players: Player pool
            rng: Random source (module-level random when None)

        Returns:
            Tuple of (team_a, team_b)
        """
        shuffled = list(players)
        (rng or random).shuffle(shuffled)
        half = len(shuffled) // 2
        return shuffled[:half], shuffled[half:]

    def role_balances(
        self,
        team_a: Sequence[AssignedPlayer],
        team_b: Sequence[AssignedPlayer],
    ) -> tuple[tuple[RoleBalance, ...], int]:
        """
        Compare the two holders of each role.

        Args:
            team_a: First team with roles
            team_b: Second team with roles

        Returns:
            Tuple of (per-role balances, overall 0-100 balance score). Both are
            empty/zero unless each team holds every role exactly once.
        """
        if not (has_full_role_coverage(team_a) and has_full_role_coverage(team_b)):
            return (), 0

        holders_a = {member.role: member.player for member in team_a}
        holders_b = {member.role: member.player for member in team_b}
        balances = tuple(
            RoleBalance(
                role=role,
                score_a=holders_a[role].strength_score,
                score_b=holders_b[role].strength_score,
            )
            for role in ROLES
        )
        mean_ratio = sum(b.balance_ratio for b in balances) / len(balances)
        return balances, round_half_up(mean_ratio * 100)
