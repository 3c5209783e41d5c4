"""
Draft domain service for captain mode.

Contains pure domain logic for captain selection and the alternating pick
sequence. No side effects or external dependencies.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from config import BALANCER_SETTINGS
from domain.models.player import Player
from domain.models.role import Role
from domain.services.role_assignment_service import RoleAssignmentService

logger = logging.getLogger("scrim_balancer.draft")

# Picks after the captains: A B B A B A A B
DRAFT_PICK_ORDER: tuple[str, ...] = ("A", "B", "B", "A", "B", "A", "A", "B")


@dataclass(frozen=True)
class CaptainPair:
    """Result of captain selection. Captain A picks first."""

    captain_a: Player
    captain_b: Player

    @property
    def ids(self) -> tuple[str, str]:
        return self.captain_a.id, self.captain_b.id


@dataclass(frozen=True)
class DraftOutcome:
    """Rosters after the draft, captains first, then picks in order."""

    team_a: tuple[Player, ...]
    team_b: tuple[Player, ...]
    picks: tuple[tuple[str, str], ...]  # (side, player id)


class DraftService:
    """
    Pure domain logic for captain drafts.

    Handles:
    - Captain selection (specified or the two strongest players)
    - The pick sequence, weighted toward roles a team still lacks
    """

    def __init__(
        self,
        role_need_weight: float | None = None,
        role_service: RoleAssignmentService | None = None,
    ):
        """
        Initialize draft service.

        Args:
            role_need_weight: Bonus for a candidate who fills a lacking role,
                divided by how many remaining players can fill it
                (default from BALANCER_SETTINGS)
            role_service: Role assignment service used to read team needs
        """
        self.role_need_weight = (
            role_need_weight
            if role_need_weight is not None
            else BALANCER_SETTINGS["draft_role_need_weight"]
        )
        self.role_service = role_service or RoleAssignmentService()

    def select_captains(
        self,
        players: Sequence[Player],
        captain_a_id: str | None = None,
        captain_b_id: str | None = None,
    ) -> CaptainPair:
        """
        Select two captains from the pool.

        Algorithm:
        - If both captains specified, use them as given
        - If one specified, pair them with the strongest other player
        - If neither specified, take the two strongest players; the lower
          rated of the two becomes captain A and picks first

        Args:
            players: Player pool
            captain_a_id: Optional pre-specified captain A
            captain_b_id: Optional pre-specified captain B

        Returns:
            CaptainPair with both captains

        Raises:
            ValueError: If a specified id is not in the pool, both ids are the
                same, or the pool has fewer than two players
        """
        by_id = {p.id: p for p in players}
        for captain_id in (captain_a_id, captain_b_id):
            if captain_id is not None and captain_id not in by_id:
                raise ValueError(f"Captain {captain_id} is not in the player pool.")
        if captain_a_id is not None and captain_a_id == captain_b_id:
            raise ValueError(f"Captains must be two different players, got {captain_a_id} twice.")
        if len(players) < 2:
            raise ValueError(f"Need at least 2 players to draft, but only {len(players)} present.")

        if captain_a_id is not None and captain_b_id is not None:
            return CaptainPair(captain_a=by_id[captain_a_id], captain_b=by_id[captain_b_id])

        if captain_a_id is not None:
            return CaptainPair(
                captain_a=by_id[captain_a_id],
                captain_b=self._strongest_excluding(players, captain_a_id),
            )

        if captain_b_id is not None:
            return CaptainPair(
                captain_a=self._strongest_excluding(players, captain_b_id),
                captain_b=by_id[captain_b_id],
            )

        ranked = sorted(players, key=lambda p: p.strength_score, reverse=True)
        first, second = ranked[0], ranked[1]
        lower = self.determine_lower_rated_captain(first, second)
        higher = second if lower is first else first
        return CaptainPair(captain_a=lower, captain_b=higher)

    def _strongest_excluding(self, players: Sequence[Player], excluded_id: str) -> Player:
        return max(
            (p for p in players if p.id != excluded_id),
            key=lambda p: p.strength_score,
        )

    def determine_lower_rated_captain(self, captain1: Player, captain2: Player) -> Player:
        """
        Determine which captain has the lower strength (captain1 on ties).
        """
        if captain1.strength_score <= captain2.strength_score:
            return captain1
        return captain2

    def run_draft(self, players: Sequence[Player], captains: CaptainPair) -> DraftOutcome:
        """
        Draft the remaining players in DRAFT_PICK_ORDER.

        The picking side takes the candidate with the highest strength plus role
        need bonus. Ties go to higher strength, then pool order.

        Args:
            players: Player pool including both captains
            captains: Selected captains

        Returns:
            DraftOutcome with both rosters and the pick log
        """
        captain_ids = set(captains.ids)
        remaining = [p for p in players if p.id not in captain_ids]
        team_a: list[Player] = [captains.captain_a]
        team_b: list[Player] = [captains.captain_b]
        picks: list[tuple[str, str]] = []

        for side in DRAFT_PICK_ORDER:
            if not remaining:
                break
            team = team_a if side == "A" else team_b
            lacking = self.role_service.missing_team_roles(team)
            pick = self._best_pick(remaining, lacking)
            team.append(pick)
            remaining.remove(pick)
            picks.append((side, pick.id))
            logger.debug(
                f"Draft pick {len(picks)}: team {side} takes {pick.display_name} "
                f"(lacking: {', '.join(str(r) for r in lacking) or 'none'})"
            )

        return DraftOutcome(team_a=tuple(team_a), team_b=tuple(team_b), picks=tuple(picks))

    def _best_pick(self, remaining: list[Player], lacking: list[Role]) -> Player:
        available = {
            role: len(self.role_service.candidates_for(role, remaining)) for role in lacking
        }
        return max(
            remaining,
            key=lambda p: (self.pick_value(p, lacking, available), p.strength_score),
        )

    def pick_value(
        self, candidate: Player, lacking: Sequence[Role], available: dict[Role, int]
    ) -> float:
        """Strength plus need bonus for each lacking role the candidate can play."""
        bonus = sum(
            self.role_need_weight / available[role]
            for role in lacking
            if candidate.can_play(role) and available.get(role)
        )
        return candidate.strength_score + bonus
