"""
Team domain models.
"""

from dataclasses import dataclass

from domain.models.player import Player
from domain.models.role import ROLES, Role

# player id -> role, two players per role across the whole pool
RoleAssignmentMap = dict[str, Role]


@dataclass(frozen=True)
class AssignedPlayer:
    """A team member together with the role they were given (None if unplaced)."""

    player: Player
    role: Role | None = None

    @property
    def is_main_role(self) -> bool:
        return self.role is not None and self.role == self.player.main_role

    @property
    def is_off_role(self) -> bool:
        return self.role is None or not self.player.can_play(self.role)


@dataclass(frozen=True)
class TeamSplit:
    """One way of sending each role's pair to opposite teams."""

    team_a: tuple[AssignedPlayer, ...]
    team_b: tuple[AssignedPlayer, ...]
    score_a: int
    score_b: int

    @property
    def score_difference(self) -> int:
        return abs(self.score_a - self.score_b)


def team_roles(team: tuple[AssignedPlayer, ...] | list[AssignedPlayer]) -> list[Role | None]:
    """Roles held by a team, in roster order."""
    return [member.role for member in team]


def has_full_role_coverage(team: tuple[AssignedPlayer, ...] | list[AssignedPlayer]) -> bool:
    """
    Check that every role appears exactly once in the team.

    Args:
        team: Five assigned players

    Returns:
        True if the team holds each of the five roles exactly once
    """
    roles = team_roles(team)
    if len(roles) != len(ROLES):
        return False
    return all(roles.count(role) == 1 for role in ROLES)
