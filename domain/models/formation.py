"""
Team formation analysis models.
"""

from dataclasses import dataclass, field

from domain.models.role import Role


@dataclass(frozen=True)
class RoleCoverage:
    """Who in a group can fill a role, scored 0-100 (100 = comfortable)."""

    role: Role
    available_player_ids: tuple[str, ...]
    coverage_score: int

    @property
    def candidate_count(self) -> int:
        return len(self.available_player_ids)


@dataclass(frozen=True)
class TeamFormationAnalysis:
    """Whether a group of players can field every role, and how comfortably."""

    can_form_complete_team: bool
    role_coverage: tuple[RoleCoverage, ...]
    missing_roles: tuple[Role, ...]
    over_covered_roles: tuple[Role, ...]
    balance_score: int

    def coverage_for(self, role: Role) -> RoleCoverage:
        for coverage in self.role_coverage:
            if coverage.role == role:
                return coverage
        raise KeyError(role)


@dataclass(frozen=True)
class RoleSuggestions:
    """Advice for fixing a pool that cannot field every role comfortably."""

    solutions: tuple[str, ...]
    recommended_recruitment: tuple[Role, ...]
    alternative_assignments: dict[str, tuple[Role, ...]] = field(default_factory=dict)
