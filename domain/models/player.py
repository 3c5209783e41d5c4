"""
Player domain model.
"""

from dataclasses import dataclass, field
from functools import cached_property

from domain.models.role import Role
from domain.models.tier import RankTier


@dataclass(frozen=True)
class GameStats:
    """
    Snapshot of a player's match history.

    Supplied by the caller; the engine only reads it.
    """

    total_wins: int = 0
    total_losses: int = 0
    main_role_games: int = 0
    main_role_wins: int = 0
    sub_role_games: int = 0
    sub_role_wins: int = 0

    @property
    def total_games(self) -> int:
        return self.total_wins + self.total_losses


@dataclass(frozen=True)
class Player:
    """
    Represents a player in a balancing pool.

    This is a pure domain model with no infrastructure dependencies.
    Roles may be passed as Role members or their string values.
    """

    id: str
    display_name: str
    rank_tier: RankTier | str
    main_role: Role
    sub_roles: frozenset[Role] = field(default_factory=frozenset)
    stats: GameStats = field(default_factory=GameStats)

    MAX_SUB_ROLES = 4

    def __post_init__(self):
        main_role = Role.parse(self.main_role)
        sub_roles = frozenset(Role.parse(role) for role in self.sub_roles)
        if main_role in sub_roles:
            raise ValueError(
                f"Player {self.id}: main role {main_role} cannot also be a sub role"
            )
        if len(sub_roles) > self.MAX_SUB_ROLES:
            raise ValueError(
                f"Player {self.id}: at most {self.MAX_SUB_ROLES} sub roles allowed, "
                f"got {len(sub_roles)}"
            )
        object.__setattr__(self, "main_role", main_role)
        object.__setattr__(self, "sub_roles", sub_roles)

    @cached_property
    def strength_score(self) -> int:
        """Blended tier and win-rate strength from the score model."""
        # Import here to avoid circular import at module level
        from domain.services.score_model import strength

        return strength(self.rank_tier, self.stats)

    @property
    def eligible_roles(self) -> frozenset[Role]:
        return self.sub_roles | {self.main_role}

    def can_play(self, role: Role) -> bool:
        """Check if the player lists the role as main or sub role."""
        return role == self.main_role or role in self.sub_roles

    def is_exclusive_to(self, role: Role) -> bool:
        """True when the role is the only one the player can fill."""
        return not self.sub_roles and self.main_role == role

    def __str__(self) -> str:
        tier = self.rank_tier.value if isinstance(self.rank_tier, RankTier) else self.rank_tier
        return f"{self.display_name} ({tier}, {self.main_role})"
