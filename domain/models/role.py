"""
Role domain model.
"""

from enum import Enum


class Role(Enum):
    """The five positions every team must fill, one player each."""

    TOP = "top"
    JUNGLE = "jungle"
    MID = "mid"
    ADC = "adc"
    SUPPORT = "support"

    @classmethod
    def parse(cls, value: "Role | str") -> "Role":
        """Accept a Role or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    def __str__(self) -> str:
        return self.value


# Declaration order doubles as the stable tie-break order
ROLES: tuple[Role, ...] = tuple(Role)
