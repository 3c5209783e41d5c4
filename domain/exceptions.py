"""
Exceptions raised inside the balancing pipeline.

These never escape balance(): search failures degrade to a fallback reported
through BalancingResult.warning_code, and captain errors become a failed Result.
"""


class BalancerError(Exception):
    """Base exception for balancing engine errors."""

    pass


class SearchBudgetExhausted(BalancerError):
    """Raised when a bounded search stage produces no complete solution."""

    def __init__(self, stage: str, explored: int, reason: str | None = None):
        self.stage = stage
        self.explored = explored
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"{stage} found no complete solution after {explored} candidates{detail}")


class InvalidCaptainError(BalancerError):
    """Raised when draft captains are missing from the pool or not distinct."""

    def __init__(self, message: str, captain_a_id: str | None = None, captain_b_id: str | None = None):
        self.captain_a_id = captain_a_id
        self.captain_b_id = captain_b_id
        super().__init__(message)
