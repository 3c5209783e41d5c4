"""
Standard error and warning codes for the balancing engine.

Error codes mark a failed Result; warning codes mark a successful result
that degraded to a fallback (BalancingResult.warning_code).

Usage:
    from services.error_codes import INPUT_COUNT_ERROR
    from services.result import Result

    if len(players) != POOL_SIZE:
        return Result.fail("Need exactly 10 players", code=INPUT_COUNT_ERROR)
"""

# Input errors (Result.fail)
INPUT_COUNT_ERROR = "input_count_error"
DUPLICATE_PLAYER = "duplicate_player"
INVALID_METHOD = "invalid_method"
INVALID_CAPTAIN = "invalid_captain"
INVALID_PLAYER = "invalid_player"

# Degraded results (Result.ok with BalancingResult.warning_code)
ROLE_INFEASIBLE = "role_infeasible"
SEARCH_BUDGET_EXHAUSTED = "search_budget_exhausted"
INTERNAL_ERROR = "internal_error"
