"""
Team balancing entry point.

balance() validates the pool, dispatches once to the strategy for the chosen
method and always hands back a complete 5v5 result. Degraded outcomes are
flagged on the result instead of raised.
"""

import logging
import random
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from config import POOL_SIZE
from domain.exceptions import InvalidCaptainError, SearchBudgetExhausted
from domain.models.balancing import BalancingMethod, BalancingResult, FeasibilityReport
from domain.models.formation import RoleSuggestions, TeamFormationAnalysis
from domain.models.player import Player
from domain.models.role import Role
from domain.models.team import TeamSplit
from domain.services.draft_service import DraftService
from domain.services.formation_service import FormationService
from domain.services.result_assembler import ResultAssembler
from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.search import best_of
from domain.services.team_balancing_service import TeamBalancingService
from services.error_codes import (
    DUPLICATE_PLAYER,
    INPUT_COUNT_ERROR,
    INTERNAL_ERROR,
    INVALID_CAPTAIN,
    INVALID_METHOD,
    INVALID_PLAYER,
    ROLE_INFEASIBLE,
    SEARCH_BUDGET_EXHAUSTED,
)
from services.result import Result
from utils.debug_logging import debug_log

logger = logging.getLogger("scrim_balancer.balancer")


@dataclass(frozen=True)
class BalanceRequest:
    """Validated input handed to a strategy."""

    players: tuple[Player, ...]
    method: BalancingMethod
    captain_a_id: str | None = None
    captain_b_id: str | None = None
    rng: random.Random | None = None


class BalancingStrategy(ABC):
    """One way of forming the two teams."""

    method: BalancingMethod

    def __init__(self, balancer: "TeamBalancer"):
        self.balancer = balancer

    @abstractmethod
    def run(self, request: BalanceRequest) -> BalancingResult:
        """Form both teams for a validated request."""


class SmartStrategy(BalancingStrategy):
    """Role-constrained search, dealing a snake draft when it cannot finish."""

    method = BalancingMethod.SMART

    def run(self, request: BalanceRequest) -> BalancingResult:
        balancer = self.balancer
        players = request.players

        report = balancer.role_service.validate_role_coverage(players)
        if not report.feasible:
            issues = balancer.role_service.describe_coverage_issues(report)
            logger.warning(f"Role coverage check failed: {issues}")
            return balancer.snake_fallback(
                players,
                self.method,
                f"Not enough players for: {issues}. Teams were dealt by strength instead.",
                warning_code=ROLE_INFEASIBLE,
                missing_roles=report.missing_roles,
            )

        try:
            split = self._search(players)
        except SearchBudgetExhausted as exc:
            logger.warning(f"Role-constrained search gave up: {exc}")
            return balancer.snake_fallback(
                players,
                self.method,
                "Could not find a split with every role filled. "
                "Teams were dealt by strength instead.",
                warning_code=SEARCH_BUDGET_EXHAUSTED,
            )

        return balancer.assembler.from_split(
            split,
            self.method,
            f"Balanced with every role filled on both teams "
            f"(difference {split.score_difference}).",
        )

    def _search(self, players: Sequence[Player]) -> TeamSplit:
        tried = 0

        def splits():
            nonlocal tried
            for assignment in self.balancer.role_service.generate_role_assignments(players):
                tried += 1
                try:
                    yield self.balancer.team_service.optimize_team_split(assignment, players)
                except SearchBudgetExhausted as exc:
                    logger.info(f"Skipping role assignment {tried}: {exc}")

        outcome = best_of(splits(), key=lambda split: split.score_difference, stop_at=0)
        if not outcome.found:
            raise SearchBudgetExhausted("role assignment", tried)
        return outcome.best


class DraftStrategy(BalancingStrategy):
    """Captains alternately pick the remaining players."""

    method = BalancingMethod.DRAFT

    def run(self, request: BalanceRequest) -> BalancingResult:
        balancer = self.balancer
        players = request.players
        report = balancer.role_service.validate_role_coverage(players)

        try:
            captains = balancer.draft_service.select_captains(
                players, request.captain_a_id, request.captain_b_id
            )
        except ValueError as exc:
            raise InvalidCaptainError(
                str(exc), captain_a_id=request.captain_a_id, captain_b_id=request.captain_b_id
            ) from exc

        outcome = balancer.draft_service.run_draft(players, captains)
        roles = {
            **balancer.role_service.recommend_roles(outcome.team_a),
            **balancer.role_service.recommend_roles(outcome.team_b),
        }

        message = (
            f"Captains {captains.captain_a.display_name} and "
            f"{captains.captain_b.display_name} drafted the teams."
        )
        warning_code = None
        if not report.feasible:
            message += (
                f" Not enough players for: "
                f"{balancer.role_service.describe_coverage_issues(report)}."
            )
            warning_code = ROLE_INFEASIBLE

        return balancer.assembler.assemble_result(
            outcome.team_a,
            outcome.team_b,
            roles,
            self.method,
            message,
            warning_code=warning_code,
            missing_roles=report.missing_roles,
        )


class RandomStrategy(BalancingStrategy):
    """Shuffle and bisect; roles are recommended for display only."""

    method = BalancingMethod.RANDOM

    def run(self, request: BalanceRequest) -> BalancingResult:
        balancer = self.balancer
        team_a, team_b = balancer.team_service.random_split(request.players, request.rng)
        roles_a = balancer.role_service.recommend_roles(team_a)
        roles_b = balancer.role_service.recommend_roles(team_b)

        message = "Teams were shuffled at random."
        if not (
            balancer.role_service.is_role_complete(roles_a)
            and balancer.role_service.is_role_complete(roles_b)
        ):
            message += " Not every role could be filled on both teams."

        return balancer.assembler.assemble_result(
            team_a, team_b, {**roles_a, **roles_b}, self.method, message
        )


class TeamBalancer:
    """
    Splits ten players into two balanced five-player teams.

    Search caps default to BALANCER_SETTINGS and can be overridden per instance.
    """

    def __init__(
        self,
        max_split_combinations: int | None = None,
        max_role_assignments: int | None = None,
        draft_role_need_weight: float | None = None,
    ):
        self.role_service = RoleAssignmentService(max_role_assignments=max_role_assignments)
        self.team_service = TeamBalancingService(max_split_combinations=max_split_combinations)
        self.draft_service = DraftService(
            role_need_weight=draft_role_need_weight, role_service=self.role_service
        )
        self.assembler = ResultAssembler(team_service=self.team_service)
        self.formation_service = FormationService(role_service=self.role_service)
        self._strategies: dict[BalancingMethod, BalancingStrategy] = {
            strategy.method: strategy
            for strategy in (SmartStrategy(self), DraftStrategy(self), RandomStrategy(self))
        }

    def balance(
        self,
        players: Sequence[Player],
        method: BalancingMethod | str = BalancingMethod.SMART,
        captain_a_id: str | None = None,
        captain_b_id: str | None = None,
        rng: random.Random | None = None,
    ) -> Result[BalancingResult]:
        """
        Split the pool into two teams with the chosen method.

        Args:
            players: Exactly ten players with unique ids
            method: "smart", "draft" or "random" (or a BalancingMethod)
            captain_a_id: Draft mode only, captain who picks first
            captain_b_id: Draft mode only, second captain
            rng: Random source for the random method

        Returns:
            Result.ok(BalancingResult), or Result.fail with INPUT_COUNT_ERROR,
            INVALID_PLAYER, DUPLICATE_PLAYER, INVALID_METHOD or INVALID_CAPTAIN
        """
        try:
            players = tuple(players)
            checked = self._validate_request(players, method)
        except Exception as exc:
            logger.exception("Could not read the player pool")
            return Result.fail(
                f"Could not read the player pool ({type(exc).__name__}: {exc})",
                code=INVALID_PLAYER,
                details={"exception": type(exc).__name__},
            )
        if not checked.success:
            return checked
        resolved = checked.value

        request = BalanceRequest(
            players=players,
            method=resolved,
            captain_a_id=captain_a_id,
            captain_b_id=captain_b_id,
            rng=rng,
        )
        debug_log(
            "input",
            "balancer.py:TeamBalancer.balance",
            f"Balancing with {resolved.value}",
            {"players": [p.id for p in players], "captains": [captain_a_id, captain_b_id]},
        )

        try:
            result = self._strategies[resolved].run(request)
        except InvalidCaptainError as exc:
            logger.info(f"Rejected captains: {exc}")
            return Result.fail(
                str(exc),
                code=INVALID_CAPTAIN,
                details={"captain_a_id": exc.captain_a_id, "captain_b_id": exc.captain_b_id},
            )
        except Exception as exc:
            logger.exception(f"Balancing failed with method {resolved.value}")
            result = self.assembler.generic_failure(
                players,
                resolved,
                f"Balancing failed ({type(exc).__name__}: {exc}). "
                f"Players were split in input order.",
                warning_code=INTERNAL_ERROR,
            )

        logger.info(
            f"{resolved.value}: {result.score_a} vs {result.score_b} "
            f"(diff={result.score_difference}, role_feasible={result.role_feasible}, "
            f"warning={result.warning_code})"
        )
        debug_log(
            "result",
            "balancer.py:TeamBalancer.balance",
            result.message,
            {
                "team_a": result.team_a_ids,
                "team_b": result.team_b_ids,
                "score_a": result.score_a,
                "score_b": result.score_b,
                "role_feasible": result.role_feasible,
                "warning_code": result.warning_code,
            },
        )
        return Result.ok(result)

    def _validate_request(
        self, players: tuple[Player, ...], method: BalancingMethod | str
    ) -> Result[BalancingMethod]:
        """Check pool size, entry types, id uniqueness and the method name."""
        if len(players) != POOL_SIZE:
            return Result.fail(
                f"Need exactly {POOL_SIZE} players, got {len(players)}",
                code=INPUT_COUNT_ERROR,
                details={"actual_count": len(players)},
            )

        invalid = [i for i, p in enumerate(players) if not isinstance(p, Player)]
        if invalid:
            return Result.fail(
                f"Pool entries at positions {', '.join(map(str, invalid))} are not players",
                code=INVALID_PLAYER,
                details={"invalid_positions": invalid},
            )

        counts = Counter(p.id for p in players)
        duplicates = sorted((pid for pid, count in counts.items() if count > 1), key=str)
        if duplicates:
            return Result.fail(
                f"Players listed more than once: {', '.join(map(str, duplicates))}",
                code=DUPLICATE_PLAYER,
                details={"duplicate_ids": duplicates},
            )

        try:
            return Result.ok(BalancingMethod.parse(method))
        except ValueError:
            valid = ", ".join(m.value for m in BalancingMethod)
            return Result.fail(
                f"Unknown balancing method {method!r}; expected one of {valid}",
                code=INVALID_METHOD,
                details={"method": str(method)},
            )

    def snake_fallback(
        self,
        players: Sequence[Player],
        method: BalancingMethod,
        message: str,
        warning_code: str,
        missing_roles: Sequence[Role] = (),
    ) -> BalancingResult:
        """Deal a snake draft by strength and recommend roles afterwards."""
        team_a, team_b = self.team_service.snake_draft_split(players)
        roles = {
            **self.role_service.recommend_roles(team_a),
            **self.role_service.recommend_roles(team_b),
        }
        return self.assembler.assemble_result(
            team_a,
            team_b,
            roles,
            method,
            message,
            fallback_used=True,
            warning_code=warning_code,
            missing_roles=missing_roles,
        )

    def check_feasibility(self, players: Sequence[Player]) -> FeasibilityReport:
        """Check that every role has a candidate for each team."""
        return self.role_service.validate_role_coverage(players)

    def analyze_team_formation(self, players: Sequence[Player]) -> TeamFormationAnalysis:
        """Score how comfortably the players cover each role."""
        return self.formation_service.analyze_team_formation(players)

    def suggest_role_solutions(self, players: Sequence[Player]) -> RoleSuggestions:
        """Suggest recruits or sub roles that would fix weak role coverage."""
        analysis = self.formation_service.analyze_team_formation(players)
        return self.formation_service.suggest_role_solutions(analysis)


_default_balancer = TeamBalancer()


def balance(
    players: Sequence[Player],
    method: BalancingMethod | str = BalancingMethod.SMART,
    captain_a_id: str | None = None,
    captain_b_id: str | None = None,
    rng: random.Random | None = None,
) -> Result[BalancingResult]:
    """Balance with the default caps. See TeamBalancer.balance."""
    return _default_balancer.balance(
        players,
        method=method,
        captain_a_id=captain_a_id,
        captain_b_id=captain_b_id,
        rng=rng,
    )
