"""Lane-based board allocation and randomized search.

This module packs cut requests onto stock boards in two levels: a board is
divided along its length into lanes, and each lane stacks cuts across the
board's width. A single allocation is greedy and depends on the order cuts
are presented in, so the search runs many shuffled attempts and ranks the
successful ones by a multiplicative density score.

All configuration and report dataclasses are frozen.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import Sequence

from cutlist.domain.entities import Board, Solution
from cutlist.domain.value_objects import BoardStock, CutRequest, FitPolicy, PlanInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for the randomized search.

    Attributes:
        attempts: Number of shuffled allocation attempts to run.
        result_count: Maximum number of ranked solutions to return.
        fit: Boundary comparison policy for lane stacking, vending and
            feasibility.
        seed: Seed for the shuffle generator. None draws a fresh seed.
    """

    attempts: int = 1000
    result_count: int = 1
    fit: FitPolicy = FitPolicy.INCLUSIVE
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError("Attempts must be at least 1")
        if self.result_count < 1:
            raise ValueError("Result count must be at least 1")


@dataclass(frozen=True)
class FeasibilityReport:
    """Outcome of the up-front feasibility check.

    Attributes:
        infeasible_cuts: Distinct cuts that no stock template can hold.
    """

    infeasible_cuts: tuple[CutRequest, ...] = ()

    @property
    def is_feasible(self) -> bool:
        return not self.infeasible_cuts


@dataclass(frozen=True)
class SearchOutcome:
    """Everything a search produced.

    Attributes:
        solutions: Ranked solutions, best first, truncated to the result count.
        feasibility: Result of the feasibility check.
        attempts_run: Attempts actually executed (0 when infeasible).
        success_count: Attempts that placed every cut.
        cancelled: True if the search stopped early on request.
    """

    solutions: tuple[Solution, ...]
    feasibility: FeasibilityReport
    attempts_run: int
    success_count: int
    cancelled: bool = False

    @property
    def found_solution(self) -> bool:
        return bool(self.solutions)


def check_feasibility(
    stock: Sequence[BoardStock],
    cuts: Sequence[CutRequest],
    fit: FitPolicy = FitPolicy.INCLUSIVE,
) -> FeasibilityReport:
    """Check that every cut fits on at least one stock template.

    A cut is feasible when a single template is both wide enough and long
    enough for it under ``fit``.

    Args:
        stock: Stock templates.
        cuts: Expanded cut requests.
        fit: Boundary comparison policy.

    Returns:
        FeasibilityReport listing each distinct infeasible cut once.
    """
    infeasible: dict[CutRequest, None] = {}
    for cut in cuts:
        if cut in infeasible:
            continue
        if not any(
            fit.fits(cut.width, template.width) and fit.fits(cut.length, template.length)
            for template in stock
        ):
            infeasible[cut] = None
    return FeasibilityReport(infeasible_cuts=tuple(infeasible))


class BoardVendor:
    """Selects and instantiates stock boards for cuts that fit nowhere else.

    The catalog is sorted by width once, narrowest first, so the vendor
    always picks the narrowest template that can hold the cut.
    """

    def __init__(
        self,
        stock: Sequence[BoardStock],
        fit: FitPolicy = FitPolicy.INCLUSIVE,
    ) -> None:
        self.fit = fit
        self.catalog: tuple[BoardStock, ...] = tuple(
            sorted(stock, key=lambda template: template.width)
        )

    def select(self, cut: CutRequest) -> BoardStock | None:
        """Return the narrowest template that holds ``cut``, or None."""
        for template in self.catalog:
            if self.fit.fits(cut.width, template.width) and self.fit.fits(
                cut.length, template.length
            ):
                return template
        return None

    def vend(self, cut: CutRequest) -> Board | None:
        """Create an empty board suitable for ``cut``, or None."""
        template = self.select(cut)
        if template is None:
            return None
        logger.debug(
            "Vending board %s (%sx%s) for cut %s",
            template.id,
            template.length,
            template.width,
            cut.id,
        )
        return Board.from_stock(template, fit=self.fit)


class LaneAllocator:
    """Greedy placement of an ordered cut sequence onto vended boards.

    Cuts are taken from the end of the sequence. Each cut goes to the first
    existing board that can accept it; when none can, a new board is vended.
    """

    def __init__(self, vendor: BoardVendor) -> None:
        self.vendor = vendor

    def allocate(self, cuts: Sequence[CutRequest]) -> list[Board] | None:
        """Place every cut.

        Args:
            cuts: Cuts in presentation order; the last one is placed first.

        Returns:
            Boards in vending order, or None if some cut could not be placed.
        """
        pending = list(cuts)
        boards: list[Board] = []
        while pending:
            cut = pending.pop()
            if not self._place(cut, boards):
                logger.debug("No board or stock can take cut %s", cut.id)
                return None
        return boards

    def _place(self, cut: CutRequest, boards: list[Board]) -> bool:
        # can_accept and accept share one rule, so the first board that can
        # accept is also the first one whose accept succeeds.
        for board in boards:
            if board.can_accept(cut) and board.accept(cut):
                return True

        board = self.vendor.vend(cut)
        if board is None or not board.accept(cut):
            return False
        boards.append(board)
        return True


def rank_solutions(
    solutions: Sequence[Solution],
    limit: int | None = None,
) -> list[Solution]:
    """Sort solutions by score, best first.

    The sort is stable, so equal scores keep their attempt order.

    Args:
        solutions: Solutions to rank.
        limit: Maximum number to return. None returns all.
    """
    ranked = sorted(solutions, key=lambda solution: solution.score, reverse=True)
    if limit is not None:
        return ranked[:limit]
    return ranked


class CutlistSearch:
    """Runs shuffled allocation attempts and ranks the results.

    Attributes:
        config: Search configuration.
        rng: Random source used to shuffle the cut order.
    """

    def __init__(
        self,
        config: SearchConfig,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the search.

        Args:
            config: Search configuration.
            rng: Shuffle source. Defaults to ``random.Random(config.seed)``.
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

    def search(
        self,
        plan: PlanInput,
        cancel_event: threading.Event | None = None,
    ) -> SearchOutcome:
        """Search for the best arrangements of the plan's cuts.

        Args:
            plan: Stock catalog, cut list and spacing.
            cancel_event: When set, the search stops before the next attempt
                and ranks what it has found so far.

        Returns:
            SearchOutcome with ranked solutions and run statistics.
        """
        cuts = plan.expand_cuts()
        feasibility = check_feasibility(plan.boards, cuts, self.config.fit)
        if not feasibility.is_feasible:
            for cut in feasibility.infeasible_cuts:
                logger.warning(
                    "No stock board can hold cut %s (%sx%s)",
                    cut.id,
                    cut.length,
                    cut.width,
                )
            return SearchOutcome(
                solutions=(),
                feasibility=feasibility,
                attempts_run=0,
                success_count=0,
            )

        allocator = LaneAllocator(BoardVendor(plan.boards, self.config.fit))
        logger.debug(
            "Searching %d attempts over %d cuts and %d stock templates",
            self.config.attempts,
            len(cuts),
            len(plan.boards),
        )

        successes: list[Solution] = []
        attempts_run = 0
        cancelled = False
        for attempt in range(self.config.attempts):
            if cancel_event is not None and cancel_event.is_set():
                logger.warning("Search cancelled after %d attempts", attempts_run)
                cancelled = True
                break
            attempts_run += 1
            self.rng.shuffle(cuts)
            boards = allocator.allocate(cuts)
            if boards is None:
                logger.debug("Attempt %d failed", attempt)
                continue
            solution = Solution(boards=tuple(boards), attempt=attempt)
            logger.debug(
                "Attempt %d succeeded: %d boards, score %.4f",
                attempt,
                len(boards),
                solution.score,
            )
            successes.append(solution)

        ranked = rank_solutions(successes, self.config.result_count)
        if ranked:
            logger.info(
                "Out of %d attempts, found %d viable solutions; best score %.4f",
                attempts_run,
                len(successes),
                ranked[0].score,
            )
        else:
            logger.info("Out of %d attempts, found no viable solution", attempts_run)

        return SearchOutcome(
            solutions=tuple(ranked),
            feasibility=feasibility,
            attempts_run=attempts_run,
            success_count=len(successes),
            cancelled=cancelled,
        )

    def compute(
        self,
        plan: PlanInput,
        cancel_event: threading.Event | None = None,
    ) -> list[Solution] | None:
        """Return the ranked solutions, or None when nothing was found."""
        outcome = self.search(plan, cancel_event)
        if not outcome.found_solution:
            return None
        return list(outcome.solutions)


def compute(
    plan: PlanInput,
    attempts: int,
    result_count: int,
    rng: random.Random | None = None,
    fit: FitPolicy = FitPolicy.INCLUSIVE,
    cancel_event: threading.Event | None = None,
) -> list[Solution] | None:
    """Find up to ``result_count`` best arrangements of the plan's cuts.

    Args:
        plan: Stock catalog, cut list and spacing.
        attempts: Number of shuffled allocation attempts.
        result_count: Maximum number of solutions to return.
        rng: Shuffle source. A fresh generator is used when omitted.
        fit: Boundary comparison policy.
        cancel_event: Optional event checked between attempts.

    Returns:
        Solutions ordered by score, best first, or None if no attempt
        placed every cut.
    """
    config = SearchConfig(attempts=attempts, result_count=result_count, fit=fit)
    return CutlistSearch(config, rng).compute(plan, cancel_event)


def score(solution: Solution | Sequence[Board]) -> float:
    """Score a solution (or a bare board sequence) for display or ranking."""
    if isinstance(solution, Solution):
        return solution.score
    return Solution(boards=tuple(solution)).score
