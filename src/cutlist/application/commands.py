"""Application commands (use cases) for cut list planning."""

from __future__ import annotations

import random
import threading

from cutlist.domain.value_objects import PlanInput
from cutlist.infrastructure.bin_packing import CutlistSearch, SearchConfig

from .dtos import PlanOutput


class PlanCutlistCommand:
    """Searches for the best arrangements of a cut list on stock boards."""

    def __init__(
        self,
        config: SearchConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.rng = rng

    def execute(
        self,
        plan: PlanInput,
        cancel_event: threading.Event | None = None,
    ) -> PlanOutput:
        """Run the search and package the outcome.

        An infeasible plan or a search where every attempt failed yields a
        PlanOutput with errors rather than an exception.
        """
        search = CutlistSearch(self.config, self.rng)
        outcome = search.search(plan, cancel_event)

        output = PlanOutput(
            plan=plan,
            solutions=list(outcome.solutions),
            attempts_run=outcome.attempts_run,
            success_count=outcome.success_count,
        )

        for cut in outcome.feasibility.infeasible_cuts:
            output.errors.append(
                f"No stock board can hold '{cut.id}' ({cut.length:g} x {cut.width:g})"
            )
        if outcome.feasibility.is_feasible and not outcome.found_solution:
            output.errors.append(
                f"No viable solution found in {outcome.attempts_run} attempts"
            )
        return output
