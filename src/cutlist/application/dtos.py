"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cutlist.domain.entities import Solution
from cutlist.domain.value_objects import PlanInput


@dataclass
class PlanOutput:
    """Result of planning a cut list.

    Attributes:
        plan: The planning input that was searched.
        solutions: Ranked solutions, best first. Empty when none was found.
        attempts_run: Number of allocation attempts executed.
        success_count: Attempts that placed every cut.
        errors: Reasons no solution is available.
    """

    plan: PlanInput
    solutions: list[Solution] = field(default_factory=list)
    attempts_run: int = 0
    success_count: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if at least one solution was found."""
        return not self.errors and bool(self.solutions)

    @property
    def best(self) -> Solution | None:
        return self.solutions[0] if self.solutions else None
