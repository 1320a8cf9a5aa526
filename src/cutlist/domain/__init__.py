"""Domain layer - cut list value objects and allocation entities."""

from .entities import Board, Lane, Solution
from .value_objects import (
    DIMENSION_RESOLUTION,
    FIT_TOLERANCE,
    BoardStock,
    CutRequest,
    CutSpec,
    FitPolicy,
    PlanInput,
)

__all__ = [
    "DIMENSION_RESOLUTION",
    "FIT_TOLERANCE",
    "Board",
    "BoardStock",
    "CutRequest",
    "CutSpec",
    "FitPolicy",
    "Lane",
    "PlanInput",
    "Solution",
]
