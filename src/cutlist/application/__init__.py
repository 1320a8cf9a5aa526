"""Application layer - use cases and orchestration."""

from .commands import PlanCutlistCommand
from .dtos import PlanOutput

__all__ = [
    "PlanCutlistCommand",
    "PlanOutput",
]
