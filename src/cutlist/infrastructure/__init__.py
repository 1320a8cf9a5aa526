"""Infrastructure layer - allocation engine, renderers and formatters."""

from .bin_packing import (
    BoardVendor,
    CutlistSearch,
    FeasibilityReport,
    LaneAllocator,
    SearchConfig,
    SearchOutcome,
    check_feasibility,
    compute,
    rank_solutions,
    score,
)
from .cut_diagram_renderer import CutDiagramRenderer, PlacedCut, place_cuts
from .formatters import JsonExporter, SolutionFormatter

__all__ = [
    # Allocation and search
    "BoardVendor",
    "CutlistSearch",
    "FeasibilityReport",
    "LaneAllocator",
    "SearchConfig",
    "SearchOutcome",
    "check_feasibility",
    "compute",
    "rank_solutions",
    "score",
    # Cut diagram rendering
    "CutDiagramRenderer",
    "PlacedCut",
    "place_cuts",
    # Formatters
    "JsonExporter",
    "SolutionFormatter",
]
