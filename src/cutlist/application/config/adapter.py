"""Conversion from configuration models to domain objects."""

from __future__ import annotations

from cutlist.application.config.schema import CutlistConfiguration
from cutlist.domain.value_objects import BoardStock, CutSpec, PlanInput
from cutlist.infrastructure.bin_packing import SearchConfig


def config_to_plan_input(config: CutlistConfiguration) -> PlanInput:
    """Convert a validated configuration to the planning input.

    Args:
        config: Validated cut list configuration.

    Returns:
        PlanInput with boards and cuts in file order.
    """
    return PlanInput(
        boards=tuple(
            BoardStock(length=board.length, width=board.width, id=board.id)
            for board in config.boards
        ),
        cutlist=tuple(
            CutSpec(length=cut.length, width=cut.width, count=cut.count, name=cut.name)
            for cut in config.cutlist
        ),
        spacing=config.spacing,
    )


def config_to_search_config(config: CutlistConfiguration) -> SearchConfig:
    """Convert the search section of a configuration to a SearchConfig."""
    search = config.search
    return SearchConfig(
        attempts=search.attempts,
        result_count=search.results,
        fit=search.fit.to_domain(),
        seed=search.seed,
    )
