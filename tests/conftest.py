"""Pytest configuration and shared fixtures for cut list tests."""

from __future__ import annotations

import random

import pytest

from cutlist.domain.value_objects import BoardStock, CutSpec, PlanInput


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so search results are reproducible."""
    return random.Random(1234)


@pytest.fixture
def apron_plan() -> PlanInput:
    """Two 18x3 aprons on a single 96x8 stock size."""
    return PlanInput(
        boards=(BoardStock(length=96, width=8, id="A"),),
        cutlist=(CutSpec(length=18, width=3, count=2, name="Apron"),),
    )


@pytest.fixture
def table_plan() -> PlanInput:
    """A small table's worth of parts on two stock sizes."""
    return PlanInput(
        boards=(
            BoardStock(length=96, width=8, id="A"),
            BoardStock(length=48, width=5.5, id="B"),
        ),
        cutlist=(
            CutSpec(length=28, width=1.5, count=4, name="Leg"),
            CutSpec(length=18, width=3, count=2, name="Apron"),
            CutSpec(length=40, width=5, count=3, name="Shelf"),
            CutSpec(length=12, width=2, count=6, name="Rail"),
        ),
    )
