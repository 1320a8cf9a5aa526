"""Tests for the cut list configuration models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from cutlist.application.config.schema import (
    BoardStockSchema,
    CutlistConfiguration,
    CutSpecSchema,
    FitPolicyConfig,
    SearchConfigSchema,
)
from cutlist.domain.value_objects import FitPolicy


def minimal(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {"boards": ["96x8:A"], "cutlist": ["2@18x3:Apron"]}
    data.update(overrides)
    return data


class TestCompactForms:
    """Tests for string shorthand in boards and cutlist."""

    def test_board_string(self) -> None:
        config = CutlistConfiguration.model_validate(minimal())
        assert config.boards == [BoardStockSchema(length=96, width=8, id="A")]

    def test_cut_string(self) -> None:
        config = CutlistConfiguration.model_validate(minimal())
        assert config.cutlist == [CutSpecSchema(count=2, length=18, width=3, name="Apron")]

    def test_strings_and_objects_mix(self) -> None:
        config = CutlistConfiguration.model_validate(
            minimal(
                boards=["96x8:A", {"length": 48, "width": 5.5, "id": "B"}],
                cutlist=["2@18x3:Apron", {"length": 40, "width": 5, "name": "Shelf"}],
            )
        )
        assert [board.id for board in config.boards] == ["A", "B"]
        assert config.cutlist[1].count == 1

    def test_bad_board_string(self) -> None:
        with pytest.raises(ValidationError, match="Invalid board format"):
            CutlistConfiguration.model_validate(minimal(boards=["96:A"]))

    def test_bad_cut_string(self) -> None:
        with pytest.raises(ValidationError, match="Invalid cut format"):
            CutlistConfiguration.model_validate(minimal(cutlist=["18x3:Apron"]))

    def test_non_positive_cut_string(self) -> None:
        with pytest.raises(ValidationError, match="Count must be at least 1"):
            CutlistConfiguration.model_validate(minimal(cutlist=["0@18x3:Apron"]))


class TestCutlistConfiguration:
    """Tests for root-level fields and defaults."""

    def test_defaults(self) -> None:
        config = CutlistConfiguration.model_validate(minimal())
        assert config.schema_version == "1.0"
        assert config.spacing == 0.0
        assert config.search == SearchConfigSchema()

    def test_margin_alias(self) -> None:
        config = CutlistConfiguration.model_validate(minimal(margin=0.125))
        assert config.spacing == 0.125

    def test_negative_spacing_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CutlistConfiguration.model_validate(minimal(spacing=-1))

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError, match="kerf"):
            CutlistConfiguration.model_validate(minimal(kerf=0.125))

    def test_unsupported_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version: 2.0"):
            CutlistConfiguration.model_validate(minimal(schema_version="2.0"))

    @pytest.mark.parametrize("field", ["boards", "cutlist"])
    def test_empty_lists_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            CutlistConfiguration.model_validate(minimal(**{field: []}))

    def test_board_object_requires_positive_width(self) -> None:
        with pytest.raises(ValidationError):
            CutlistConfiguration.model_validate(
                minimal(boards=[{"length": 96, "width": 0, "id": "A"}])
            )


class TestSearchConfigSchema:
    """Tests for search settings."""

    def test_defaults(self) -> None:
        search = SearchConfigSchema()
        assert search.attempts == 1000
        assert search.results == 1
        assert search.seed is None
        assert search.fit is FitPolicyConfig.INCLUSIVE

    @pytest.mark.parametrize(
        "values",
        [{"attempts": 0}, {"attempts": 1_000_001}, {"results": 0}, {"fit": "loose"}],
    )
    def test_out_of_range(self, values: dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            SearchConfigSchema.model_validate(values)

    def test_fit_to_domain(self) -> None:
        assert FitPolicyConfig.STRICT.to_domain() is FitPolicy.STRICT
        assert FitPolicyConfig.INCLUSIVE.to_domain() is FitPolicy.INCLUSIVE
