"""Tests for plan-level configuration checks."""

from __future__ import annotations

from typing import Any

from cutlist.application.config import (
    config_to_plan_input,
    load_config_from_dict,
    validate_config,
)
from cutlist.application.config.validator import ValidationResult
from cutlist.infrastructure.bin_packing import check_feasibility


def check(**data: Any) -> ValidationResult:
    data.setdefault("boards", ["96x8:A"])
    data.setdefault("cutlist", ["2@18x3:Apron"])
    return validate_config(load_config_from_dict(data))


class TestValidationResult:
    """Tests for exit code mapping."""

    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.exit_code == 0
        result.add_warning("spacing", "odd")
        assert result.exit_code == 2
        result.add_error("cutlist[0]", "bad")
        assert result.exit_code == 1
        assert not result.is_valid


class TestValidateConfig:
    """Tests for validate_config."""

    def test_clean_plan(self) -> None:
        result = check()
        assert result.is_valid
        assert not result.has_warnings

    def test_cut_too_wide(self) -> None:
        result = check(boards=["96x4:A"], cutlist=["1@30x5:Wide Panel"])
        [error] = result.errors
        assert error.path == "cutlist[0]"
        assert "no board is wide enough" in error.message

    def test_cut_too_long(self) -> None:
        result = check(boards=["96x4:A", "20x8:B"], cutlist=["1@30x5:Top"])
        [error] = result.errors
        assert "long enough" in error.message

    def test_spacing_counts_toward_size(self) -> None:
        result = check(boards=["96x3:A"], cutlist=["1@18x3:Apron"], spacing=0.125)
        assert not result.is_valid

    def test_strict_fit_rejects_exact_width(self) -> None:
        assert check(boards=["96x3:A"], cutlist=["1@18x3:Apron"]).is_valid
        result = check(
            boards=["96x3:A"], cutlist=["1@18x3:Apron"], search={"fit": "strict"}
        )
        assert not result.is_valid

    def test_duplicate_board_id_warns(self) -> None:
        result = check(boards=["96x8:A", "48x8:A"])
        assert result.is_valid
        [warning] = result.warnings
        assert warning.path == "boards[1].id"
        assert "boards[0]" in warning.message

    def test_large_spacing_warns(self) -> None:
        result = check(margin=0.75)
        [warning] = result.warnings
        assert warning.path == "spacing"
        assert warning.suggestion

    def test_spacing_pushes_cut_past_board_length(self) -> None:
        result = check(boards=["20x8:A"], cutlist=["1@19.9x2:Rail"], spacing=0.125)
        [error] = result.errors
        assert "20.025 long with spacing" in error.message

    def test_errors_match_search_feasibility(self) -> None:
        config = load_config_from_dict(
            {
                "spacing": 0.125,
                "boards": ["96x4:A", "20x8:B"],
                "cutlist": ["1@30x5:Top", "2@18x3:Apron", "1@10x7.8:Block", "1@12x8:Wide"],
                "search": {"fit": "strict"},
            }
        )
        plan = config_to_plan_input(config)
        report = check_feasibility(plan.boards, plan.expand_cuts(), config.search.fit.to_domain())

        result = validate_config(config)
        assert [error.path for error in result.errors] == ["cutlist[0]", "cutlist[3]"]
        assert {cut.id for cut in report.infeasible_cuts} == {"Top", "Wide"}
