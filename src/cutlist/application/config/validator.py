"""Validation results and cut list advisories.

Schema validation happens when the file is loaded. The checks here look at
the plan as a whole: cuts that no stock can hold are errors, while
questionable but usable settings are reported as warnings.
"""

from dataclasses import dataclass, field
from typing import Any

from cutlist.application.config.adapter import config_to_plan_input
from cutlist.application.config.schema import CutlistConfiguration
from cutlist.infrastructure.bin_packing import check_feasibility

# Spacing above this is unusual for a saw kerf allowance
MAX_TYPICAL_SPACING = 0.5


@dataclass
class ValidationError:
    """A blocking problem that prevents planning.

    Attributes:
        path: JSON path to the offending field (e.g. "cutlist[2]")
        message: Human-readable description
        value: The offending value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern about the plan.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description
        suggestion: Optional remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected for one configuration."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def validate_config(config: CutlistConfiguration) -> ValidationResult:
    """Check a loaded configuration for unplaceable cuts and odd settings.

    Every cut (including spacing) must fit on at least one stock board in
    both dimensions under the configured fit policy.
    """
    result = ValidationResult()
    plan = config_to_plan_input(config)
    fit = config.search.fit.to_domain()
    report = check_feasibility(plan.boards, plan.expand_cuts(), fit)
    infeasible = set(report.infeasible_cuts)

    for index, spec in enumerate(plan.cutlist):
        cut = spec.expand(plan.spacing)[0]
        if cut not in infeasible:
            continue
        if not any(fit.fits(cut.width, board.width) for board in plan.boards):
            result.add_error(
                f"cutlist[{index}]",
                f"Cut '{spec.name}' is {cut.width:g} wide with spacing; "
                f"no board is wide enough",
                value=cut.width,
            )
        else:
            result.add_error(
                f"cutlist[{index}]",
                f"Cut '{spec.name}' is {cut.length:g} long with spacing; "
                f"no board wide enough for it is long enough",
                value=cut.length,
            )

    seen: dict[str, int] = {}
    for index, board in enumerate(plan.boards):
        if board.id in seen:
            result.add_warning(
                f"boards[{index}].id",
                f"Board id '{board.id}' is also used by boards[{seen[board.id]}]",
                suggestion="Give each stock size its own id so plans are unambiguous",
            )
        else:
            seen[board.id] = index

    if plan.spacing > MAX_TYPICAL_SPACING:
        result.add_warning(
            "spacing",
            f"Spacing of {plan.spacing:g} is larger than a typical saw kerf",
            suggestion="Spacing is added to both dimensions of every cut",
        )

    return result
