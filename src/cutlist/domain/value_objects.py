"""Value objects for cut list planning.

All value objects are frozen dataclasses. Dimensions are in the same
(unitless) measure as the input, typically inches.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

# Sub-unit resolution used when comparing cut dimensions. Coordinates built
# by repeated addition drift slightly, so equality is checked on 1/512 steps.
DIMENSION_RESOLUTION = 512

# Slack allowed by FitPolicy.INCLUSIVE when a dimension exactly fills a limit.
FIT_TOLERANCE = 1e-9

_BOARD_PATTERN = re.compile(r"^\s*([^x@:]+)x([^x:]+):(.*)$")
_CUT_PATTERN = re.compile(r"^\s*([^@]+)@([^x:]+)x([^x:]+):(.*)$")


class FitPolicy(str, Enum):
    """How a dimension is compared against the room available for it.

    INCLUSIVE accepts an exact fit (a 4" cut in a 4" wide board).
    STRICT requires the available room to be larger than the dimension.
    """

    INCLUSIVE = "inclusive"
    STRICT = "strict"

    def fits(self, size: float, limit: float) -> bool:
        """Return True if ``size`` fits within ``limit`` under this policy."""
        if self is FitPolicy.STRICT:
            return size < limit
        return size <= limit + FIT_TOLERANCE


def _parse_positive(text: str, what: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"{what} must be a number, got {text!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{what} must be greater than 0")
    return value


@dataclass(frozen=True)
class BoardStock:
    """A stock board size that may be vended any number of times.

    Attributes:
        length: Length along the crosscut axis.
        width: Width along the rip axis.
        id: Identifier shown on reports (e.g. "A" or "1x6 Oak").
    """

    length: float
    width: float
    id: str

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Board length must be greater than 0")
        if self.width <= 0:
            raise ValueError("Board width must be greater than 0")
        if not self.id:
            raise ValueError("Board id must be non-empty")

    @classmethod
    def parse(cls, spec: str) -> BoardStock:
        """Parse a board in the form ``<length>x<width>:<id>``.

        Examples:
            >>> BoardStock.parse("96x6.5:A")
            BoardStock(length=96.0, width=6.5, id='A')
        """
        match = _BOARD_PATTERN.match(spec)
        if match is None:
            raise ValueError(f"Invalid board format: {spec!r} (expected LENGTHxWIDTH:ID)")
        length, width, board_id = match.groups()
        return cls(
            length=_parse_positive(length, "Board length"),
            width=_parse_positive(width, "Board width"),
            id=board_id,
        )

    @property
    def area(self) -> float:
        """Area of one board of this stock."""
        return self.length * self.width


@dataclass(frozen=True)
class CutSpec:
    """A required cut and how many of it are needed."""

    length: float
    width: float
    count: int
    name: str

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("Count must be at least 1")
        if self.length <= 0:
            raise ValueError("Cut length must be greater than 0")
        if self.width <= 0:
            raise ValueError("Cut width must be greater than 0")

    @classmethod
    def parse(cls, spec: str) -> CutSpec:
        """Parse a cut in the form ``<count>@<length>x<width>:<name>``.

        The name may contain spaces but must be present.

        Examples:
            >>> CutSpec.parse("2@12x4:Apron")
            CutSpec(length=12.0, width=4.0, count=2, name='Apron')
        """
        match = _CUT_PATTERN.match(spec)
        if match is None:
            raise ValueError(
                f"Invalid cut format: {spec!r} (expected COUNT@LENGTHxWIDTH:NAME)"
            )
        count_text, length, width, name = match.groups()
        try:
            count = int(count_text.strip())
        except ValueError:
            raise ValueError(f"Count must be an integer, got {count_text!r}") from None
        if not name:
            raise ValueError(f"Invalid cut format: {spec!r} (name is required)")
        return cls(
            length=_parse_positive(length, "Cut length"),
            width=_parse_positive(width, "Cut width"),
            count=count,
            name=name,
        )

    def expand(self, spacing: float = 0.0) -> list[CutRequest]:
        """Expand into one CutRequest per unit, each grown by ``spacing``."""
        return [
            CutRequest(
                length=self.length + spacing,
                width=self.width + spacing,
                id=self.name,
            )
            for _ in range(self.count)
        ]


@dataclass(frozen=True, eq=False)
class CutRequest:
    """One physical piece to be cut.

    Equality and hashing compare dimensions at 1/512 resolution so that
    values reached by different arithmetic paths still match.
    """

    length: float
    width: float
    id: str

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Cut dimensions must be positive")

    def _key(self) -> tuple[int, int, str]:
        return (
            math.floor(self.length * DIMENSION_RESOLUTION),
            math.floor(self.width * DIMENSION_RESOLUTION),
            self.id,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CutRequest):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def area(self) -> float:
        """Area of the piece."""
        return self.length * self.width


@dataclass(frozen=True)
class PlanInput:
    """Validated planning input: spacing, stock catalog and cut list.

    Attributes:
        boards: Stock templates, in catalog order.
        cutlist: Required cuts with their counts.
        spacing: Uniform allowance added to both dimensions of every cut.
    """

    boards: tuple[BoardStock, ...]
    cutlist: tuple[CutSpec, ...]
    spacing: float = 0.0

    def __post_init__(self) -> None:
        if not self.boards:
            raise ValueError("No boards specified")
        if not self.cutlist:
            raise ValueError("No cuts specified")
        if self.spacing < 0:
            raise ValueError("Spacing must be non-negative")

    def expand_cuts(self) -> list[CutRequest]:
        """Expand every CutSpec into individual CutRequests, in input order."""
        cuts: list[CutRequest] = []
        for spec in self.cutlist:
            cuts.extend(spec.expand(self.spacing))
        return cuts

    @property
    def total_cut_count(self) -> int:
        """Number of individual pieces requested."""
        return sum(spec.count for spec in self.cutlist)
