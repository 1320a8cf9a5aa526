"""Pydantic models for cut list configuration files.

Boards and cuts may be written either as objects or in the compact string
forms ``"96x6.5:A"`` (length x width : id) and ``"2@12x4:Apron"``
(count @ length x width : name).
"""

from enum import Enum
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from cutlist.domain.value_objects import BoardStock, CutSpec, FitPolicy

# Supported schema versions for configuration files
# Version 1.0: Initial schema with boards, cutlist, spacing and search settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class FitPolicyConfig(str, Enum):
    """Boundary comparison policy as written in configuration files."""

    INCLUSIVE = "inclusive"
    STRICT = "strict"

    def to_domain(self) -> FitPolicy:
        return FitPolicy(self.value)


class BoardStockSchema(BaseModel):
    """A stock board size.

    Attributes:
        length: Board length (greater than 0)
        width: Board width (greater than 0)
        id: Identifier shown on reports (non-empty)
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Board length")
    width: float = Field(..., gt=0, description="Board width")
    id: str = Field(..., min_length=1, description="Board identifier")


class CutSpecSchema(BaseModel):
    """A required cut and its quantity.

    Attributes:
        count: Number of identical pieces (at least 1)
        length: Cut length (greater than 0)
        width: Cut width (greater than 0)
        name: Label printed on the plan
    """

    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=1, ge=1, description="Number of pieces")
    length: float = Field(..., gt=0, description="Cut length")
    width: float = Field(..., gt=0, description="Cut width")
    name: str = Field(..., min_length=1, description="Cut label")


class SearchConfigSchema(BaseModel):
    """Settings for the randomized search.

    Attributes:
        attempts: Number of shuffled allocation attempts (1 to 1,000,000)
        results: Number of ranked solutions to report
        seed: Optional seed for reproducible runs
        fit: Whether exact-fit boundaries are accepted
    """

    model_config = ConfigDict(extra="forbid")

    attempts: int = Field(
        default=1000, ge=1, le=1_000_000, description="Allocation attempts"
    )
    results: int = Field(default=1, ge=1, le=100, description="Solutions to report")
    seed: int | None = Field(default=None, description="Shuffle seed")
    fit: FitPolicyConfig = Field(
        default=FitPolicyConfig.INCLUSIVE, description="Boundary comparison policy"
    )


class CutlistConfiguration(BaseModel):
    """Root configuration model for a cut list plan.

    Attributes:
        schema_version: Configuration schema version
        spacing: Allowance added to both dimensions of every cut (alias: margin)
        boards: Available stock board sizes
        cutlist: Required cuts
        search: Search settings
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_version: str = Field(default="1.0", description="Schema version")
    spacing: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("spacing", "margin"),
        description="Per-cut spacing (saw kerf allowance)",
    )
    boards: list[BoardStockSchema] = Field(..., min_length=1)
    cutlist: list[CutSpecSchema] = Field(..., min_length=1)
    search: SearchConfigSchema = Field(default_factory=SearchConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version: {v}. Supported versions: {supported}"
            )
        return v

    @field_validator("boards", mode="before")
    @classmethod
    def parse_compact_boards(cls, v: Any) -> Any:
        """Expand ``"96x6.5:A"`` entries into board objects."""
        if not isinstance(v, list):
            return v
        return [_expand_board(item) for item in v]

    @field_validator("cutlist", mode="before")
    @classmethod
    def parse_compact_cuts(cls, v: Any) -> Any:
        """Expand ``"2@12x4:Apron"`` entries into cut objects."""
        if not isinstance(v, list):
            return v
        return [_expand_cut(item) for item in v]


def _expand_board(item: Any) -> Any:
    if not isinstance(item, str):
        return item
    board = BoardStock.parse(item)
    return {"length": board.length, "width": board.width, "id": board.id}


def _expand_cut(item: Any) -> Any:
    if not isinstance(item, str):
        return item
    cut = CutSpec.parse(item)
    return {
        "count": cut.count,
        "length": cut.length,
        "width": cut.width,
        "name": cut.name,
    }
