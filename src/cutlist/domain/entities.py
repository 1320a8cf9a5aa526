"""Domain entities for lane-based board allocation.

A Board is laid out as a row of Lanes along its length. Each Lane is one
crosscut segment of the board; the cuts in it are ripped side by side, so a
lane is as long as its longest cut and as wide as its cuts combined.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .value_objects import FIT_TOLERANCE, BoardStock, CutRequest, FitPolicy


@dataclass
class Lane:
    """A group of cuts sharing one position along a board's length.

    Attributes:
        cuts: Cuts in rip order, stacked across the board's width.
    """

    cuts: list[CutRequest] = field(default_factory=list)

    def add(self, cut: CutRequest) -> None:
        """Append a cut to the lane."""
        self.cuts.append(cut)

    @property
    def length(self) -> float:
        """Board length consumed by this lane (its longest cut)."""
        return max((cut.length for cut in self.cuts), default=0.0)

    @property
    def width(self) -> float:
        """Combined rip width of the cuts in this lane."""
        return sum(cut.width for cut in self.cuts)

    @property
    def required_area(self) -> float:
        """Area of the lane's bounding rectangle."""
        return self.length * self.width

    @property
    def used_area(self) -> float:
        """Area actually covered by cuts."""
        return sum(cut.area for cut in self.cuts)

    @property
    def score(self) -> float:
        """Density of the lane: used area over required area, 0 when empty."""
        if not self.cuts:
            return 0.0
        return self.used_area / self.required_area


@dataclass
class Board:
    """A stock board being filled with lanes, left to right along its length.

    Attributes:
        length: Board length (the axis lanes are laid along).
        width: Board width (the axis cuts are stacked along within a lane).
        id: Stock identifier the board was vended from.
        lanes: Lanes in order of creation.
        fit: Policy used when stacking a cut onto an existing lane.
    """

    length: float
    width: float
    id: str
    lanes: list[Lane] = field(default_factory=list)
    fit: FitPolicy = FitPolicy.INCLUSIVE

    @classmethod
    def from_stock(
        cls, stock: BoardStock, fit: FitPolicy = FitPolicy.INCLUSIVE
    ) -> Board:
        """Create an empty board from a stock template."""
        return cls(length=stock.length, width=stock.width, id=stock.id, fit=fit)

    @property
    def allocated_length(self) -> float:
        """Length consumed by all lanes."""
        return sum(lane.length for lane in self.lanes)

    @property
    def unallocated_length(self) -> float:
        """Length still free for new lanes."""
        return self.length - self.allocated_length

    @property
    def cuts(self) -> list[CutRequest]:
        """All cuts on the board, lane by lane."""
        return [cut for lane in self.lanes for cut in lane.cuts]

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def used_area(self) -> float:
        return sum(lane.used_area for lane in self.lanes)

    @property
    def score(self) -> float | None:
        """Product of lane scores, or None for a board with no lanes."""
        if not self.lanes:
            return None
        return math.prod(lane.score for lane in self.lanes)

    def _exceeds_board(self, cut: CutRequest) -> bool:
        return (
            cut.length > self.length + FIT_TOLERANCE
            or cut.width > self.width + FIT_TOLERANCE
        )

    def _has_room_for_new_lane(self, cut: CutRequest) -> bool:
        return cut.length <= self.unallocated_length + FIT_TOLERANCE

    def best_lane_for(self, cut: CutRequest) -> Lane | None:
        """Find the existing lane that should take ``cut``.

        A lane qualifies when the cut still fits across the board's width
        after stacking and, if the cut is longer than the lane, the longer
        lane still fits within the board's length. Among qualifying lanes
        the one whose length is closest to the cut's length wins; ties go to
        the earliest lane.
        """
        allocated = self.allocated_length
        best: Lane | None = None
        best_difference = math.inf
        for lane in self.lanes:
            if not self.fit.fits(lane.width + cut.width, self.width):
                continue
            growth = max(cut.length - lane.length, 0.0)
            if allocated + growth > self.length + FIT_TOLERANCE:
                continue
            difference = abs(cut.length - lane.length)
            if difference < best_difference:
                best = lane
                best_difference = difference
        return best

    def can_accept(self, cut: CutRequest) -> bool:
        """Return True if ``accept`` would place ``cut``. Never mutates."""
        if self._exceeds_board(cut):
            return False
        return self.best_lane_for(cut) is not None or self._has_room_for_new_lane(cut)

    def accept(self, cut: CutRequest) -> bool:
        """Place ``cut`` on this board if possible.

        Prefers stacking onto the closest-length existing lane; otherwise
        opens a new lane when enough length remains.

        Returns:
            True if the cut was placed, False if the board cannot take it.
        """
        if self._exceeds_board(cut):
            return False

        lane = self.best_lane_for(cut)
        if lane is not None:
            lane.add(cut)
            return True

        if self._has_room_for_new_lane(cut):
            self.lanes.append(Lane(cuts=[cut]))
            return True

        return False


@dataclass(frozen=True)
class Solution:
    """The boards produced by one successful allocation attempt.

    Attributes:
        boards: Boards in the order they were vended.
        attempt: Zero-based index of the attempt that produced this solution.
    """

    boards: tuple[Board, ...]
    attempt: int = 0

    @property
    def score(self) -> float:
        """Product of the scores of all boards that hold at least one lane."""
        return math.prod(
            board.score for board in self.boards if board.score is not None
        )

    @property
    def used_boards(self) -> tuple[Board, ...]:
        """Boards holding at least one lane."""
        return tuple(board for board in self.boards if board.lanes)

    @property
    def board_count(self) -> int:
        return len(self.used_boards)

    @property
    def cut_count(self) -> int:
        return sum(len(board.cuts) for board in self.boards)

    @property
    def cuts(self) -> list[CutRequest]:
        """Every cut in the solution, board by board."""
        return [cut for board in self.boards for cut in board.cuts]

    @property
    def total_board_area(self) -> float:
        return sum(board.area for board in self.used_boards)

    @property
    def used_area(self) -> float:
        return sum(board.used_area for board in self.used_boards)

    @property
    def waste_percentage(self) -> float:
        """Percentage of used boards' area not covered by cuts."""
        total = self.total_board_area
        if total == 0:
            return 0.0
        return (1 - self.used_area / total) * 100
