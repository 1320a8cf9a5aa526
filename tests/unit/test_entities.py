"""Tests for Lane, Board and Solution.

Tests cover:
- Lane derived dimensions and density score
- Board placement contract (accept / can_accept)
- Closest-length lane selection
- Board length overflow guard
- Fit policy effect on lane stacking
- Solution scoring and statistics
"""

from __future__ import annotations

import pytest

from cutlist.domain.entities import Board, Lane, Solution
from cutlist.domain.value_objects import BoardStock, CutRequest, FitPolicy


def cut(length: float, width: float, id: str = "Part") -> CutRequest:
    return CutRequest(length=length, width=width, id=id)


class TestLane:
    """Tests for Lane derived attributes."""

    def test_empty_lane(self) -> None:
        lane = Lane()
        assert lane.length == 0.0
        assert lane.width == 0.0
        assert lane.score == 0.0

    def test_dimensions(self) -> None:
        lane = Lane(cuts=[cut(18, 3), cut(12, 3)])
        assert lane.length == 18
        assert lane.width == 6
        assert lane.required_area == 108
        assert lane.used_area == 90

    def test_score_is_density(self) -> None:
        lane = Lane(cuts=[cut(18, 3), cut(12, 3)])
        assert lane.score == pytest.approx(90 / 108)

    def test_uniform_lane_scores_one(self) -> None:
        lane = Lane(cuts=[cut(18, 3), cut(18, 3)])
        assert lane.score == 1.0


class TestBoardAccept:
    """Tests for Board.accept and Board.can_accept."""

    def test_from_stock(self) -> None:
        board = Board.from_stock(BoardStock(length=96, width=8, id="A"), fit=FitPolicy.STRICT)
        assert (board.length, board.width, board.id) == (96, 8, "A")
        assert board.lanes == []
        assert board.fit is FitPolicy.STRICT

    def test_first_cut_opens_lane(self) -> None:
        board = Board(length=96, width=8, id="A")
        assert board.accept(cut(18, 3))
        assert len(board.lanes) == 1
        assert board.allocated_length == 18
        assert board.unallocated_length == 78

    def test_matching_cut_stacks_in_lane(self) -> None:
        board = Board(length=96, width=8, id="A")
        board.accept(cut(18, 3))
        board.accept(cut(18, 3))
        assert len(board.lanes) == 1
        assert board.lanes[0].width == 6

    def test_full_width_lane_opens_new_lane(self) -> None:
        board = Board(length=96, width=8, id="A")
        for _ in range(3):
            board.accept(cut(18, 3))
        assert [len(lane.cuts) for lane in board.lanes] == [2, 1]
        assert board.allocated_length == 36

    def test_rejects_cut_larger_than_board(self) -> None:
        board = Board(length=10, width=4, id="Small")
        assert not board.can_accept(cut(50, 3))
        assert not board.accept(cut(50, 3))
        assert not board.accept(cut(5, 5))
        assert board.lanes == []

    def test_rejects_when_no_length_remains(self) -> None:
        board = Board(length=20, width=4, id="S")
        assert board.accept(cut(15, 3))
        assert not board.can_accept(cut(10, 3))
        assert not board.accept(cut(10, 3))
        assert len(board.lanes) == 1

    def test_new_lane_may_use_exactly_remaining_length(self) -> None:
        board = Board(length=20, width=4, id="S")
        board.accept(cut(15, 3))
        assert board.accept(cut(5, 3))
        assert board.unallocated_length == 0

    def test_prefers_closest_length_lane(self) -> None:
        board = Board(length=96, width=8, id="A")
        board.accept(cut(10, 5, "Short"))
        board.accept(cut(30, 5, "Long"))
        board.accept(cut(28, 2, "Nearly long"))
        assert [c.id for c in board.lanes[1].cuts] == ["Long", "Nearly long"]
        assert len(board.lanes[0].cuts) == 1

    def test_ties_go_to_earliest_lane(self) -> None:
        board = Board(length=96, width=8, id="A")
        board.accept(cut(10, 5, "First"))
        board.accept(cut(14, 5, "Second"))
        board.accept(cut(12, 2, "Between"))
        assert [c.id for c in board.lanes[0].cuts] == ["First", "Between"]

    def test_can_accept_does_not_mutate(self) -> None:
        board = Board(length=96, width=8, id="A")
        board.accept(cut(18, 3))
        assert board.can_accept(cut(18, 3))
        assert len(board.lanes[0].cuts) == 1


class TestBoardLengthOverflow:
    """Tests for the guard against lanes growing past the board's length."""

    def test_longer_cut_not_stacked_when_lane_would_overflow(self) -> None:
        board = Board(length=30, width=8, id="A")
        board.accept(cut(10, 5))
        board.accept(cut(18, 5))
        assert board.allocated_length == 28

        assert not board.can_accept(cut(25, 2))
        assert not board.accept(cut(25, 2))
        assert board.allocated_length == 28
        assert [len(lane.cuts) for lane in board.lanes] == [1, 1]

    def test_longer_cut_stacked_when_board_has_room(self) -> None:
        board = Board(length=40, width=8, id="A")
        board.accept(cut(10, 5))
        board.accept(cut(18, 5))
        assert board.accept(cut(20, 2))
        assert [len(lane.cuts) for lane in board.lanes] == [1, 2]
        assert board.allocated_length == 30
        assert board.allocated_length <= board.length


class TestBoardFitPolicy:
    """Tests for exact-fit stacking under each fit policy."""

    def test_inclusive_stacks_exact_width(self) -> None:
        board = Board(length=96, width=6, id="A", fit=FitPolicy.INCLUSIVE)
        board.accept(cut(18, 3))
        board.accept(cut(18, 3))
        assert len(board.lanes) == 1
        assert board.lanes[0].width == board.width

    def test_strict_requires_margin(self) -> None:
        board = Board(length=96, width=6, id="A", fit=FitPolicy.STRICT)
        board.accept(cut(18, 3))
        board.accept(cut(18, 3))
        assert len(board.lanes) == 2

    def test_full_width_cut_opens_lane_under_strict(self) -> None:
        board = Board(length=96, width=6, id="A", fit=FitPolicy.STRICT)
        assert board.accept(cut(18, 6))
        assert board.lanes[0].width == 6


class TestBoardScore:
    """Tests for board-level scoring."""

    def test_empty_board_has_no_score(self) -> None:
        assert Board(length=96, width=8, id="A").score is None

    def test_score_is_product_of_lane_scores(self) -> None:
        board = Board(length=96, width=8, id="A")
        board.lanes = [
            Lane(cuts=[cut(18, 3), cut(12, 3)]),
            Lane(cuts=[cut(10, 2), cut(5, 2)]),
        ]
        assert board.score == pytest.approx((90 / 108) * (30 / 40))

    def test_cuts_listed_lane_by_lane(self) -> None:
        board = Board(length=96, width=8, id="A")
        board.lanes = [Lane(cuts=[cut(18, 3, "a"), cut(12, 3, "b")]), Lane(cuts=[cut(10, 2, "c")])]
        assert [c.id for c in board.cuts] == ["a", "b", "c"]


class TestSolution:
    """Tests for Solution scoring and statistics."""

    def test_empty_boards_excluded_from_score(self) -> None:
        used = Board(length=96, width=8, id="A", lanes=[Lane(cuts=[cut(18, 3), cut(12, 3)])])
        unused = Board(length=96, width=8, id="A")
        solution = Solution(boards=(used, unused))
        assert solution.score == pytest.approx(90 / 108)
        assert solution.board_count == 1
        assert solution.used_boards == (used,)

    def test_score_multiplies_boards(self) -> None:
        first = Board(length=96, width=8, id="A", lanes=[Lane(cuts=[cut(18, 3), cut(12, 3)])])
        second = Board(length=96, width=8, id="A", lanes=[Lane(cuts=[cut(10, 2), cut(5, 2)])])
        assert Solution(boards=(first, second)).score == pytest.approx((90 / 108) * 0.75)

    def test_statistics(self) -> None:
        board = Board(length=96, width=8, id="A", lanes=[Lane(cuts=[cut(18, 3), cut(18, 3)])])
        solution = Solution(boards=(board,), attempt=4)
        assert solution.attempt == 4
        assert solution.cut_count == 2
        assert solution.total_board_area == 768
        assert solution.used_area == 108
        assert solution.waste_percentage == pytest.approx(85.9375)

    def test_waste_of_empty_solution(self) -> None:
        assert Solution(boards=()).waste_percentage == 0.0
