"""Output formatters for ranked cut list solutions."""

from __future__ import annotations

import json
from typing import Any

from cutlist.domain.entities import Board, Lane, Solution
from cutlist.domain.value_objects import CutRequest


class SolutionFormatter:
    """Formats ranked solutions as a plain-text cutting plan."""

    def format(self, solutions: list[Solution]) -> str:
        """Format every ranked solution, best first."""
        if not solutions:
            return "No solution found."
        return "\n\n".join(
            self.format_solution(solution, rank)
            for rank, solution in enumerate(solutions, start=1)
        )

    def format_solution(self, solution: Solution, rank: int = 1) -> str:
        """Format one solution as boards, lanes and cuts."""
        boards = solution.used_boards
        lines = [
            f"SOLUTION {rank}",
            "=" * 70,
            f"Score: {solution.score:.4f}   Boards: {len(boards)}   "
            f"Cuts: {solution.cut_count}   Waste: {solution.waste_percentage:.1f}%",
            "-" * 70,
        ]

        for index, board in enumerate(boards, start=1):
            lines.append(
                f"Board {index}: {board.id} ({board.length:g} x {board.width:g})  "
                f"used {board.allocated_length:g} of {board.length:g}  "
                f"score {board.score:.4f}"
            )
            for lane_index, lane in enumerate(board.lanes, start=1):
                lines.append(
                    f"  Lane {lane_index}: {lane.length:g} x {lane.width:g}  "
                    f"density {lane.score:.3f}"
                )
                for cut in lane.cuts:
                    lines.append(f"    {cut.id:<30} {cut.length:>8g} x {cut.width:g}")

        return "\n".join(lines)


class JsonExporter:
    """Exports ranked solutions as JSON."""

    def export(self, solutions: list[Solution]) -> str:
        """Export solutions as a JSON string."""
        data = {
            "solutions": [
                self._format_solution(solution, rank)
                for rank, solution in enumerate(solutions, start=1)
            ]
        }
        return json.dumps(data, indent=2)

    def _format_solution(self, solution: Solution, rank: int) -> dict[str, Any]:
        return {
            "rank": rank,
            "attempt": solution.attempt,
            "score": solution.score,
            "waste_percentage": round(solution.waste_percentage, 2),
            "boards": [self._format_board(board) for board in solution.used_boards],
        }

    def _format_board(self, board: Board) -> dict[str, Any]:
        return {
            "id": board.id,
            "length": board.length,
            "width": board.width,
            "score": board.score,
            "lanes": [self._format_lane(lane) for lane in board.lanes],
        }

    def _format_lane(self, lane: Lane) -> dict[str, Any]:
        return {
            "length": lane.length,
            "width": lane.width,
            "score": lane.score,
            "cuts": [self._format_cut(cut) for cut in lane.cuts],
        }

    def _format_cut(self, cut: CutRequest) -> dict[str, Any]:
        return {"id": cut.id, "length": cut.length, "width": cut.width}
