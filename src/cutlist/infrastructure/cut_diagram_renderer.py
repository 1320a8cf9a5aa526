"""Cut diagram rendering for allocated solutions.

This module provides SVG and ASCII rendering of boards drawn to scale, with
the board's length running left to right. Lanes are laid out along the
length and the cuts of each lane are stacked from the top edge downward.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from cutlist.domain.entities import Board, Solution
from cutlist.domain.value_objects import CutRequest

# Fill colors cycled across distinct cut ids
CUT_COLORS: tuple[str, ...] = (
    "#87CEEB",  # Sky blue
    "#90EE90",  # Light green
    "#DDA0DD",  # Plum
    "#F0E68C",  # Khaki
    "#FFB6C1",  # Light pink
    "#FFA07A",  # Light salmon
    "#FFD700",  # Gold
    "#DEB887",  # Burlywood
    "#E6E6FA",  # Lavender
    "#BC8F8F",  # Rosy brown
)

# Narrowest ASCII diagram, border included
MIN_ASCII_WIDTH = 10


@dataclass(frozen=True)
class PlacedCut:
    """A cut positioned on its board.

    Attributes:
        cut: The cut request.
        x: Offset along the board's length.
        y: Offset across the board's width.
        lane_index: Zero-based index of the lane holding the cut.
    """

    cut: CutRequest
    x: float
    y: float
    lane_index: int

    @property
    def right_edge(self) -> float:
        return self.x + self.cut.length

    @property
    def bottom_edge(self) -> float:
        return self.y + self.cut.width


def place_cuts(board: Board) -> list[PlacedCut]:
    """Compute the position of every cut on a board.

    Each lane starts where the previous one ends; cuts within a lane are
    stacked in the order they were added.
    """
    placed: list[PlacedCut] = []
    x = 0.0
    for lane_index, lane in enumerate(board.lanes):
        y = 0.0
        for cut in lane.cuts:
            placed.append(PlacedCut(cut=cut, x=x, y=y, lane_index=lane_index))
            y += cut.width
        x += lane.length
    return placed


class CutDiagramRenderer:
    """Renders solutions as SVG or ASCII diagrams.

    Attributes:
        scale: Pixels per unit for SVG rendering.
        board_fill: Fill color for board stock.
        cut_stroke: Stroke color for cut outlines.
        lane_stroke: Color of lane boundary lines.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to show cut dimensions.
        show_labels: Whether to show cut labels.
    """

    def __init__(
        self,
        scale: float = 10.0,
        board_fill: str = "#f5deb3",  # Wheat
        cut_stroke: str = "#000000",
        lane_stroke: str = "#B22222",  # Firebrick
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
    ) -> None:
        self.scale = scale
        self.board_fill = board_fill
        self.cut_stroke = cut_stroke
        self.lane_stroke = lane_stroke
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels

    def color_map(self, solution: Solution) -> dict[str, str]:
        """Assign a fill color to every distinct cut id in the solution."""
        ids = sorted({cut.id for cut in solution.cuts})
        return {cut_id: CUT_COLORS[i % len(CUT_COLORS)] for i, cut_id in enumerate(ids)}

    def render_svg(self, solution: Solution, rank: int = 1) -> str:
        """Generate an SVG diagram of every used board in a solution.

        Boards are stacked vertically, each with a one-line header.

        Args:
            solution: The solution to draw.
            rank: One-based rank shown in the title.

        Returns:
            SVG document as a string.
        """
        header_height = 30
        gap = 20
        boards = solution.used_boards
        colors = self.color_map(solution)

        svg_width = max((board.length for board in boards), default=0.0) * self.scale
        svg_height = header_height + sum(
            header_height + board.width * self.scale + gap for board in boards
        )

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            f'  <text x="10" y="{header_height - 8}" '
            f'font-family="Arial, sans-serif" font-size="16" '
            f'fill="{self.text_color}">Solution {rank} - score {solution.score:.4f} - '
            f"{solution.waste_percentage:.1f}% waste</text>",
        ]

        y = float(header_height)
        for index, board in enumerate(boards):
            parts.append("")
            parts.append(f"  <!-- Board {index + 1}: {escape(board.id)} -->")
            parts.append(
                self._render_board(board, index, len(boards), y, header_height, colors)
            )
            y += header_height + board.width * self.scale + gap

        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, solutions: list[Solution]) -> list[str]:
        """Generate one SVG document per ranked solution."""
        return [
            self.render_svg(solution, rank)
            for rank, solution in enumerate(solutions, start=1)
        ]

    def _render_board(
        self,
        board: Board,
        index: int,
        total_boards: int,
        top: float,
        header_height: float,
        colors: dict[str, str],
    ) -> str:
        board_top = top + header_height
        header_text = escape(
            f"Board {index + 1} of {total_boards} - {board.id} "
            f"({board.length:g} x {board.width:g}) - "
            f"{len(board.lanes)} lane{'s' if len(board.lanes) != 1 else ''}"
        )
        parts = [
            f'  <text x="10" y="{board_top - 8}" font-family="Arial, sans-serif" '
            f'font-size="14" fill="{self.text_color}">{header_text}</text>',
            f'  <rect x="0" y="{board_top}" width="{board.length * self.scale}" '
            f'height="{board.width * self.scale}" fill="{self.board_fill}" '
            f'stroke="{self.cut_stroke}" stroke-width="2"/>',
        ]

        for placed in place_cuts(board):
            parts.append(self._render_cut(placed, board_top, colors))

        # Lane boundaries
        x = 0.0
        for lane in board.lanes:
            x += lane.length
            parts.append(
                f'  <line x1="{x * self.scale}" y1="{board_top}" '
                f'x2="{x * self.scale}" y2="{board_top + board.width * self.scale}" '
                f'stroke="{self.lane_stroke}" stroke-dasharray="4,2"/>'
            )
        return "\n".join(parts)

    def _render_cut(
        self,
        placed: PlacedCut,
        board_top: float,
        colors: dict[str, str],
    ) -> str:
        x = placed.x * self.scale
        y = board_top + placed.y * self.scale
        w = placed.cut.length * self.scale
        h = placed.cut.width * self.scale
        fill = colors.get(placed.cut.id, CUT_COLORS[0])

        font_size = min(12, min(w, h) / 3)
        rect = (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" stroke="{self.cut_stroke}"/>'
        )
        if font_size < 6 or not (self.show_labels or self.show_dimensions):
            return f"  {rect}"

        text = []
        if self.show_labels:
            text.append(escape(placed.cut.id))
        if self.show_dimensions:
            text.append(f"{placed.cut.length:g} x {placed.cut.width:g}")
        return (
            f"  <g>\n    {rect}\n"
            f'    <text x="{x + w / 2}" y="{y + h / 2 + font_size / 3}" '
            f'text-anchor="middle" font-family="Arial, sans-serif" '
            f'font-size="{font_size}" fill="{self.text_color}">{" ".join(text)}</text>\n'
            f"  </g>"
        )

    def render_ascii(
        self,
        board: Board,
        width: int = 80,
        board_index: int = 0,
        total_boards: int = 1,
    ) -> str:
        """Generate an ASCII diagram of a single board.

        Lane boundaries are marked with ``:`` wherever no cut covers them.

        Args:
            board: The board to draw.
            width: Terminal width in characters, at least MIN_ASCII_WIDTH.
            board_index: Zero-based index of the board in its solution.
            total_boards: Number of boards in the solution.

        Returns:
            ASCII string representation of the board.
        """
        usable_width = max(width, MIN_ASCII_WIDTH) - 2
        scale_x = usable_width / board.length
        # Boards are long and narrow; keep at least a few rows per board.
        grid_height = max(int(usable_width * (board.width / board.length) * 0.5), 6)
        scale_y = grid_height / board.width

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        lane_end = 0.0
        for lane in board.lanes:
            lane_end += lane.length
            column = min(int(lane_end * scale_x), usable_width - 1)
            for row in grid:
                row[column] = ":"
        for placed in place_cuts(board):
            self._draw_cut_ascii(grid, placed, scale_x, scale_y)

        lines = [
            f"Board {board_index + 1} of {total_boards} - {board.id} "
            f"({board.length:g} x {board.width:g})",
            "+" + "-" * usable_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_cut_ascii(
        self,
        grid: list[list[str]],
        placed: PlacedCut,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0

        x1 = max(0, min(int(placed.x * scale_x), grid_width - 1))
        x2 = max(0, min(int(placed.right_edge * scale_x), grid_width - 1))
        y1 = max(0, min(int(placed.y * scale_y), grid_height - 1))
        y2 = max(0, min(int(placed.bottom_edge * scale_y), grid_height - 1))

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        # Label on the first inner row, dimensions on the second
        cut = placed.cut
        texts = [cut.id]
        if self.show_dimensions:
            texts.append(f"{cut.length:g}x{cut.width:g}")
        for offset, text in enumerate(texts, start=1):
            row = y1 + offset
            if row >= y2:
                break
            text = text[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(text):
                grid[row][x1 + 1 + i] = char

    def render_all_ascii(self, solution: Solution, width: int = 80) -> str:
        """Generate ASCII diagrams for every used board in a solution."""
        boards = solution.used_boards
        if not boards:
            return "No boards to display."

        parts: list[str] = []
        for index, board in enumerate(boards):
            parts.append(self.render_ascii(board, width, index, len(boards)))
            parts.append("")

        parts.append("=" * width)
        parts.append(
            f"SUMMARY: {len(boards)} board{'s' if len(boards) != 1 else ''}, "
            f"score {solution.score:.4f}, {solution.waste_percentage:.1f}% waste"
        )
        return "\n".join(parts)
