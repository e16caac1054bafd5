"""Board coordinates and unit steps between them."""

from __future__ import annotations

from dataclasses import dataclass


def _capped_compare(x: int, y: int) -> int:
    """Sign of ``x - y`` clamped to -1, 0 or 1."""
    return max(-1, min(1, (x > y) - (x < y)))


@dataclass(frozen=True, slots=True)
class Direction:
    """Unit row/column step used to walk a straight or diagonal line."""

    row_offset: int
    column_offset: int

    @classmethod
    def between(cls, origin: Position, target: Position) -> Direction:
        """Unit step from *origin* toward *target* on each axis.

        Only meaningful when both positions share a row, column or diagonal.
        """
        return cls(
            _capped_compare(target.row, origin.row),
            _capped_compare(target.column, origin.column),
        )


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based (row, column) coordinate. Bounds are the board's concern."""

    row: int
    column: int

    def translate(self, direction: Direction) -> Position:
        return Position(
            self.row + direction.row_offset, self.column + direction.column_offset
        )

    def __str__(self) -> str:
        # One-based, matching the board printout.
        return f"({self.row + 1}, {self.column + 1})"


def is_straight_line(origin: Position, target: Position) -> bool:
    """Whether the two positions share a row, a column or a diagonal."""
    d_row = target.row - origin.row
    d_col = target.column - origin.column
    return abs(d_row) == abs(d_col) or d_row == 0 or d_col == 0
