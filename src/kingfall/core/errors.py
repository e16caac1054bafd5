"""Domain exceptions raised by the board when a mutation cannot proceed."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kingfall.core.position import Position


class ChessError(Exception):
    """Base class for all kingfall errors."""


class InvalidMoveError(ChessError, ValueError):
    """A move was applied that the board does not consider legal."""

    def __init__(self, from_position: Position, to_position: Position) -> None:
        super().__init__(f"Illegal move from {from_position} to {to_position}")
        self.from_position = from_position
        self.to_position = to_position


class EmptyCellError(ChessError, LookupError):
    """A piece was requested from a cell that holds none."""
