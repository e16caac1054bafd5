"""Cell - a single board square with a fixed shade and an optional piece."""

from __future__ import annotations

from kingfall.core.enums import Color
from kingfall.core.errors import EmptyCellError
from kingfall.core.piece import Piece


class Cell:
    """Board square. Its display color never changes after construction."""

    __slots__ = ("_display_color", "_piece")

    def __init__(self, display_color: Color, piece: Piece | None = None) -> None:
        self._display_color = display_color
        self._piece = piece

    @property
    def display_color(self) -> Color:
        return self._display_color

    def is_empty(self) -> bool:
        return self._piece is None

    def get_piece(self) -> Piece:
        """Return the occupant; check :meth:`is_empty` first."""
        if self._piece is None:
            raise EmptyCellError("Cell is empty")
        return self._piece

    def set_piece(self, piece: Piece) -> None:
        self._piece = piece

    def remove_piece(self) -> Piece | None:
        piece, self._piece = self._piece, None
        return piece

    def __str__(self) -> str:
        shade = "W" if self._display_color == Color.WHITE else "B"
        return f"{shade}{self._piece if self._piece is not None else '-'}"

    def __repr__(self) -> str:
        return f"Cell({self._display_color!s}, {self._piece!r})"
