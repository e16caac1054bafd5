"""Board - 8x8 grid of cells with move validation and application."""

from __future__ import annotations

import logging

from kingfall.core.cell import Cell
from kingfall.core.enums import Color, PieceType
from kingfall.core.errors import InvalidMoveError
from kingfall.core.piece import Piece, is_valid_pawn_move_given_context
from kingfall.core.position import Direction, Position, is_straight_line

_LOGGER = logging.getLogger(__name__)

BOARD_SIZE = 8

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable board that decides move legality and applies moves.

    Rows and columns run 0..7 from the top-left corner. BLACK's home rows
    are 0 and 1, WHITE's are 6 and 7. Out-of-bounds queries never raise:
    such squares read as empty.

    The game ends when an executed move lands on a king; there is no check
    or checkmate.
    """

    __slots__ = ("_grid", "_king_captured")

    def __init__(self) -> None:
        self._grid: list[list[Cell]] = [
            [
                Cell(Color.WHITE if (row + column) % 2 == 0 else Color.BLACK)
                for column in range(BOARD_SIZE)
            ]
            for row in range(BOARD_SIZE)
        ]
        self._king_captured = False

    # -- Queries ------------------------------------------------------------

    @staticmethod
    def is_out_of_bounds(position: Position) -> bool:
        in_rows = 0 <= position.row < BOARD_SIZE
        return not (in_rows and 0 <= position.column < BOARD_SIZE)

    def cell(self, row: int, column: int) -> Cell:
        """Direct cell access for renderers."""
        if self.is_out_of_bounds(Position(row, column)):
            raise IndexError(f"Square ({row}, {column}) is off the board")
        return self._grid[row][column]

    def is_empty(self, position: Position) -> bool:
        return self.is_out_of_bounds(position) or self._cell_at(position).is_empty()

    def get_piece(self, position: Position) -> Piece | None:
        if self.is_empty(position):
            return None
        return self._cell_at(position).get_piece()

    def is_king_captured(self) -> bool:
        return self._king_captured

    # -- Validation ---------------------------------------------------------

    def is_valid_move(
        self, from_row: int, from_column: int, to_row: int, to_column: int
    ) -> bool:
        """Whether the piece on the origin may move to the destination.

        Pure query; the board is left untouched.
        """
        origin = Position(from_row, from_column)
        target = Position(to_row, to_column)
        if origin == target:
            return False
        if self.is_out_of_bounds(origin) or self.is_out_of_bounds(target):
            return False

        piece = self.get_piece(origin)
        if piece is None:
            return False
        return (
            self._is_destination_valid(piece, target)
            and piece.is_valid_move(origin, target)
            and self._has_no_piece_in_path(piece, origin, target)
            and (not piece.is_pawn or self._is_valid_pawn_move(piece, origin, target))
        )

    def _is_destination_valid(self, piece: Piece, target: Position) -> bool:
        occupant = self.get_piece(target)
        return occupant is None or occupant.color != piece.color

    def _has_no_piece_in_path(
        self, piece: Piece, origin: Position, target: Position
    ) -> bool:
        """Every square strictly between origin and target is empty."""
        if piece.piece_type == PieceType.KNIGHT:
            return True
        if not is_straight_line(origin, target):
            return False
        direction = Direction.between(origin, target)
        current = origin.translate(direction)
        while current != target:
            if not self.is_empty(current):
                return False
            current = current.translate(direction)
        return True

    def _is_valid_pawn_move(
        self, pawn: Piece, origin: Position, target: Position
    ) -> bool:
        # A pawn only captures diagonally.
        if target.column == origin.column and not self.is_empty(target):
            return False

        forward_row = origin.row + pawn.forward
        forward_left = Position(forward_row, origin.column + pawn.left)
        forward_right = Position(forward_row, origin.column - pawn.left)
        return is_valid_pawn_move_given_context(
            pawn,
            origin,
            target,
            at_initial_rank=origin.row == pawn.initial_row,
            can_capture_left=self._has_opponent_at(forward_left, pawn.color),
            can_capture_right=self._has_opponent_at(forward_right, pawn.color),
        )

    def _has_opponent_at(self, position: Position, color: Color) -> bool:
        occupant = self.get_piece(position)
        return occupant is not None and occupant.color != color

    # -- Mutation -----------------------------------------------------------

    def move_piece(
        self, from_row: int, from_column: int, to_row: int, to_column: int
    ) -> Piece | None:
        """Apply a legal move and return the captured piece, if any.

        Raises:
            InvalidMoveError: if :meth:`is_valid_move` rejects the move. The
                board is not modified in that case.
        """
        origin = Position(from_row, from_column)
        target = Position(to_row, to_column)
        if not self.is_valid_move(from_row, from_column, to_row, to_column):
            _LOGGER.debug("Rejected move %s -> %s", origin, target)
            raise InvalidMoveError(origin, target)

        origin_cell = self._cell_at(origin)
        target_cell = self._cell_at(target)
        captured = target_cell.remove_piece()
        if captured is not None and captured.is_king:
            self._king_captured = True
            _LOGGER.info("%s captured on %s", captured.name, target)
        target_cell.set_piece(origin_cell.get_piece())
        origin_cell.remove_piece()
        return captured

    def place_piece(self, position: Position, piece: Piece) -> None:
        """Put *piece* on *position* (setup only, no legality checks)."""
        if self.is_out_of_bounds(position):
            raise IndexError(f"Square {position} is off the board")
        self._cell_at(position).set_piece(piece)

    def clear(self) -> None:
        """Remove every piece. A captured king stays recorded."""
        for row in self._grid:
            for cell in row:
                cell.remove_piece()

    def _cell_at(self, position: Position) -> Cell:
        return self._grid[position.row][position.column]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting arrangement."""
        board = cls()
        for column, piece_type in enumerate(_BACK_RANK):
            board.place_piece(Position(0, column), Piece(Color.BLACK, piece_type))
            board.place_piece(Position(1, column), Piece.pawn(Color.BLACK))
            board.place_piece(Position(6, column), Piece.pawn(Color.WHITE))
            board.place_piece(Position(7, column), Piece(Color.WHITE, piece_type))
        return board

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        lines = [" " + "".join(f"  {column + 1}  " for column in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            cells = "".join(f" {cell} " for cell in self._grid[row])
            lines.append(f"{row + 1}{cells}\n")
        return "\n".join(lines) + "\n"
