"""Core domain layer — move legality for capture-the-king chess.

Zero external dependencies.

Quick start::

    from kingfall.core import Board

    board = Board.initial()
    if board.is_valid_move(6, 4, 4, 4):
        board.move_piece(6, 4, 4, 4)
"""

from kingfall.core.board import BOARD_SIZE, Board
from kingfall.core.cell import Cell
from kingfall.core.enums import Color, PieceType
from kingfall.core.errors import ChessError, EmptyCellError, InvalidMoveError
from kingfall.core.piece import Piece, is_valid_pawn_move_given_context
from kingfall.core.position import Direction, Position, is_straight_line

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "ChessError",
    "EmptyCellError",
    "InvalidMoveError",
    # Geometry
    "Direction",
    "Position",
    "is_straight_line",
    # Domain objects
    "BOARD_SIZE",
    "Board",
    "Cell",
    "Piece",
    "is_valid_pawn_move_given_context",
]
