"""Tests for Piece geometry and the contextual pawn rule."""

import itertools

import pytest

from kingfall.core.enums import Color, PieceType
from kingfall.core.piece import Piece, is_valid_pawn_move_given_context
from kingfall.core.position import Position

ALL_SQUARES = [Position(r, c) for r in range(8) for c in range(8)]
CENTER = Position(4, 4)


class TestSerialisation:
    def test_str_is_fen_letter(self) -> None:
        assert str(Piece.knight(Color.WHITE)) == "N"
        assert str(Piece.knight(Color.BLACK)) == "n"

    def test_every_piece_has_a_fen_letter(self) -> None:
        white = "".join(str(Piece(Color.WHITE, pt)) for pt in PieceType)
        black = "".join(str(Piece(Color.BLACK, pt)) for pt in PieceType)
        assert white == "PNBRQK"
        assert black == "pnbrqk"

    def test_symbol_and_name(self) -> None:
        king = Piece.king(Color.BLACK)
        assert king.symbol == "♚"
        assert king.name == "black king"


class TestSlidingPieces:
    def test_rook(self) -> None:
        rook = Piece.rook(Color.WHITE)
        assert rook.is_valid_move(CENTER, Position(4, 0))
        assert rook.is_valid_move(CENTER, Position(0, 4))
        assert not rook.is_valid_move(CENTER, Position(5, 5))
        assert not rook.is_valid_move(CENTER, CENTER)

    def test_bishop(self) -> None:
        bishop = Piece.bishop(Color.BLACK)
        assert bishop.is_valid_move(CENTER, Position(7, 7))
        assert bishop.is_valid_move(CENTER, Position(1, 7))
        assert not bishop.is_valid_move(CENTER, Position(4, 5))
        assert not bishop.is_valid_move(CENTER, CENTER)

    def test_queen_is_rook_or_bishop(self) -> None:
        queen = Piece.queen(Color.WHITE)
        rook = Piece.rook(Color.WHITE)
        bishop = Piece.bishop(Color.WHITE)
        for target in ALL_SQUARES:
            expected = rook.is_valid_move(CENTER, target) or bishop.is_valid_move(
                CENTER, target
            )
            assert queen.is_valid_move(CENTER, target) == expected


class TestKingAndKnight:
    def test_king_single_step(self) -> None:
        king = Piece.king(Color.WHITE)
        reachable = {t for t in ALL_SQUARES if king.is_valid_move(CENTER, t)}
        assert len(reachable) == 8
        assert not king.is_valid_move(CENTER, Position(6, 4))

    def test_knight_geometry_exhaustive(self) -> None:
        knight = Piece.knight(Color.BLACK)
        for origin, target in itertools.product(ALL_SQUARES, repeat=2):
            shape = (abs(target.row - origin.row), abs(target.column - origin.column))
            assert knight.is_valid_move(origin, target) == (shape in {(1, 2), (2, 1)})


class TestPawnGeometry:
    def test_white_moves_toward_row_zero(self) -> None:
        pawn = Piece.pawn(Color.WHITE)
        assert pawn.is_valid_move(Position(5, 4), Position(4, 4))
        assert not pawn.is_valid_move(Position(5, 4), Position(6, 4))

    def test_black_moves_toward_row_seven(self) -> None:
        pawn = Piece.pawn(Color.BLACK)
        assert pawn.is_valid_move(Position(2, 4), Position(3, 4))
        assert not pawn.is_valid_move(Position(2, 4), Position(1, 4))

    def test_double_step_only_from_initial_rank(self) -> None:
        white = Piece.pawn(Color.WHITE)
        black = Piece.pawn(Color.BLACK)
        assert white.is_valid_move(Position(6, 3), Position(4, 3))
        assert not white.is_valid_move(Position(5, 3), Position(3, 3))
        assert black.is_valid_move(Position(1, 3), Position(3, 3))
        assert not black.is_valid_move(Position(2, 3), Position(4, 3))

    def test_no_sideways_or_long_moves(self) -> None:
        pawn = Piece.pawn(Color.WHITE)
        assert not pawn.is_valid_move(Position(5, 4), Position(5, 5))
        assert not pawn.is_valid_move(Position(6, 4), Position(3, 4))
        assert not pawn.is_valid_move(Position(6, 4), Position(4, 5))


class TestPawnContext:
    def test_straight_step(self) -> None:
        pawn = Piece.pawn(Color.WHITE)
        assert is_valid_pawn_move_given_context(
            pawn, Position(5, 4), Position(4, 4), False, False, False
        )

    def test_double_step_needs_initial_rank(self) -> None:
        pawn = Piece.pawn(Color.WHITE)
        args = (pawn, Position(6, 4), Position(4, 4))
        assert is_valid_pawn_move_given_context(*args, True, False, False)
        assert not is_valid_pawn_move_given_context(*args, False, False, False)

    def test_white_diagonals(self) -> None:
        pawn = Piece.pawn(Color.WHITE)
        left, right = Position(4, 3), Position(4, 5)
        origin = Position(5, 4)
        assert is_valid_pawn_move_given_context(pawn, origin, left, False, True, False)
        assert not is_valid_pawn_move_given_context(pawn, origin, left, False, False, True)
        assert is_valid_pawn_move_given_context(pawn, origin, right, False, False, True)
        assert not is_valid_pawn_move_given_context(pawn, origin, right, False, True, False)

    def test_black_left_is_higher_column(self) -> None:
        pawn = Piece.pawn(Color.BLACK)
        origin = Position(2, 4)
        assert is_valid_pawn_move_given_context(
            pawn, origin, Position(3, 5), False, True, False
        )
        assert is_valid_pawn_move_given_context(
            pawn, origin, Position(3, 3), False, False, True
        )

    def test_rejects_non_pawn(self) -> None:
        with pytest.raises(TypeError):
            is_valid_pawn_move_given_context(
                Piece.rook(Color.WHITE), Position(5, 4), Position(4, 4), False, False, False
            )
