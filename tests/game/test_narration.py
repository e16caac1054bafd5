"""Tests for move narration text."""

from kingfall.core.enums import Color
from kingfall.core.piece import Piece
from kingfall.core.position import Position
from kingfall.game.narration import describe_capture, describe_move


def test_describe_move() -> None:
    text = describe_move("Alice", Piece.pawn(Color.WHITE), Position(6, 4), Position(4, 4))
    assert text == "Alice moved white pawn from (7, 5) to (5, 5)"


def test_describe_capture() -> None:
    assert (
        describe_capture(Piece.queen(Color.BLACK), "Bob")
        == "And has captured black queen of Bob"
    )
