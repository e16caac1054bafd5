"""Plain-text move narration."""

from __future__ import annotations

from kingfall.core.piece import Piece
from kingfall.core.position import Position


def describe_move(mover: str, piece: Piece, origin: Position, target: Position) -> str:
    """E.g. ``"Alice moved white pawn from (7, 5) to (5, 5)"``."""
    return f"{mover} moved {piece.name} from {origin} to {target}"


def describe_capture(captured: Piece, owner: str) -> str:
    return f"And has captured {captured.name} of {owner}"
