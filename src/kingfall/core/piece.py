"""Piece value object and per-kind movement geometry."""

from __future__ import annotations

from dataclasses import dataclass

from kingfall.core.enums import Color, PieceType
from kingfall.core.position import Position

# (Color, PieceType) → FEN letter, uppercase for WHITE
_FEN_CHARS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "P",
    (Color.WHITE, PieceType.KNIGHT): "N",
    (Color.WHITE, PieceType.BISHOP): "B",
    (Color.WHITE, PieceType.ROOK): "R",
    (Color.WHITE, PieceType.QUEEN): "Q",
    (Color.WHITE, PieceType.KING): "K",
    (Color.BLACK, PieceType.PAWN): "p",
    (Color.BLACK, PieceType.KNIGHT): "n",
    (Color.BLACK, PieceType.BISHOP): "b",
    (Color.BLACK, PieceType.ROOK): "r",
    (Color.BLACK, PieceType.QUEEN): "q",
    (Color.BLACK, PieceType.KING): "k",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

# Rows index from the top: BLACK starts on rows 0-1 and moves down.
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_INITIAL_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
# Column offset of the pawn's own left-hand diagonal.
_PAWN_LEFT: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable chess piece tagged with its kind and side."""

    color: Color
    piece_type: PieceType

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def pawn(cls, color: Color) -> Piece:
        return cls(color, PieceType.PAWN)

    @classmethod
    def knight(cls, color: Color) -> Piece:
        return cls(color, PieceType.KNIGHT)

    @classmethod
    def bishop(cls, color: Color) -> Piece:
        return cls(color, PieceType.BISHOP)

    @classmethod
    def rook(cls, color: Color) -> Piece:
        return cls(color, PieceType.ROOK)

    @classmethod
    def queen(cls, color: Color) -> Piece:
        return cls(color, PieceType.QUEEN)

    @classmethod
    def king(cls, color: Color) -> Piece:
        return cls(color, PieceType.KING)

    # ── Geometry ─────────────────────────────────────────────────────────

    def is_valid_move(self, origin: Position, target: Position) -> bool:
        """Whether the displacement fits this piece's shape of movement.

        Board occupancy is not consulted: path blocking, captures and the
        pawn's contextual rules are the board's job.
        """
        d_row = target.row - origin.row
        d_col = target.column - origin.column
        match self.piece_type:
            case PieceType.ROOK:
                return _is_rook_shape(d_row, d_col)
            case PieceType.BISHOP:
                return _is_bishop_shape(d_row, d_col)
            case PieceType.QUEEN:
                return _is_rook_shape(d_row, d_col) or _is_bishop_shape(d_row, d_col)
            case PieceType.KING:
                return max(abs(d_row), abs(d_col)) == 1
            case PieceType.KNIGHT:
                return {abs(d_row), abs(d_col)} == {1, 2}
            case PieceType.PAWN:
                return _is_pawn_shape(self.color, origin, d_row, d_col)

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def initial_row(self) -> int:
        """Starting row for pawns of this color."""
        return _PAWN_INITIAL_ROW[self.color]

    @property
    def forward(self) -> int:
        """Row step a pawn of this color advances by."""
        return _PAWN_FORWARD[self.color]

    @property
    def left(self) -> int:
        """Column step toward this side's left-hand diagonal."""
        return _PAWN_LEFT[self.color]

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def name(self) -> str:
        """Readable name used in move narration, e.g. 'black knight'."""
        return f"{self.color} {self.piece_type.name.lower()}"


def _is_rook_shape(d_row: int, d_col: int) -> bool:
    return (d_row == 0) != (d_col == 0)


def _is_bishop_shape(d_row: int, d_col: int) -> bool:
    return d_row != 0 and abs(d_row) == abs(d_col)


def _is_pawn_shape(color: Color, origin: Position, d_row: int, d_col: int) -> bool:
    forward = _PAWN_FORWARD[color]
    if d_row == forward:
        # Diagonal steps are only a shape here; the board decides captures.
        return abs(d_col) <= 1
    return (
        d_row == 2 * forward
        and d_col == 0
        and origin.row == _PAWN_INITIAL_ROW[color]
    )


def is_valid_pawn_move_given_context(
    pawn: Piece,
    origin: Position,
    target: Position,
    at_initial_rank: bool,
    can_capture_left: bool,
    can_capture_right: bool,
) -> bool:
    """Pawn legality once the board has supplied what the pawn cannot see.

    Left and right are taken from the pawn's own point of view, so a WHITE
    pawn's left diagonal is a BLACK pawn's right one.
    """
    if not pawn.is_pawn:
        raise TypeError(f"Expected a pawn, got {pawn.name}")

    d_row = target.row - origin.row
    d_col = target.column - origin.column
    if d_row == pawn.forward:
        if d_col == 0:
            return True
        if d_col == pawn.left:
            return can_capture_left
        if d_col == -pawn.left:
            return can_capture_right
        return False
    if d_row == 2 * pawn.forward and d_col == 0:
        return at_initial_rank
    return False
