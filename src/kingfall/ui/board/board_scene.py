"""BoardScene — QGraphicsScene that draws the board and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from kingfall.core.board import BOARD_SIZE, Board
from kingfall.core.enums import Color
from kingfall.core.position import Position
from kingfall.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Signals:
        move_made(object): ``(from_row, from_col, to_row, to_col)`` emitted
            when the user clicks a valid destination for the selected piece.
    """

    move_made = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._side_to_move = Color.WHITE
        self._flipped = False

        # Interaction state
        self._selected: Position | None = None
        self._targets: list[Position] = []
        self._last_move: tuple[Position, Position] | None = None
        self._interactive = True
        self._show_coordinates = True
        self._show_valid_moves = True

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._target_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board, side_to_move: Color) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self._board = board
        self._side_to_move = side_to_move
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation, keeping selection and last move."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide row/column coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_valid_moves(self, visible: bool) -> None:
        """Show or hide valid-destination highlights."""
        self._show_valid_moves = visible
        if not visible:
            self._clear_items(self._target_items)

    def highlight_last_move(self, origin: Position | None, target: Position | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_highlights)
        if origin is None or target is None:
            self._last_move = None
            return
        self._last_move = (origin, target)
        for position in (origin, target):
            rect = self._make_highlight(position, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        """Rebuild every layer, then re-apply selection and last-move overlays."""
        selected = self._selected
        last_move = self._last_move
        self._clear_selection()
        self._draw_board()
        self._sync_pieces()
        if last_move is not None:
            self.highlight_last_move(*last_move)
        if selected is not None:
            self._select(selected)

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        self._clear_items(self._last_move_highlights)
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))
        shades = self._board if self._board is not None else Board()

        for row in range(BOARD_SIZE):
            for column in range(BOARD_SIZE):
                position = Position(row, column)
                vc, vr = self._visual_coords(position)
                is_light = shades.cell(row, column).display_color == Color.WHITE
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(vc * t, vr * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[position] = rect

                label_brush = QBrush(
                    self._theme.coord_light if is_light else self._theme.coord_dark
                )
                # Row numbers (left edge), column numbers (bottom edge)
                if vc == 0:
                    self._add_coord(str(row + 1), font, label_brush, vc * t + 2, vr * t + 1)
                if vr == BOARD_SIZE - 1:
                    self._add_coord(
                        str(column + 1), font, label_brush, vc * t + t - 12, vr * t + t - 16
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, label: str, font: QFont, brush: QBrush, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(brush)
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for row in range(BOARD_SIZE):
            for column in range(BOARD_SIZE):
                position = Position(row, column)
                piece = self._board.get_piece(position)
                if piece is None:
                    continue
                item = QGraphicsSimpleTextItem(piece.symbol)
                item.setFont(font)
                fill = (
                    self._theme.white_piece
                    if piece.color == Color.WHITE
                    else self._theme.black_piece
                )
                item.setBrush(QBrush(fill))
                item.setPen(QPen(QColor(0, 0, 0, 160)))
                bounds = item.boundingRect()
                vc, vr = self._visual_coords(position)
                item.setPos(
                    vc * t + (t - bounds.width()) / 2,
                    vr * t + (t - bounds.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[position] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        position = self._pos_to_position(event.scenePos())
        if position is None:
            self._clear_selection()
            return super().mousePressEvent(event)
        self._click(position)
        super().mousePressEvent(event)

    def _click(self, position: Position) -> None:
        """Select own piece, or move the selected piece to *position*."""
        if self._board is None:
            return

        if self._selected is not None and position in self._targets:
            origin = self._selected
            self._clear_selection()
            self.move_made.emit((origin.row, origin.column, position.row, position.column))
            return

        piece = self._board.get_piece(position)
        if piece is not None and piece.color == self._side_to_move:
            self._select(position)
        else:
            self._clear_selection()

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, position: Position) -> None:
        self._clear_selection()
        self._selected = position
        self._highlight_items.append(
            self._make_highlight(position, self._theme.highlight_from)
        )
        self._targets = self._valid_targets(position)
        if self._show_valid_moves:
            for target in self._targets:
                self._target_items.append(
                    self._make_highlight(target, self._theme.highlight_to)
                )

    def _valid_targets(self, origin: Position) -> list[Position]:
        if self._board is None:
            return []
        return [
            Position(row, column)
            for row in range(BOARD_SIZE)
            for column in range(BOARD_SIZE)
            if self._board.is_valid_move(origin.row, origin.column, row, column)
        ]

    def _clear_selection(self) -> None:
        self._selected = None
        self._targets = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._target_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, position: Position) -> tuple[int, int]:
        """Board position → visual (column, row)."""
        if self._flipped:
            return BOARD_SIZE - 1 - position.column, BOARD_SIZE - 1 - position.row
        return position.column, position.row

    def _pos_to_position(self, pos: QPointF) -> Position | None:
        """Scene position → board position."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Position(BOARD_SIZE - 1 - row, BOARD_SIZE - 1 - col)
        return Position(row, col)

    def _make_highlight(self, position: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(position)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
