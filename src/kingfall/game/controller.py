"""GameController — turn sequencing, player bookkeeping and narration.

Wraps a :class:`~kingfall.core.board.Board` and emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingfall.core.board import Board
from kingfall.core.enums import Color
from kingfall.core.piece import Piece
from kingfall.core.position import Position
from kingfall.game.interfaces import GamePhase, IGameController, IPlayer
from kingfall.game.narration import describe_capture, describe_move

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One applied move with its narration."""

    origin: Position
    target: Position
    piece: Piece
    captured: Piece | None
    text: str


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
GameOverCallback = Callable[[IPlayer], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a game: checks turns, validates and applies moves,
    notifies listeners.

    Thread-safety: designed to be called from a single thread (the UI
    thread). Validation and application of a move happen inside one
    :meth:`submit_move` call, so no other move can slip in between.
    """

    __slots__ = ("_board", "_players", "_side_to_move", "_phase", "_winner", "events")

    def __init__(self) -> None:
        self._board = Board()
        self._players: dict[Color, IPlayer] = {}
        self._side_to_move = Color.WHITE
        self._phase = GamePhase.NOT_STARTED
        self._winner: IPlayer | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def winner(self) -> IPlayer | None:
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._side_to_move)

    def player_name(self, position: Position) -> str | None:
        """Name of whoever owns the piece on *position*, if any."""
        piece = self._board.get_piece(position)
        if piece is None:
            return None
        owner = self._players.get(piece.color)
        return owner.name if owner is not None else str(piece.color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self, white: IPlayer, black: IPlayer, board: Board | None = None
    ) -> None:
        if white.color != Color.WHITE or black.color != Color.BLACK:
            raise ValueError("Players must be given as (white, black)")
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._board = board if board is not None else Board.initial()
        self._side_to_move = Color.WHITE
        self._winner = None
        _LOGGER.info("New game: %s (white) vs %s (black)", white.name, black.name)
        self._set_phase(GamePhase.AWAITING_MOVE)

    def submit_move(
        self, from_row: int, from_column: int, to_row: int, to_column: int
    ) -> bool:
        if self._phase != GamePhase.AWAITING_MOVE:
            return False

        origin = Position(from_row, from_column)
        target = Position(to_row, to_column)
        piece = self._board.get_piece(origin)
        if piece is None or piece.color != self._side_to_move:
            return False
        if not self._board.is_valid_move(from_row, from_column, to_row, to_column):
            return False

        mover = self.player_name(origin) or str(piece.color)
        victim_owner = self.player_name(target)
        captured = self._board.move_piece(from_row, from_column, to_row, to_column)

        text = describe_move(mover, piece, origin, target)
        _LOGGER.info("%s", text)
        if captured is not None and victim_owner is not None:
            capture_text = describe_capture(captured, victim_owner)
            _LOGGER.info("%s", capture_text)
            text = f"{text}\n{capture_text}"

        if captured is not None and captured.is_king:
            self._winner = self._players[piece.color]
        else:
            self._side_to_move = self._side_to_move.opposite

        if self._winner is not None:
            _LOGGER.info("Game over, %s wins", self._winner.name)
            self._set_phase(GamePhase.GAME_OVER)

        # Move listeners already see the final phase.
        self._emit_move(MoveRecord(origin, target, piece, captured, text))
        if self._winner is not None:
            self._emit_game_over(self._winner)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_game_over(self, winner: IPlayer) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
