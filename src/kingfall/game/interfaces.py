"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete players, so a UI or
a test can supply its own participants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from kingfall.core.enums import Color

if TYPE_CHECKING:
    from kingfall.core.board import Board


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self, white: IPlayer, black: IPlayer, board: Board | None = None
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(
        self, from_row: int, from_column: int, to_row: int, to_column: int
    ) -> bool:
        """Submit a move. Returns True if legal and applied."""
