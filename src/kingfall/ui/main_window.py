"""MainWindow — top-level window assembling the board and narration."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QStatusBar,
    QWidget,
)

from kingfall.core.enums import Color
from kingfall.game.controller import GameController, MoveRecord
from kingfall.game.interfaces import GamePhase, IPlayer
from kingfall.game.player import HumanPlayer
from kingfall.ui.board.board_view import BoardView
from kingfall.ui.settings import AppSettings
from kingfall.ui.styles.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window for Kingfall."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Kingfall")
        self.setMinimumSize(760, 520)
        self.resize(980, 680)

        self._controller = GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()

        # Start with a default game
        self._on_new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        self._move_list = QListWidget()
        self._move_list.setFixedWidth(320)
        root.addWidget(self._move_list)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._board_view.move_made.connect(self._on_user_move)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_game_over.append(self._on_game_over)
        events.on_phase_changed.append(self._on_phase_changed)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_valid_moves(s.show_valid_moves)

    # ── Actions ──────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        s = self._settings
        self._move_list.clear()
        self._controller.new_game(
            HumanPlayer(Color.WHITE, s.white_name),
            HumanPlayer(Color.BLACK, s.black_name),
        )
        scene = self._board_view.board_scene
        scene.highlight_last_move(None, None)
        scene.set_interactive(True)
        self._refresh_board()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_user_move(self, move: tuple[int, int, int, int]) -> None:
        if not self._controller.submit_move(*move):
            self._status_label.setText("Illegal move")

    # ── Game events ──────────────────────────────────────────────────────

    def _on_game_move(self, record: MoveRecord) -> None:
        for line in record.text.splitlines():
            self._move_list.addItem(line)
        self._move_list.scrollToBottom()
        self._refresh_board()
        self._board_view.board_scene.highlight_last_move(record.origin, record.target)

    def _on_game_over(self, winner: IPlayer) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._status_label.setText(f"King captured. {winner.name} wins!")

    def _on_phase_changed(self, phase: GamePhase) -> None:
        if phase == GamePhase.AWAITING_MOVE:
            self._update_turn_label()

    def _refresh_board(self) -> None:
        self._board_view.board_scene.set_board(
            self._controller.board, self._controller.side_to_move
        )
        if not self._controller.is_game_over:
            self._update_turn_label()

    def _update_turn_label(self) -> None:
        player = self._controller.current_player
        if player is not None:
            self._status_label.setText(f"{player.name} to move ({player.color})")
