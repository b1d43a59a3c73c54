"""MainWindow: board view, status line and menus."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from gridchess.core.move import Move
from gridchess.core.state import GameState
from gridchess.game.controller import GameController
from gridchess.ui.board.board_view import BoardView
from gridchess.ui.settings import AppSettings
from gridchess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("gridchess")
        self.setMinimumSize(480, 540)
        self.resize(720, 780)

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self.apply_settings()

        self._board_view.board_scene.set_controller(self._controller)
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        root.addWidget(self._status_label)

        self._status = QStatusBar()
        self.setStatusBar(self._status)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
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

        # Settings menu
        self._menu_settings = menu_bar.addMenu("&Settings")
        assert self._menu_settings is not None

        self._act_coords = self._add_toggle("Show &Coordinates", "show_coordinates")
        self._act_hints = self._add_toggle("Show &Legal Moves", "show_legal_moves")
        self._act_animate = self._add_toggle("&Animate Moves", "animate_moves")

    def _add_toggle(self, label: str, attr: str) -> QAction:
        assert self._menu_settings is not None
        action = QAction(label, self)
        action.setCheckable(True)
        action.setChecked(bool(getattr(self._settings, attr)))

        def _toggled(checked: bool) -> None:
            setattr(self._settings, attr, checked)
            self.apply_settings()

        action.toggled.connect(_toggled)
        self._menu_settings.addAction(action)
        return action

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_new_game.append(self._on_game_reset)

    # ── Settings ─────────────────────────────────────────────────────────

    def apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_animate_moves(s.animate_moves)

    # ── Handlers ─────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.new_game()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_game_move(self, move: Move, _state: GameState) -> None:
        self._status.showMessage(f"Last move: {move}", 4000)
        self._update_status()

    def _on_game_reset(self, _state: GameState) -> None:
        self._status.clearMessage()
        self._update_status()

    def _update_status(self) -> None:
        self._status_label.setText(self._controller.status_text)
