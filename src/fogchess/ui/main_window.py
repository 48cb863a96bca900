"""MainWindow — top-level window hosting the fogged board."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from fogchess.core.enums import Player
from fogchess.game.config import GameConfig
from fogchess.game.controller import GameController
from fogchess.game.interfaces import ClickOutcome
from fogchess.ui.board.board_view import BoardView


class MainWindow(QMainWindow):
    """Main application window for Fog of Chess."""

    def __init__(self, config: GameConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Fog of Chess")
        self.setMinimumSize(480, 480)
        self.resize(800, 640)

        self._controller = GameController(config)

        self._board_view = BoardView(self._controller)
        self.setCentralWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

        self._setup_menu()
        self._board_view.board_scene.clicked.connect(self._on_clicked)
        self._controller.events.on_turn_changed.append(self._on_turn_changed)
        self._update_status()

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Menu ─────────────────────────────────────────────────────────────

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_reset = QAction("&Reset", self)
        self._act_reset.setShortcut("Ctrl+R")
        self._act_reset.triggered.connect(self._on_reset)
        self._menu_game.addAction(self._act_reset)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        self._act_fog = QAction("&Fog of War", self)
        self._act_fog.setCheckable(True)
        self._act_fog.setChecked(self._controller.fog)
        self._act_fog.toggled.connect(self._on_fog_toggled)
        self._menu_view.addAction(self._act_fog)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_reset(self) -> None:
        self._controller.reset()
        self._board_view.board_scene.refresh()
        self._update_status()

    def _on_fog_toggled(self, enabled: bool) -> None:
        self._controller.set_fog(enabled)
        self._board_view.board_scene.refresh()

    def _on_clicked(self, outcome: ClickOutcome) -> None:
        if outcome.ends_turn:
            self._update_status()

    def _on_turn_changed(self, _player: Player) -> None:
        self._update_status()

    def _update_status(self) -> None:
        ctrl = self._controller
        text = f"{ctrl.turn.name.capitalize()} to move"
        if ctrl.single_player:
            text += " (single player)"
        self._status_label.setText(text)

    def status_text(self) -> str:
        return self._status_label.text()
