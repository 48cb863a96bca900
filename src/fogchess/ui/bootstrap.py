"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from fogchess.game.config import GameConfig

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from fogchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Fog of Chess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(config: GameConfig, argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from fogchess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    _LOGGER.info(
        "Starting: scenario=%s fog=%s single_player=%s",
        config.scenario or "standard",
        config.fog,
        config.single_player,
    )
    window = MainWindow(config)
    window.show()

    return app.exec()
