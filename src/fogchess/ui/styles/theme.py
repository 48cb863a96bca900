"""Visual theme constants and QSS styles for Fog of Chess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and the fog layer."""

    light_square: QColor
    dark_square: QColor
    fog: QColor  # cells outside the visibility mask
    selection: QColor  # outline around selected cells
    legal_target: QColor  # overlay on legal targets of a single selection
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(149, 175, 192),  # soaring eagle
            dark_square=QColor(83, 92, 104),  # wizard grey
            fog=QColor(0, 0, 0),
            selection=QColor(106, 176, 76),  # pure apple
            legal_target=QColor(106, 176, 76, 70),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
        )

    def piece_color(self, is_white: bool) -> QColor:
        return self.white_piece if is_white else self.black_piece


APP_STYLE = """
QMainWindow {
    background-color: #000000;
}
QStatusBar {
    color: #e0e0e0;
    background-color: #1e1e1e;
}
QMenuBar {
    color: #e0e0e0;
    background-color: #1e1e1e;
}
"""
