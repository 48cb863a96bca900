"""BoardScene — QGraphicsScene that paints the board under the fog mask."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from fogchess.core.enums import Player
from fogchess.core.types import BOARD_SIZE, Coord, all_cells
from fogchess.game.controller import GameController
from fogchess.game.interfaces import ClickOutcome
from fogchess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the controller's board and forwards clicks to it.

    Signals:
        clicked(ClickOutcome): Emitted after every click on a cell.
    """

    clicked = pyqtSignal(object)

    TILE = 80  # px per cell

    def __init__(
        self, controller: GameController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._items: list[QGraphicsItem] = []
        self._glyph_font = QFont()
        self._glyph_font.setPixelSize(int(self.TILE * 0.8))
        self.setSceneRect(0, 0, BOARD_SIZE * self.TILE, BOARD_SIZE * self.TILE)
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    def set_controller(self, controller: GameController) -> None:
        self._controller = controller
        self.refresh()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self.refresh()

    def refresh(self) -> None:
        """Redraw every cell from the controller's current state."""
        for item in self._items:
            self.removeItem(item)
        self._items.clear()

        ctrl = self._controller
        turn = ctrl.turn
        visible = ctrl.visible_cells() if ctrl.fog else frozenset(all_cells())
        selected = ctrl.selected
        targets: frozenset[Coord] = frozenset()
        if len(selected) == 1:
            (origin,) = selected
            targets = ctrl.legal_targets(origin)

        for x, y, piece in ctrl.cells():
            pos = (x, y)
            shown = pos in visible
            self._draw_cell(pos, shown)
            if pos in targets and shown:
                self._draw_overlay(pos)
            if pos in selected:
                self._draw_selection(pos)
            if piece is not None and (shown or piece.player == turn):
                self._draw_glyph(pos, piece.symbol, piece.player == Player.WHITE)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        pos = self._pos_to_coord(event.scenePos())
        if pos is None:
            return super().mousePressEvent(event)
        multi = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
        outcome = self._controller.click(pos, multi_select=multi)
        if outcome != ClickOutcome.IGNORED:
            self.refresh()
        self.clicked.emit(outcome)
        event.accept()

    # ── Drawing helpers ──────────────────────────────────────────────────

    def _draw_cell(self, pos: Coord, shown: bool) -> None:
        x, y = pos
        if not shown:
            color = self._theme.fog
        elif (x + y) % 2 == 0:
            color = self._theme.light_square
        else:
            color = self._theme.dark_square
        rect = self._make_rect(pos)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0)

    def _draw_overlay(self, pos: Coord) -> None:
        rect = self._make_rect(pos)
        rect.setBrush(QBrush(self._theme.legal_target))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)

    def _draw_selection(self, pos: Coord) -> None:
        rect = self._make_rect(pos, inset=1)
        pen = QPen(self._theme.selection)
        pen.setWidth(2)
        rect.setPen(pen)
        rect.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        rect.setZValue(0.8)

    def _draw_glyph(self, pos: Coord, glyph: str, is_white: bool) -> None:
        t = self.TILE
        vx, vy = self._visual_coords(pos)
        txt = QGraphicsSimpleTextItem(glyph)
        txt.setFont(self._glyph_font)
        txt.setBrush(QBrush(self._theme.piece_color(is_white)))
        bounds = txt.boundingRect()
        txt.setPos(
            vx * t + (t - bounds.width()) / 2,
            vy * t + (t - bounds.height()) / 2,
        )
        txt.setZValue(1)
        self.addItem(txt)
        self._items.append(txt)

    def _make_rect(self, pos: Coord, inset: int = 0) -> QGraphicsRectItem:
        t = self.TILE
        vx, vy = self._visual_coords(pos)
        rect = QGraphicsRectItem(
            vx * t + inset, vy * t + inset, t - 2 * inset, t - 2 * inset
        )
        self.addItem(rect)
        self._items.append(rect)
        return rect

    # ── Coordinate helpers ───────────────────────────────────────────────

    @staticmethod
    def _visual_coords(pos: Coord) -> tuple[int, int]:
        """Board cell → visual column/row (White's back rank at the bottom)."""
        x, y = pos
        return x, BOARD_SIZE - 1 - y

    def _pos_to_coord(self, pos: QPointF) -> Coord | None:
        """Scene position → board cell, or None outside the board."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return (col, BOARD_SIZE - 1 - row)
