"""BoardScene - QGraphicsScene that picks squares and shows move hints."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from movehints.core.piece import Occupant
from movehints.core.snapshot import Placement
from movehints.core.types import BOARD_SIZE, Square, all_squares
from movehints.game.interfaces import IHighlightSink, ISelectionSource
from movehints.ui.theme import HighlightTheme


class BoardScene(QGraphicsScene):
    """Renders 64 tiles (row 0 at the top) and recolours them as hints.

    Acts as both selection source and highlight sink for
    :class:`~movehints.game.controller.SelectionController`.

    Signals:
        clicked(QPointF): Emitted on a left-button press, in scene coordinates.
    """

    clicked = pyqtSignal(QPointF)

    TILE = 80  # px per square

    def __init__(
        self, parent: QObject | None = None, theme: HighlightTheme | None = None
    ) -> None:
        super().__init__(parent)
        self._theme = theme or HighlightTheme.default()
        self._tiles: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: list[QGraphicsSimpleTextItem] = []
        # square -> True for capture, False for quiet
        self._highlighted: dict[Square, bool] = {}
        self._draw_board()

    # ── Configuration ────────────────────────────────────────────────────

    @property
    def theme(self) -> HighlightTheme:
        return self._theme

    def set_theme(self, theme: HighlightTheme) -> None:
        self._theme = theme
        for sq, tile in self._tiles.items():
            tile.setBrush(QBrush(self._color_for(sq)))

    # ── ISelectionSource impl ────────────────────────────────────────────

    def pick_square(self, screen_input: Any) -> Square | None:
        """Scene position → board square, ``None`` outside the board."""
        if not isinstance(screen_input, QPointF):
            return None
        t = self.TILE
        x, y = screen_input.x(), screen_input.y()
        if x < 0 or y < 0:
            return None
        sq = Square(int(y // t), int(x // t))
        return sq if sq.is_valid else None

    # ── IHighlightSink impl ──────────────────────────────────────────────

    def highlight_quiet(self, sq: Square) -> None:
        self._paint(sq, capture=False)

    def highlight_capture(self, sq: Square) -> None:
        self._paint(sq, capture=True)

    def clear_highlights(self) -> None:
        for sq in self._highlighted:
            self._tiles[sq].setBrush(QBrush(self._base_color(sq)))
        self._highlighted.clear()

    def tile_color(self, sq: Square) -> QColor:
        return self._tiles[sq].brush().color()

    def quiet_squares(self) -> set[Square]:
        return {sq for sq, capture in self._highlighted.items() if not capture}

    def capture_squares(self) -> set[Square]:
        return {sq for sq, capture in self._highlighted.items() if capture}

    # ── Pieces ───────────────────────────────────────────────────────────

    def set_pieces(self, pieces: Iterable[Placement]) -> None:
        """Re-create the glyph items from a board listing."""
        for item in self._piece_items:
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(int(t * 0.7))
        for sq, side, kind in pieces:
            if not sq.is_valid:
                continue
            item = QGraphicsSimpleTextItem(Occupant(side, kind).symbol)
            item.setFont(font)
            rect = item.boundingRect()
            item.setPos(
                sq.column * t + (t - rect.width()) / 2,
                sq.row * t + (t - rect.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items.append(item)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(event.scenePos())
        super().mousePressEvent(event)

    # ── Internal ─────────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        t = self.TILE
        for sq in all_squares():
            rect = QGraphicsRectItem(sq.column * t, sq.row * t, t, t)
            rect.setBrush(QBrush(self._base_color(sq)))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._tiles[sq] = rect
        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _base_color(self, sq: Square) -> QColor:
        is_light = (sq.row + sq.column) % 2 == 0
        return self._theme.light_square if is_light else self._theme.dark_square

    def _color_for(self, sq: Square) -> QColor:
        capture = self._highlighted.get(sq)
        if capture is None:
            return self._base_color(sq)
        return self._theme.capture_move if capture else self._theme.quiet_move

    def _paint(self, sq: Square, *, capture: bool) -> None:
        tile = self._tiles.get(sq)
        if tile is None:
            return
        self._highlighted[sq] = capture
        tile.setBrush(QBrush(self._color_for(sq)))


# Qt's metaclass cannot be mixed with ABCMeta, so register virtually.
ISelectionSource.register(BoardScene)
IHighlightSink.register(BoardScene)
