"""Colour theme for the move-hint board scene."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class HighlightTheme:
    """Colour scheme for tiles and move highlights."""

    light_square: QColor
    dark_square: QColor
    quiet_move: QColor  # empty destination
    capture_move: QColor  # opposing piece that may be taken

    @classmethod
    def default(cls) -> HighlightTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            quiet_move=QColor(130, 190, 90),  # green
            capture_move=QColor(220, 40, 40),  # red
        )

    @classmethod
    def contrast(cls) -> HighlightTheme:
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(90, 90, 90),
            quiet_move=QColor(60, 140, 255),
            capture_move=QColor(255, 0, 0),
        )
