"""PyQt6 adapter: a board scene that picks squares and shows move hints."""

from movehints.ui.board_scene import BoardScene
from movehints.ui.theme import HighlightTheme

__all__ = ["BoardScene", "HighlightTheme"]
