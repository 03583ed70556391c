"""Abstract interfaces for the collaborators around the move generator.

Follows Dependency Inversion: SelectionController depends on these ABCs,
not on a concrete scene, widget or board store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from movehints.core.snapshot import Placement
    from movehints.core.types import Square


class IBoardSource(ABC):
    """The source of truth for piece placement."""

    @abstractmethod
    def list_pieces(self) -> Iterable[Placement]:
        """Every piece currently on the board as ``(square, side, kind)``.

        Called once per selection; implementations must not return a stale
        cached view.
        """


class ISelectionSource(ABC):
    """Turns a raw pointer/tap event into a board square."""

    @abstractmethod
    def pick_square(self, screen_input: Any) -> Square | None:
        """Square under *screen_input*, or ``None`` if no tile was hit."""


class IHighlightSink(ABC):
    """Receives the squares to highlight after a selection."""

    @abstractmethod
    def highlight_quiet(self, sq: Square) -> None:
        """Mark *sq* as an empty square the piece may move to."""

    @abstractmethod
    def highlight_capture(self, sq: Square) -> None:
        """Mark *sq* as holding an opposing piece that may be captured."""

    @abstractmethod
    def clear_highlights(self) -> None:
        """Remove every highlight from the previous selection."""
