"""In-memory collaborators: a board store, a headless selector and sink."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from movehints.core.enums import PieceKind, Side
from movehints.core.piece import Occupant
from movehints.core.snapshot import OccupancySnapshot, Placement
from movehints.core.types import Square, parse_square
from movehints.game.interfaces import IBoardSource, IHighlightSink, ISelectionSource


class BoardState(IBoardSource):
    """Mutable square → occupant store.

    Stands in for the scene graph of piece objects: callers place, move and
    remove pieces, and every query reads the current placement afresh.
    """

    __slots__ = ("_pieces",)

    def __init__(self) -> None:
        self._pieces: dict[Square, Occupant] = {}

    # -- IBoardSource impl --------------------------------------------------

    def list_pieces(self) -> Iterator[Placement]:
        for sq, occupant in list(self._pieces.items()):
            yield sq, occupant.side, occupant.kind

    # -- Mutation -----------------------------------------------------------

    def place(self, sq: Square, side: Side, kind: PieceKind) -> None:
        if not sq.is_valid:
            raise ValueError(f"Cannot place a piece off the board: {sq!r}")
        self._pieces[sq] = Occupant(side, kind)

    def remove(self, sq: Square) -> Occupant | None:
        return self._pieces.pop(sq, None)

    def move_piece(self, from_sq: Square, to_sq: Square) -> Occupant | None:
        """Move the piece on *from_sq*, returning whatever stood on *to_sq*."""
        occupant = self._pieces.get(from_sq)
        if occupant is None:
            raise ValueError(f"No piece on {from_sq}")
        if not to_sq.is_valid:
            raise ValueError(f"Cannot move a piece off the board: {to_sq!r}")
        del self._pieces[from_sq]
        captured = self._pieces.get(to_sq)
        self._pieces[to_sq] = occupant
        return captured

    def clear(self) -> None:
        self._pieces.clear()

    # -- Queries ------------------------------------------------------------

    def occupant(self, sq: Square) -> Occupant | None:
        return self._pieces.get(sq)

    def snapshot(self) -> OccupancySnapshot:
        return OccupancySnapshot.from_pieces(self.list_pieces())

    def __len__(self) -> int:
        return len(self._pieces)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def from_snapshot(cls, snapshot: OccupancySnapshot) -> BoardState:
        state = cls()
        state._pieces.update(snapshot)
        return state

    @classmethod
    def initial(cls) -> BoardState:
        return cls.from_snapshot(OccupancySnapshot.initial())


class SquareSelectionSource(ISelectionSource):
    """Selector for scripted input: accepts a Square or an algebraic name."""

    def pick_square(self, screen_input: Any) -> Square | None:
        if isinstance(screen_input, Square):
            return screen_input if screen_input.is_valid else None
        if isinstance(screen_input, str):
            try:
                return parse_square(screen_input)
            except ValueError:
                return None
        return None


class RecordingHighlightSink(IHighlightSink):
    """Headless sink that remembers what is currently highlighted."""

    def __init__(self) -> None:
        self.quiet: list[Square] = []
        self.capture: list[Square] = []
        self.clear_count = 0

    def highlight_quiet(self, sq: Square) -> None:
        self.quiet.append(sq)

    def highlight_capture(self, sq: Square) -> None:
        self.capture.append(sq)

    def clear_highlights(self) -> None:
        self.quiet.clear()
        self.capture.clear()
        self.clear_count += 1

    @property
    def is_blank(self) -> bool:
        return not self.quiet and not self.capture
