"""SelectionController - runs one selection event end to end.

Coordinates: Board Source, Selection Source, MoveGenerator, Highlight Sink.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from movehints.core.move_generator import MoveGenerator, MoveSet
from movehints.core.piece import Occupant
from movehints.core.snapshot import OccupancySnapshot
from movehints.core.types import Square
from movehints.game.interfaces import IBoardSource, IHighlightSink, ISelectionSource

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square, Occupant, MoveSet], None]
ClearedCallback = Callable[[], None]


@dataclass
class SelectionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection: list[SelectionCallback] = field(default_factory=list)
    on_cleared: list[ClearedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController:
    """Turns a pointer event into move highlights.

    Each call to :meth:`select` rescans the board source, so the controller
    never holds board state between events. Designed to be called from a
    single thread (the main/UI thread).
    """

    __slots__ = (
        "_board",
        "_selection",
        "_sink",
        "_selected_sq",
        "_last_moves",
        "events",
        "__weakref__",
    )

    def __init__(
        self,
        board: IBoardSource,
        selection: ISelectionSource,
        sink: IHighlightSink,
    ) -> None:
        self._board = board
        self._selection = selection
        self._sink = sink
        self._selected_sq: Square | None = None
        self._last_moves: MoveSet | None = None
        self.events = SelectionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    @property
    def last_moves(self) -> MoveSet | None:
        return self._last_moves

    # ── Actions ──────────────────────────────────────────────────────────

    def select(self, screen_input: Any) -> MoveSet | None:
        """Handle one pointer event.

        Returns the highlighted move set, or ``None`` when the event hit no
        tile or an empty tile.
        """
        sq = self._selection.pick_square(screen_input)
        if sq is None:
            _LOGGER.debug("Selection hit no tile: %r", screen_input)
            return None

        self._clear()

        snapshot = OccupancySnapshot.from_pieces(self._board.list_pieces())
        occupant = snapshot.occupant(sq)
        if occupant is None:
            _LOGGER.debug("Selected empty square %s", sq)
            return None

        moves = MoveGenerator(snapshot).generate(sq, occupant.kind, occupant.side)
        self._selected_sq = sq
        self._last_moves = moves
        _LOGGER.debug(
            "Selected %s %s on %s: %d quiet, %d capture",
            occupant.side,
            occupant.kind.name.lower(),
            sq,
            len(moves.quiet),
            len(moves.capture),
        )

        for target in sorted(moves.quiet):
            self._sink.highlight_quiet(target)
        for target in sorted(moves.capture):
            self._sink.highlight_capture(target)

        for cb in self.events.on_selection:
            cb(sq, occupant, moves)
        return moves

    def reset(self) -> None:
        """Drop the current selection and its highlights."""
        self._clear()

    # ── Internal ─────────────────────────────────────────────────────────

    def _clear(self) -> None:
        self._selected_sq = None
        self._last_moves = None
        self._sink.clear_highlights()
        for cb in self.events.on_cleared:
            cb()
