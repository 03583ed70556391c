"""Selection layer - collaborator interfaces and the selection controller.

Quick start::

    from movehints.game import (
        BoardState,
        RecordingHighlightSink,
        SelectionController,
        SquareSelectionSource,
    )

    sink = RecordingHighlightSink()
    ctrl = SelectionController(BoardState.initial(), SquareSelectionSource(), sink)
    ctrl.select("g1")
    print(sink.quiet)  # [Square(row=5, column=5), Square(row=5, column=7)]
"""

from movehints.game.board_state import (
    BoardState,
    RecordingHighlightSink,
    SquareSelectionSource,
)
from movehints.game.controller import SelectionController, SelectionEvents
from movehints.game.interfaces import IBoardSource, IHighlightSink, ISelectionSource

__all__ = [
    # Interfaces
    "IBoardSource",
    "IHighlightSink",
    "ISelectionSource",
    # Concrete
    "BoardState",
    "RecordingHighlightSink",
    "SelectionController",
    "SelectionEvents",
    "SquareSelectionSource",
]
