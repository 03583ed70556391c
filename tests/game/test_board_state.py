"""Tests for the in-memory collaborators."""

import pytest

from movehints.core.enums import PieceKind, Side
from movehints.core.piece import Occupant
from movehints.core.snapshot import OccupancySnapshot
from movehints.core.types import Square, parse_square
from movehints.game.board_state import (
    BoardState,
    RecordingHighlightSink,
    SquareSelectionSource,
)
from movehints.game.interfaces import IBoardSource, IHighlightSink, ISelectionSource


class TestBoardState:
    def test_implements_board_source(self) -> None:
        assert isinstance(BoardState(), IBoardSource)

    def test_place_and_list(self) -> None:
        state = BoardState()
        state.place(Square(3, 3), Side.WHITE, PieceKind.QUEEN)
        assert list(state.list_pieces()) == [
            (Square(3, 3), Side.WHITE, PieceKind.QUEEN)
        ]
        assert len(state) == 1

    def test_place_off_board_raises(self) -> None:
        with pytest.raises(ValueError, match="off the board"):
            BoardState().place(Square(0, 8), Side.WHITE, PieceKind.PAWN)

    def test_move_piece_returns_captured(self) -> None:
        state = BoardState()
        state.place(Square(3, 3), Side.WHITE, PieceKind.ROOK)
        state.place(Square(3, 6), Side.BLACK, PieceKind.KNIGHT)
        captured = state.move_piece(Square(3, 3), Square(3, 6))
        assert captured == Occupant(Side.BLACK, PieceKind.KNIGHT)
        assert state.occupant(Square(3, 3)) is None
        assert state.occupant(Square(3, 6)) == Occupant(Side.WHITE, PieceKind.ROOK)

    def test_move_from_empty_square_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece"):
            BoardState().move_piece(Square(3, 3), Square(4, 4))

    def test_remove_and_clear(self) -> None:
        state = BoardState.initial()
        assert state.remove(parse_square("e2")) == Occupant(Side.WHITE, PieceKind.PAWN)
        assert state.remove(parse_square("e4")) is None
        assert len(state) == 31
        state.clear()
        assert len(state) == 0

    def test_snapshot_reflects_current_placement(self) -> None:
        state = BoardState.initial()
        assert state.snapshot() == OccupancySnapshot.initial()
        state.move_piece(parse_square("e2"), parse_square("e4"))
        snapshot = state.snapshot()
        assert snapshot.is_empty(parse_square("e2"))
        assert not snapshot.is_empty(parse_square("e4"))


class TestSquareSelectionSource:
    def test_implements_selection_source(self) -> None:
        assert isinstance(SquareSelectionSource(), ISelectionSource)

    def test_accepts_square_and_name(self) -> None:
        source = SquareSelectionSource()
        assert source.pick_square(Square(2, 2)) == Square(2, 2)
        assert source.pick_square("c6") == Square(2, 2)

    @pytest.mark.parametrize("raw", [Square(9, 0), "z9", None, (1, 1)])
    def test_misses_return_none(self, raw: object) -> None:
        assert SquareSelectionSource().pick_square(raw) is None


class TestRecordingHighlightSink:
    def test_records_and_clears(self) -> None:
        sink = RecordingHighlightSink()
        assert isinstance(sink, IHighlightSink)
        sink.highlight_quiet(Square(1, 1))
        sink.highlight_capture(Square(2, 2))
        assert sink.quiet == [Square(1, 1)]
        assert sink.capture == [Square(2, 2)]
        assert not sink.is_blank

        sink.clear_highlights()
        assert sink.is_blank
        assert sink.clear_count == 1
