"""OccupancySnapshot - read-only view of which squares hold which pieces."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from movehints.core.enums import PieceKind, Side
from movehints.core.piece import Occupant
from movehints.core.types import BOARD_SIZE, Square

_LOGGER = logging.getLogger(__name__)

Placement = tuple[Square, Side, PieceKind]

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class OccupancySnapshot(Mapping[Square, Occupant]):
    """Immutable square → occupant mapping, rebuilt for every query.

    Keys are always valid squares. Mutating helpers such as :meth:`without`
    return a new snapshot and leave the receiver untouched.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Mapping[Square, Occupant] | None = None) -> None:
        self._squares: dict[Square, Occupant] = {}
        if squares:
            for sq, occupant in squares.items():
                if not sq.is_valid:
                    raise ValueError(f"Square off the board: {sq!r}")
                self._squares[sq] = occupant

    # -- Mapping protocol ---------------------------------------------------

    def __getitem__(self, sq: Square) -> Occupant:
        return self._squares[sq]

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    # -- Query helpers ------------------------------------------------------

    def occupant(self, sq: Square) -> Occupant | None:
        return self._squares.get(sq)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._squares

    def without(self, sq: Square) -> OccupancySnapshot:
        """Snapshot lacking *sq*. Returns ``self`` if *sq* is already empty."""
        if sq not in self._squares:
            return self
        clone = OccupancySnapshot()
        clone._squares = {k: v for k, v in self._squares.items() if k != sq}
        return clone

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> OccupancySnapshot:
        return cls()

    @classmethod
    def from_pieces(cls, pieces: Iterable[Placement]) -> OccupancySnapshot:
        """Rebuild from a board listing. Off-board entries are skipped."""
        snapshot = cls()
        squares = snapshot._squares
        for sq, side, kind in pieces:
            if not sq.is_valid:
                _LOGGER.warning(
                    "Skipping %s %s on off-board square %r", side, kind.name, sq
                )
                continue
            squares[sq] = Occupant(side, kind)
        return snapshot

    @classmethod
    def from_diagram(cls, diagram: str) -> OccupancySnapshot:
        """Parse an 8x8 diagram, row 0 first, e.g.::

            r . . . k . . .
            . . . . . . . .
            ...

        Whitespace between squares is ignored; ``.`` marks an empty
        square and FEN letters mark pieces.
        """
        rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Diagram must have {BOARD_SIZE} rows, got {len(rows)}")

        snapshot = cls()
        for r, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(
                    f"Diagram row {r} must have {BOARD_SIZE} squares: {row!r}"
                )
            for c, char in enumerate(row):
                if char == ".":
                    continue
                snapshot._squares[Square(r, c)] = Occupant.from_char(char)
        return snapshot

    @classmethod
    def initial(cls) -> OccupancySnapshot:
        """Standard starting position (White at the bottom, rows 6-7)."""
        snapshot = cls()
        squares = snapshot._squares
        for c in range(BOARD_SIZE):
            squares[Square(1, c)] = Occupant(Side.BLACK, PieceKind.PAWN)
            squares[Square(6, c)] = Occupant(Side.WHITE, PieceKind.PAWN)
        for c, kind in enumerate(_BACK_RANK):
            squares[Square(0, c)] = Occupant(Side.BLACK, kind)
            squares[Square(7, c)] = Occupant(Side.WHITE, kind)
        return snapshot

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OccupancySnapshot):
            return self._squares == other._squares
        return super().__eq__(other)

    def __repr__(self) -> str:
        rows: list[str] = []
        for r in range(BOARD_SIZE):
            row = []
            for c in range(BOARD_SIZE):
                occupant = self._squares.get(Square(r, c))
                row.append(str(occupant) if occupant else ".")
            rows.append(" ".join(row))
        return "\n".join(rows)
