"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def pawn_direction(self) -> int:
        """Row delta of a forward pawn step (White moves up the rows)."""
        return -1 if self == Side.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        """Row on which this side's pawns may still make a double step."""
        return 6 if self == Side.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
