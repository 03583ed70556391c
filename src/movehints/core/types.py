"""Square value type and coordinate helpers.

Board layout (row, column), row 0 at the top::

    row 0 = rank 8   (Black's home rank)
    row 7 = rank 1   (White's home rank)
    column 0 = file a, column 7 = file h
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable (row, column) pair. May be off-board; see :attr:`is_valid`."""

    row: int
    column: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.column + d_col)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. Square(6, 4) → 'e2'. Only for on-board squares."""
        if not self.is_valid:
            raise ValueError(f"Square off the board: {self!r}")
        return _FILES[self.column] + str(BOARD_SIZE - self.row)

    def __str__(self) -> str:
        return self.name if self.is_valid else f"({self.row}, {self.column})"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


def all_squares() -> list[Square]:
    """All 64 squares in row-major order."""
    return [Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
