"""Core domain layer - pure move-hint logic with zero external dependencies.

Quick start::

    from movehints.core import OccupancySnapshot, PieceKind, Side, generate
    from movehints.core import parse_square

    snapshot = OccupancySnapshot.initial()
    moves = generate(snapshot, parse_square("e2"), PieceKind.PAWN, Side.WHITE)
    print(sorted(sq.name for sq in moves.quiet))  # ['e3', 'e4']
"""

from movehints.core.enums import PieceKind, Side
from movehints.core.move_generator import MoveGenerator, MoveSet, generate
from movehints.core.piece import Occupant, is_same_team
from movehints.core.snapshot import OccupancySnapshot, Placement
from movehints.core.types import (
    BOARD_SIZE,
    Square,
    all_squares,
    parse_square,
)

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Placement",
    "Square",
    "all_squares",
    "parse_square",
    # Domain objects
    "MoveGenerator",
    "MoveSet",
    "Occupant",
    "OccupancySnapshot",
    "generate",
    "is_same_team",
]
