"""Candidate-destination generation for a single piece.

Rules are pseudo-legal: no check, pin, castling, en-passant or promotion
handling. A king may be offered a square that is attacked.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from movehints.core.enums import PieceKind, Side
from movehints.core.piece import Occupant, is_same_team
from movehints.core.snapshot import OccupancySnapshot
from movehints.core.types import BOARD_SIZE, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

MAX_RAY_LENGTH = BOARD_SIZE - 1


@dataclass(frozen=True, slots=True)
class MoveSet:
    """Destinations for one piece, split by whether the square is occupied."""

    quiet: frozenset[Square] = field(default_factory=frozenset)
    capture: frozenset[Square] = field(default_factory=frozenset)

    @classmethod
    def empty(cls) -> MoveSet:
        return cls()

    @property
    def destinations(self) -> frozenset[Square]:
        return self.quiet | self.capture

    def __contains__(self, sq: object) -> bool:
        return sq in self.quiet or sq in self.capture

    def __len__(self) -> int:
        return len(self.quiet) + len(self.capture)

    def __or__(self, other: MoveSet) -> MoveSet:
        if not isinstance(other, MoveSet):
            return NotImplemented
        return MoveSet(self.quiet | other.quiet, self.capture | other.capture)


class MoveGenerator:
    """Computes :class:`MoveSet` values against one occupancy snapshot.

    The snapshot is never mutated. Rules run against a copy with the origin
    square removed, so a piece can never block itself.
    """

    __slots__ = ("_snapshot",)

    def __init__(self, snapshot: OccupancySnapshot) -> None:
        self._snapshot = snapshot

    @property
    def snapshot(self) -> OccupancySnapshot:
        return self._snapshot

    # -- Public API ---------------------------------------------------------

    def generate(self, origin: Square, kind: PieceKind, side: Side) -> MoveSet:
        """Candidate destinations for a *side* *kind* standing on *origin*."""
        if not origin.is_valid:
            return MoveSet.empty()

        board = self._snapshot.without(origin)
        mover = Occupant(side, kind)

        match kind:
            case PieceKind.PAWN:
                return _gen_pawn(board, origin, mover)
            case PieceKind.KNIGHT:
                return _gen_leaper(board, origin, mover, KNIGHT_OFFSETS)
            case PieceKind.BISHOP:
                return _gen_sliding(board, origin, mover, BISHOP_DIRS)
            case PieceKind.ROOK:
                return _gen_sliding(board, origin, mover, ROOK_DIRS)
            case PieceKind.QUEEN:
                return _gen_sliding(board, origin, mover, ROOK_DIRS) | _gen_sliding(
                    board, origin, mover, BISHOP_DIRS
                )
            case PieceKind.KING:
                return _gen_leaper(board, origin, mover, KING_OFFSETS)
        raise AssertionError(f"Unhandled piece kind: {kind!r}")


def generate(
    snapshot: OccupancySnapshot, origin: Square, kind: PieceKind, side: Side
) -> MoveSet:
    """Shorthand for ``MoveGenerator(snapshot).generate(origin, kind, side)``."""
    return MoveGenerator(snapshot).generate(origin, kind, side)


# -- Piece-specific rules (private) -------------------------------------------


def _is_capture(target: Occupant | None, mover: Occupant) -> bool:
    return target is not None and not is_same_team(target, mover)


def _gen_pawn(board: OccupancySnapshot, origin: Square, mover: Occupant) -> MoveSet:
    side = mover.side
    direction = side.pawn_direction
    quiet: set[Square] = set()
    capture: set[Square] = set()

    one_step = origin.offset(direction, 0)
    if one_step.is_valid and board.is_empty(one_step):
        quiet.add(one_step)
        if origin.row == side.pawn_start_row:
            two_step = origin.offset(2 * direction, 0)
            if two_step.is_valid and board.is_empty(two_step):
                quiet.add(two_step)

    for d_col in (-1, 1):
        cap_sq = origin.offset(direction, d_col)
        if cap_sq.is_valid and _is_capture(board.occupant(cap_sq), mover):
            capture.add(cap_sq)

    return MoveSet(frozenset(quiet), frozenset(capture))


def _gen_leaper(
    board: OccupancySnapshot,
    origin: Square,
    mover: Occupant,
    offsets: Iterable[tuple[int, int]],
) -> MoveSet:
    quiet: set[Square] = set()
    capture: set[Square] = set()
    for d_row, d_col in offsets:
        to_sq = origin.offset(d_row, d_col)
        if not to_sq.is_valid:
            continue
        target = board.occupant(to_sq)
        if target is None:
            quiet.add(to_sq)
        elif _is_capture(target, mover):
            capture.add(to_sq)
    return MoveSet(frozenset(quiet), frozenset(capture))


def _gen_sliding(
    board: OccupancySnapshot,
    origin: Square,
    mover: Occupant,
    directions: Iterable[tuple[int, int]],
) -> MoveSet:
    quiet: set[Square] = set()
    capture: set[Square] = set()
    for d_row, d_col in directions:
        for step in range(1, MAX_RAY_LENGTH + 1):
            to_sq = origin.offset(d_row * step, d_col * step)
            if not to_sq.is_valid:
                break
            target = board.occupant(to_sq)
            if target is None:
                quiet.add(to_sq)
                continue
            if _is_capture(target, mover):
                capture.add(to_sq)
            break
    return MoveSet(frozenset(quiet), frozenset(capture))
