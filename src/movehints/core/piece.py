"""Occupant value object and team affiliation."""

from __future__ import annotations

from dataclasses import dataclass

from movehints.core.enums import PieceKind, Side

# FEN character ↔ (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "P": (Side.WHITE, PieceKind.PAWN),
    "N": (Side.WHITE, PieceKind.KNIGHT),
    "B": (Side.WHITE, PieceKind.BISHOP),
    "R": (Side.WHITE, PieceKind.ROOK),
    "Q": (Side.WHITE, PieceKind.QUEEN),
    "K": (Side.WHITE, PieceKind.KING),
    "p": (Side.BLACK, PieceKind.PAWN),
    "n": (Side.BLACK, PieceKind.KNIGHT),
    "b": (Side.BLACK, PieceKind.BISHOP),
    "r": (Side.BLACK, PieceKind.ROOK),
    "q": (Side.BLACK, PieceKind.QUEEN),
    "k": (Side.BLACK, PieceKind.KING),
}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}

_FEN_CHARS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Occupant:
    """What sits on a square: a side and a piece kind."""

    side: Side
    kind: PieceKind

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Occupant:
        """Create occupant from FEN character, e.g. 'N' → white knight."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]


def is_same_team(a: Occupant | None, b: Occupant | None) -> bool:
    """True iff both occupants are present and share a side."""
    if a is None or b is None:
        return False
    return a.side == b.side
