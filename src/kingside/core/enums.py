"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Alliance(IntEnum):
    """Side a piece fights for."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Alliance:
        return Alliance(1 - self.value)

    @property
    def direction(self) -> int:
        """Square offset of a single pawn step for this side."""
        return 8 if self is Alliance.WHITE else -8

    @property
    def pawn_rank(self) -> int:
        """Rank index (0–7) the side's pawns start on."""
        return 1 if self is Alliance.WHITE else 6

    @property
    def promotion_rank(self) -> int:
        """Rank index (0–7) on which the side's pawns promote."""
        return 7 if self is Alliance.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def symbol(self) -> str:
        """Uppercase letter used in move notation, e.g. ``Q``."""
        return "PNBRQK"[self.value - 1]


class MoveKind(Enum):
    """Closed set of move variants."""

    MAJOR = "major"
    ATTACK = "attack"
    PAWN_JUMP = "pawn_jump"
    KING_SIDE_CASTLE = "king_side_castle"
    QUEEN_SIDE_CASTLE = "queen_side_castle"
    PAWN_PROMOTION = "pawn_promotion"
    NULL = "null"
