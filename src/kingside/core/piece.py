"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from kingside.core.enums import Alliance, PieceType
from kingside.core.types import Coordinate

if TYPE_CHECKING:
    from kingside.core.move import Move

# FEN character ↔ (Alliance, PieceType)
_CHAR_MAP: dict[str, tuple[Alliance, PieceType]] = {
    "P": (Alliance.WHITE, PieceType.PAWN),
    "N": (Alliance.WHITE, PieceType.KNIGHT),
    "B": (Alliance.WHITE, PieceType.BISHOP),
    "R": (Alliance.WHITE, PieceType.ROOK),
    "Q": (Alliance.WHITE, PieceType.QUEEN),
    "K": (Alliance.WHITE, PieceType.KING),
    "p": (Alliance.BLACK, PieceType.PAWN),
    "n": (Alliance.BLACK, PieceType.KNIGHT),
    "b": (Alliance.BLACK, PieceType.BISHOP),
    "r": (Alliance.BLACK, PieceType.ROOK),
    "q": (Alliance.BLACK, PieceType.QUEEN),
    "k": (Alliance.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Alliance, PieceType], str] = {
    (Alliance.WHITE, PieceType.PAWN): "♙",
    (Alliance.WHITE, PieceType.KNIGHT): "♘",
    (Alliance.WHITE, PieceType.BISHOP): "♗",
    (Alliance.WHITE, PieceType.ROOK): "♖",
    (Alliance.WHITE, PieceType.QUEEN): "♕",
    (Alliance.WHITE, PieceType.KING): "♔",
    (Alliance.BLACK, PieceType.PAWN): "♟",
    (Alliance.BLACK, PieceType.KNIGHT): "♞",
    (Alliance.BLACK, PieceType.BISHOP): "♝",
    (Alliance.BLACK, PieceType.ROOK): "♜",
    (Alliance.BLACK, PieceType.QUEEN): "♛",
    (Alliance.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Alliance, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece standing on a specific square.

    Two pieces are equal when alliance, type, square and first-move flag
    all match.  Moving a piece never changes it; :meth:`move_piece`
    returns the piece as it stands after the move.
    """

    alliance: Alliance
    piece_type: PieceType
    position: Coordinate
    is_first_move: bool = True

    # ── Movement ─────────────────────────────────────────────────────────

    def move_piece(self, move: Move) -> Piece:
        """This piece relocated to *move*'s destination, no longer unmoved."""
        return replace(self, position=move.destination_coordinate, is_first_move=False)

    def promotion_piece(self) -> Piece:
        """Queen replacing this pawn on its current square."""
        if self.piece_type != PieceType.PAWN:
            raise ValueError(f"Only pawns promote, got {self.piece_type.name}")
        return Piece(self.alliance, PieceType.QUEEN, self.position, is_first_move=False)

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def is_rook(self) -> bool:
        return self.piece_type == PieceType.ROOK

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.alliance, self.piece_type)]

    @classmethod
    def from_char(
        cls, char: str, position: Coordinate, is_first_move: bool = True
    ) -> Piece:
        """Create a piece from a FEN character, e.g. 'N' → white knight."""
        try:
            alliance, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(alliance, ptype, position, is_first_move)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.alliance, self.piece_type)]
