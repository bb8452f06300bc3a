"""Move variants and the board transition they describe.

Every move is an immutable value bound to the :class:`~kingside.core.board.Board`
it was generated against.  :meth:`Move.execute` never touches that board;
it lays out a brand-new one through a :class:`~kingside.core.board.BoardBuilder`.

Variants form a closed set, tagged by :class:`~kingside.core.enums.MoveKind`:

========================  =====================================================
``Move``                  plain relocation of one piece
``AttackMove``            relocation that captures the piece on the destination
``PawnJump``              two-square pawn advance
``KingSideCastleMove``    king and h-file rook move together
``QueenSideCastleMove``   king and a-file rook move together
``PawnPromotion``         wraps a pawn move, then swaps the pawn for a queen
``NullMove``              sentinel for "no such move"; cannot be executed
========================  =====================================================

Equality is structural and requires the exact same variant: the source
board and the cached first-move flag take no part in it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from kingside.core.board import BoardBuilder
from kingside.core.enums import Alliance, MoveKind, PieceType
from kingside.core.piece import Piece
from kingside.core.types import Coordinate, square_name

if TYPE_CHECKING:
    from kingside.core.board import Board

_LOGGER = logging.getLogger(__name__)


class MoveExecutionError(RuntimeError):
    """Raised when a move that does not exist is applied to a board."""


@dataclass(frozen=True, slots=True)
class Move:
    """Plain move: one piece goes from one square to another."""

    kind: ClassVar[MoveKind] = MoveKind.MAJOR

    board: Board = field(compare=False, repr=False)
    current_coordinate: Coordinate
    destination_coordinate: Coordinate
    moved_piece: Piece | None
    is_first_move: bool = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        moved = self.moved_piece
        object.__setattr__(
            self, "is_first_move", moved.is_first_move if moved is not None else False
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_attack(self) -> bool:
        return False

    @property
    def is_castle(self) -> bool:
        return False

    @property
    def attacked_piece(self) -> Piece | None:
        return None

    # ── Board transitions ────────────────────────────────────────────────

    def execute(self) -> Board:
        """Board that results from playing this move on :attr:`board`."""
        kind = self.kind
        if kind is MoveKind.NULL:
            _LOGGER.error("Refusing to execute null move %s", self)
            raise MoveExecutionError(f"Cannot execute null move {self}")
        if kind is MoveKind.PAWN_PROMOTION:
            assert isinstance(self, PawnPromotion)
            return _promote(self)
        if kind is MoveKind.KING_SIDE_CASTLE or kind is MoveKind.QUEEN_SIDE_CASTLE:
            assert isinstance(self, CastleMove)
            return _castle(self)
        return _relocate(self)

    def undo(self) -> Board:
        """Re-lay the pieces of :attr:`board` with the mover's side to move.

        The source board still holds the pre-move arrangement, so copying
        it back is enough; no coordinates are reversed.
        """
        builder = BoardBuilder()
        for piece in self.board.all_pieces():
            builder.set_piece(piece.position, piece)
        builder.set_move_maker(self._mover_alliance())
        return builder.build()

    def _mover_alliance(self) -> Alliance:
        if self.moved_piece is None:
            return self.board.move_maker
        return self.moved_piece.alliance

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return (
            f"{square_name(self.current_coordinate)}-"
            f"{square_name(self.destination_coordinate)}"
        )


@dataclass(frozen=True, slots=True)
class AttackMove(Move):
    """Move that captures the piece standing on the destination square."""

    kind: ClassVar[MoveKind] = MoveKind.ATTACK

    captured_piece: Piece

    @property
    def is_attack(self) -> bool:
        return True

    @property
    def attacked_piece(self) -> Piece | None:
        return self.captured_piece

    def __str__(self) -> str:
        return (
            f"{square_name(self.current_coordinate)}x"
            f"{square_name(self.destination_coordinate)}"
        )


@dataclass(frozen=True, slots=True)
class PawnJump(Move):
    """Two-square pawn advance from the home rank."""

    kind: ClassVar[MoveKind] = MoveKind.PAWN_JUMP


@dataclass(frozen=True, slots=True)
class CastleMove(Move):
    """King move that drags a rook along in the same transition.

    Only the concrete :class:`KingSideCastleMove` and
    :class:`QueenSideCastleMove` may be instantiated.
    """

    castle_rook: Piece
    castle_rook_start: Coordinate = field(compare=False)
    castle_rook_destination: Coordinate = field(compare=False)

    def __post_init__(self) -> None:
        if type(self) is CastleMove:
            raise TypeError("CastleMove is abstract; use a king- or queen-side move")
        Move.__post_init__(self)

    @property
    def is_castle(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class KingSideCastleMove(CastleMove):
    kind: ClassVar[MoveKind] = MoveKind.KING_SIDE_CASTLE

    def __str__(self) -> str:
        return "0-0"


@dataclass(frozen=True, slots=True)
class QueenSideCastleMove(CastleMove):
    kind: ClassVar[MoveKind] = MoveKind.QUEEN_SIDE_CASTLE

    def __str__(self) -> str:
        return "0-0-0"


@dataclass(frozen=True, slots=True, init=False)
class PawnPromotion(Move):
    """Pawn move to the last rank, finished by turning the pawn into a queen.

    Capture queries are answered by the wrapped move.
    """

    kind: ClassVar[MoveKind] = MoveKind.PAWN_PROMOTION

    decorated_move: Move
    promoted_pawn: Piece

    def __init__(self, decorated_move: Move) -> None:
        if isinstance(decorated_move, (PawnPromotion, NullMove)):
            raise ValueError(f"Cannot promote through {type(decorated_move).__name__}")
        pawn = decorated_move.moved_piece
        if pawn is None or pawn.piece_type != PieceType.PAWN:
            raise ValueError(f"Promotion needs a pawn move, got {decorated_move!r}")
        Move.__init__(
            self,
            decorated_move.board,
            decorated_move.current_coordinate,
            decorated_move.destination_coordinate,
            pawn,
        )
        object.__setattr__(self, "decorated_move", decorated_move)
        object.__setattr__(self, "promoted_pawn", pawn)

    @property
    def is_attack(self) -> bool:
        return self.decorated_move.is_attack

    @property
    def attacked_piece(self) -> Piece | None:
        return self.decorated_move.attacked_piece

    def __str__(self) -> str:
        return (
            f"{square_name(self.current_coordinate)}-"
            f"{square_name(self.destination_coordinate)}={PieceType.QUEEN.symbol}"
        )


@dataclass(frozen=True, slots=True)
class NullMove(Move):
    """Placeholder returned when no move matches a coordinate pair."""

    kind: ClassVar[MoveKind] = MoveKind.NULL

    moved_piece: Piece | None = None


AnyMove: TypeAlias = (
    Move
    | AttackMove
    | PawnJump
    | KingSideCastleMove
    | QueenSideCastleMove
    | PawnPromotion
    | NullMove
)


# ── Transition helpers ──────────────────────────────────────────────────────


def _relocate(move: Move) -> Board:
    mover = move.moved_piece
    assert mover is not None
    builder = BoardBuilder()
    # A captured piece sits on the destination and is overwritten below.
    for piece in move.board.all_pieces():
        if piece != mover:
            builder.set_piece(piece.position, piece)
    builder.set_piece(move.destination_coordinate, mover.move_piece(move))
    builder.set_move_maker(mover.alliance.opposite)
    return builder.build()


def _castle(move: CastleMove) -> Board:
    king = move.moved_piece
    assert king is not None
    rook = move.castle_rook
    builder = BoardBuilder()
    for piece in move.board.all_pieces():
        if piece != king and piece != rook:
            builder.set_piece(piece.position, piece)
    builder.set_piece(move.destination_coordinate, king.move_piece(move))
    # Built from scratch: the rook's own move_piece would use the king's destination.
    builder.set_piece(
        move.castle_rook_destination,
        Piece(
            rook.alliance,
            PieceType.ROOK,
            move.castle_rook_destination,
            is_first_move=False,
        ),
    )
    builder.set_move_maker(king.alliance.opposite)
    return builder.build()


def _promote(move: PawnPromotion) -> Board:
    pawn_moved_board = move.decorated_move.execute()
    moved_pawn = move.promoted_pawn.move_piece(move.decorated_move)
    builder = BoardBuilder()
    for piece in pawn_moved_board.all_pieces():
        if piece != moved_pawn:
            builder.set_piece(piece.position, piece)
    builder.set_piece(move.destination_coordinate, moved_pawn.promotion_piece())
    builder.set_move_maker(pawn_moved_board.move_maker)
    return builder.build()
