"""Pseudo-legal move generation, castling and attack detection.

The generator only reads its board.  It produces the move variants from
:mod:`kingside.core.move`; applying them is left to ``Move.execute``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Alliance, PieceType
from kingside.core.move import (
    AttackMove,
    KingSideCastleMove,
    Move,
    PawnJump,
    PawnPromotion,
    QueenSideCastleMove,
)
from kingside.core.piece import Piece
from kingside.core.types import Coordinate, is_valid_square, make_square, rank_of

if TYPE_CHECKING:
    from kingside.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_KING_HOME: dict[Alliance, Coordinate] = {
    Alliance.WHITE: make_square(4, 0),
    Alliance.BLACK: make_square(4, 7),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Coordinate, ...], ...]:
    targets: list[tuple[Coordinate, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Coordinate] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_pawn_captures() -> tuple[tuple[tuple[Coordinate, ...], ...], ...]:
    """[alliance][sq] -> squares a pawn of that alliance on *sq* attacks."""
    per_alliance: list[tuple[tuple[Coordinate, ...], ...]] = []
    for dr in (1, -1):
        per_square: list[tuple[Coordinate, ...]] = []
        for sq in range(64):
            file_idx = sq & 7
            ar = (sq >> 3) + dr
            squares: list[Coordinate] = []
            if 0 <= ar < 8:
                if file_idx > 0:
                    squares.append(make_square(file_idx - 1, ar))
                if file_idx < 7:
                    squares.append(make_square(file_idx + 1, ar))
            per_square.append(tuple(squares))
        per_alliance.append(tuple(per_square))
    return tuple(per_alliance)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Coordinate, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Coordinate, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Coordinate, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Coordinate] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_PAWN_CAPTURES = _build_pawn_captures()

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates moves for either side of a :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(self, alliance: Alliance) -> list[Move]:
        """All moves of *alliance* except castling (may leave own king in check)."""
        moves: list[Move] = []
        for piece in self._board.active_pieces(alliance):
            ptype = piece.piece_type
            if ptype == PieceType.PAWN:
                self._gen_pawn(piece, moves)
            elif ptype == PieceType.KNIGHT:
                self._gen_stepping(piece, _KNIGHT_TARGETS, moves)
            elif ptype == PieceType.KING:
                self._gen_stepping(piece, _KING_TARGETS, moves)
            else:
                self._gen_sliding(piece, _SLIDER_RAYS[ptype], moves)
        return moves

    def generate_castle_moves(self, alliance: Alliance) -> list[Move]:
        """Castles available to *alliance*, king safety included."""
        moves: list[Move] = []
        board = self._board
        king_sq = _KING_HOME[alliance]
        king = board[king_sq]
        if (
            king is None
            or king.alliance != alliance
            or king.piece_type != PieceType.KING
            or not king.is_first_move
        ):
            return moves
        if self.is_in_check(alliance):
            return moves

        opponent = alliance.opposite
        offset = king_sq - 4

        rook = self._unmoved_rook(offset + 7, alliance)
        if rook is not None:
            f_sq = offset + 5
            g_sq = offset + 6
            if (
                board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not self.is_square_attacked(f_sq, opponent)
                and not self.is_square_attacked(g_sq, opponent)
            ):
                moves.append(
                    KingSideCastleMove(
                        board, king_sq, g_sq, king, rook, rook.position, f_sq
                    )
                )

        rook = self._unmoved_rook(offset, alliance)
        if rook is not None:
            b_sq = offset + 1
            c_sq = offset + 2
            d_sq = offset + 3
            if (
                board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not self.is_square_attacked(c_sq, opponent)
                and not self.is_square_attacked(d_sq, opponent)
            ):
                moves.append(
                    QueenSideCastleMove(
                        board, king_sq, c_sq, king, rook, rook.position, d_sq
                    )
                )
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, alliance: Alliance) -> bool:
        """Is *alliance*'s king attacked by the opponent?"""
        king = self._board.king(alliance)
        return self.is_square_attacked(king.position, alliance.opposite)

    def is_square_attacked(self, sq: Coordinate, by_alliance: Alliance) -> bool:
        """Is *sq* attacked by any piece of *by_alliance*?"""
        board = self._board

        # A pawn of by_alliance attacks sq from the squares a defending pawn on
        # sq would capture towards.
        for from_sq in _PAWN_CAPTURES[int(by_alliance.opposite)][sq]:
            if self._holds(from_sq, by_alliance, PieceType.PAWN):
                return True

        for from_sq in _KNIGHT_TARGETS[sq]:
            if self._holds(from_sq, by_alliance, PieceType.KNIGHT):
                return True

        for from_sq in _KING_TARGETS[sq]:
            if self._holds(from_sq, by_alliance, PieceType.KING):
                return True

        for ray in _BISHOP_RAYS[sq]:
            for to_sq in ray:
                piece = board[to_sq]
                if piece is None:
                    continue
                if piece.alliance == by_alliance and piece.piece_type in (
                    PieceType.BISHOP,
                    PieceType.QUEEN,
                ):
                    return True
                break

        for ray in _ROOK_RAYS[sq]:
            for to_sq in ray:
                piece = board[to_sq]
                if piece is None:
                    continue
                if piece.alliance == by_alliance and piece.piece_type in (
                    PieceType.ROOK,
                    PieceType.QUEEN,
                ):
                    return True
                break

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, pawn: Piece, moves: list[Move]) -> None:
        board = self._board
        sq = pawn.position
        alliance = pawn.alliance
        step = alliance.direction

        one_step = sq + step
        if is_valid_square(one_step) and board.is_empty(one_step):
            advance = Move(board, sq, one_step, pawn)
            if rank_of(one_step) == alliance.promotion_rank:
                moves.append(PawnPromotion(advance))
            else:
                moves.append(advance)
                two_step = one_step + step
                if (
                    pawn.is_first_move
                    and rank_of(sq) == alliance.pawn_rank
                    and board.is_empty(two_step)
                ):
                    moves.append(PawnJump(board, sq, two_step, pawn))

        for cap_sq in _PAWN_CAPTURES[int(alliance)][sq]:
            target = board[cap_sq]
            if target is None or target.alliance == alliance:
                continue
            attack = AttackMove(board, sq, cap_sq, pawn, target)
            if rank_of(cap_sq) == alliance.promotion_rank:
                moves.append(PawnPromotion(attack))
            else:
                moves.append(attack)

    def _gen_stepping(
        self,
        piece: Piece,
        targets: tuple[tuple[Coordinate, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        sq = piece.position
        for to_sq in targets[sq]:
            target = board[to_sq]
            if target is None:
                moves.append(Move(board, sq, to_sq, piece))
            elif target.alliance != piece.alliance:
                moves.append(AttackMove(board, sq, to_sq, piece, target))

    def _gen_sliding(
        self,
        piece: Piece,
        rays: tuple[tuple[tuple[Coordinate, ...], ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        sq = piece.position
        for ray in rays[sq]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(board, sq, to_sq, piece))
                    continue
                if target.alliance != piece.alliance:
                    moves.append(AttackMove(board, sq, to_sq, piece, target))
                break

    def _holds(self, sq: Coordinate, alliance: Alliance, piece_type: PieceType) -> bool:
        piece = self._board[sq]
        return (
            piece is not None
            and piece.alliance == alliance
            and piece.piece_type == piece_type
        )

    def _unmoved_rook(self, sq: Coordinate, alliance: Alliance) -> Piece | None:
        piece = self._board[sq]
        if (
            piece is not None
            and piece.alliance == alliance
            and piece.piece_type == PieceType.ROOK
            and piece.is_first_move
        ):
            return piece
        return None
