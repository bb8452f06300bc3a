"""FEN parsing and serialization.

Boards carry no castling-rights field; availability is expressed through
the first-move flags of the king and rooks, and translated to and from
the FEN castling field here.
"""

from __future__ import annotations

from dataclasses import replace

from kingside.core.board import Board, BoardBuilder
from kingside.core.enums import Alliance, PieceType
from kingside.core.piece import Piece
from kingside.core.types import make_square, parse_square, rank_of

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# castling letter -> (alliance, rook file)
_CASTLING_ROOKS: dict[str, tuple[Alliance, int]] = {
    "K": (Alliance.WHITE, 7),
    "Q": (Alliance.WHITE, 0),
    "k": (Alliance.BLACK, 7),
    "q": (Alliance.BLACK, 0),
}
_KING_FILE = 4


def _home_rank(alliance: Alliance) -> int:
    return 0 if alliance == Alliance.WHITE else 7


def _is_first_move(piece: Piece, rights: set[str]) -> bool:
    """Derive the first-move flag of a freshly parsed piece."""
    rank = rank_of(piece.position)
    if piece.piece_type == PieceType.PAWN:
        return rank == piece.alliance.pawn_rank
    if piece.piece_type == PieceType.KING:
        return piece.position == make_square(
            _KING_FILE, _home_rank(piece.alliance)
        ) and any(_CASTLING_ROOKS[ch][0] == piece.alliance for ch in rights)
    if piece.piece_type == PieceType.ROOK:
        return any(
            alliance == piece.alliance
            and piece.position == make_square(file, _home_rank(alliance))
            for alliance, file in (_CASTLING_ROOKS[ch] for ch in rights)
        )
    return True


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string into a :class:`Board`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Side to move
    if side_part == "w":
        side = Alliance.WHITE
    elif side_part == "b":
        side = Alliance.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 2. Castling
    rights: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_ROOKS or ch in rights:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            rights.add(ch)

    # 3. En passant (validated only; boards do not track it)
    if ep_part != "-":
        ep_rank = rank_of(parse_square(ep_part))
        expected_ep_rank = 5 if side == Alliance.WHITE else 2
        if ep_rank != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 4–5. Clocks (optional, validated only)
    for text in parts[4:]:
        if not text.isdigit():
            raise ValueError(f"Invalid FEN clock field: {text!r}")

    # 6. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    builder = BoardBuilder()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch, make_square(file, rank))
                piece = replace(piece, is_first_move=_is_first_move(piece, rights))
                builder.set_piece(piece.position, piece)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    builder.set_move_maker(side)
    return builder.build()


def _castling_field(board: Board) -> str:
    castling_str = ""
    for ch, (alliance, file) in _CASTLING_ROOKS.items():
        rank = _home_rank(alliance)
        king = board[make_square(_KING_FILE, rank)]
        rook = board[make_square(file, rank)]
        if (
            king is not None
            and king.alliance == alliance
            and king.piece_type == PieceType.KING
            and king.is_first_move
            and rook is not None
            and rook.alliance == alliance
            and rook.piece_type == PieceType.ROOK
            and rook.is_first_move
        ):
            castling_str += ch
    return castling_str or "-"


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN (no en passant, clocks ``0 1``)."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if board.move_maker == Alliance.WHITE else "b"

    return f"{board_str} {side_str} {_castling_field(board)} - 0 1"
