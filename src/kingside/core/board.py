"""Board - immutable snapshot of piece placement and the side to move."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from kingside.core.enums import Alliance, PieceType
from kingside.core.piece import Piece
from kingside.core.types import (
    NUM_SQUARES,
    Coordinate,
    is_valid_square,
    make_square,
    square_name,
)
from kingside.core.zobrist import piece_key, side_to_move_key

if TYPE_CHECKING:
    from kingside.core.player import Player

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board.

    Instances are produced by :class:`BoardBuilder` only.  Applying a move
    to a board yields a new board; the original is never touched.
    """

    __slots__ = ("_squares", "_move_maker", "_hash", "_players")

    def __init__(self, builder: BoardBuilder) -> None:
        self._squares: tuple[Piece | None, ...] = tuple(
            builder.config.get(sq) for sq in range(NUM_SQUARES)
        )
        self._move_maker: Alliance = builder.move_maker
        self._hash = self._compute_zobrist_hash()
        # Players are created on first access; they cache legal moves.
        self._players: dict[Alliance, Player] = {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Coordinate) -> Piece | None:
        return self._squares[sq]

    def piece_at(self, sq: Coordinate) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Coordinate) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self) -> list[Piece]:
        """Every piece on the board in coordinate order."""
        return [p for p in self._squares if p is not None]

    def active_pieces(self, alliance: Alliance) -> list[Piece]:
        """Pieces belonging to *alliance* in coordinate order."""
        return [p for p in self._squares if p is not None and p.alliance == alliance]

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.all_pieces())

    def king(self, alliance: Alliance) -> Piece:
        """Return the single king of *alliance*."""
        for piece in self._squares:
            if (
                piece is not None
                and piece.alliance == alliance
                and piece.piece_type == PieceType.KING
            ):
                return piece
        raise ValueError(f"No {alliance.name} king on board")

    @property
    def move_maker(self) -> Alliance:
        """Side to move next."""
        return self._move_maker

    # -- Players ------------------------------------------------------------

    def player(self, alliance: Alliance) -> Player:
        player = self._players.get(alliance)
        if player is None:
            from kingside.core.player import Player

            player = Player(self, alliance)
            self._players[alliance] = player
        return player

    @property
    def white_player(self) -> Player:
        return self.player(Alliance.WHITE)

    @property
    def black_player(self) -> Player:
        return self.player(Alliance.BLACK)

    @property
    def current_player(self) -> Player:
        return self.player(self._move_maker)

    # -- Factory ------------------------------------------------------------

    @staticmethod
    def builder() -> BoardBuilder:
        return BoardBuilder()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, white to move."""
        builder = BoardBuilder()
        for f in range(8):
            for alliance in Alliance:
                sq = make_square(f, alliance.pawn_rank)
                builder.set_piece(sq, Piece(alliance, PieceType.PAWN, sq))

        for f, pt in enumerate(_BACK_RANK):
            white_sq = make_square(f, 0)
            black_sq = make_square(f, 7)
            builder.set_piece(white_sq, Piece(Alliance.WHITE, pt, white_sq))
            builder.set_piece(black_sq, Piece(Alliance.BLACK, pt, black_sq))
        builder.set_move_maker(Alliance.WHITE)
        return builder.build()

    @staticmethod
    def get_position_at_coordinate(sq: Coordinate) -> str:
        """Algebraic name of *sq*, e.g. 12 → 'e2'."""
        return square_name(sq)

    # -- Hashing ------------------------------------------------------------

    @property
    def zobrist_hash(self) -> int:
        """Zobrist key of placement, first-move flags and side to move."""
        return self._hash

    def _compute_zobrist_hash(self) -> int:
        key = side_to_move_key() if self._move_maker == Alliance.BLACK else 0
        for piece in self._squares:
            if piece is not None:
                key ^= piece_key(piece)
        return key

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._hash == other._hash
            and self._move_maker == other._move_maker
            and self._squares == other._squares
        )

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return self.render()

    def render(self, unicode_pieces: bool = False) -> str:
        """ASCII (or Unicode) diagram with white at the bottom."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[make_square(file, rank)]
                if p is None:
                    row.append(".")
                else:
                    row.append(p.symbol if unicode_pieces else str(p))
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


class BoardBuilder:
    """Single-use accumulator of placements for one new :class:`Board`."""

    __slots__ = ("config", "move_maker", "_spent")

    def __init__(self) -> None:
        self.config: dict[Coordinate, Piece] = {}
        self.move_maker: Alliance = Alliance.WHITE
        self._spent = False

    def set_piece(self, sq: Coordinate, piece: Piece) -> BoardBuilder:
        self._check_not_spent()
        if not is_valid_square(sq):
            raise ValueError(f"Coordinate off the board: {sq}")
        if piece.position != sq:
            raise ValueError(
                f"Piece {piece} stands on {piece.position}, cannot place it on {sq}"
            )
        self.config[sq] = piece
        return self

    def set_move_maker(self, alliance: Alliance) -> BoardBuilder:
        self._check_not_spent()
        self.move_maker = alliance
        return self

    def build(self) -> Board:
        self._check_not_spent()
        self._spent = True
        board = Board(self)
        _LOGGER.debug(
            "Built board with %d pieces, %s to move",
            len(self.config),
            self.move_maker,
        )
        return board

    def _check_not_spent(self) -> None:
        if self._spent:
            raise RuntimeError("BoardBuilder already built its board")
