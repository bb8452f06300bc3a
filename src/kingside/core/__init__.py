"""Core domain layer: immutable boards and the moves that connect them.

Quick start::

    from kingside.core import Board, MoveFactory, parse_square

    board = Board.initial()
    move = MoveFactory.create_move(board, parse_square("e2"), parse_square("e4"))
    after = move.execute()
"""

from kingside.core.board import Board, BoardBuilder
from kingside.core.enums import Alliance, MoveKind, PieceType
from kingside.core.move import (
    AnyMove,
    AttackMove,
    CastleMove,
    KingSideCastleMove,
    Move,
    MoveExecutionError,
    NullMove,
    PawnJump,
    PawnPromotion,
    QueenSideCastleMove,
)
from kingside.core.move_factory import MoveFactory
from kingside.core.move_generator import MoveGenerator
from kingside.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from kingside.core.piece import Piece
from kingside.core.player import Player
from kingside.core.types import (
    Coordinate,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Alliance",
    "MoveKind",
    "PieceType",
    # Types / helpers
    "Coordinate",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardBuilder",
    "Piece",
    "Player",
    "MoveGenerator",
    # Moves
    "AnyMove",
    "AttackMove",
    "CastleMove",
    "KingSideCastleMove",
    "Move",
    "MoveExecutionError",
    "MoveFactory",
    "NullMove",
    "PawnJump",
    "PawnPromotion",
    "QueenSideCastleMove",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
