"""Player - one side's view of a board: legal moves and king safety."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kingside.core.enums import Alliance
from kingside.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.move import Move
    from kingside.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


class Player:
    """Side *alliance* on *board*.

    Legal moves are computed on first access and kept for the lifetime of
    the (immutable) board.
    """

    __slots__ = ("_board", "_alliance", "_legal_moves")

    def __init__(self, board: Board, alliance: Alliance) -> None:
        self._board = board
        self._alliance = alliance
        self._legal_moves: tuple[Move, ...] | None = None

    @property
    def board(self) -> Board:
        return self._board

    @property
    def alliance(self) -> Alliance:
        return self._alliance

    @property
    def opponent(self) -> Player:
        return self._board.player(self._alliance.opposite)

    @property
    def king(self) -> Piece:
        return self._board.king(self._alliance)

    @property
    def legal_moves(self) -> tuple[Move, ...]:
        """Moves of this side that do not leave its own king attacked."""
        if self._legal_moves is None:
            self._legal_moves = tuple(self._compute_legal_moves())
        return self._legal_moves

    def pseudo_legal_moves(self) -> list[Move]:
        """All moves including those that expose the own king, castles last."""
        gen = MoveGenerator(self._board)
        moves = gen.generate_pseudo_legal_moves(self._alliance)
        moves.extend(gen.generate_castle_moves(self._alliance))
        return moves

    def is_in_check(self) -> bool:
        return MoveGenerator(self._board).is_in_check(self._alliance)

    def is_in_checkmate(self) -> bool:
        return self.is_in_check() and not self.legal_moves

    def is_in_stalemate(self) -> bool:
        return not self.is_in_check() and not self.legal_moves

    def _compute_legal_moves(self) -> list[Move]:
        legal: list[Move] = []
        for move in self.pseudo_legal_moves():
            after = move.execute()
            if MoveGenerator(after).is_in_check(self._alliance):
                _LOGGER.debug(
                    "Discarding %s: leaves %s king attacked", move, self._alliance
                )
                continue
            legal.append(move)
        return legal

    def __repr__(self) -> str:
        return f"Player({self._alliance})"
