"""Lookup of a move object from a pair of squares."""

from __future__ import annotations

import logging
from itertools import chain
from typing import TYPE_CHECKING

from kingside.core.move import Move, NullMove
from kingside.core.types import Coordinate, parse_square

if TYPE_CHECKING:
    from kingside.core.board import Board

_LOGGER = logging.getLogger(__name__)


class MoveFactory:
    """Stateless move lookup over both players' legal moves.

    Both sides are searched regardless of whose turn it is, so the factory
    can answer "what move would this be" for either player.
    """

    @staticmethod
    def find_move(
        board: Board, current: Coordinate, destination: Coordinate
    ) -> Move | None:
        """First legal move with this origin and destination, else ``None``."""
        both_sides = chain(
            board.white_player.legal_moves, board.black_player.legal_moves
        )
        for move in both_sides:
            if (
                move.current_coordinate == current
                and move.destination_coordinate == destination
            ):
                return move
        return None

    @staticmethod
    def create_move(board: Board, current: Coordinate, destination: Coordinate) -> Move:
        """Matching legal move, or a :class:`NullMove` when there is none."""
        move = MoveFactory.find_move(board, current, destination)
        if move is None:
            _LOGGER.debug(
                "No legal move %s -> %s, returning null move", current, destination
            )
            return NullMove(board, current, destination)
        return move

    @staticmethod
    def from_uci(board: Board, text: str) -> Move:
        """Resolve coordinate text such as ``e2e4``, ``e2-e4`` or ``e7e8q``."""
        squares = text.strip().replace("-", "")
        if len(squares) == 5:
            if squares[4].lower() != "q":
                raise ValueError(f"Only queen promotion is supported: {text!r}")
            squares = squares[:4]
        if len(squares) != 4:
            raise ValueError(f"Invalid coordinate move: {text!r}")
        return MoveFactory.create_move(
            board, parse_square(squares[:2]), parse_square(squares[2:])
        )
