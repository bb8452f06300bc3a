"""Tests for Piece."""

import pytest

from kingside.core.board import Board
from kingside.core.enums import Alliance, PieceType
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.types import E2, E4, E7, G1, F3


class TestPieceValue:
    def test_equality_includes_first_move_flag(self) -> None:
        assert Piece(Alliance.WHITE, PieceType.PAWN, E2) == Piece(
            Alliance.WHITE, PieceType.PAWN, E2, True
        )
        assert Piece(Alliance.WHITE, PieceType.PAWN, E2) != Piece(
            Alliance.WHITE, PieceType.PAWN, E2, False
        )

    def test_hashable(self) -> None:
        pieces = {
            Piece(Alliance.WHITE, PieceType.KNIGHT, G1),
            Piece(Alliance.WHITE, PieceType.KNIGHT, G1),
        }
        assert len(pieces) == 1

    def test_frozen(self) -> None:
        piece = Piece(Alliance.BLACK, PieceType.ROOK, E7)
        with pytest.raises(AttributeError):
            piece.position = E2  # type: ignore[misc]


class TestPieceMovement:
    def test_move_piece_relocates_and_clears_flag(self) -> None:
        board = Board.initial()
        knight = board[G1]
        assert knight is not None
        moved = knight.move_piece(Move(board, G1, F3, knight))
        assert moved == Piece(Alliance.WHITE, PieceType.KNIGHT, F3, False)
        assert knight.position == G1
        assert knight.is_first_move

    def test_promotion_piece_is_queen_on_same_square(self) -> None:
        pawn = Piece(Alliance.BLACK, PieceType.PAWN, E2, False)
        assert pawn.promotion_piece() == Piece(
            Alliance.BLACK, PieceType.QUEEN, E2, False
        )

    def test_promotion_piece_rejects_non_pawn(self) -> None:
        rook = Piece(Alliance.WHITE, PieceType.ROOK, E4)
        with pytest.raises(ValueError, match="Only pawns promote"):
            rook.promotion_piece()


class TestPieceSerialisation:
    def test_from_char(self) -> None:
        assert Piece.from_char("n", E4) == Piece(Alliance.BLACK, PieceType.KNIGHT, E4)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x", E4)

    def test_str_is_fen_letter(self) -> None:
        assert str(Piece(Alliance.WHITE, PieceType.QUEEN, E4)) == "Q"
        assert str(Piece(Alliance.BLACK, PieceType.KING, E4)) == "k"

    def test_symbol(self) -> None:
        assert Piece(Alliance.BLACK, PieceType.KNIGHT, E4).symbol == "♞"
