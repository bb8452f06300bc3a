"""Perft tests and player-level rule checks.

Reference values: https://www.chessprogramming.org/Perft_Results
(only depths free of en passant and under-promotion are used).
"""

import pytest

from kingside.core.board import Board
from kingside.core.enums import Alliance, MoveKind
from kingside.core.move_generator import MoveGenerator
from kingside.core.notation import STARTING_FEN, board_from_fen
from kingside.core.types import C1, C8, E1, E8, F1, G1, G8


def perft(board: Board, depth: int) -> int:
    """Count leaf nodes at *depth* by executing every legal move."""
    if depth == 0:
        return 1
    return sum(
        perft(move.execute(), depth - 1) for move in board.current_player.legal_moves
    )


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(board_from_fen(STARTING_FEN), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(board_from_fen(STARTING_FEN), 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(board_from_fen(STARTING_FEN), 3) == 8_902


# ── Positions rich in castling, checks and pins ─────────────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
POSITION_3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"
POSITION_4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"


class TestPerftPositions:
    def test_kiwipete_depth_1(self) -> None:
        assert perft(board_from_fen(KIWIPETE), 1) == 48

    def test_position_3_depth_1(self) -> None:
        assert perft(board_from_fen(POSITION_3), 1) == 14

    def test_position_3_depth_2(self) -> None:
        assert perft(board_from_fen(POSITION_3), 2) == 191

    def test_position_4_depth_1(self) -> None:
        assert perft(board_from_fen(POSITION_4), 1) == 6


class TestCastleGeneration:
    def test_both_castles_available(self) -> None:
        board = board_from_fen("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1")
        castles = MoveGenerator(board).generate_castle_moves(Alliance.WHITE)
        assert {(m.kind, m.destination_coordinate) for m in castles} == {
            (MoveKind.KING_SIDE_CASTLE, G1),
            (MoveKind.QUEEN_SIDE_CASTLE, C1),
        }

    def test_black_castles(self) -> None:
        board = board_from_fen("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R b KQkq - 0 1")
        castles = board.black_player.legal_moves
        destinations = {m.destination_coordinate for m in castles if m.is_castle}
        assert destinations == {G8, C8}

    def test_no_castle_without_rights(self) -> None:
        board = board_from_fen("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w - - 0 1")
        assert MoveGenerator(board).generate_castle_moves(Alliance.WHITE) == []

    def test_no_castle_out_of_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4r3/R3K2R w KQ - 0 1")
        assert MoveGenerator(board).generate_castle_moves(Alliance.WHITE) == []

    def test_no_castle_through_attacked_square(self) -> None:
        board = board_from_fen("4kr2/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        castles = MoveGenerator(board).generate_castle_moves(Alliance.WHITE)
        assert [m.kind for m in castles] == [MoveKind.QUEEN_SIDE_CASTLE]

    def test_no_castle_after_king_moved(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        king_step = next(
            m
            for m in board.white_player.legal_moves
            if m.moved_piece == board[E1] and m.destination_coordinate == F1
        )
        back = next(
            m
            for m in king_step.execute().white_player.legal_moves
            if m.current_coordinate == F1 and m.destination_coordinate == E1
        )
        returned = back.execute()
        assert MoveGenerator(returned).generate_castle_moves(Alliance.WHITE) == []


class TestPlayerRules:
    def test_checkmate(self) -> None:
        board = board_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        player = board.current_player
        assert player.is_in_check()
        assert player.is_in_checkmate()
        assert not player.is_in_stalemate()

    def test_stalemate(self) -> None:
        board = board_from_fen("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        player = board.current_player
        assert not player.is_in_check()
        assert player.is_in_stalemate()
        assert not player.is_in_checkmate()

    def test_pinned_piece_cannot_move(self) -> None:
        board = board_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        bishop_moves = [
            m for m in board.white_player.legal_moves if m.moved_piece == board[12]
        ]
        assert bishop_moves == []

    def test_start_position_not_in_check(self, initial_board: Board) -> None:
        assert not initial_board.white_player.is_in_check()
        assert not initial_board.black_player.is_in_check()
        assert len(initial_board.white_player.legal_moves) == 20
        assert len(initial_board.black_player.legal_moves) == 20

    def test_square_attacked(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        assert gen.is_square_attacked(21, Alliance.WHITE)  # f3
        assert not gen.is_square_attacked(28, Alliance.WHITE)  # e4
        assert gen.is_square_attacked(45, Alliance.BLACK)  # f6
        assert not gen.is_square_attacked(E8, Alliance.WHITE)
