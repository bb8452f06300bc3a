"""Command-line entry point: play coordinate moves and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from kingside.config import Settings, configure_logging
from kingside.core.enums import MoveKind
from kingside.core.move_factory import MoveFactory
from kingside.core.notation import board_from_fen, board_to_fen

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kingside",
        description="Apply coordinate moves (e2e4, e7e8q, ...) to a chess board.",
    )
    parser.add_argument("moves", nargs="*", help="moves in coordinate notation")
    parser.add_argument("--fen", help="starting position (default: standard start)")
    parser.add_argument(
        "--unicode", action="store_true", help="draw pieces with Unicode glyphs"
    )
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        if args.log_level:
            settings = replace(settings, log_level=args.log_level.upper())
        if args.fen:
            settings = replace(settings, start_fen=args.fen)
        if args.unicode:
            settings = replace(settings, unicode_pieces=True)
        configure_logging(settings)

        board = board_from_fen(settings.start_fen)
        for text in args.moves:
            move = MoveFactory.from_uci(board, text)
            if move.kind is MoveKind.NULL:
                print(f"No legal move: {text}", file=sys.stderr)
                return 2
            assert move.moved_piece is not None
            if move.moved_piece.alliance != board.move_maker:
                print(f"Not {move.moved_piece.alliance}'s turn: {text}", file=sys.stderr)
                return 2
            _LOGGER.info("Playing %s", move)
            print(move)
            board = move.execute()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(board.render(unicode_pieces=settings.unicode_pieces))
    print(board_to_fen(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())
