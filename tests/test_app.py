"""Tests for the command-line entry point."""

import logging
from collections.abc import Iterator

import pytest

from kingside.app import main


@pytest.fixture(autouse=True)
def _isolated_root_logger() -> Iterator[None]:
    """Drop handlers installed by the CLI once each test finishes."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


class TestMain:
    def test_plays_moves(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["e2e4", "e7e5", "g1f3"]) == 0
        out = capsys.readouterr().out
        assert "e2-e4" in out
        assert "e7-e5" in out
        assert "g1-f3" in out
        assert "rnbqkbnr/pppp1ppp/8/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b KQkq - 0 1" in out

    def test_no_moves_prints_start(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "a b c d e f g h" in out

    def test_unicode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--unicode"]) == 0
        assert "♔" in capsys.readouterr().out

    def test_castle_from_fen(self, capsys: pytest.CaptureFixture[str]) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"
        assert main(["--fen", fen, "e1c1"]) == 0
        out = capsys.readouterr().out
        assert "0-0-0" in out
        assert "r3k2r/8/8/8/8/8/8/2KR3R b kq - 0 1" in out

    def test_unknown_move(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["e2e5"]) == 2
        assert "No legal move: e2e5" in capsys.readouterr().err

    def test_wrong_side(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["e7e5"]) == 2
        assert "Not black's turn" in capsys.readouterr().err

    def test_bad_fen(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--fen", "not a fen"]) == 2
        assert "error:" in capsys.readouterr().err

    def test_start_fen_from_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("KINGSIDE_START_FEN", "4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert main(["e1e2"]) == 0
        assert "4k3/8/8/8/8/8/4K3/8 b - - 0 1" in capsys.readouterr().out
