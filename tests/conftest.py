"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from kingside.core.board import Board


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep ``KINGSIDE_*`` variables from the host out of the tests."""
    for name in ("KINGSIDE_LOG_LEVEL", "KINGSIDE_UNICODE", "KINGSIDE_START_FEN"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def initial_board() -> Board:
    """Standard starting position, white to move."""
    return Board.initial()
