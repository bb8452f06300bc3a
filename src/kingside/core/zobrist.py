"""Zobrist hashing keys for board snapshots."""

from __future__ import annotations

from typing import Final

from kingside.core.piece import Piece

_SEED: Final = 0xA5B3C7D9E1F23412
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


def _nth_key(index: int) -> int:
    return _splitmix64(_SEED + index)


_PIECE_KEYS: Final = tuple(
    tuple(
        tuple(_nth_key((alliance * 384) + (ptype * 64) + sq) for sq in range(64))
        for ptype in range(6)
    )
    for alliance in range(2)
)
_SIDE_TO_MOVE_KEY: Final = _nth_key(2 * 6 * 64)
# Unmoved pieces hash differently from moved ones on the same square.
_UNMOVED_KEYS: Final = tuple(_nth_key((2 * 6 * 64) + 1 + sq) for sq in range(64))


def piece_key(piece: Piece) -> int:
    """Hash key for a piece on its own square."""
    key = _PIECE_KEYS[int(piece.alliance)][int(piece.piece_type) - 1][piece.position]
    if piece.is_first_move:
        key ^= _UNMOVED_KEYS[piece.position]
    return key


def side_to_move_key() -> int:
    """Hash toggle key for black to move."""
    return _SIDE_TO_MOVE_KEY
