"""
Stage 3 — TRANSFORM: the Playfair rule
======================================
Each digraph (a, b) is located in the grid and replaced:

    same row      shift both letters one column   (+1 right / -1 left)
    same column   shift both letters one row      (+1 down  / -1 up)
    rectangle     swap the two column indices, keep the rows

Encryption and decryption differ only in the direction sign. The rectangle
rule ignores the sign and is its own inverse. All shifts wrap around the
grid edges.
"""

import logging
from enum import IntEnum

from .stage1_grid import PlayfairGrid

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    ENCRYPT = +1
    DECRYPT = -1


class DigraphTransformer:
    """Applies the row / column / rectangle rule pair by pair."""

    @staticmethod
    def transform_pair(a: str, b: str, grid: PlayfairGrid,
                       direction: int) -> str:
        """
        Transform one digraph. Returns an empty string if either letter is
        missing from the grid.
        """
        pos_a = grid.position(a)
        pos_b = grid.position(b)
        if pos_a is None or pos_b is None:
            logger.warning(f"Digraph {a}{b} not in grid "
                           f"({grid.policy.value}); pair skipped")
            return ""
        row_a, col_a = pos_a
        row_b, col_b = pos_b
        if row_a == row_b:
            return grid.at(row_a, col_a + direction) + grid.at(row_b, col_b + direction)
        if col_a == col_b:
            return grid.at(row_a + direction, col_a) + grid.at(row_b + direction, col_b)
        return grid.at(row_a, col_b) + grid.at(row_b, col_a)

    def transform(self, sequence: str, grid: PlayfairGrid,
                  direction: int) -> str:
        """
        Transform every non-overlapping pair of `sequence`.
        A trailing unpaired letter is dropped.
        """
        if direction not in (Direction.ENCRYPT, Direction.DECRYPT):
            raise ValueError("direction must be +1 (encrypt) or -1 (decrypt)")
        out = [
            self.transform_pair(sequence[i], sequence[i + 1], grid, direction)
            for i in range(0, len(sequence) - 1, 2)
        ]
        return "".join(out)
