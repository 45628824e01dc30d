"""
Stage 1 — GRID: the 5×5 key square
==================================
The key is written into the grid first, left to right and top to bottom,
skipping repeated letters. The rest of the alphabet follows in order.

    key "KEYWORD", MERGE_I_J:

        K E Y W O
        R D A B C
        F G H I L
        M N P Q S
        T U V X Z

Appending the full alphabet to the key guarantees 25 distinct letters for
any key at all, including an empty one or one with no letters in it.
"""

import logging
from typing import Dict, Optional, Tuple

from ..alphabet import LATIN, AlphabetPolicy, map_letter
from ..config import DEFAULT_CONFIG, CipherConfig

logger = logging.getLogger(__name__)


class PlayfairGrid:
    """
    Immutable key square.

    Cells are stored row-major in a 25-character string. A letter → (row, col)
    map is built once so lookups during transformation are O(1).
    """

    __slots__ = ("_cells", "_positions", "_size", "_policy")

    def __init__(self, cells: str, policy: AlphabetPolicy,
                 config: CipherConfig = DEFAULT_CONFIG):
        if len(cells) != config.grid_cells or len(set(cells)) != config.grid_cells:
            raise ValueError(
                f"Grid needs {config.grid_cells} distinct letters, got {cells!r}."
            )
        if set(cells) != set(policy.letters):
            raise ValueError(f"Grid letters do not match policy {policy.value}.")
        self._cells  = cells
        self._size   = config.grid_size
        self._policy = policy
        self._positions: Dict[str, Tuple[int, int]] = {
            ch: divmod(i, self._size) for i, ch in enumerate(cells)
        }

    @classmethod
    def build(cls, key: str, policy: AlphabetPolicy,
              config: CipherConfig = DEFAULT_CONFIG) -> "PlayfairGrid":
        """Derive the grid from `key` (the default key if empty)."""
        source = (key or config.default_key) + LATIN
        collected = []
        seen = set()
        for ch in source:
            letter = map_letter(ch, policy)
            if letter is None or letter in seen:
                continue
            seen.add(letter)
            collected.append(letter)
        grid = cls("".join(collected[:config.grid_cells]), policy, config)
        logger.debug(f"Grid built | policy={policy.value} | "
                     f"default_key={'yes' if not key else 'no'}")
        return grid

    @property
    def policy(self) -> AlphabetPolicy:
        return self._policy

    @property
    def cells(self) -> str:
        return self._cells

    def position(self, letter: str) -> Optional[Tuple[int, int]]:
        """(row, col) of `letter`, or None if it is not in the grid."""
        return self._positions.get(letter)

    def at(self, row: int, col: int) -> str:
        """Letter at (row, col); both indices wrap around the grid edges."""
        n = self._size
        return self._cells[((row % n) + n) % n * n + ((col % n) + n) % n]

    def rows(self) -> list:
        n = self._size
        return [self._cells[r * n:(r + 1) * n] for r in range(n)]

    def __contains__(self, letter: str) -> bool:
        return letter in self._positions

    def __eq__(self, other):
        if not isinstance(other, PlayfairGrid):
            return NotImplemented
        return self._cells == other._cells and self._policy is other._policy

    def __hash__(self):
        return hash((self._cells, self._policy))

    def __str__(self):
        return "\n".join(" ".join(row) for row in self.rows())

    def __repr__(self):
        return f"PlayfairGrid({self._cells!r}, {self._policy.value})"
