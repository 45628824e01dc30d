"""
Cipher configuration
====================
Fixed values shared by every stage of the Playfair pipeline.

    default_key     substituted when the caller supplies an empty key
    padding_char    splits doubled letters and evens out odd-length text
    grid_size       side of the square key grid (5 → 25 cells)
    pairs_per_line  digraphs printed per output line by the formatter

The dataclass is frozen: a configuration is built once and passed around,
never mutated.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CipherConfig:
    """Immutable constants for grid construction, padding and output."""

    default_key: str = "KEYWORD"
    padding_char: str = "X"
    grid_size: int = 5
    pairs_per_line: int = 26

    def __post_init__(self):
        if len(self.padding_char) != 1 or not ("A" <= self.padding_char <= "Z"):
            raise ValueError("padding_char must be a single uppercase letter A-Z.")
        if not any(c.isascii() and c.isalpha() for c in self.default_key):
            raise ValueError("default_key must contain at least one letter.")
        if self.grid_size != 5:
            raise ValueError("Only the classical 5x5 grid is supported.")
        if self.pairs_per_line < 1:
            raise ValueError("pairs_per_line must be positive.")

    @property
    def grid_cells(self) -> int:
        return self.grid_size * self.grid_size


DEFAULT_CONFIG = CipherConfig()
