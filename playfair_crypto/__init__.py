"""
playfair_crypto
===============
The Playfair digraph substitution cipher.
Wheatstone, 1854: a keyed 5×5 letter square, text enciphered two letters
at a time.

Stages:
    1  GRID       — key square built from a keyword and an alphabet policy
    2  NORMALIZE  — text reduced to even-length digraphs, doubles split by X
    3  TRANSFORM  — row / column / rectangle rule, direction ±1

    PlayfairCipher ties the three together; format_digraphs prints the result.

Not secure. A pen-and-paper cipher kept for teaching and puzzles.
"""

__version__ = "1.0.0"

from .alphabet                  import AlphabetPolicy, map_letter, filter_text
from .config                    import CipherConfig, DEFAULT_CONFIG
from .stages.stage1_grid        import PlayfairGrid
from .stages.stage2_normalize   import TextNormalizer
from .stages.stage3_transform   import DigraphTransformer, Direction
from .cipher                    import PlayfairCipher
from .formatting                import format_digraphs

__all__ = [
    "AlphabetPolicy",
    "map_letter",
    "filter_text",
    "CipherConfig",
    "DEFAULT_CONFIG",
    "PlayfairGrid",
    "TextNormalizer",
    "DigraphTransformer",
    "Direction",
    "PlayfairCipher",
    "format_digraphs",
]
