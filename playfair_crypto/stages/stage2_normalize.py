"""
Stage 2 — NORMALIZE: raw text to digraphs
=========================================
Reduces arbitrary text to an even-length run of grid letters.

    1. uppercase, drop anything that is not a letter, apply the policy
    2. encryption only: a pair of equal letters is split by the padding
       letter, and the repeated letter starts the next pair
    3. odd length: one padding letter is appended

    "Hello, balloon!"  →  HE LX LO BA LX LO ON

Decryption skips step 2. Ciphertext is already paired, and splitting a
doubled letter in it would shift every pair after it.
"""

import logging

from ..alphabet import AlphabetPolicy, filter_text
from ..config import DEFAULT_CONFIG, CipherConfig

logger = logging.getLogger(__name__)


class TextNormalizer:
    """Turns raw text into the digraph sequence the transformer consumes."""

    def __init__(self, config: CipherConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def padding(self) -> str:
        return self._config.padding_char

    def normalize(self, text: str, policy: AlphabetPolicy,
                  for_encryption: bool) -> str:
        letters = filter_text(text, policy)
        if for_encryption:
            letters = self.split_doubles(letters)
        if len(letters) % 2:
            letters += self.padding
        logger.debug(f"Normalized {len(text)} chars → {len(letters) // 2} digraphs")
        return letters

    def split_doubles(self, letters: str) -> str:
        """
        Insert the padding letter wherever a pair would hold the same letter
        twice. A trailing single letter is left alone.
        """
        out = []
        i = 0
        n = len(letters)
        while i < n:
            first = letters[i]
            if i + 1 == n:
                out.append(first)
                break
            second = letters[i + 1]
            if first == second:
                out.append(first + self.padding)
                i += 1
            else:
                out.append(first + second)
                i += 2
        return "".join(out)

    @staticmethod
    def digraphs(sequence: str) -> list:
        """Split a sequence into its two-letter pairs."""
        return [sequence[i:i + 2] for i in range(0, len(sequence) - 1, 2)]
