"""
Playfair cipher
===============
Charles Wheatstone, 1854; promoted by Lord Playfair. The first practical
digraph substitution cipher, used in the field through both World Wars.
Historical and educational only: a few hundred letters of ciphertext are
enough to recover the key square by hand.

Pipeline:  key ─► GRID        (stage 1)
           text ─► NORMALIZE  (stage 2) ─► TRANSFORM (stage 3) ─► digraphs

Output is always an even-length run of uppercase letters. Spaces, digits
and punctuation are dropped; doubled letters and odd lengths are padded
with X, so decrypt(encrypt(p)) returns the normalized plaintext.
"""

import logging
from typing import Union

from .alphabet import AlphabetPolicy
from .config import DEFAULT_CONFIG, CipherConfig
from .stages.stage1_grid import PlayfairGrid
from .stages.stage2_normalize import TextNormalizer
from .stages.stage3_transform import DigraphTransformer, Direction

logger = logging.getLogger(__name__)


class PlayfairCipher:
    """Playfair encryption and decryption over one key square."""

    def __init__(self, key: str = "",
                 policy: Union[AlphabetPolicy, bool] = AlphabetPolicy.MERGE_I_J,
                 config: CipherConfig = DEFAULT_CONFIG):
        """
        key    : any text; letters only are used, empty selects the default key
        policy : AlphabetPolicy, or a bool (True = merge I/J, False = omit Q)
        """
        if not isinstance(key, str):
            raise TypeError("Playfair key must be a string.")
        if isinstance(policy, bool):
            policy = AlphabetPolicy.from_merge_flag(policy)
        if config.padding_char not in policy.letters:
            raise ValueError(
                f"Padding letter {config.padding_char!r} is not in the "
                f"{policy.value} alphabet."
            )
        self._policy      = policy
        self._config      = config
        self._grid        = PlayfairGrid.build(key, policy, config)
        self._normalizer  = TextNormalizer(config)
        self._transformer = DigraphTransformer()
        logger.info(f"PlayfairCipher | policy={policy.value}")

    @property
    def grid(self) -> PlayfairGrid:
        return self._grid

    @property
    def policy(self) -> AlphabetPolicy:
        return self._policy

    @property
    def config(self) -> CipherConfig:
        return self._config

    def process(self, text: str, encrypt: bool) -> str:
        """Normalize `text` and run it through the grid in one direction."""
        if not isinstance(text, str):
            raise TypeError("Playfair input must be a string.")
        direction = Direction.ENCRYPT if encrypt else Direction.DECRYPT
        digraphs = self._normalizer.normalize(text, self._policy, for_encryption=encrypt)
        result = self._transformer.transform(digraphs, self._grid, direction)
        logger.debug(f"{direction.name.lower()}: {len(digraphs)} → {len(result)} letters")
        return result

    def encrypt(self, plaintext: str) -> str:
        return self.process(plaintext, encrypt=True)

    def decrypt(self, ciphertext: str) -> str:
        return self.process(ciphertext, encrypt=False)

    def __repr__(self):
        return f"PlayfairCipher({self._policy.value})"
