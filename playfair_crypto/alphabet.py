"""
Alphabet policy
===============
The Playfair grid holds 25 letters, so one of the 26 Latin letters has to go.
Two classical conventions are supported:

    MERGE_I_J   J is written as I, Q keeps its own cell
    OMIT_Q      Q is dropped entirely, I and J stay distinct

Grid construction and text normalization both pass every character through
`map_letter`. A grid and a text prepared under different policies would not
line up, so the policy is applied here and nowhere else.
"""

import string
from enum import Enum
from typing import Optional


LATIN = string.ascii_uppercase


class AlphabetPolicy(Enum):
    """Which letter gives up its grid cell."""

    MERGE_I_J = "merge-i-j"
    OMIT_Q    = "omit-q"

    @classmethod
    def from_merge_flag(cls, merge_i_j: bool) -> "AlphabetPolicy":
        return cls.MERGE_I_J if merge_i_j else cls.OMIT_Q

    @property
    def letters(self) -> str:
        """The 25 letters this policy admits, in alphabetical order."""
        excluded = "J" if self is AlphabetPolicy.MERGE_I_J else "Q"
        return LATIN.replace(excluded, "")


def map_letter(ch: str, policy: AlphabetPolicy) -> Optional[str]:
    """
    Uppercase one character and apply the alphabet policy.

    Returns the mapped letter, or None when the character is not an ASCII
    letter or is dropped by the policy.
    """
    if not ch.isascii():
        return None
    up = ch.upper()
    if up not in LATIN:
        return None
    if up == "J" and policy is AlphabetPolicy.MERGE_I_J:
        return "I"
    if up == "Q" and policy is AlphabetPolicy.OMIT_Q:
        return None
    return up


def filter_text(text: str, policy: AlphabetPolicy) -> str:
    """Map every character of `text`, keeping only the letters that survive."""
    return "".join(m for m in (map_letter(ch, policy) for ch in text) if m)
