"""Output formatting: digraphs in space-separated groups, wrapped by line."""

from .config import DEFAULT_CONFIG
from .stages.stage2_normalize import TextNormalizer


def format_digraphs(sequence: str,
                    pairs_per_line: int = DEFAULT_CONFIG.pairs_per_line) -> str:
    """
    "HELXLO" → "HE LX LO"

    Lines hold at most `pairs_per_line` pairs. A trailing unpaired letter is
    not printed. Empty input gives an empty string.
    """
    if pairs_per_line < 1:
        raise ValueError("pairs_per_line must be positive.")
    pairs = TextNormalizer.digraphs(sequence)
    lines = [
        " ".join(pairs[i:i + pairs_per_line])
        for i in range(0, len(pairs), pairs_per_line)
    ]
    return "\n".join(lines)
