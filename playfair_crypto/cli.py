"""
Command-line front end
======================
Run:  python -m playfair_crypto            (interactive, prompts for everything)
      python -m playfair_crypto -e -k MONARCHY --merge-ij -t "instruments"

Anything not given as a flag is asked for on the terminal, in this order:
mode, key, I/J mapping, text.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .alphabet import AlphabetPolicy
from .cipher import PlayfairCipher
from .config import DEFAULT_CONFIG, CipherConfig
from .formatting import format_digraphs

logger = logging.getLogger(__name__)

OUTPUT_HEADER = "\n\n OUTPUT:\n========="


def _prompt(question: str) -> str:
    """Read one answer. A closed stdin counts as an empty answer."""
    try:
        return input(question)
    except EOFError:
        return ""


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {n}")
    return n


def _first_char_is(answer: str, letter: str) -> bool:
    answer = answer.strip()
    return bool(answer) and answer[0].lower() == letter


def ask_mode() -> bool:
    """True to encrypt. Anything other than an answer starting with E decrypts."""
    return _first_char_is(_prompt("(E)ncode or (D)ecode? "), "e")


def ask_key() -> str:
    return _prompt("Enter a en/decryption key: ")


def ask_policy() -> AlphabetPolicy:
    """Y merges I and J; anything else omits Q."""
    return AlphabetPolicy.from_merge_flag(_first_char_is(_prompt("I <-> J (Y/N): "), "y"))


def ask_text() -> str:
    return _prompt("Enter the text: ")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="playfair",
        description="Encrypt or decrypt text with the Playfair digraph cipher.",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("-e", "--encrypt", dest="encrypt", action="store_const", const=True,
                      help="encrypt the text")
    mode.add_argument("-d", "--decrypt", dest="encrypt", action="store_const", const=False,
                      help="decrypt the text")
    p.add_argument("-k", "--key", help="cipher key (empty selects the default key)")
    policy = p.add_mutually_exclusive_group()
    policy.add_argument("--merge-ij", dest="policy", action="store_const",
                        const=AlphabetPolicy.MERGE_I_J, help="write J as I")
    policy.add_argument("--omit-q", dest="policy", action="store_const",
                        const=AlphabetPolicy.OMIT_Q, help="drop Q, keep I and J apart")
    p.add_argument("-t", "--text", help="plaintext or ciphertext")
    p.add_argument("--pairs-per-line", type=_positive_int, default=DEFAULT_CONFIG.pairs_per_line,
                   help="digraphs per output line (default: %(default)s)")
    p.add_argument("--show-grid", action="store_true", help="print the key square")
    p.add_argument("--no-pause", action="store_true", help="exit without waiting for Enter")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=" %(message)s")

    encrypt = args.encrypt if args.encrypt is not None else ask_mode()
    key     = args.key if args.key is not None else ask_key()
    policy  = args.policy if args.policy is not None else ask_policy()
    text    = args.text if args.text is not None else ask_text()

    cipher = PlayfairCipher(key, policy, CipherConfig(pairs_per_line=args.pairs_per_line))
    logger.debug(f"mode={'encrypt' if encrypt else 'decrypt'} | policy={policy.value}")
    result = cipher.process(text, encrypt=encrypt)

    if args.show_grid or args.verbose:
        print(f"\n{cipher.grid}")
    print(OUTPUT_HEADER)
    print(format_digraphs(result, cipher.config.pairs_per_line))
    print()

    if not args.no_pause and sys.stdin.isatty():
        _prompt("Press Enter to exit...")
    return 0
