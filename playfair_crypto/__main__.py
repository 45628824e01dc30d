"""
Module entry point
==================
Allows running the cipher via: python -m playfair_crypto
"""

import sys

from playfair_crypto.cli import main

if __name__ == "__main__":
    sys.exit(main())
