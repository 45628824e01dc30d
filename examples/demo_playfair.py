"""
playfair_crypto — Live Demo
===========================
Run:  python examples/demo_playfair.py

Shows the key square, the prepared digraphs and an encrypt/decrypt round
trip for both alphabet policies, with timing.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_crypto import (
    AlphabetPolicy, PlayfairCipher, TextNormalizer, format_digraphs,
)

LINE = "═" * 70
KEY  = "Playfair example"
MSG  = "Hide the gold in the tree stump. Quickly, Jim!"

def header(n, name):
    print(f"\n{LINE}")
    print(f"  {n} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  playfair_crypto — Demo")
print(LINE)
print(f"  Key:     {KEY}")
print(f"  Message: {MSG}")

for n, policy in enumerate(AlphabetPolicy, start=1):
    header(n, f"Policy {policy.value}")
    t0 = time.perf_counter()
    c  = PlayfairCipher(KEY, policy)
    ct = c.encrypt(MSG)
    pt = c.decrypt(ct)
    elapsed = time.perf_counter() - t0

    print()
    for row in str(c.grid).splitlines():
        print(f"      {row}")
    print()
    ok("Digraphs",   format_digraphs(TextNormalizer().normalize(MSG, policy, True)))
    ok("Encrypted",  format_digraphs(ct))
    ok("Decrypted",  format_digraphs(pt))
    ok("Round-trip", f"{elapsed*1000:.2f} ms")

print(f"\n{LINE}")
print("  Padding X marks split doubles and odd lengths.")
print(LINE + "\n")
