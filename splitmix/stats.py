# splitmix/stats.py
# Bit-balance sanity checks over generator output.

import numpy as np

from .smgen import next_word64, split_smgen


def draw_words(gen, n):
    words = np.empty(n, dtype=np.uint64)
    for i in range(n):
        w, gen = next_word64(gen)
        words[i] = w
    return words, gen


def bit_balance(words):
    """Fraction of ones at each of the 64 bit positions (index 0 = LSB)."""
    words = np.asarray(words, dtype=np.uint64)
    if words.size == 0:
        raise ValueError("need at least one word")
    shifts = np.arange(64, dtype=np.uint64)
    bits = (words[:, None] >> shifts) & np.uint64(1)
    return bits.mean(axis=0)


def is_balanced(words, tolerance=0.05):
    return bool(np.all(np.abs(bit_balance(words) - 0.5) <= tolerance))


def lineage_balance(gen, depth, n):
    """
    Walk a split lineage `depth` times; at each depth draw n words from the
    child and report its per-bit balance as rows of
    {'depth', 'bit', 'ones_fraction'}.
    """
    if depth < 0 or n <= 0:
        raise ValueError("depth must be >= 0 and n > 0")
    rows = []
    for d in range(depth):
        gen, child = split_smgen(gen)
        words, _ = draw_words(child, n)
        for bit, frac in enumerate(bit_balance(words)):
            rows.append({'depth': d, 'bit': bit, 'ones_fraction': float(frac)})
    return rows
