# splitmix/random_gen.py
# Generic "random source" capability: anything with next() and split().
# SMGen satisfies it structurally; nothing here imports SMGen.

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomGen(Protocol):

    def next(self):
        """Return (int, next generator)."""
        ...

    def split(self):
        """Return two independent generators."""
        ...


def randoms(gen, n):
    """Draw n values from gen, returning them and the advanced generator."""
    if n < 0:
        raise ValueError("n must be >= 0")
    out = []
    for _ in range(n):
        x, gen = gen.next()
        out.append(x)
    return out, gen


def split_n(gen, n):
    """Split gen into n independent generators."""
    if n < 0:
        raise ValueError("n must be >= 0")
    gens = []
    for _ in range(n):
        gen, child = gen.split()
        gens.append(child)
    return gens
