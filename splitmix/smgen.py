# splitmix/smgen.py
# SplitMix splittable RNG (Steele, Lea, Flood 2014).
# State: immutable (seed, gamma) pair of 64-bit words, gamma always odd.
# Every operation returns a new state instead of updating the old one.

from dataclasses import dataclass

MASK64 = (1 << 64) - 1
SIGNBIT = 1 << 63

GOLDEN_GAMMA = 0x9e3779b97f4a7c15
DOUBLE_ULP = 1.0 / (1 << 53)


@dataclass(frozen=True)
class SMGen:
    """SplitMix generator state. Build with seed_smgen() or mk_smgen()."""

    seed: int
    gamma: int

    def __post_init__(self):
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, 'seed', self.seed & MASK64)
        object.__setattr__(self, 'gamma', (self.gamma | 1) & MASK64)

    def __repr__(self):
        return f"SMGen(seed=0x{self.seed:016x}, gamma=0x{self.gamma:016x})"

    def next_word64(self):
        return next_word64(self)

    def next_int(self):
        return next_int(self)

    def next_double(self):
        return next_double(self)

    def split(self):
        return split_smgen(self)

    # draw primitive of the RandomGen capability
    next = next_int


# ---------------------------------------------------------------------------
# operations
# ---------------------------------------------------------------------------

def next_word64(g):
    """Return (unsigned 64-bit word, next generator)."""
    seed = (g.seed + g.gamma) & MASK64
    return mix64(seed), SMGen(seed, g.gamma)


def next_int(g):
    """Return (signed 64-bit int, next generator).

    The word's bit pattern is read as two's complement, so results cover the
    whole range [-2**63, 2**63) including negative values.
    """
    w, g2 = next_word64(g)
    return to_signed64(w), g2


def next_double(g):
    """Return (float in [0, 1), next generator) built from the top 53 bits."""
    w, g2 = next_word64(g)
    return (w >> 11) * DOUBLE_ULP, g2


def split_smgen(g):
    """Split a generator into two uncorrelated generators.

    The first keeps the gamma and continues the stream two strides ahead;
    the second gets a mixed seed and a freshly derived gamma.
    """
    seed1 = (g.seed + g.gamma) & MASK64
    seed2 = (seed1 + g.gamma) & MASK64
    return SMGen(seed2, g.gamma), SMGen(mix64(seed1), mix_gamma(seed2))


def to_signed64(w):
    w &= MASK64
    return w - (1 << 64) if w & SIGNBIT else w


# ---------------------------------------------------------------------------
# mixing
# ---------------------------------------------------------------------------

def shift_xor(n, w):
    return w ^ (w >> n)


def shift_xor_multiply(n, k, w):
    return (shift_xor(n, w) * k) & MASK64


def mix64(z):
    z = shift_xor_multiply(33, 0xc4ceb9fe1a85ec53, z & MASK64)
    z = shift_xor_multiply(33, 0xff51afd7ed558ccd, z)
    return shift_xor(33, z)


def mix64variant13(z):
    z = shift_xor_multiply(30, 0xbf58476d1ce4e5b9, z & MASK64)
    z = shift_xor_multiply(27, 0x94d049bb133111eb, z)
    return shift_xor(31, z)


def mix_gamma(z):
    """Derive an odd gamma; patterns with too many bit transitions get
    XORed with the alternating mask (low bit 0, so oddness survives)."""
    z = mix64variant13(z) | 1
    n = bin(z ^ (z >> 1)).count('1')
    if n >= 24:
        return z ^ 0xaaaaaaaaaaaaaaaa
    return z


# ---------------------------------------------------------------------------
# initialisation
# ---------------------------------------------------------------------------

def seed_smgen(seed, gamma):
    """Create a generator from an explicit seed and gamma (forced odd)."""
    return SMGen(seed, gamma | 1)


def mk_smgen(seed):
    """Preferred way to deterministically construct a generator."""
    return SMGen(mix64(seed), mix_gamma((seed + GOLDEN_GAMMA) & MASK64))
