# splitmix/recover.py
# The output mixers are bijections, so full 64-bit outputs can be inverted
# back to seeds. Two consecutive outputs give seed and gamma, which is the
# whole generator state (SplitMix is not a cryptographic RNG).

from .smgen import MASK64, SMGen, next_word64

# multiplicative inverses mod 2**64 of the mixer constants
INV_C4CE = pow(0xc4ceb9fe1a85ec53, -1, 1 << 64)
INV_FF51 = pow(0xff51afd7ed558ccd, -1, 1 << 64)
INV_BF58 = pow(0xbf58476d1ce4e5b9, -1, 1 << 64)
INV_94D0 = pow(0x94d049bb133111eb, -1, 1 << 64)


def unshift_xor(n, w):
    # each pass fixes n more high bits of x = w ^ (x >> n)
    x = w
    for _ in range(64 // n):
        x = w ^ (x >> n)
    return x


def unmix64(z):
    z = unshift_xor(33, z & MASK64)
    z = unshift_xor(33, (z * INV_FF51) & MASK64)
    return unshift_xor(33, (z * INV_C4CE) & MASK64)


def unmix64variant13(z):
    z = unshift_xor(31, z & MASK64)
    z = unshift_xor(27, (z * INV_94D0) & MASK64)
    return unshift_xor(30, (z * INV_BF58) & MASK64)


def recover_state(outputs):
    """
    Recover the generator that produced consecutive next_word64 outputs.
    Returns the state positioned after the last output, or None when the
    outputs do not come from a single stream.
    """
    if len(outputs) < 2:
        raise ValueError("need at least two consecutive outputs")
    seeds = [unmix64(o) for o in outputs]
    gamma = (seeds[1] - seeds[0]) & MASK64
    if not gamma & 1:
        return None
    for a, b in zip(seeds, seeds[1:]):
        if (b - a) & MASK64 != gamma:
            return None
    return SMGen(seeds[-1], gamma)


def predict_next(outputs):
    state = recover_state(outputs)
    if state is None:
        return None
    w, _ = next_word64(state)
    return w
