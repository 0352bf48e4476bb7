# splitmix/default.py
# Process-wide default generator.
# Seeded lazily on first use, then every new_smgen() call splits it under a
# lock: the continuation stays installed and the child goes to the caller.

import logging
import os
import threading
import time

from . import config
from .smgen import MASK64, mk_smgen, split_smgen

logger = logging.getLogger('splitmix')

MASK32 = (1 << 32) - 1
DEFAULT_SEED = 0x1234567890ABCDEF

_lock = threading.Lock()
_the_smgen = None


def mk_seed_time():
    """Wall-clock seconds in the low word, CPU time (microseconds) in the high word."""
    lo = int(time.time()) & MASK32
    hi = (time.process_time_ns() // 1000) & MASK32
    return (hi << 32) | lo


def derive_seed():
    """
    Derive a 64-bit seed integer according to config.SEED_MODE.
    Priority:
      - If SEED_MODE == 'fixed' and config.SEED is int -> use it
      - If SEED_MODE == 'fixed' and config.SEED is None -> use deterministic default
      - If SEED_MODE == 'random' -> use os.urandom(8)
      - If SEED_MODE == 'time' -> use mk_seed_time()
    """
    mode = (config.SEED_MODE or 'fixed').lower()
    if mode == 'fixed':
        if config.SEED is not None:
            seed = int(config.SEED) & MASK64
            logger.info(f"Using fixed SEED from config: {seed:016x}")
        else:
            seed = DEFAULT_SEED
            logger.info(f"Using default fixed SEED: {seed:016x}")
        return seed
    elif mode == 'random':
        seed = int.from_bytes(os.urandom(8), 'big')
        logger.info(f"Using random SEED (os.urandom): {seed:016x}")
        return seed
    elif mode == 'time':
        seed = mk_seed_time()
        logger.info(f"Using time-derived SEED: {seed:016x}")
        return seed
    else:
        seed = DEFAULT_SEED
        logger.warning(f"Unknown SEED_MODE '{config.SEED_MODE}', falling back to default SEED: {seed:016x}")
        return seed


def init_smgen():
    """Fresh generator seeded per config.SEED_MODE (time by default)."""
    return mk_smgen(derive_seed())


def new_smgen():
    """Derive a new generator from the global one using split_smgen."""
    global _the_smgen
    with _lock:
        if _the_smgen is None:
            _the_smgen = init_smgen()
        _the_smgen, child = split_smgen(_the_smgen)
    return child


def reset_default(gen=None):
    """Install gen as the global generator; None forces a lazy re-seed."""
    global _the_smgen
    with _lock:
        _the_smgen = gen
