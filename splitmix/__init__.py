from .smgen import (
    GOLDEN_GAMMA,
    SMGen,
    mix64,
    mix64variant13,
    mix_gamma,
    mk_smgen,
    next_double,
    next_int,
    next_word64,
    seed_smgen,
    split_smgen,
)
from .default import init_smgen, new_smgen
from .random_gen import RandomGen

__all__ = [
    'GOLDEN_GAMMA',
    'SMGen',
    'RandomGen',
    'init_smgen',
    'mix64',
    'mix64variant13',
    'mix_gamma',
    'mk_smgen',
    'new_smgen',
    'next_double',
    'next_int',
    'next_word64',
    'seed_smgen',
    'split_smgen',
]
