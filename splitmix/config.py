# splitmix/config.py
# Configuration for the default generator and the oracle service

# Network config
HOST = '127.0.0.1'
PORT = 5000

# What /get_output returns: 'word' (hex), 'int' (signed decimal) or 'double'
OUTPUT_MODE = 'word'

# Seed configuration for the process-wide default generator:
# - SEED_MODE:
#     'fixed'  : use the integer in SEED (if SEED is None, falls back to deterministic constant)
#     'random' : use os.urandom(8) at first use (non-deterministic each run)
#     'time'   : wall-clock seconds in the low 32 bits, CPU time in the high 32 bits
SEED_MODE = 'time'   # 'fixed' | 'random' | 'time'

# If SEED_MODE == 'fixed', use this SEED (64-bit integer).
# If None, a default deterministic 64-bit constant will be used.
SEED = None

# How many bits the oracle reveals on each /get_output call in 'word' mode (1..64)
OUTPUT_BITS = 64
OUTPUT_SELECT = 'high'   # 'high' or 'low'

# Logging level
LOG_LEVEL = 'INFO'
