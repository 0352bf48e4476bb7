# attacker/recover.py
# Attacker that queries oracle /get_output a few times, inverts the output
# mixer to recover the SplitMix state (seed, gamma), then predicts the next
# output and checks it with /validate.

import argparse
import time

import requests

from splitmix.recover import recover_state
from splitmix.smgen import next_word64

ORACLE = 'http://127.0.0.1:5000'


def query_oracle(n, oracle=ORACLE):
    outs = []
    for _ in range(n):
        r = requests.get(oracle + '/get_output', timeout=5)
        r.raise_for_status()
        outs.append(int(r.json()['output'], 16))
    return outs


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--samples', type=int, default=2, help='number of outputs to collect (>= 2)')
    parser.add_argument('--oracle', default=ORACLE, help='oracle base URL')
    args = parser.parse_args()
    if args.samples < 2:
        raise SystemExit("--samples must be at least 2")

    t0 = time.time()
    print(f"[attacker] Querying oracle for {args.samples} outputs...")
    obs = query_oracle(args.samples, args.oracle)
    for i, o in enumerate(obs):
        print(f" obs[{i}]: {o:016x}")
    state = recover_state(obs)
    if state is None:
        print("[attacker] Outputs are not one full-width stream. Is the oracle in 'word' mode with OUTPUT_BITS=64?")
    else:
        print("[attacker] Recovered state:")
        print(f" seed={state.seed:016x} gamma={state.gamma:016x}")
        predicted, _ = next_word64(state)
        cand_hex = format(predicted, '016x')
        print(f"[attacker] Predicted next output: {cand_hex}")
        resp = requests.post(args.oracle + '/validate', json={'candidate': cand_hex}, timeout=5)
        print("[attacker] Validate response:", resp.json())
    print(f"[attacker] Done in {time.time()-t0:.2f}s")


if __name__ == '__main__':
    main()
