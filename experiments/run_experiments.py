# experiments/run_experiments.py
# Bit-balance of split lineages: for each seed, walk `depth` splits and record
# the per-bit ones fraction of every child stream.
# With --oracle, children come from a running oracle's /split instead.

import argparse
import csv
import os
import time

import requests

from splitmix.smgen import mk_smgen, seed_smgen
from splitmix.stats import bit_balance, draw_words, lineage_balance


def oracle_rows(oracle, depth, n):
    rows = []
    for d in range(depth):
        r = requests.get(oracle + '/split', timeout=5)
        r.raise_for_status()
        data = r.json()
        child = seed_smgen(int(data['seed'], 16), int(data['gamma'], 16))
        words, _ = draw_words(child, n)
        for bit, frac in enumerate(bit_balance(words)):
            rows.append({'depth': d, 'bit': bit, 'ones_fraction': float(frac)})
    return rows


def ensure_results_dir():
    os.makedirs('results', exist_ok=True)


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--seeds', type=str, default='0,1,42,12345', help='comma list')
    parser.add_argument('--depth', type=int, default=16, help='splits per lineage')
    parser.add_argument('--draws', type=int, default=2000, help='words drawn per child')
    parser.add_argument('--oracle', default=None, help='oracle base URL (optional)')
    args = parser.parse_args()

    ensure_results_dir()
    csv_path = os.path.join('results', f'balance_{int(time.time())}.csv')
    with open(csv_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['seed', 'depth', 'bit', 'ones_fraction'])
        if args.oracle:
            print(f"Drawing {args.depth} children from {args.oracle}")
            for row in oracle_rows(args.oracle, args.depth, args.draws):
                writer.writerow(['oracle', row['depth'], row['bit'], f"{row['ones_fraction']:.5f}"])
        else:
            for s in [int(x, 0) for x in args.seeds.split(',')]:
                print(f"Running seed={s}, depth={args.depth}, draws={args.draws}")
                for row in lineage_balance(mk_smgen(s), args.depth, args.draws):
                    writer.writerow([s, row['depth'], row['bit'], f"{row['ones_fraction']:.5f}"])
                f.flush()
    print("Experiments complete. CSV saved at:", csv_path)
