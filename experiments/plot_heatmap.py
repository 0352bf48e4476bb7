# experiments/plot_heatmap.py
"""
Heatmap of bit balance: x axis = split depth, y axis = bit position,
cell value = mean ones fraction over all seeds (ideal 0.5).

CSV expected columns: seed, depth, bit, ones_fraction
 - seed: seed of the lineage (or 'oracle')
 - depth: int, how many splits deep the child stream is
 - bit: int 0..63 (0 = least significant)
 - ones_fraction: float in [0, 1]

Usage:
    python plot_heatmap.py --csv results/balance_XXXX.csv --out heatmap.png
"""

import argparse
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def prepare_pivot(df):
    # mean balance for each (bit, depth) over all seeds
    agg = df.groupby(['bit', 'depth'], as_index=False)['ones_fraction'].mean()
    pivot = agg.pivot(index='bit', columns='depth', values='ones_fraction')
    # most significant bit on top
    pivot = pivot.sort_index(ascending=False)
    return pivot


def plot_heatmap(pivot, title='Split Lineage Bit Balance', out_file=None, show=True):
    rows = pivot.index.tolist()
    cols = pivot.columns.tolist()
    data = pivot.values

    # diverging colormap centred on the ideal 0.5
    spread = max(0.01, float(np.nanmax(np.abs(data - 0.5)))) if data.size else 0.01
    fig, ax = plt.subplots(figsize=(0.4*len(cols)+3, 0.15*len(rows)+2))
    im = ax.imshow(data, aspect='auto', interpolation='nearest', cmap='coolwarm',
                   vmin=0.5 - spread, vmax=0.5 + spread)

    ax.set_xticks(np.arange(len(cols)))
    ax.set_yticks(np.arange(len(rows))[::8])
    ax.set_xticklabels(cols)
    ax.set_yticklabels(rows[::8])
    ax.set_xlabel('Split depth')
    ax.set_ylabel('Bit position')
    ax.set_title(title)

    cbar = fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label('Mean ones fraction')

    plt.tight_layout()
    if out_file:
        os.makedirs(os.path.dirname(out_file) or '.', exist_ok=True)
        plt.savefig(out_file, dpi=300)
        print(f"Heatmap saved to {out_file}")
    if show:
        plt.show()
    return fig


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', required=True, help='Path to experiments CSV')
    parser.add_argument('--out', default='results/heatmap_bit_balance.png', help='Output PNG path')
    parser.add_argument('--title', default='Split Lineage Bit Balance', help='Plot title')
    args = parser.parse_args()

    df = pd.read_csv(args.csv)
    required = {'seed', 'depth', 'bit', 'ones_fraction'}
    if not required.issubset(set(df.columns)):
        raise SystemExit(f"CSV must contain columns: {required}. Found: {df.columns.tolist()}")

    df['depth'] = df['depth'].astype(int)
    df['bit'] = df['bit'].astype(int)
    df['ones_fraction'] = df['ones_fraction'].astype(float)

    pivot = prepare_pivot(df)
    plot_heatmap(pivot, title=args.title, out_file=args.out)


if __name__ == '__main__':
    main()
