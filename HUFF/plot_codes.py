import argparse
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from bitpack import open_bit_reader
from huffman import build_codebook, build_tree, count_frequencies
from huff_const import PSEUDO_EOF

def plot_code_lengths(counts, codes, path):
    syms = np.array(sorted(codes), dtype=np.int64)
    freq = np.array([int(counts[s]) for s in syms], dtype=np.int64)
    lens = np.array([len(codes[s]) for s in syms], dtype=np.int64)

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(10, 5), sharex=True)
    ax0.bar(syms, freq, width=1.0)
    ax0.set_yscale("log")
    ax0.set_ylabel("count")
    ax0.set_title("Symbol counts and Huffman code lengths", fontsize=9)

    ax1.bar(syms, lens, width=1.0, color="tab:orange")
    ax1.set_ylabel("code length (bits)")
    ax1.set_xlabel(f"symbol ({PSEUDO_EOF} = PSEUDO_EOF)")

    fig.tight_layout()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to analyse")
    ap.add_argument("--output", required=True, help="path to output .png")
    args = ap.parse_args()

    with open_bit_reader(args.input) as bit_in:
        counts = count_frequencies(bit_in)
    codes = build_codebook(build_tree(counts))
    plot_code_lengths(counts, codes, args.output)
    print(f"[plot_codes] wrote {args.output} symbols={len(codes)}")

if __name__ == "__main__":
    main()
