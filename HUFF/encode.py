import argparse
import os
from bitpack import open_bit_reader
from codec import compress_file
from huffman import build_codebook, build_tree, count_frequencies
from metrics import average_code_length, compression_ratio, shannon_entropy

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to file to compress")
    ap.add_argument("--output", required=True, help="path to output .hf")
    ap.add_argument("--debug", type=int, default=0, help="debug level (1=summary, 4=code table)")
    ap.add_argument("--stats", action="store_true", help="print entropy and average code length")
    args = ap.parse_args()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    st = compress_file(args.input, args.output, debug=args.debug)

    n_in = os.path.getsize(args.input)
    n_out = os.path.getsize(args.output)
    print(f"[encode] wrote {args.output}")
    print(f"[encode] in={n_in}B out={n_out}B header={st['header_bits']} bits "
          f"ratio={compression_ratio(n_in, n_out):.3f}")

    if args.stats:
        with open_bit_reader(args.input) as bit_in:
            counts = count_frequencies(bit_in)
        codes = build_codebook(build_tree(counts))
        print(f"[encode] entropy={shannon_entropy(counts):.4f} bits/sym "
              f"avg_code={average_code_length(counts, codes):.4f} bits/sym")

if __name__ == "__main__":
    main()
