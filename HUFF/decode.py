import argparse
import os
from codec import decompress_file

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .hf")
    ap.add_argument("--output", required=True, help="path to decompressed file")
    ap.add_argument("--debug", type=int, default=0, help="debug level (1=summary, 4=tree dump)")
    args = ap.parse_args()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    st = decompress_file(args.input, args.output, debug=args.debug)
    print(f"[decode] wrote {args.output} bytes={st['bits_out'] // 8}")

if __name__ == "__main__":
    main()
