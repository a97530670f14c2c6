import io

from bitpack import BitReader, BitWriter, EOF, open_bit_reader, open_bit_writer
from bitstream import read_magic, read_tree_header, write_magic, write_tree_header
from huffman import build_codebook, build_tree, count_frequencies
from huff_const import BITS_PER_WORD, DEBUG_HIGH, DEBUG_LOW, PSEUDO_EOF
from huff_errors import TruncatedBodyError


def _dump_codebook(codes, counts):
    for sym in sorted(codes):
        label = "EOF" if sym == PSEUDO_EOF else f"{sym:3d}"
        print(f"[huff]   {label} count={int(counts[sym])} code={codes[sym]}")


def compress(bit_in, out, debug: int = 0):
    """
    bit_in: BitReader over the source; must support reset()
    out: BitWriter, closed on return

    Returns:
      stats: dict (bits_in, bits_out, header_bits)
    """
    counts = count_frequencies(bit_in)
    bits_in = bit_in.bits_read
    root = build_tree(counts)
    codes = build_codebook(root)
    if debug >= DEBUG_HIGH:
        _dump_codebook(codes, counts)

    write_magic(out)
    write_tree_header(root, out)
    header_bits = out.bits_written

    bit_in.reset()
    packed = {sym: (int(c, 2), len(c)) for sym, c in codes.items()}
    while True:
        v = bit_in.read_bits(BITS_PER_WORD)
        if v == EOF:
            break
        code, L = packed[v]
        out.write_bits(L, code)
    code, L = packed[PSEUDO_EOF]
    out.write_bits(L, code)
    bits_out = out.bits_written
    out.close()

    if debug >= DEBUG_LOW:
        print(f"[huff] compress: symbols={len(codes)} header={header_bits} bits "
              f"in={bits_in} bits out={bits_out} bits")
    return dict(bits_in=bits_in, bits_out=bits_out, header_bits=header_bits)


def decompress(bit_in, out, debug: int = 0):
    """
    bit_in: BitReader positioned at the magic number
    out: BitWriter, closed on success; left as-is when decoding fails

    Returns:
      stats: dict (bits_in, bits_out)
    """
    read_magic(bit_in)
    root = read_tree_header(bit_in)
    if debug >= DEBUG_HIGH:
        print(f"[huff] decompress: tree {root!r}")

    node = root
    while True:
        bit = bit_in.read_bits(1)
        if bit == EOF:
            raise TruncatedBodyError("Corrupt stream: no PSEUDO_EOF before end of input")
        if not root.is_leaf():
            node = node.left if bit == 0 else node.right
        if node.is_leaf():
            if node.value == PSEUDO_EOF:
                break
            out.write_bits(BITS_PER_WORD, node.value)
            node = root

    bits_in = bit_in.bits_read
    bits_out = out.bits_written
    out.close()

    if debug >= DEBUG_LOW:
        print(f"[huff] decompress: in={bits_in} bits out={bits_out} bits")
    return dict(bits_in=bits_in, bits_out=bits_out)


def compress_bytes(data: bytes, debug: int = 0) -> bytes:
    buf = io.BytesIO()
    compress(BitReader(io.BytesIO(data)), BitWriter(buf), debug=debug)
    return buf.getvalue()


def decompress_bytes(blob: bytes, debug: int = 0) -> bytes:
    buf = io.BytesIO()
    decompress(BitReader(io.BytesIO(blob)), BitWriter(buf), debug=debug)
    return buf.getvalue()


def compress_file(src, dst, debug: int = 0):
    with open_bit_reader(src) as bit_in, open_bit_writer(dst) as out:
        return compress(bit_in, out, debug=debug)


def decompress_file(src, dst, debug: int = 0):
    with open_bit_reader(src) as bit_in, open_bit_writer(dst) as out:
        return decompress(bit_in, out, debug=debug)
