from bitpack import EOF
from huffman import HuffmanNode
from huff_const import ALPH_SIZE, BITS_PER_INT, HUFF_TREE, PSEUDO_EOF, SYMBOL_BITS
from huff_errors import FormatError, TruncatedHeaderError

# Stream layout (MSB-first bits):
# magic(32) tree(preorder) body(codes..., code(PSEUDO_EOF)) pad(0..7 zero bits)
#
# tree: internal -> 0 tree(left) tree(right)
#       leaf     -> 1 symbol(9)

# A valid tree has at most ALPH_SIZE+1 leaves, so no leaf sits deeper than this
MAX_DEPTH = ALPH_SIZE


def write_magic(out):
    out.write_bits(BITS_PER_INT, HUFF_TREE)


def read_magic(bit_in):
    magic = bit_in.read_bits(BITS_PER_INT)
    if magic == EOF:
        raise FormatError("Bad magic: stream shorter than 32 bits")
    if magic != HUFF_TREE:
        raise FormatError(f"Bad magic: illegal header starts with {magic:#010x}")


def write_tree_header(node: HuffmanNode, out):
    if node.is_leaf():
        out.write_bits(1, 1)
        out.write_bits(SYMBOL_BITS, node.value)
    else:
        out.write_bits(1, 0)
        write_tree_header(node.left, out)
        write_tree_header(node.right, out)


def read_tree_header(bit_in, depth: int = 0) -> HuffmanNode:
    if depth > MAX_DEPTH:
        raise FormatError("Malformed header: tree deeper than any valid code")
    bit = bit_in.read_bits(1)
    if bit == EOF:
        raise TruncatedHeaderError("Malformed stream: tree header truncated")
    if bit == 0:
        left = read_tree_header(bit_in, depth + 1)
        right = read_tree_header(bit_in, depth + 1)
        return HuffmanNode(left=left, right=right)
    value = bit_in.read_bits(SYMBOL_BITS)
    if value == EOF:
        raise TruncatedHeaderError("Malformed stream: leaf symbol truncated")
    if value > PSEUDO_EOF:
        raise FormatError(f"Malformed header: illegal symbol {value}")
    return HuffmanNode(value=value)
