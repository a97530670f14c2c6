# Read-only constants shared by the Huffman modules.

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD       # 256 literal byte values
PSEUDO_EOF = ALPH_SIZE               # reserved end-of-stream symbol
SYMBOL_BITS = BITS_PER_WORD + 1      # 9 bits hold 0..256 in the tree header

# Format identifier written as the first 32 bits of every compressed stream
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4
