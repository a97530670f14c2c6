import heapq
from itertools import count
from typing import Dict

import numpy as np

from bitpack import EOF
from huff_const import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF

COUNT_CHUNK = 1 << 16  # words buffered before each bincount


class HuffmanNode:
    def __init__(self, value=0, weight=0, left=None, right=None):
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode(value={self.value}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"


def count_frequencies(bit_in) -> np.ndarray:
    """
    Scan bit_in to exhaustion in 8-bit words.
    Returns int64 array of length ALPH_SIZE+1; PSEUDO_EOF is forced to 1.
    The reader is not rewound.
    """
    counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    words = []
    while True:
        v = bit_in.read_bits(BITS_PER_WORD)
        if v == EOF:
            break
        words.append(v)
        if len(words) >= COUNT_CHUNK:
            counts += np.bincount(words, minlength=ALPH_SIZE + 1)
            words = []
    if words:
        counts += np.bincount(words, minlength=ALPH_SIZE + 1)
    counts[PSEUDO_EOF] = 1
    return counts


def build_tree(counts) -> HuffmanNode:
    # ties on weight fall back to insertion order: leaves by symbol, then merges
    order = count()
    pq = [(int(c), next(order), HuffmanNode(value=s, weight=int(c)))
          for s, c in enumerate(counts) if c > 0]
    if not pq:
        raise ValueError("cannot build a Huffman tree from an empty frequency table")
    heapq.heapify(pq)
    while len(pq) > 1:
        wa, _, a = heapq.heappop(pq)
        wb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (wa + wb, next(order), HuffmanNode(weight=wa + wb, left=a, right=b)))
    return pq[0][2]


def build_codebook(node: HuffmanNode, prefix: str = "", code: Dict[int, str] = None) -> Dict[int, str]:
    """Map each leaf symbol to its root path ('0' = left, '1' = right)."""
    if code is None:
        code = {}
    if node.is_leaf():
        # a lone root leaf still needs one bit per symbol
        code[node.value] = prefix or "0"
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code
