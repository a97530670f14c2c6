import io
import random
from fractions import Fraction
from itertools import product

import numpy as np
import pytest

from bitpack import EOF, BitReader
from huffman import HuffmanNode, build_codebook, build_tree, count_frequencies
from huff_const import ALPH_SIZE, PSEUDO_EOF
from metrics import weighted_code_length


def _counts(data: bytes):
	return count_frequencies(BitReader(io.BytesIO(data)))


def _leaves(node):
	if node.is_leaf():
		return [node]
	return _leaves(node.left) + _leaves(node.right)


def test_count_frequencies_literal_counts():
	counts = _counts(b"AAB")
	assert counts.shape == (ALPH_SIZE + 1,)
	assert counts[ord("A")] == 2
	assert counts[ord("B")] == 1
	assert counts[PSEUDO_EOF] == 1
	assert counts.sum() == 4


def test_count_frequencies_empty_input():
	counts = _counts(b"")
	assert counts[PSEUDO_EOF] == 1
	assert counts.sum() == 1


def test_count_frequencies_consumes_reader():
	br = BitReader(io.BytesIO(b"hello"))
	count_frequencies(br)
	assert br.bits_read == 40
	assert br.read_bits(8) == EOF


def test_count_frequencies_matches_numpy_over_many_chunks():
	rng = random.Random(3)
	data = bytes(rng.getrandbits(8) for _ in range(70000))
	counts = _counts(data)
	expect = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=ALPH_SIZE + 1)
	expect[PSEUDO_EOF] = 1
	assert np.array_equal(counts, expect)


def test_build_tree_two_leaves_for_single_repeated_byte():
	root = build_tree(_counts(b"A" * 100))
	leaves = _leaves(root)
	assert sorted(n.value for n in leaves) == [ord("A"), PSEUDO_EOF]
	assert root.weight == 101
	codes = build_codebook(root)
	assert sorted(codes.values()) == ["0", "1"]
	# lighter node is removed first and becomes the left child
	assert codes[PSEUDO_EOF] == "0"


def test_build_tree_single_leaf_root():
	root = build_tree(_counts(b""))
	assert root.is_leaf()
	assert root.value == PSEUDO_EOF
	assert build_codebook(root) == {PSEUDO_EOF: "0"}


def test_build_tree_rejects_empty_table():
	with pytest.raises(ValueError):
		build_tree(np.zeros(ALPH_SIZE + 1, dtype=np.int64))


def test_internal_weight_is_sum_of_children():
	root = build_tree(_counts(b"abracadabra"))

	def check(node):
		if node.is_leaf():
			return
		assert node.weight == node.left.weight + node.right.weight
		check(node.left)
		check(node.right)

	check(root)
	assert root.weight == 12


def test_codes_are_prefix_free():
	rng = random.Random(11)
	data = bytes(rng.choice(b"etaoin shrdlu\n") for _ in range(2000))
	codes = build_codebook(build_tree(_counts(data)))
	values = list(codes.values())
	for i, a in enumerate(values):
		for j, b in enumerate(values):
			if i != j:
				assert not b.startswith(a)


@pytest.mark.parametrize("data", [b"", b"x", bytes(range(256)), b"mississippi"])
def test_pseudo_eof_always_coded(data):
	codes = build_codebook(build_tree(_counts(data)))
	assert PSEUDO_EOF in codes
	assert all(len(c) >= 1 for c in codes.values())


def test_tie_break_is_deterministic():
	counts = _counts(b"abcdabcdabcd")
	a = build_codebook(build_tree(counts))
	b = build_codebook(build_tree(counts.copy()))
	assert a == b


def _best_prefix_cost(weights):
	# exhaustive search over code lengths satisfying the Kraft inequality
	n = len(weights)
	best = None
	for lens in product(range(1, n), repeat=n):
		if sum(Fraction(1, 2 ** L) for L in lens) > 1:
			continue
		cost = sum(w * L for w, L in zip(weights, lens))
		if best is None or cost < best:
			best = cost
	return best


@pytest.mark.parametrize("data", [b"aaaabbc", b"abcd", b"aaaaaaaaaaaaaaabbbbbbbcccd", b"zzzzyyx"])
def test_codebook_is_minimal(data):
	counts = _counts(data)
	codes = build_codebook(build_tree(counts))
	weights = [int(counts[s]) for s in codes]
	assert weighted_code_length(counts, codes) == _best_prefix_cost(weights)


def test_node_repr():
	leaf = HuffmanNode(value=65, weight=3)
	assert "value=65" in repr(leaf)
	assert "left=" in repr(HuffmanNode(left=leaf, right=leaf))
