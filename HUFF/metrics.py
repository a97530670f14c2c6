import numpy as np

def shannon_entropy(counts) -> float:
    """Bits per symbol of the empirical distribution in counts."""
    c = np.asarray(counts, dtype=np.float64)
    c = c[c > 0]
    if c.size == 0:
        return 0.0
    p = c / c.sum()
    return float(-(p * np.log2(p)).sum())

def weighted_code_length(counts, codes) -> int:
    # total body bits: sum of count * code length over coded symbols
    return int(sum(int(counts[sym]) * len(code) for sym, code in codes.items()))

def average_code_length(counts, codes) -> float:
    total = int(sum(int(counts[sym]) for sym in codes))
    if total == 0:
        return 0.0
    return weighted_code_length(counts, codes) / total

def compression_ratio(n_in: int, n_out: int) -> float:
    if n_out == 0:
        return float("inf")
    return float(n_in) / float(n_out)
