"""
Mixed-radix arithmetic over sequence cardinalities.

A position in the Cartesian product of sets with sizes (k_1, ..., k_n) is a
number written in a positional system whose i-th digit has base k_i; the last
set is the least significant digit.
"""

from __future__ import annotations

from functools import reduce
from operator import mul
from typing import Iterable, List, Sequence, Tuple

import numpy as np

# Largest product for which the vectorized decoder is used.
INT64_MAX = int(np.iinfo(np.int64).max)


def product_size(radixes: Sequence[int]) -> int:
    """Number of tuples in the product; 1 for no radixes (the empty tuple)."""
    return int(reduce(mul, (int(r) for r in radixes), 1))


def suffix_strides(radixes: Sequence[int]) -> Tuple[int, ...]:
    """
    Per-dimension multipliers aligned with `radixes`.

    Example: radixes [4, 3, 2] yield strides (6, 2, 1).
    """
    strides: List[int] = []
    running = 1
    for r in reversed(radixes):
        strides.append(running)
        running *= int(r)
    return tuple(reversed(strides))


def decode_remainder(position: int, radixes: Sequence[int]) -> List[int]:
    """
    Decode `position` by repeated division, last dimension first.

    The caller guarantees 0 <= position < product_size(radixes).
    """
    digits = [0] * len(radixes)
    rem = int(position)
    for i in range(len(radixes) - 1, -1, -1):
        rem, digits[i] = divmod(rem, int(radixes[i]))
    return digits


def decode_strided(
    position: int, radixes: Sequence[int], strides: Sequence[int]
) -> List[int]:
    """Decode `position` with precomputed strides (see `suffix_strides`)."""
    position = int(position)
    return [(position // int(s)) % int(r) for r, s in zip(radixes, strides)]


def encode(digits: Sequence[int], radixes: Sequence[int], strides: Sequence[int]) -> int:
    """Inverse of decoding: local indices back to a linear position."""
    if len(digits) != len(radixes):
        raise ValueError("digits has wrong length")
    idx = 0
    for d, r, s in zip(digits, radixes, strides):
        d = int(d)
        if d < 0 or d >= int(r):
            raise ValueError(f"digit {d} out of range for radix {int(r)}")
        idx += d * int(s)
    return int(idx)


def decode_many(positions: Iterable[int], radixes: Sequence[int]) -> np.ndarray:
    """
    Vectorized decode of a batch of in-range positions.

    Returns:
        Integer array of shape (len(positions), len(radixes)).

    Raises:
        OverflowError: If the product does not fit in a signed 64-bit integer.
        ValueError: If any position is out of range.
    """
    radixes = tuple(int(r) for r in radixes)
    size = product_size(radixes)
    if size > INT64_MAX:
        raise OverflowError("product too large for vectorized decoding")
    pos = np.asarray(list(positions), dtype=np.int64).reshape(-1)
    if pos.size and (pos.min() < 0 or pos.max() >= size):
        raise ValueError("positions out of range")
    if not radixes or not pos.size:
        return np.zeros((pos.shape[0], len(radixes)), dtype=np.int64)
    # C order makes the last dimension vary fastest.
    digits = np.unravel_index(pos, radixes, order="C")
    return np.stack(digits, axis=1).astype(np.int64, copy=False)
