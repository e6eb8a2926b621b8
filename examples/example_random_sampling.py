#!/usr/bin/env python3
"""
Example: Random Sampling from a Large Product

A product of twelve sets with twenty elements each has 20**12 (about 4e15)
tuples. Individual tuples are drawn uniformly at random without generating
the product.
"""

import sys
import os

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from lazyproduct import CartesianProductLazy

print("=" * 60)
print("Example: Random Sampling from a Large Product")
print("=" * 60)

sets = [[f"d{i}s{j}" for j in range(20)] for i in range(12)]
cpl = CartesianProductLazy(*sets, less_lazy=True)
print(f"\nProduct size: {cpl.count():,}")

rng = np.random.default_rng(seed=42)
positions = rng.integers(0, cpl.count(), size=5)

print("\nSampled tuples (batch lookup):")
for position, tup in zip(positions, cpl.get_many(positions)):
    print(f"  {int(position):>16d}: {' '.join(tup)}")

# Each sampled tuple maps back to its position.
assert all(cpl.index_of(cpl.get(p)) == int(p) for p in positions)
print("\nReverse lookup agrees for all samples.")
