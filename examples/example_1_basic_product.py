#!/usr/bin/env python3
"""
Example 1: Basic Lazy Cartesian Product

This example demonstrates the core functionality:
- Building a lazy product over three sets
- Looking up tuples by position
- Counting tuples without generating them
- Seeing how the default mode follows changes to the input sets
"""

import sys
import os

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lazyproduct import CartesianProductLazy

print("=" * 60)
print("Example 1: Basic Lazy Cartesian Product")
print("=" * 60)

a = ["foo", "bar", "baz", "bah"]
b = ["wibble", "wobble", "weeble"]
c = ["nip", "nop"]

cpl = CartesianProductLazy(a, b, c)

print(f"\nCount: {cpl.count()}  Last index: {cpl.last_idx()}")
for position in (0, 7, 8, 21, cpl.last_idx()):
    print(f"  get({position:2d}) -> {cpl.get(position)}")

print(f"  get({cpl.count()}) -> {cpl.get(cpl.count())}")

first, second, third = cpl.get(21)
print(f"\nUnpacked position 21: {first}, {second}, {third}")
print(f"Position of ['bah', 'wobble', 'nop']: {cpl.index_of(['bah', 'wobble', 'nop'])}")

# The default mode reads set sizes on every call.
c.append("nup")
print(f"\nAfter adding 'nup' to the last set: count = {cpl.count()}")

cached = CartesianProductLazy({"less_lazy": True}, a, b, c)
print(f"Less-lazy product built now: {cached!r}")
