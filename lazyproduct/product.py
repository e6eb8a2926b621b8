"""
Random-access, lazy Cartesian product of ordered sets.

`CartesianProductLazy` never builds the product and never copies the input
sets. Any tuple is computed on demand from its position in the canonical
lexicographic order (first set varies slowest, last set fastest).
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from lazyproduct.options import ProductOptions, resolve_options
from lazyproduct.radix import (
    INT64_MAX,
    decode_many,
    decode_remainder,
    decode_strided,
    encode,
    product_size,
    suffix_strides,
)

logger = logging.getLogger(__name__)


def _is_indexable(obj: Any) -> bool:
    if isinstance(obj, (Mapping, ProductOptions)):
        return False
    return hasattr(obj, "__len__") and hasattr(obj, "__getitem__")


def _find(seq: Sequence[Any], value: Any) -> Optional[int]:
    # str.index and bytes.index match substrings, not single elements.
    finder = None
    if not isinstance(seq, (str, bytes, bytearray)):
        finder = getattr(seq, "index", None)
    if finder is not None:
        try:
            return int(finder(value))
        except (ValueError, TypeError):
            return None
    for i in range(len(seq)):
        if seq[i] == value:
            return i
    return None


class CartesianProductLazy:
    """
    Lazily computed tuples of a Cartesian product.

    Args:
        *sets: Ordered, indexable sets (lists, tuples, ranges, strings,
            arrays...). The first positional argument may instead be a
            `ProductOptions` or a mapping of options.
        **options: Option keywords; only `less_lazy` is recognized.

    With `less_lazy=False` (the default) the sizes of the sets are read on
    every call, so growing or shrinking a set after construction is reflected
    in later results. With `less_lazy=True` sizes and strides are cached at
    construction and later size changes are not noticed; results are then
    undefined (stale tuples, or an `IndexError` from the set itself).

    Example:
        >>> cpl = CartesianProductLazy(["foo", "bar"], ["nip", "nop"])
        >>> cpl.get(1)
        ['foo', 'nop']
        >>> first, second = cpl.get(2)
    """

    def __init__(self, *sets: Sequence[Any], **options: Any) -> None:
        record = None
        if sets and isinstance(sets[0], (ProductOptions, Mapping)):
            record, sets = sets[0], sets[1:]
        self._options: ProductOptions = resolve_options(record, options)

        for i, s in enumerate(sets):
            if not _is_indexable(s):
                raise TypeError(
                    f"Set {i} must be an indexable sequence, got {type(s).__name__}"
                )
        # References only; the caller's objects are not copied.
        self._sets: Tuple[Sequence[Any], ...] = tuple(sets)

        self._radixes: Optional[Tuple[int, ...]] = None
        self._strides: Optional[Tuple[int, ...]] = None
        self._count: Optional[int] = None
        if self._options.less_lazy:
            self._radixes = self._current_radixes()
            self._strides = suffix_strides(self._radixes)
            self._count = product_size(self._radixes)
            logger.debug(
                "Cached strides %s for cardinalities %s (count=%d)",
                self._strides,
                self._radixes,
                self._count,
            )
        logger.debug(
            "Constructed lazy product over %d set(s), less_lazy=%s",
            len(self._sets),
            self._options.less_lazy,
        )

    @property
    def less_lazy(self) -> bool:
        return self._options.less_lazy

    @property
    def options(self) -> ProductOptions:
        return self._options

    @property
    def sets(self) -> Tuple[Sequence[Any], ...]:
        return self._sets

    def _current_radixes(self) -> Tuple[int, ...]:
        return tuple(len(s) for s in self._sets)

    def _radixes_now(self) -> Tuple[int, ...]:
        if self._radixes is not None:
            return self._radixes
        return self._current_radixes()

    def count(self) -> int:
        """
        Number of tuples the product would have if it were generated.

        The product of no sets has one tuple, the empty one.
        """
        if self._count is not None:
            return self._count
        return product_size(self._current_radixes())

    def last_idx(self) -> int:
        """
        Position of the last tuple, i.e. `count() - 1`.

        This is -1 for an empty product, so `range(cpl.last_idx() + 1)` is
        always the full set of valid positions.
        """
        return self.count() - 1

    def local_indices(self, position: int) -> Optional[List[int]]:
        """
        Per-set indices of the tuple at `position`, or None if out of range.
        """
        position = operator.index(position)
        if self._strides is not None:
            if position < 0 or position >= self._count:
                return None
            return decode_strided(position, self._radixes, self._strides)

        radixes = self._current_radixes()
        if position < 0 or position >= product_size(radixes):
            return None
        return decode_remainder(position, radixes)

    def get(self, position: int) -> Optional[List[Any]]:
        """
        Return the tuple at the given position in the product.

        Positions are 0-based like sequence indices. A position outside
        `[0, count())`, negative ones included, yields None rather than an
        error. The tuple is returned as a list with one element per set, in
        set order; unpack it at the call site for separate values.
        """
        digits = self.local_indices(position)
        if digits is None:
            return None
        return [s[d] for s, d in zip(self._sets, digits)]

    def get_many(self, positions: Iterable[int]) -> List[Optional[List[Any]]]:
        """
        Look up a batch of positions at once.

        Sizes are read once for the whole batch. Entries for out-of-range
        positions are None.
        """
        positions = [operator.index(p) for p in positions]
        radixes = self._radixes_now()
        size = self._count if self._count is not None else product_size(radixes)

        valid = [p for p in positions if 0 <= p < size]
        if size <= INT64_MAX:
            digits = decode_many(valid, radixes).tolist()
        elif self._strides is not None:
            digits = [decode_strided(p, radixes, self._strides) for p in valid]
        else:
            digits = [decode_remainder(p, radixes) for p in valid]

        found = iter(digits)
        out: List[Optional[List[Any]]] = []
        for p in positions:
            if 0 <= p < size:
                row = next(found)
                out.append([s[int(d)] for s, d in zip(self._sets, row)])
            else:
                out.append(None)
        return out

    def index_of(self, elements: Sequence[Any]) -> Optional[int]:
        """
        Position of the tuple made of `elements`, or None if it is not part
        of the product.

        Each element is located in its set by equality; with repeated values
        the first occurrence wins.
        """
        elements = list(elements)
        if len(elements) != len(self._sets):
            return None
        radixes = self._radixes_now()
        digits: List[int] = []
        for s, value, r in zip(self._sets, elements, radixes):
            d = _find(s, value)
            if d is None or d >= r:
                return None
            digits.append(d)
        strides = self._strides if self._strides is not None else suffix_strides(radixes)
        return encode(digits, radixes, strides)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(cardinalities={list(self._radixes_now())}, "
            f"less_lazy={self.less_lazy})"
        )
