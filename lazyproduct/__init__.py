"""
Lazy, random-access Cartesian products.

Tuples of the product of several ordered sets are computed on demand from
their position, without generating the product or copying the sets.
"""

from lazyproduct.options import ConfigurationError, ProductOptions
from lazyproduct.product import CartesianProductLazy

__version__ = "1.0.0"

__all__ = [
    "CartesianProductLazy",
    "ConfigurationError",
    "ProductOptions",
]
