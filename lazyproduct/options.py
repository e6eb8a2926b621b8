"""
Configuration record for lazy Cartesian products.

The options record is closed over a known set of keys; anything else is a
configuration error rather than something to ignore.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple, Union


class ConfigurationError(ValueError):
    """Raised when an options record contains unknown or conflicting keys."""


@dataclass(frozen=True)
class ProductOptions:
    """
    Construction-time options for `CartesianProductLazy`.

    `less_lazy` trades correctness under later mutation of the input sets for
    slightly faster lookups: cardinalities and strides are cached once.
    """

    less_lazy: bool = False

    def __init__(self, less_lazy: bool = False) -> None:
        if not isinstance(less_lazy, (bool, int)):
            raise ConfigurationError(
                f"less_lazy must be a bool, got {type(less_lazy).__name__}"
            )
        object.__setattr__(self, "less_lazy", bool(less_lazy))

    @classmethod
    def known_keys(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ProductOptions":
        """
        Build options from a plain mapping.

        Raises:
            ConfigurationError: If the mapping has keys other than the
                recognized option names.
        """
        known = cls.known_keys()
        opts = {str(k): v for k, v in mapping.items()}
        unknown = sorted(k for k in opts if k not in known)
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s) {unknown!r}; recognized options are {list(known)!r}"
            )
        return cls(**opts)

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.known_keys()}


OptionsLike = Union[ProductOptions, Mapping[str, Any]]


def resolve_options(
    options: Optional[OptionsLike] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ProductOptions:
    """
    Merge an optional options record with keyword overrides.

    A key supplied both in `options` and in `overrides` is rejected.
    """
    if options is None:
        base: dict = {}
    elif isinstance(options, ProductOptions):
        base = options.to_dict()
    elif isinstance(options, Mapping):
        ProductOptions.from_mapping(options)
        base = {str(k): v for k, v in options.items()}
    else:
        raise TypeError(
            f"options must be a ProductOptions or a mapping, got {type(options).__name__}"
        )

    extra = {str(k): v for k, v in (overrides or {}).items()}
    if isinstance(options, ProductOptions) and extra:
        raise ConfigurationError(
            "Options were given both as a ProductOptions record and as keywords"
        )
    clash = sorted(set(base) & set(extra))
    if clash:
        raise ConfigurationError(f"Option(s) {clash!r} given more than once")
    return ProductOptions.from_mapping({**base, **extra})
