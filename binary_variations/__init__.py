"""Ordered binary variations of a set of items, with include/exclude filters."""

from binary_variations.generator import (
    MAX_VARIATIONS,
    VariationsTooLargeError,
    expected_count,
    generate_combinations,
    join,
    to_frame,
)
from binary_variations.models import FilterSpec, ItemSet, SingleItem

generate = generate_combinations

__all__ = [
    "MAX_VARIATIONS",
    "VariationsTooLargeError",
    "FilterSpec",
    "SingleItem",
    "ItemSet",
    "expected_count",
    "generate",
    "generate_combinations",
    "join",
    "to_frame",
]
