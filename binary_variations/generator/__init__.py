"""Combination Generator module."""

from binary_variations.generator.combination_generator import (
    MAX_VARIATIONS,
    VariationsTooLargeError,
    expected_count,
    generate_combinations,
    iter_codes,
    join,
    matches_rules,
    qualifies,
    split_into_chunks,
    to_frame,
)

__all__ = [
    "MAX_VARIATIONS",
    "VariationsTooLargeError",
    "expected_count",
    "generate_combinations",
    "iter_codes",
    "join",
    "matches_rules",
    "qualifies",
    "split_into_chunks",
    "to_frame",
]
