"""Core logic for generating binary variation combinations."""

import logging
from collections.abc import Mapping as MappingABC
from typing import Any, Callable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from binary_variations.models.generator import FilterRule, FilterSpec

logger = logging.getLogger(__name__)

# Codes are enumerated up to 2^N - 1; beyond this the result set is not
# something a single call can materialize.
MAX_VARIATIONS = 30

Filter = Union[FilterSpec, Mapping[str, Any]]
Callback = Callable[[List[Any]], Any]


class VariationsTooLargeError(ValueError):
    """Raised when there are too many variations to enumerate."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Too many variations: {count} given, at most {limit} supported"
        )


def expected_count(variations: Sequence[Any]) -> int:
    """
    Calculate the number of combinations without generating them.

    Args:
        variations: Ordered list of variation items

    Returns:
        2^N - 1 where N is the number of variations
    """
    return (1 << len(variations)) - 1


def join(
    combination: Sequence[Any],
    separator: str = ",",
    prefix: str = "",
    suffix: str = ""
) -> str:
    """
    Join a combination into a string.

    Prefix and suffix are only added when the joined string is non-empty.

    Args:
        combination: Items to join
        separator: String placed between items (empty falls back to ",")
        prefix: String prepended to a non-empty result
        suffix: String appended to a non-empty result

    Returns:
        Joined string
    """
    joined = (separator or ",").join(str(item) for item in combination)
    if joined:
        joined = f"{prefix or ''}{joined}{suffix or ''}"
    return joined


def _as_filter_spec(filter: Optional[Filter]) -> Optional[FilterSpec]:
    if isinstance(filter, FilterSpec):
        return filter
    if isinstance(filter, MappingABC):
        return FilterSpec.model_validate(dict(filter))
    # Anything else is not a filter description and filters nothing.
    return None


def matches_rules(combination: List[Any], rules: Sequence[Optional[FilterRule]]) -> bool:
    """Return True if any rule matches the combination. Malformed rules never match."""
    for rule in rules:
        if rule is not None and rule.matches(combination):
            return True
    return False


def qualifies(combination: List[Any], spec: Optional[FilterSpec]) -> bool:
    """
    Decide whether a combination passes the filter.

    With both include and exclude rules present, ``precedence`` picks which
    side decides: include (True) or exclude (False).
    """
    if spec is None:
        return True
    return _qualifies(combination, spec.include_rules(), spec.exclude_rules(), spec.precedence)


def _qualifies(
    combination: List[Any],
    include: List[Optional[FilterRule]],
    exclude: List[Optional[FilterRule]],
    precedence: bool
) -> bool:
    if include and exclude:
        if precedence:
            return matches_rules(combination, include)
        return not matches_rules(combination, exclude)
    if include and not matches_rules(combination, include):
        return False
    if exclude and matches_rules(combination, exclude):
        return False
    return True


def iter_codes(
    variations: Sequence[Any],
    filter: Optional[Filter] = None,
    max_variations: int = MAX_VARIATIONS
) -> Iterator[Tuple[int, List[Any]]]:
    """
    Yield (code, combination) pairs for every qualifying combination.

    Codes run from 1 to 2^N - 1 in ascending order; bit j of a code selects
    ``variations[j]``, so items keep their input order inside a combination.

    Args:
        variations: Ordered list of variation items
        filter: Optional FilterSpec or mapping with include/exclude/precedence
        max_variations: Largest accepted number of variations

    Raises:
        VariationsTooLargeError: If there are more than max_variations items
    """
    variations = list(variations)
    count = len(variations)
    if count > max_variations:
        logger.warning("Refusing to enumerate %d variations (limit %d)", count, max_variations)
        raise VariationsTooLargeError(count, max_variations)

    spec = _as_filter_spec(filter)
    include = spec.include_rules() if spec else []
    exclude = spec.exclude_rules() if spec else []
    precedence = spec.precedence if spec else True

    for code in range(1, expected_count(variations) + 1):
        combination = [variations[j] for j in range(count) if code & (1 << j)]
        if _qualifies(combination, include, exclude, precedence):
            yield code, combination


def generate_combinations(
    variations: Sequence[Any],
    filter: Optional[Union[Filter, Callback]] = None,
    on_match: Optional[Callback] = None,
    max_variations: int = MAX_VARIATIONS
) -> List[List[Any]]:
    """
    Generate all qualifying combinations of the variations.

    Args:
        variations: Ordered list of variation items
        filter: Optional FilterSpec or mapping; a callable here is used as
            on_match and replaces any on_match given
        on_match: Optional callback invoked with each qualifying combination
        max_variations: Largest accepted number of variations

    Returns:
        List of combinations in enumeration order

    Example:
        >>> generate_combinations(["a", "b", "c"])
        [['a'], ['b'], ['a', 'b'], ['c'], ['a', 'c'], ['b', 'c'], ['a', 'b', 'c']]
    """
    if callable(filter):
        filter, on_match = None, filter

    variations = list(variations)
    combinations = []
    for _, combination in iter_codes(variations, filter, max_variations):
        combinations.append(combination)
        if on_match is not None:
            on_match(combination)

    logger.debug(
        "Generated %d of %d combinations for %d variations",
        len(combinations), expected_count(variations), len(variations)
    )
    return combinations


def to_frame(
    variations: Sequence[Any],
    filter: Optional[Filter] = None,
    separator: str = ",",
    prefix: str = "",
    suffix: str = "",
    max_variations: int = MAX_VARIATIONS
) -> pd.DataFrame:
    """
    Generate qualifying combinations as a DataFrame.

    The __name__ column holds the joined label, followed by one boolean
    membership column per variation.

    Args:
        variations: Ordered list of variation items
        filter: Optional FilterSpec or mapping
        separator: Separator for the __name__ labels
        prefix: Prefix for the __name__ labels
        suffix: Suffix for the __name__ labels
        max_variations: Largest accepted number of variations

    Returns:
        DataFrame with one row per combination
    """
    variations = list(variations)
    columns = [str(item) for item in variations]

    codes = []
    names = []
    for code, combination in iter_codes(variations, filter, max_variations):
        codes.append(code)
        names.append(join(combination, separator, prefix, suffix))

    code_array = np.asarray(codes, dtype=np.int64).reshape(-1, 1)
    membership = ((code_array >> np.arange(len(variations), dtype=np.int64)) & 1).astype(bool)

    # concat keeps a variation whose label is also "__name__" as its own column
    return pd.concat(
        [pd.DataFrame({"__name__": names}, dtype=object), pd.DataFrame(membership, columns=columns)],
        axis=1
    )


def split_into_chunks(
    df: pd.DataFrame,
    chunk_size: int = 10000
) -> List[pd.DataFrame]:
    """
    Split a combinations frame into the pieces written as separate CSV files.

    Args:
        df: DataFrame to split
        chunk_size: Maximum rows per chunk

    Returns:
        List of DataFrames
    """
    if len(df) <= chunk_size:
        return [df]
    return [df.iloc[start:start + chunk_size].reset_index(drop=True) for start in range(0, len(df), chunk_size)]
