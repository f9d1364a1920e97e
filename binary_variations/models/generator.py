"""Pydantic models for the Combination Generator."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class SingleItem(BaseModel):
    """Rule matching only the one-item combination equal to ``item``."""

    item: Any = Field(..., description="The item the combination must consist of")

    def matches(self, combination: List[Any]) -> bool:
        """Return True if the combination is exactly the one item."""
        return len(combination) == 1 and combination[0] == self.item


class ItemSet(BaseModel):
    """Rule matching every combination that contains all of ``items``."""

    items: List[Any] = Field(default_factory=list, description="Items that must all be present")

    def matches(self, combination: List[Any]) -> bool:
        """Return True if every item of the set is in the combination."""
        for item in self.items:
            if item not in combination:
                return False
        return True


FilterRule = Union[SingleItem, ItemSet]


def coerce_rule(raw: Any) -> Optional[FilterRule]:
    """
    Turn a raw filter rule into its tagged form.

    Lists, tuples and sets become an ``ItemSet``, ``None`` is malformed and
    yields ``None`` (never matches), anything else is a ``SingleItem``.
    """
    if isinstance(raw, (SingleItem, ItemSet)):
        return raw
    if raw is None:
        return None
    if isinstance(raw, (list, tuple, set, frozenset)):
        return ItemSet(items=list(raw))
    return SingleItem(item=raw)


class FilterSpec(BaseModel):
    """Inclusion/exclusion rules narrowing the generated combinations."""

    include: Optional[List[Any]] = Field(
        default=None,
        description="Items or item lists to include, e.g. ['a', ['b', 'c']]"
    )
    exclude: Optional[List[Any]] = Field(
        default=None,
        description="Items or item lists to exclude"
    )
    precedence: bool = Field(
        default=True,
        description="When both lists are given: True lets include decide, False lets exclude decide"
    )

    @field_validator("precedence", mode="before")
    @classmethod
    def default_non_bool_precedence(cls, v: Any) -> bool:
        # Only a real bool overrides the default; 0, None or "false" keep include deciding.
        if isinstance(v, bool):
            return v
        return True

    def include_rules(self) -> List[Optional[FilterRule]]:
        return [coerce_rule(rule) for rule in self.include or []]

    def exclude_rules(self) -> List[Optional[FilterRule]]:
        return [coerce_rule(rule) for rule in self.exclude or []]


class GeneratorCountRequest(BaseModel):
    """Request model for calculating combination count."""

    variations: List[Any] = Field(
        ...,
        description="Ordered list of variation items"
    )
    filter: Optional[FilterSpec] = Field(
        default=None,
        description="Optional inclusion/exclusion rules"
    )


class GeneratorCountResponse(BaseModel):
    """Response model for combination count calculation."""

    expected: int = Field(..., description="Unfiltered count, 2^N - 1")
    total_combinations: int = Field(..., description="Number of combinations passing the filter")
    num_files: int = Field(..., description="Number of CSV files the result would be split into")


class GeneratorRequest(BaseModel):
    """Request model for generating combinations."""

    variations: List[Any] = Field(
        ...,
        description="Ordered list of variation items"
    )
    filter: Optional[FilterSpec] = Field(
        default=None,
        description="Optional inclusion/exclusion rules"
    )
    separator: str = Field(
        default=",",
        description="Separator used for the joined __name__ labels"
    )
    prefix: str = Field(
        default="",
        description="Prefix for non-empty joined labels"
    )
    suffix: str = Field(
        default="",
        description="Suffix for non-empty joined labels"
    )


class GeneratorPreviewRequest(GeneratorRequest):
    """Request model for preview generation."""

    preview_limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=1000,
        description="Number of rows to preview (defaults to the configured limit)"
    )


class GeneratorPreviewResponse(BaseModel):
    """Response model for preview generation."""

    total_combinations: int = Field(..., description="Total number of combinations")
    preview_data: List[Dict[str, Any]] = Field(..., description="Preview rows as list of dicts")
    columns: List[str] = Field(..., description="Column names in order")
    num_files: int = Field(..., description="Number of CSV files needed")


class GeneratorResponse(BaseModel):
    """Response model for full generation."""

    total_combinations: int = Field(..., description="Total number of combinations generated")
    combinations: List[List[Any]] = Field(..., description="Combinations in enumeration order")
    names: List[str] = Field(..., description="Joined label of each combination")


class JoinRequest(BaseModel):
    """Request model for joining a single combination."""

    combination: List[Any] = Field(default_factory=list, description="Items to join")
    separator: str = Field(default=",", description="Separator between items")
    prefix: str = Field(default="", description="Prefix for a non-empty result")
    suffix: str = Field(default="", description="Suffix for a non-empty result")


class JoinResponse(BaseModel):
    """Response model for a joined combination."""

    joined: str = Field(..., description="Joined string")
