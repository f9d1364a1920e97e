from .generator import (
    FilterRule,
    FilterSpec,
    GeneratorCountRequest,
    GeneratorCountResponse,
    GeneratorPreviewRequest,
    GeneratorPreviewResponse,
    GeneratorRequest,
    GeneratorResponse,
    ItemSet,
    JoinRequest,
    JoinResponse,
    SingleItem,
    coerce_rule,
)

__all__ = [
    "FilterRule",
    "FilterSpec",
    "SingleItem",
    "ItemSet",
    "coerce_rule",
    "GeneratorCountRequest",
    "GeneratorCountResponse",
    "GeneratorRequest",
    "GeneratorPreviewRequest",
    "GeneratorPreviewResponse",
    "GeneratorResponse",
    "JoinRequest",
    "JoinResponse",
]
