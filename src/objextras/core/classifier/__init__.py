"""Type classification: kinds and classifier functions."""

from objextras.core.classifier.core import (
    ARRAY_TYPES,
    CALLABLE_TYPES,
    LEAF_TYPES,
    SIMPLE_TYPES,
    classify,
    has_leaf_elements,
    is_array,
    is_leaf,
    is_sequence,
    is_simple,
)
from objextras.core.classifier.models import TypeKind

__all__ = [
    # Models
    "TypeKind",
    # Core
    "classify",
    "is_leaf",
    "is_simple",
    "is_array",
    "is_sequence",
    "has_leaf_elements",
    "LEAF_TYPES",
    "SIMPLE_TYPES",
    "CALLABLE_TYPES",
    "ARRAY_TYPES",
]
