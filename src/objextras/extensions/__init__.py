"""Helpers built on the core walkers: property paths, emptiness, exception messages."""

from objextras.extensions.exceptions import (
    escape,
    get_messages,
    get_safe_messages,
    to_sentence,
)
from objextras.extensions.properties import (
    get_property_value,
    is_empty,
    normalize_property_name,
    set_property_value,
)

__all__ = [
    # Properties
    "get_property_value",
    "set_property_value",
    "normalize_property_name",
    "is_empty",
    # Exceptions
    "get_messages",
    "get_safe_messages",
    "to_sentence",
    "escape",
]
