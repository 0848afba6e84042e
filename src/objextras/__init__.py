"""objextras: deep clone, structural equivalence and object helpers.

Usage:
    from objextras import clone, is_equivalent_to

    @dataclass
    class User:
        name: str
        tags: dict[str, str]

    user = User("joe", {"greeting": "hello"})
    copy = clone(user)
    assert is_equivalent_to(user, copy)

    copy.tags["greeting"] = "hi"
    assert not is_equivalent_to(user, copy)
"""

__version__ = "0.1.0"

# Core walkers
from objextras.core import (
    CloneContext,
    Cloneable,
    ComparisonPolicy,
    EquivalenceContext,
    StructurallyComparable,
    TypeKind,
    classify,
    clone,
    is_equivalent_to,
    is_leaf,
    is_simple,
)

# Errors
from objextras.errors import CloneError, ObjectExtrasError, PropertyPathError, SafeError

# Extensions
from objextras.extensions import (
    escape,
    get_messages,
    get_property_value,
    get_safe_messages,
    is_empty,
    set_property_value,
    to_sentence,
)

# Serialization
from objextras.serialization import from_json, to_json

__all__ = [
    # Version
    "__version__",
    # Core
    "TypeKind",
    "classify",
    "is_leaf",
    "is_simple",
    "Cloneable",
    "CloneContext",
    "clone",
    "ComparisonPolicy",
    "EquivalenceContext",
    "StructurallyComparable",
    "is_equivalent_to",
    # Errors
    "ObjectExtrasError",
    "CloneError",
    "PropertyPathError",
    "SafeError",
    # Extensions
    "get_property_value",
    "set_property_value",
    "is_empty",
    "get_messages",
    "get_safe_messages",
    "to_sentence",
    "escape",
    # Serialization
    "to_json",
    "from_json",
]
