"""Type categories driving the graph walkers' dispatch."""

from enum import Enum, auto


class TypeKind(Enum):
    """Partition of runtime types. Every type belongs to exactly one kind."""

    LEAF = auto()  # Copied by value, never traversed
    CALLABLE = auto()  # Functions and bound methods: dropped on clone
    ARRAY = auto()  # Fixed-length vectors: tuple, array.array, bytearray
    SEQUENCE = auto()  # Ordinal-indexed collections: list, deque
    SET = auto()  # Unordered hashed collections
    MAPPING = auto()  # Key-indexed collections
    COMPOSITE = auto()  # Anything with named instance members
