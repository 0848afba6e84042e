"""Exception hierarchy for objextras.

Usage:
    try:
        copy = clone(graph)
    except CloneError as e:
        print(e.type_name, e.field)
"""

from __future__ import annotations

from typing import Any


class ObjectExtrasError(Exception):
    """Base exception for all objextras failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


class CloneError(ObjectExtrasError):
    """Raised when an object graph cannot be deep-copied.

    Raised for a type that cannot be shallow-copied or rebuilt, or a field
    that cannot be written on the copy. The underlying exception is chained
    as ``__cause__``.

    Attributes:
        type_name: Qualified name of the offending type.
        field: Name of the offending field, or None for whole-object failures.
    """

    def __init__(self, type_name: str, field: str | None = None, reason: str = ""):
        location = f"{type_name}.{field}" if field else type_name
        message = f"Cannot clone {location}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details={"type": type_name, "field": field})
        self.type_name = type_name
        self.field = field


class PropertyPathError(ObjectExtrasError):
    """Raised when a compound property path cannot be materialized."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot resolve property path '{path}': {reason}", details={"path": path})
        self.path = path


class SafeError(Exception):
    """Exception whose message is safe to show to end users.

    ``get_safe_messages`` collects only the messages of exceptions of this
    type, leaving internal details out.
    """

    pass
