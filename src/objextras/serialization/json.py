"""JSON convenience wrappers over pydantic.

Any object can be written: pydantic models, dataclasses, collections and
scalars use pydantic's serializers, other objects are written as their
public instance fields.

Usage:
    text = to_json(user, indented=True)
    user = from_json(text, User)
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic_core import to_json as core_to_json

from objextras.core.classifier import TypeKind, classify
from objextras.core.reflection import instance_fields

DEFAULT_INDENT = 2


def _fields_of(exclude_none: bool) -> Any:
    def fallback(value: Any) -> Any:
        if classify(type(value)) is TypeKind.CALLABLE:
            return None
        return {
            name: field
            for name, field in instance_fields(value, public_only=True).items()
            if classify(type(field)) is not TypeKind.CALLABLE
            and not (exclude_none and field is None)
        }

    return fallback


def to_json(
    source: Any,
    indented: bool = False,
    indent: int = DEFAULT_INDENT,
    exclude_none: bool = True,
) -> str:
    """Serialize source to a JSON string.

    Args:
        source: Object to serialize; None gives "".
        indented: Pretty-print with indent spaces per level.
        indent: Indentation used when indented is set.
        exclude_none: Leave out None-valued fields.

    Returns:
        JSON text.
    """
    if source is None:
        return ""
    data = core_to_json(
        source,
        indent=indent if indented else None,
        exclude_none=exclude_none,
        fallback=_fields_of(exclude_none),
    )
    return data.decode("utf-8")


def from_json[T](text: str | bytes | None, tp: type[T]) -> T | None:
    """Deserialize JSON text into an instance of tp.

    Args:
        text: JSON text; None or empty gives None.
        tp: Target type (model, dataclass, collection or scalar type).

    Returns:
        Validated instance of tp.

    Raises:
        pydantic.ValidationError: If the text does not match tp.
    """
    if not text:
        return None
    return TypeAdapter(tp).validate_json(text)
