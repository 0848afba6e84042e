"""Serialization helpers."""

from objextras.serialization.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
