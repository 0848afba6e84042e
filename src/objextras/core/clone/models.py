"""Clone protocols.

Types that know how to copy themselves implement ``Cloneable``; everything
else is copied by the introspection walk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from objextras.core.clone.core import CloneContext


@runtime_checkable
class Cloneable(Protocol):
    """Explicit deep-copy hook.

    ``context.copy(child)`` clones children through the shared identity map.
    Implementations that can sit on a reference cycle call
    ``context.remember(self, new)`` before copying children.
    """

    def __clone__(self, context: CloneContext) -> Self: ...
