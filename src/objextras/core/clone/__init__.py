"""Deep clone: protocol, context and walker."""

from objextras.core.clone.core import CloneContext, clone
from objextras.core.clone.models import Cloneable

__all__ = [
    # Models
    "Cloneable",
    # Core
    "CloneContext",
    "clone",
]
