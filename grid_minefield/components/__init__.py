"""Value components of the minefield.

Re-exports :class:`Position` and the terrain :class:`Field`. Both are frozen
dataclasses; changes are expressed by building new instances.
"""

from .field import Field, make_field
from .position import START, Position

__all__ = [
    "Field",
    "Position",
    "START",
    "make_field",
]
