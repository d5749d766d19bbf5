"""
withcell - Placeholder-Swapping Value Cells

A container that gives callbacks exclusive mutable access to a shared value
by swapping an empty placeholder in for the duration of the call, so
reentrant access never fails.
"""

__version__ = "0.1.0"

from .cell import WithCell
from .exceptions import PlaceholderError, WithCellError
from .placeholder import resolve_placeholder

__all__ = [
    # Container
    "WithCell",
    # Placeholder resolution
    "resolve_placeholder",
    # Exceptions
    "WithCellError",
    "PlaceholderError",
]
