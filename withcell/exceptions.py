"""
withcell Exceptions
===================

Exception types raised by the withcell package itself.

Exceptions raised by user callbacks are never wrapped; they reach the caller
of ``with_``/``map``/``inspect`` unchanged.
"""


class WithCellError(Exception):
    """Base class for errors raised by withcell."""

    pass


class PlaceholderError(WithCellError, TypeError):
    """Raised when a cell cannot obtain a placeholder factory for its value."""

    pass
