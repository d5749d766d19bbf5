"""
WithCell - Placeholder-Swapping Value Container
===============================================

This module provides WithCell, a container that hands out exclusive mutable
access to its value through callbacks instead of through references.

While a callback runs, the cell holds a placeholder (an "empty" instance of
the wrapped type) and the callback holds the real value. When the callback
returns, the real value goes back in. There is no borrow flag and no lock,
so a callback that reaches the same cell again does not fail: the nested
access simply sees the placeholder, and whatever it does to the placeholder
is discarded when the outer access restores the value.

Key Features:
- Reentrant access never raises
- No per-access bookkeeping beyond one swap in and one swap out
- Chaining through ``map`` and ``inspect``

Caveat:
    If a callback raises, the value is not put back. The placeholder stays
    in the slot until something stores a new value. Pass
    ``restore_on_error=True`` to restore the value before the exception
    propagates instead.

Single-threaded use only: the cell performs no synchronization.
"""

import copy
import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from .placeholder import resolve_placeholder

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class WithCell(Generic[T]):
    """
    Container granting callback-scoped mutable access to one value.

    Example:
        ```python
        cell = WithCell([1, 2, 3])

        cell.with_(lambda v: v.pop())        # 3
        cell.with_(lambda v: v.append(1337))
        cell                                 # WithCell([1, 2, 1337])

        counter = WithCell(5)
        counter.map(lambda x: x + 1)         # counter now holds 6
        ```

    Args:
        initial: The starting value.
        default: Zero-argument factory producing the placeholder. Defaults to
            ``type(initial)``.
        restore_on_error: Put the value back when a callback raises instead
            of leaving the placeholder in place.
    """

    __slots__ = ("_value", "_default", "_restore_on_error", "__weakref__")

    def __init__(
        self,
        initial: T,
        default: Optional[Callable[[], T]] = None,
        *,
        restore_on_error: bool = False,
    ) -> None:
        self._default = resolve_placeholder(initial, default)
        self._restore_on_error = restore_on_error
        self._value = initial

    @classmethod
    def empty(
        cls, factory: Callable[[], T], *, restore_on_error: bool = False
    ) -> "WithCell[T]":
        """Create a cell whose initial value is ``factory()``."""
        return cls(factory(), factory, restore_on_error=restore_on_error)

    @property
    def restore_on_error(self) -> bool:
        return self._restore_on_error

    # ========================================================================
    # SCOPED ACCESS
    # ========================================================================

    def with_(self, f: Callable[[T], R]) -> R:
        """
        Run ``f`` on the contained value and return its result.

        The value is taken out and replaced with a placeholder. ``f`` receives
        the value; when it returns, the value is put back, discarding the
        placeholder along with anything nested accesses did to it.

        In-place mutations made by ``f`` persist. Rebinding the argument does
        not; use ``map`` to replace the value.
        """
        value = self.take()
        try:
            result = f(value)
        except BaseException:
            self._abandon(value)
            raise
        self._value = value
        return result

    def inspect(self, f: Callable[[T], Any]) -> "WithCell[T]":
        """Like ``with_``, but discards the result and returns the cell."""
        self.with_(f)
        return self

    def map(self, f: Callable[[T], T]) -> "WithCell[T]":
        """
        Replace the contained value with ``f(value)``.

        The value is taken out and replaced with a placeholder, passed to
        ``f``, and whatever ``f`` returns is stored. Returns the cell so calls
        can be chained:

            cell.map(lambda s: s + "a").map(lambda s: s + "b")
        """
        value = self.take()
        try:
            result = f(value)
        except BaseException:
            self._abandon(value)
            raise
        self._value = result
        return self

    def _abandon(self, value: T) -> None:
        """Handle a callback that raised while holding ``value``."""
        if self._restore_on_error:
            self._value = value
            logger.debug(
                "callback raised; restored %s value", type(value).__name__
            )
        else:
            logger.debug(
                "callback raised; placeholder left in place of %s value",
                type(value).__name__,
            )

    # ========================================================================
    # MOVES
    # ========================================================================

    def take(self) -> T:
        """Remove and return the value, leaving a placeholder behind."""
        placeholder = self._default()
        value, self._value = self._value, placeholder
        return value

    def replace(self, value: T) -> T:
        """Store ``value`` and return the previous one."""
        old, self._value = self._value, value
        return old

    def set(self, value: T) -> None:
        """Store ``value``, dropping the previous one."""
        self._value = value

    def swap(self, other: "WithCell[T]") -> None:
        """Exchange values with another cell."""
        if not isinstance(other, WithCell):
            raise TypeError(f"cannot swap with {type(other).__name__}")
        if other is self:
            return
        self._value, other._value = other._value, self._value

    # ========================================================================
    # PROTOCOLS
    # ========================================================================

    def _read(self, f: Callable[[T], R]) -> R:
        """Run ``f`` on the value, putting it back even if ``f`` raises."""
        value = self.take()
        try:
            return f(value)
        finally:
            self._value = value

    def clone(self) -> "WithCell[T]":
        """Return a new cell holding a shallow copy of the value."""
        return self._spawn(self._read(copy.copy))

    def __copy__(self) -> "WithCell[T]":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "WithCell[T]":
        # Registered before the value is copied so self-references resolve
        twin = self._spawn(self._default())
        memo[id(self)] = twin
        twin._value = self._read(lambda v: copy.deepcopy(v, memo))
        state = getattr(self, "__dict__", None)
        if state:
            twin.__dict__.update(copy.deepcopy(state, memo))
        return twin

    def _spawn(self, value: T) -> "WithCell[T]":
        """
        Build a cell of the same type sharing this cell's factory and options.

        ``__init__`` is bypassed, so subclasses with their own constructor
        signature copy fine; instance attributes of such subclasses are
        carried over shallowly.
        """
        cls = type(self)
        twin = cls.__new__(cls)
        twin._default = self._default
        twin._restore_on_error = self._restore_on_error
        twin._value = value
        state = getattr(self, "__dict__", None)
        if state:
            twin.__dict__.update(state)
        return twin

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._read(repr)})"
