"""
Placeholder Factories
=====================

A cell swaps a placeholder into its slot while a callback holds the real
value. The placeholder comes from a zero-argument factory returning a fresh
"empty" instance of the wrapped type:

- ``list`` -> ``[]``
- ``dict`` -> ``{}``
- ``int`` -> ``0``
- ``str`` -> ``""``

When no factory is given, the type of the initial value is used. Factories
must be cheap and must not raise; they are probed once when the cell is
built so that an unusable factory fails at construction rather than in the
middle of an access.
"""

from typing import Any, Callable, Optional, TypeVar

from .exceptions import PlaceholderError

T = TypeVar("T")


def resolve_placeholder(
    initial: Any, default: Optional[Callable[[], T]] = None
) -> Callable[[], T]:
    """
    Return the placeholder factory for a cell holding ``initial``.

    Args:
        initial: The value the cell starts with.
        default: Explicit factory. When ``None``, ``type(initial)`` is used.

    Returns:
        A zero-argument callable producing an empty value.

    Raises:
        PlaceholderError: If the factory is not callable or raises when probed.
    """
    factory = type(initial) if default is None else default

    if not callable(factory):
        raise PlaceholderError(
            f"placeholder factory must be callable, got {factory!r}"
        )

    try:
        factory()
    except Exception as exc:
        name = getattr(factory, "__qualname__", repr(factory))
        raise PlaceholderError(
            f"cannot build a placeholder with {name}(); "
            "pass a zero-argument factory as 'default'"
        ) from exc

    return factory
