"""
Reference tracking utilities for withcell tests.

These utilities check that cells release the values they hold and that
repeated access does not accumulate objects.

Examples:
    Release check:

        >>> ref = weakref.ref(payload)
        >>> cell = WithCell(payload, Payload)
        >>> del payload, cell
        >>> assert_released(ref)

    Leak check:

        >>> assert_no_object_leak(lambda: cell.with_(len), "Payload")
"""

import gc
import weakref
from typing import Callable, Optional


def assert_released(
    ref: weakref.ref, description: str = "Object should be released"
) -> None:
    """Assert that the object behind ``ref`` has been freed.

    Args:
        ref: Weak reference to the object under test
        description: Custom description for the assertion failure
    """
    gc.collect()
    assert ref() is None, f"{description}: object is still alive"


def count_instances(type_name: str) -> int:
    """Count live gc-tracked objects whose type is named ``type_name``."""
    gc.collect()
    return sum(1 for obj in gc.get_objects() if type(obj).__name__ == type_name)


def assert_no_object_leak(
    operation: Callable[[], None],
    type_name: str,
    tolerance: int = 0,
    description: Optional[str] = None,
) -> None:
    """Assert that an operation doesn't leave extra objects of a type behind.

    Args:
        operation: Function to execute that should not create persistent objects
        type_name: Name of the object type to monitor (e.g., 'Payload')
        tolerance: Allowed variance in object count
        description: Custom description for assertion failures
    """
    if description is None:
        description = f"Operation should not leak {type_name} objects"

    initial_count = count_instances(type_name)
    operation()
    final_count = count_instances(type_name)

    assert (
        abs(final_count - initial_count) <= tolerance
    ), f"{description}: {type_name} count changed from {initial_count} to {final_count}"
