"""
Shared pytest fixtures and configuration for withcell tests.
"""

import pytest

from withcell import WithCell


@pytest.fixture
def numbers():
    """A cell holding the sequence [1, 2, 3]."""
    return WithCell([1, 2, 3])


@pytest.fixture
def restoring_numbers():
    """A cell holding [1, 2, 3] that restores its value when a callback raises."""
    return WithCell([1, 2, 3], restore_on_error=True)
