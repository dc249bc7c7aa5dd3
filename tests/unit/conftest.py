"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

import pytest

from fslink.api.link.LinkApplier import LinkApplier
from fslink.api.link.LinkStore import LinkStore

# Re-export commonly used helpers from root conftest
from tests.conftest import read_db, run_cmd

__all__ = [
    "read_db",
    "run_cmd",
]


@pytest.fixture
def store(project) -> LinkStore:
    """LinkStore of the initialized project fixture."""
    return LinkStore(project.resolve(), LinkApplier())
