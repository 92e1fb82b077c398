"""
Shared test fixtures for the dirtree test suite.
"""

import pytest

from dirtree.structure.directory import Directory


@pytest.fixture
def directory():
    """Directory seeded with a small produce tree.

    Layout:
        fruits
          apples
            fuji
            honeycrisps
        grains
        vegetables
    """
    return Directory.from_mapping(
        {
            "fruits": {"apples": {"fuji": {}, "honeycrisps": {}}},
            "grains": {},
            "vegetables": {},
        }
    )


@pytest.fixture
def output():
    """List collecting everything an Executor sends to its sink."""
    return []
