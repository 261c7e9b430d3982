"""Shared fixtures for the mind-map tests."""

import itertools

import pytest

from core.tree import add_child, make_root


@pytest.fixture
def id_factory():
    """Deterministic id generator: n1, n2, n3, ..."""
    counter = itertools.count(1)
    return lambda: f"n{next(counter)}"


@pytest.fixture
def sample_tree(id_factory):
    """
    n1 Root (0)
      n2 A (1)
        n4 A1 (2)
      n3 B (1)
    """
    root = make_root(new_id=id_factory)
    root = add_child(root, "n1", "A", new_id=id_factory)
    root = add_child(root, "n1", "B", new_id=id_factory)
    root = add_child(root, "n2", "A1", new_id=id_factory)
    return root
