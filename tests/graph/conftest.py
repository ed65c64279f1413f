"""Shared fixtures for PERT graph tests."""
from __future__ import annotations

import pytest

from pert_lite.graph.network import PertGraph

from builders import build_graph


@pytest.fixture
def single_node() -> PertGraph:
    """One activity of duration 5, no arcs."""
    return build_graph([5], [])


@pytest.fixture
def textbook_graph() -> PertGraph:
    """
    1(3) -> 3(4) -> 5(2)
    2(2) -> 3
    1    -> 4(1) -> 5

    Critical: 1 -> 3 -> 5, length 9.
    """
    return build_graph(
        [3, 2, 4, 1, 2],
        [(1, 3), (2, 3), (1, 4), (3, 5), (4, 5)],
    )


@pytest.fixture
def two_chains() -> PertGraph:
    """Chain A: 1(3) -> 2(4).  Chain B: 3(10).  No cross arcs."""
    return build_graph([3, 4, 10], [(1, 2)])


@pytest.fixture
def merging_branches() -> PertGraph:
    """1(3) and 2(3) both feed 3(2): two equal critical paths."""
    return build_graph([3, 3, 2], [(1, 3), (2, 3)])


@pytest.fixture
def shortcut_graph() -> PertGraph:
    """
    1(2) -> 2(5) -> 3(1), plus the shortcut 1 -> 3.

    1 and 3 both have zero slack but 1 -> 3 is not a critical arc.
    """
    return build_graph([2, 5, 1], [(1, 2), (2, 3), (1, 3)])
