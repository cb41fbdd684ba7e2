"""Shared fixtures for bandedlist tests."""

from collections.abc import Callable
from typing import Any

import pytest

from bandedlist import BandedList, Node


def _check_links(lst: BandedList[Any]) -> list[Node[Any]]:
    """Assert every chain, cross-link, frontier and cursor invariant; return the nodes."""
    nodes: list[Node[Any]] = []
    previous = None
    node = lst.first_node
    while node is not None:
        assert node.prev is previous
        nodes.append(node)
        previous = node
        node = node.next
    assert lst.last_node is previous
    assert len(nodes) == len(lst)

    capacity = lst.band_capacity
    for position, node in enumerate(nodes):
        expected_prev_band = nodes[position - capacity] if position >= capacity else None
        expected_next_band = (
            nodes[position + capacity] if position + capacity < len(nodes) else None
        )
        assert node.prev_band is expected_prev_band
        assert node.next_band is expected_next_band

    if len(nodes) >= capacity:
        assert lst.frontier is nodes[len(nodes) - capacity]
    else:
        assert lst.frontier is None

    if nodes:
        assert (lst.level, lst.index) == divmod(len(nodes) - 1, capacity)
    else:
        assert (lst.level, lst.index) == (-1, -1)
    return nodes


@pytest.fixture
def check_links() -> Callable[[BandedList[Any]], list[Node[Any]]]:
    """Return the link-consistency checker."""
    return _check_links
