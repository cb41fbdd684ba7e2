"""Tests for the banded list node."""

from bandedlist import Node


def test_node_creation() -> None:
    """Test creating a node."""
    node = Node("value1")
    assert node.value == "value1"
    assert node.prev is None
    assert node.next is None
    assert node.prev_band is None
    assert node.next_band is None


def test_node_creation_with_back_links() -> None:
    """Test creating a node with its previous and previous-band links."""
    before = Node(1)
    band_before = Node(0)
    node = Node(2, before, band_before)

    assert node.prev is before
    assert node.prev_band is band_before
    assert node.next is None
    assert node.next_band is None


def test_node_setters() -> None:
    """Test setting value and links directly."""
    a = Node("a")
    b = Node("b")

    a.next = b
    b.prev = a
    a.next_band = b
    b.prev_band = a
    a.value = "A"

    assert a.value == "A"
    assert a.next is b
    assert b.prev is a
    assert a.next_band is b
    assert b.prev_band is a


def test_node_reset() -> None:
    """Test that reset clears every link but keeps the value."""
    node = Node("x", Node("p"), Node("pb"))
    node.next = Node("n")
    node.next_band = Node("nb")

    node.reset()

    assert node.value == "x"
    assert node.prev is None
    assert node.next is None
    assert node.prev_band is None
    assert node.next_band is None


def test_node_repr() -> None:
    """Test the node representation."""
    assert repr(Node("a")) == "Node('a')"
    assert repr(Node(42)) == "Node(42)"
