"""Node type shared by the chain and the band cross-links."""

from typing import Generic, TypeVar

V = TypeVar("V")


class Node(Generic[V]):
    """
    A value plus its four links.

    ``next``/``prev`` chain nodes in insertion order. ``next_band``/``prev_band``
    connect a node to the node exactly one band-width later/earlier in that
    order. Nodes never validate their links; the owning list maintains them.
    """

    __slots__ = ("value", "next", "prev", "next_band", "prev_band")

    def __init__(
        self,
        value: V,
        prev: "Node[V] | None" = None,
        prev_band: "Node[V] | None" = None,
    ) -> None:
        self.value = value
        self.next: Node[V] | None = None
        self.prev = prev
        self.next_band: Node[V] | None = None
        self.prev_band = prev_band

    def reset(self) -> None:
        """Drop all four links."""
        self.next = None
        self.prev = None
        self.next_band = None
        self.prev_band = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
