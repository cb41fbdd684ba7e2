"""Main BandedList implementation."""

import logging
from collections.abc import Iterator
from typing import IO, Generic, TypeVar

from bandedlist.errors import (
    EmptyContainerError,
    InternalInvariantError,
    InvalidArgumentError,
)
from bandedlist.node import Node
from bandedlist.types import Coordinate

V = TypeVar("V")

logger = logging.getLogger(__name__)

# Elements per level when no capacity is given
DEFAULT_BAND_CAPACITY = 6


class BandedList(Generic[V]):
    """
    Insertion-ordered container with a secondary (level, index) view.

    The element at sequence position p also lives at coordinate
    (p // band_capacity, p % band_capacity). Nodes exactly one band apart are
    cross-linked through ``next_band``/``prev_band``. Coordinates are never
    stored on nodes; they are recomputed by walking from either end with a
    local cursor.

    Appending at the back is O(1), prepending is O(band_capacity) and every
    coordinate lookup or search is O(n).

    Not thread-safe: callers must hold exclusive access while mutating.
    """

    def __init__(self, *, band_capacity: int = DEFAULT_BAND_CAPACITY) -> None:
        """
        Initialize an empty list.

        Args:
            band_capacity: Number of elements per level. Fixed for the
                lifetime of the list.

        Raises:
            InvalidArgumentError: If band_capacity is not positive
        """
        if band_capacity <= 0:
            raise InvalidArgumentError(
                f"Invalid band capacity: {band_capacity} must be greater than zero."
            )
        self._band_capacity = band_capacity
        self._head: Node[V] | None = None
        self._tail: Node[V] | None = None
        # Node at position size - band_capacity; its next_band receives the next append
        self._frontier: Node[V] | None = None
        # Coordinate of the next free slot at the back
        self._band = 0
        self._offset = 0
        self._size = 0

    @property
    def band_capacity(self) -> int:
        """Number of elements per level."""
        return self._band_capacity

    @property
    def first_node(self) -> Node[V] | None:
        """Head node, or None when empty."""
        return self._head

    @property
    def last_node(self) -> Node[V] | None:
        """Tail node, or None when empty."""
        return self._tail

    @property
    def frontier(self) -> Node[V] | None:
        """Node whose cross-link will be wired to the next appended node."""
        return self._frontier

    @property
    def level(self) -> int:
        """Level of the last element, or -1 when empty."""
        if self._head is None:
            return -1
        if self._offset == 0:
            return self._band - 1
        return self._band

    @property
    def index(self) -> int:
        """Index of the last element within its level, or -1 when empty."""
        if self._head is None:
            return -1
        if self._offset == 0:
            return self._band_capacity - 1
        return self._offset - 1

    @property
    def first(self) -> V:
        """
        Value of the first element.

        Raises:
            EmptyContainerError: If the list is empty
        """
        if self._head is None:
            raise EmptyContainerError("BandedList is empty, no first element available.")
        return self._head.value

    @property
    def last(self) -> V:
        """
        Value of the last element.

        Raises:
            EmptyContainerError: If the list is empty
        """
        if self._tail is None:
            raise EmptyContainerError("BandedList is empty, no last element available.")
        return self._tail.value

    def append(self, value: V) -> Node[V]:
        """Append a value at the back and return the node holding it."""
        return self.append_node(Node(value))

    def append_node(self, node: Node[V]) -> Node[V]:
        """
        Append a caller-supplied node at the back.

        The node's links are reset before insertion and the list takes
        ownership of it; it must not be part of another list.

        Args:
            node: Node to insert

        Returns:
            The inserted node
        """
        node.reset()
        node.prev = self._tail
        node.prev_band = self._frontier

        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
            if self._frontier is not None:
                self._frontier.next_band = node
                self._frontier = self._frontier.next

        self._increment_cursor()
        self._size += 1
        return node

    def appendleft(self, value: V) -> Node[V]:
        """Prepend a value at the front and return the node holding it."""
        return self.appendleft_node(Node(value))

    def appendleft_node(self, node: Node[V]) -> Node[V]:
        """
        Prepend a caller-supplied node at the front.

        Every existing element moves one position later. Only the new head
        needs a fresh cross-link, to the node one band-width after it; the
        frontier stays on the same node since both it and the size shift by one.

        Args:
            node: Node to insert

        Returns:
            The inserted node

        Raises:
            InternalInvariantError: If the chain is shorter than the size says
        """
        node.reset()

        if self._head is None:
            self._head = node
            self._tail = node
        else:
            # Find the cross-link target before touching any link
            target: Node[V] | None = None
            if self._size >= self._band_capacity:
                target = self._head
                for _ in range(self._band_capacity - 1):
                    if target is None:
                        break
                    target = target.next
                if target is None:
                    raise InternalInvariantError(
                        f"Chain ended before position {self._band_capacity} (size {self._size})"
                    )
            node.next = self._head
            self._head.prev = node
            self._head = node
            if target is not None:
                node.next_band = target
                target.prev_band = node

        self._increment_cursor()
        self._size += 1
        return node

    def max_index_for(self, level: int) -> int:
        """
        Return the highest valid index on a level.

        Args:
            level: Level to query

        Returns:
            band_capacity - 1 for every full level, the last element's index
            for the last level

        Raises:
            InvalidArgumentError: If level is negative, the list is empty, or
                level is beyond the last occupied level
        """
        if level < 0:
            raise InvalidArgumentError("Invalid level: Level cannot be negative.")
        if self._head is None:
            raise InvalidArgumentError("Cannot get maximum index for level on an empty BandedList")
        last_level = self.level
        if level > last_level:
            raise InvalidArgumentError(
                f"Invalid level: {level} exceeds the maximum level {last_level}."
            )
        if level < last_level:
            return self._band_capacity - 1
        return self.index

    def get(self, level: int, index: int) -> V:
        """
        Return the value at (level, index).

        Raises:
            InvalidArgumentError: If the coordinate is out of range
        """
        return self._locate(level, index).value

    def get_node(self, level: int, index: int) -> Node[V]:
        """
        Return the node at (level, index).

        Raises:
            InvalidArgumentError: If the coordinate is out of range
        """
        return self._locate(level, index)

    def set(self, level: int, index: int, value: V) -> V:
        """
        Replace the value at (level, index).

        Args:
            level: Level of the element
            index: Index within the level
            value: New value

        Returns:
            The previous value

        Raises:
            InvalidArgumentError: If the coordinate is out of range
        """
        node = self._locate(level, index)
        old_value = node.value
        node.value = value
        return old_value

    def index_of(self, value: V) -> Coordinate:
        """Coordinate of the first element equal to value, or {} if absent."""
        for node, level, index in self._walk():
            if node.value == value:
                return {"level": level, "index": index}
        return {}

    def last_index_of(self, value: V) -> Coordinate:
        """Coordinate of the last element equal to value, or {} if absent."""
        for node, level, index in self._walk_reversed():
            if node.value == value:
                return {"level": level, "index": index}
        return {}

    def index_of_node(self, target: Node[V]) -> Coordinate:
        """Coordinate of the given node (by identity), or {} if it is not in the list."""
        for node, level, index in self._walk():
            if node is target:
                return {"level": level, "index": index}
        return {}

    def last_index_of_node(self, target: Node[V]) -> Coordinate:
        """Same as index_of_node, scanning from the back."""
        for node, level, index in self._walk_reversed():
            if node is target:
                return {"level": level, "index": index}
        return {}

    def popleft(self) -> V:
        """
        Remove and return the first element.

        Raises:
            EmptyContainerError: If the list is empty
        """
        head = self._head
        if head is None:
            raise EmptyContainerError("Cannot remove from an empty BandedList.")

        value = head.value
        following = head.next
        if following is None:
            self._reset_pointers()
        else:
            following.prev = None
            if head.next_band is not None:
                head.next_band.prev_band = None
            # The frontier is the head only when size == band_capacity
            if self._frontier is head:
                self._frontier = None
            self._head = following
        head.reset()

        self._decrement_cursor()
        self._size -= 1
        return value

    def pop(self) -> V:
        """
        Remove and return the last element.

        Raises:
            EmptyContainerError: If the list is empty
        """
        tail = self._tail
        if tail is None:
            raise EmptyContainerError("Cannot remove from an empty BandedList.")

        value = tail.value
        tail.value = None  # type: ignore[assignment]
        previous = tail.prev
        if previous is None:
            self._reset_pointers()
        else:
            previous.next = None
            if tail.prev_band is not None:
                tail.prev_band.next_band = None
            if self._frontier is not None:
                self._frontier = self._frontier.prev
            self._tail = previous
        tail.reset()

        self._decrement_cursor()
        self._size -= 1
        return value

    def clear(self) -> None:
        """Remove all elements, breaking every link between the old nodes."""
        count = self._size
        node = self._head
        while node is not None:
            following = node.next
            node.reset()
            node = following

        self._reset_pointers()
        self._band = 0
        self._offset = 0
        self._size = 0
        logger.debug("Cleared %d elements", count)

    def copy(self) -> "BandedList[V]":
        """Return a new list with the same band capacity and the same values in order."""
        clone: BandedList[V] = type(self)(band_capacity=self._band_capacity)
        for value in self:
            clone.append(value)
        logger.debug("Copied %d elements", clone._size)
        return clone

    __copy__ = copy

    def dump(self, file: IO[str] | None = None) -> None:
        """
        Write one ``value: <v>, level: <l>, index: <i>`` line per element.

        Args:
            file: Destination stream (defaults to stdout)
        """
        for node, level, index in self._walk():
            print(f"value: {node.value}, level: {level}, index: {index}", file=file)

    def __iter__(self) -> Iterator[V]:
        """Iterate over values from first to last."""
        for node, _, _ in self._walk():
            yield node.value

    def __reversed__(self) -> Iterator[V]:
        """Iterate over values from last to first."""
        for node, _, _ in self._walk_reversed():
            yield node.value

    def __len__(self) -> int:
        """Return the number of elements."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}{{level={self.level}, index={self.index}, "
            f"size={self._size}, bandCapacity={self._band_capacity}}}"
        )

    def _walk(self) -> Iterator[tuple[Node[V], int, int]]:
        """Yield (node, level, index) from head to tail."""
        level, index = 0, 0
        node = self._head
        while node is not None:
            yield node, level, index
            node = node.next
            index += 1
            if index == self._band_capacity:
                level += 1
                index = 0

    def _walk_reversed(self) -> Iterator[tuple[Node[V], int, int]]:
        """Yield (node, level, index) from tail to head, starting at the last occupied coordinate."""
        level, index = self.level, self.index
        node = self._tail
        while node is not None:
            yield node, level, index
            node = node.prev
            index -= 1
            if index < 0:
                level -= 1
                index = self._band_capacity - 1

    def _is_valid_coordinate(self, level: int, index: int) -> bool:
        return 0 <= level <= self.level and 0 <= index <= self.max_index_for(level)

    def _locate(self, level: int, index: int) -> Node[V]:
        """Find the node at (level, index) after validating the coordinate."""
        if not self._is_valid_coordinate(level, index):
            raise InvalidArgumentError(f"Invalid level or index. Level: {level}, Index: {index}")
        for node, node_level, node_index in self._walk():
            if node_level == level and node_index == index:
                return node
        raise InternalInvariantError(f"Failed to locate element. Level: {level}, Index: {index}")

    def _increment_cursor(self) -> None:
        self._offset += 1
        if self._offset == self._band_capacity:
            # Level 0 just filled: the head is now exactly one band behind the next slot
            if self._band == 0:
                self._frontier = self._head
            self._band += 1
            self._offset = 0

    def _decrement_cursor(self) -> None:
        if self._offset > 0:
            self._offset -= 1
        else:
            self._offset = self._band_capacity - 1
            self._band -= 1

    def _reset_pointers(self) -> None:
        self._head = None
        self._tail = None
        self._frontier = None
