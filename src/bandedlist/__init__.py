"""bandedlist - Insertion-ordered container with a (level, index) coordinate view."""

from bandedlist.core import DEFAULT_BAND_CAPACITY, BandedList
from bandedlist.errors import (
    BandedListError,
    EmptyContainerError,
    InternalInvariantError,
    InvalidArgumentError,
)
from bandedlist.node import Node
from bandedlist.types import Coordinate

__version__ = "0.0.1"

__all__ = [
    "BandedList",
    "DEFAULT_BAND_CAPACITY",
    "Node",
    "Coordinate",
    "BandedListError",
    "EmptyContainerError",
    "InvalidArgumentError",
    "InternalInvariantError",
]
