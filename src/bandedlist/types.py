"""Type definitions for bandedlist."""

from typing import TypeAlias, TypeVar

# Generic type variable for stored values
V = TypeVar("V")

# Result of a coordinate lookup: {"level": L, "index": I}, or {} when not found
Coordinate: TypeAlias = dict[str, int]
