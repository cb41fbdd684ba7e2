"""Exception classes for bandedlist."""


class BandedListError(Exception):
    """Base exception for all bandedlist errors."""


class EmptyContainerError(BandedListError):
    """Raised when an operation needs at least one element but the list is empty."""


class InvalidArgumentError(BandedListError):
    """Raised when a level, index or band capacity is out of range."""


class InternalInvariantError(BandedListError):
    """Raised when a validated coordinate walk cannot find its node (cursor bookkeeping is broken)."""
