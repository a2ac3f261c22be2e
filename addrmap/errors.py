class AddrMapError(Exception):
    """
    Base class of all errors raised by addrmap.
    """
    pass


class InvalidRangeError(AddrMapError, ValueError):
    """
    Raised when a range is constructed with begin > end (unsigned).
    """
    pass


class NonOverlappingMergeError(AddrMapError, ValueError):
    """
    Raised when two ranges that do not overlap are merged.
    RangeMap only merges after an overlap check, so seeing this from a put means an internal invariant broke.
    """
    pass
