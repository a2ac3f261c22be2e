from dataclasses import dataclass
from typing import Union

from addrmap.errors import InvalidRangeError, NonOverlappingMergeError
from addrmap.utils.unsigned import to_unsigned, ucomp, umin, umax, format_hex


@dataclass(frozen=True)
class Range:
    """
    A closed interval [begin, end] over unsigned 64-bit values.

    Attributes:
        begin (int): Lower bound (inclusive), normalized to [0, 2**64 - 1].
        end (int): Upper bound (inclusive), normalized to [0, 2**64 - 1].
    """
    begin: int
    end: int

    def __post_init__(self) -> None:
        begin = to_unsigned(self.begin)
        end = to_unsigned(self.end)

        if ucomp(begin, end) > 0:
            raise InvalidRangeError(f"Begin {format_hex(begin)} is greater than end {format_hex(end)} (unsigned).")

        object.__setattr__(self, "begin", begin)
        object.__setattr__(self, "end", end)

    @property
    def length(self) -> int:
        """Number of points covered by the range."""
        return self.end - self.begin + 1

    def contains(self, other: Union["Range", int]) -> bool:
        """
        Check whether a point or a whole range lies within this range.

        Args:
            other (Union[Range, int]): A single point or another range.

        Returns:
            bool: True if every point of other is covered by this range.
        """
        if isinstance(other, Range):
            return ucomp(self.begin, other.begin) <= 0 and ucomp(self.end, other.end) >= 0

        return ucomp(self.begin, other) <= 0 and ucomp(self.end, other) >= 0

    def __contains__(self, item: Union["Range", int]) -> bool:
        return self.contains(item)

    def overlaps(self, other: "Range") -> bool:
        """
        Check whether both ranges share at least one point. Touching endpoints count as overlap.

        Args:
            other (Range): The range to test against.

        Returns:
            bool: True if the closed intervals intersect.
        """
        return ((ucomp(self.begin, other.begin) <= 0 and ucomp(self.end, other.begin) >= 0)
                or (ucomp(self.end, other.begin) >= 0 and ucomp(self.end, other.end) <= 0)
                or (ucomp(self.begin, other.end) <= 0 and ucomp(self.end, other.end) >= 0))

    def merge_with(self, other: "Range") -> "Range":
        """
        Build the bounding union of two overlapping ranges.

        Args:
            other (Range): A range overlapping this one.

        Returns:
            Range: A new range from the smaller begin to the larger end.

        Raises:
            NonOverlappingMergeError: If the ranges do not overlap.
        """
        if not self.overlaps(other):
            raise NonOverlappingMergeError(f"Ranges don't overlap this={self} that={other}")

        return Range(umin(self.begin, other.begin), umax(self.end, other.end))

    def compare_to(self, other: "Range") -> int:
        # overlapping ranges are treated as equal so a lookup key finds the stored range it hits
        if self.overlaps(other):
            return 0
        if ucomp(self.begin, other.end) > 0:
            return 1
        return -1

    def __str__(self) -> str:
        return f"({format_hex(self.begin)}, {format_hex(self.end)})"
