import logging
from dataclasses import dataclass
from typing import Optional, TypeVar, Generic, Tuple

from rich.table import Table
from sortedcontainers import SortedKeyList

from addrmap.Range import Range
from addrmap.RangeMapOptions import RangeMapOptions
from addrmap.utils.unsigned import format_hex, ucomp

logger = logging.getLogger(__name__)

T = TypeVar('T')

_Entry = Tuple[Range, T]


@dataclass
class RangeResult(Generic[T]):
    begin: int
    end: int
    value: T


def _entry_key(entry: _Entry) -> Tuple[int, int]:
    stored_range = entry[0]
    return stored_range.end, stored_range.begin


class RangeMap(Generic[T]):
    """
    A map from disjoint closed ranges [begin, end] of unsigned 64-bit values to values.
    Inserting a range that overlaps a stored range merges both into their union, the new value wins.

    Only the first stored range at or after the inserted one is merged. If the inserted range spans
    several stored ranges, the others are kept as they are (a warning is logged).

    Attributes:
        options (RangeMapOptions): Diagnostic switches.
    """

    def __init__(self, options: Optional[RangeMapOptions] = None) -> None:
        """Initialize an empty RangeMap."""
        self.options = options if options is not None else RangeMapOptions()

        # Sorted by (end, begin). While the stored ranges are disjoint this is the same order as by begin,
        # a merge that leaves overlaps behind (see put) breaks that.
        self._entries: SortedKeyList = SortedKeyList(key=_entry_key)

    def _ceiling_index(self, candidate: Range) -> int:
        # first entry with end >= candidate.begin, i.e. the smallest entry that overlaps or follows the candidate
        return self._entries.bisect_key_left((candidate.begin, 0))

    def put(self, begin: int, end: int, value: T) -> None:
        """
        Put, or update, a mapping between a range of values and an object.

        Args:
            begin (int): Lower bound (inclusive), treated as unsigned 64-bit.
            end (int): Upper bound (inclusive), treated as unsigned 64-bit.
            value (T): The value associated with the range.

        Raises:
            InvalidRangeError: If begin > end (unsigned). The map is left unchanged.
        """
        r1 = Range(begin, end)

        index = self._ceiling_index(r1)
        if index < len(self._entries):
            r2, old_value = self._entries[index]
            if r2.overlaps(r1):
                merged = r1.merge_with(r2)
                del self._entries[index]
                self._entries.add((merged, value))

                if self.options.log_merges:
                    logger.debug(f"Merged {r1} into {r2} -> {merged}")

                self._check_residual_overlaps(merged)
                return

        self._entries.add((r1, value))

    def _check_residual_overlaps(self, merged: Range) -> None:
        if not self.options.warn_on_residual_overlap:
            return

        # the other entries were disjoint before the merge, so they stay ordered by begin among themselves
        for stored_range, _ in self._entries.irange_key(min_key=(merged.begin, 0)):
            if stored_range is merged:
                continue
            if ucomp(stored_range.begin, merged.end) > 0:
                break
            logger.warning(f"Merged range {merged} still overlaps stored range {stored_range}")

    def get_range(self, point: int) -> Optional[RangeResult[T]]:
        """
        Retrieve the stored range containing the point.

        Args:
            point (int): The value to look up.

        Returns:
            Optional[RangeResult[T]]: The bounds and value of the range, or None if no range contains the point.
        """
        r1 = Range(point, point)

        index = self._ceiling_index(r1)
        if index == len(self._entries):
            return None

        r2, value = self._entries[index]
        if r2.contains(r1.begin):
            return RangeResult(begin=r2.begin, end=r2.end, value=value)
        return None

    def get(self, point: int, default: Optional[T] = None) -> Optional[T]:
        """
        Get the value that is mapped to a range containing the point, or default if no range is mapped.
        """
        result = self.get_range(point)
        if result is None:
            return default
        return result.value

    def __getitem__(self, point: int) -> T:
        result = self.get_range(point)
        if result is None:
            raise KeyError(point)
        return result.value

    def __contains__(self, point: int) -> bool:
        return self.get_range(point) is not None

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def to_string(self) -> str:
        pairs = ", ".join(f"{stored_range}={value}" for stored_range, value in self._entries)
        return f"{{{pairs}}}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"

    def __rich__(self) -> Table:
        table = Table(title=f"{type(self).__name__} ({self.size()} ranges)")
        table.add_column("begin", style="cyan", no_wrap=True)
        table.add_column("end", style="cyan", no_wrap=True)
        table.add_column("value")

        for stored_range, value in self._entries:
            table.add_row(format_hex(stored_range.begin), format_hex(stored_range.end), str(value))
        return table
