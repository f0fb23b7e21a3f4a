# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from typing import Any

from collections.abc import Iterable
from collections.abc import Iterator

MAX_CODEPOINT = 0x10FFFF

Range = tuple[int, int]


class RangeTable:
    """
    Immutable set of code points stored as ascending, non-overlapping,
    inclusive ``(start, end)`` ranges. Membership is a binary search over
    the range starts.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: Iterable[Range] = ()) -> None:
        ranges = tuple((int(start), int(end)) for start, end in ranges)
        self._validate(ranges)
        self._ranges = ranges

    @staticmethod
    def _validate(ranges: tuple[Range, ...]) -> None:
        previous_end = -1
        for start, end in ranges:
            if not 0 <= start <= end <= MAX_CODEPOINT:
                raise ValueError(f"Invalid range: ({start:#x}, {end:#x})")
            if start <= previous_end:
                raise ValueError(
                    f"Range ({start:#x}, {end:#x}) is unsorted or overlaps "
                    f"its predecessor")
            previous_end = end

    @classmethod
    def from_codepoints(cls, codepoints: Iterable[int]) -> RangeTable:
        return cls.union(cls((cp, cp) for cp in sorted(set(codepoints))))

    @classmethod
    def union(cls, *tables: RangeTable) -> RangeTable:
        """
        Merge `tables` into a new table, coalescing overlapping and
        adjacent ranges.
        """

        merged: list[list[int]] = []
        for start, end in sorted(r for table in tables for r in table):
            if merged and start <= merged[-1][1] + 1:
                merged[-1][1] = max(merged[-1][1], end)
            else:
                merged.append([start, end])
        return cls((start, end) for start, end in merged)

    def search(self, codepoint: int) -> int:
        """
        Return the index of the range containing `codepoint`. If no range
        contains it, return ``-(insertion_point + 1)`` where the insertion
        point is the index at which a range starting at `codepoint` would
        be placed.
        """

        low = 0
        high = len(self._ranges) - 1
        while low <= high:
            mid = (low + high) >> 1
            start, end = self._ranges[mid]
            if codepoint < start:
                high = mid - 1
            elif codepoint > end:
                low = mid + 1
            else:
                return mid
        return -(low + 1)

    def contains(self, codepoint: int) -> bool:
        return self.search(codepoint) >= 0

    def __contains__(self, codepoint: object) -> bool:
        if not isinstance(codepoint, int):
            return False
        return self.contains(codepoint)

    def __iter__(self) -> Iterator[Range]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RangeTable):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __repr__(self) -> str:
        return f"RangeTable({len(self._ranges)} ranges)"
