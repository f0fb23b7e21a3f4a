# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from typing import Optional

from bisect import bisect_left
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Sequence

from strprep.ranges import MAX_CODEPOINT

Replacement = tuple[int, ...]

DELETE: Replacement = ()


class MappingTable:
    """
    Exact-match table of ``codepoint -> replacement`` entries, used for
    case folding where the replacements are not uniform over ranges.

    :meth:`map` returns :data:`None` when the code point passes through
    unchanged, an empty tuple when it is deleted and the replacement
    sequence otherwise.
    """

    __slots__ = ("_keys", "_values")

    def __init__(self, entries: Iterable[tuple[int, Sequence[int]]] = ()) -> None:
        items = sorted((int(cp), tuple(seq)) for cp, seq in entries)
        keys = [cp for cp, _seq in items]
        for i, cp in enumerate(keys):
            if not 0 <= cp <= MAX_CODEPOINT:
                raise ValueError(f"Invalid codepoint: {cp:#x}")
            if i and keys[i - 1] == cp:
                raise ValueError(f"Duplicate mapping for {cp:#x}")

        self._keys = tuple(keys)
        self._values = tuple(seq for _cp, seq in items)

    def map(self, codepoint: int) -> Optional[Replacement]:
        index = bisect_left(self._keys, codepoint)
        if index < len(self._keys) and self._keys[index] == codepoint:
            return self._values[index]
        return None

    def __contains__(self, codepoint: object) -> bool:
        if not isinstance(codepoint, int):
            return False
        return self.map(codepoint) is not None

    def __iter__(self) -> Iterator[tuple[int, Replacement]]:
        return zip(self._keys, self._values)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"MappingTable({len(self._keys)} entries)"
