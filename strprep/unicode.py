# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Unicode capabilities the stringprep engine consumes but does not implement.

RFC 3454 is pinned to Unicode 3.2, which the interpreter still ships as
:data:`unicodedata.ucd_3_2_0`. The defaults below use that database; any
object with the same methods can be injected instead.
"""

from __future__ import annotations

from typing import Protocol

import stringprep
from collections.abc import Sequence
from unicodedata import ucd_3_2_0

from strprep.const import BidiCategory

_BIDI_CATEGORIES = {
    "L": BidiCategory.L,
    "R": BidiCategory.R,
    "AL": BidiCategory.AL,
}


class Normalizer(Protocol):
    def normalize(self, codepoints: Sequence[int]) -> list[int]: ...


class UnicodeDatabase(Protocol):
    @property
    def unidata_version(self) -> str: ...

    def is_assigned(self, codepoint: int) -> bool: ...

    def bidi_category(self, codepoint: int) -> BidiCategory: ...


def to_text(codepoints: Sequence[int]) -> str:
    return "".join(map(chr, codepoints))


def to_codepoints(text: str) -> list[int]:
    return [ord(c) for c in text]


class Unicode32Normalizer:
    """
    NFKC normalization against Unicode 3.2.
    """

    form = "NFKC"

    def normalize(self, codepoints: Sequence[int]) -> list[int]:
        text = to_text(codepoints)
        return to_codepoints(ucd_3_2_0.normalize(self.form, text))


class Unicode32Database:
    unidata_version = ucd_3_2_0.unidata_version

    def is_assigned(self, codepoint: int) -> bool:
        # Table A.1 lists the code points unassigned in Unicode 3.2
        return not stringprep.in_table_a1(chr(codepoint))

    def bidi_category(self, codepoint: int) -> BidiCategory:
        category = ucd_3_2_0.bidirectional(chr(codepoint))
        return _BIDI_CATEGORIES.get(category, BidiCategory.OTHER)
