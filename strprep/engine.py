# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from typing import Optional

import functools
import logging
import os
from collections.abc import Sequence

from strprep.const import BidiViolation
from strprep.const import MappingKind
from strprep.errors import BidiViolationError
from strprep.errors import MalformedInputError
from strprep.errors import ProhibitedCharacterError
from strprep.errors import StringPrepError
from strprep.errors import UnassignedCodepointError
from strprep.mapping import DELETE
from strprep.mapping import Replacement
from strprep.profiles import Profile
from strprep.structs import PrepResult
from strprep.tables import SPACE
from strprep.unicode import Normalizer
from strprep.unicode import to_text
from strprep.unicode import Unicode32Database
from strprep.unicode import Unicode32Normalizer
from strprep.unicode import UnicodeDatabase

log = logging.getLogger("strprep.engine")

DEFAULT_CACHE_SIZE = 1000

Input = str | bytes | bytearray


def get_cache_size() -> int:
    value = os.environ.get("STRPREP_CACHE_SIZE")
    if value is None:
        return DEFAULT_CACHE_SIZE

    try:
        return max(int(value), 0)
    except ValueError:
        log.warning("Invalid STRPREP_CACHE_SIZE %r, using %s",
                    value, DEFAULT_CACHE_SIZE)
        return DEFAULT_CACHE_SIZE


def check_input(text: Input) -> str | bytes:
    if isinstance(text, bytearray):
        return bytes(text)
    if not isinstance(text, (str, bytes)):
        raise TypeError(f"Expected str or bytes, got {type(text).__name__}")
    return text


def decode(text: Input) -> list[int]:
    """
    Decode `text` into Unicode scalar values. Surrogate pairs are combined,
    lone surrogates and invalid UTF-8 raise :class:`MalformedInputError`.
    """

    original = text = check_input(text)
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as error:
            raise MalformedInputError(
                error.start, original, reason=error.reason) from error

    codepoints: list[int] = []
    length = len(text)
    i = 0
    while i < length:
        codepoint = ord(text[i])
        if 0xD800 <= codepoint <= 0xDBFF:
            if i + 1 < length and 0xDC00 <= ord(text[i + 1]) <= 0xDFFF:
                low = ord(text[i + 1])
                codepoint = 0x10000 + ((codepoint - 0xD800) << 10) + (low - 0xDC00)
                i += 1
            else:
                raise MalformedInputError(i, original)

        elif 0xDC00 <= codepoint <= 0xDFFF:
            raise MalformedInputError(i, original)

        codepoints.append(codepoint)
        i += 1

    return codepoints


def map_codepoint(profile: Profile, codepoint: int) -> Optional[Replacement]:
    if profile.mapping == MappingKind.IDENTITY:
        return None

    # U+200B is in both C.1.2 and B.1, spaces win
    if profile.mapping == MappingKind.MAP_SPACES:
        assert profile.spaces is not None
        if profile.spaces.contains(codepoint):
            return SPACE

    if profile.deletions.contains(codepoint):
        return DELETE

    if profile.mapping in (MappingKind.MAP_TO_NOTHING, MappingKind.MAP_SPACES):
        return None

    if profile.mapping == MappingKind.CASE_FOLD:
        assert profile.folding is not None
        return profile.folding.map(codepoint)

    raise ValueError(f"Unknown mapping: {profile.mapping}")


def map_codepoints(profile: Profile, codepoints: Sequence[int]) -> list[int]:
    if profile.mapping.is_identity:
        return list(codepoints)

    result: list[int] = []
    for codepoint in codepoints:
        replacement = map_codepoint(profile, codepoint)
        if replacement is None:
            result.append(codepoint)
        else:
            result.extend(replacement)
    return result


class StringPrep:
    """
    The RFC 3454 preparation pipeline for one profile: map, normalize,
    check prohibited, unassigned and bidi, emit. The first violation
    aborts with a :class:`StringPrepError` subclass.

    Instances hold no mutable state besides a result cache and are safe
    to share between threads.
    """

    def __init__(self,
                 profile: Profile,
                 database: Optional[UnicodeDatabase] = None,
                 normalizer: Optional[Normalizer] = None,
                 cache_size: Optional[int] = None) -> None:

        self._profile = profile
        self._database = database or Unicode32Database()
        self._normalizer = normalizer or Unicode32Normalizer()

        if cache_size is None:
            cache_size = get_cache_size()

        if cache_size > 0:
            self._run = functools.lru_cache(maxsize=cache_size)(self._prepare)
        else:
            self._run = self._prepare

        log.info("Created %s engine (cache size: %s)",
                 profile.name, cache_size)

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def name(self) -> str:
        return self._profile.name

    def prepare(self, text: Input, allow_unassigned: bool = False) -> str:
        """
        Prepare `text`. Unassigned code points are rejected unless
        `allow_unassigned` is set, which is what RFC 3454 calls a query.
        """

        # the cache key must be hashable
        text = check_input(text)
        try:
            return self._run(text, allow_unassigned)
        except StringPrepError as error:
            log.log(error.log_level, "%s rejected input: %s", self.name, error)
            raise

    def prepare_query(self, text: Input) -> str:
        return self.prepare(text, allow_unassigned=True)

    def prepare_stored(self, text: Input) -> str:
        return self.prepare(text, allow_unassigned=False)

    def prepare_result(self,
                       text: Input,
                       allow_unassigned: bool = False) -> PrepResult:
        try:
            return PrepResult(text=self.prepare(text, allow_unassigned))
        except StringPrepError as error:
            return PrepResult(error=error)

    def _prepare(self, text: Input, allow_unassigned: bool) -> str:
        codepoints = decode(text)
        codepoints = map_codepoints(self._profile, codepoints)
        codepoints = self._normalizer.normalize(codepoints)
        self.check_prohibited(codepoints, text)
        if not allow_unassigned:
            self.check_unassigned(codepoints, text)
        if self._profile.bidi:
            self.check_bidi(codepoints, text)
        return to_text(codepoints)

    def check_prohibited(self,
                         codepoints: Sequence[int],
                         text: Input | None = None) -> None:

        prohibited = self._profile.prohibited
        for index, codepoint in enumerate(codepoints):
            if prohibited.contains(codepoint):
                raise ProhibitedCharacterError(codepoint, index, text)

    def check_unassigned(self,
                         codepoints: Sequence[int],
                         text: Input | None = None) -> None:

        for index, codepoint in enumerate(codepoints):
            if not self._database.is_assigned(codepoint):
                raise UnassignedCodepointError(codepoint, index, text)

    def check_bidi(self,
                   codepoints: Sequence[int],
                   text: Input | None = None) -> None:

        # the empty string cannot violate the RandALCat constraints
        if not codepoints:
            return

        categories = [self._database.bidi_category(cp) for cp in codepoints]
        if not any(category.is_randalcat for category in categories):
            return

        if any(category.is_lcat for category in categories):
            raise BidiViolationError(BidiViolation.MIXED_DIRECTION, text)

        if not (categories[0].is_randalcat and categories[-1].is_randalcat):
            raise BidiViolationError(BidiViolation.BOUNDARY, text)

    def __repr__(self) -> str:
        return f"StringPrep({self.name})"
