# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
The stringprep profiles. A profile is plain data: which mapping to apply,
which code points are prohibited and whether the bidi rules are checked.
All profiles share the pipeline in :mod:`strprep.engine`.
"""

from __future__ import annotations

from typing import Optional

from dataclasses import dataclass
from dataclasses import field

from strprep import tables
from strprep.const import MappingKind
from strprep.const import ProfileId
from strprep.mapping import MappingTable
from strprep.ranges import RangeTable


@dataclass(frozen=True)
class Profile:
    id: ProfileId
    mapping: MappingKind
    prohibited: RangeTable
    bidi: bool
    deletions: RangeTable = field(default_factory=RangeTable)
    spaces: Optional[RangeTable] = None
    folding: Optional[MappingTable] = None

    def __post_init__(self) -> None:
        if self.mapping.folds_case and self.folding is None:
            raise ValueError(f"{self.name}: case folding needs a folding table")

        if self.mapping == MappingKind.MAP_SPACES and self.spaces is None:
            raise ValueError(f"{self.name}: space mapping needs a space table")

    @property
    def name(self) -> str:
        return self.id.value


MAP_TO_NOTHING = RangeTable(tables.B1_MAP_TO_NOTHING)

NON_ASCII_SPACE = RangeTable(tables.C12_NON_ASCII_SPACE)

CASE_FOLDING = MappingTable(tables.B2_CASE_FOLDING)


SASLPREP = Profile(
    id=ProfileId.SASLPREP,
    mapping=MappingKind.MAP_SPACES,
    prohibited=RangeTable(tables.SASLPREP_PROHIBITED),
    bidi=True,
    deletions=MAP_TO_NOTHING,
    spaces=NON_ASCII_SPACE,
)

NAMEPREP = Profile(
    id=ProfileId.NAMEPREP,
    mapping=MappingKind.CASE_FOLD,
    prohibited=RangeTable(tables.NAMEPREP_PROHIBITED),
    bidi=True,
    deletions=MAP_TO_NOTHING,
    folding=CASE_FOLDING,
)

NODEPREP = Profile(
    id=ProfileId.NODEPREP,
    mapping=MappingKind.CASE_FOLD,
    prohibited=RangeTable(tables.NODEPREP_PROHIBITED),
    bidi=True,
    deletions=MAP_TO_NOTHING,
    folding=CASE_FOLDING,
)

# Resourceparts are case sensitive
RESOURCEPREP = Profile(
    id=ProfileId.RESOURCEPREP,
    mapping=MappingKind.MAP_TO_NOTHING,
    prohibited=RangeTable(tables.RESOURCEPREP_PROHIBITED),
    bidi=True,
    deletions=MAP_TO_NOTHING,
)

ISCSIPREP = Profile(
    id=ProfileId.ISCSIPREP,
    mapping=MappingKind.CASE_FOLD,
    prohibited=RangeTable(tables.ISCSIPREP_PROHIBITED),
    bidi=True,
    deletions=MAP_TO_NOTHING,
    folding=CASE_FOLDING,
)

TRACEPREP = Profile(
    id=ProfileId.TRACEPREP,
    mapping=MappingKind.IDENTITY,
    prohibited=RangeTable(tables.TRACEPREP_PROHIBITED),
    bidi=False,
)

PROFILES: dict[ProfileId, Profile] = {
    profile.id: profile for profile in (
        SASLPREP,
        NAMEPREP,
        NODEPREP,
        RESOURCEPREP,
        ISCSIPREP,
        TRACEPREP,
    )
}


def get_profile(profile_id: ProfileId | str) -> Profile:
    return PROFILES[ProfileId.from_name(profile_id)]
