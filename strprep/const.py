# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from enum import Enum


class ProfileId(Enum):
    # RFC 4013, user names and passwords
    SASLPREP = "SASLPrep"
    # RFC 3491, internationalized domain name labels
    NAMEPREP = "NamePrep"
    # RFC 6122 Appendix A, XMPP localparts
    NODEPREP = "NodePrep"
    # RFC 6122 Appendix B, XMPP resourceparts
    RESOURCEPREP = "ResourcePrep"
    # RFC 3722, iSCSI names
    ISCSIPREP = "ISCSIPrep"
    # RFC 4505, trace information of the ANONYMOUS SASL mechanism
    TRACEPREP = "TracePrep"

    @classmethod
    def from_name(cls, name: str | ProfileId) -> ProfileId:
        if isinstance(name, ProfileId):
            return name

        if not isinstance(name, str):
            raise ValueError(f"Unknown stringprep profile: {name!r}")

        for member in cls:
            if name.lower() in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown stringprep profile: {name}")


class MappingKind(Enum):
    # no mapping at all
    IDENTITY = "identity"
    # B.1
    MAP_TO_NOTHING = "map-to-nothing"
    # B.1, C.1.2 to SPACE
    MAP_SPACES = "map-spaces"
    # B.1, B.2
    CASE_FOLD = "case-fold"

    @property
    def is_identity(self) -> bool:
        return self == MappingKind.IDENTITY

    @property
    def folds_case(self) -> bool:
        return self == MappingKind.CASE_FOLD


class BidiCategory(Enum):
    L = "L"
    R = "R"
    AL = "AL"
    OTHER = "Other"

    @property
    def is_randalcat(self) -> bool:
        return self in (BidiCategory.R, BidiCategory.AL)

    @property
    def is_lcat(self) -> bool:
        return self == BidiCategory.L


class BidiViolation(Enum):
    MIXED_DIRECTION = "mixed-direction"
    BOUNDARY = "boundary"

    @property
    def description(self) -> str:
        if self == BidiViolation.MIXED_DIRECTION:
            return "L and R/AL characters must not occur in the same string"
        return "R/AL string must start and end with R/AL character"
