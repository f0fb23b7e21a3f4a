# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from typing import Any

import logging

from strprep.const import BidiViolation


def is_error(error: Any) -> bool:
    return isinstance(error, StringPrepError)


def format_codepoint(codepoint: int) -> str:
    return "U+{:04X}".format(codepoint)


class StringPrepError(ValueError):
    """
    Base class of every error raised while preparing a string. All of them
    are expected conditions: the caller rejects the input and carries on.
    """

    log_level = logging.DEBUG

    def __init__(self, text: str, input_: str | bytes | None = None) -> None:
        ValueError.__init__(self, text)
        self.text = text
        self.input = input_

    def __str__(self) -> str:
        return self.text

    def get_text(self) -> str:
        return self.text


class MalformedInputError(StringPrepError):
    def __init__(self,
                 index: int,
                 input_: str | bytes | None = None,
                 reason: str = "unpaired surrogate") -> None:

        StringPrepError.__init__(
            self, f"Malformed input at index {index}: {reason}", input_)
        self.index = index
        self.reason = reason


class ProhibitedCharacterError(StringPrepError):
    def __init__(self,
                 codepoint: int,
                 index: int,
                 input_: str | bytes | None = None) -> None:

        StringPrepError.__init__(
            self,
            f"Input contains prohibited codepoint: "
            f"{format_codepoint(codepoint)} at index {index}",
            input_)
        self.codepoint = codepoint
        self.index = index


class UnassignedCodepointError(StringPrepError):
    def __init__(self,
                 codepoint: int,
                 index: int,
                 input_: str | bytes | None = None) -> None:

        StringPrepError.__init__(
            self,
            f"Input contains unassigned codepoint: "
            f"{format_codepoint(codepoint)} at index {index}",
            input_)
        self.codepoint = codepoint
        self.index = index


class BidiViolationError(StringPrepError):
    def __init__(self,
                 reason: BidiViolation,
                 input_: str | bytes | None = None) -> None:

        StringPrepError.__init__(self, reason.description, input_)
        self.reason = reason
