# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from typing import NamedTuple

from strprep.errors import StringPrepError


class PrepResult(NamedTuple):
    text: str | None = None
    error: StringPrepError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        if self.text is None:
            raise ValueError("PrepResult holds neither text nor error")
        return self.text
