# This file is part of strprep.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from typing import Optional

import logging
import threading

from strprep.const import ProfileId
from strprep.engine import StringPrep
from strprep.profiles import get_profile
from strprep.unicode import Normalizer
from strprep.unicode import UnicodeDatabase

log = logging.getLogger("strprep.registry")


class ProfileRegistry:
    """
    Hands out one :class:`StringPrep` engine per profile. Engines are built
    on first use; concurrent first calls for the same profile all receive
    the same instance.

    Create one registry at startup and pass it to whatever needs to
    prepare strings.
    """

    def __init__(self,
                 database: Optional[UnicodeDatabase] = None,
                 normalizer: Optional[Normalizer] = None,
                 cache_size: Optional[int] = None) -> None:

        self._database = database
        self._normalizer = normalizer
        self._cache_size = cache_size
        self._engines: dict[ProfileId, StringPrep] = {}
        self._lock = threading.Lock()

    def get_instance(self, profile_id: ProfileId | str) -> StringPrep:
        profile_id = ProfileId.from_name(profile_id)

        engine = self._engines.get(profile_id)
        if engine is not None:
            return engine

        with self._lock:
            engine = self._engines.get(profile_id)
            if engine is None:
                engine = StringPrep(get_profile(profile_id),
                                    database=self._database,
                                    normalizer=self._normalizer,
                                    cache_size=self._cache_size)
                self._engines[profile_id] = engine
                log.info("Registered %s", profile_id.value)
        return engine

    def preload(self) -> None:
        for profile_id in ProfileId:
            self.get_instance(profile_id)

    def __contains__(self, profile_id: ProfileId | str) -> bool:
        return ProfileId.from_name(profile_id) in self._engines

    def __len__(self) -> int:
        return len(self._engines)
