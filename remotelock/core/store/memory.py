# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import threading
from typing import Dict, Optional, Tuple

from remotelock.core.store.provider import LockStore
from remotelock.util.clock import Clock, SYSTEM_CLOCK


class MemoryLockStore(LockStore):
    """Lock store kept in the memory of the current process.

    Leases are shared by every Lock holding a reference to the same store
    instance, which makes it suitable for threads of one process and for tests.

    Example:

        >>> store = MemoryLockStore()
        >>> store.try_set("jobs", "owner-a", 10)
        True
        >>> store.try_set("jobs", "owner-b", 10)
        False
        >>> store.get_owner("jobs")
        'owner-a'

    Args:
        clock: Time source used to expire leases (default: the system clock).
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or SYSTEM_CLOCK
        self.dict: Dict[str, Tuple[str, float]] = {}
        self._mutex = threading.Lock()

    def _live(self, name: str) -> Optional[Tuple[str, float]]:
        entry = self.dict.get(name)
        if entry is None:
            return None
        if entry[1] <= self.clock.monotonic():
            del self.dict[name]
            return None
        return entry

    def try_set(self, name: str, owner: str, ttl: int) -> bool:
        with self._mutex:
            if self._live(name) is not None:
                return False
            self.dict[name] = (owner, self.clock.monotonic() + ttl)
            return True

    def compare_and_delete(self, name: str, owner: str) -> bool:
        with self._mutex:
            entry = self._live(name)
            if entry is None or entry[0] != owner:
                return False
            del self.dict[name]
            return True

    def get_owner(self, name: str) -> Optional[str]:
        with self._mutex:
            entry = self._live(name)
            return entry[0] if entry else None

    def delete(self, name: str) -> bool:
        with self._mutex:
            if self._live(name) is None:
                return False
            del self.dict[name]
            return True

    def ttl(self, name: str) -> Optional[float]:
        """Seconds left on the lease for ``name``, or None when there is none."""
        with self._mutex:
            entry = self._live(name)
            if entry is None:
                return None
            return entry[1] - self.clock.monotonic()

    def __contains__(self, name: str) -> bool:
        return self.get_owner(name) is not None

    def __len__(self):
        with self._mutex:
            now = self.clock.monotonic()
            return sum(1 for _, expires_at in self.dict.values() if expires_at > now)

    def clear(self, prefix=""):
        """Drops every lease, or only those whose name starts with ``prefix``."""
        with self._mutex:
            if prefix:
                self.dict = {k: v for k, v in self.dict.items() if not k.startswith(prefix)}
            else:
                self.dict = {}
