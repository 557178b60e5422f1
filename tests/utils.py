# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import threading
from typing import List, Optional

from remotelock.core.store.provider import LockStore
from remotelock.util.clock import Clock


class FakeClock(Clock):
    """Deterministic clock: sleeping advances time instead of blocking."""

    def __init__(self, start: float = 1000.0):
        self._now = start
        self.sleeps: List[float] = []
        self.on_sleep = None

    def monotonic(self) -> float:
        return self._now

    def time(self) -> float:
        return self._now

    def advance(self, seconds: float):
        self._now += seconds

    def sleep(self, seconds: float, cancel_event: Optional[threading.Event] = None) -> bool:
        self.sleeps.append(seconds)
        self._now += seconds
        if self.on_sleep is not None:
            self.on_sleep(seconds)
        return bool(cancel_event is not None and cancel_event.is_set())


class ScriptedStore(LockStore):
    """Store whose try_set answers come from a list, for polling tests."""

    def __init__(self, answers, default: bool = False):
        self.answers = list(answers)
        self.default = default
        self.try_set_calls = 0
        self.owner = None

    def try_set(self, name, owner, ttl):
        self.try_set_calls += 1
        granted = self.answers.pop(0) if self.answers else self.default
        if granted:
            self.owner = owner
        return granted

    def compare_and_delete(self, name, owner):
        if self.owner == owner:
            self.owner = None
            return True
        return False

    def get_owner(self, name):
        return self.owner

    def delete(self, name):
        existed = self.owner is not None
        self.owner = None
        return existed
