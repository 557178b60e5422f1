# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Time sources used by locks and the in-memory store.
"""

import threading
import time
from abc import ABC, abstractmethod
from typing import Optional


class Clock(ABC):
    """Time source injected into Lock and MemoryLockStore.

    ``monotonic()`` is used for deadlines and lease expiry, ``time()`` for
    wall-clock pacing between critical sections.
    """

    @abstractmethod
    def monotonic(self) -> float:
        pass

    @abstractmethod
    def time(self) -> float:
        pass

    @abstractmethod
    def sleep(self, seconds: float, cancel_event: Optional[threading.Event] = None) -> bool:
        """Suspend the calling thread.

        Args:
            seconds: How long to sleep.
            cancel_event: When given, the sleep ends early once the event is set.

        Returns:
            True if the sleep was interrupted by ``cancel_event``.
        """
        pass


class SystemClock(Clock):
    """Clock backed by the ``time`` module."""

    def monotonic(self) -> float:
        return time.monotonic()

    def time(self) -> float:
        return time.time()

    def sleep(self, seconds: float, cancel_event: Optional[threading.Event] = None) -> bool:
        if seconds <= 0:
            return bool(cancel_event is not None and cancel_event.is_set())
        if cancel_event is None:
            time.sleep(seconds)
            return False
        return cancel_event.wait(seconds)


SYSTEM_CLOCK = SystemClock()
