# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""Named, time-bounded locks backed by a shared store."""

from remotelock.client.log import logger
from remotelock.core.lock import (
    BlockResult,
    BlockStatus,
    Lock,
    create_lock,
    create_store,
    restore_lock,
)
from remotelock.core.store import LockStore, MemoryLockStore, RedisLockStore
from remotelock.util.clock import Clock, SystemClock
from remotelock.util.exceptions import (
    InvalidLockDurationError,
    InvalidLockNameError,
    LockCancelledException,
    LockedException,
    LockTimeoutException,
    RemoteLockError,
    UnknownStoreTypeError,
)

__version__ = "1.0.0"

__all__ = [
    "Lock",
    "BlockResult",
    "BlockStatus",
    "create_lock",
    "create_store",
    "restore_lock",
    "LockStore",
    "MemoryLockStore",
    "RedisLockStore",
    "Clock",
    "SystemClock",
    "RemoteLockError",
    "LockedException",
    "LockTimeoutException",
    "LockCancelledException",
    "InvalidLockNameError",
    "InvalidLockDurationError",
    "UnknownStoreTypeError",
    "logger",
]
