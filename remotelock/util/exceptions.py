# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

from typing import Optional


class RemoteLockError(Exception):
    """Base class of every error raised by remotelock."""


class LockedException(RemoteLockError):
    def __init__(self, name: Optional[str] = None):
        if name is None:
            message = "The lock is held by another owner."
        else:
            message = f"Lock '{name}' is held by another owner."
        super().__init__(message)
        self.name = name


class LockTimeoutException(RemoteLockError):
    """Raised when Lock.block() gives up waiting for the lock."""

    def __init__(self, name: Optional[str] = None, seconds: Optional[float] = None):
        message = "Timed out waiting for the lock."
        if name is not None:
            message = f"Timed out after {seconds}s waiting for lock '{name}'."
        super().__init__(message)
        self.name = name
        self.seconds = seconds


class LockCancelledException(RemoteLockError):
    def __init__(self, name: Optional[str] = None):
        if name is None:
            message = "Waiting for the lock was cancelled."
        else:
            message = f"Waiting for lock '{name}' was cancelled."
        super().__init__(message)
        self.name = name


class InvalidLockNameError(RemoteLockError):
    def __init__(self, name=None):
        super().__init__(f"Lock name must be a non-empty string, got {name!r}.")


class InvalidLockDurationError(RemoteLockError):
    def __init__(self, seconds=None):
        super().__init__(f"Lock duration must be a positive number of seconds, got {seconds!r}.")


class UnknownStoreTypeError(RemoteLockError):
    def __init__(self, store_type=None):
        super().__init__(f"Unknown lock store type {store_type!r}. Expected 'memory' or 'redis'.")
