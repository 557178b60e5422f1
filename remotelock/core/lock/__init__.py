# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Lock module for remotelock.

Provides the Lock protocol layer and the factories building locks on a
memory or Redis store.
"""

from remotelock.core.lock.base import Lock
from remotelock.core.lock.factory import create_lock, create_store, restore_lock
from remotelock.core.lock.result import BlockResult, BlockStatus

__all__ = [
    "Lock",
    "BlockResult",
    "BlockStatus",
    "create_lock",
    "create_store",
    "restore_lock",
]
