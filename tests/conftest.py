# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import pytest

from remotelock.core.store import MemoryLockStore
from tests.utils import FakeClock


@pytest.fixture
def clock():
    """Create a FakeClock."""
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """Create a MemoryLockStore driven by the fake clock."""
    return MemoryLockStore(clock=clock)


@pytest.fixture
def redis_client():
    """Create a Redis client, skip if Redis is not available."""
    try:
        import redis
        client = redis.Redis(host='localhost', port=6379, db=15)
        client.ping()
    except Exception:
        pytest.skip("Redis is not available")
    yield client
    for key in client.scan_iter("remotelock:test_*"):
        client.delete(key)
