# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Tests for the lock and store factories.
"""

from unittest.mock import MagicMock, patch

import pytest

import remotelock
from remotelock import Lock, MemoryLockStore, RedisLockStore, create_lock, create_store, restore_lock
from remotelock.util.exceptions import UnknownStoreTypeError


class TestCreateStore:
    """Tests for create_store."""

    def test_create_memory_store(self):
        assert isinstance(create_store("memory"), MemoryLockStore)

    def test_create_redis_store(self):
        client = MagicMock()
        store = create_store("redis", redis_client=client)

        assert isinstance(store, RedisLockStore)
        assert store.redis_client is client
        assert store.prefix == "remotelock:"

    def test_create_redis_store_from_config(self):
        with patch("redis.Redis") as redis_cls, \
                patch("remotelock.constants.REDIS_LOCK_HOST", "cache.internal"), \
                patch("remotelock.constants.REDIS_LOCK_PORT", 6380):
            store = create_store("redis")

        redis_cls.assert_called_once_with(host="cache.internal", port=6380, db=0, password=None)
        assert store.redis_client is redis_cls.return_value

    def test_default_store_type(self):
        with patch("remotelock.constants.LOCK_STORE_TYPE", "memory"):
            assert isinstance(create_store(), MemoryLockStore)

    def test_unknown_store_type(self):
        with pytest.raises(UnknownStoreTypeError):
            create_store("etcd")


class TestCreateLock:
    """Tests for create_lock and restore_lock."""

    def test_create_lock_on_store(self):
        store = MemoryLockStore()
        lock = create_lock("reports", 30, store=store)

        assert isinstance(lock, Lock)
        assert lock.store is store
        assert lock.seconds == 30

    def test_create_lock_default_seconds(self):
        with patch("remotelock.constants.DEFAULT_LOCK_SECONDS", 42):
            lock = create_lock("reports", store_type="memory")
        assert lock.seconds == 42

    def test_create_lock_passes_options(self):
        lock = create_lock("reports", 5, owner="A", store_type="memory", poll_interval=0.1)

        assert lock.owner == "A"
        assert lock.poll_interval == 0.1

    def test_restore_lock_releases_across_instances(self):
        store = MemoryLockStore()
        original = create_lock("reports", 30, store=store)
        original.acquire()

        restored = restore_lock("reports", original.owner, store=store)
        assert restored.is_owned_by_current_process()
        assert restored.release()
        assert store.get_owner("reports") is None

    def test_package_exports(self):
        assert remotelock.Lock is Lock
        assert remotelock.__version__
