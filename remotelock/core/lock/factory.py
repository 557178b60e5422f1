# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Factory functions building locks and stores from configuration.
"""

from typing import Optional

from remotelock import constants
from remotelock.core.lock.base import Lock
from remotelock.core.store.memory import MemoryLockStore
from remotelock.core.store.provider import LockStore
from remotelock.core.store.redis_store import RedisLockStore
from remotelock.util.exceptions import UnknownStoreTypeError


def create_store(store_type: Optional[str] = None, redis_client=None) -> LockStore:
    """Create the lock store named by ``store_type``.

    Args:
        store_type: "memory" or "redis". Uses config default if None.
        redis_client: Redis client instance. Built from the REDIS_LOCK_* settings
            when omitted.

    Returns:
        A MemoryLockStore or a RedisLockStore.

    Raises:
        UnknownStoreTypeError: If ``store_type`` is not supported.
    """
    if store_type is None:
        store_type = getattr(constants, "LOCK_STORE_TYPE", "redis")

    if store_type == "memory":
        return MemoryLockStore()
    if store_type == "redis":
        if redis_client is None:
            import redis
            redis_client = redis.Redis(
                host=getattr(constants, "REDIS_LOCK_HOST", "localhost"),
                port=getattr(constants, "REDIS_LOCK_PORT", 6379),
                db=getattr(constants, "REDIS_LOCK_DB", 0),
                password=getattr(constants, "REDIS_LOCK_PASSWORD", None),
            )
        return RedisLockStore(redis_client, getattr(constants, "LOCK_KEY_PREFIX", "remotelock:"))
    raise UnknownStoreTypeError(store_type)


def create_lock(
    name: str,
    seconds: Optional[int] = None,
    owner: Optional[str] = None,
    store_type: Optional[str] = None,
    redis_client=None,
    store: Optional[LockStore] = None,
    **kwargs,
) -> Lock:
    """Create a lock on the configured store.

    Args:
        name: The lock name.
        seconds: Lease duration. Uses config default if None.
        owner: Owner token. Generated when omitted.
        store_type: "memory" or "redis", ignored when ``store`` is given.
        redis_client: Redis client instance for the "redis" store.
        store: An existing store to use as is.
        **kwargs: Passed on to Lock (clock, logger, poll_interval, ...).

    Returns:
        A Lock instance.
    """
    if store is None:
        store = create_store(store_type, redis_client)
    if seconds is None:
        seconds = getattr(constants, "DEFAULT_LOCK_SECONDS", 10)
    return Lock(store, name, seconds, owner, **kwargs)


def restore_lock(name: str, owner: str, store: Optional[LockStore] = None, **kwargs) -> Lock:
    """Rebuild a lock from the owner token of an earlier acquisition.

    The returned lock can release a lease acquired in another request or
    process that shared its ``name`` and ``owner``.
    """
    return create_lock(name, owner=owner, store=store, **kwargs)
