# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Redis-backed lock store.
"""

from typing import Optional

from remotelock.constants import LOCK_KEY_PREFIX
from remotelock.core.store.provider import LockStore

# Lua script for atomic release - only delete if the owner matches
COMPARE_AND_DELETE_SCRIPT = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("del", KEYS[1])
else
    return 0
end
"""


class RedisLockStore(LockStore):
    """Lock store on top of a Redis server.

    Leases are plain string keys. Acquisition uses ``SET key owner NX EX ttl``
    and release runs a Lua script so that the owner check and the delete
    happen in one step on the server.

    Example:
        >>> import redis
        >>> client = redis.Redis(host='localhost', port=6379, db=0)
        >>> store = RedisLockStore(client)
        >>> store.try_set("reports", "owner-a", 30)
        True

    Args:
        redis_client: A ``redis.Redis`` client instance.
        prefix: Prefix prepended to every lock name (default: "remotelock:").
    """

    def __init__(self, redis_client, prefix: str = LOCK_KEY_PREFIX):
        self.redis_client = redis_client
        self.prefix = prefix
        self._compare_and_delete_script = None

    def _key(self, name: str) -> str:
        return f"{self.prefix}{name}"

    def _get_compare_and_delete_script(self):
        """Get or register the compare-and-delete Lua script."""
        if self._compare_and_delete_script is None:
            self._compare_and_delete_script = self.redis_client.register_script(COMPARE_AND_DELETE_SCRIPT)
        return self._compare_and_delete_script

    def try_set(self, name: str, owner: str, ttl: int) -> bool:
        # SET key value NX EX seconds
        result = self.redis_client.set(self._key(name), owner, nx=True, ex=ttl)
        return bool(result)

    def compare_and_delete(self, name: str, owner: str) -> bool:
        script = self._get_compare_and_delete_script()
        return bool(script(keys=[self._key(name)], args=[owner]))

    def get_owner(self, name: str) -> Optional[str]:
        value = self.redis_client.get(self._key(name))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def delete(self, name: str) -> bool:
        return bool(self.redis_client.delete(self._key(name)))

    def ttl(self, name: str) -> Optional[float]:
        """Seconds left on the lease for ``name``, or None when there is none."""
        ttl_ms = self.redis_client.pttl(self._key(name))
        if ttl_ms is None or ttl_ms < 0:
            return None
        return ttl_ms / 1000.0
