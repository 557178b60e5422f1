# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import os


def _env(name, default, cast=str):
    value = os.environ.get(f"REMOTELOCK_{name}")
    if value is None or value == "":
        return default
    return cast(value)


# Lease length written to the store on acquire, in seconds.
DEFAULT_LOCK_SECONDS = _env("DEFAULT_LOCK_SECONDS", 10, int)

# Sleep between two acquire attempts of Lock.block(), in seconds.
POLL_INTERVAL = _env("POLL_INTERVAL", 0.25, float)

# Length of generated owner tokens.
OWNER_TOKEN_LENGTH = _env("OWNER_TOKEN_LENGTH", 16, int)

# "memory" or "redis"
LOCK_STORE_TYPE = _env("STORE_TYPE", "redis")

LOCK_KEY_PREFIX = _env("KEY_PREFIX", "remotelock:")

REDIS_LOCK_HOST = _env("REDIS_HOST", "localhost")
REDIS_LOCK_PORT = _env("REDIS_PORT", 6379, int)
REDIS_LOCK_DB = _env("REDIS_DB", 0, int)
REDIS_LOCK_PASSWORD = _env("REDIS_PASSWORD", None)
