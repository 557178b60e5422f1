# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import secrets
import string

from remotelock.constants import OWNER_TOKEN_LENGTH

_ALPHABET = string.ascii_letters + string.digits


def generate_owner(length: int = OWNER_TOKEN_LENGTH) -> str:
    """Returns a random alphanumeric owner token."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))
