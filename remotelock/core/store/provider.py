# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Abstract base class for lock stores.
"""

from abc import ABC, abstractmethod
from typing import Optional


class LockStore(ABC):
    """Shared store that holds lock leases.

    A lease is a ``name -> owner`` record that the store expires on its own
    after the requested number of seconds. Every method must be a single
    atomic operation from the point of view of other clients of the store.
    """

    @abstractmethod
    def try_set(self, name: str, owner: str, ttl: int) -> bool:
        """Insert a lease if no live lease exists for ``name``.

        Args:
            name: The lock name.
            owner: The owner token to record.
            ttl: Lease duration in seconds.

        Returns:
            True if the lease was written, False if another live lease exists.
        """

    @abstractmethod
    def compare_and_delete(self, name: str, owner: str) -> bool:
        """Delete the lease for ``name`` only if it is recorded for ``owner``.

        Returns:
            True if a lease was deleted.
        """

    @abstractmethod
    def get_owner(self, name: str) -> Optional[str]:
        """Return the owner of the live lease for ``name``, or None."""

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Delete the lease for ``name`` whoever owns it.

        Returns:
            True if a lease was deleted.
        """
