# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""Outcome of a blocking lock acquisition."""

from dataclasses import dataclass
from enum import Enum


class BlockStatus(str, Enum):
    """Terminal state of the polling loop."""
    HELD = "held"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class BlockResult:
    """Result of Lock.try_block().

    Attributes:
        status: How the polling loop ended.
        attempts: Number of acquire() calls made.
        waited: Monotonic seconds spent in the loop.
    """
    status: BlockStatus
    attempts: int
    waited: float

    @property
    def held(self) -> bool:
        return self.status is BlockStatus.HELD

    @property
    def timed_out(self) -> bool:
        return self.status is BlockStatus.TIMED_OUT

    @property
    def cancelled(self) -> bool:
        return self.status is BlockStatus.CANCELLED

    def __bool__(self):
        return self.held
