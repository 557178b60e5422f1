# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Named, time-bounded lock on top of a shared lock store.
"""

import threading
from contextlib import contextmanager
from typing import Any, Callable, Optional

from remotelock.client.log import logger as default_logger
from remotelock.constants import DEFAULT_LOCK_SECONDS, POLL_INTERVAL
from remotelock.core.lock.result import BlockResult, BlockStatus
from remotelock.core.store.provider import LockStore
from remotelock.util.clock import Clock, SYSTEM_CLOCK
from remotelock.util.exceptions import (
    InvalidLockDurationError,
    InvalidLockNameError,
    LockCancelledException,
    LockedException,
    LockTimeoutException,
)
from remotelock.util.token import generate_owner


class Lock:
    """Distributed lock identified by a name and proven by an owner token.

    The lock keeps no held/not-held flag of its own: every ownership question
    is answered by the store, so a lease that expired in the meantime is never
    mistaken for a held one.

    Example:
        >>> from remotelock.core.store import MemoryLockStore
        >>> store = MemoryLockStore()
        >>> lock = Lock(store, "nightly-report", 30)
        >>> lock.get(lambda: "done")
        'done'
        >>> with lock:
        ...     # Critical section
        ...     pass

    Args:
        store: The lock store holding the leases.
        name: The lock name shared by every contender.
        seconds: Lease duration written on acquire (default: 10).
        owner: Owner token. A random one is generated when omitted.
        clock: Time source for deadlines, pacing and sleeping.
        logger: Logger receiving the diagnostic messages.
        token_generator: Callable returning a fresh owner token.
        poll_interval: Seconds slept between two attempts of block() (default: 0.25).
    """

    def __init__(
        self,
        store: LockStore,
        name: str,
        seconds: int = DEFAULT_LOCK_SECONDS,
        owner: Optional[str] = None,
        clock: Optional[Clock] = None,
        logger=None,
        token_generator: Optional[Callable[[], str]] = None,
        poll_interval: float = POLL_INTERVAL,
    ):
        if not isinstance(name, str) or not name:
            raise InvalidLockNameError(name)
        if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds <= 0:
            raise InvalidLockDurationError(seconds)
        if owner is None:
            owner = (token_generator or generate_owner)()
        self.store = store
        self.name = name
        self.seconds = seconds
        self._owner = owner
        self.clock = clock or SYSTEM_CLOCK
        self.logger = logger or default_logger
        self.poll_interval = poll_interval

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self.name!r}, owner={self._owner!r}, seconds={self.seconds})"

    @property
    def owner(self) -> str:
        """The owner token of this lock instance.

        Hand it to another process together with the name to let that process
        release the lock, see ``remotelock.restore_lock``.
        """
        return self._owner

    def acquire(self) -> bool:
        """Attempt to acquire the lock once, without waiting.

        Returns:
            True if this call created the lease, False if a live lease exists.
        """
        acquired = self.store.try_set(self.name, self._owner, self.seconds)
        if acquired:
            self.logger.debug("Lock '%s' acquired by %s for %ss", self.name, self._owner, self.seconds)
        return acquired

    def release(self) -> bool:
        """Release the lock if this instance owns it.

        Safe to call when the lock is not held, has expired or was taken over
        by another owner; nothing is deleted in those cases.

        Returns:
            True if a lease was deleted.
        """
        if not self.is_owned_by_current_process():
            return False
        released = self.store.compare_and_delete(self.name, self._owner)
        if released:
            self.logger.debug("Lock '%s' released by %s", self.name, self._owner)
        return released

    def force_release(self) -> None:
        """Delete the lease whoever owns it."""
        if self.store.delete(self.name):
            self.logger.warning("Lock '%s' force released by %s", self.name, self._owner)

    def is_owned_by_current_process(self) -> bool:
        """Whether the store currently records this instance as the owner."""
        return self.store.get_owner(self.name) == self._owner

    def get(self, callback: Optional[Callable[[], Any]] = None, on_failure: Optional[Callable[[], Any]] = None):
        """Acquire the lock once and optionally run a callback while holding it.

        Args:
            callback: Run while the lock is held. The lock is released after it
                returns or raises.
            on_failure: Run instead when the lock could not be acquired.

        Returns:
            The callback's result, the on_failure result, or the acquisition
            result when the matching callable is absent. Without a callback a
            successful call leaves the lock held.
        """
        acquired = self.acquire()
        if acquired and callback is not None:
            try:
                return callback()
            finally:
                self.release()
        if not acquired and on_failure is not None:
            return on_failure()
        return acquired

    def try_block(self, seconds: Optional[float], cancel_event: Optional[threading.Event] = None) -> BlockResult:
        """Poll until the lock is acquired, the deadline passes or the wait is cancelled.

        At least one attempt is made, so ``seconds=0`` still acquires a free lock.

        Args:
            seconds: Maximum time to wait. None waits indefinitely.
            cancel_event: Ends the wait at the next poll boundary once set.

        Returns:
            BlockResult describing how the wait ended.
        """
        start = self.clock.monotonic()
        attempts = 0
        while True:
            attempts += 1
            if self.acquire():
                return BlockResult(BlockStatus.HELD, attempts, self.clock.monotonic() - start)

            sleep_ms = int(self.poll_interval * 1000)
            self.logger.info("Lock '%s' not acquired, sleep %dms", self.name, sleep_ms)
            interrupted = self.clock.sleep(self.poll_interval, cancel_event)

            waited = self.clock.monotonic() - start
            if interrupted or (cancel_event is not None and cancel_event.is_set()):
                return BlockResult(BlockStatus.CANCELLED, attempts, waited)
            if seconds is not None and waited >= seconds:
                return BlockResult(BlockStatus.TIMED_OUT, attempts, waited)

    def block(
        self,
        seconds: Optional[float],
        callback: Optional[Callable[[], Any]] = None,
        gap_ms: int = 0,
        cancel_event: Optional[threading.Event] = None,
    ):
        """Wait for the lock and optionally run a callback while holding it.

        Args:
            seconds: Maximum time to wait for the lock. None waits indefinitely.
            callback: Run while the lock is held. The lock is released after it
                returns or raises.
            gap_ms: Minimum milliseconds between the start of this call and its
                return when a callback ran. Fast callbacks are followed by a sleep.
            cancel_event: Ends the wait at the next poll boundary once set.

        Returns:
            The callback's result, or True when no callback is given, in which
            case the lock stays held.

        Raises:
            LockTimeoutException: If the lock was not acquired within ``seconds``.
            LockCancelledException: If ``cancel_event`` was set while waiting.
        """
        start_wall = self.clock.time()
        result = self.try_block(seconds, cancel_event)
        if result.timed_out:
            raise LockTimeoutException(self.name, seconds)
        if result.cancelled:
            raise LockCancelledException(self.name)

        if callback is None:
            return True

        try:
            res = callback()
            left = gap_ms / 1000.0 - (self.clock.time() - start_wall)
            if gap_ms > 0 and left > 0:
                self.logger.info("Lock '%s' callback finished early, sleep %dms", self.name, int(left * 1000))
                self.clock.sleep(left)
            return res
        finally:
            self.release()

    @contextmanager
    def blocking(self, seconds: Optional[float], cancel_event: Optional[threading.Event] = None):
        """Context manager form of block().

        Example:
            >>> with lock.blocking(5):
            ...     # Critical section
            ...     pass
        """
        self.block(seconds, cancel_event=cancel_event)
        try:
            yield self
        finally:
            self.release()

    def __enter__(self):
        """Acquire the lock once; raise LockedException if it is held elsewhere."""
        if not self.acquire():
            raise LockedException(self.name)
        return self

    def __exit__(self, *args, **kwargs):
        self.release()
