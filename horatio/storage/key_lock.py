"""
Key Lock Module.

Settings commands for the same guild or user have to run one after the
other, while commands for different guilds and users should not wait on
each other at all. This module hands out one asyncio lock per key.

Locks are created when the first task asks for a key and thrown away as
soon as no task is holding or waiting on them, so the lock table only
ever contains keys that are currently busy. Everything in here runs on
the event loop thread and only yields inside the lock itself, so the
bookkeeping dictionaries do not need a lock of their own.
"""

from asyncio import Lock
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Hashable


# pylint: disable=too-few-public-methods
class KeyLock:
    """
    Per-key lock manager.

    Tasks asking for the same key are let through one at a time in the
    order they asked (asyncio locks are fair).
    """

    __slots__ = ["locks", "users"]

    def __init__(self) -> None:
        """Initializer for the KeyLock class."""
        self.locks: Dict[Hashable, Lock] = {}
        self.users: Dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """
        Hold the lock for a key for the duration of the context.

        :param key: Key to lock
        """
        key_lock = self.locks.setdefault(key, Lock())
        self.users[key] = self.users.get(key, 0) + 1
        try:
            async with key_lock:
                yield
        finally:
            # Waiters count as users too, so the lock is only dropped
            # once nobody can still be queued on it.
            self.users[key] -= 1
            if not self.users[key]:
                del self.users[key]
                del self.locks[key]
