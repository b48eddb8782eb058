from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager


class ThreadLocks:
    """Per-thread asyncio locks, created on demand.

    A lock is dropped once nobody holds or waits on it, so the registry only
    ever contains threads with work in flight.
    """

    def __init__(self) -> None:
        self._locks: dict[int, asyncio.Lock] = {}
        self._users: dict[int, int] = {}

    def is_locked(self, thread_id: int) -> bool:
        lock = self._locks.get(int(thread_id))
        return bool(lock and lock.locked())

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, thread_id: int):
        key = int(thread_id)
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] <= 0:
                self._users.pop(key, None)
                self._locks.pop(key, None)
