"""Set of subjects that triggered the bot since the last sweep.

Entries are never evicted one by one; the Sweeper clears the whole set at a
fixed interval. Inserts do not de-duplicate, so the size reported by clear()
is the raw number of triggers in the window, not the number of distinct users.

Every operation takes the lock for its own span only. Callers must not expect
contains() followed by insert() to be atomic.
"""
from __future__ import annotations
import asyncio
from typing import List


class RecencySet:
    def __init__(self):
        self._subjects: List[str] = []
        self._lock = asyncio.Lock()

    async def contains(self, subject_id: str) -> bool:
        async with self._lock:
            return subject_id in self._subjects

    async def insert(self, subject_id: str) -> None:
        async with self._lock:
            self._subjects.append(subject_id)

    async def clear(self) -> int:
        """Remove every entry. Returns how many entries were removed."""
        async with self._lock:
            count = len(self._subjects)
            self._subjects.clear()
            return count

    async def size(self) -> int:
        async with self._lock:
            return len(self._subjects)


__all__ = ["RecencySet"]
