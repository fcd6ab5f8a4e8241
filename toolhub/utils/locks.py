"""
Asyncio reader/writer lock.
"""

import asyncio
from collections import deque
from contextlib import asynccontextmanager


class AsyncRWLock:
    """
    Reader/writer lock for coroutines sharing one event loop.

    Any number of readers may hold the lock at once; a writer holds it alone.
    Once a writer is waiting, new readers queue behind it.

    Ownership is handed to a waiter before its future resolves, and releasing
    never awaits, so a cancelled task cannot leave the lock held.
    """

    def __init__(self):
        self._readers = 0
        self._writer = False
        self._read_waiters = deque()
        self._write_waiters = deque()

    @property
    def readers(self) -> int:
        """Number of coroutines currently holding the read side."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer

    def _wake(self) -> None:
        if self._writer:
            return

        while self._write_waiters:
            if self._readers:
                return
            fut = self._write_waiters.popleft()
            if not fut.done():
                self._writer = True
                fut.set_result(True)
                return

        while self._read_waiters:
            fut = self._read_waiters.popleft()
            if not fut.done():
                self._readers += 1
                fut.set_result(True)

    async def _wait(self, waiters: deque, release) -> None:
        fut = asyncio.get_running_loop().create_future()
        waiters.append(fut)
        try:
            await fut
        except asyncio.CancelledError:
            if fut.done() and not fut.cancelled():
                # Granted just before the cancellation landed
                release()
            else:
                try:
                    waiters.remove(fut)
                except ValueError:
                    pass
                self._wake()
            raise

    async def acquire_read(self) -> None:
        if not self._writer and not self._write_waiters:
            self._readers += 1
            return
        await self._wait(self._read_waiters, self.release_read)

    def release_read(self) -> None:
        self._readers -= 1
        if self._readers == 0:
            self._wake()

    async def acquire_write(self) -> None:
        if not self._writer and not self._readers and not self._write_waiters:
            self._writer = True
            return
        await self._wait(self._write_waiters, self.release_write)

    def release_write(self) -> None:
        self._writer = False
        self._wake()

    @asynccontextmanager
    async def read(self):
        """Hold the shared side for the duration of the block."""
        await self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @asynccontextmanager
    async def write(self):
        """Hold the exclusive side for the duration of the block."""
        await self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
