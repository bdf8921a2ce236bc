import asyncio
from contextlib import asynccontextmanager
import errno
from typing import Awaitable, Callable, List, TypeVar

from folder_hash.core.log import queue_log

T = TypeVar("T")

EXHAUSTION_ERRNOS = frozenset({errno.EMFILE, errno.ENFILE})

DEFAULT_MAX_OPEN_FILES = 256


def is_descriptor_exhaustion(exc: BaseException) -> bool:
    return isinstance(exc, OSError) and exc.errno in EXHAUSTION_ERRNOS


class RetryQueue:
    """
    Backpressure for open file descriptors.

    Two mechanisms work together:
    - a semaphore caps how many directory listings / file reads hold a
      descriptor at the same time
    - operations that still hit EMFILE/ENFILE are parked and replayed
      from scratch after a single coalesced drain, which runs once the
      current batch of in-flight work has yielded to the event loop

    One instance belongs to one traversal.
    """

    def __init__(self, max_open_files: int = DEFAULT_MAX_OPEN_FILES):
        if max_open_files < 1:
            raise ValueError("max_open_files must be at least 1")
        self.max_open_files = max_open_files
        self._semaphore = asyncio.Semaphore(max_open_files)
        self._parked: List[asyncio.Future] = []
        self._drain_scheduled = False
        self.retries = 0

    @asynccontextmanager
    async def descriptor(self):
        async with self._semaphore:
            yield

    async def run(self, operation: Callable[[], Awaitable[T]], label: str = "") -> T:
        """
        Await operation(), replaying it while it fails with descriptor
        exhaustion. Any other error propagates unchanged.
        """
        while True:
            try:
                return await operation()
            except OSError as exc:
                if not is_descriptor_exhaustion(exc):
                    raise
                self.retries += 1
                queue_log.debug(
                    "queued %s because of %s", label, errno.errorcode.get(exc.errno, exc.errno)
                )
                await self._wait_for_drain()
                queue_log.debug("will process queued %s", label)

    async def _wait_for_drain(self) -> None:
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()
        self._parked.append(waiter)

        if not self._drain_scheduled:
            self._drain_scheduled = True
            loop.call_soon(self._drain)

        await waiter

    def _drain(self) -> None:
        self._drain_scheduled = False
        parked, self._parked = self._parked, []
        queue_log.debug("draining %d queued operations", len(parked))
        for waiter in parked:
            if not waiter.done():
                waiter.set_result(None)
