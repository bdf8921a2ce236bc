import asyncio
import os
from typing import AsyncIterator, List

from folder_hash.core.models import Element, ElementKind

CHUNK_SIZE = 64 * 1024


def _entry_kind(entry: os.DirEntry) -> ElementKind:
    # Links are reported as links, never as their targets.
    if entry.is_symlink():
        return ElementKind.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return ElementKind.FOLDER
    if entry.is_file(follow_symlinks=False):
        return ElementKind.FILE
    return ElementKind.OTHER


def _list_directory(path: str) -> List[Element]:
    with os.scandir(path) as it:
        return [Element(entry.name, _entry_kind(entry)) for entry in it]


class LocalFileSystem:
    """
    Filesystem collaborator backed by the local disk.

    Every blocking call runs in a worker thread so that the event loop
    keeps many reads in flight. Any object exposing the same coroutine
    methods can be handed to the traverser instead (in-memory trees,
    fault injection in tests).
    """

    chunk_size = CHUNK_SIZE

    async def stat(self, path: str) -> os.stat_result:
        return await asyncio.to_thread(os.stat, path)

    async def lstat(self, path: str) -> os.stat_result:
        return await asyncio.to_thread(os.lstat, path)

    async def readdir(self, path: str) -> List[Element]:
        return await asyncio.to_thread(_list_directory, path)

    async def readlink(self, path: str) -> str:
        return await asyncio.to_thread(os.readlink, path)

    async def read_chunks(self, path: str) -> AsyncIterator[bytes]:
        f = await asyncio.to_thread(open, path, "rb")
        try:
            while True:
                chunk = await asyncio.to_thread(f.read, self.chunk_size)
                if not chunk:
                    break
                yield chunk
        finally:
            f.close()
