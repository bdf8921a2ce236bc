import asyncio
from contextlib import aclosing
from dataclasses import dataclass
import os
from typing import Awaitable, Iterable, List, Optional

from folder_hash.core.composer import HashComposer
from folder_hash.core.filesystem import LocalFileSystem
from folder_hash.core.log import err_log, match_log
from folder_hash.core.matcher import relative_match_path, should_ignore
from folder_hash.core.models import (
    Element,
    ElementKind,
    HashedFile,
    HashedFolder,
    HashResult,
    UnknownElement,
    kind_from_mode,
)
from folder_hash.core.options import MatchRule, Options
from folder_hash.core.retry import DEFAULT_MAX_OPEN_FILES, RetryQueue
from folder_hash.core.symlinks import SymlinkResolver


@dataclass(frozen=True)
class Visit:
    """
    Per-call context passed down the recursion.

    root:               path of the hashed root, base for match paths
    is_root:            this element is the one the caller asked for
    skip_matching:      exempt this element from its exclude/include rule
    suppress_name_once: leave this element's own name out of its digest
    """
    root: str
    is_root: bool = False
    skip_matching: bool = False
    suppress_name_once: bool = False

    def child(self) -> "Visit":
        return Visit(root=self.root)


async def _gather_all(coros: Iterable[Awaitable]) -> List:
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # Let the cancelled siblings finish before the error leaves.
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class Traverser:
    """
    Walks a tree and turns it into HashedFile/HashedFolder results.

    Every element goes through _dispatch, wrapped by the retry queue so
    that a listing or read failing with descriptor exhaustion is replayed
    from scratch, matching included.
    """

    def __init__(
        self,
        options: Options,
        *,
        filesystem=None,
        max_open_files: int = DEFAULT_MAX_OPEN_FILES,
    ):
        self.options = options
        self.fs = filesystem if filesystem is not None else LocalFileSystem()
        self.composer = HashComposer(options)
        self.queue = RetryQueue(max_open_files)
        self.symlinks = SymlinkResolver(self)

    async def hash_root(self, name: str, directory: str) -> HashResult:
        path = os.path.join(directory, name)
        # lstat: a link passed as root is handled as a link
        stats = await self.fs.lstat(path)
        element = Element(name, kind_from_mode(stats.st_mode))
        visit = Visit(root=path, is_root=True, skip_matching=True)
        return await self.hash_element(element, directory, visit)

    async def hash_element(self, element: Element, directory: str, visit: Visit) -> HashResult:
        label = os.path.join(directory, element.name)
        return await self.queue.run(
            lambda: self._dispatch(element, directory, visit),
            label,
        )

    async def _dispatch(self, element: Element, directory: str, visit: Visit) -> HashResult:
        if element.kind is ElementKind.FOLDER:
            return await self._hash_folder(element.name, directory, visit)
        if element.kind is ElementKind.FILE:
            return await self._hash_file(element.name, directory, visit)
        if element.kind is ElementKind.SYMLINK:
            return await self.symlinks.hash_link(element.name, directory, visit)

        err_log.warning(
            "cannot handle %s: unknown element type",
            os.path.join(directory, element.name),
        )
        return UnknownElement(element.name)

    # ----------------------------
    # Matching
    # ----------------------------

    def is_ignored(self, name: str, path: str, rule: MatchRule, visit: Visit) -> bool:
        if visit.skip_matching:
            match_log.debug("skipped '%s'", path)
            return False
        return should_ignore(name, relative_match_path(path, visit.root), rule)

    # ----------------------------
    # Folders
    # ----------------------------

    async def _hash_folder(self, name: str, directory: str, visit: Visit) -> Optional[HashedFolder]:
        path = os.path.join(directory, name)
        if self.is_ignored(name, path, self.options.folders, visit):
            return None

        async with self.queue.descriptor():
            entries = await self.fs.readdir(path)

        entries = sorted(entries, key=lambda entry: entry.name)
        child_visit = visit.child()
        results = await _gather_all(
            self.hash_element(entry, path, child_visit) for entry in entries
        )

        children = tuple(child for child in results if child is not None)
        digest = self.composer.compose_folder(name, children, visit)
        return HashedFolder(name=name, hash=digest, children=children)

    # ----------------------------
    # Files
    # ----------------------------

    async def _hash_file(self, name: str, directory: str, visit: Visit) -> Optional[HashedFile]:
        path = os.path.join(directory, name)
        if self.is_ignored(name, path, self.options.files, visit):
            return None

        hasher = self.composer.begin_file(name, visit)
        async with self.queue.descriptor():
            async with aclosing(self.fs.read_chunks(path)) as chunks:
                async for chunk in chunks:
                    hasher.update(chunk)

        return HashedFile(name=name, hash=self.composer.finalize(hasher))
