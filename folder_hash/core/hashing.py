import asyncio
import os
from typing import Any, Callable, Dict, Optional, Tuple, Union

from folder_hash.core.log import err_log, params_log
from folder_hash.core.models import HashResult
from folder_hash.core.options import Options, parse_options
from folder_hash.core.retry import DEFAULT_MAX_OPEN_FILES
from folder_hash.core.traverser import Traverser

OptionsArg = Union[None, Dict[str, Any], Options]


def split_name(name, directory=None) -> Tuple[str, str]:
    """
    Return (basename, directory) for the element to hash.

    Without a directory the name is treated as a path and split; it is
    normalised first so that "./" and "folder/" name real entries.
    """
    if isinstance(name, os.PathLike):
        name = os.fspath(name)
    if not isinstance(name, str):
        raise TypeError("First argument must be a string")

    if directory is None:
        normalized = os.path.normpath(name)
        return os.path.basename(normalized), os.path.dirname(normalized) or "."

    if isinstance(directory, os.PathLike):
        directory = os.fspath(directory)
    if not isinstance(directory, str):
        raise TypeError("Directory must be a string")
    return name, directory


# ============================================================
# ASYNC IMPLEMENTATION (single source of truth)
# ============================================================

async def hash_element(
    name,
    directory=None,
    options: OptionsArg = None,
    *,
    filesystem=None,
    max_open_files: int = DEFAULT_MAX_OPEN_FILES,
) -> HashResult:
    """
    Hash a file, folder or symbolic link.

    - name: element name, or a full path when directory is None
    - options: dict merged over DEFAULT_OPTIONS (or a parsed Options)
    - filesystem: replacement for LocalFileSystem

    Returns a HashedFile or HashedFolder, an UnknownElement for special
    files, or None when a symbolic link root is skipped by the options.
    Any unrecovered error aborts the whole call; no partial tree is
    returned.
    """
    basename, dirname = split_name(name, directory)
    parsed = options if isinstance(options, Options) else parse_options(options)
    params_log.debug("hashing %s in %s", basename, dirname)

    traverser = Traverser(parsed, filesystem=filesystem, max_open_files=max_open_files)
    try:
        return await traverser.hash_root(basename, dirname)
    except Exception as exc:
        err_log.debug("fatal error: %r", exc)
        raise
    finally:
        if traverser.queue.retries:
            err_log.debug("%d operations were retried", traverser.queue.retries)


# ============================================================
# SYNC WRAPPERS
# ============================================================

def hash_element_sync(name, directory=None, options: OptionsArg = None, **kwargs):
    """
    Sync wrapper for hash_element.

    Inside a running event loop a task is returned instead.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # No running loop → safe to create one
        return asyncio.run(hash_element(name, directory, options, **kwargs))
    else:
        return loop.create_task(hash_element(name, directory, options, **kwargs))


def hash_element_callback(
    name,
    directory=None,
    options: OptionsArg = None,
    callback: Optional[Callable[[Optional[BaseException], HashResult], Any]] = None,
    **kwargs,
):
    """
    Error-first callback adapter: callback(error, result).

    Without a running loop the hash is computed immediately and the
    callback's return value is returned; otherwise a task is scheduled
    and returned.
    """
    if not callable(callback):
        raise TypeError("callback must be callable")

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        try:
            result = asyncio.run(hash_element(name, directory, options, **kwargs))
        except Exception as exc:
            return callback(exc, None)
        return callback(None, result)

    def finish(task: asyncio.Task) -> None:
        if task.cancelled():
            callback(asyncio.CancelledError(), None)
        elif task.exception() is not None:
            callback(task.exception(), None)
        else:
            callback(None, task.result())

    task = loop.create_task(hash_element(name, directory, options, **kwargs))
    task.add_done_callback(finish)
    return task
