from dataclasses import replace
import os

from folder_hash.core.log import symlink_log
from folder_hash.core.models import Element, HashedFile, HashResult, kind_from_mode
from folder_hash.core.retry import is_descriptor_exhaustion


class SymlinkResolver:
    """
    Hashes symbolic links according to the SymlinkPolicy.

    Precedence, first match wins:
    1. include=False                      -> link is left out (None)
    2. ignore_target_content=True         -> name + target path, target never read
    3. resolve through the link           -> target digest (+ target path)
    4. resolution failed and
       ignore_target_content_after_error  -> name + target path
    Otherwise the resolution error propagates.

    The link name is left out when ignore_basename is set, or when the
    link is the root element and files.ignore_root_name is set. The
    target path is part of the digest only when ignore_target_path is
    False, in every mode.
    """

    def __init__(self, traverser):
        self.traverser = traverser
        self.options = traverser.options
        self.policy = traverser.options.symbolic_links
        self.composer = traverser.composer

    async def hash_link(self, name: str, directory: str, visit) -> HashResult:
        path = os.path.join(directory, name)
        if not self.policy.include:
            symlink_log.debug("skipping symbolic link %s", path)
            return None

        target = await self.traverser.fs.readlink(path)
        symlink_log.debug("handling symbolic link %s -> %s", name, target)

        if self.policy.ignore_target_content:
            symlink_log.debug("ignoring symbolic link target content")
            return self._hash_link_only(name, target, visit)
        return await self._resolve(name, directory, target, visit)

    def _omit_name(self, visit) -> bool:
        return self.policy.ignore_basename or (
            visit.is_root and self.options.files.ignore_root_name
        )

    def _hash_link_only(self, name: str, target: str, visit) -> HashedFile:
        digest = self.composer.compose_link(name, target, omit_name=self._omit_name(visit))
        return HashedFile(name=name, hash=digest)

    async def _resolve(self, name: str, directory: str, target: str, visit) -> HashResult:
        path = os.path.join(directory, name)
        # The target is hashed under the link's name; only this one
        # visit may drop that name, never the target's descendants.
        target_visit = replace(
            visit,
            suppress_name_once=visit.suppress_name_once or self.policy.ignore_basename,
        )

        try:
            stats = await self.traverser.fs.stat(path)
            element = Element(name, kind_from_mode(stats.st_mode))
            resolved = await self.traverser.hash_element(element, directory, target_visit)
        except OSError as exc:
            if is_descriptor_exhaustion(exc) or not self.policy.ignore_target_content_after_error:
                symlink_log.debug("error %r when hashing symbolic link %s", exc, name)
                raise
            symlink_log.debug("ignoring error %r when hashing symbolic link %s", exc, name)
            return self._hash_link_only(name, target, visit)

        if resolved is None or resolved.hash is None:
            return resolved

        if not self.policy.ignore_target_path:
            resolved = replace(
                resolved,
                hash=self.composer.fold_target_path(resolved.hash, target),
            )
        return resolved
