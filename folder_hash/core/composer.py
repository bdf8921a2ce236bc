import base64
import hashlib
from typing import Iterable

from folder_hash.core.log import match_log, symlink_log
from folder_hash.core.models import HashedElement
from folder_hash.core.options import MatchRule, Options


class HashComposer:
    """
    Decides which bytes go into each digest, and in what order.

    - file:   [name] + content
    - folder: [name] + hash text of every hashed child, in sorted order
    - link:   [name] + [target path]

    The algorithm, its options and the text encoding apply uniformly to
    every node of one call.
    """

    def __init__(self, options: Options):
        self.options = options
        kwargs = dict(options.algorithm_options or {})
        self._length = kwargs.pop("length", None)
        self._kwargs = kwargs

    # -------- Digests --------

    def new_hash(self):
        return hashlib.new(self.options.algorithm, **self._kwargs)

    def finalize(self, hasher) -> str:
        if hasher.digest_size == 0:
            raw = hasher.digest(self._length)
        else:
            raw = hasher.digest()
        return encode_digest(raw, self.options.encoding)

    # -------- Name handling --------

    @staticmethod
    def omit_name(rule: MatchRule, visit) -> bool:
        return (
            rule.ignore_basename
            or visit.suppress_name_once
            or (visit.is_root and rule.ignore_root_name)
        )

    def begin_file(self, name: str, visit):
        """
        Start a file digest; the caller streams the content into it.
        """
        hasher = self.new_hash()
        if self.omit_name(self.options.files, visit):
            match_log.debug("omitted name of file %s from hash", name)
        else:
            hasher.update(name.encode("utf-8"))
        return hasher

    def compose_folder(self, name: str, children: Iterable[HashedElement], visit) -> str:
        hasher = self.new_hash()
        if self.omit_name(self.options.folders, visit):
            match_log.debug("omitted name of folder %s from hash", name)
        else:
            hasher.update(name.encode("utf-8"))

        for child in children:
            if child.hash:
                hasher.update(child.hash.encode("utf-8"))

        return self.finalize(hasher)

    # -------- Symbolic links --------

    def compose_link(self, name: str, target: str, *, omit_name: bool) -> str:
        hasher = self.new_hash()
        if not omit_name:
            symlink_log.debug("hash basename of %s", name)
            hasher.update(name.encode("utf-8"))
        if not self.options.symbolic_links.ignore_target_path:
            symlink_log.debug("hash target path %s", target)
            hasher.update(target.encode("utf-8"))
        return self.finalize(hasher)

    def fold_target_path(self, resolved_hash: str, target: str) -> str:
        hasher = self.new_hash()
        hasher.update(resolved_hash.encode("utf-8"))
        symlink_log.debug("hash target path %s", target)
        hasher.update(target.encode("utf-8"))
        return self.finalize(hasher)


def encode_digest(raw: bytes, encoding: str) -> str:
    if encoding == "base64":
        return base64.b64encode(raw).decode("ascii")
    if encoding == "base64url":
        return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")
    if encoding == "hex":
        return raw.hex()
    if encoding == "binary":
        return raw.decode("latin-1")
    raise ValueError(f"Unsupported encoding '{encoding}'")
