from dataclasses import dataclass, field
from enum import Enum
import stat as stat_module
from typing import Optional, Tuple, Union


UNKNOWN_ELEMENT_ERROR = "Error: unknown element type"


class ElementKind(Enum):
    FILE = "file"
    FOLDER = "folder"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Element:
    """
    A directory entry as seen during traversal.

    Only the basename and the kind are kept; the containing directory
    travels alongside it.
    """
    name: str
    kind: ElementKind


def kind_from_mode(mode: int) -> ElementKind:
    if stat_module.S_ISDIR(mode):
        return ElementKind.FOLDER
    if stat_module.S_ISREG(mode):
        return ElementKind.FILE
    if stat_module.S_ISLNK(mode):
        return ElementKind.SYMLINK
    return ElementKind.OTHER


# ============================================================
# Results
# ============================================================

@dataclass(frozen=True)
class HashedFile:
    name: str
    hash: str

    def to_string(self, padding: str = "") -> str:
        return f"{padding}{{ name: '{self.name}', hash: '{self.hash}' }}"

    def to_dict(self) -> dict:
        return {"name": self.name, "hash": self.hash}

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class UnknownElement:
    """
    Placeholder for entries that are neither file, folder nor link
    (sockets, fifos, devices). Carries no hash.
    """
    name: str
    error: str = UNKNOWN_ELEMENT_ERROR
    hash: None = field(default=None, init=False)

    def to_string(self, padding: str = "") -> str:
        return f"{padding}{{ name: '{self.name}', error: '{self.error}' }}"

    def to_dict(self) -> dict:
        return {"name": self.name, "error": self.error}

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class HashedFolder:
    name: str
    hash: str
    children: Tuple["HashedElement", ...] = ()

    def to_string(self, padding: str = "") -> str:
        first = f"{padding}{{ name: '{self.name}', hash: '{self.hash}',\n"
        padding += "  "
        return f"{first}{padding}children: {self._children_to_string(padding)}}}"

    def _children_to_string(self, padding: str) -> str:
        if not self.children:
            return "[]"
        next_padding = padding + "  "
        rendered = "\n".join(child.to_string(next_padding) for child in self.children)
        return f"[\n{rendered}\n{padding}]"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "hash": self.hash,
            "children": [child.to_dict() for child in self.children],
        }

    def __str__(self) -> str:
        return self.to_string()


HashedElement = Union[HashedFile, HashedFolder, UnknownElement]
HashResult = Optional[HashedElement]
