# Auto-generated __init__.py

from . import core
from .core import DEFAULT_OPTIONS
from .core import HashedFile
from .core import HashedFolder
from .core import LocalFileSystem
from .core import UnknownElement
from .core import gitignore_rule
from .core import hash_element
from .core import hash_element_callback
from .core import hash_element_sync
from .core import load_options
from .core import parse_options

__all__ = [
    "core",
    "DEFAULT_OPTIONS",
    "HashedFile",
    "HashedFolder",
    "LocalFileSystem",
    "UnknownElement",
    "gitignore_rule",
    "hash_element",
    "hash_element_callback",
    "hash_element_sync",
    "load_options",
    "parse_options",
]
