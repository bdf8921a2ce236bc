# Auto-generated __init__.py

from . import composer
from .composer import HashComposer
from .composer import encode_digest
from . import filesystem
from .filesystem import LocalFileSystem
from . import hashing
from .hashing import hash_element
from .hashing import hash_element_callback
from .hashing import hash_element_sync
from .hashing import split_name
from . import log
from .log import setup_logger
from . import matcher
from .matcher import compile_rule
from .matcher import gitignore_rule
from .matcher import should_ignore
from . import models
from .models import Element
from .models import ElementKind
from .models import HashedFile
from .models import HashedFolder
from .models import UnknownElement
from . import options
from .options import DEFAULT_OPTIONS
from .options import MatchRule
from .options import Options
from .options import SymlinkPolicy
from .options import load_options
from .options import merge_options
from .options import parse_options
from . import retry
from .retry import RetryQueue
from . import symlinks
from .symlinks import SymlinkResolver
from . import traverser
from .traverser import Traverser
from .traverser import Visit

__all__ = [
    "composer",
    "filesystem",
    "hashing",
    "log",
    "matcher",
    "models",
    "options",
    "retry",
    "symlinks",
    "traverser",
    "DEFAULT_OPTIONS",
    "Element",
    "ElementKind",
    "HashComposer",
    "HashedFile",
    "HashedFolder",
    "LocalFileSystem",
    "MatchRule",
    "Options",
    "RetryQueue",
    "SymlinkPolicy",
    "SymlinkResolver",
    "Traverser",
    "UnknownElement",
    "Visit",
    "compile_rule",
    "encode_digest",
    "gitignore_rule",
    "hash_element",
    "hash_element_callback",
    "hash_element_sync",
    "load_options",
    "merge_options",
    "parse_options",
    "setup_logger",
    "should_ignore",
    "split_name",
]
