# Auto-generated __init__.py

from . import folder_hash
from .folder_hash import build_parser
from .folder_hash import main
from .folder_hash import run

__all__ = [
    "folder_hash",
    "build_parser",
    "main",
    "run",
]
