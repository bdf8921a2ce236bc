from dataclasses import dataclass
import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Optional

from folder_hash.core.log import params_log
from folder_hash.core.matcher import Predicate, compile_rule


# ----------------------------
# Defaults
# ----------------------------

ENCODINGS = ("base64", "base64url", "hex", "binary")

DEFAULT_OPTIONS = {
    "algorithm": "sha1",  # any name accepted by hashlib.new
    "algorithm_options": None,
    "encoding": "base64",
    "files": {
        "exclude": [],
        "include": [],
        "match_basename": True,
        "match_path": False,
        "ignore_basename": False,
        "ignore_root_name": False,
    },
    "folders": {
        "exclude": [],
        "include": [],
        "match_basename": True,
        "match_path": False,
        "ignore_basename": False,
        "ignore_root_name": False,
    },
    "symbolic_links": {
        "include": True,
        "ignore_basename": False,
        "ignore_target_path": True,
        "ignore_target_content": False,
        "ignore_target_content_after_error": False,
    },
}

_SECTIONS = ("files", "folders", "symbolic_links")


# ----------------------------
# Parsed options
# ----------------------------

@dataclass(frozen=True)
class MatchRule:
    exclude: Optional[Predicate] = None
    include: Optional[Predicate] = None
    match_basename: bool = True
    match_path: bool = False
    ignore_basename: bool = False
    ignore_root_name: bool = False


@dataclass(frozen=True)
class SymlinkPolicy:
    include: bool = True
    ignore_basename: bool = False
    ignore_target_path: bool = True
    ignore_target_content: bool = False
    ignore_target_content_after_error: bool = False


@dataclass(frozen=True)
class Options:
    """
    Fully resolved options for one hashing call.

    Built once by parse_options and shared read-only by the whole
    traversal; nothing downstream mutates it.
    """
    algorithm: str = "sha1"
    algorithm_options: Optional[Dict[str, Any]] = None
    encoding: str = "base64"
    files: MatchRule = MatchRule()
    folders: MatchRule = MatchRule()
    symbolic_links: SymlinkPolicy = SymlinkPolicy()


# ----------------------------
# Merging
# ----------------------------

def _copy_defaults() -> Dict[str, Any]:
    return json.loads(json.dumps(DEFAULT_OPTIONS))


def merge_options(user_options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge user options over DEFAULT_OPTIONS without touching either.

    Nested sections are merged key by key; unknown keys are rejected.
    """
    merged = _copy_defaults()
    if user_options is None:
        return merged
    if not isinstance(user_options, dict):
        raise TypeError("Options must be a dict")

    for key, value in user_options.items():
        if key not in merged:
            raise ValueError(f"Unknown option: {key}")

        if key in _SECTIONS:
            if value is None:
                continue
            if not isinstance(value, dict):
                raise TypeError(f"Option '{key}' must be a dict")
            for sub_key, sub_value in value.items():
                if sub_key not in merged[key]:
                    raise ValueError(f"Unknown option: {key}.{sub_key}")
                merged[key][sub_key] = sub_value
        else:
            merged[key] = value

    return merged


def load_options(path: Path) -> Dict[str, Any]:
    """
    Read a JSON options file and merge it over the defaults.

    A missing file yields the defaults.
    """
    path = Path(path)
    if not path.exists():
        return _copy_defaults()

    with open(path, "r", encoding="utf-8") as f:
        user_options = json.load(f)

    return merge_options(user_options)


# ----------------------------
# Parsing
# ----------------------------

RULE_KEYS = ("exclude", "include")


def _check_bool(section: str, values: Dict[str, Any], skip=()) -> None:
    for key, value in values.items():
        if key in skip:
            continue
        if not isinstance(value, bool):
            raise TypeError(f"Option '{section}.{key}' must be a bool")


def _match_rule(section: str, values: Dict[str, Any]) -> MatchRule:
    _check_bool(section, values, skip=RULE_KEYS)
    return MatchRule(
        exclude=compile_rule(values["exclude"]),
        include=compile_rule(values["include"]),
        match_basename=values["match_basename"],
        match_path=values["match_path"],
        ignore_basename=values["ignore_basename"],
        ignore_root_name=values["ignore_root_name"],
    )


def _check_algorithm(algorithm: str, algorithm_options: Optional[Dict[str, Any]]) -> None:
    if not isinstance(algorithm, str):
        raise TypeError("Option 'algorithm' must be a string")
    if algorithm_options is not None and not isinstance(algorithm_options, dict):
        raise TypeError("Option 'algorithm_options' must be a dict")

    kwargs = dict(algorithm_options or {})
    length = kwargs.pop("length", None)
    # Fails fast on unknown algorithms or constructor arguments.
    hasher = hashlib.new(algorithm, **kwargs)

    # Extendable-output functions (shake_*) report a digest size of 0.
    if hasher.digest_size == 0 and not isinstance(length, int):
        raise ValueError(
            f"Algorithm '{algorithm}' needs an output length in algorithm_options['length']"
        )


def parse_options(user_options: Optional[Dict[str, Any]] = None) -> Options:
    """
    Validate and compile user options into an immutable Options.

    Raises TypeError/ValueError for invalid input; no I/O happens here.
    """
    merged = merge_options(user_options)

    _check_algorithm(merged["algorithm"], merged["algorithm_options"])

    encoding = merged["encoding"]
    if encoding not in ENCODINGS:
        raise ValueError(
            f"Unsupported encoding '{encoding}', expected one of {', '.join(ENCODINGS)}"
        )

    links = merged["symbolic_links"]
    _check_bool("symbolic_links", links)

    options = Options(
        algorithm=merged["algorithm"],
        algorithm_options=merged["algorithm_options"],
        encoding=encoding,
        files=_match_rule("files", merged["files"]),
        folders=_match_rule("folders", merged["folders"]),
        symbolic_links=SymlinkPolicy(**links),
    )
    params_log.debug("parsed options: %s", options)
    return options
