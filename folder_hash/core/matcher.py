import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

import pathspec
from wcmatch import glob

from folder_hash.core.log import match_log

Predicate = Callable[[str], bool]
RuleOption = Union[None, str, Iterable[str], Predicate]

# "*" stops at "/" and skips leading dots, "**" spans folders, braces and
# extglobs expand.
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.FORCEUNIX


# ============================================================
# Rule compilation
# ============================================================

def compile_patterns(patterns: List[str]) -> Predicate:
    """
    Combine a list of glob patterns into one predicate.

    The patterns are ORed together into a single compiled matcher, so the
    hot path only ever calls one function regardless of how many patterns
    were configured. Each pattern must match the whole candidate.
    """
    for pattern in patterns:
        if not isinstance(pattern, str):
            raise TypeError(f"Glob patterns must be strings, got {pattern!r}")

    try:
        matcher = glob.compile(patterns, flags=GLOB_FLAGS)
    except ValueError as exc:
        raise ValueError(f"Failed to parse glob: {exc}") from exc

    def predicate(candidate: str) -> bool:
        return matcher.match(candidate)

    return predicate


def compile_rule(rule: RuleOption) -> Optional[Predicate]:
    """
    Turn an exclude/include option into a predicate (or None).

    - None or an empty list: no rule
    - a callable: used verbatim
    - a string: a single glob pattern
    - any other iterable of strings: glob patterns
    """
    if rule is None:
        return None
    if callable(rule):
        return rule
    if isinstance(rule, str):
        return compile_patterns([rule])
    if isinstance(rule, (bytes, dict)):
        raise TypeError(f"Unsupported match rule: {rule!r}")

    try:
        patterns = list(rule)
    except TypeError:
        raise TypeError(f"Unsupported match rule: {rule!r}") from None

    if not patterns:
        return None
    return compile_patterns(patterns)


def gitignore_rule(gitignore: Union[str, os.PathLike]) -> Predicate:
    """
    Build an exclude predicate from an existing .gitignore file.
    """
    with open(gitignore, "r", encoding="utf-8") as f:
        spec = pathspec.GitIgnoreSpec.from_lines(f)

    def predicate(candidate: str) -> bool:
        return spec.match_file(candidate)

    return predicate


# ============================================================
# Matching
# ============================================================

def relative_match_path(path: str, root: str) -> str:
    """
    Path of an entry relative to the hashed root, '/'-separated.
    """
    rel = os.path.relpath(path, root)
    return Path(rel).as_posix()


def should_ignore(name: str, path: str, rule) -> bool:
    """
    Decide whether an entry is dropped by a MatchRule.

    Exclude is evaluated first and always wins over include.
    """
    if rule.exclude is not None:
        if rule.match_basename and rule.exclude(name):
            match_log.debug("exclude basename '%s'", name)
            return True
        if rule.match_path and rule.exclude(path):
            match_log.debug("exclude path '%s'", path)
            return True

    if rule.include is not None:
        if rule.match_basename and rule.include(name):
            match_log.debug("include basename '%s'", name)
            return False
        if rule.match_path and rule.include(path):
            match_log.debug("include path '%s'", path)
            return False
        match_log.debug("include rule failed for path '%s'", path)
        return True

    match_log.debug("will not ignore unmatched '%s'", path)
    return False
