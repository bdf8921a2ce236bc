import argparse
import asyncio
import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from folder_hash.core.hashing import hash_element
from folder_hash.core.log import setup_logger
from folder_hash.core.options import ENCODINGS, load_options, merge_options


# ----------------------------
# Arguments
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folder-hash",
        description="Create a hash over a folder or a file.",
    )
    parser.add_argument("path", nargs="?", default=".", help="file or folder to hash")
    parser.add_argument("-c", "--config", type=Path, help="JSON file with hashing options")
    parser.add_argument("-a", "--algorithm", help="hash algorithm (see --list-algorithms)")
    parser.add_argument("-e", "--encoding", choices=ENCODINGS, help="digest text encoding")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument(
        "--list-algorithms",
        action="store_true",
        help="print the available hash algorithms and exit",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging")
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def resolve_options(args: argparse.Namespace) -> Dict[str, Any]:
    options = load_options(args.config) if args.config else merge_options(None)

    # Command line flags win over the config file
    if args.algorithm:
        options["algorithm"] = args.algorithm
    if args.encoding:
        options["encoding"] = args.encoding
    return options


# ----------------------------
# CLI Orchestrator
# ----------------------------

async def run(args: argparse.Namespace) -> str:
    options = resolve_options(args)
    result = await hash_element(args.path, options=options)

    if result is None:
        return "null" if args.json else "(skipped)"
    if args.json:
        return json.dumps(result.to_dict(), indent=2)
    return result.to_string()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logger = setup_logger(level=level, log_file=args.log_file)

    if args.list_algorithms:
        print("\n".join(sorted(hashlib.algorithms_available)))
        return 0

    try:
        output = asyncio.run(run(args))
    except (OSError, ValueError, TypeError) as exc:
        logger.error("hashing failed: %s", exc)
        return 1

    print(output)
    return 0
