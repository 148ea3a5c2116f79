#!/usr/bin/env python3
"""
Repository Handles command line

Mint, inspect and remove Handles for repository objects, or stamp a handle
into a metadata file. Configuration is read from HANDLE_* environment
variables.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import parse_environment_variables
from .exceptions import ConfigurationError
from .logging_config import get_logger
from .metadata import MODS_STYLESHEET
from .models import InMemoryObject
from .registry import create_handler

STAMPED_DATASTREAM = "MODS"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repository-handles",
        description="Manage Handles for repository objects",
    )
    parser.add_argument("--prefix", help="Handle prefix (overrides HANDLE_PREFIX)")
    parser.add_argument(
        "--log-level",
        choices=["ERROR", "INFO", "DEBUG"],
        default="ERROR",
        help="Log level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Mint a handle for an object")
    create.add_argument("object_id", help="Repository object identifier")

    read = commands.add_parser("read", help="Show the target URL of a handle")
    read.add_argument("handle", help="Full handle, e.g. 1234567/abc:123")

    update = commands.add_parser("update", help="Repoint a handle")
    update.add_argument("handle", help="Full handle, e.g. 1234567/abc:123")
    update.add_argument("target", help="New target URL")

    delete = commands.add_parser("delete", help="Remove a handle")
    delete.add_argument("handle", help="Full handle, e.g. 1234567/abc:123")

    stamp = commands.add_parser("stamp", help="Stamp a handle into a metadata file")
    stamp.add_argument("object_id", help="Repository object identifier")
    stamp.add_argument("metadata_file", type=Path, help="XML metadata file")
    stamp.add_argument(
        "--xsl", default=MODS_STYLESHEET, help="Stylesheet path or URL"
    )
    return parser


def _stamp(handler, obj: InMemoryObject, metadata_file: Path, xsl: str) -> bool:
    datastream = obj.add_datastream(
        STAMPED_DATASTREAM, metadata_file.read_text(encoding="utf-8")
    )
    original = datastream.content
    outcome = handler.append_handle_to_metadata(obj, STAMPED_DATASTREAM, xsl)
    if outcome.message is not None:
        stream = sys.stdout if outcome.success else sys.stderr
        print(outcome.message.render(), file=stream)
    if outcome.success and datastream.content != original:
        metadata_file.write_text(datastream.content, encoding="utf-8")
    return outcome.success


def _set_package_log_level(level: str) -> None:
    """Apply the command line log level to every package logger."""
    for name in list(logging.root.manager.loggerDict):
        if name == "repository_handles" or name.startswith("repository_handles."):
            logging.getLogger(name).setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logger = get_logger("repository_handles")
    _set_package_log_level(args.log_level)

    obj = None
    if args.command in ("create", "stamp"):
        obj = InMemoryObject(id=args.object_id)

    try:
        config = parse_environment_variables()
        handler = create_handler(config, obj=obj, prefix=args.prefix)
    except ConfigurationError as e:
        print(f"ERROR: Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "create":
            ok = handler.create_handle(obj)
            if ok:
                print(handler.get_full_handle(obj))
        elif args.command == "read":
            target = handler.read_handle(args.handle)
            ok = target is not None
            if ok:
                print(target)
        elif args.command == "update":
            ok = handler.update_handle(args.handle, args.target)
        elif args.command == "delete":
            ok = handler.delete_handle(args.handle)
        else:
            ok = _stamp(handler, obj, args.metadata_file, args.xsl)
    except OSError as e:
        logger.error(f"File I/O error: {e}")
        print(f"ERROR: File I/O error: {e}", file=sys.stderr)
        return 1

    if not ok:
        print(f"ERROR: {args.command} failed", file=sys.stderr)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
