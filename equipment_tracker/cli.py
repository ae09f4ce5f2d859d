"""
Design (cli.py)
- Purpose: Non-interactive command-line front end over the record operations.
- Inputs: argv (list of str); backing file from --file, the env override, or the default.
- Outputs: Exit code (0 ok, 1 failure, 2 invalid operator input); results on stdout, failures on stderr.
- Side effects: Configures logging; operations may rewrite the backing file.
- Thread-safety: N/A (single call per process).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import LOG_FORMAT, LOG_LEVEL, SELECTOR_LABELS
from .errors import Failure
from .models import parse_status, status_label
from .observability import setup_logging
from .operations import create_record, get_status, list_records, search_by_term, update_status
from .storage import RecordStore, get_records_path

logger = logging.getLogger(__name__)

SELECTOR_HELP = ", ".join(f"{code}: {status_label(parse_status(code))}" for code, _ in SELECTOR_LABELS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="equipment-tracker",
        description="Track equipment records and their operational status.",
    )
    parser.add_argument("--file", help="Path to the equipment JSON file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOG_LEVEL,
        help="Logging level",
    )
    parser.add_argument("--log-format", choices=["text", "json"], default=LOG_FORMAT)

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create an empty equipment file if none exists")

    add = sub.add_parser("add", help="Register new equipment")
    add.add_argument("name")
    add.add_argument("status", help=SELECTOR_HELP)

    set_status = sub.add_parser("set-status", help="Change the status of equipment")
    set_status.add_argument("id", type=int)
    set_status.add_argument("status", help=SELECTOR_HELP)

    status = sub.add_parser("status", help="Show the status of equipment")
    status.add_argument("id", type=int)

    search = sub.add_parser("search", help="Search equipment by name or status")
    search.add_argument("term")

    sub.add_parser("list", help="List all equipment")
    return parser


def _fail(failure: Failure, fmt: str = "text") -> int:
    """Report a failure on stderr. Bad operator input exits 2, everything else 1."""
    if fmt == "json":
        print(json.dumps(failure.to_dict(), ensure_ascii=False), file=sys.stderr)
    else:
        print(failure.message, file=sys.stderr)
    return 2 if failure.is_invalid_input else 1


def run(args: argparse.Namespace) -> int:
    store = RecordStore(args.file or get_records_path())
    logger.debug("Command %s against %r", args.command, store)

    if args.command == "init":
        failure = store.initialize()
        if failure is not None:
            return _fail(failure, args.log_format)
        print(f"Equipment file ready at {store.path}")
        return 0

    if args.command == "add":
        result = create_record(store, args.name.strip(), args.status)
        if isinstance(result, Failure):
            return _fail(result, args.log_format)
        print(f"Added equipment {result.id}: {result.name} ({result.status.value})")
        return 0

    if args.command == "set-status":
        result = update_status(store, args.id, args.status)
        if isinstance(result, Failure):
            return _fail(result, args.log_format)
        old, new = result
        print(f"The equipment with ID {args.id} changed from {old.value} to {new.value}")
        return 0

    if args.command == "status":
        result = get_status(store, args.id)
        if isinstance(result, Failure):
            return _fail(result, args.log_format)
        print(f"The equipment with ID {args.id} currently has the following status: {result.value}")
        return 0

    if args.command == "search":
        result = search_by_term(store, args.term)
        if isinstance(result, Failure):
            return _fail(result, args.log_format)
        if not result:
            print("No matching equipment found.")
            return 0
        print("Matching equipment IDs:")
        for record_id in result:
            print(record_id)
        return 0

    # list
    result = list_records(store)
    if isinstance(result, Failure):
        return _fail(result, args.log_format)
    for record in result:
        print(f"{record.id:>4}  {record.status.value:<16}  {record.name}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_format)
    return run(args)
