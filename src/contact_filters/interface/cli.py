"""CLI commands for validating, describing and running advanced filters."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ..config.runtime import get_settings
from ..domain.description import describe_filter
from ..domain.filter_engine import apply_filters
from ..domain.filters import FilterConfig
from ..errors import InvalidFilterError
from ..observability import configure_logging
from ..wiring import build_filter_service, build_record_store
from .validation import validate_filter


def _read_json(path: Path, what: str):
    if not path.exists():
        print(f"Error: {what} file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            print(f"Error: {what} file is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)


def load_filter_from_file(path: Path) -> FilterConfig:
    """Load a filter config from a JSON file. Exits on missing file or invalid shape."""
    raw = _read_json(path, "filter")
    if not isinstance(raw, dict):
        print("Error: filter file must contain a JSON object.", file=sys.stderr)
        sys.exit(1)
    try:
        return FilterConfig.coerce(raw)
    except ValidationError as e:
        print(f"Error: invalid filter config: {e}", file=sys.stderr)
        sys.exit(1)


def load_records_from_file(path: Path) -> list[dict]:
    """Load a list of flat records from a JSON file."""
    raw = _read_json(path, "records")
    if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
        print("Error: records file must contain a list of objects.", file=sys.stderr)
        sys.exit(1)
    return raw


def _print_json(obj) -> None:
    print(json.dumps(obj, indent=2, default=str))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Validate, describe and run advanced record filters")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Check a filter config for missing fields")
    validate_parser.add_argument("filter", type=Path, help="Path to filter JSON")

    describe_parser = subparsers.add_parser("describe", help="Print a human-readable filter description")
    describe_parser.add_argument("filter", type=Path, help="Path to filter JSON")

    apply_parser = subparsers.add_parser("apply", help="Filter records from a JSON file in memory")
    apply_parser.add_argument("filter", type=Path, help="Path to filter JSON")
    apply_parser.add_argument("--records", type=Path, required=True, help="Path to records JSON list")
    apply_parser.add_argument("--count", action="store_true", help="Print only the match count")

    seed_parser = subparsers.add_parser(
        "seed",
        help="Load records from a JSON file into the record store (booleans: true is stored as \"true\", false as null)",
    )
    seed_parser.add_argument("--file", type=Path, required=True, help="Path to records JSON list")
    seed_parser.add_argument(
        "--replace", action="store_true", help="Drop existing records before loading"
    )

    search_parser = subparsers.add_parser("search", help="Run a filter against the record store")
    search_parser.add_argument("filter", type=Path, help="Path to filter JSON")

    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "validate":
        result = validate_filter(load_filter_from_file(args.filter))
        _print_json(result.to_dict())
        if not result.is_valid:
            sys.exit(1)
    elif args.command == "describe":
        print(describe_filter(load_filter_from_file(args.filter)))
    elif args.command == "apply":
        config = load_filter_from_file(args.filter)
        records = load_records_from_file(args.records)
        kept = apply_filters(records, config)
        if args.count:
            print(len(kept))
        else:
            _print_json(kept)
    elif args.command == "seed":
        records = load_records_from_file(args.file)
        store = build_record_store(settings)
        if args.replace:
            store.delete_all()
        count = store.insert_records(records)
        print(f"Added {count} records to {store.table}.")
    elif args.command == "search":
        config = load_filter_from_file(args.filter)
        try:
            result = build_filter_service(settings).search(config)
        except InvalidFilterError as e:
            for err in e.errors:
                print(f"Error: {err}", file=sys.stderr)
            sys.exit(1)
        _print_json(result.model_dump())
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
