"""Minimal CLI entrypoint for meet-uri."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any
from typing import Sequence
from uuid import uuid4

import jsonschema

from core.structured_logging import emit_json_event, emit_parse_result, record_to_dict
from uri import get_context_root, parse_location_uri, parse_standard_uri


PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCHEMAS_DIR = PROJECT_ROOT / "schemas"
LOCATION_SCHEMA_PATH = SCHEMAS_DIR / "parsed_location.schema.json"
STANDARD_SCHEMA_PATH = SCHEMAS_DIR / "parsed_uri.schema.json"


def _load_schema(path: Path) -> dict[str, Any]:
    """Load one JSON schema file."""
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def _resolve_command_run_id(args: argparse.Namespace) -> str:
    """Resolve run_id from CLI args or create one for command-level tracing."""
    explicit = getattr(args, "run_id", None)
    if explicit:
        return str(explicit)
    return str(uuid4())


def _emit_cli_event(
    event_type: str,
    *,
    run_id: str,
    command: str,
    **payload: Any,
) -> str:
    """Emit one structured CLI event line with standard fields."""
    return emit_json_event(
        event_type=event_type,
        run_id=run_id,
        command=command,
        **payload,
    )


def _validate_schema_file(path: Path) -> None:
    """Validate that a JSON schema file is well-formed and has required top-level keys."""
    data = _load_schema(path)
    required_keys = {"$schema", "type", "properties", "required"}
    missing = required_keys.difference(data)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ValueError(f"{path.name} missing required schema keys: {missing_str}")
    jsonschema.Draft7Validator.check_schema(data)


def _cmd_validate_schemas(args: argparse.Namespace) -> int:
    """Validate schema files for basic structural correctness."""
    run_id = _resolve_command_run_id(args)
    for path in (STANDARD_SCHEMA_PATH, LOCATION_SCHEMA_PATH):
        _validate_schema_file(path)
    _emit_cli_event(
        "cli_validate_schemas_completed",
        run_id=run_id,
        command="validate-schemas",
        schema_files=[str(STANDARD_SCHEMA_PATH), str(LOCATION_SCHEMA_PATH)],
    )
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Parse each URI argument and emit one validated parse_result line per input."""
    run_id = _resolve_command_run_id(args)
    if args.standard:
        parse_fn = parse_standard_uri
        schema = _load_schema(STANDARD_SCHEMA_PATH)
    else:
        parse_fn = parse_location_uri
        schema = _load_schema(LOCATION_SCHEMA_PATH)

    rooms = 0
    for uri in args.uris:
        record = parse_fn(uri)
        payload = record_to_dict(record)
        if payload is not None:
            try:
                jsonschema.validate(payload, schema)
            except jsonschema.ValidationError as exc:
                raise ValueError(f"Parse result validation failed for {uri!r}: {exc.message}") from exc
            if payload.get("room"):
                rooms += 1
        emit_parse_result(uri, record, run_id=run_id)

    _emit_cli_event(
        "cli_parse_completed",
        run_id=run_id,
        command="parse",
        mode="standard" if args.standard else "location",
        parsed=len(args.uris),
        rooms=rooms,
    )
    return 0


def _cmd_context_root(args: argparse.Namespace) -> int:
    """Print the context root of a pathname."""
    run_id = _resolve_command_run_id(args)
    _emit_cli_event(
        "cli_context_root_completed",
        run_id=run_id,
        command="context-root",
        pathname=args.pathname,
        context_root=get_context_root(args.pathname),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser for the meet-uri CLI."""
    parser = argparse.ArgumentParser(
        prog="meet-uri",
        description="Normalize and parse meeting URIs, deep links and legacy invite links",
    )
    parser.add_argument("--version", action="version", version="meet-uri 0.1.0")

    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser(
        "validate-schemas",
        help="Validate JSON schemas used for parse results",
    )
    validate_parser.add_argument("--run-id", help="Optional explicit run ID for logging")
    validate_parser.set_defaults(func=_cmd_validate_schemas)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse one or more URIs into Location-style JSON records",
    )
    parse_parser.add_argument("uris", nargs="+", metavar="URI", help="URI, deep link or room name")
    parse_parser.add_argument(
        "--standard",
        action="store_true",
        help="Skip scheme/legacy normalization and room derivation",
    )
    parse_parser.add_argument("--run-id", help="Optional explicit run ID for logging")
    parse_parser.set_defaults(func=_cmd_parse)

    context_root_parser = subparsers.add_parser(
        "context-root",
        help="Print the context root of a pathname",
    )
    context_root_parser.add_argument("pathname", help="URI pathname, e.g. /base/Room123")
    context_root_parser.add_argument("--run-id", help="Optional explicit run ID for logging")
    context_root_parser.set_defaults(func=_cmd_context_root)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Execute CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return int(args.func(args))
    except Exception as exc:
        run_id = _resolve_command_run_id(args)
        _emit_cli_event(
            "cli_error",
            run_id=run_id,
            command=str(getattr(args, "command", "unknown")),
            level="error",
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return 1


def cli() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    raise SystemExit(main())
