"""Command-line interface for ColumnSmith."""

import argparse
import sys

import uvicorn

from .config import configure_logging, settings
from .matching import RegistryLoadError


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="ColumnSmith - Smart column matching for spreadsheet imports"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="Logging level (default: INFO)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help="Host to bind to (default: 127.0.0.1)"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help="Port to bind to (default: 8000)"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    # Detect command
    detect_parser = subparsers.add_parser(
        "detect", help="Auto-map a row of headers onto import fields"
    )
    detect_parser.add_argument("headers", nargs="+", help="Header row, in column order")
    target = detect_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--module", "-m", help="Import profile to map onto (e.g. students)")
    target.add_argument(
        "--field", "-f", action="append", dest="fields", help="Field to map onto (repeatable)"
    )
    detect_parser.add_argument(
        "--json", action="store_true", help="Print the raw mapping result as JSON"
    )

    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "detect":
        try:
            code = run_detect(args.headers, args.module, args.fields, args.json)
        except RegistryLoadError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)
        sys.exit(code)
    else:
        parser.print_help()
        sys.exit(1)


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "columnsmith.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


def run_detect(headers: list[str], module: str = None, fields: list[str] = None, as_json: bool = False) -> int:
    """Print the detected mapping for a header row. Returns the process exit code."""
    from .matching import format_field_name, get_matcher
    from .profiles import get_profile

    profile = None
    if module:
        profile = get_profile(module)
        if profile is None:
            print(f"Unknown import module: {module}", file=sys.stderr)
            return 2
        fields = profile.system_fields

    result = get_matcher().auto_detect_mapping(headers, fields)

    if as_json:
        print(result.model_dump_json(indent=2))
        return 0

    for field in dict.fromkeys(fields):
        index = result.column_for(field)
        if index is None:
            print(f"{format_field_name(field):<28} -> (unmapped)")
            continue
        label = result.label_for(field)
        print(
            f"{format_field_name(field):<28} -> [{index}] {headers[index]!r} "
            f"{result.confidence[field]:.2f} ({label.label})"
        )

    if result.unmapped_headers:
        print(f"\nUnmapped headers: {', '.join(result.unmapped_headers)}")

    if profile is not None:
        missing = profile.missing_required(result)
        if missing:
            print(f"Missing required fields: {', '.join(missing)}")
            return 1

    return 0


if __name__ == "__main__":
    main()
