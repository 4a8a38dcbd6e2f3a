import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import colorlog

from helpdesk_search import __version__
from helpdesk_search.config import DEFAULT_CONFIG_PATH, load_config
from helpdesk_search.core.enums import EntityKind
from helpdesk_search.core.exceptions import DataLoadError, SearchError
from helpdesk_search.core.query import SearchContext, get_accessor, list_fields, materialize
from helpdesk_search.core.query.fields import resolve_entity_kind
from helpdesk_search.ingestion.loader import load_store
from helpdesk_search.interfaces.cli.export import export_csv
from helpdesk_search.interfaces.cli.parsing import parse_search_input
from helpdesk_search.interfaces.cli.render import render_json, render_text

PROMPT = "search >>"

ENTITY_KIND_CHOICES = [k.value for k in EntityKind]

REPL_HELP = """\
Search format: <searchtype> <searchfield> [search value]
  searchtype:  org | user | ticket
  searchfield: case-sensitive field name (see 'fields')
  search value may be empty to match empty fields
Commands: help, fields [searchtype], quit, exit
"""


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = "%(asctime)s:%(levelname)s:%(name)s:%(funcName)s:%(lineno)d: %(message)s"
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    # stderr keeps stdout clean for results and JSON output
    stream_handler = colorlog.StreamHandler(sys.stderr)
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_context(args: argparse.Namespace) -> SearchContext:
    """Load config and data files named by ``args`` and index them.

    Raises:
        FileNotFoundError: If the config file is missing.
        ValueError: If the config is malformed or a data file fails to load
            (DataLoadError is a ValueError).
    """
    overrides = {
        "organizations": getattr(args, "organizations", None),
        "users": getattr(args, "users", None),
        "tickets": getattr(args, "tickets", None),
    }
    config_arg = getattr(args, "config", None)
    if config_arg is None and all(v is not None for v in overrides.values()):
        # All three files given on the command line; no config needed
        organizations_path = Path(overrides["organizations"])
        users_path = Path(overrides["users"])
        tickets_path = Path(overrides["tickets"])
    else:
        config = load_config(Path(config_arg) if config_arg else DEFAULT_CONFIG_PATH)
        config = config.with_overrides(**overrides)
        organizations_path, users_path, tickets_path = (
            config.organizations,
            config.users,
            config.tickets,
        )

    store = load_store(organizations_path, users_path, tickets_path)
    logging.info("Building indexes...")
    return SearchContext.from_store(store)


def _load_context_or_exit_code(args: argparse.Namespace):
    try:
        return build_context(args), 0
    except FileNotFoundError as e:
        logging.error("%s", e)
        return None, 1
    except DataLoadError as e:
        logging.error("Error reading data file: %s", e)
        return None, 1
    except ValueError as e:
        logging.error("Error reading config file: %s", e)
        return None, 1


def cmd_search(args: argparse.Namespace) -> int:
    """Run one query and print materialized results.

    Returns:
        0 on success (including no matches)
        1 if config or data could not be loaded, or the CSV export failed
        2 if the query itself is invalid
    """
    context, code = _load_context_or_exit_code(args)
    if context is None:
        return code

    value = " ".join(args.value) if args.value else ""
    try:
        kind = resolve_entity_kind(args.kind.lower())
        matches = context.search(kind, args.field, value)
    except SearchError as e:
        logging.error("%s", e)
        return 2

    results = materialize(kind, matches, context.indexes)
    if args.format == "json":
        print(render_json(results))
    else:
        print(render_text(kind, results))

    if args.export_csv:
        try:
            export_csv(kind, matches, Path(args.export_csv))
        except (OSError, ValueError) as e:
            logging.error("Failed writing CSV: %s", e)
            return 1
    return 0


def _format_fields(kinds: List[EntityKind]) -> str:
    out = []
    for kind in kinds:
        out.append(f"{kind.value} ({kind.label}):")
        for name in list_fields(kind):
            out.append(f"  {name:<16} {get_accessor(kind, name).kind.value}")
    return "\n".join(out) + "\n"


def cmd_fields(args: argparse.Namespace) -> int:
    """List searchable fields and their kind tags."""
    kinds = [EntityKind(args.kind)] if getattr(args, "kind", None) else list(EntityKind)
    print(_format_fields(kinds), end="")
    return 0


def _handle_repl_line(context: SearchContext, line: str, stdout: TextIO) -> bool:
    """Process one input line. Returns False when the session should end."""
    text = line.strip()
    if not text:
        return True
    command = text.split()
    if command[0].lower() in ("quit", "exit") and len(command) == 1:
        return False
    if command[0].lower() == "help" and len(command) == 1:
        stdout.write(REPL_HELP)
        return True
    if command[0].lower() == "fields" and len(command) <= 2:
        try:
            kinds = (
                [resolve_entity_kind(command[1].lower())]
                if len(command) == 2
                else list(EntityKind)
            )
        except SearchError as e:
            stdout.write(f"Error: {e}\n")
            return True
        stdout.write(_format_fields(kinds))
        return True

    try:
        request = parse_search_input(line)
        results = context.search_materialized(request.kind, request.field_name, request.value)
    except ValueError as e:
        # SearchError is a ValueError, as is a malformed input line
        logging.debug("Query failed: %s", e)
        stdout.write(f"Error: {e}\n")
        return True

    stdout.write(render_text(resolve_entity_kind(request.kind), results) + "\n")
    return True


def run_repl(
    context: SearchContext, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> int:
    """Read queries line by line until EOF, printing results or errors.

    Errors in a query are printed and the prompt comes back; nothing a query
    does can end the session except EOF, ``quit``/``exit`` or Ctrl-C. Ctrl-C
    ends the session with 0 whether it arrives at the prompt or mid-query.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    counts = context.store.counts()
    stdout.write(
        f"{counts['organizations']} organizations.\n"
        f"{counts['users']} users.\n"
        f"{counts['tickets']} tickets.\n\n"
    )
    stdout.write("Type 'help' for the search format.\n")

    try:
        while True:
            stdout.write(PROMPT)
            stdout.flush()
            line = stdin.readline()
            if not line:
                stdout.write("\n")
                return 0
            if not _handle_repl_line(context, line, stdout):
                return 0
    except KeyboardInterrupt:
        stdout.write("\n")
        return 0


def cmd_repl(args: argparse.Namespace) -> int:
    """Start the interactive search prompt."""
    context, code = _load_context_or_exit_code(args)
    if context is None:
        return code
    return run_repl(context)


def _add_data_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        help=f"YAML/JSON config naming the data files (default: {DEFAULT_CONFIG_PATH})",
    )
    p.add_argument("--organizations", help="Organizations JSON file (overrides config)")
    p.add_argument("--users", help="Users JSON file (overrides config)")
    p.add_argument("--tickets", help="Tickets JSON file (overrides config)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="helpdesk-search",
        description=f"Search organizations, users and tickets (v{__version__})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="Run a single search and print the results")
    p_search.add_argument("kind", help="Entity kind: org, user or ticket")
    p_search.add_argument("field", help="Case-sensitive field name, e.g. OrganizationID")
    p_search.add_argument(
        "value", nargs="*", help="Search value (words are joined with spaces; may be empty)"
    )
    p_search.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )
    p_search.add_argument(
        "--export-csv", metavar="PATH", help="Also write the matched records to a CSV file"
    )
    _add_data_arguments(p_search)
    p_search.set_defaults(func=cmd_search)

    p_repl = sub.add_parser("repl", help="Interactive search prompt")
    _add_data_arguments(p_repl)
    p_repl.set_defaults(func=cmd_repl)

    p_fields = sub.add_parser("fields", help="List searchable fields")
    p_fields.add_argument(
        "kind", nargs="?", choices=ENTITY_KIND_CHOICES, help="Limit to one entity kind"
    )
    p_fields.set_defaults(func=cmd_fields)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
