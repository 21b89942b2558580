"""
things-cli — drive the Things to-do manager through its URL scheme
"""

import argparse
import json
import sys

from things_cli import config
from things_cli.commands import (
    cmd_add,
    cmd_add_project,
    cmd_json,
    cmd_search,
    cmd_show,
    cmd_update,
    cmd_update_project,
    cmd_version,
)
from things_cli.exceptions import CliError

HELP_TEXT = """\
Usage: things-cli <command> [args...]

Global flags:
  --format text           Print "Dispatched <url>" instead of JSON (default: json)
  --activate              Bring Things to the foreground (default: open -g)
  --dry-run               Print the URL without launching it
  --timeout <seconds>     Give up on the launcher after N seconds
  --verbose, -v           Log launch events to stderr
  --version               Show version number

Commands:
  add                     - Create to-dos (needs --title, --titles, --use-clipboard
                            or --show-quick-entry)
    --title <text>          To-do title
    --titles <text>         Batch title (repeatable, one to-do per entry)
    --notes <text>          Notes
    --when <when>           today, tomorrow, evening, anytime, someday, date
    --deadline <date>       Deadline (YYYY-MM-DD or natural language)
    --tag <name>            Tag (repeatable)
    --checklist-item <t>    Checklist item (repeatable)
    --use-clipboard <mode>  replace-title, replace-notes, replace-checklist-items
    --list <name>           Project or area title
    --list-id <id>          Project or area ID
    --heading <name>        Heading inside the project
    --heading-id <id>       Heading ID
    --[no-]completed        Mark completed
    --[no-]canceled         Mark canceled
    --[no-]show-quick-entry Open Quick Entry instead of saving
    --[no-]reveal           Navigate to the new to-do
    --creation-date <iso>   Creation date
    --completion-date <iso> Completion date
  add-project             - Create a project
    --title, --notes, --when, --deadline, --tag, --area, --area-id,
    --to-do <title> (repeatable), --[no-]completed, --[no-]canceled,
    --[no-]reveal, --creation-date, --completion-date
  update                  - Update a to-do (needs --auth-token and --id)
    Text flags given as "" clear the field in Things.
    --title, --notes, --prepend-notes, --append-notes, --when, --deadline,
    --tag (replace all), --add-tag, --checklist-item, --prepend-checklist-item,
    --append-checklist-item, --list, --list-id, --heading, --heading-id,
    --[no-]completed, --[no-]canceled, --[no-]reveal, --[no-]duplicate,
    --creation-date, --completion-date
  update-project          - Update a project (needs --auth-token and --id)
    --title, --notes, --prepend-notes, --append-notes, --when, --deadline,
    --tag, --add-tag, --area, --area-id, --[no-]completed, --[no-]canceled,
    --[no-]reveal, --[no-]duplicate, --creation-date, --completion-date
  show                    - Reveal an item or list
    --id <id>               Item ID or built-in list (wins over --query)
    --query <name>          Area, project, tag or list name
    --filter <tag>          Filter by tag (repeatable)
  search [query]          - Open the search UI
  version                 - Show the Things version dialog
  json                    - Import a JSON payload
    --data <json>           Payload text ("-" reads stdin)
    --file <path>           Read payload from a file
    --auth-token <token>    Needed when the payload contains updates
    --[no-]reveal           Navigate to the imported items
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so flags work after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, activate, dry_run, verbose, timeout, remaining_argv).
    Handles --version directly.
    """
    fmt = "json"
    activate = False
    dry_run = False
    verbose = False
    timeout = None
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"things-cli {config.VERSION}")
            sys.exit(0)
        elif argv[i] == "--activate":
            activate = True
            i += 1
            continue
        elif argv[i] == "--dry-run":
            dry_run = True
            i += 1
            continue
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
            i += 1
            continue
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in ("json", "text"):
                raise CliError(f"[ERROR] Invalid format '{fmt}'. Use: json, text")
            i += 2
            continue
        elif argv[i] == "--timeout" and i + 1 < len(argv):
            timeout = _positive_float(argv[i + 1])
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    return fmt, activate, dry_run, verbose, timeout, remaining


def _positive_float(value):
    try:
        parsed = float(value)
    except ValueError as exc:
        raise CliError(f"[ERROR] --timeout must be a positive number, got '{value}'") from exc
    if parsed <= 0:
        raise CliError(f"[ERROR] --timeout must be a positive number, got '{value}'")
    return parsed


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def _flag(p, name):
    """Tri-state boolean: --name, --no-name, or absent (None)."""
    p.add_argument(f"--{name}", action=argparse.BooleanOptionalAction, default=None)


def _dates(p):
    p.add_argument("--creation-date", dest="creation_date")
    p.add_argument("--completion-date", dest="completion_date")


def _update_common(p):
    p.add_argument("--auth-token", dest="auth_token")
    p.add_argument("--id")
    p.add_argument("--title")
    p.add_argument("--notes")
    p.add_argument("--prepend-notes", dest="prepend_notes")
    p.add_argument("--append-notes", dest="append_notes")
    p.add_argument("--when")
    p.add_argument("--deadline")
    p.add_argument("--tag", dest="tags", action="append")
    p.add_argument("--add-tag", dest="add_tags", action="append")


def _update_flags(p):
    for name in ("completed", "canceled", "reveal", "duplicate"):
        _flag(p, name)
    _dates(p)


def build_parser():
    parser = _SubcommandParser(
        prog="things-cli",
        description="Drive the Things to-do manager through its URL scheme",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- add ---
    p = sub.add_parser("add")
    p.add_argument("--title")
    p.add_argument("--titles", action="append")
    p.add_argument("--notes")
    p.add_argument("--when")
    p.add_argument("--deadline")
    p.add_argument("--tag", dest="tags", action="append")
    p.add_argument("--checklist-item", dest="checklist_items", action="append")
    p.add_argument("--use-clipboard", dest="use_clipboard")
    p.add_argument("--list", dest="list_name")
    p.add_argument("--list-id", dest="list_id")
    p.add_argument("--heading")
    p.add_argument("--heading-id", dest="heading_id")
    for name in ("completed", "canceled", "show-quick-entry", "reveal"):
        _flag(p, name)
    _dates(p)
    p.set_defaults(func=cmd_add)

    # --- add-project ---
    p = sub.add_parser("add-project")
    p.add_argument("--title")
    p.add_argument("--notes")
    p.add_argument("--when")
    p.add_argument("--deadline")
    p.add_argument("--tag", dest="tags", action="append")
    p.add_argument("--area")
    p.add_argument("--area-id", dest="area_id")
    p.add_argument("--to-do", dest="to_dos", action="append")
    for name in ("completed", "canceled", "reveal"):
        _flag(p, name)
    _dates(p)
    p.set_defaults(func=cmd_add_project)

    # --- update ---
    p = sub.add_parser("update")
    _update_common(p)
    p.add_argument("--checklist-item", dest="checklist_items", action="append")
    p.add_argument("--prepend-checklist-item", dest="prepend_checklist_items", action="append")
    p.add_argument("--append-checklist-item", dest="append_checklist_items", action="append")
    p.add_argument("--list", dest="list_name")
    p.add_argument("--list-id", dest="list_id")
    p.add_argument("--heading")
    p.add_argument("--heading-id", dest="heading_id")
    _update_flags(p)
    p.set_defaults(func=cmd_update)

    # --- update-project ---
    p = sub.add_parser("update-project")
    _update_common(p)
    p.add_argument("--area")
    p.add_argument("--area-id", dest="area_id")
    _update_flags(p)
    p.set_defaults(func=cmd_update_project)

    # --- show ---
    p = sub.add_parser("show")
    p.add_argument("--id")
    p.add_argument("--query")
    p.add_argument("--filter", action="append")
    p.set_defaults(func=cmd_show)

    # --- search ---
    p = sub.add_parser("search")
    p.add_argument("query", nargs="?")
    p.set_defaults(func=cmd_search)

    # --- version ---
    sub.add_parser("version").set_defaults(func=cmd_version)

    # --- json ---
    p = sub.add_parser("json")
    p.add_argument("--data")
    p.add_argument("--file")
    p.add_argument("--auth-token", dest="auth_token")
    _flag(p, "reveal")
    p.set_defaults(func=cmd_json)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

_ERROR_TYPES = {
    "ValidationError": "validation",
    "DispatchContractError": "contract",
    "LaunchError": "launch",
    "LaunchCancelled": "cancelled",
}


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": _ERROR_TYPES.get(type(err).__name__, "cli_error"),
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    fmt = "json"
    try:
        fmt, activate, dry_run, verbose, timeout, remaining_argv = _extract_global_flags(argv)
        if activate:
            config.ACTIVATE = True
        config.RUNTIME_DRY_RUN = dry_run
        if verbose:
            config.LAUNCH_LOG_ENABLED = True

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt
        ns.timeout = timeout

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if handler is None:
            raise CliError(f"[ERROR] Unknown command: {ns.command}")
        handler(ns)

    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
