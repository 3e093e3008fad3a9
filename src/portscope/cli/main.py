"""
Command-line interface for portscope.

Shows which processes are listening on which TCP ports, kills a process by
PID, or opens a local port in the browser. It stands in for the desktop UI
and goes through the same entry points in ``portscope.api``.
"""

import argparse
import json
import tomllib
import logging
import sys
import webbrowser
from pathlib import Path
from typing import List, Optional

from .. import api
from ..config import set_config_path
from ..models.report import PortInfo
from ..validation import (
    ErrorSeverity,
    PortscopeError,
    ValidationError,
    handle_cli_error,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"

TABLE_HEADERS = ("PROCESS", "PID", "USER", "CPU%", "MEM%", "PORTS", "COMMAND")


def setup_logging(verbosity: int) -> None:
    """Configure root logging; logs go to stderr so stdout stays parseable."""
    if verbosity > 0:
        level = logging.DEBUG
    elif verbosity < 0:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def format_report_table(rows: List[PortInfo]) -> str:
    """Render report rows as an aligned text table, one line per PID."""
    lines = [TABLE_HEADERS]
    for row in rows:
        for index, pid_info in enumerate(row.pids):
            lines.append((
                row.process_name if index == 0 else "",
                str(pid_info.pid),
                pid_info.user,
                pid_info.cpu,
                pid_info.mem,
                pid_info.ports,
                row.command,
            ))

    # Command is left unpadded; it is the last column and can be long
    widths = [max(len(line[col]) for line in lines) for col in range(len(TABLE_HEADERS) - 1)]
    rendered = []
    for line in lines:
        cells = [cell.ljust(width) for cell, width in zip(line, widths)]
        cells.append(line[-1])
        rendered.append("  ".join(cells).rstrip())
    return "\n".join(rendered)


def cmd_list(args: argparse.Namespace) -> int:
    rows = api.list_ports()
    if args.json:
        print(json.dumps([row.to_dict() for row in rows], indent=2))
    elif rows:
        print(format_report_table(rows))
    else:
        print("No listening TCP ports found.")
    return 0


def cmd_kill(args: argparse.Namespace) -> int:
    print(api.kill_process(args.pid))
    return 0


def cmd_open(args: argparse.Namespace) -> int:
    port = validate_positive_integer(args.port, min_value=1, max_value=65535, field_name="port")
    url = f"http://localhost:{port}"
    logger.info(f"Opening {url}")
    if not webbrowser.open(url):
        logger.warning(f"No browser available to open {url}")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portscope",
        description="Show which processes listen on which TCP ports, and kill them.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a config.toml file (defaults to conf/config.toml or $PORTSCOPE_CONFIG).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_const", const=1, dest="verbosity",
        help="Enable debug logging.",
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_const", const=-1, dest="verbosity",
        help="Only log warnings and errors.",
    )
    parser.set_defaults(verbosity=0)

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List listening ports grouped by process.")
    list_parser.add_argument("--json", action="store_true", help="Print the report as JSON.")
    list_parser.set_defaults(func=cmd_list)

    kill_parser = subparsers.add_parser("kill", help="Forcefully kill a process (SIGKILL).")
    kill_parser.add_argument("pid", help="Process ID to kill.")
    kill_parser.set_defaults(func=cmd_kill)

    open_parser = subparsers.add_parser("open", help="Open http://localhost:PORT in a browser.")
    open_parser.add_argument("port", help="Local port to open.")
    open_parser.set_defaults(func=cmd_open)

    return parser


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for portscope.

    Raises:
        SystemExit: Always, with the command's exit status; 1 on any error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbosity)

    if args.config is not None:
        set_config_path(args.config)

    try:
        exit_code = args.func(args)
    except ValidationError as e:
        print(str(e), file=sys.stderr)
        handle_cli_error(
            error=e,
            context=f"{args.command} argument validation",
            severity=ErrorSeverity.DEBUG,
            logger=logger,
        )
    except (PortscopeError, FileNotFoundError, tomllib.TOMLDecodeError) as e:
        print(str(e), file=sys.stderr)
        handle_cli_error(
            error=e, context=args.command, severity=ErrorSeverity.DEBUG, logger=logger
        )

    sys.exit(exit_code)


if __name__ == "__main__":
    main_cli()
