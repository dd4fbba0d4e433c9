"""Labyrinth CLI entry point.

Provides subcommands for running the Socket.IO maze server, printing a maze
to the terminal and checking generated mazes for structural problems.
Accepts configuration via flags and environment variables, with optional
.env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from pathlib import Path
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()

DEFAULT_CHECK_SEEDS = [101, 202, 303, 404, 505]


def _load_version() -> str:
    try:
        return (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Labyrinth Maze Server

    Generate perfect mazes with the hunt-and-kill algorithm. Run the
    Flask-SocketIO server for renderers, or print/check mazes from the
    terminal. CLI flags take precedence over environment variables.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                 Bind address for the web server (default: 0.0.0.0)
          PORT                 Port for the web server (default: 5000)
          MAZE_SAMPLING        Direction sampling policy: retry | filtered (default: retry)
          LABYRINTH_LOG_LEVEL  debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a seeded 8x12 maze
          python run.py generate --rows 8 --columns 12 --seed 42

          # Same maze as JSON wall flags
          python run.py generate --rows 8 --columns 12 --seed 42 --json

          # Check a few seeds for connectivity / spanning-tree violations
          python run.py check --rows 20 --columns 20 101 202 303
        """
    )

    parser = argparse.ArgumentParser(
        prog="Labyrinth",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Labyrinth Maze Server {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the Socket.IO web server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the real-time Flask/Socket.IO server",
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode with verbose error pages")
    server_parser.set_defaults(command="server")

    def add_maze_options(p):
        # Dimensions stay raw text: the same best-effort parsing the UI gets.
        p.add_argument("--rows", default="2", help="Row count (min 2; unparseable text falls back to 2)")
        p.add_argument("--columns", default="2", help="Column count (min 2; unparseable text falls back to 2)")
        p.add_argument(
            "--sampling",
            choices=["retry", "filtered"],
            default=None,
            help="Direction sampling policy (default: env MAZE_SAMPLING or retry)",
        )

    gen_parser = subparsers.add_parser(
        "generate",
        help="Print a maze to stdout",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_maze_options(gen_parser)
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    gen_parser.add_argument("--json", action="store_true", help="Print wall flags as JSON instead of ASCII")
    gen_parser.set_defaults(command="generate")

    check_parser = subparsers.add_parser(
        "check",
        help="Generate mazes for the given seeds and verify they are perfect",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_maze_options(check_parser)
    check_parser.add_argument("seeds", nargs="*", type=int, help=f"Seeds to check (default: {DEFAULT_CHECK_SEEDS})")
    check_parser.set_defaults(command="check")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def _run_generate(args) -> int:
    from labyrinth.maze import generate, parse_dimension, render_ascii

    rows = parse_dimension(args.rows, 2)
    columns = parse_dimension(args.columns, 2)
    result = generate(rows, columns, seed=args.seed, sampling=args.sampling)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(render_ascii(result))
        print(f"seed={result.seed} rows={result.rows} columns={result.columns} sampling={result.sampling}")
    return 0


def _run_check(args) -> int:
    from labyrinth.logging_utils import log
    from labyrinth.maze import analyze, generate, parse_dimension

    rows = parse_dimension(args.rows, 2)
    columns = parse_dimension(args.columns, 2)
    seeds = args.seeds or DEFAULT_CHECK_SEEDS
    results = [analyze(generate(rows, columns, seed=s, sampling=args.sampling)) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    failed = [r["seed"] for r in results if not r["ok"]]
    if failed:
        log.error(event="check_failed", seeds=",".join(str(s) for s in failed))
        return 1
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()

    if mode in ("generate", "check"):
        os.environ.setdefault("LABYRINTH_SUPPRESS_ROUTE_MAP", "1")
        return _run_generate(args) if mode == "generate" else _run_check(args)

    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))
    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from labyrinth.logging_utils import log
    from labyrinth.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Labyrinth Maze Server{Style.RESET_ALL}" if _COLOR_ENABLED else "Labyrinth Maze Server"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Version:'):12} {value(__version__)}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Sampling:'):12} {value(os.getenv('MAZE_SAMPLING', 'retry'))}",
        f"  {label('WebSockets:'):12} {value('enabled')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="startup", mode=mode, host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
