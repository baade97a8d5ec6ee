"""roguegen CLI entry point.

Provides subcommands for running the map server and for generating a single
map straight to the terminal. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        from roguegen import __version__ as pkg_version

        return pkg_version


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    roguegen Dungeon Map Server

    Serve partition-tree dungeon maps over HTTP, or print one to the terminal.
    Configuration can be provided via CLI flags or environment variables. If
    both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                      Bind address for the web server (default: 0.0.0.0)
          PORT                      Port for the web server (default: 5000)
          DUNGEON_DEFAULT_WIDTH     Map width when a request omits w (default: 70)
          DUNGEON_DEFAULT_HEIGHT    Map height when a request omits h (default: 40)
          DUNGEON_DEFAULT_ROOMS     Room count when a request omits n (default: 10)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Run the server on a custom port
          python run.py server --port 8080

          # Print a reproducible 70x40 map with ten rooms
          python run.py generate --seed 42

          # Emit the map as JSON instead of text
          python run.py generate --width 80 --height 50 --rooms 12 --seed 7 --json
        """
    )

    parser = argparse.ArgumentParser(
        prog="roguegen",
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
        version=f"roguegen Dungeon Server {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the HTTP map server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask dungeon map server",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one map and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a single dungeon map and write it to stdout.",
    )
    gen_parser.add_argument("--width", type=int, default=70, help="Map width in cells (default: 70)")
    gen_parser.add_argument("--height", type=int, default=40, help="Map height in cells (default: 40)")
    gen_parser.add_argument("--rooms", type=int, default=10, help="Number of rooms (default: 10)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed (default: wall clock)")
    gen_parser.add_argument("--json", action="store_true", help="Print JSON (mesh + rooms) instead of text")
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def run_generate(args: argparse.Namespace) -> int:
    from roguegen.dungeon import Dungeon, DungeonConfig, DungeonError
    from roguegen.dungeon.render import to_dict, to_text

    try:
        config = DungeonConfig(width=args.width, height=args.height, room_num=args.rooms, seed=args.seed)
        dungeon = Dungeon.from_config(config)
    except DungeonError as e:
        prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
        print(f"{prefix} {e.field}: {e.message}", file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps(to_dict(dungeon)))
    else:
        sys.stdout.write(to_text(dungeon))
        print(f"seed={dungeon.seed}", file=sys.stderr)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return run_generate(args)

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
    from roguegen.logging_utils import log
    from roguegen.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Dungeon Map Server Bootup{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Dungeon Map Server Bootup"
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
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="startup", mode=mode, host=host, port=port)
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
