"""Lightbound CLI entry point.

Provides subcommands for running the maze API server and for printing a
generated maze to the terminal. Accepts configuration via flags and
environment variables, with optional .env loading.

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

from lightbound import __version__

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Lightbound maze server

    Serve procedurally generated looping mazes over a JSON API, or print one
    to the terminal. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                       Bind address for the web server (default: 0.0.0.0)
          PORT                       Port for the web server (default: 5000)
          MAZE_WIDTH / MAZE_HEIGHT   Default maze dimensions (default: 11x11)
          MAZE_MAX_RECURSION         Carve depth cap (default: 100)
          MAZE_WALL_TO_FLOOR_CHANCE  Wall loosening probability (default: 0.1)
          MAZE_RANDOM_SIZE           Pick odd sizes in [MAZE_MIN_SIZE, MAZE_MAX_SIZE]
          MAZE_SEED                  Fixed seed for reproducible mazes
          MAZE_MAX_DIMENSION         Largest width/height the API will build (default: 201)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a 21x15 maze for seed 42
          python run.py generate --width 21 --height 15 --seed 42

          # Perfect maze (no loops) as JSON
          python run.py generate --chance 0 --json
        """
    )

    parser = argparse.ArgumentParser(
        prog="Lightbound",
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
        "--log-level",
        dest="log_level",
        choices=["debug", "info", "warn", "warning", "error"],
        help="Structured log threshold (default: env LIGHTBOUND_LOG_LEVEL or info)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Lightbound {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the maze API web server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Print a maze as ASCII (# wall, . floor, S start, E exit) or JSON.",
    )
    gen_parser.add_argument("--width", type=int, default=None, help="Grid width (odd recommended)")
    gen_parser.add_argument("--height", type=int, default=None, help="Grid height (odd recommended)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    gen_parser.add_argument("--chance", type=float, default=None, help="Wall loosening probability in [0, 1]")
    gen_parser.add_argument("--depth", type=int, default=None, help="Maximum carve depth")
    gen_parser.add_argument(
        "--random-size", action="store_true", default=None, help="Pick random odd dimensions from env bounds"
    )
    gen_parser.add_argument("--json", action="store_true", help="Emit the JSON payload served by /api/maze")
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def _generate(args) -> int:
    from lightbound.maze import MazeConfig, MazeConfigError, generate
    from lightbound.maze.api_helpers.tiles import render_ascii

    try:
        config = MazeConfig.from_env(
            width=args.width,
            height=args.height,
            seed=args.seed,
            wall_to_floor_chance=args.chance,
            max_recursion=args.depth,
            random_size=args.random_size,
        )
        maze = generate(config)
    except MazeConfigError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps(maze.to_dict()))
        return 0
    print(render_ascii(maze))
    exit_desc = f"{maze.exit[0]},{maze.exit[1]}" if maze.exit else "none"
    print(f"seed={maze.seed} size={maze.width}x{maze.height} exit={exit_desc}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()
    if getattr(args, "log_level", None):
        from lightbound.logging_utils import set_level

        set_level(args.log_level)

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return _generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoint only after environment is ready
    from lightbound.logging_utils import log
    from lightbound.server import start_server

    title = f"{Fore.CYAN}{Style.BRIGHT}Lightbound Maze Server{Style.RESET_ALL}" if _COLOR_ENABLED else "Lightbound Maze Server"

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
