"""Maze Game CLI entry point.

Provides subcommands for running the maze API server and for generating a
maze straight to the terminal. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import contextlib
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()

# Character -> color used when printing a maze to a terminal
TILE_COLORS = {
    "#": Fore.BLUE,
    "_": Style.DIM,
    "S": Fore.GREEN + Style.BRIGHT,
    "E": Fore.RED + Style.BRIGHT,
    "R": Fore.YELLOW,
    "T": Fore.MAGENTA,
}


def color_enabled(stream=None) -> bool:
    stream = stream or sys.stdout
    if os.getenv("NO_COLOR"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def colorize_rows(rows, enabled: bool = True) -> str:
    if not enabled:
        return "\n".join(rows)
    out = []
    for row in rows:
        out.append("".join(f"{TILE_COLORS.get(ch, '')}{ch}{Style.RESET_ALL}" for ch in row))
    return "\n".join(out)


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Maze Game

    Run the maze JSON API server or generate a maze in the terminal.
    Configuration can be provided via CLI flags or environment variables.
    If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST            Bind address for the web server (default: 0.0.0.0)
          PORT            Port for the web server (default: 5000)
          MAZE_WIDTH      Default maze width (default: 10)
          MAZE_HEIGHT     Default maze height (default: 10)
          MAZE_ROOMS      Default number of rooms (default: 2)
          MAZE_LOG_LEVEL  debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a seeded 21x15 maze with four rooms
          python run.py generate --width 21 --height 15 --rooms 4 --seed 7

          # Keep regenerating until the maze can be solved, emit JSON
          python run.py generate --require-solvable --json
        """
    )

    parser = argparse.ArgumentParser(
        prog="maze-game",
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
        version=f"Maze Game {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the maze API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask maze API server",
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

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a maze and print it as text or JSON",
    )
    gen_parser.add_argument("--width", type=int, default=None, help="Maze width (default: env MAZE_WIDTH or 10)")
    gen_parser.add_argument("--height", type=int, default=None, help="Maze height (default: env MAZE_HEIGHT or 10)")
    gen_parser.add_argument("--rooms", type=int, default=None, help="Number of rooms (default: env MAZE_ROOMS or 2)")
    gen_parser.add_argument("--seed", default=None, help="Integer or string seed (default: random)")
    gen_parser.add_argument(
        "--require-solvable",
        action="store_true",
        help="Regenerate with successive seeds until the maze is solvable",
    )
    gen_parser.add_argument(
        "--max-attempts",
        type=int,
        default=25,
        help="Attempt budget for --require-solvable (default: 25)",
    )
    gen_parser.add_argument("--json", action="store_true", help="Emit the maze as JSON")
    gen_parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def _report_error(exc) -> int:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if color_enabled(sys.stderr) else "[ERROR]"
    print(f"{prefix} {exc}", file=sys.stderr)
    return 2


def run_generate(args) -> int:
    try:
        from mazegame.maze import Maze, MazeConfig, MazeError
        from mazegame.services.maze_service import coerce_seed, generate_solvable
    except ValueError as exc:
        # MAZE_* settings are parsed when the app package is first imported
        return _report_error(exc)

    # Keep stdout pure JSON: events logged during generation go to stderr
    events_to = sys.stderr if args.json else sys.stdout
    try:
        with contextlib.redirect_stdout(events_to):
            base = MazeConfig.from_env()
            config = MazeConfig(
                width=args.width if args.width is not None else base.width,
                height=args.height if args.height is not None else base.height,
                num_rooms=args.rooms if args.rooms is not None else base.num_rooms,
                start_x=base.start_x,
                start_y=base.start_y,
                seed=coerce_seed(args.seed if args.seed is not None else base.seed),
                strict_border=base.strict_border,
            )
            if args.require_solvable:
                maze, attempts = generate_solvable(config, max_attempts=args.max_attempts)
            else:
                maze, attempts = Maze(config), 1
    except MazeError as exc:
        return _report_error(exc)

    if args.json:
        payload = maze.to_json()
        payload["attempts"] = attempts
        print(json.dumps(payload, indent=2))
        return 0

    use_color = color_enabled() and not args.no_color
    print(colorize_rows(maze.rows(), enabled=use_color))
    solvable = maze.is_solvable()
    verdict = "solvable" if solvable else "NOT solvable"
    if use_color:
        verdict = f"{Fore.GREEN if solvable else Fore.RED}{verdict}{Style.RESET_ALL}"
    print(f"seed={maze.seed} size={maze.width}x{maze.height} rooms={len(maze.rooms)} attempts={attempts} {verdict}")
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

    # Import server entrypoint only after environment is ready
    from mazegame.logging_utils import log
    from mazegame.server import start_server

    enabled = color_enabled()

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if enabled else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if enabled else str(val)

    title = f"{Fore.CYAN}{Style.BRIGHT}Maze Server Bootup{Style.RESET_ALL}" if enabled else "Maze Server Bootup"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if enabled else "=" * 40
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
    log.info(event="startup", mode=mode, host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
