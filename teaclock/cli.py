"""CLI entry: teaclock run [--config path] [--minutes N] [--plugin id ...] [--no-plugins]."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from teaclock.plugins import plugin_ids
from teaclock.runner import run
from teaclock.timer import validate_minutes

load_dotenv()

DEFAULT_CONFIG = "config/config.yaml"
LOG_DIR = Path("logs")


def _setup_logging() -> None:
    LOG_DIR.mkdir(exist_ok=True)
    log_file = LOG_DIR / "app.log"
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    formatter = logging.Formatter(fmt)
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    if not root.handlers:
        h_stderr = logging.StreamHandler(sys.stderr)
        h_stderr.setFormatter(formatter)
        root.addHandler(h_stderr)
        h_file = logging.FileHandler(log_file, encoding="utf-8")
        h_file.setFormatter(formatter)
        root.addHandler(h_file)


def _minutes(value: str) -> float:
    try:
        return validate_minutes(float(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _config_path(explicit: str | None) -> str | None:
    """Explicit --config must exist (checked by runner); the default is optional."""
    if explicit is not None:
        return explicit
    if Path(DEFAULT_CONFIG).exists():
        return DEFAULT_CONFIG
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tea Clock")
    sub = parser.add_subparsers(dest="command", required=True)
    run_parser = sub.add_parser("run", help="Start the timer and notify when tea is ready")
    run_parser.add_argument(
        "--config",
        default=None,
        help=f"Config file path (default: {DEFAULT_CONFIG} if present)",
    )
    run_parser.add_argument(
        "--minutes",
        type=_minutes,
        default=None,
        help="Steeping time in minutes (overrides config)",
    )
    group = run_parser.add_mutually_exclusive_group()
    group.add_argument(
        "--plugin",
        action="append",
        dest="plugins",
        default=None,
        metavar="ID",
        help=f"Install this plugin; repeat for several, in order (known: {', '.join(plugin_ids())})",
    )
    group.add_argument(
        "--no-plugins",
        action="store_true",
        help="Install no plugins",
    )
    sub.add_parser("plugins", help="List registered plugin ids")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "plugins":
        for plugin_id in plugin_ids():
            print(plugin_id)
        return

    _setup_logging()

    if args.command == "run":
        plugins = [] if args.no_plugins else args.plugins
        try:
            run(_config_path(args.config), args.minutes, plugins)
        except FileNotFoundError as e:
            logging.error("%s", e)
            sys.exit(1)
        except ValueError as e:
            logging.error("%s", e)
            sys.exit(1)


if __name__ == "__main__":
    main()
