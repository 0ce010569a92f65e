"""
Command line entry point: `lazyrange version` and `lazyrange demo <name>`.

Demos are modules under `lazyrange.demos` exposing `execute()`; they are
imported by name only when requested.
"""

import argparse
import importlib

from lazyrange import __version__
from lazyrange.lib.config import Config
from lazyrange.lib.logger import Logger


class DemoNotFoundError(Exception):
    """Raised when no module `lazyrange.demos.<name>` exists."""


def _resolve_demo(name: str):
    """
    Import and return `lazyrange.demos.<name>`.

    Import failures inside an existing demo propagate unchanged.
    """

    module = f"lazyrange.demos.{name}"
    try:
        return importlib.import_module(module)
    except ModuleNotFoundError as e:
        if e.name == module:
            raise DemoNotFoundError(f"No demo named '{name}'") from None
        raise


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazyrange", description="Lazy sequence views and their demos")
    parser.add_argument("--config", help="path to a lazyrange.cfg file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("version", help="print the installed version").set_defaults(handler=cmd_version)

    p_demo = sub.add_parser("demo", help="run a demo program")
    p_demo.add_argument("name", help="module under lazyrange.demos, e.g. 'tiling' or 'piped'")
    p_demo.set_defaults(handler=cmd_demo)

    return parser


def cmd_version(_: argparse.Namespace) -> int:
    print(__version__)
    return 0


def cmd_demo(ns: argparse.Namespace) -> int:
    """
    Run one demo.

    Returns:
        int: 0 on success, 1 if the demo is missing, has no `execute()`, or
        fails. With `[dev] stack_trace_errors` on, failures are re-raised.
    """

    try:
        demo = _resolve_demo(ns.name)
    except DemoNotFoundError as e:
        Logger.error(str(e))
        return 1

    execute = getattr(demo, "execute", None)
    if not callable(execute):
        Logger.error(f"Demo '{ns.name}' is invalid: missing callable execute()")
        return 1

    Logger.info(f"Running demo '{ns.name}'...")
    try:
        execute()
    except Exception as e:
        if Config.get("dev", "stack_trace_errors", False):
            raise
        Logger.error(f"Failed to run demo '{ns.name}': {e}")
        return 1

    Logger.success("Demo complete.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse `argv`, load configuration, set the log level and dispatch."""

    ns = _build_parser().parse_args(argv)

    Logger.setup(Logger.INFO)
    Config.load(ns.config)
    Logger.set_level(Config.get("dev", "log_level"))

    return ns.handler(ns)
