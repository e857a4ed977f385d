"""Meta server administration and monitoring utility."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Sequence, TextIO

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from client.remote import RemoteExecutor, RemoteSetupError, close_executor, load_executor
from commands.dispatcher import AdminDispatcher
from commands.registry import CommandRegistry
from common.reporting import make_reporter, report_lines
from config.defaults import BACKEND_ENV, LOG_FORMAT, MAX_CONTENT_LENGTH, PROG_NAME
from protocol.envelope import ServerLocation

logger = logging.getLogger(PROG_NAME)

USAGE_LINES = (
    f"Usage: {PROG_NAME}",
    " -m|-s <meta server host name>",
    " -p <port>",
    " -f <config file name>",
    " [-v]",
    " [-b <backend module:factory>]",
    " --  <cmd> <cmd> ...",
    "Where cmd is one of the following:",
)


VALUE_FLAGS = frozenset("mspfb")


class InvocationError(ValueError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AdminArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise InvocationError(message)


def build_parser() -> AdminArgumentParser:
    parser = AdminArgumentParser(prog=PROG_NAME, add_help=False)
    parser.add_argument("-m", "-s", dest="server", default=None, help="meta server host name")
    parser.add_argument("-p", dest="port", type=int, default=-1, help="meta server port")
    parser.add_argument("-f", dest="config_file", default=None, help="client config file name")
    parser.add_argument("-v", dest="verbose", action="store_true", help="verbose (debug) logging")
    parser.add_argument("-h", dest="help", action="store_true", help="show usage and command list")
    parser.add_argument("-b", "--backend", default=None, help="remote backend as module:factory")
    parser.add_argument("commands", nargs="*", help="commands to execute, in order")
    return parser


def _split_at_separator(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    args = list(argv)
    if "--" not in args:
        return args, []
    index = args.index("--")
    return args[:index], args[index + 1 :]


def parse_options(argv: Sequence[str]) -> argparse.Namespace:
    head, tail = _split_at_separator(argv)
    options, extras = build_parser().parse_known_intermixed_args(head)
    if extras:
        raise InvocationError(f"unrecognized arguments: {' '.join(extras)}")
    options.commands = list(options.commands or []) + tail
    return options


def _help_in(argv: Sequence[str]) -> bool:
    for arg in _split_at_separator(argv)[0]:
        if not arg.startswith("-") or arg.startswith("--"):
            continue
        for flag in arg[1:]:
            if flag == "h":
                return True
            if flag in VALUE_FLAGS:
                # Rest of the cluster is the option's value.
                break
    return False


def print_usage(registry: CommandRegistry, stream: TextIO) -> None:
    reporter = make_reporter(stream)
    report_lines(reporter, list(USAGE_LINES))
    report_lines(reporter, registry.render_listing())


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    registry: CommandRegistry | None = None,
    executor: RemoteExecutor | None = None,
) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    registry = registry or CommandRegistry.default()
    report_error = make_reporter(stderr, style="red")

    try:
        options = parse_options(argv)
    except InvocationError as exc:
        report_error(f"{PROG_NAME}: {exc.message}")
        print_usage(registry, stdout if _help_in(argv) else stderr)
        return 1

    if options.help or not options.server or options.port < 0:
        print_usage(registry, stdout if options.help else stderr)
        return 0 if options.help else 1

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    location = ServerLocation(options.server, options.port)
    owned = executor is None
    try:
        if executor is None:
            executor = load_executor(options.backend or os.environ.get(BACKEND_ENV))
        executor.configure(location, options.config_file)
        executor.set_max_content_length(MAX_CONTENT_LENGTH)
    except RemoteSetupError as exc:
        report_error(f"{PROG_NAME}: {location}: {exc.message}")
        if owned:
            _close_quietly(executor)
        return 1
    except Exception as exc:  # noqa: BLE001
        report_error(f"{PROG_NAME}: {location}: {type(exc).__name__}: {exc}")
        if owned:
            _close_quietly(executor)
        return 1

    dispatcher = AdminDispatcher(registry, executor, report_error, stdout.buffer)
    try:
        return dispatcher.execute(location, options.commands)
    finally:
        if owned:
            _close_quietly(executor)


def _close_quietly(executor: RemoteExecutor | None) -> None:
    try:
        close_executor(executor)
    except Exception as exc:  # noqa: BLE001
        logger.warning("failed to close remote backend: %s: %s", type(exc).__name__, exc)


def run() -> int:
    try:
        return main()
    except KeyboardInterrupt:
        print(f"\n[{PROG_NAME}] interrupted", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(run())
