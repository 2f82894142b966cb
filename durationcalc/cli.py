"""Command line entry point.

Examples:
    $ durationcalc "3d 20h 10m 15s"
    92h 10m 15s

    $ printf '2d 5h\\n-20m\\n' | durationcalc 23m - 15s
    52h 40m 00s
    53h 02m 45s
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from durationcalc.config import Settings, load_config
from durationcalc.errors import ParseError
from durationcalc.logging_config import configure_logging
from durationcalc.totals import (
    accumulate,
    argument_tokens,
    format_duration,
    stdin_tokens,
)

logger = logging.getLogger(__name__)

PROG = "durationcalc"
EXIT_PARSE_ERROR = 1
EXIT_INPUT_ERROR = 1

# Option spellings; any other argument, even one starting with "-", is a duration
_VALUE_OPTIONS = {"-t", "--total-prefix", "-s", "--stdin-sum-prefix"}
_FLAG_OPTIONS = {"-c", "--compact", "-v", "--verbose", "-h", "--help"}


class _Once(argparse.Action):
    """Store an option, rejecting it when given a second time."""

    def __call__(self, parser, namespace, values, option_string=None):
        seen = namespace.__dict__.setdefault("_given_options", set())
        if self.dest in seen:
            parser.error(f"{option_string} provided more than once")
        seen.add(self.dest)
        setattr(namespace, self.dest, self.const if self.nargs == 0 else values)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Sum durations like '3d 20h 10m 15s' from stdin and arguments.",
    )
    parser.add_argument(
        "-c",
        "--compact",
        action=_Once,
        nargs=0,
        const=True,
        default=settings.compact,
        help="print totals without spaces, e.g. 52h40m00s",
    )
    parser.add_argument(
        "-t",
        "--total-prefix",
        action=_Once,
        default=settings.total_prefix,
        metavar="PREFIX",
        help="prefix the final total with PREFIX",
    )
    parser.add_argument(
        "-s",
        "--stdin-sum-prefix",
        action=_Once,
        default=settings.stdin_prefix,
        metavar="PREFIX",
        help="prefix the standard input total with PREFIX",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log parsing steps to stderr"
    )
    parser.add_argument(
        "durations",
        nargs="*",
        metavar="DURATION",
        help="durations to add, e.g. 2h 30m, -15m; a lone - negates the next one",
    )
    return parser


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate option arguments from duration tokens, keeping token order.

    Durations such as ``-20m`` would otherwise be rejected by argparse as
    unknown options.
    """
    options: list[str] = []
    durations: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            durations.extend(args)
        elif arg in _VALUE_OPTIONS:
            options.append(arg)
            value = next(args, None)
            if value is not None:
                options.append(value)
        elif arg in _FLAG_OPTIONS or arg.startswith("--"):
            options.append(arg)
        else:
            durations.append(arg)
    return options, durations


def _prefix(text: str) -> str:
    return f"{text} " if text else ""


def read_stdin(stream: TextIO | None) -> list[str]:
    """Return stdin lines, or nothing when stdin is closed or an interactive terminal."""
    if stream is None or stream.isatty():
        return []
    return stream.read().splitlines()


def compute_lines(
    lines: Sequence[str],
    args: Sequence[str],
    compact: bool = False,
    stdin_prefix: str = "",
    total_prefix: str = "",
) -> list[str]:
    """Build the output lines for the given stdin lines and argument tokens.

    The standard input total is listed first when stdin held any duration;
    the combined total follows when there were arguments.
    """
    output: list[str] = []
    stdin_values = list(stdin_tokens(lines))
    total = accumulate(0, stdin_values)
    if stdin_values:
        output.append(_prefix(stdin_prefix) + format_duration(total, compact))

    tokens = list(argument_tokens(args))
    if tokens:
        total = accumulate(total, tokens)
        output.append(_prefix(total_prefix) + format_duration(total, compact))
    return output


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin

    options, durations = split_argv(argv)
    try:
        settings = load_config()
    except ValueError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 2
    parser = build_parser(settings)
    namespace = parser.parse_args(options)

    try:
        configure_logging("DEBUG" if namespace.verbose else settings.log_level)
    except ValueError:
        parser.error(f"invalid log level {settings.log_level!r}")

    try:
        lines = read_stdin(stdin)
    except (UnicodeDecodeError, OSError) as exc:
        print(f"{PROG}: cannot read standard input: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    logger.debug(
        "collected input", extra={"stdin_lines": len(lines), "arguments": durations}
    )
    try:
        output = compute_lines(
            lines,
            durations,
            compact=namespace.compact,
            stdin_prefix=namespace.stdin_sum_prefix,
            total_prefix=namespace.total_prefix,
        )
    except ParseError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    for line in output:
        print(line)
    return 0
