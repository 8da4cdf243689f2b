from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into the immutable counting configuration.
"""

import argparse
import re
import sys
from typing import List, Optional, Sequence, Tuple

from fscount.core.components.filters import default_patterns
from fscount.domain.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TARGET_DIRECTORY,
    CountConfig,
    Depth,
)
from fscount.domain.errors import (
    TooManyPositionalArgumentsError,
    UnknownFlagError,
    UsageError,
)
from fscount.domain.log_level import LogLevel

PROG = "fscount"

_DIGITS_RX = re.compile(r"[0-9]+")

_DESCRIPTION = (
    "Count files or directories in the given directory and print the result."
)

_EPILOG = f"""\
examples:
  {PROG} -f .                      count every file below the current directory
  {PROG} -f -d -dp 1 /tmp          count files and directories directly in /tmp
  {PROG} -f -p '*.py,*.txt' src    count Python and text files below src
"""

# -----------------------------------------------------------------------------
# PARSER
# -----------------------------------------------------------------------------

class CountArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting on bad input."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> CountArgumentParser:
    """
    Construct the argument parser for the fscount CLI.

    Returns:
        CountArgumentParser: Configured parser instance.
    """
    p = CountArgumentParser(
        prog=PROG,
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    # --- Target ---
    p.add_argument(
        "targets",
        nargs="*",
        metavar="directory",
        help=f"directory whose files / directories will be counted (default: '{DEFAULT_TARGET_DIRECTORY}')",
    )

    # --- Entry Type Selection ---
    p.add_argument(
        "-f", "--files",
        dest="count_files",
        action="store_true",
        help="count files",
    )
    p.add_argument(
        "-d", "--directories",
        dest="count_directories",
        action="store_true",
        help="count directories",
    )

    # --- Traversal Constraints ---
    p.add_argument(
        "-dp", "--depth",
        dest="depth",
        type=_positive_int,
        default=None,
        metavar="<depth>",
        help="max depth for recursive count (infinite by default)",
    )
    p.add_argument(
        "-p", "--patterns",
        dest="patterns",
        type=_pattern_list,
        default=None,
        metavar="<patterns>",
        help="comma-separated name globs, e.g. '*.txt,*.md' (default: '*')",
    )

    # --- Diagnostics ---
    p.add_argument(
        "-l", "--log-level",
        dest="log_level",
        default=DEFAULT_LOG_LEVEL.value,
        metavar="<log_level>",
        help="log level: " + "|".join(level.value for level in LogLevel)
             + f" (default: {DEFAULT_LOG_LEVEL.value})",
    )

    return p


def parse_arguments(
        parser: argparse.ArgumentParser,
        argv: Optional[Sequence[str]] = None,
) -> argparse.Namespace:
    """
    Parse raw tokens, accepting flags and positionals in any order.

    Everything after the first "--" is positional, even when it starts
    with a dash. Tokens argparse could not place are either unknown flags
    (fatal) or surplus positionals, which are appended to 'targets' so
    that the positional count check sees all of them.

    Args:
        parser: Parser built by build_parser.
        argv: Raw tokens. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed arguments.

    Raises:
        UsageError: If a flag value is missing or malformed.
        UnknownFlagError: If an unrecognised flag is present.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    trailing: List[str] = []
    if "--" in tokens:
        split_at = tokens.index("--")
        tokens, trailing = tokens[:split_at], tokens[split_at + 1:]

    args, extras = parser.parse_known_intermixed_args(tokens)

    unknown_flags = [x for x in extras if x.startswith("-")]
    if unknown_flags:
        raise UnknownFlagError(f"Invalid parameter: {unknown_flags[0]}")

    args.targets = list(args.targets or []) + extras + trailing
    return args

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def resolve_log_level(args: argparse.Namespace) -> LogLevel:
    """
    Resolve the requested verbosity.

    Raises:
        InvalidLogLevelError: If the value is not a known level.
    """
    return LogLevel.parse(args.log_level)


def args_to_config(args: argparse.Namespace) -> CountConfig:
    """
    Translate the argparse Namespace into a counting configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        CountConfig: Validated, immutable configuration.

    Raises:
        InvalidLogLevelError: If the log level is unknown.
        TooManyPositionalArgumentsError: If more than one directory was given.
    """
    log_level = resolve_log_level(args)

    targets: List[str] = list(args.targets or [])
    if len(targets) > 1:
        raise TooManyPositionalArgumentsError(len(targets))
    target_directory = targets[0] if targets else DEFAULT_TARGET_DIRECTORY

    depth = Depth.unbounded() if args.depth is None else Depth.bounded(args.depth)
    patterns: Tuple[str, ...] = tuple(args.patterns or default_patterns())

    return CountConfig(
        target_directory=target_directory,
        count_files=bool(args.count_files),
        count_directories=bool(args.count_directories),
        depth=depth,
        patterns=patterns,
        log_level=log_level,
    )

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]


def _pattern_list(value: str) -> List[str]:
    patterns = _split_csv(value)
    if not patterns:
        raise argparse.ArgumentTypeError(f"no pattern given in '{value}'")
    return patterns


def _positive_int(value: str) -> int:
    # int() alone would also take "+3", " 2 " and "1_0"
    if not _DIGITS_RX.fullmatch(value):
        raise argparse.ArgumentTypeError(f"invalid depth '{value}': expected a positive integer")
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"invalid depth '{value}': expected a positive integer")
    return n
