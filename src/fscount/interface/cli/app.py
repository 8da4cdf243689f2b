from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration resolution, pre-flight validation of the target directory,
counting, and result rendering. Every fatal error is detected before the
first enumeration query, so no partial count is ever reported.
"""

import sys
from typing import List, Optional

from fscount.core.services.counter import count
from fscount.domain.config import DEFAULT_LOG_LEVEL, CountConfig
from fscount.domain.count_models import CountResult
from fscount.domain.errors import EXIT_CODE_SUCCESS, FsCountError, UsageError
from fscount.domain.log_level import LogLevel
from fscount.infra.fs import resolve_target_directory
from fscount.infra.logging import LoggingConfig, configure_logging, get_logger
from fscount.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for any validation failure).
    """
    # 1. Logging bootstrap at default verbosity until the real level is known
    configure_logging(_logging_config(DEFAULT_LOG_LEVEL), force=True)

    # 2. Argument parsing phase (-h/--help exits here with status 0)
    parser = cli_args.build_parser()
    try:
        args = cli_args.parse_arguments(parser, argv)
    except UsageError as e:
        logger.error(str(e))
        parser.print_usage(sys.stderr)
        return e.exit_code

    # 3. Configuration resolution and validation
    try:
        log_level = cli_args.resolve_log_level(args)
        configure_logging(_logging_config(log_level), force=True)

        logger.debug("Script start")
        logger.debug(f"Arguments {' '.join(argv if argv is not None else sys.argv[1:])}")

        config = cli_args.args_to_config(args)
        root = resolve_target_directory(config.target_directory)
    except FsCountError as e:
        logger.error(str(e))
        return e.exit_code

    # 4. Counting phase
    logger.info(f"Targeting directory: {config.target_directory}")
    result = count(config, root=root)

    # 5. Output rendering phase
    _print_result(config, result)
    logger.debug("Script end")
    return EXIT_CODE_SUCCESS

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_result(config: CountConfig, result: CountResult) -> None:
    """
    Print the final count line to the standard output.

    The line is emitted at every verbosity, NONE included, and is tagged
    with the configured level name.

    Args:
        config: Configuration of the run.
        result: Aggregated count.
    """
    for item in result.breakdown:
        logger.debug(f"{item.entry_type.name.lower()} '{item.pattern}': {item.count}")
    print(f"{cli_args.PROG} [{config.log_level.value}] Count is {result.total}")


def _logging_config(level: LogLevel) -> LoggingConfig:
    return LoggingConfig(level=level, console=True, program_name=cli_args.PROG)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
