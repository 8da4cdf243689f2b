from __future__ import annotations

"""
Logging Configuration Models.

Defines the data structure required to initialize the logging subsystem
and the console line layout shared by every log event of the tool.
"""

from dataclasses import dataclass
from typing import Optional, TextIO

from fscount.domain.log_level import LogLevel

DEFAULT_PROGRAM_NAME: str = "fscount"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum verbosity to emit. NONE silences every event.
        console: Flag to enable stream output.
        program_name: Name printed in front of every log line.
        stream: Target stream; resolved to sys.stderr at configuration time.
        console_fmt: Structural format for terminal output. '{prog}' is
                     replaced with the program name.
    """
    level: LogLevel = LogLevel.INFO
    console: bool = True
    program_name: str = DEFAULT_PROGRAM_NAME
    stream: Optional[TextIO] = None

    console_fmt: str = "{prog} [%(levelname)s] %(message)s"

    def render_format(self) -> str:
        """Console format with the program name substituted."""
        return self.console_fmt.replace("{prog}", self.program_name)
