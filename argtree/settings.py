# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Runtime configuration shared by a `CommandLine` and its matcher.

`CommandLineSettings` holds the verbosity level and the switches that change how
tokens are matched. One instance is created per `CommandLine` (or passed in by the
caller) and handed by reference to the `ArgumentMatcher`, so a verbosity escalation
seen during the help/verbosity pre-scan is visible to every later matching step.

Verbosity maps onto the `argtree` logger level:
- OFF: the logger level is left alone
- SIMPLE: INFO
- FULL: DEBUG

The logger is process wide, so constructing settings with SIMPLE or FULL changes
the level for every `CommandLine`. Escalations made by the `-vCLI` switch during
`CommandLine.parse()` are undone when the parse returns.

Typical Usage:
    settings = CommandLineSettings(verbosity=Verbosity.SIMPLE)
    command_line = CommandLine(settings=settings)
    if settings.is_verbose(Verbosity.FULL):
        ...
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from argtree.logger import logger


class Verbosity(IntEnum):
    OFF = 0
    SIMPLE = 1
    FULL = 2

    @classmethod
    def _missing_(cls, value: object) -> Verbosity:
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Invalid {cls.__name__}: {value!r}")


_LOG_LEVELS = {
    Verbosity.SIMPLE: logging.INFO,
    Verbosity.FULL: logging.DEBUG,
}


@dataclass
class CommandLineSettings:
    """
    Options that control a `CommandLine` parse.

    Attributes:
        verbosity (Verbosity): Amount of trace logging.
        help_flags (tuple[str, ...]): Tokens that request the full usage.
        verbose_flags (tuple[str, ...]): Tokens that escalate verbosity to FULL.
        enforce_choices (bool): Reject parameter values outside `Argument.choices`.
        enforce_excludes (bool): Flag parsed arguments named in another parsed
            argument's `Argument.excludes`.
    """

    verbosity: Verbosity = Verbosity.OFF
    help_flags: tuple[str, ...] = ("-h", "--help")
    verbose_flags: tuple[str, ...] = ("-vCLI", "--verboseCLI")
    enforce_choices: bool = False
    enforce_excludes: bool = False

    def __post_init__(self) -> None:
        self.verbosity = Verbosity(self.verbosity)
        self._apply_log_level()

    def _apply_log_level(self) -> None:
        level = _LOG_LEVELS.get(self.verbosity)
        if level is not None:
            logger.setLevel(level)

    def escalate(self, verbosity: Verbosity | int | str = Verbosity.FULL) -> None:
        """Raise the verbosity to at least the given level."""
        verbosity = Verbosity(verbosity)
        if verbosity > self.verbosity:
            self.verbosity = verbosity
            self._apply_log_level()
            logger.debug("Verbosity escalated to %s", self.verbosity.name)

    def is_verbose(self, verbosity: Verbosity | int = Verbosity.SIMPLE) -> bool:
        return self.verbosity >= verbosity
