"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argument import Argument, new_argument, new_parameter
from .argument_kind import ArgumentKind
from .argument_tree import ArgumentTree
from .command_line import CommandLine
from .config import loader
from .datatypes import Datatype
from .error_codes import NO_ERROR, ErrorCode, describe_error
from .matcher import ArgumentMatcher
from .options import Options
from .settings import CommandLineSettings, Verbosity
from .version import __version__

logger = logging.getLogger("argtree")


__all__ = [
    "Argument",
    "ArgumentKind",
    "ArgumentMatcher",
    "ArgumentTree",
    "CommandLine",
    "CommandLineSettings",
    "Datatype",
    "ErrorCode",
    "NO_ERROR",
    "Options",
    "Verbosity",
    "describe_error",
    "loader",
    "new_argument",
    "new_parameter",
    "__version__",
]
