# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argtree.

Problems in the token vector handed to `CommandLine.parse()` never raise; they are
reported through the `ErrorCode` bitmask. The exceptions below signal mistakes made
by the program that declares the argument tree, so they surface at registration or
configuration time.

All exceptions inherit from `ArgTreeError`, the base exception for the package.

Exception Hierarchy:
- ArgTreeError
    ├── InvalidArgumentKindError
    ├── InvalidDatatypeError
    ├── ArgumentRegistrationError
    └── ConfigError
"""


class ArgTreeError(Exception):
    """Base exception for argtree."""


class InvalidArgumentKindError(ArgTreeError, ValueError):
    """Exception raised when an argument kind combination is not well formed."""


class InvalidDatatypeError(ArgTreeError, ValueError):
    """Exception raised when a parameter datatype name is unknown."""


class ArgumentRegistrationError(ArgTreeError):
    """Exception raised when an argument cannot be attached to the tree."""


class ConfigError(ArgTreeError):
    """Exception raised when a configuration file cannot be turned into a command line."""
