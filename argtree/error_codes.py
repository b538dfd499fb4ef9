# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ErrorCode`, the bitmask returned by every matching step of the parser.

Codes are independent bit flags rather than an exclusive enum: one parse pass can
report several problems at once, and child results are combined into their parent's
with bitwise OR.

`NO_ERR` is `1`, not `0`. A successful parse returns exactly `NO_ERROR`, so callers
must compare against the constant instead of testing for zero.

Exports:
    - ErrorCode: IntFlag of all error bits.
    - NO_ERROR: The success value (`ErrorCode.NO_ERR`).
    - describe_error: Human readable description of a bitmask.
"""
from __future__ import annotations

from enum import IntFlag


class ErrorCode(IntFlag):
    """
    Error bits reported by the matcher and the command line facade.

    Members:
        NO_ERR: No error (value 1).
        UNKNOWN_INPUT: Unknown option.
        INVALID_INPUT: Invalid option, wildcard or token in a parameter slot.
        REQ_ARG_NOT_FOUND: A required argument is missing.
        WRONG_DATA: A parameter failed its datatype check.
        HELP_WILDCARD: The help wildcard was requested.
        NOT_FOUND: An optional argument did not match the token.
        REQ_PARAM_NOT_FOUND: A required parameter is missing.
    """

    NO_ERR = 1
    UNKNOWN_INPUT = 2
    INVALID_INPUT = 4
    REQ_ARG_NOT_FOUND = 8
    WRONG_DATA = 16
    HELP_WILDCARD = 32
    NOT_FOUND = 64
    REQ_PARAM_NOT_FOUND = 128


NO_ERROR = ErrorCode.NO_ERR

_DESCRIPTIONS: tuple[tuple[ErrorCode, str], ...] = (
    (ErrorCode.INVALID_INPUT, "Invalid Input."),
    (ErrorCode.REQ_ARG_NOT_FOUND, "Required Argument could not be found."),
    (ErrorCode.WRONG_DATA, "The input data(type) is incorrect."),
    (ErrorCode.REQ_PARAM_NOT_FOUND, "Required Parameter could not be found."),
)


def describe_error(code: int) -> str:
    """
    Return a human readable description of an error bitmask.

    The help wildcard context is checked first, then the individual bits in order of
    severity. Only the first matching description is returned.

    Args:
        code (int): The bitmask returned by `CommandLine.parse()`.

    Returns:
        str: A one line description.
    """
    prefix = ""
    if code & ErrorCode.HELP_WILDCARD:
        prefix = "<Help - Wildcard> "
        code &= ~ErrorCode.HELP_WILDCARD

    if code & ~ErrorCode.NO_ERR == 0:
        return f"{prefix}No Error."
    for flag, description in _DESCRIPTIONS:
        if code & flag:
            return f"{prefix}{description}"
    return (
        f"{prefix}Err - No Error Description found. "
        "Sanity check advised or run with higher verbosity (if possible)."
    )
