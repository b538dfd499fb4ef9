# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Datatype`, the set of value checks a parameter can declare, and the
validators behind them.

Each validator takes the raw token and returns an `ErrorCode`: `NO_ERR` when the
token is acceptable, otherwise the failure bits. Validators never raise.

Datatypes:
- int: Must parse completely as an integer literal; the base is detected from the
  prefix (`0x`, `0o`, `0b`), as Python's `int(token, 0)` does.
- string: Any non-empty token.
- file: Must name an existing filesystem entry. Paths the filesystem refuses to
  look up (too long, permission denied) count as wrong data.
- url: Must start with `http`.
- custom: Delegated to a callback set with `Argument.set_datatype_callback()`.

Example:
    Datatype("INT")  → Datatype.INT
    Datatype("str")  → Datatype.STRING (via alias)
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path

from argtree.error_codes import ErrorCode


class Datatype(Enum):
    """Datatype of a parameter value."""

    INT = "int"
    STRING = "string"
    FILE = "file"
    URL = "url"
    CUSTOM = "custom"

    @classmethod
    def choices(cls) -> list[Datatype]:
        """Return a list of all datatypes."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "integer": "int",
            "path": "file",
            "file_path": "file",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Datatype:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


def check_int(token: str, required: bool = False) -> ErrorCode:
    try:
        int(token, 0)
    except ValueError:
        if required:
            return ErrorCode.WRONG_DATA | ErrorCode.REQ_PARAM_NOT_FOUND
        return ErrorCode.WRONG_DATA
    return ErrorCode.NO_ERR


def check_string(token: str, required: bool = False) -> ErrorCode:
    return ErrorCode.NO_ERR if len(token) > 0 else ErrorCode.WRONG_DATA


def check_file(token: str, required: bool = False) -> ErrorCode:
    """Accept tokens naming an existing entry; unusable paths are WRONG_DATA."""
    if not token:
        return ErrorCode.WRONG_DATA
    try:
        exists = Path(token).exists()
    except (OSError, ValueError):
        # too long, not permitted or containing a NUL byte
        return ErrorCode.WRONG_DATA
    return ErrorCode.NO_ERR if exists else ErrorCode.WRONG_DATA


def check_url(token: str, required: bool = False) -> ErrorCode:
    """Accept tokens starting with 'http'; anything else is WRONG_DATA."""
    if token.startswith("http"):
        return ErrorCode.NO_ERR
    return ErrorCode.WRONG_DATA


VALIDATORS = {
    Datatype.INT: check_int,
    Datatype.STRING: check_string,
    Datatype.FILE: check_file,
    Datatype.URL: check_url,
}
