# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token helpers used by the matcher.

Tokens are compared exactly: no prefix abbreviation, no case folding and no POSIX
bundling of short flags. `copy_sub_argv` builds the window handed to the children
of a matched argument: the owner token at index 0 followed by everything after the
matched position.
"""
from __future__ import annotations

from typing import Sequence

from argtree.argument_kind import ArgumentKind

LONG_PREFIX = "--"
SHORT_PREFIX = "-"


def has_prefix(token: str, prefix: str) -> bool:
    """Return True if the token starts with the given prefix."""
    return token[: len(prefix)] == prefix


def is_flag_like(token: str) -> bool:
    """Return True if the token looks like an option flag ('-x' or '--xyz')."""
    return has_prefix(token, SHORT_PREFIX) or has_prefix(token, LONG_PREFIX)


def flag_header(kind: int, form: str) -> str:
    """Return the dash prefix used by the kind for the 'long' or 'short' form."""
    if kind & (ArgumentKind.OPTION | ArgumentKind.WILDCARD):
        if form == "long":
            return LONG_PREFIX
        if form == "short":
            return SHORT_PREFIX
    return ""


def flag_tokens(kind: int, short_flag: str, long_flag: str) -> tuple[str, ...]:
    """Return the exact tokens that call an argument, skipping empty flags."""
    tokens = []
    if long_flag:
        tokens.append(f"{flag_header(kind, 'long')}{long_flag}")
    if short_flag:
        tokens.append(f"{flag_header(kind, 'short')}{short_flag}")
    return tuple(tokens)


def copy_sub_argv(argv: Sequence[str], start: int) -> list[str]:
    """
    Return the window for the children of the argument matched at `start`.

    The owner token `argv[0]` is kept at index 0, followed by `argv[start + 1:]`,
    so the result holds `len(argv) - start` tokens.
    """
    return [argv[0], *argv[start + 1 :]]
