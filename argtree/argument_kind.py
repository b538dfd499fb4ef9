# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, the flag set describing what a declared argument is.

Kinds are bit flags so that an option can also be a wildcard (for example `--help`,
which terminates the pipeline). Not every combination is meaningful:

- `METHOD` excludes every other kind.
- `OPTION` may carry `WILDCARD`, nothing else.
- `PARAM` stands alone.
- `WILDCARD` may carry `OPTION`, nothing else.
- `NULL` is the empty sentinel kind and stands alone.

`check_kind()` enforces these rules. Kinds can also be written as strings joined by
`|` (e.g. `"option|wildcard"`), which is how configuration files declare them.

Example:
    ArgumentKind("option|wildcard") → ArgumentKind.OPTION | ArgumentKind.WILDCARD
    kind_to_string(ArgumentKind.OPTION | ArgumentKind.WILDCARD) → "Option:Wildcard"
"""
from __future__ import annotations

from enum import IntFlag


class ArgumentKind(IntFlag):
    """
    Kind of a declared command line argument.

    Members:
        OPTION: Called with a "--long" or "-short" prefix.
        PARAM: A value consumed by an option or method, checked against a datatype.
        WILDCARD: An option that may short-circuit the pipeline (help, debug).
        METHOD: Called verbatim, without a dash prefix (e.g. `docker run`).
        NULL: The empty sentinel kind, used by the synthetic root.
    """

    OPTION = 1
    PARAM = 2
    WILDCARD = 4
    METHOD = 8
    NULL = 16

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if isinstance(value, str):
            kind = cls(0)
            for part in value.split("|"):
                name = part.strip().upper()
                if name not in cls.__members__:
                    valid = ", ".join(member.lower() for member in cls.__members__)
                    raise ValueError(
                        f"Invalid {cls.__name__}: '{value}'. Must be made of: {valid}"
                    )
                kind |= cls[name]
            return kind
        return super()._missing_(value)


_ORDER: tuple[tuple[ArgumentKind, str], ...] = (
    (ArgumentKind.METHOD, "Method"),
    (ArgumentKind.OPTION, "Option"),
    (ArgumentKind.PARAM, "Param"),
    (ArgumentKind.WILDCARD, "Wildcard"),
    (ArgumentKind.NULL, "Null"),
)


def check_kind(kind: int) -> bool:
    """Return True if the kind combination is well formed."""
    if kind & ArgumentKind.METHOD:
        return not kind & (
            ArgumentKind.OPTION
            | ArgumentKind.PARAM
            | ArgumentKind.WILDCARD
            | ArgumentKind.NULL
        )
    if kind & (ArgumentKind.OPTION | ArgumentKind.WILDCARD):
        return not kind & (ArgumentKind.PARAM | ArgumentKind.NULL)
    if kind & ArgumentKind.PARAM:
        return not kind & ArgumentKind.NULL
    if kind & ArgumentKind.NULL:
        return True
    return False


def kind_to_string(kind: int) -> str:
    """Return the kind names joined by ':' (e.g. 'Option:Wildcard')."""
    return ":".join(name for flag, name in _ORDER if kind & flag)
