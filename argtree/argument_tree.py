# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentTree`, the container that owns every declared argument.

The tree holds one synthetic root argument (kind `NULL`, long flag "root",
required). Its children are the top-level command line arguments. The tree also
counts the registered methods and options.

Registration never restructures or deduplicates: adding two arguments with the
same long flag is allowed, and lookups return the first one.
"""
from __future__ import annotations

from typing import Iterator

from argtree.argument import Argument
from argtree.argument_kind import ArgumentKind
from argtree.error_codes import NO_ERROR, ErrorCode
from argtree.exceptions import ArgumentRegistrationError
from argtree.logger import logger

ROOT_FLAG = "root"


class ArgumentTree:
    """Ownership container for the declared arguments."""

    def __init__(self) -> None:
        self.root: Argument = Argument(
            kind=ArgumentKind.NULL,
            short_flag="r",
            long_flag=ROOT_FLAG,
            required=True,
            help_msg="The root argument of the argument tree",
        )
        self.methods: int = 0
        self.options: int = 0
        logger.debug("Created the argument tree")

    @property
    def size(self) -> int:
        return len(self.root.children)

    def add_argument(self, argument: Argument) -> ErrorCode:
        """Register a top-level argument and update the method/option counters."""
        if not isinstance(argument, Argument):
            raise ArgumentRegistrationError(
                f"Expected an Argument, got {type(argument).__name__}"
            )
        logger.debug("Added '%s' to the argument tree", argument.long_flag)
        self.methods += bool(argument.kind & ArgumentKind.METHOD)
        self.options += bool(argument.kind & ArgumentKind.OPTION)
        self.root.add_child(argument)
        return NO_ERROR

    def get_argument(self, long_flag: str) -> Argument | None:
        """Return the first top-level argument with the given long flag."""
        for argument in self.root.children:
            if argument.long_flag == long_flag:
                return argument
        return None

    def __iter__(self) -> Iterator[Argument]:
        return iter(self.root.children)

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return self.root.string("  -> ")
