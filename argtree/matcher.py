# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ArgumentMatcher`, the recursive algorithm that walks a token vector
against the argument tree and fills the result tree.

Matching one argument against a token window (`argv[0]` is the owner token, the rest
is matched):

1. A required argument with nothing to consume reports `REQ_ARG_NOT_FOUND`.
2. Tokens are scanned left to right. Tokens that do not match are skipped, so a
   flag may appear anywhere in the window.
3. On the first match the argument is attached to the result tree. If it has
   children, each child is matched against the window that follows the matched
   token, attaching under the argument's own result node. Child codes are OR-ed;
   a required child of an optional argument does not make the branch mandatory.
   The first match decides: no other position is tried.
4. A match on the last token leaves no room for parameters: required children are
   reported missing.
5. If nothing matched, the code of the last mismatch is reported, except plain
   `NOT_FOUND` (an optional argument that is simply absent).

Nothing raises. Every problem is an `ErrorCode` bit.
"""
from __future__ import annotations

from typing import Sequence

from argtree.argument import Argument
from argtree.argument_kind import ArgumentKind
from argtree.datatypes import VALIDATORS
from argtree.error_codes import ErrorCode
from argtree.logger import logger
from argtree.options import Options
from argtree.settings import CommandLineSettings
from argtree.tokens import copy_sub_argv, is_flag_like

CALLABLE_KINDS = ArgumentKind.OPTION | ArgumentKind.WILDCARD | ArgumentKind.METHOD


def attach_options(argument: Argument, parent_result: Options, token: str) -> Options:
    """Append a new parsed result node for the argument under `parent_result`."""
    options = Options(
        key=argument.long_flag,
        value=token,
        kind=argument.kind,
        parsed=True,
    )
    return parent_result.add_options(options)


class ArgumentMatcher:
    """
    Matches arguments against token windows.

    The matcher reads its `CommandLineSettings` by reference, so changes made by the
    owning `CommandLine` are seen on the next match.
    """

    def __init__(self, settings: CommandLineSettings | None = None) -> None:
        self.settings: CommandLineSettings = settings or CommandLineSettings()

    def match_token(self, argument: Argument, token: str) -> ErrorCode:
        """
        Check a single token against an argument.

        Options and wildcards match "--long_flag" or "-short_flag", methods match
        their flags verbatim, parameters are validated against their datatype.

        Returns:
            ErrorCode: `NO_ERR` on a match, otherwise the failure bits.
        """
        kind = argument.kind
        if kind & CALLABLE_KINDS and token in argument.call_tokens():
            return ErrorCode.NO_ERR

        if kind & ArgumentKind.PARAM:
            code = self._match_param(argument, token)
            if code is not None:
                return code

        if argument.required:
            return ErrorCode.REQ_ARG_NOT_FOUND
        return ErrorCode.NOT_FOUND

    def _match_param(self, argument: Argument, token: str) -> ErrorCode | None:
        if is_flag_like(token):
            # an option flag can never fill a parameter slot
            return (
                ErrorCode.REQ_PARAM_NOT_FOUND
                | ErrorCode.INVALID_INPUT
                | ErrorCode.WRONG_DATA
            )

        validator = VALIDATORS.get(argument.datatype)  # type: ignore[arg-type]
        if argument.is_custom_datatype:
            code = self._check_custom(argument, token)
        elif validator is not None:
            code = validator(token, argument.required)
        else:
            # no callback set: the default check runs and its result is dropped
            argument.datatype_check(token)
            logger.debug(
                "No datatype check for parameter '%s', token '%s' not matched",
                argument.long_flag,
                token,
            )
            return None

        if code == ErrorCode.NO_ERR and not self._in_choices(argument, token):
            code = ErrorCode.WRONG_DATA
            if argument.required:
                code |= ErrorCode.REQ_PARAM_NOT_FOUND
        return code

    def _check_custom(self, argument: Argument, token: str) -> ErrorCode:
        result = argument.datatype_check(token)
        if isinstance(result, bool):
            if result:
                return ErrorCode.NO_ERR
        elif isinstance(result, int):
            return ErrorCode(result)
        else:
            logger.warning(
                "Datatype check of '%s' returned %r, expected an ErrorCode or bool",
                argument.long_flag,
                result,
            )
        if argument.required:
            return ErrorCode.WRONG_DATA | ErrorCode.REQ_PARAM_NOT_FOUND
        return ErrorCode.WRONG_DATA

    def _in_choices(self, argument: Argument, token: str) -> bool:
        if not self.settings.enforce_choices or not argument.choices:
            return True
        return token in argument.choices

    def _missing_children(self, argument: Argument) -> ErrorCode:
        code = ErrorCode(0)
        for child in argument.children:
            if not child.required:
                continue
            if child.kind & ArgumentKind.PARAM:
                if argument.required and argument.kind & CALLABLE_KINDS:
                    code |= ErrorCode.REQ_PARAM_NOT_FOUND
            else:
                code |= ErrorCode.REQ_ARG_NOT_FOUND
        return code

    def _parse_children(
        self, argument: Argument, argv: Sequence[str], attach_point: Options
    ) -> ErrorCode:
        code = ErrorCode.NO_ERR
        for child in argument.children:
            code |= self.parse(child, argv, attach_point)
            if (
                code & ErrorCode.REQ_ARG_NOT_FOUND
                and not argument.required
                and child.required
            ):
                code &= ~ErrorCode.REQ_ARG_NOT_FOUND
        return code

    def parse(
        self, argument: Argument, argv: Sequence[str], parent_result: Options
    ) -> ErrorCode:
        """
        Match an argument and its children against a token window.

        Args:
            argument (Argument): The argument to match.
            argv (Sequence[str]): The window; `argv[0]` is the owner token.
            parent_result (Options): Result node the match is attached to.

        Returns:
            ErrorCode: The combined error bits of the argument and its children.
        """
        logger.debug("Matching argument '%s' against %s", argument.long_flag, argv[1:])
        argc = len(argv)
        code = ErrorCode.NO_ERR
        if argument.required and argc < 2:
            code |= ErrorCode.REQ_ARG_NOT_FOUND
        if argc < 2:
            return code

        last = ErrorCode(0)
        for position in range(1, argc):
            last = self.match_token(argument, argv[position])
            if last != ErrorCode.NO_ERR:
                continue

            attach_options(argument, parent_result, argv[position])
            if position == argc - 1:
                return code | self._missing_children(argument)
            if not argument.children:
                return code
            return self._parse_children(
                argument,
                copy_sub_argv(argv, position),
                parent_result.get(argument.long_flag),
            )

        return code | (last & ~ErrorCode.NOT_FOUND) | self._missing_children(argument)

    def check_excludes(self, argument: Argument, result: Options) -> ErrorCode:
        """
        Report parsed arguments that exclude a parsed sibling.

        Walks the children of `argument` next to the children of `result`. Only
        active when `CommandLineSettings.enforce_excludes` is set.
        """
        code = ErrorCode.NO_ERR
        if not self.settings.enforce_excludes:
            return code
        for child in argument.children:
            child_result = result.get(child.long_flag)
            if not child_result.is_parsed():
                continue
            for excluded in child.excludes:
                if result.get(excluded).is_parsed():
                    logger.warning(
                        "Argument '%s' cannot be used together with '%s'",
                        child.long_flag,
                        excluded,
                    )
                    code |= ErrorCode.INVALID_INPUT
            code |= self.check_excludes(child, child_result)
        return code
