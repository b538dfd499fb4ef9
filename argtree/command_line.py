# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLine`, the facade that owns an argument tree, runs
the matcher over a raw token vector and renders usage text.

A parse goes through these steps:
1. A fresh result tree is built; results of an earlier parse are discarded.
2. The whole token vector is scanned for the verbosity and help switches. The help
   switch renders the full usage and sets `HELP_WILDCARD`, independent of any
   registered argument. A verbosity switch only lasts for this parse: the settings
   and the `argtree` logger level are restored when `parse()` returns.
3. Every top-level argument is matched against the full token vector (each one gets
   an independent scan) and the codes are OR-ed. A required-argument failure inside
   an optional top-level argument is forgiven unless a required parameter is missing.
4. On success, or when help was requested, the code is returned. Otherwise usage is
   rendered once for each kind of problem found and the raw code is returned. The
   result tree is kept and may be partially populated.

Example Usage:
    command_line = CommandLine()
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "r", "reference", False, "Reference number")
        .add_child(new_parameter("number", "int"))
    )
    code = command_line.parse(["prog", "--reference", "5"])
    if code == NO_ERROR:
        number = command_line.parsed_args().get("reference").get("number").get_value()
"""
from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from argtree.argument import Argument
from argtree.argument_kind import ArgumentKind
from argtree.argument_tree import ArgumentTree
from argtree.console import console as default_console
from argtree.error_codes import NO_ERROR, ErrorCode, describe_error
from argtree.logger import logger
from argtree.matcher import ArgumentMatcher
from argtree.options import Options
from argtree.settings import CommandLineSettings, Verbosity
from argtree.utils import get_program_invocation

FLAG_KINDS = ArgumentKind.OPTION | ArgumentKind.WILDCARD
USAGE_TRIGGERS = (
    ErrorCode.UNKNOWN_INPUT | ErrorCode.INVALID_INPUT,
    ErrorCode.REQ_ARG_NOT_FOUND,
    ErrorCode.WRONG_DATA,
)


class CommandLine:
    """
    Declarative command line parser.

    Arguments are registered with `add_argument()`, `parse()` matches a token vector
    against them and returns an `ErrorCode` bitmask, `parsed_args()` returns the
    result tree of the last parse.

    Attributes:
        program (str): Name shown in usage text.
        settings (CommandLineSettings): Verbosity and matching switches, shared with
            the matcher.
        args (ArgumentTree): The declared arguments.
        options (Options): Result tree of the last parse.
        parsed (bool): True once `parse()` has run.
    """

    def __init__(
        self,
        program: str | None = None,
        settings: CommandLineSettings | None = None,
        help_text: str = "",
        help_epilog: str = "",
        console: Console | None = None,
    ) -> None:
        self.console: Console = console or default_console
        self.program: str = program or get_program_invocation()
        self.settings: CommandLineSettings = settings or CommandLineSettings()
        self.help_text: str = help_text
        self.help_epilog: str = help_epilog
        self.args: ArgumentTree = ArgumentTree()
        self.matcher: ArgumentMatcher = ArgumentMatcher(self.settings)
        self.options: Options = Options()
        self.parsed: bool = False
        logger.info("Created a new command line for '%s'", self.program)

    def add_argument(self, argument: Argument) -> ErrorCode:
        """Register a top-level argument."""
        return self.args.add_argument(argument)

    def get_argument(self, long_flag: str) -> Argument | None:
        return self.args.get_argument(long_flag)

    def build_options_tree(self) -> Options:
        """Create the root of a fresh result tree and make it current."""
        self.options = Options(key=self.args.root.long_flag, parsed=True)
        return self.options

    def parsed_args(self) -> Options:
        """Return the result tree of the last parse."""
        return self.options

    def _prescan(self, argv: Sequence[str]) -> ErrorCode:
        help_code = ErrorCode(0)
        for token in argv:
            if token in self.settings.verbose_flags:
                self.settings.escalate(Verbosity.FULL)
            if token in self.settings.help_flags and not help_code:
                self.render_help_full()
                help_code = ErrorCode.HELP_WILDCARD
        return help_code

    def parse(self, argv: Sequence[str] | None = None) -> ErrorCode:
        """
        Parse a token vector against the registered arguments.

        Args:
            argv (Sequence[str] | None): Tokens, `argv[0]` being the program name.
                Defaults to `sys.argv`.

        Returns:
            ErrorCode: `NO_ERROR` on success, possibly with `HELP_WILDCARD`, otherwise
                every error bit found. Compare with `NO_ERROR`, not with zero.
        """
        argv = list(sys.argv if argv is None else argv)
        saved_verbosity = self.settings.verbosity
        saved_level = logger.level
        try:
            return self._parse(argv)
        finally:
            self.settings.verbosity = saved_verbosity
            logger.setLevel(saved_level)

    def _parse(self, argv: list[str]) -> ErrorCode:
        options_tree = self.build_options_tree()
        help_code = self._prescan(argv)
        logger.info("Running the command line: %s", argv[0] if argv else self.program)

        code = NO_ERROR
        for argument in self.args:
            logger.debug("Parsing recursively the argument: %s", argument.long_flag)
            branch = self.matcher.parse(argument, argv, options_tree)
            if not argument.required and not branch & ErrorCode.REQ_PARAM_NOT_FOUND:
                branch &= ~ErrorCode.REQ_ARG_NOT_FOUND
            code |= branch
        code |= self.matcher.check_excludes(self.args.root, options_tree)
        self.parsed = True
        logger.debug("Finished parsing with code %d", code)

        if code == NO_ERROR or help_code:
            return code | help_code

        for trigger in USAGE_TRIGGERS:
            if code & trigger:
                self.render_help()
        logger.info("Parsing failed: %s", describe_error(code).strip())
        return code

    def _child_text(self, child: Argument, full: bool) -> str:
        marker = "!" if child.required else ""
        if not full:
            return f"{child.long_flag}{marker}"
        if child.is_param():
            text = f"{child.long_flag} : <{marker}{child.datatype}>"
            if child.choices:
                text += f" {{{','.join(child.choices)}}}"
            return text
        return f"{child.long_flag}{marker}"

    def _children_text(self, argument: Argument, full: bool) -> str:
        separator = " | " if full else ", "
        return separator.join(
            self._child_text(child, full) for child in argument.children
        )

    def _call_text(self, argument: Argument) -> str:
        if argument.kind & FLAG_KINDS:
            short = f"-{argument.short_flag}" if argument.short_flag else ""
            return f"{short:<6}|  --{argument.long_flag}"
        return f"{argument.short_flag:<6}>  {argument.long_flag}"

    def _print_line(self, text: str, style: str | None = None, indent: int = 4) -> None:
        line = f"{' ' * indent}{escape(text)}"
        if style:
            line = f"[{style}]{line}[/]"
        self.console.print(line, soft_wrap=True)

    def _short_text(self, argument: Argument) -> str:
        children = self._children_text(argument, full=False)
        if children:
            return f"[{argument.long_flag} : {children}]"
        return f"[{argument.long_flag}]"

    def render_help(self) -> None:
        """Print the short usage: required arguments, then every argument."""
        self.console.print(f"[usage.title]USAGE: {escape(self.program)}[/]")
        self.console.print("[usage.section]Required:[/]")
        for argument in self.args:
            if argument.required:
                self._print_line(self._short_text(argument), "usage.required")
        self.console.print("[usage.section]Options:[/]")
        for argument in self.args:
            self._print_line(self._short_text(argument), "usage.flag")

    def render_help_full(self) -> None:
        """Print the full usage with short flags, datatypes and help messages."""
        verbose = " | ".join(self.settings.verbose_flags)
        self.console.print(f"[usage.title]USAGE: {escape(self.program)}[/]")
        self._print_line(f"Use '{verbose}' for more debug information")
        if self.help_text:
            self.console.print(f"\n{escape(self.help_text)}")
        self.console.print("\n[usage.section]Required:[/]")
        for argument in self.args:
            if not argument.required:
                continue
            children = self._children_text(argument, full=True)
            self._print_line(f"[{argument.long_flag} : {children}]", "usage.required")
        self.console.print("[usage.section]Options:[/]")
        for argument in self.args:
            text = self._call_text(argument)
            children = self._children_text(argument, full=True)
            if children:
                text += f" : [{children}]"
            self._print_line(text, "usage.flag")
            if argument.help_msg:
                self._print_line(f"        -> <{argument.help_msg}>", "usage.help")
        if self.help_epilog:
            self.console.print(f"\n{escape(self.help_epilog)}", style="usage.help")

    def __str__(self) -> str:
        return f" <CommandLine: {self.program}>\n{self.args}"

    def __repr__(self) -> str:
        return (
            f"CommandLine(program={self.program!r}, arguments={len(self.args)}, "
            f"methods={self.args.methods}, options={self.args.options})"
        )
