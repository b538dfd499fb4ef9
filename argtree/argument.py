# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass, one node of the declared argument tree.

Each `Argument` describes a single command line element: an option (`--name`/`-n`),
a method (`run`), a wildcard option (`--help`) or a parameter consumed by its parent.
Children are the sub-arguments the node requires or accepts, typically the `PARAM`
of an `OPTION`. A node exclusively owns its children; the back-reference to the
parent is weak and only used for diagnostics.

Arguments should be created with `new_argument()` and `new_parameter()`, which
validate the kind combination and the datatype, then chained with the builder
methods:

    reference = new_argument(
        ArgumentKind.OPTION, "r", "reference", False, "Reference number"
    ).add_child(new_parameter("number", "int"))

Key Attributes:
- `kind`: `ArgumentKind` flags (option, param, wildcard, method, null)
- `short_flag` / `long_flag`: Call names; `long_flag` is the lookup key in results
- `datatype`: `Datatype` of a parameter, `None` for everything else
- `required`: Whether the argument must be present
- `choices` / `excludes`: Allowed values and conflicting long flags, only enforced
  when the corresponding `CommandLineSettings` switch is on
- `callback` / `method` / `datatype_check`: Caller supplied functions, no-ops by default
"""
from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Callable

from argtree.argument_kind import ArgumentKind, check_kind, kind_to_string
from argtree.datatypes import Datatype
from argtree.error_codes import NO_ERROR
from argtree.exceptions import (
    ArgumentRegistrationError,
    InvalidArgumentKindError,
    InvalidDatatypeError,
)
from argtree.logger import logger
from argtree.options import Options
from argtree.tokens import flag_tokens

DatatypeCheck = Callable[[str], "int | bool"]
MethodCallback = Callable[[list[str], Options], int]


def _noop_callback() -> int:
    return NO_ERROR


def _noop_method(argv: list[str], options: Options) -> int:
    return NO_ERROR


def _noop_datatype_check(token: str) -> int:
    return NO_ERROR


@dataclass(eq=False)
class Argument:
    """
    Represents one declared command line argument and its sub-arguments.

    Attributes:
        kind (ArgumentKind): What the argument is (option, param, wildcard, method, null).
        short_flag (str): Short call name, without dashes.
        long_flag (str): Long call name, without dashes. Used as the result key.
        required (bool): True if the argument must be present.
        help_msg (str): One line help text.
        datatype (Datatype | None): Value check for parameters.
        choices (list[str]): Allowed values for a parameter.
        excludes (list[str]): Long flags that conflict with this argument.
        children (list[Argument]): Sub-arguments, in declaration order.
        callback (Callable[[], int]): Nullary callback.
        method (Callable[[list[str], Options], int]): Method callback.
        datatype_check (Callable[[str], int | bool]): Custom datatype validator.
        is_custom_datatype (bool): True once a datatype callback was set; the
            callback then replaces the builtin datatype check.
    """

    kind: ArgumentKind
    short_flag: str
    long_flag: str
    required: bool = False
    help_msg: str = ""
    datatype: Datatype | None = None
    choices: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)
    children: list[Argument] = field(default_factory=list, repr=False)
    callback: Callable[[], int] = field(default=_noop_callback, repr=False)
    method: MethodCallback = field(default=_noop_method, repr=False)
    datatype_check: DatatypeCheck = field(default=_noop_datatype_check, repr=False)
    is_custom_datatype: bool = False
    _parent: weakref.ReferenceType[Argument] | None = field(
        default=None, repr=False, init=False
    )

    @property
    def parent(self) -> Argument | None:
        """The argument this one was added to, if it is still alive."""
        if self._parent is None:
            return None
        return self._parent()

    def get_kind(self) -> ArgumentKind:
        return self.kind

    def get_children(self) -> list[Argument]:
        return list(self.children)

    def is_param(self) -> bool:
        return bool(self.kind & ArgumentKind.PARAM)

    def call_tokens(self) -> tuple[str, ...]:
        """Return the exact tokens that call this argument ('--long', '-s', 'run')."""
        return flag_tokens(self.kind, self.short_flag, self.long_flag)

    def add_child(self, child: Argument) -> Argument:
        """Append a sub-argument and return self for chaining."""
        if not isinstance(child, Argument):
            raise ArgumentRegistrationError(
                f"Expected an Argument, got {type(child).__name__}"
            )
        if child is self:
            raise ArgumentRegistrationError(
                f"Argument '{self.long_flag}' cannot be its own child"
            )
        logger.debug("Adding '%s' to argument '%s'", child.long_flag, self.long_flag)
        child._parent = weakref.ref(self)
        self.children.append(child)
        return self

    def set_required(self, required: bool) -> Argument:
        self.required = required
        return self

    def set_callback(self, func: Callable[[], int]) -> Argument:
        """Set the nullary callback of the argument."""
        if not callable(func):
            raise ArgumentRegistrationError("Callback must be a callable function.")
        logger.debug("Set the callback of '%s'", self.long_flag)
        self.callback = func
        return self

    def set_method(self, func: MethodCallback) -> Argument:
        """Set the method callback, called as `func(argv, options)`."""
        if not callable(func):
            raise ArgumentRegistrationError("Method must be a callable function.")
        logger.debug("Set the method of '%s'", self.long_flag)
        self.method = func
        return self

    def set_datatype_callback(self, func: DatatypeCheck | None) -> Argument:
        """
        Set a custom datatype validator.

        The validator receives the raw token and returns an `ErrorCode` (or a bool,
        True meaning valid). Any other return value counts as wrong data. Once set
        it replaces the builtin datatype check of the parameter. Passing None
        restores the default.
        """
        if func is None:
            self.datatype_check = _noop_datatype_check
            self.is_custom_datatype = False
            return self
        if not callable(func):
            raise ArgumentRegistrationError(
                "Datatype check callback must be a callable function."
            )
        logger.debug("Set the datatype check callback of '%s'", self.long_flag)
        self.datatype_check = func
        self.is_custom_datatype = True
        return self

    def add_choices(self, *choices: str) -> Argument:
        self.choices.extend(str(choice) for choice in choices)
        return self

    def add_excludes(self, *long_flags: str) -> Argument:
        self.excludes.extend(long_flags)
        return self

    def string(self, spacer: str = "") -> str:
        """Return the argument and its children as an indented description."""
        text = f"{spacer}<Arg: {self.long_flag} | Type:{kind_to_string(self.kind)}"
        if self.is_param():
            text += f" | dtype: {self.datatype}"
        text += ">\n"
        for child in self.children:
            text += child.string(f"   {spacer}")
        return text

    def __str__(self) -> str:
        return self.string()


def new_argument(
    kind: ArgumentKind | int | str,
    short_flag: str,
    long_flag: str,
    required: bool = False,
    help_msg: str = "",
) -> Argument:
    """
    Create a new option, method or wildcard argument.

    Args:
        kind (ArgumentKind | int | str): Kind flags, e.g. `ArgumentKind.OPTION` or
            `"option|wildcard"`.
        short_flag (str): Short call name without dashes (may be empty).
        long_flag (str): Long call name without dashes.
        required (bool): True if the argument must be present.
        help_msg (str): One line help text.

    Returns:
        Argument: The new argument.

    Raises:
        InvalidArgumentKindError: If the kind combination is not well formed.
    """
    try:
        kind = ArgumentKind(kind)
    except ValueError as error:
        raise InvalidArgumentKindError(str(error)) from error
    if not check_kind(kind):
        raise InvalidArgumentKindError(
            f"Invalid argument kind for '{long_flag}': {kind_to_string(kind) or int(kind)}"
        )
    logger.debug("Creating a new argument '%s' (%s)", long_flag, kind_to_string(kind))
    return Argument(
        kind=kind,
        short_flag=short_flag,
        long_flag=long_flag,
        required=required,
        help_msg=help_msg,
    )


def new_parameter(
    name: str,
    datatype: Datatype | str = Datatype.STRING,
    required: bool = False,
    help_msg: str = "",
) -> Argument:
    """
    Create a new parameter checked against a datatype.

    Parameters are optional by default. `name` is used as both flags and becomes
    the key of the captured value in the result tree.

    Raises:
        InvalidDatatypeError: If the datatype name is unknown.
    """
    try:
        datatype = Datatype(datatype)
    except ValueError as error:
        raise InvalidDatatypeError(str(error)) from error
    logger.debug("Creating a new parameter '%s' of datatype '%s'", name, datatype)
    return Argument(
        kind=ArgumentKind.PARAM,
        short_flag=name,
        long_flag=name,
        required=required,
        help_msg=help_msg,
        datatype=datatype,
    )
