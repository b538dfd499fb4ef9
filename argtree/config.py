# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader that builds a `CommandLine` from a YAML or TOML file.

Example (YAML):

    program: demo
    verbosity: simple
    arguments:
      - kind: option
        short_flag: r
        long_flag: reference
        help: Reference number
        children:
          - kind: param
            long_flag: number
            datatype: int
            required: true
      - kind: option|wildcard
        short_flag: tt
        long_flag: testing
        children:
          - kind: param
            long_flag: test
            datatype: custom
            datatype_check: my_module.check_test
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from argtree.argument import Argument, new_argument, new_parameter
from argtree.argument_kind import ArgumentKind, check_kind
from argtree.command_line import CommandLine
from argtree.datatypes import Datatype
from argtree.exceptions import ConfigError
from argtree.logger import logger
from argtree.settings import CommandLineSettings, Verbosity


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid callable path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. "
            "Ensure the module is installed and discoverable via PYTHONPATH."
        ) from error
    try:
        function = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(function):
        raise ConfigError(f"'{dotted_path}' is not callable")
    return function


class RawArgument(BaseModel):
    """One argument entry of a configuration file."""

    kind: str = "option"
    short_flag: str = ""
    long_flag: str
    required: bool = False
    help: str = ""
    datatype: str | None = None
    datatype_check: str | None = None
    method: str | None = None
    choices: list[str | int | float] = Field(default_factory=list)
    excludes: list[str] = Field(default_factory=list)
    children: list[RawArgument] = Field(default_factory=list)

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: str) -> str:
        kind = ArgumentKind(value)
        if not check_kind(kind):
            raise ValueError(f"'{value}' is not a valid argument kind combination")
        return value

    @field_validator("datatype")
    @classmethod
    def validate_datatype(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return Datatype(value).value

    @model_validator(mode="after")
    def validate_parameter_fields(self) -> RawArgument:
        is_param = bool(ArgumentKind(self.kind) & ArgumentKind.PARAM)
        if not is_param and self.datatype is not None:
            raise ValueError(f"'{self.long_flag}': only parameters can have a datatype")
        if not is_param and self.datatype_check is not None:
            raise ValueError(
                f"'{self.long_flag}': only parameters can have a datatype_check"
            )
        return self

    def to_argument(self) -> Argument:
        kind = ArgumentKind(self.kind)
        if kind & ArgumentKind.PARAM:
            argument = new_parameter(
                self.long_flag,
                self.datatype or Datatype.STRING,
                required=self.required,
                help_msg=self.help,
            )
            if self.short_flag:
                argument.short_flag = self.short_flag
        else:
            argument = new_argument(
                kind, self.short_flag, self.long_flag, self.required, self.help
            )
        if self.datatype_check:
            argument.set_datatype_callback(import_callable(self.datatype_check))
        if self.method:
            argument.set_method(import_callable(self.method))
        argument.add_choices(*self.choices)
        argument.add_excludes(*self.excludes)
        for child in self.children:
            argument.add_child(child.to_argument())
        return argument


RawArgument.model_rebuild()


class CommandLineConfig(BaseModel):
    """Top-level configuration model."""

    program: str | None = None
    help_text: str = ""
    help_epilog: str = ""
    verbosity: Verbosity = Verbosity.OFF
    enforce_choices: bool = False
    enforce_excludes: bool = False
    arguments: list[RawArgument] = Field(default_factory=list)

    @field_validator("verbosity", mode="before")
    @classmethod
    def validate_verbosity(cls, value: Any) -> Verbosity:
        return Verbosity(value)

    def to_command_line(self) -> CommandLine:
        command_line = CommandLine(
            program=self.program,
            settings=CommandLineSettings(
                verbosity=self.verbosity,
                enforce_choices=self.enforce_choices,
                enforce_excludes=self.enforce_excludes,
            ),
            help_text=self.help_text,
            help_epilog=self.help_epilog,
        )
        for raw_argument in self.arguments:
            command_line.add_argument(raw_argument.to_argument())
        return command_line


def loader(file_path: Path | str) -> CommandLine:
    """
    Load a command line definition from a YAML or TOML file.

    The file should contain a mapping with an `arguments` list. Each argument needs
    at least a `long_flag`; `kind` defaults to "option".

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        CommandLine: A command line with every argument registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse '{path}': {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a list of arguments.\n"
            "Example:\n"
            "program: 'demo'\n"
            "arguments:\n"
            "  - kind: 'option'\n"
            "    short_flag: 'r'\n"
            "    long_flag: 'reference'"
        )

    try:
        config = CommandLineConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in '{path}':\n{error}") from error
    logger.debug("Loaded %d arguments from '%s'", len(config.arguments), path)
    return config.to_command_line()
