import logging
import sys

import pytest

from argtree import (
    NO_ERROR,
    ArgumentKind,
    CommandLine,
    CommandLineSettings,
    ErrorCode,
    Verbosity,
    new_argument,
    new_parameter,
)


@pytest.fixture
def command_line():
    command_line = CommandLine("prog")
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "r", "reference", False, "Reference number")
        .add_child(new_parameter("number", "int"))
    )
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "q", "question", False, "Ask a question")
        .add_child(new_parameter("question", "string"))
    )
    command_line.add_argument(
        new_argument(
            ArgumentKind.OPTION | ArgumentKind.WILDCARD, "tt", "testing", False, "Testing"
        ).add_child(new_parameter("test", "string"))
    )
    return command_line


@pytest.fixture(autouse=True)
def reset_logger_level():
    logger = logging.getLogger("argtree")
    level = logger.level
    yield
    logger.setLevel(level)


def test_multi_flag_end_to_end(command_line, capsys):
    code = command_line.parse(
        ["prog", "--reference", "5", "--question", "hi", "--testing", "yo"]
    )
    assert code == NO_ERROR
    results = command_line.parsed_args()
    assert results.get("reference").get("number").get_value() == "5"
    assert results.get("question").get("question").get_value() == "hi"
    assert results.get("testing").get("test").get_value() == "yo"
    assert command_line.parsed
    assert "USAGE" not in capsys.readouterr().out


def test_flags_in_any_order(command_line):
    code = command_line.parse(["prog", "-tt", "yo", "-q", "hi", "-r", "5"])
    assert code == NO_ERROR
    assert command_line.parsed_args().get("testing").get("test").get_value() == "yo"


def test_required_option_round_trip():
    command_line = CommandLine("prog")
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "f", "flag", True).add_child(
            new_parameter("value", "string", required=True)
        )
    )
    assert command_line.parse(["prog", "--flag", "value"]) == NO_ERROR
    assert command_line.parsed_args().get("flag").get("value").get_value() == "value"


def test_missing_required_option(capsys):
    command_line = CommandLine("prog")
    command_line.add_argument(new_argument(ArgumentKind.OPTION, "f", "flag", True))
    code = command_line.parse(["prog", "--other"])
    assert code & ErrorCode.REQ_ARG_NOT_FOUND
    assert code != NO_ERROR
    output = capsys.readouterr().out
    assert output.count("USAGE: prog") == 1
    assert "[flag]" in output


def test_absent_optional_options(command_line):
    assert command_line.parse(["prog"]) == NO_ERROR
    assert not command_line.parsed_args().get("reference").is_parsed()


def test_optional_option_wrapping_required_param():
    command_line = CommandLine("prog")
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "r", "reference").add_child(
            new_parameter("number", "int", required=True)
        )
    )
    assert command_line.parse(["prog", "--other", "x"]) == NO_ERROR


def test_optional_option_forgives_missing_child_option():
    command_line = CommandLine("prog")
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "d", "db").add_child(
            new_argument(ArgumentKind.OPTION, "H", "host", True)
        )
    )
    assert command_line.parse(["prog", "--db"]) == NO_ERROR


def test_dash_as_value_rejection(command_line, capsys):
    code = command_line.parse(["prog", "--reference", "--question"])
    assert code & ErrorCode.REQ_PARAM_NOT_FOUND
    assert code & ErrorCode.INVALID_INPUT
    assert code & ErrorCode.WRONG_DATA
    results = command_line.parsed_args()
    assert results.get("reference").is_parsed()
    assert not results.get("reference").get("number").is_parsed()
    assert results.get("question").is_parsed()
    output = capsys.readouterr().out
    assert output.count("USAGE: prog") == 2


def test_wrong_data_renders_usage_once(command_line, capsys):
    code = command_line.parse(["prog", "--reference", "abc"])
    assert code == NO_ERROR | ErrorCode.WRONG_DATA
    output = capsys.readouterr().out
    assert output.count("USAGE: prog") == 1
    assert "Required:" in output
    assert "Options:" in output
    assert "[reference : number]" in output


def test_usage_rendered_for_each_problem(command_line, capsys):
    command_line.add_argument(new_argument(ArgumentKind.OPTION, "f", "flag", True))
    code = command_line.parse(["prog", "--reference", "abc"])
    assert code & ErrorCode.REQ_ARG_NOT_FOUND
    assert code & ErrorCode.WRONG_DATA
    assert capsys.readouterr().out.count("USAGE: prog") == 2


@pytest.mark.parametrize("help_flag", ["-h", "--help"])
def test_help(command_line, capsys, help_flag):
    code = command_line.parse(["prog", help_flag])
    assert code == NO_ERROR | ErrorCode.HELP_WILDCARD
    output = capsys.readouterr().out
    assert "USAGE: prog" in output
    assert "Use '-vCLI | --verboseCLI' for more debug information" in output
    assert "--reference" in output
    assert "-> <Reference number>" in output
    assert "number : <int>" in output


def test_help_ignores_other_errors(command_line, capsys):
    code = command_line.parse(["prog", "--reference", "abc", "-h", "--help"])
    assert code & ErrorCode.HELP_WILDCARD
    assert code & ErrorCode.WRONG_DATA
    assert capsys.readouterr().out.count("USAGE: prog") == 1


def test_help_shows_required_parameters(capsys):
    command_line = CommandLine("prog", help_text="Demo tool", help_epilog="Bye")
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "r", "reference", True).add_child(
            new_parameter("number", "int", required=True).add_choices("1", "2")
        )
    )
    command_line.parse(["prog", "--help"])
    output = capsys.readouterr().out
    assert "[reference : number : <!int> {1,2}]" in output
    assert "Demo tool" in output
    assert "Bye" in output


def test_method_usage_line(capsys):
    command_line = CommandLine("prog")
    command_line.add_argument(new_argument(ArgumentKind.METHOD, "s", "status"))
    command_line.render_help_full()
    assert "s     >  status" in capsys.readouterr().out


def test_verbosity_escalation_lasts_one_parse(caplog):
    settings = CommandLineSettings()
    command_line = CommandLine("prog", settings=settings)
    logger = logging.getLogger("argtree")
    logger.setLevel(logging.WARNING)
    assert command_line.parse(["prog", "--verboseCLI"]) == NO_ERROR
    assert "Verbosity escalated to FULL" in caplog.messages
    assert "Finished parsing with code 1" in caplog.messages
    assert command_line.matcher.settings is settings
    assert settings.verbosity == Verbosity.OFF
    assert logger.level == logging.WARNING

    caplog.clear()
    assert CommandLine("other").parse(["other"]) == NO_ERROR
    assert "Finished parsing with code 1" not in caplog.messages


def test_reparse_builds_fresh_results(command_line):
    command_line.parse(["prog", "--reference", "5"])
    first = command_line.parsed_args()
    assert first.get("reference").is_parsed()
    command_line.parse(["prog"])
    second = command_line.parsed_args()
    assert second is not first
    assert not second.get("reference").is_parsed()
    assert first.get("reference").is_parsed()


def test_parse_defaults_to_sys_argv(command_line, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "-r", "9"])
    assert command_line.parse() == NO_ERROR
    assert command_line.parsed_args().get("reference").get("number").get_value() == "9"


def test_empty_command_line():
    assert CommandLine("prog").parse(["prog"]) == NO_ERROR
    assert CommandLine("prog").parse([]) == NO_ERROR


def test_result_root(command_line):
    command_line.parse(["prog"])
    results = command_line.parsed_args()
    assert results.get_key() == "root"
    assert results.is_parsed()
    assert results.get("nonexistent").get_key() == "__null__"


def test_enforce_choices(capsys):
    command_line = CommandLine("prog", settings=CommandLineSettings(enforce_choices=True))
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "c", "color").add_child(
            new_parameter("name").add_choices("red", "green")
        )
    )
    assert command_line.parse(["prog", "--color", "red"]) == NO_ERROR
    assert command_line.parse(["prog", "--color", "purple"]) == (
        NO_ERROR | ErrorCode.WRONG_DATA
    )


def test_enforce_excludes(capsys):
    command_line = CommandLine(
        "prog", settings=CommandLineSettings(enforce_excludes=True)
    )
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "a", "alpha").add_excludes("beta")
    )
    command_line.add_argument(new_argument(ArgumentKind.OPTION, "b", "beta"))
    assert command_line.parse(["prog", "--alpha"]) == NO_ERROR
    code = command_line.parse(["prog", "--alpha", "--beta"])
    assert code == NO_ERROR | ErrorCode.INVALID_INPUT
    assert "USAGE: prog" in capsys.readouterr().out


def test_get_argument(command_line):
    assert command_line.get_argument("question").short_flag == "q"
    assert command_line.get_argument("missing") is None


def test_str_and_repr(command_line):
    text = str(command_line)
    assert text.startswith(" <CommandLine: prog>\n")
    assert "<Arg: reference | Type:Option>" in text
    assert "<Arg: testing | Type:Option:Wildcard>" in text
    assert repr(command_line) == (
        "CommandLine(program='prog', arguments=3, methods=0, options=3)"
    )


def test_unusable_file_path_is_wrong_data(capsys):
    command_line = CommandLine("prog")
    command_line.add_argument(
        new_argument(ArgumentKind.OPTION, "f", "file").add_child(
            new_parameter("path", "file")
        )
    )
    code = command_line.parse(["prog", "--file", "a" * 300])
    assert code == NO_ERROR | ErrorCode.WRONG_DATA
    assert not command_line.parsed_args().get("file").get("path").is_parsed()
    assert "USAGE: prog" in capsys.readouterr().out
