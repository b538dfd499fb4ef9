from argtree.argument_kind import ArgumentKind
from argtree.tokens import copy_sub_argv, flag_header, flag_tokens, is_flag_like


def test_is_flag_like():
    assert is_flag_like("-r")
    assert is_flag_like("--reference")
    assert is_flag_like("-5")
    assert not is_flag_like("reference")
    assert not is_flag_like("")


def test_flag_header():
    assert flag_header(ArgumentKind.OPTION, "long") == "--"
    assert flag_header(ArgumentKind.WILDCARD, "short") == "-"
    assert flag_header(ArgumentKind.METHOD, "long") == ""
    assert flag_header(ArgumentKind.PARAM, "short") == ""


def test_flag_tokens():
    assert flag_tokens(ArgumentKind.OPTION, "r", "reference") == ("--reference", "-r")
    assert flag_tokens(ArgumentKind.METHOD, "r", "run") == ("run", "r")
    assert flag_tokens(ArgumentKind.OPTION, "", "reference") == ("--reference",)


def test_copy_sub_argv():
    argv = ["prog", "--reference", "5", "--question", "hi"]
    window = copy_sub_argv(argv, 1)
    assert window == ["prog", "5", "--question", "hi"]
    assert len(window) == len(argv) - 1
    assert copy_sub_argv(argv, 4) == ["prog"]
    assert argv == ["prog", "--reference", "5", "--question", "hi"]
