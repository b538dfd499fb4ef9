import errno
import stat
from pathlib import Path

import pytest

from argtree.datatypes import (
    VALIDATORS,
    Datatype,
    check_file,
    check_int,
    check_string,
    check_url,
)
from argtree.error_codes import ErrorCode


@pytest.mark.parametrize(
    "name, expected",
    [
        ("int", Datatype.INT),
        ("INT", Datatype.INT),
        ("integer", Datatype.INT),
        (" string ", Datatype.STRING),
        ("str", Datatype.STRING),
        ("path", Datatype.FILE),
        ("url", Datatype.URL),
        ("custom", Datatype.CUSTOM),
    ],
)
def test_datatype_from_name(name, expected):
    assert Datatype(name) is expected


def test_datatype_unknown():
    with pytest.raises(ValueError, match="Must be one of"):
        Datatype("float")


def test_datatype_str():
    assert str(Datatype.INT) == "int"
    assert Datatype.choices() == list(Datatype)


def test_custom_has_no_builtin_validator():
    assert Datatype.CUSTOM not in VALIDATORS
    assert VALIDATORS[Datatype.INT] is check_int


@pytest.mark.parametrize("token", ["42", "-3", "0x1f", "0o17", "0b101"])
def test_check_int_accepts(token):
    assert check_int(token) == ErrorCode.NO_ERR


@pytest.mark.parametrize("token", ["42x", "abc", "", "4.2"])
def test_check_int_rejects(token):
    assert check_int(token) == ErrorCode.WRONG_DATA
    assert check_int(token, required=True) == (
        ErrorCode.WRONG_DATA | ErrorCode.REQ_PARAM_NOT_FOUND
    )


def test_check_string():
    assert check_string("hi") == ErrorCode.NO_ERR
    assert check_string("") == ErrorCode.WRONG_DATA


def test_check_file(tmp_path):
    existing = tmp_path / "data.txt"
    existing.write_text("data")
    assert check_file(str(existing)) == ErrorCode.NO_ERR
    assert check_file(str(tmp_path)) == ErrorCode.NO_ERR
    assert check_file(str(tmp_path / "missing.txt")) == ErrorCode.WRONG_DATA
    assert check_file("") == ErrorCode.WRONG_DATA


def test_check_file_name_too_long():
    assert check_file("a" * 300) == ErrorCode.WRONG_DATA
    assert check_file("a" * 300, required=True) == ErrorCode.WRONG_DATA
    assert check_file("nul\0byte") == ErrorCode.WRONG_DATA


def test_check_file_under_unreadable_directory(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        assert check_file(str(locked / "missing.txt")) == ErrorCode.WRONG_DATA
    finally:
        locked.chmod(stat.S_IRWXU)


def test_check_file_lookup_errors(monkeypatch):
    def refuse(self):
        raise PermissionError(errno.EACCES, "Permission denied", str(self))

    monkeypatch.setattr(Path, "exists", refuse)
    assert check_file("/root/secret") == ErrorCode.WRONG_DATA


def test_check_url():
    assert check_url("https://rtj.dev") == ErrorCode.NO_ERR
    assert check_url("http://localhost:8000") == ErrorCode.NO_ERR
    assert check_url("ftp://rtj.dev") == ErrorCode.WRONG_DATA
    assert check_url("rtj.dev") == ErrorCode.WRONG_DATA
