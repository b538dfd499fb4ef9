import logging
import sys
from pathlib import Path

import pytest

from argtree.__main__ import bootstrap, get_parser, main

CONFIG = """
program: demo
arguments:
  - kind: option
    short_flag: r
    long_flag: reference
    children:
      - kind: param
        long_flag: number
        datatype: int
        required: true
"""


@pytest.fixture(autouse=True)
def restore_logging():
    """Keep the root logger handlers and sys.path untouched across tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    sys_path_before = list(sys.path)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    sys.path[:] = sys_path_before


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "argtree.yaml"
    path.write_text(CONFIG, encoding="UTF-8")
    return path


def test_get_parser():
    args = get_parser().parse_args(
        ["--log-mode", "json", "-v", "argtree.yaml", "--reference", "5"]
    )
    assert args.log_mode == "json"
    assert args.verbose
    assert args.config == Path("argtree.yaml")
    assert args.args == ["--reference", "5"]


def test_bootstrap(config_file):
    config_path = bootstrap(config_file)
    assert config_path == config_file.resolve()
    assert str(config_file.parent.resolve()) in sys.path


def test_main_success(config_file, capsys):
    code = main(["--log-mode", "cli", str(config_file), "--reference", "5"])
    assert code == 0
    output = capsys.readouterr().out
    assert "reference" in output
    assert "number = 5" in output


def test_main_without_tokens(config_file, capsys):
    assert main(["--log-mode", "cli", str(config_file)]) == 0


def test_main_failure_returns_bitmask(config_file, capsys):
    code = main(["--log-mode", "cli", str(config_file), "--reference", "abc"])
    assert code == 1 | 16 | 128
    output = capsys.readouterr().out
    assert "USAGE: demo" in output
    assert "The input data(type) is incorrect." in output


def test_main_missing_config(tmp_path, capsys):
    code = main(["--log-mode", "cli", str(tmp_path / "missing.yaml")])
    assert code == 1
    assert "No such config file" in capsys.readouterr().out


def test_main_invalid_config(tmp_path, capsys):
    path = tmp_path / "argtree.yaml"
    path.write_text("arguments:\n  - kind: flag\n    long_flag: bad\n")
    assert main(["--log-mode", "cli", str(path)]) == 1
    assert "Invalid configuration" in capsys.readouterr().out
