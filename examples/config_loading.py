"""config_loading.py"""
import sys
from pathlib import Path

from argtree import NO_ERROR
from argtree.config import loader

sys.path.insert(0, str(Path(__file__).parent))
command_line = loader(Path(__file__).parent / "demo.yaml")

if __name__ == "__main__":
    code = command_line.parse([command_line.program, *sys.argv[1:]])
    print(command_line.parsed_args())
    sys.exit(0 if code == NO_ERROR else int(code))
