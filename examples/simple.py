import sys

from argtree import (
    NO_ERROR,
    ArgumentKind,
    CommandLine,
    describe_error,
    new_argument,
    new_parameter,
)
from argtree.console import console
from argtree.utils import setup_logging

setup_logging()


def check_test(token: str) -> bool:
    """Accept only tokens that start with 'y'."""
    return token.startswith("y")


command_line = CommandLine("simple", help_epilog="Try: --reference 5 --question hi")

command_line.add_argument(
    new_argument(ArgumentKind.OPTION, "r", "reference", False, "Reference number")
    .add_child(new_parameter("number", "int", required=True))
)
command_line.add_argument(
    new_argument(ArgumentKind.OPTION, "q", "question", False, "Ask a question")
    .add_child(new_parameter("question", "string"))
)
command_line.add_argument(
    new_argument(
        ArgumentKind.OPTION | ArgumentKind.WILDCARD, "tt", "testing", False, "Testing"
    ).add_child(
        new_parameter("test", "custom").set_datatype_callback(check_test)
    )
)

if __name__ == "__main__":
    code = command_line.parse(sys.argv)
    if code == NO_ERROR:
        results = command_line.parsed_args()
        console.print(results.to_tree())
        number = results.get("reference").get("number")
        if number.is_parsed():
            console.print(f"Reference number: {int(number.get_value(), 0)}")
    else:
        console.print(describe_error(code))
    sys.exit(0 if code == NO_ERROR else int(code))
