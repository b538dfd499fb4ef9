# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Options`, the node type of the result tree produced by a parse.

The result tree mirrors the arguments that matched: every node is keyed by the
matched argument's long flag and carries the literal token captured for it. The
children of a matched option (usually its parameter) are namespaced under the
option's own node:

    results = command_line.parsed_args()
    results.get("reference").get("number").get_value()   # "5"

A lookup miss never fails. `get()` returns a fresh sentinel node whose key and value
are `"__null__"` and which is not parsed, so callers check `is_parsed()` (or the key)
instead of testing for None.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rich.markup import escape
from rich.tree import Tree

from argtree.argument_kind import ArgumentKind

NULL_KEY = "__null__"


@dataclass(eq=False)
class Options:
    """
    A node of the result tree.

    Attributes:
        key (str): Long flag of the matched argument, "__null__" for a sentinel.
        value (str): Literal token captured for the argument.
        kind (ArgumentKind): Kind of the matched argument, for introspection.
        parsed (bool): True if the argument was matched.
        children (list[Options]): Result nodes attached below this one.
    """

    key: str = NULL_KEY
    value: str = NULL_KEY
    kind: ArgumentKind = ArgumentKind.NULL
    parsed: bool = False
    children: list[Options] = field(default_factory=list)

    @property
    def argc(self) -> int:
        """Number of result nodes attached below this one."""
        return len(self.children)

    def get(self, key: str) -> Options:
        """Return the first child with the given key, or a fresh sentinel node."""
        for option in self.children:
            if option.key == key:
                return option
        return Options()

    def __getitem__(self, key: str) -> Options:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return any(option.key == key for option in self.children)

    def __iter__(self):
        return iter(self.children)

    def add_options(self, options: Options) -> Options:
        self.children.append(options)
        return options

    def get_key(self) -> str:
        return self.key

    def get_value(self) -> str:
        return self.value

    def is_parsed(self) -> bool:
        return self.parsed

    def to_dict(self) -> dict[str, Any]:
        """Return the children as a nested mapping, first entry per key wins."""
        result: dict[str, Any] = {}
        for option in self.children:
            if option.key in result:
                continue
            result[option.key] = {
                "value": option.value,
                "parsed": option.parsed,
                "children": option.to_dict(),
            }
        return result

    def _concat(self, lines: list[str], indent: int) -> None:
        lines.append(f"{' ' * indent}-> <{self.key}>")
        if indent > 8:
            return
        for option in self.children:
            option._concat(lines, indent + 2)

    def string(self) -> str:
        lines = ["<Options>"]
        self._concat(lines, 3)
        return "\n".join(lines) + "\n"

    def to_tree(self, tree: Tree | None = None) -> Tree:
        """Return the result tree as a `rich.tree.Tree`."""
        label = f"[bold]{escape(self.key)}[/]"
        if self.parsed and self.kind & ArgumentKind.PARAM:
            label += f" = [cyan]{escape(self.value)}[/]"
        branch = tree.add(label) if tree is not None else Tree(label)
        for option in self.children:
            option.to_tree(branch)
        return branch

    def __str__(self) -> str:
        return self.string()
