from rich.tree import Tree

from argtree.argument_kind import ArgumentKind
from argtree.options import NULL_KEY, Options


def build_results() -> Options:
    root = Options(key="root", parsed=True)
    reference = root.add_options(
        Options(
            key="reference", value="--reference", kind=ArgumentKind.OPTION, parsed=True
        )
    )
    reference.add_options(
        Options(key="number", value="5", kind=ArgumentKind.PARAM, parsed=True)
    )
    return root


def test_sentinel():
    sentinel = Options()
    assert sentinel.get_key() == NULL_KEY == "__null__"
    assert sentinel.get_value() == NULL_KEY
    assert not sentinel.is_parsed()
    assert sentinel.argc == 0


def test_get_miss_returns_fresh_sentinel():
    root = build_results()
    missing = root.get("nonexistent")
    assert missing.get_key() == "__null__"
    assert not missing.is_parsed()
    assert missing is not root.get("nonexistent")
    assert not root.get("nonexistent").get("deeper").is_parsed()


def test_get_nested():
    root = build_results()
    assert root.argc == 1
    assert root.get("reference").get("number").get_value() == "5"
    assert root["reference"]["number"].is_parsed()
    assert "reference" in root
    assert "number" not in root
    assert [option.key for option in root] == ["reference"]


def test_get_returns_first_match():
    root = Options(key="root", parsed=True)
    first = root.add_options(Options(key="reference", value="first", parsed=True))
    root.add_options(Options(key="reference", value="second", parsed=True))
    assert root.argc == 2
    assert root.get("reference") is first


def test_to_dict():
    root = build_results()
    assert root.to_dict() == {
        "reference": {
            "value": "--reference",
            "parsed": True,
            "children": {
                "number": {"value": "5", "parsed": True, "children": {}},
            },
        }
    }


def test_string():
    root = build_results()
    assert str(root) == (
        "<Options>\n" "   -> <root>\n" "     -> <reference>\n" "       -> <number>\n"
    )


def test_string_depth_limit():
    root = Options(key="root", parsed=True)
    node = root
    for key in ("a", "b", "c", "d", "e"):
        node = node.add_options(Options(key=key, parsed=True))
    text = root.string()
    assert "         -> <c>" in text
    assert "<d>" not in text
    assert "<e>" not in text


def test_to_tree():
    tree = build_results().to_tree()
    assert isinstance(tree, Tree)
    assert tree.label == "[bold]root[/]"
    reference = tree.children[0]
    assert reference.label == "[bold]reference[/]"
    assert reference.children[0].label == "[bold]number[/] = [cyan]5[/]"


def test_to_tree_escapes_markup():
    root = Options(key="root", parsed=True)
    root.add_options(
        Options(key="text", value="[red]x", kind=ArgumentKind.PARAM, parsed=True)
    )
    label = root.to_tree().children[0].label
    assert "\\[red]x" in label
