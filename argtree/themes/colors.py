# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich theme used for usage rendering.

`OneColors` holds hex colors from the One Dark palette. `get_argtree_theme()` maps
the semantic style names used by `CommandLine` onto them, so usage output can be
restyled by passing another theme to the console.
"""
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_argtree_theme() -> Theme:
    return Theme(
        {
            "usage.title": f"bold {OneColors.BLUE}",
            "usage.section": "bold",
            "usage.flag": OneColors.CYAN,
            "usage.required": OneColors.YELLOW,
            "usage.help": OneColors.COMMENT_GREY,
            "usage.error": f"bold {OneColors.RED}",
        }
    )
