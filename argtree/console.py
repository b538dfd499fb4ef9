# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argtree usage rendering."""
from rich.console import Console

from argtree.themes import get_argtree_theme

console = Console(theme=get_argtree_theme())
