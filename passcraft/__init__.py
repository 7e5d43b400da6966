"""passcraft -- password generation widget.

Random, memorable, graphical and hybrid password generation plus a
heuristic strength score, shared by the command line and the web page.
"""

from .clipboard import copy_to_clipboard
from .generator import generate_password
from .options import (
    ICON_THEMES,
    GraphicalOptions,
    PasswordOptions,
    empty_grid,
    icon_palette,
    pattern_code,
    toggle_cell,
    toggle_icon,
)
from .strength import score_strength

__all__ = [
    "ICON_THEMES",
    "GraphicalOptions",
    "PasswordOptions",
    "copy_to_clipboard",
    "empty_grid",
    "generate_password",
    "icon_palette",
    "pattern_code",
    "score_strength",
    "toggle_cell",
    "toggle_icon",
]
