"""Option records, character sets and the icon/pattern selection model."""

from dataclasses import dataclass, field
import string


MIN_LENGTH = 4
MAX_LENGTH = 50
MAX_ICONS = 8
MAX_PATTERN_CELLS = 9
GRID_SIZES = (3, 5)

MODES = ("text", "graphical", "hybrid")

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Single code points only, so one draw is one character.
EMOJIS = (
    "😀😃😄😁😆😅😂🤣😊😇🙂🙃😉😌😍🥰😘😗😙😚😋😛😝😜🤪🤨🧐🤓😎🤩🥳😏"
    "😒😞😔😟😕🙁☹😣😖😫😩🥺😢😭😤😠😡🤬🤯😳🥵🥶😱😨😰😥😓🤗🤔🤭🤫🤥"
    "😶😐😑😬🙄😯😦😧😮😲🥱😴🤤😪😵🤐🥴🤢🤮🤧😷🤒🤕🤑🤠😈👿👹👺🤡💩👻"
    "💀☠👽👾🤖🎃😺😸😹😻😼😽🙀😿😾"
)

MEMORABLE_WORDS = (
    "apple", "brave", "cloud", "dream", "eagle", "flame", "grace", "heart",
    "light", "magic", "ocean", "peace", "quick", "river", "storm", "trust",
    "wonder", "bright", "swift", "noble", "gentle", "strong", "wise", "kind",
)

ICON_THEMES = {
    "animals": ("🐶", "🐱", "🐭", "🐹", "🐰", "🦊", "🐻", "🐼",
                "🐨", "🐯", "🦁", "🐮", "🐷", "🐸", "🐵", "🐔"),
    "nature":  ("🌸", "🌺", "🌻", "🌷", "🌹", "🌿", "🍀", "🌳",
                "🌲", "🌴", "🌵", "🌾", "🌊", "⭐", "🌙", "☀️"),
    "food":    ("🍎", "🍌", "🍊", "🍓", "🍇", "🥝", "🍑", "🍒",
                "🥭", "🍍", "🥥", "🥑", "🍅", "🥕", "🌽", "🥒"),
    "objects": ("⚽", "🏀", "🏈", "⚾", "🎾", "🏐", "🏓", "🏸",
                "🥅", "🎯", "🎮", "🎲", "🎸", "🎹", "🎺", "🎻"),
    "symbols": ("❤️", "💙", "💚", "💛", "🧡", "💜", "🖤", "🤍",
                "💯", "💫", "⭐", "🌟", "✨", "💎", "🔥", "💧"),
}

ALL_ICONS = frozenset(icon for icons in ICON_THEMES.values() for icon in icons)


# ── Option records ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PasswordOptions:
    """Text generation settings: length and which character classes to use."""

    length: int = 16
    uppercase: bool = True
    digits: bool = True
    symbols: bool = True
    emojis: bool = False
    memorable: bool = False

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"length must be an integer, got {self.length!r}")
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise ValueError(
                f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, "
                f"got {self.length}"
            )


def empty_grid(size: int = 5) -> tuple[tuple[bool, ...], ...]:
    """Return a *size* x *size* pattern grid with every cell cleared."""
    if size not in GRID_SIZES:
        raise ValueError(f"grid size must be one of {GRID_SIZES}, got {size}")
    return tuple((False,) * size for _ in range(size))


@dataclass(frozen=True)
class GraphicalOptions:
    """Graphical mode settings.

    *theme* only picks which palette the UI offers; icons chosen from other
    themes stay selected.  *grid* is a square tuple of boolean rows.
    """

    mode: str = "text"
    theme: str = "animals"
    icons: tuple[str, ...] = ()
    grid: tuple[tuple[bool, ...], ...] = field(default_factory=empty_grid)

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.theme not in ICON_THEMES:
            raise ValueError(
                f"theme must be one of {tuple(ICON_THEMES)}, got {self.theme!r}"
            )

        icons = tuple(self.icons)
        unknown = [icon for icon in icons if icon not in ALL_ICONS]
        if unknown:
            raise ValueError(f"Unknown icon(s): {' '.join(unknown)}")
        if len(set(icons)) != len(icons):
            raise ValueError("icons must not repeat")
        if len(icons) > MAX_ICONS:
            raise ValueError(f"At most {MAX_ICONS} icons may be selected")

        grid = tuple(tuple(bool(cell) for cell in row) for row in self.grid)
        size = len(grid)
        if size not in GRID_SIZES or any(len(row) != size for row in grid):
            raise ValueError(
                f"grid must be square with a side in {GRID_SIZES}"
            )
        if count_cells(grid) > MAX_PATTERN_CELLS:
            raise ValueError(
                f"At most {MAX_PATTERN_CELLS} pattern cells may be set"
            )

        # Normalise lists coming from callers into hashable tuples.
        object.__setattr__(self, "icons", icons)
        object.__setattr__(self, "grid", grid)

    @property
    def has_pattern(self) -> bool:
        return count_cells(self.grid) > 0

    @property
    def is_empty(self) -> bool:
        """True when neither icons nor pattern cells are selected."""
        return not self.icons and not self.has_pattern


# ── Selection operations ───────────────────────────────────────────────────


def icon_palette(theme: str) -> tuple[str, ...]:
    """Return the icons offered for *theme*."""
    try:
        return ICON_THEMES[theme]
    except KeyError:
        raise ValueError(f"Unknown icon theme: {theme!r}") from None


def toggle_icon(icons: tuple[str, ...], icon: str) -> tuple[str, ...]:
    """Remove *icon* if selected, otherwise append it.

    Appending past :data:`MAX_ICONS` leaves the selection unchanged.
    """
    if icon not in ALL_ICONS:
        raise ValueError(f"Unknown icon: {icon!r}")
    if icon in icons:
        return tuple(i for i in icons if i != icon)
    return (tuple(icons) + (icon,))[:MAX_ICONS]


def count_cells(grid) -> int:
    return sum(1 for row in grid for cell in row if cell)


def toggle_cell(grid, row: int, col: int) -> tuple[tuple[bool, ...], ...]:
    """Flip one pattern cell.  Setting a cell beyond the cap is ignored."""
    size = len(grid)
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(
            f"Cell ({row}, {col}) is outside the {size}x{size} grid"
        )
    if not grid[row][col] and count_cells(grid) >= MAX_PATTERN_CELLS:
        return tuple(tuple(r) for r in grid)
    return tuple(
        tuple(not cell if (r, c) == (row, col) else cell
              for c, cell in enumerate(cells))
        for r, cells in enumerate(grid)
    )


def pattern_code(grid) -> str:
    """Serialise set cells as ``P<index>`` in row-major order."""
    flat = [cell for row in grid for cell in row]
    return "".join(f"P{index}" for index, cell in enumerate(flat) if cell)
