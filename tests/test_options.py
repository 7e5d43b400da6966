"""Tests for option records and the icon/pattern selection model."""

import pytest

from passcraft import (
    ICON_THEMES,
    GraphicalOptions,
    PasswordOptions,
    empty_grid,
    icon_palette,
    pattern_code,
    toggle_cell,
    toggle_icon,
)
from passcraft.options import MAX_ICONS, MAX_PATTERN_CELLS, count_cells


# ── PasswordOptions ────────────────────────────────────────────────────────


class TestPasswordOptions:
    def test_defaults(self):
        opts = PasswordOptions()
        assert opts.length == 16
        assert opts.uppercase and opts.digits and opts.symbols
        assert not opts.emojis
        assert not opts.memorable

    @pytest.mark.parametrize("length", [4, 50])
    def test_bounds_accepted(self, length):
        assert PasswordOptions(length).length == length

    @pytest.mark.parametrize("length", [3, 51, 0, -1])
    def test_out_of_range_raises(self, length):
        with pytest.raises(ValueError, match="between 4 and 50"):
            PasswordOptions(length)

    @pytest.mark.parametrize("length", [16.0, "16", True])
    def test_non_integer_raises(self, length):
        with pytest.raises(ValueError, match="integer"):
            PasswordOptions(length)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            PasswordOptions().length = 20


# ── GraphicalOptions ───────────────────────────────────────────────────────


class TestGraphicalOptions:
    def test_defaults(self):
        g = GraphicalOptions()
        assert g.mode == "text"
        assert g.theme == "animals"
        assert g.icons == ()
        assert g.grid == empty_grid(5)
        assert g.is_empty

    def test_lists_are_normalised(self):
        grid = [list(row) for row in empty_grid(3)]
        grid[1][2] = True
        g = GraphicalOptions(icons=["🐶"], grid=grid)
        assert g.icons == ("🐶",)
        assert isinstance(g.grid, tuple)
        assert g.grid[1] == (False, False, True)
        assert g.has_pattern
        hash(g)

    def test_icons_from_other_themes_allowed(self):
        g = GraphicalOptions(theme="food", icons=("🐶", "🌸"))
        assert g.icons == ("🐶", "🌸")

    def test_bad_mode(self):
        with pytest.raises(ValueError, match="mode"):
            GraphicalOptions(mode="pictures")

    def test_bad_theme(self):
        with pytest.raises(ValueError, match="theme"):
            GraphicalOptions(theme="cars")

    def test_unknown_icon(self):
        with pytest.raises(ValueError, match="Unknown icon"):
            GraphicalOptions(icons=("x",))

    def test_duplicate_icons(self):
        with pytest.raises(ValueError, match="repeat"):
            GraphicalOptions(icons=("🐶", "🐶"))

    def test_too_many_icons(self):
        with pytest.raises(ValueError, match="At most 8"):
            GraphicalOptions(icons=ICON_THEMES["animals"][:9])

    def test_non_square_grid(self):
        with pytest.raises(ValueError, match="square"):
            GraphicalOptions(grid=((False, False, False),) * 2)

    def test_unsupported_grid_size(self):
        with pytest.raises(ValueError, match="square"):
            GraphicalOptions(grid=((False,) * 4,) * 4)

    def test_too_many_cells(self):
        grid = [[True] * 5 for _ in range(2)] + [[False] * 5 for _ in range(3)]
        with pytest.raises(ValueError, match="At most 9"):
            GraphicalOptions(grid=grid)


# ── icons ──────────────────────────────────────────────────────────────────


class TestIcons:
    def test_palettes(self):
        assert set(ICON_THEMES) == {"animals", "nature", "food", "objects", "symbols"}
        for theme in ICON_THEMES:
            assert len(icon_palette(theme)) == 16

    def test_unknown_palette(self):
        with pytest.raises(ValueError, match="Unknown icon theme"):
            icon_palette("cars")

    def test_toggle_adds_then_removes(self):
        icons = toggle_icon((), "🐶")
        assert icons == ("🐶",)
        icons = toggle_icon(icons, "🐱")
        assert icons == ("🐶", "🐱")
        assert toggle_icon(icons, "🐶") == ("🐱",)

    def test_cap_drops_new_icon(self):
        icons = ICON_THEMES["animals"][:MAX_ICONS]
        assert toggle_icon(icons, "🍎") == icons

    def test_cap_holds_under_repeated_toggles(self):
        icons = ()
        palette = [icon for theme in ICON_THEMES.values() for icon in theme]
        for _ in range(3):
            for icon in palette:
                icons = toggle_icon(icons, icon)
                assert len(icons) <= MAX_ICONS
                assert len(set(icons)) == len(icons)

    def test_unknown_icon(self):
        with pytest.raises(ValueError, match="Unknown icon"):
            toggle_icon((), "?")


# ── pattern grid ───────────────────────────────────────────────────────────


class TestPatternGrid:
    @pytest.mark.parametrize("size", [3, 5])
    def test_empty_grid(self, size):
        grid = empty_grid(size)
        assert len(grid) == size
        assert all(len(row) == size and not any(row) for row in grid)

    def test_empty_grid_bad_size(self):
        with pytest.raises(ValueError, match="grid size"):
            empty_grid(4)

    def test_toggle_cell(self):
        grid = toggle_cell(empty_grid(), 1, 2)
        assert grid[1][2] is True
        assert count_cells(grid) == 1
        assert toggle_cell(grid, 1, 2) == empty_grid()

    def test_toggle_out_of_range(self):
        with pytest.raises(ValueError, match="outside"):
            toggle_cell(empty_grid(3), 3, 0)
        with pytest.raises(ValueError, match="outside"):
            toggle_cell(empty_grid(), 0, -1)

    def test_cap_holds_under_repeated_toggles(self):
        grid = empty_grid()
        for row in range(5):
            for col in range(5):
                grid = toggle_cell(grid, row, col)
                assert count_cells(grid) <= MAX_PATTERN_CELLS
        assert count_cells(grid) == MAX_PATTERN_CELLS

    def test_cleared_cell_frees_capacity(self):
        grid = empty_grid(3)
        for row in range(3):
            for col in range(3):
                grid = toggle_cell(grid, row, col)
        grid = toggle_cell(grid, 0, 0)
        assert count_cells(grid) == MAX_PATTERN_CELLS - 1

    def test_pattern_code(self):
        grid = toggle_cell(toggle_cell(empty_grid(), 0, 0), 4, 4)
        assert pattern_code(grid) == "P0P24"
        assert pattern_code(empty_grid()) == ""
