from lifegrid.utils.console import render_rows, render_whole_grid, render_window
from lifegrid.utils.patterns import load_pattern


def test_render_rows():
    rows = [(True, False), (False, True)]
    assert render_rows(rows) == "X.\n.X\n"
    assert render_rows(rows, alive='#', dead=' ') == "# \n #\n"
    assert render_rows([]) == ""


def test_render_window_hides_margin(grid):
    grid.seed(load_pattern('oscillator', 0, 0))
    lines = render_window(grid).splitlines()
    assert len(lines) == 20
    assert all(len(line) == 40 for line in lines)
    assert [line[:3] for line in lines[:4]] == [".X.", ".X.", ".X.", "..."]


def test_render_whole_grid_shows_margin(grid):
    grid.seed(load_pattern('oscillator', 0, 0))
    lines = render_whole_grid(grid, alive='o', dead='-').splitlines()
    assert len(lines) == 30
    assert all(len(line) == 50 for line in lines)
    assert lines[5][6] == 'o'
    assert set(lines[0]) == {'-'}
