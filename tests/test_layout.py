import pytest

import numpy as np

from sa_placer.sites import MacroType, EMPTY
from sa_placer.layout import Layout, build_simple_layout
from sa_placer.exceptions import InvalidLayoutError


class TestLayout(object):
    def test_defaults_to_empty(self):
        layout = Layout(3, 2, {(1, 1): MacroType.dsp})
        assert layout[(1, 1)] is MacroType.dsp
        assert layout[(0, 0)] is EMPTY
        assert layout.get((2, 1)) is EMPTY

    def test_out_of_bounds(self):
        layout = Layout(3, 2)
        assert (3, 0) not in layout
        assert (0, 2) not in layout
        assert (-1, 0) not in layout
        assert (2, 1) in layout
        assert layout.get((3, 0)) is None
        with pytest.raises(IndexError):
            layout[(3, 0)]

    def test_sites_copied(self):
        sites = {(0, 0): MacroType.clb}
        layout = Layout(1, 1, sites)
        layout.sites[(0, 0)] = MacroType.io
        assert sites[(0, 0)] is MacroType.clb

        other = layout.copy()
        other.sites[(0, 0)] = MacroType.bram
        assert layout[(0, 0)] is MacroType.io

    def test_iter(self):
        layout = Layout(2, 3)
        assert list(layout) == [(0, 0), (0, 1), (0, 2),
                                (1, 0), (1, 1), (1, 2)]
        assert len(layout) == 6

    def test_count_by_type(self):
        layout = Layout(3, 3, {(0, 0): MacroType.clb,
                               (0, 1): MacroType.clb,
                               (2, 2): MacroType.io})
        assert layout.count_by_type() == {
            EMPTY: 6,
            MacroType.clb: 2,
            MacroType.dsp: 0,
            MacroType.bram: 0,
            MacroType.io: 1,
        }

    def test_fill_corners(self):
        layout = Layout(3, 4)
        layout.fill_corners(MacroType.io)
        assert set(layout.sites) == set([(0, 0), (0, 3), (2, 0), (2, 3)])

    def test_fill_border(self):
        layout = Layout(4, 3)
        layout.fill_border(MacroType.io)
        assert layout.count_by_type()[MacroType.io] == 10
        assert layout[(1, 1)] is EMPTY
        assert layout[(2, 1)] is EMPTY

    def test_fill_repeat(self):
        layout = Layout(5, 3)
        layout.fill_repeat(1, 0, 10, 2, 2, 1, MacroType.bram)

        # Sites beyond the edge of the layout are skipped
        assert set(layout.sites) == set([(1, 0), (1, 1), (3, 0), (3, 1)])
        assert layout.is_valid()

    def test_fill_repeat_bad_step(self):
        layout = Layout(5, 3)
        with pytest.raises(ValueError):
            layout.fill_repeat(0, 0, 5, 3, 0, 1, MacroType.clb)

    def test_is_valid(self):
        assert Layout(2, 2, {(1, 1): MacroType.clb}).is_valid()
        assert not Layout(2, 2, {(2, 1): MacroType.clb}).is_valid()
        assert not Layout(2, 2, {(0, -1): MacroType.clb}).is_valid()

    def test_site_grid(self):
        layout = Layout(3, 2, {(0, 0): MacroType.clb,
                               (2, 1): MacroType.io,
                               (1, 0): EMPTY})
        grid = layout.site_grid()
        assert grid.shape == (3, 2)
        assert np.array_equal(grid, [[1, 0],
                                     [0, 0],
                                     [0, 4]])

    def test_render_ascii(self):
        layout = Layout(2, 1, {(0, 0): MacroType.clb})
        assert layout.render_ascii() == ("┌───┬───┐\n"
                                         "│ C │   │\n"
                                         "└───┴───┘\n")

    def test_render_ascii_rows(self):
        layout = Layout(1, 2, {(0, 1): MacroType.io})
        assert layout.render_ascii() == ("┌───┐\n"
                                         "│   │\n"
                                         "├───┤\n"
                                         "│ I │\n"
                                         "└───┘\n")


def test_build_simple_layout():
    layout = build_simple_layout(12, 5)
    assert layout.is_valid()

    # Empty corners in a ring of IO
    for xy in [(0, 0), (0, 4), (11, 0), (11, 4)]:
        assert layout[xy] is EMPTY
    assert layout[(5, 0)] is MacroType.io
    assert layout[(0, 2)] is MacroType.io

    # A CLB core with a BRAM column at x=10
    assert layout[(1, 1)] is MacroType.clb
    assert layout[(10, 2)] is MacroType.bram

    assert layout.count_by_type() == {
        EMPTY: 4,
        MacroType.io: 26,
        MacroType.clb: 27,
        MacroType.bram: 3,
        MacroType.dsp: 0,
    }

    summary = layout.render_summary()
    assert "Width: 12\n" in summary
    assert "Height: 5\n" in summary
    assert "CLB Count: 27\n" in summary
    assert "BRAM Count: 3\n" in summary
    assert "Empty Count: 4\n" in summary


def test_build_simple_layout_invalid():
    # The corners of a zero-sized layout lie outside it
    with pytest.raises(InvalidLayoutError):
        build_simple_layout(0, 0)
