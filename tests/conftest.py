import pytest

from sa_placer.sites import MacroType
from sa_placer.layout import Layout


@pytest.fixture
def small_layout():
    """A 4x4 layout made entirely of CLBs except for an IO site at (0, 0)."""
    layout = Layout(4, 4, {(x, y): MacroType.clb
                           for x in range(4) for y in range(4)})
    layout.sites[(0, 0)] = MacroType.io
    return layout


@pytest.fixture
def row_layout():
    """Returns a function which builds a 1-high row of CLB sites."""
    def f(width):
        return Layout(width, 1, {(x, 0): MacroType.clb
                                 for x in range(width)})
    return f
