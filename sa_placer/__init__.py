"""Typed FPGA placement by parallel greedy local search.

The usual flow is to build a :py:class:`~sa_placer.layout.Layout` and a
:py:class:`~sa_placer.netlist.Netlist`, produce an initial
:py:class:`~sa_placer.placement.Placement` and improve it with
:py:func:`~sa_placer.place.sa.run_search` (or do both with
:py:func:`~sa_placer.place.sa.place`).
"""

from sa_placer.version import __version__  # noqa

from sa_placer.sites import MacroType, EMPTY  # noqa
from sa_placer.layout import Layout, build_simple_layout  # noqa
from sa_placer.netlist import Node, Netlist, build_simple_netlist  # noqa
from sa_placer.placement import Placement  # noqa
from sa_placer.place.sa import run_search, SearchResult  # noqa
