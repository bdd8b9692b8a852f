"""A trivial random initial placer."""

# This is renamed to ensure that the random module isn't accidentally used
# directly.
import random as default_random

from sa_placer.placement import Placement

from sa_placer.place.utils import check_capacity, check_placement


def place(layout, netlist, random=default_random):
    """A random placer.

    This algorithm places each node on a uniformly chosen free site of its
    type (completely ignoring connectivity) and thus is likely to produce very
    poor quality placements. It is the usual starting point for
    :py:func:`~sa_placer.place.sa.run_search`.

    Parameters
    ----------
    layout : :py:class:`~sa_placer.layout.Layout`
    netlist : :py:class:`~sa_placer.netlist.Netlist`
    random : :py:class:`random.Random`
        Defaults to ``import random`` but can be set to your own instance of
        :py:class:`random.Random` to allow you to control the seed and produce
        deterministic results.

    Returns
    -------
    :py:class:`~sa_placer.placement.Placement`

    Raises
    ------
    InsufficientResourceError
        If the layout cannot hold the netlist.
    """
    check_capacity(layout, netlist)

    placement = Placement(layout, netlist)
    for node in netlist.all_nodes():
        sites = placement.get_possible_sites(node.macro_type)
        placement.place(node, sites[random.randrange(len(sites))])

    check_placement(placement)
    return placement
