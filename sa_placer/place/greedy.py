"""A greedy initial placer which packs nodes towards the origin."""

import numpy as np

from sa_placer.placement import Placement

from sa_placer.place.utils import check_capacity, check_placement


def place(layout, netlist, random=None):
    """Place each node, in id order, on the free site of its type nearest
    (by Manhattan distance) to (0, 0).

    Where several sites are equally near, the one with the smallest x
    coordinate is used. The result is deterministic; the ``random`` argument
    is accepted (and ignored) for interchangeability with
    :py:func:`sa_placer.place.rand.place`.

    Raises
    ------
    InsufficientResourceError
        If the layout cannot hold the netlist.
    """
    check_capacity(layout, netlist)

    placement = Placement(layout, netlist)
    for node in netlist.all_nodes():
        xs, ys = placement.get_possible_site_arrays(node.macro_type)
        i = int(np.argmin(xs + ys))
        placement.place(node, (int(xs[i]), int(ys[i])))

    check_placement(placement)
    return placement
