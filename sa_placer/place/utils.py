"""Common utility functions for placement algorithms."""

from sa_placer.sites import MacroType

from sa_placer.exceptions import \
    InsufficientResourceError, PlacementInvariantError


def check_capacity(layout, netlist):
    """Ensure the layout has enough sites of every type to hold the netlist.

    Raises
    ------
    InsufficientResourceError
        If any type of node outnumbers the sites of that type.
    """
    sites = layout.count_by_type()
    nodes = netlist.count_by_type()
    for macro_type in MacroType:
        if nodes[macro_type] > sites[macro_type]:
            raise InsufficientResourceError(
                "Netlist has {} {} nodes but the layout has only {} {} "
                "sites.".format(nodes[macro_type], macro_type.name,
                                sites[macro_type], macro_type.name))


def check_placement(placement):
    """Ensure a freshly constructed placement is valid.

    Raises
    ------
    PlacementInvariantError
    """
    if not placement.is_valid():
        raise PlacementInvariantError(
            "Placer produced an invalid placement: {} of {} nodes "
            "placed.".format(len(placement), len(placement.netlist)))
