"""Exceptions which placers can throw to indicate standard types of problem.
"""


class InsufficientResourceError(Exception):
    """Indication that a placement cannot exist because the layout has fewer
    sites of some type than the netlist has nodes of that type.
    """
    pass


class InvalidLayoutError(Exception):
    """Indication that a layout was configured with sites lying outside its
    bounds.
    """
    pass


class IncompletePlacementError(Exception):
    """Indication that an operation requiring every node to be placed was
    attempted on a partial placement.
    """
    pass


class PlacementInvariantError(Exception):
    """Indication that a placer produced a placement which breaks the
    placement rules. This always indicates a bug in the placer.
    """
    pass
