"""Move operators which produce a neighbouring placement.

Every operator mutates the placement it is given in place and returns True if
the placement was changed. When an operator finds nothing to do (e.g. a node
has no free site to move to) it leaves the placement untouched and returns
False: this is not an error.
"""

from enum import IntEnum

import numpy as np

from sa_placer.exceptions import IncompletePlacementError

from sa_placer.utils.docstrings import add_int_enums_to_docstring


@add_int_enums_to_docstring
class Action(IntEnum):
    """The kinds of move which the local search may make."""

    move = 0
    swap = 1
    move_directed = 2


def _placed_location(placement, node):
    xy = placement.location(node)
    if xy is None:
        raise IncompletePlacementError("{} is not placed.".format(node))
    return xy


def move(placement, random):
    """Move a randomly chosen node to a randomly chosen free site of its
    type.
    """
    nodes = placement.netlist.nodes
    if not nodes:
        return False
    node = nodes[random.randrange(len(nodes))]

    xs, ys = placement.get_possible_site_arrays(node.macro_type)
    if len(xs) == 0:
        return False

    i = random.randrange(len(xs))
    placement.place(node, (int(xs[i]), int(ys[i])))
    return True


def swap(placement, random):
    """Exchange the locations of two randomly chosen nodes of the same type.
    """
    nodes = placement.netlist.nodes
    if not nodes:
        return False
    node_a = nodes[random.randrange(len(nodes))]

    others = [n for n in placement.netlist.nodes_of_type(node_a.macro_type)
              if n != node_a]
    if not others:
        return False
    node_b = others[random.randrange(len(others))]

    xy_a = _placed_location(placement, node_a)
    xy_b = _placed_location(placement, node_b)
    placement.place(node_a, xy_b)
    placement.place(node_b, xy_a)
    return True


def move_directed(placement, random):
    """Move a randomly chosen node to the free site of its type nearest the
    centroid of all placed nodes.

    The move is only made if it brings the node strictly nearer to the
    centroid.
    """
    nodes = placement.netlist.nodes
    centroid = placement.centroid()
    if not nodes or centroid is None:
        return False
    cx, cy = centroid

    node = nodes[random.randrange(len(nodes))]
    x, y = _placed_location(placement, node)

    xs, ys = placement.get_possible_site_arrays(node.macro_type)
    if len(xs) == 0:
        return False

    distances = np.abs(xs - cx) + np.abs(ys - cy)
    i = int(np.argmin(distances))
    if distances[i] >= abs(x - cx) + abs(y - cy):
        return False

    placement.place(node, (int(xs[i]), int(ys[i])))
    return True


OPERATORS = {
    Action.move: move,
    Action.swap: swap,
    Action.move_directed: move_directed,
}


def apply_action(placement, action, random):
    """Apply the move operator for the given :py:class:`Action`.

    Returns
    -------
    bool
        True if the placement was changed.
    """
    return OPERATORS[Action(action)](placement, random)
