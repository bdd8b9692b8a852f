"""The placement solution: an assignment of netlist nodes to layout sites.

A :py:class:`Placement` references (but never modifies) a
:py:class:`~sa_placer.layout.Layout` and a
:py:class:`~sa_placer.netlist.Netlist`. The only mutable state it owns is the
location of each node and a per-site occupancy count, both of which are held
in numpy arrays so that copies are cheap and the hot operations (finding free
sites and evaluating wirelength) are vectorised.
"""

import numpy as np

from sa_placer.sites import site_code

from sa_placer.exceptions import IncompletePlacementError


class Placement(object):
    """A (possibly partial) placement of a netlist onto a layout.

    A placement is valid (see :py:meth:`is_valid`) when every node is placed,
    no two nodes share a site and every node is on a site of its own type.

    Attributes
    ----------
    layout : :py:class:`~sa_placer.layout.Layout`
        Shared with every copy of this placement.
    netlist : :py:class:`~sa_placer.netlist.Netlist`
        Shared with every copy of this placement.
    """

    def __init__(self, layout, netlist):
        self.layout = layout
        self.netlist = netlist

        # Read-only data shared by all copies
        self._grid = layout.site_grid()
        self._edges = np.array(netlist.edges, dtype=np.intp).reshape(-1, 2)

        # Node locations, indexed by node id. Unplaced nodes have location
        # (-1, -1).
        self._locations = np.full((len(netlist), 2), -1, dtype=np.intp)

        # The number of nodes on each site
        self._occupancy = np.zeros(self._grid.shape, dtype=np.intp)

    def copy(self):
        """Produce an independent copy of this placement.

        The layout and netlist are shared; the node locations are not.
        """
        other = Placement.__new__(Placement)
        other.layout = self.layout
        other.netlist = self.netlist
        other._grid = self._grid
        other._edges = self._edges
        other._locations = self._locations.copy()
        other._occupancy = self._occupancy.copy()
        return other

    def __len__(self):
        """The number of nodes placed."""
        return int(np.count_nonzero(self._locations[:, 0] >= 0))

    def location(self, node):
        """Get the (x, y) location of a node, or None if it is unplaced."""
        x, y = self._locations[node.id]
        if x < 0:
            return None
        return (int(x), int(y))

    @property
    def placements(self):
        """A snapshot of the placement as a dictionary ``{node: (x, y),
        ...}``.

        The returned dictionary is independent of this placement.
        """
        return {node: (int(self._locations[node.id, 0]),
                       int(self._locations[node.id, 1]))
                for node in self.netlist.nodes
                if self._locations[node.id, 0] >= 0}

    def unplaced_nodes(self):
        """Get the list of nodes which have not yet been placed."""
        return [node for node in self.netlist.nodes
                if self._locations[node.id, 0] < 0]

    def place(self, node, xy):
        """Place (or move) a node at the given location.

        No checks are made: the caller is responsible for only placing nodes
        on free sites of the correct type.
        """
        old_x, old_y = self._locations[node.id]
        if old_x >= 0 and (old_x, old_y) in self.layout:
            self._occupancy[old_x, old_y] -= 1

        x, y = xy
        self._locations[node.id] = (x, y)
        if xy in self.layout:
            self._occupancy[x, y] += 1

    def get_possible_site_arrays(self, macro_type):
        """Get the x and y coordinates of free sites of a given type as a pair
        of numpy arrays (in x-major order).
        """
        mask = (self._grid == site_code(macro_type)) & (self._occupancy == 0)
        return np.nonzero(mask)

    def get_possible_sites(self, macro_type):
        """Get every unoccupied site of a given type.

        Parameters
        ----------
        macro_type : :py:class:`~sa_placer.sites.MacroType`

        Returns
        -------
        [(x, y), ...]
            In x-major order.
        """
        xs, ys = self.get_possible_site_arrays(macro_type)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def centroid(self):
        """Get the mean location of all placed nodes, truncated to integers.

        Returns
        -------
        (x, y) or None
            None if no nodes are placed.
        """
        placed = self._locations[self._locations[:, 0] >= 0]
        if len(placed) == 0:
            return None
        x, y = placed.sum(axis=0) // len(placed)
        return (int(x), int(y))

    def cost(self):
        """Get the total wirelength of the placement.

        This is the sum, over every edge in the netlist, of the Manhattan
        distance between the two nodes the edge connects.

        Raises
        ------
        IncompletePlacementError
            If any node is unplaced.
        """
        if np.any(self._locations[:, 0] < 0):
            raise IncompletePlacementError(
                "Cannot compute the cost of a placement with {} unplaced "
                "nodes.".format(len(self.unplaced_nodes())))

        sources = self._locations[self._edges[:, 0]]
        targets = self._locations[self._edges[:, 1]]
        return float(np.abs(sources - targets).sum())

    def is_valid(self):
        """Check the placement is complete, that no site holds more than one
        node and that every node sits on a site of its own type.

        This check is made from scratch using only the node locations and is
        intended for testing rather than use in the inner loop of a placer.
        """
        used_sites = set()
        for node in self.netlist.nodes:
            xy = self.location(node)
            if xy is None:
                return False
            if xy in used_sites:
                return False
            used_sites.add(xy)
            if xy not in self.layout or self.layout[xy] != node.macro_type:
                return False
        return True
