"""Netlist data structures and a random netlist generator.

A :py:class:`Netlist` is stored arena-style: nodes live in a list whose
indices are the nodes' ids and connectivity is a list of ``(source_id,
target_id)`` pairs. Edge direction is preserved but has no effect on
placement cost.
"""

# This is renamed to ensure that all functions correctly use the random number
# generator passed into them.
import random as default_random

from collections import namedtuple

import networkx as nx

from sa_placer.sites import MacroType


class Node(namedtuple("Node", "id macro_type")):
    """An element of a netlist which must be placed on a site.

    Attributes
    ----------
    id : int
        The index of the node within its :py:class:`Netlist`.
    macro_type : :py:class:`~sa_placer.sites.MacroType`
        The type of site the node must occupy.
    """
    __slots__ = ()


class Netlist(object):
    """A set of typed nodes and the pairwise connections between them.

    Attributes
    ----------
    nodes : [:py:class:`Node`, ...]
        All nodes, ``nodes[i].id == i``.
    edges : [(source_id, target_id), ...]
        The connections between nodes.
    """

    def __init__(self, node_types, edges=[]):
        """Define a netlist.

        Parameters
        ----------
        node_types : [:py:class:`~sa_placer.sites.MacroType`, ...]
            The type of each node. Node ids are allocated in this order.
        edges : [(source_id, target_id), ...]

        Raises
        ------
        ValueError
            If an edge refers to a node which does not exist.
        """
        self.nodes = [Node(i, MacroType(t)) for i, t in enumerate(node_types)]
        self.edges = []
        for source, target in edges:
            for node_id in (source, target):
                if not 0 <= node_id < len(self.nodes):
                    raise ValueError(
                        "Edge {} refers to unknown node {}.".format(
                            (source, target), node_id))
            self.edges.append((source, target))

        # Node-to-Neighbours: {node_id: set([node_id, ...]), ...}
        self._n2n = {node.id: set() for node in self.nodes}
        for source, target in self.edges:
            self._n2n[source].add(target)
            self._n2n[target].add(source)

        # Type-to-Nodes: {macro_type: [node, ...], ...}
        self._t2n = {macro_type: [] for macro_type in MacroType}
        for node in self.nodes:
            self._t2n[node.macro_type].append(node)

    def all_nodes(self):
        """Get every node in the netlist, in id order."""
        return list(self.nodes)

    def nodes_of_type(self, macro_type):
        """Get every node requiring the given type of site, in id order."""
        return list(self._t2n[macro_type])

    def __len__(self):
        return len(self.nodes)

    def count_by_type(self):
        """Count the nodes requiring each type of site.

        Returns
        -------
        {:py:class:`~sa_placer.sites.MacroType`: count, ...}
            Includes every MacroType, even when its count is zero.
        """
        counts = {macro_type: 0 for macro_type in MacroType}
        for node in self.nodes:
            counts[node.macro_type] += 1
        return counts

    def neighbours(self, node):
        """Get the ids of all nodes sharing an edge with the given node."""
        return set(self._n2n[node.id])

    def render_summary(self):
        """Produce a human readable summary of the netlist."""
        counts = self.count_by_type()
        lines = ["Netlist Summary",
                 "Nodes: {}".format(len(self.nodes)),
                 "Edges: {}".format(len(self.edges))]
        for macro_type in MacroType:
            lines.append("{} Count: {}".format(macro_type.name.upper(),
                                               counts[macro_type]))
        return "\n".join(lines) + "\n"


def build_simple_netlist(n_nodes, n_io, n_bram, edge_probability=0.02,
                         random=default_random):
    """Generate a random netlist.

    Connectivity is a directed G(n, p) random graph. All nodes start as CLBs
    before n_io of them are relabelled as IO and then n_bram of the remaining
    CLBs are relabelled as BRAM. Finally every node without any edges is
    connected to a randomly chosen node which has some.

    Parameters
    ----------
    n_nodes : int
    n_io : int
    n_bram : int
        n_io + n_bram must not exceed n_nodes.
    edge_probability : float
        The probability of each directed edge existing in the random graph.
    random : :py:class:`random.Random`
        Defaults to ``import random`` but can be set to your own instance of
        :py:class:`random.Random` to allow you to control the seed and produce
        deterministic results.
    """
    if n_io + n_bram > n_nodes:
        raise ValueError(
            "Cannot relabel {} IO and {} BRAM nodes in a netlist of {} "
            "nodes.".format(n_io, n_bram, n_nodes))

    graph = nx.gnp_random_graph(n_nodes, edge_probability,
                                seed=random, directed=True)
    edges = sorted(graph.edges())

    node_types = [MacroType.clb] * n_nodes
    for node_id in random.sample(range(n_nodes), n_io):
        node_types[node_id] = MacroType.io
    clbs = [i for i, t in enumerate(node_types) if t == MacroType.clb]
    for node_id in random.sample(clbs, n_bram):
        node_types[node_id] = MacroType.bram

    connected = set(v for edge in edges for v in edge)
    unconnected = [i for i in range(n_nodes) if i not in connected]
    connected = sorted(connected)

    # With no edges at all there is nothing to attach to: seed the connected
    # set with a single edge.
    if not connected and n_nodes >= 2:
        edges.append((unconnected[1], unconnected[0]))
        connected = unconnected[:2]
        unconnected = unconnected[2:]

    for node_id in unconnected:
        if connected:
            edges.append((random.choice(connected), node_id))

    return Netlist(node_types, edges)
