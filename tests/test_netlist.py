import pytest

import random

from sa_placer.sites import MacroType
from sa_placer.netlist import Node, Netlist, build_simple_netlist


class TestNetlist(object):
    def test_nodes(self):
        netlist = Netlist([MacroType.clb, MacroType.io, MacroType.clb],
                          [(0, 1), (1, 2)])
        assert netlist.all_nodes() == [Node(0, MacroType.clb),
                                       Node(1, MacroType.io),
                                       Node(2, MacroType.clb)]
        assert len(netlist) == 3
        assert netlist.edges == [(0, 1), (1, 2)]

        # The list returned is a copy
        netlist.all_nodes().pop()
        assert len(netlist.all_nodes()) == 3

    def test_node_types_coerced(self):
        netlist = Netlist([1, 4])
        assert netlist.nodes[0].macro_type is MacroType.clb
        assert netlist.nodes[1].macro_type is MacroType.io

    def test_count_by_type(self):
        netlist = Netlist([MacroType.clb, MacroType.io, MacroType.clb])
        assert netlist.count_by_type() == {MacroType.clb: 2,
                                           MacroType.dsp: 0,
                                           MacroType.bram: 0,
                                           MacroType.io: 1}

    def test_nodes_of_type(self):
        netlist = Netlist([MacroType.clb, MacroType.io, MacroType.clb])
        assert netlist.nodes_of_type(MacroType.clb) == [netlist.nodes[0],
                                                        netlist.nodes[2]]
        assert netlist.nodes_of_type(MacroType.dsp) == []

    def test_neighbours(self):
        netlist = Netlist([MacroType.clb] * 4, [(0, 1), (2, 0), (0, 1)])
        assert netlist.neighbours(netlist.nodes[0]) == set([1, 2])
        assert netlist.neighbours(netlist.nodes[1]) == set([0])
        assert netlist.neighbours(netlist.nodes[3]) == set()

    @pytest.mark.parametrize("edge", [(0, 2), (-1, 0), (5, 1)])
    def test_bad_edge(self, edge):
        with pytest.raises(ValueError):
            Netlist([MacroType.clb, MacroType.clb], [edge])

    def test_render_summary(self):
        netlist = Netlist([MacroType.clb, MacroType.io], [(0, 1)])
        summary = netlist.render_summary()
        assert "Nodes: 2\n" in summary
        assert "Edges: 1\n" in summary
        assert "IO Count: 1\n" in summary


class TestBuildSimpleNetlist(object):
    def test_types(self):
        netlist = build_simple_netlist(100, 10, 20, random=random.Random(1))
        assert netlist.count_by_type() == {MacroType.clb: 70,
                                           MacroType.dsp: 0,
                                           MacroType.bram: 20,
                                           MacroType.io: 10}

    @pytest.mark.parametrize("edge_probability", [0.0, 0.02, 0.5])
    def test_no_isolated_nodes(self, edge_probability):
        netlist = build_simple_netlist(50, 5, 5, edge_probability,
                                       random=random.Random(1))
        assert all(netlist.neighbours(node) for node in netlist.nodes)
        assert all(source != target for source, target in netlist.edges)

    def test_single_node(self):
        netlist = build_simple_netlist(1, 0, 0, random=random.Random(1))
        assert len(netlist) == 1
        assert netlist.edges == []

    def test_deterministic(self):
        a = build_simple_netlist(50, 5, 5, random=random.Random(3))
        b = build_simple_netlist(50, 5, 5, random=random.Random(3))
        assert a.nodes == b.nodes
        assert a.edges == b.edges

    def test_too_many_relabels(self):
        with pytest.raises(ValueError):
            build_simple_netlist(10, 6, 5)
