"""Rendering and export of placements for external tools.

These functions only consume snapshots (``{node: (x, y), ...}``
dictionaries) and cost series produced by the placer: they never touch a live
:py:class:`~sa_placer.placement.Placement`.
"""

from sa_placer.sites import MacroType, EMPTY


"""Size of one site in the SVG output (pixels)."""
CELL_SIZE = 100

"""Fill colour for each type of site and node."""
COLOURS = {
    MacroType.clb: "red",
    MacroType.dsp: "blue",
    MacroType.bram: "green",
    MacroType.io: "yellow",
    EMPTY: "gray",
}


def render_svg(layout, netlist, placements):
    """Draw a placement as an SVG image.

    Every site is drawn as a translucent box coloured by type, every placed
    node as a solid box labelled with its id and every edge whose ends are
    both placed as a line between the centres of their sites.

    Parameters
    ----------
    layout : :py:class:`~sa_placer.layout.Layout`
    netlist : :py:class:`~sa_placer.netlist.Netlist`
    placements : {node: (x, y), ...}

    Returns
    -------
    str
    """
    width = layout.width * CELL_SIZE
    height = layout.height * CELL_SIZE

    svg = ('<svg width="{}" height="{}" xmlns="http://www.w3.org/2000/svg" '
           'style="background-color:white">\n'.format(width, height))
    svg += '\t<rect x="0" y="0" width="{}" height="{}" fill="white"/>\n'.format(
        width, height)

    for x, y in layout:
        svg += ('\t<rect x="{}" y="{}" width="{size}" height="{size}" '
                'fill="{}" fill-opacity="0.25" stroke="black" '
                'stroke-width="2"/>\n'.format(x * CELL_SIZE, y * CELL_SIZE,
                                              COLOURS[layout[(x, y)]],
                                              size=CELL_SIZE))

    for node in sorted(placements):
        x, y = placements[node]
        svg += ('\t<rect x="{}" y="{}" width="{size}" height="{size}" '
                'fill="{}"/>\n'.format(x * CELL_SIZE, y * CELL_SIZE,
                                       COLOURS[node.macro_type],
                                       size=CELL_SIZE))
        svg += ('\t<text x="{}" y="{}" fill="black" font-size="{}">{}'
                '</text>\n'.format(x * CELL_SIZE + CELL_SIZE // 10,
                                   y * CELL_SIZE + (CELL_SIZE * 7) // 10,
                                   CELL_SIZE // 2, node.id))

    half = CELL_SIZE // 2
    for source, target in netlist.edges:
        source_node = netlist.nodes[source]
        target_node = netlist.nodes[target]
        if source_node not in placements or target_node not in placements:
            continue
        x1, y1 = placements[source_node]
        x2, y2 = placements[target_node]
        svg += ('\t<line x1="{}" y1="{}" x2="{}" y2="{}" '
                'style="stroke:rgb(0,0,0);stroke-width:4" />\n'.format(
                    x1 * CELL_SIZE + half, y1 * CELL_SIZE + half,
                    x2 * CELL_SIZE + half, y2 * CELL_SIZE + half))

    svg += "</svg>\n"
    return svg


def write_costs_csv(costs, output):
    """Write a cost series as CSV.

    Parameters
    ----------
    costs : [(step, cost), ...]
    output : file-like
        A writable text file.
    """
    output.write("step,cost\n")
    for step, cost in costs:
        output.write("{},{}\n".format(step, cost))
