"""A command-line utility which places a randomly generated netlist onto a
simple FPGA fabric and reports the improvement made by the local search.

Installed as "sa-place" by setuptools.
"""

import sys
import argparse
import logging
import random

import sa_placer

from sa_placer.layout import build_simple_layout
from sa_placer.netlist import build_simple_netlist
from sa_placer.place.sa import place
from sa_placer.render import render_svg, write_costs_csv

from sa_placer.exceptions import InsufficientResourceError, \
    InvalidLayoutError


def write_file(filename, text):
    """Write a string to a file, or to stdout if the filename is "-"."""
    if filename == "-":
        sys.stdout.write(text)
    else:
        with open(filename, "w") as f:
            f.write(text)


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Place a random netlist onto a simple FPGA fabric using "
                    "parallel greedy local search.")
    parser.add_argument("--version", "-V", action="version",
                        version="%(prog)s {}".format(sa_placer.__version__))

    parser.add_argument("--verbose", "-v", action="store_true",
                        help="report search progress on STDERR")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random number generator")

    fabric_group = parser.add_argument_group("fabric arguments")
    fabric_group.add_argument("--width", type=int, default=64,
                              help="fabric width in sites "
                                   "(default: %(default)s)")
    fabric_group.add_argument("--height", type=int, default=64,
                              help="fabric height in sites "
                                   "(default: %(default)s)")

    netlist_group = parser.add_argument_group("netlist arguments")
    netlist_group.add_argument("--nodes", type=int, default=300,
                               help="number of nodes (default: %(default)s)")
    netlist_group.add_argument("--io", type=int, default=30,
                               help="number of IO nodes "
                                    "(default: %(default)s)")
    netlist_group.add_argument("--bram", type=int, default=100,
                               help="number of BRAM nodes "
                                    "(default: %(default)s)")
    netlist_group.add_argument("--edge-probability", type=float,
                               default=0.02,
                               help="probability of each edge existing "
                                    "(default: %(default)s)")

    search_group = parser.add_argument_group("search arguments")
    search_group.add_argument("--steps", type=int, default=500,
                              help="number of search steps "
                                   "(default: %(default)s)")
    search_group.add_argument("--neighbours", type=int, default=16,
                              help="candidates evaluated per step "
                                   "(default: %(default)s)")
    search_group.add_argument("--initial", choices=["random", "greedy"],
                              default="random",
                              help="initial placement algorithm "
                                   "(default: %(default)s)")

    output_group = parser.add_argument_group("output arguments")
    output_group.add_argument("--costs", type=str, metavar="FILENAME",
                              help="write the cost of every step as CSV "
                                   "(- for stdout)")
    output_group.add_argument("--svg-initial", type=str, metavar="FILENAME",
                              help="draw the initial placement as SVG")
    output_group.add_argument("--svg-final", type=str, metavar="FILENAME",
                              help="draw the final placement as SVG")

    args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s")

    r = random.Random(args.seed)

    try:
        layout = build_simple_layout(args.width, args.height)
        netlist = build_simple_netlist(args.nodes, args.io, args.bram,
                                       args.edge_probability, random=r)
        sys.stdout.write(layout.render_summary())
        sys.stdout.write(netlist.render_summary())

        result = place(layout, netlist, args.steps, args.neighbours,
                       initial=args.initial,
                       collect_snapshots=args.svg_initial is not None,
                       random=r)
    except (InsufficientResourceError, InvalidLayoutError, ValueError) as e:
        sys.stderr.write("{}: error: {}\n".format(parser.prog, e))
        return 1

    sys.stdout.write("Initial cost: {}\n".format(result.costs[0][1]))
    sys.stdout.write("Final cost: {}\n".format(result.costs[-1][1]))

    if args.costs is not None:
        if args.costs == "-":
            write_costs_csv(result.costs, sys.stdout)
        else:
            with open(args.costs, "w") as f:
                write_costs_csv(result.costs, f)
    if args.svg_initial is not None:
        write_file(args.svg_initial,
                   render_svg(layout, netlist, result.snapshots[0]))
    if args.svg_final is not None:
        write_file(args.svg_final,
                   render_svg(layout, netlist, result.placement.placements))

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
