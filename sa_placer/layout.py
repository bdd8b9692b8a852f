"""Defines the sites available in an FPGA fabric.

The Layout datastructure makes the assumption that most of a fabric is
uniform: sites are only recorded where they have been explicitly configured
and every other site is :py:data:`~sa_placer.sites.EMPTY`.
"""

import numpy as np

from sa_placer.sites import MacroType, EMPTY, site_code

from sa_placer.exceptions import InvalidLayoutError


class Layout(object):
    """Defines the typed sites of an FPGA fabric.

    This data-structure intends to be completely transparent. Its contents is
    described below. Layouts are configured once using the ``fill_*`` methods
    and must not be modified once a placement has been made using them since
    placements share (rather than copy) their layout.

    Attributes
    ----------
    width : int
        The width of the fabric in sites: sites will thus have x-coordinates
        between 0 and width-1 inclusive.
    height : int
        The height of the fabric in sites: sites will thus have y-coordinates
        between 0 and height-1 inclusive.
    sites : {(x, y): site_type, ...}
        The type of every configured site. Sites not present in this
        dictionary are :py:data:`~sa_placer.sites.EMPTY`.
    """
    __slots__ = ["width", "height", "sites"]

    def __init__(self, width, height, sites={}):
        """Defines the sites available within a fabric.

        Parameters
        ----------
        width : int
        height : int
        sites : {(x, y): site_type, ...}
        """
        self.width = width
        self.height = height

        self.sites = sites.copy()

    def copy(self):
        """Produce a copy of this datastructure."""
        return Layout(self.width, self.height, self.sites)

    def __contains__(self, xy):
        """Test if a given coordinate lies within the fabric."""
        x, y = xy
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, xy):
        """Get the type of the site at a given coordinate.

        Raises
        ------
        IndexError
            If the coordinate is not within the bounds of the fabric.
        """
        if xy not in self:
            raise IndexError("{} is not part of the layout.".format(repr(xy)))

        return self.sites.get(xy, EMPTY)

    def get(self, xy):
        """Get the type of the site at a given coordinate or None if the
        coordinate lies outside the fabric.
        """
        if xy not in self:
            return None
        return self.sites.get(xy, EMPTY)

    def __iter__(self):
        """Iterate over every coordinate in the fabric, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y)

    def __len__(self):
        return self.width * self.height

    def count_by_type(self):
        """Count the sites of each type.

        Returns
        -------
        {site_type: count, ...}
            Includes every :py:class:`~sa_placer.sites.MacroType` and
            :py:data:`~sa_placer.sites.EMPTY`, even when their count is zero.
        """
        counts = {EMPTY: 0}
        counts.update((macro_type, 0) for macro_type in MacroType)
        for xy in self:
            counts[self[xy]] += 1
        return counts

    def fill_corners(self, site_type):
        """Set the four corner sites to the given type."""
        for xy in [(0, 0),
                   (0, self.height - 1),
                   (self.width - 1, 0),
                   (self.width - 1, self.height - 1)]:
            self.sites[xy] = site_type

    def fill_border(self, site_type):
        """Set every site on the edge of the fabric to the given type."""
        for x in range(self.width):
            self.sites[(x, 0)] = site_type
            self.sites[(x, self.height - 1)] = site_type
        for y in range(self.height):
            self.sites[(0, y)] = site_type
            self.sites[(self.width - 1, y)] = site_type

    def fill_repeat(self, x, y, width, height, step_x, step_y, site_type):
        """Set every step_x-th column and step_y-th row of a rectangular
        region to the given type.

        Sites of the region which fall outside the fabric are ignored.

        Parameters
        ----------
        x, y : int
            The bottom-left corner of the region.
        width, height : int
            The size of the region.
        step_x, step_y : int
            The stride between filled sites.
        site_type : :py:class:`~sa_placer.sites.MacroType` or EMPTY
        """
        if step_x < 1 or step_y < 1:
            raise ValueError("Steps must be at least 1.")
        for xx in range(x, x + width, step_x):
            for yy in range(y, y + height, step_y):
                if (xx, yy) in self:
                    self.sites[(xx, yy)] = site_type

    def is_valid(self):
        """Check that every configured site lies within the fabric."""
        return all(xy in self for xy in self.sites)

    def site_grid(self):
        """Get a numpy array giving the site code of every site.

        Returns
        -------
        :py:class:`numpy.ndarray`
            An integer array of shape (width, height) where element [x, y]
            holds :py:func:`~sa_placer.sites.site_code` of the site at (x, y).
        """
        grid = np.zeros((self.width, self.height), dtype=np.int8)
        for (x, y), site_type in self.sites.items():
            if (x, y) in self:
                grid[x, y] = site_code(site_type)
        return grid

    def render_summary(self):
        """Produce a human readable summary of the size and contents of the
        fabric.
        """
        counts = self.count_by_type()
        lines = ["FPGA Layout Summary",
                 "Width: {}".format(self.width),
                 "Height: {}".format(self.height)]
        for macro_type in MacroType:
            lines.append("{} Count: {}".format(macro_type.name.upper(),
                                               counts[macro_type]))
        lines.append("Empty Count: {}".format(counts[EMPTY]))
        return "\n".join(lines) + "\n"

    def render_ascii(self):
        """Draw the fabric as a box-drawing character grid, one row per y
        coordinate.
        """
        symbols = {MacroType.clb: "C",
                   MacroType.dsp: "D",
                   MacroType.bram: "B",
                   MacroType.io: "I",
                   EMPTY: " "}

        def rule(left, middle, right):
            return left + middle.join("───" for _ in range(self.width)) + \
                right + "\n"

        output = rule("┌", "┬", "┐")
        for y in range(self.height):
            output += "".join("│ {} ".format(symbols[self[(x, y)]])
                              for x in range(self.width)) + "│\n"
            if y < self.height - 1:
                output += rule("├", "┼", "┤")
        output += rule("└", "┴", "┘")
        return output


def build_simple_layout(width, height):
    """Build a simple fabric: a ring of IO sites with empty corners around a
    core of CLBs in which every tenth column is BRAM.

    Raises
    ------
    InvalidLayoutError
        If the configured layout has sites outside its bounds.
    """
    layout = Layout(width, height)

    layout.fill_border(MacroType.io)
    layout.fill_corners(EMPTY)
    layout.fill_repeat(1, 1, width - 2, height - 2, 1, 1, MacroType.clb)
    layout.fill_repeat(10, 1, width - 2, height - 2, 10, 1, MacroType.bram)

    if not layout.is_valid():
        raise InvalidLayoutError(
            "Layout of {}x{} has sites outside its bounds.".format(
                width, height))

    return layout
