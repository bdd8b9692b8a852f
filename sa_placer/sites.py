"""Identifiers for the types of site found in an FPGA fabric.

Every site in a :py:class:`~sa_placer.layout.Layout` is either one of the
:py:class:`MacroType` values or :py:data:`EMPTY` (unusable). Netlist nodes
always require a :py:class:`MacroType`.
"""

from enum import IntEnum

import sentinel

from sa_placer.utils.docstrings import add_int_enums_to_docstring


@add_int_enums_to_docstring
class MacroType(IntEnum):
    """Enumeration of the functional blocks a site may provide.

    The integer values are the codes used in
    :py:meth:`~sa_placer.layout.Layout.site_grid`; zero is reserved for
    :py:data:`EMPTY`.
    """

    clb = 1
    dsp = 2
    bram = 3
    io = 4


"""A site which cannot host any node."""
EMPTY = sentinel.create("EMPTY")


def site_code(site_type):
    """Get the integer grid code of a site type (0 for :py:data:`EMPTY`)."""
    if site_type is EMPTY:
        return 0
    else:
        return int(MacroType(site_type))


def site_type_from_code(code):
    """Inverse of :py:func:`site_code`."""
    if code == 0:
        return EMPTY
    else:
        return MacroType(code)
