from enum import IntEnum

from sa_placer.utils.docstrings import add_int_enums_to_docstring


def test_add_int_enums_to_docstring():
    @add_int_enums_to_docstring
    class MyIntEnumWithDocstring(IntEnum):
        """A populated IntEnum."""
        a = 1
        b = 2

    assert MyIntEnumWithDocstring.__doc__ == (
        "A populated IntEnum.\n"
        "\n"
        "Attributes\n"
        "----------\n"
        "a = 1\n"
        "b = 2\n")
