"""A parallel local-search placer.

The search is broken into two components: the
:py:mod:`~sa_placer.place.sa.moves` which each turn a placement into a
neighbouring placement and the search loop in
:py:func:`~sa_placer.place.sa.algorithm.run_search` which evaluates several
neighbours concurrently at each step and keeps the best of them whenever it
improves on the current placement.
"""

from sa_placer.place.sa.algorithm import run_search, place, SearchResult
from sa_placer.place.sa.moves import Action
