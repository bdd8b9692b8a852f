"""Placement algorithms.

Initial placers (:py:mod:`~sa_placer.place.rand` and
:py:mod:`~sa_placer.place.greedy`) produce a first complete placement which
the local search in :py:mod:`~sa_placer.place.sa` then improves.
"""
