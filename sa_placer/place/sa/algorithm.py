"""The main local search loop."""

import logging

# This is renamed to ensure that all function correctly use the random number
# generator passed into them.
import random as default_random

from collections import namedtuple

from concurrent.futures import ThreadPoolExecutor

from sa_placer.place.rand import place as rand_place
from sa_placer.place.greedy import place as greedy_place

from sa_placer.place.sa.moves import Action, apply_action


"""
This logger is used by the search algorithm to indicate progress.
"""
logger = logging.getLogger(__name__)


INITIAL_PLACERS = {
    "random": rand_place,
    "greedy": greedy_place,
}


class SearchResult(namedtuple("SearchResult", "placement costs snapshots")):
    """The outcome of :py:func:`run_search`.

    Attributes
    ----------
    placement : :py:class:`~sa_placer.placement.Placement`
        The best placement found.
    costs : [(step, cost), ...]
        The cost of the current placement at the start of every step followed
        by the cost of the final placement.
    snapshots : [{node: (x, y), ...}, ...] or None
        When requested, a copy of the current placement taken alongside every
        cost sample.
    """
    __slots__ = ()


def _evaluate(placement, action, seed):
    """For internal use. Produce and score a neighbouring placement.

    Each call owns its own random number generator (seeded by the caller) so
    that candidates may be generated concurrently without sharing any mutable
    state.

    Returns
    -------
    (:py:class:`~sa_placer.placement.Placement`, cost)
    """
    candidate = placement.copy()
    apply_action(candidate, action, default_random.Random(seed))
    return candidate, candidate.cost()


def run_search(initial_placement, n_steps, n_neighbours=3,
               collect_snapshots=False, random=default_random,
               executor=None, on_step=None):
    """Improve a placement using parallel greedy local search.

    At each step up to ``n_neighbours`` distinct kinds of
    :py:class:`~sa_placer.place.sa.moves.Action` are chosen at random. Each
    is applied to its own copy of the current placement (concurrently) and the
    cheapest resulting candidate replaces the current placement if, and only
    if, it is strictly cheaper.

    Despite the package's name, no annealing schedule is used: worsening moves
    are never accepted.

    This algorithm produces INFO level logging information describing the
    progress made by the search.

    Parameters
    ----------
    initial_placement : :py:class:`~sa_placer.placement.Placement`
        A complete placement. This object is not modified.
    n_steps : int
        The number of steps to run for.
    n_neighbours : int
        The number of candidates to generate per step. Since no action kind is
        used twice in a step, at most ``len(Action)`` candidates are made.
    collect_snapshots : bool
        If True, record a snapshot of the placement with every cost sample.
    random : :py:class:`random.Random`
        A Python random number generator. Defaults to ``import random`` but can
        be set to your own instance of :py:class:`random.Random` to allow you
        to control the seed and produce deterministic results.
    executor : :py:class:`concurrent.futures.Executor` or None
        The executor used to evaluate candidates. If None, a thread pool is
        created for the duration of the search.
    on_step : callback_function or None
        An (optional) callback function which is called after every step.

        The callback function is passed the following arguments:

        * ``step``: the index of the step just completed (integer)
        * ``placement``: a copy of the current placement.
        * ``cost``: the cost of the current placement. (float)

        If the callback returns False, the search is terminated immediately
        and the current solution is returned.

    Returns
    -------
    :py:class:`SearchResult`

    Raises
    ------
    IncompletePlacementError
        If the initial placement is not complete.
    """
    if n_steps < 0:
        raise ValueError("n_steps must not be negative.")
    if n_neighbours < 1:
        raise ValueError("n_neighbours must be at least 1.")

    n_candidates = min(n_neighbours, len(Action))

    if executor is None:
        with ThreadPoolExecutor(max_workers=n_candidates) as pool:
            return run_search(initial_placement, n_steps, n_neighbours,
                              collect_snapshots, random, pool, on_step)

    current = initial_placement.copy()
    current_cost = current.cost()

    costs = []
    snapshots = [] if collect_snapshots else None

    logger.info("Starting search: %d steps, %d candidates per step, "
                "initial cost %0.1f.", n_steps, n_candidates, current_cost)

    num_accepted = 0
    step = 0
    while step < n_steps:
        costs.append((step, current_cost))
        if collect_snapshots:
            snapshots.append(current.placements)

        actions = random.sample(list(Action), n_candidates)
        futures = [executor.submit(_evaluate, current, action,
                                   random.getrandbits(64))
                   for action in actions]

        # Barrier: all candidates must be scored before one is chosen. Ties
        # are resolved in favour of the action drawn first.
        best, best_cost, best_action = None, None, None
        for action, future in zip(actions, futures):
            candidate, cost = future.result()
            if best is None or cost < best_cost:
                best, best_cost, best_action = candidate, cost, action

        if best_cost < current_cost:
            logger.debug("Step %d: %s accepted, cost %0.1f -> %0.1f.",
                         step, best_action.name, current_cost, best_cost)
            current, current_cost = best, best_cost
            num_accepted += 1
        else:
            logger.debug("Step %d: rejected, best candidate cost %0.1f.",
                         step, best_cost)

        step += 1

        # Call the user callback before the next step, terminating if
        # requested.
        if on_step is not None:
            if on_step(step - 1, current.copy(), current_cost) is False:
                break

    costs.append((step, current_cost))
    if collect_snapshots:
        snapshots.append(current.placements)

    logger.info("Search terminated after %d steps (%d accepted), "
                "final cost %0.1f.", step, num_accepted, current_cost)

    return SearchResult(current, costs, snapshots)


def place(layout, netlist, n_steps, n_neighbours=3, initial="random",
          collect_snapshots=False, random=default_random, executor=None,
          on_step=None):
    """Produce an initial placement and improve it with :py:func:`run_search`.

    Parameters
    ----------
    layout : :py:class:`~sa_placer.layout.Layout`
    netlist : :py:class:`~sa_placer.netlist.Netlist`
    n_steps : int
    n_neighbours : int
    initial : "random" or "greedy"
        The initial placement algorithm to use.

    See :py:func:`run_search` for the remaining arguments.

    Returns
    -------
    :py:class:`SearchResult`

    Raises
    ------
    InsufficientResourceError
        If the layout cannot hold the netlist.
    """
    try:
        initial_place = INITIAL_PLACERS[initial]
    except KeyError:
        raise ValueError("Unknown initial placer {!r}.".format(initial))

    initial_placement = initial_place(layout, netlist, random=random)
    logger.info("Initial %s placement cost: %0.1f",
                initial, initial_placement.cost())

    return run_search(initial_placement, n_steps, n_neighbours,
                      collect_snapshots=collect_snapshots, random=random,
                      executor=executor, on_step=on_step)
