"""The round scheduler: runs a sequence of warmup and annealing rounds, each
starting from the best order found by the last.
"""

import collections
import logging

# This is renamed to ensure that all function correctly use the random number
# generator passed into them.
import random as default_random

from ideorder.selection import \
    linked_ideograms, select_ideograms, refine_order, \
    static_ideograms, movable_indices

from ideorder.order.anneal import anneal, RoundScore
from ideorder.order.warmup import warmup_order
from ideorder.order.score import default_scorer


"""
This logger is used by the scheduler to report the progress of each round.
"""
logger = logging.getLogger(__name__)


class RoundReport(collections.namedtuple(
        "RoundReport", "number parameters score order")):
    """A summary of a completed round.

    Attributes
    ----------
    number : int
        The (one-based) number of the round.
    parameters : :py:class:`~ideorder.config.RoundParameters`
    score : :py:class:`~ideorder.order.anneal.RoundScore`
    order : [name, ...]
        The best order found by the round.
    """

    __slots__ = ()


def run_schedule(order, links, rounds, static=frozenset(), preorder=(),
                 sort_preorder=False, scorer=default_scorer,
                 random=default_random, on_round=None):
    """Run a sequence of rounds, threading the best order through them.

    Parameters
    ----------
    order : [name, ...]
        The initial order.
    links : [:py:class:`~ideorder.karyotype.Link`, ...]
    rounds : [:py:class:`~ideorder.config.RoundParameters`, ...]
        The (resolved) parameters of each round to run.
    static : set([name, ...])
        Ideograms which annealing rounds may not move. Warmup rounds may move
        any ideogram.
    preorder : [name, ...]
        Ideograms which warmup rounds should place first.
    sort_preorder : bool
        Passed on to :py:func:`~ideorder.order.warmup.warmup_order`.
    scorer : :py:class:`~ideorder.order.score.scorer.Scorer`
        The scorer class to use.
    random : :py:class:`random.Random`
        The random number generator to use.
    on_round : callback_function or None
        An (optional) callback function called with a
        :py:class:`.RoundReport` after every round.

    Returns
    -------
    order : [name, ...]
        The best order found by the final round.
    score : :py:class:`~ideorder.order.anneal.RoundScore`
        The score of the initial order and of the returned order.
    reports : [:py:class:`.RoundReport`, ...]
    """
    k = scorer(links)
    logger.info("Scorer: %s", scorer.__name__)

    order = list(order)
    initial_score = None
    reports = []

    for number, parameters in enumerate(rounds, 1):
        if parameters.warmup:
            start_score = k.score(order)
            order = warmup_order(order, links, preorder, sort_preorder)
            score = RoundScore(start_score, k.score(order))
        else:
            order, score = anneal(order, k, parameters,
                                  movable_indices(order, static), random)

        if initial_score is None:
            initial_score = score.init

        report = RoundReport(number, parameters, score, list(order))
        reports.append(report)
        logger.info("Round %d (%s): init %d, final %d, change %0.1f%%",
                    number, "warmup" if parameters.warmup else "anneal",
                    score.init, score.final, score.change)

        if on_round is not None:
            on_round(report)

    if initial_score is None:
        # No rounds: the order is unchanged
        initial_score = k.score(order)
    total = RoundScore(initial_score, k.score(order))
    logger.info("Final: init %d, final %d, change %0.1f%%",
                total.init, total.final, total.change)

    return order, total, reports


def optimize_order(config, ideograms, links, scorer=default_scorer,
                   random=None, on_round=None):
    """Optimise the order of a set of ideograms as described by a
    configuration.

    The ideograms to order are those with links (or the subset chosen by the
    configuration's selection directives) in karyotype order, refined by the
    configuration's initial-order directives. The configured simulation
    rounds are then run.

    Parameters
    ----------
    config : :py:class:`~ideorder.config.Config`
    ideograms : {name: :py:class:`~ideorder.karyotype.Ideogram`, ...}
    links : [:py:class:`~ideorder.karyotype.Link`, ...]
    scorer : :py:class:`~ideorder.order.score.scorer.Scorer`
    random : :py:class:`random.Random` or None
        The random number generator to use. If None, a new generator seeded
        with ``config.seed`` is used.
    on_round : callback_function or None
        See :py:func:`.run_schedule`.

    Returns
    -------
    See :py:func:`.run_schedule`.

    Raises
    ------
    InvalidConfigurationError
    InsufficientMovableIdeogramsError
    """
    rounds = config.rounds()

    if random is None:
        random = default_random.Random(config.seed)

    order = select_ideograms(linked_ideograms(ideograms, links),
                             config.select_file,
                             config.select_regex,
                             config.select_names)
    order, preorder = refine_order(order,
                                   config.init_order_regex,
                                   config.init_order_names)
    static = static_ideograms(order,
                              config.static_regex,
                              config.static_names)

    logger.info("Ordering %d ideograms (%d static) with %d links over %d "
                "rounds.", len(order), len(static), len(links), len(rounds))

    return run_schedule(order, links, rounds, static, preorder,
                        config.warmup_sort_preorder, scorer, random, on_round)
