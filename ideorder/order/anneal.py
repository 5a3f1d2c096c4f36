"""A single round of simulated annealing over ideogram orders."""

import collections
import math
import logging

# This is renamed to ensure that all function correctly use the random number
# generator passed into them.
import random as default_random

from ideorder.order.flip import flip_ideograms


logger = logging.getLogger(__name__)


class RoundScore(collections.namedtuple("RoundScore", "init final")):
    """The crossing score at the start and end of a round.

    Attributes
    ----------
    init : int
        The score of the order the round started with.
    final : int
        The score of the best order found by the round.
    """

    __slots__ = ()

    @property
    def change(self):
        """The percentage change in score over the round (0.0 if the initial
        score was 0).
        """
        if self.init == 0:
            return 0.0
        return 100.0 * (self.final - self.init) / float(self.init)


def _accept(delta, temperature, optimize, random):
    """Decide whether to accept a candidate whose score differs from the
    current score by the relative amount ``delta``.

    Improvements are always accepted. Other changes are accepted with a
    probability which falls as the change grows and as the temperature falls.
    """
    if optimize.is_improvement(delta):
        return True
    elif temperature <= 0.0:
        return False
    else:
        return random.random() < math.exp(-abs(delta) / temperature)


def anneal(order, scorer, parameters, movable, random=default_random,
           on_step=None):
    """Refine an order by simulated annealing.

    Exactly ``parameters.iterations`` steps are made. At step ``t`` the
    fraction of the round remaining is ``f = (iterations - t) / iterations``
    which falls from 1.0 towards (but never reaching) 0.0. A candidate order
    is produced by making ``min_flips + round(f * (max_flips - min_flips))``
    flips of the current order and scored. The change in score relative to
    the current score is::

        dE = (candidate - current) / current

    or 1.0 when the current score is 0. Improving candidates are always
    accepted; others are accepted with probability ``exp(-|dE| / temp)``
    where ``temp = temp0 * f``. The best order seen during the round is
    returned.

    Parameters
    ----------
    order : [name, ...]
        The order to start from.
    scorer : :py:class:`~ideorder.order.score.scorer.Scorer`
        A scorer constructed with the links being considered.
    parameters : :py:class:`~ideorder.config.RoundParameters`
    movable : [index, ...]
        Positions of the order which may be changed by flips.
    random : :py:class:`random.Random`
        A Python random number generator. Defaults to ``import random`` but can
        be set to your own instance of :py:class:`random.Random` to allow you
        to control the seed and produce deterministic results.
    on_step : callback_function or None
        An (optional) callback function which is called after every step.

        The callback function is passed the following arguments:

        * ``step``: the (zero-based) step number (integer)
        * ``current_score``: the score of the current order (integer)
        * ``best_score``: the best score seen so far (integer)
        * ``temperature``: the annealing temperature (float)
        * ``num_flips``: the number of flips used this step (integer)
        * ``accepted``: whether the candidate was accepted (bool)

        If the callback returns False, the round is terminated immediately and
        the best order found so far is returned.

    Returns
    -------
    best_order : [name, ...]
    score : :py:class:`.RoundScore`

    Raises
    ------
    InsufficientMovableIdeogramsError
        If a flip is needed but fewer than two positions are movable.
    """
    optimize = parameters.optimize
    iterations = parameters.iterations
    flip_range = parameters.max_flips - parameters.min_flips

    current_order = list(order)
    current_score = scorer.score(current_order)
    best_order = current_order
    best_score = initial_score = current_score

    # Progress is logged roughly ten times per round
    report_every = max(1, iterations // 10)
    num_accepted = 0
    num_steps = 0

    for step in range(iterations):
        num_steps += 1
        f = (iterations - step) / float(iterations)
        num_flips = (parameters.min_flips +
                     int(math.floor(f * flip_range + 0.5)))
        temperature = parameters.temp0 * f

        candidate_order = flip_ideograms(current_order, num_flips, movable,
                                         random)
        candidate_score = scorer.score(candidate_order)

        # Special case: a zero score can't be used to scale the change
        if current_score == 0:
            delta = 1.0
        else:
            delta = (candidate_score - current_score) / float(current_score)

        accepted = _accept(delta, temperature, optimize, random)
        if accepted:
            num_accepted += 1
            current_order = candidate_order
            current_score = candidate_score
            if optimize.is_better(current_score, best_score):
                best_order = current_order
                best_score = current_score

        if step % report_every == 0:
            logger.debug("Step: %d, "
                         "Score: %d, "
                         "Best: %d, "
                         "Flips: %d, "
                         "Temp: %0.5f, "
                         "Kept: %d.",
                         step, current_score, best_score, num_flips,
                         temperature, num_accepted)

        # Call the user callback before the next step, terminating if
        # requested.
        if on_step is not None:
            ret_val = on_step(step, current_score, best_score, temperature,
                              num_flips, accepted)
            if ret_val is False:
                break

    logger.info("Anneal finished after %d steps (%d accepted), "
                "score %d -> %d.",
                num_steps, num_accepted, initial_score, best_score)

    return list(best_order), RoundScore(initial_score, best_score)
