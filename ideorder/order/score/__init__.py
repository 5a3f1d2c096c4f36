"""Crossing-link scoring of ideogram orders.

Given an order, each ideogram is assigned a slot (its index in the order) and
every link becomes a segment on the axis formed by laying the ideograms
end-to-end. The score of an order is the number of pairs of segments which
strictly interleave, i.e. whose chords cross.

Scoring is by far the most expensive part of the search (it is quadratic in
the number of links and is repeated for every candidate order) and so is
implemented by a swappable scorer object. Two implementations are provided:

* :py:class:`~ideorder.order.score.numpy_scorer.NumpyScorer` (the default)
  compares blocks of link pairs at once using numpy.
* :py:class:`~ideorder.order.score.python_scorer.PythonScorer` is a portable,
  but slow, reference implementation written in plain Python.

Both produce identical scores.
"""

from ideorder.order.score.numpy_scorer import NumpyScorer
from ideorder.order.score.python_scorer import PythonScorer

default_scorer = NumpyScorer


def score(order, links, scorer=default_scorer):
    """Count the crossing links for a single order.

    Parameters
    ----------
    order : [name, ...]
    links : [:py:class:`~ideorder.karyotype.Link`, ...]
    scorer : :py:class:`~ideorder.order.score.scorer.Scorer`
        The scorer class to use.

    Returns
    -------
    int
    """
    return scorer(links).score(order)
