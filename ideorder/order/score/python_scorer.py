"""A Python implementation of the crossing-link scorer."""

from ideorder.order.score.scorer import Scorer


class PythonScorer(Scorer):
    """An implementation of the crossing-link scorer written in plain Python.

    This implementation compares every pair of links in turn and so is slow
    for large link sets, but it has no dependencies and serves as the
    reference against which faster scorers are checked.
    """

    def __init__(self, links):
        self.links = list(links)

    def score(self, order):
        segments = _segments(self.links, order)

        count = 0
        for i, (a1, a2) in enumerate(segments):
            for b1, b2 in segments[i + 1:]:
                if _crosses(a1, a2, b1, b2):
                    count += 1
        return count


def _segments(links, order):
    """Get the segment spanned by every link under the given order.

    Parameters
    ----------
    links : [:py:class:`~ideorder.karyotype.Link`, ...]
    order : [name, ...]

    Returns
    -------
    [(p1, p2), ...]
        With ``p1 <= p2``. Links with an end on an ideogram not in the order
        are omitted.
    """
    slots = {name: slot for slot, name in enumerate(order)}

    segments = []
    for link in links:
        if link.id1 not in slots or link.id2 not in slots:
            continue
        p1 = slots[link.id1] + link.pos1
        p2 = slots[link.id2] + link.pos2
        if p1 > p2:
            p1, p2 = p2, p1
        segments.append((p1, p2))
    return segments


def _crosses(a1, a2, b1, b2):
    """Do the segments [a1, a2] and [b1, b2] strictly interleave?

    Both segments must be given with their lower end first. Segments which
    share an endpoint, are nested or are disjoint do not cross.
    """
    return (a1 < b1 < a2 < b2) or (b1 < a1 < b2 < a2)
