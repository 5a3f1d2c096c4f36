"""Deterministic greedy construction of an initial ideogram order.

Starting from the most heavily linked ideogram, each ideogram is followed by
the ideograms it shares links with, most-linked first. This tends to put
strongly connected ideograms next to each other, which gives the annealing
rounds a much better starting point than an arbitrary order.
"""

import logging

from collections import defaultdict


logger = logging.getLogger(__name__)


def connectivity(links, members):
    """Summarise the links between a set of ideograms.

    Links with an end outside ``members`` and links from an ideogram to
    itself are ignored.

    Returns
    -------
    neighbours : {name: {name: count, ...}, ...}
        The number of links between every linked pair of ideograms.
    degrees : {name: count, ...}
        The total number of links each ideogram takes part in.
    positions : {name: {name: [position, ...], ...}, ...}
        ``positions[a][b]`` gives the (fractional) position on ``a`` of every
        link between ``a`` and ``b``.
    """
    zero_fn = (lambda: 0)
    neighbours = defaultdict(lambda: defaultdict(zero_fn))
    degrees = defaultdict(zero_fn)
    positions = defaultdict(lambda: defaultdict(list))
    for link in links:
        if (link.id1 == link.id2 or
                link.id1 not in members or link.id2 not in members):
            continue
        neighbours[link.id1][link.id2] += 1
        neighbours[link.id2][link.id1] += 1
        degrees[link.id1] += 1
        degrees[link.id2] += 1
        positions[link.id1][link.id2].append(link.pos1)
        positions[link.id2][link.id1].append(link.pos2)
    return neighbours, degrees, positions


def _mean(values):
    return sum(values) / float(len(values))


def warmup_order(order, links, preorder=(), sort_preorder=False):
    """Greedily construct an order from link connectivity.

    The new order starts with the ``preorder`` ideograms. Then, repeatedly,
    the unplaced ideogram with the highest link degree is placed followed by
    all of its unplaced neighbours. Neighbours are placed in descending order
    of the number of links they share with it, then by descending mean
    position of those links along it. Ideograms without links are placed
    last.

    All remaining ties are broken by position in ``order`` (earlier first),
    making the result fully deterministic.

    The static/movable distinction does not apply: any ideogram may be
    moved.

    Parameters
    ----------
    order : [name, ...]
        The current order of the ideograms.
    links : [:py:class:`~ideorder.karyotype.Link`, ...]
    preorder : [name, ...]
        Ideograms to place first, in this order.
    sort_preorder : bool
        If True, the ``preorder`` ideograms are placed in ascending order of
        link degree instead.

    Returns
    -------
    [name, ...]
        A permutation of ``order``.
    """
    rank = {name: i for i, name in enumerate(order)}
    neighbours, degrees, positions = connectivity(links, rank)

    new_order = []
    placed = set()

    def place(name):
        new_order.append(name)
        placed.add(name)

    preorder = [name for name in preorder if name in rank]
    if sort_preorder:
        preorder = sorted(preorder, key=lambda v: (degrees[v], rank[v]))
    for name in preorder:
        if name not in placed:
            place(name)

    while True:
        unplaced = [v for v in order if v not in placed and degrees[v] > 0]
        if not unplaced:
            break
        # Total degree, links to already placed ideograms included
        seed = min(unplaced, key=lambda v: (-degrees[v], rank[v]))
        place(seed)

        seed_neighbours = neighbours[seed]
        seed_positions = positions[seed]
        for neighbour in sorted(seed_neighbours,
                                key=lambda v: (-seed_neighbours[v],
                                               -_mean(seed_positions[v]),
                                               rank[v])):
            if neighbour not in placed:
                place(neighbour)

    # Ideograms without any links
    for name in order:
        if name not in placed:
            place(name)

    logger.debug("Warmup order: %s", ",".join(new_order))
    return new_order
