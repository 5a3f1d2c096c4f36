"""A numpy implementation of the crossing-link scorer."""

import numpy as np

from ideorder.order.score.scorer import Scorer


class NumpyScorer(Scorer):
    """An implementation of the crossing-link scorer which uses numpy to
    compare many pairs of links at once.

    Link pairs are compared a block of rows at a time so that memory use is
    bounded by ``block_size * len(links)`` booleans rather than growing with
    the square of the number of links. The result is independent of the
    block size.
    """

    def __init__(self, links, block_size=1024):
        links = list(links)
        self.block_size = block_size

        # The names of all ideograms with links, the ends of every link are
        # stored as indices into this list.
        self.names = sorted(set(link.id1 for link in links) |
                            set(link.id2 for link in links))
        name_index = {name: i for i, name in enumerate(self.names)}

        self.ids1 = np.array([name_index[link.id1] for link in links],
                             dtype=np.intp)
        self.ids2 = np.array([name_index[link.id2] for link in links],
                             dtype=np.intp)
        self.pos1 = np.array([link.pos1 for link in links], dtype=np.float64)
        self.pos2 = np.array([link.pos2 for link in links], dtype=np.float64)

        self.name_index = name_index

    def _segments(self, order):
        """Get arrays (lo, hi) of the ends of every scorable link segment."""
        # Slot of every named ideogram, -1 for those absent from the order
        slots = np.full(len(self.names), -1, dtype=np.intp)
        for slot, name in enumerate(order):
            i = self.name_index.get(name)
            if i is not None:
                slots[i] = slot

        slots1 = slots[self.ids1]
        slots2 = slots[self.ids2]
        present = (slots1 >= 0) & (slots2 >= 0)

        p1 = slots1[present] + self.pos1[present]
        p2 = slots2[present] + self.pos2[present]
        return np.minimum(p1, p2), np.maximum(p1, p2)

    def score(self, order):
        lo, hi = self._segments(order)

        count = 0
        for start in range(0, len(lo), self.block_size):
            a1 = lo[start:start + self.block_size, np.newaxis]
            a2 = hi[start:start + self.block_size, np.newaxis]
            crosses = (((a1 < lo) & (lo < a2) & (a2 < hi)) |
                       ((lo < a1) & (a1 < hi) & (hi < a2)))
            count += int(np.count_nonzero(crosses))

        # Every crossing pair is seen once from each of its links
        return count // 2
