"""General interface for a crossing-link scorer."""


class Scorer(object):
    """A general API for a crossing-link scorer."""

    def __init__(self, links, **kwargs):
        """Initialise the scorer with the (fixed) set of links.

        Parameters
        ----------
        links : [:py:class:`~ideorder.karyotype.Link`, ...]
            The links whose crossings are counted. Links with an end on an
            ideogram not present in the order being scored are ignored.
        """
        raise NotImplementedError()

    def score(self, order):
        """Count the pairs of links which cross under the given order.

        Two links cross when their segments on the axis formed by laying the
        ideograms end-to-end strictly interleave.

        Parameters
        ----------
        order : [name, ...]
            The order of the ideograms.

        Returns
        -------
        int
            The number of crossing link pairs. This must depend only on the
            order and the links supplied on construction.
        """
        raise NotImplementedError()
