"""Readers for the two input formats: karyotype files (the ideograms) and link
files (the links between them).
"""

import collections
import io
import logging

from ideorder.exceptions import \
    KaryotypeError, LinkFileError, UnknownIdeogramError


logger = logging.getLogger(__name__)


class Ideogram(collections.namedtuple("Ideogram", "name index start end")):
    """A genomic segment (e.g. a chromosome or contig) to be ordered.

    Attributes
    ----------
    name : str
        The identifier used to refer to the ideogram in link files.
    index : int
        The position of the ideogram among the ``chr`` lines of the karyotype
        file. This gives the default ordering of ideograms.
    start : int
    end : int
        The interval covered by the ideogram.
    """

    __slots__ = ()

    @property
    def span(self):
        return self.end - self.start

    def fraction(self, position):
        """Normalise a coordinate on this ideogram into the range [0, 1]."""
        fraction = (position - self.start) / float(self.span)
        return min(max(fraction, 0.0), 1.0)


class Link(collections.namedtuple("Link", "id1 pos1 id2 pos2")):
    """A link between a position on one ideogram and a position on another.

    Attributes
    ----------
    id1 : str
    pos1 : float
        The name of the first ideogram and the link's midpoint on it,
        normalised into [0, 1] relative to the ideogram's interval.
    id2 : str
    pos2 : float
        As above, for the other end of the link.
    """

    __slots__ = ()


def _open(f):
    """Open a filename for reading or pass through an open file object."""
    if hasattr(f, "read"):
        return f, False
    else:
        return io.open(f, "r", encoding="utf-8"), True


def _lines(f, error):
    """Generate (line_number, tokens) for every line of a file.

    Text which can't be decoded is reported as ``error``.
    """
    fp, close = _open(f)
    try:
        try:
            for line_number, line in enumerate(fp, 1):
                yield line_number, line.split()
        except UnicodeDecodeError as e:
            raise error("Could not decode {}: {}".format(
                getattr(fp, "name", "file"), e))
    finally:
        if close:
            fp.close()


def read_karyotype(f):
    """Read the ideograms defined in a karyotype file.

    Only lines whose first token is ``chr`` are considered, all others are
    ignored. Ideogram lines have the form::

        chr - <name> <label> <start> <end> <color>

    Parameters
    ----------
    f : str or file
        A filename or an open file object.

    Returns
    -------
    :py:class:`collections.OrderedDict`
        ``{name: Ideogram, ...}`` in the order the ideograms appear in the
        file.

    Raises
    ------
    KaryotypeError
        If an ideogram line is malformed, a name is defined twice or an
        ideogram has an empty interval.
    """
    ideograms = collections.OrderedDict()
    for line_number, tokens in _lines(f, KaryotypeError):
        if not tokens or tokens[0] != "chr":
            continue

        if len(tokens) < 6:
            raise KaryotypeError(
                "Line {}: expected 'chr - name label start end', "
                "got '{}'".format(line_number, " ".join(tokens)))

        name = tokens[2]
        try:
            start = int(tokens[4])
            end = int(tokens[5])
        except ValueError:
            raise KaryotypeError(
                "Line {}: ideogram {} has non-integer coordinates "
                "'{}' '{}'".format(line_number, name, tokens[4], tokens[5]))

        if name in ideograms:
            raise KaryotypeError("Line {}: ideogram {} defined twice".format(
                line_number, name))
        if end <= start:
            raise KaryotypeError(
                "Line {}: ideogram {} has an empty interval {}-{}".format(
                    line_number, name, start, end))

        ideograms[name] = Ideogram(name, len(ideograms), start, end)

    logger.debug("Read %d ideograms.", len(ideograms))
    return ideograms


def read_links(f, ideograms):
    """Read the links in a link file.

    Each non-blank line not starting with ``#`` has the form::

        <id1> <start1> <end1> <id2> <start2> <end2> [...]

    The midpoint of each segment is normalised against the interval of its
    ideogram.

    Parameters
    ----------
    f : str or file
        A filename or an open file object.
    ideograms : {name: :py:class:`.Ideogram`, ...}
        As produced by :py:func:`.read_karyotype`.

    Returns
    -------
    [:py:class:`.Link`, ...]

    Raises
    ------
    UnknownIdeogramError
        If a link refers to an ideogram not in ``ideograms``.
    LinkFileError
        If a line is malformed.
    """
    links = []
    for line_number, tokens in _lines(f, LinkFileError):
        if not tokens or tokens[0].startswith("#"):
            continue

        if len(tokens) < 6:
            raise LinkFileError(
                "Line {}: expected 'id1 start1 end1 id2 start2 end2', "
                "got '{}'".format(line_number, " ".join(tokens)))

        ends = []
        for name, start, end in (tokens[0:3], tokens[3:6]):
            if name not in ideograms:
                raise UnknownIdeogramError(
                    "Line {}: link refers to ideogram {} which is not in the "
                    "karyotype".format(line_number, name))
            try:
                midpoint = (float(start) + float(end)) / 2.0
            except ValueError:
                raise LinkFileError(
                    "Line {}: non-numeric coordinates '{}' '{}' on "
                    "{}".format(line_number, start, end, name))
            ends.append((name, ideograms[name].fraction(midpoint)))

        (id1, pos1), (id2, pos2) = ends
        links.append(Link(id1, pos1, id2, pos2))

    logger.debug("Read %d links.", len(links))
    return links
