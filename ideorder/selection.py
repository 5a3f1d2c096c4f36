"""Resolution of the ideograms to be ordered, their initial order and which of
them may not be moved.

Every directive accepted here is resolved against the static set of ideogram
names up-front, producing plain name lists and index sets which the rest of
the ordering code consumes.
"""

import io
import logging
import re

from ideorder.exceptions import InvalidConfigurationError


logger = logging.getLogger(__name__)


def split_list(value):
    """Split a comma-separated directive into a list of non-empty items.

    Parameters
    ----------
    value : None, str or [str, ...]
        A comma separated string or a list of items. Lists are taken as-is
        (items are not split further) which allows regular expressions
        containing commas to be given.

    Returns
    -------
    [str, ...]
    """
    if value is None:
        return []
    elif isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    else:
        return [str(v).strip() for v in value if str(v).strip()]


def compile_patterns(regexes):
    """Compile a (comma separated) list of case-insensitive regexes.

    Raises
    ------
    InvalidConfigurationError
        If any of the regexes is malformed.
    """
    patterns = []
    for regex in split_list(regexes):
        try:
            patterns.append(re.compile(regex, re.IGNORECASE))
        except re.error as e:
            raise InvalidConfigurationError(
                "Invalid regular expression '{}': {}".format(regex, e))
    return patterns


def match(name, patterns):
    """Return True if the name matches any of the compiled patterns."""
    return any(pattern.search(name) for pattern in patterns)


def read_names(f):
    """Read a list of ideogram names from a file.

    Names are separated by whitespace or commas.
    """
    if hasattr(f, "read"):
        text = f.read()
    else:
        with io.open(f, "r") as fp:
            text = fp.read()
    return [name for name in re.split(r"[\s,]+", text) if name]


def linked_ideograms(ideograms, links):
    """Get the default selection: every ideogram with at least one link.

    Parameters
    ----------
    ideograms : {name: :py:class:`~ideorder.karyotype.Ideogram`, ...}
    links : [:py:class:`~ideorder.karyotype.Link`, ...]

    Returns
    -------
    [name, ...]
        Ordered by position in the karyotype.
    """
    linked = set()
    for link in links:
        linked.add(link.id1)
        linked.add(link.id2)
    return sorted(linked, key=lambda name: ideograms[name].index)


def select_ideograms(default, names_file=None, regexes=None, names=None):
    """Select the ideograms to be ordered.

    When no directives are given, the default selection is returned unchanged.
    Otherwise the selection is the union of the names listed in
    ``names_file``, the names matching any of ``regexes`` and the names listed
    in ``names``. Only ideograms in the default selection may be selected;
    anything else is silently dropped.

    Parameters
    ----------
    default : [name, ...]
        The default selection, see :py:func:`.linked_ideograms`.
    names_file : None or str or file
    regexes : None or str or [str, ...]
        Case-insensitive regular expressions (comma separated).
    names : None or str or [str, ...]
        Comma separated ideogram names.

    Returns
    -------
    [name, ...]
        A subset of ``default``, in the same order.
    """
    if names_file is None and regexes is None and names is None:
        return list(default)

    requested = set(split_list(names))
    if names_file is not None:
        requested.update(read_names(names_file))

    patterns = compile_patterns(regexes)
    selected = [name for name in default
                if name in requested or match(name, patterns)]

    dropped = requested.difference(default)
    if dropped:
        logger.debug("Ignoring unknown or unlinked ideograms: %s",
                     ", ".join(sorted(dropped)))

    return selected


def _named_first(order, named):
    """Move the named items (in the order given) to the front of the order,
    leaving the remaining items in their existing relative order.
    """
    named = [name for name in named if name in order]
    placed = set(named)
    return named + [name for name in order if name not in placed]


def refine_order(order, regexes=None, names=None):
    """Refine the initial order of the selected ideograms.

    If regexes are given, ideograms matching the first regex are placed first
    (in their existing relative order), then those matching the second regex
    and so on. Names are then applied as a second refinement: the named
    ideograms are placed first in the order listed. In both cases ideograms
    not mentioned keep their relative order at the end of the order and an
    ideogram is placed by the first directive which mentions it.

    Returns
    -------
    order : [name, ...]
        The refined order (a permutation of the input order).
    preorder : [name, ...]
        The ideograms explicitly placed by a directive, in their refined order.
    """
    preorder = []
    seen = set()

    for pattern in compile_patterns(regexes):
        for name in order:
            if name not in seen and pattern.search(name):
                preorder.append(name)
                seen.add(name)
    order = _named_first(order, preorder)

    named = []
    for name in split_list(names):
        if name in order and name not in named:
            named.append(name)
    order = _named_first(order, named)

    explicit = seen.union(named)
    preorder = [name for name in order if name in explicit]

    return order, preorder


def static_ideograms(order, regexes=None, names=None):
    """Get the ideograms in the order which must not be moved by annealing.

    An ideogram is static if it matches any of ``regexes`` or is listed in
    ``names``.

    Returns
    -------
    set([name, ...])
    """
    patterns = compile_patterns(regexes)
    static_names = set(split_list(names))
    return set(name for name in order
               if name in static_names or match(name, patterns))


def movable_indices(order, static):
    """Get the positions in the order of all non-static ideograms.

    Returns
    -------
    [index, ...]
        In ascending order.
    """
    return [i for i, name in enumerate(order) if name not in static]
