"""Random perturbation of ideogram orders."""

from ideorder.exceptions import InsufficientMovableIdeogramsError


def flip_ideograms(order, num_flips, movable, random):
    """Produce a new order by swapping random pairs of movable ideograms.

    Each flip picks two distinct movable positions uniformly at random and
    swaps the ideograms occupying them. Flips are applied one after another
    to the same order so a later flip may undo an earlier one.

    Parameters
    ----------
    order : [name, ...]
        The order to perturb. This is not modified.
    num_flips : int
        The number of flips to make.
    movable : [index, ...]
        The positions in the order which may be swapped. Ideograms at any
        other position never move.
    random : :py:class:`random.Random`
        The random number generator to use.

    Returns
    -------
    [name, ...]

    Raises
    ------
    InsufficientMovableIdeogramsError
        If flips were requested but fewer than two positions are movable.
    """
    new_order = list(order)
    movable = sorted(movable)
    if num_flips <= 0:
        return new_order

    if len(movable) < 2:
        raise InsufficientMovableIdeogramsError(
            "Insufficient movable ideograms for flip: {} movable of {} "
            "ideograms".format(len(movable), len(order)))

    for _ in range(num_flips):
        i, j = random.sample(movable, 2)
        new_order[i], new_order[j] = new_order[j], new_order[i]

    return new_order
