"""Exceptions which the ordering tools can throw to indicate standard types of
problem.

All of these are fatal: the run is aborted and no order is produced.
"""


class IdeorderError(Exception):
    """Base class of all errors raised by ideorder."""
    pass


class KaryotypeError(IdeorderError):
    """Indication that a karyotype file could not be understood."""
    pass


class LinkFileError(IdeorderError):
    """Indication that a link file could not be understood."""
    pass


class UnknownIdeogramError(IdeorderError):
    """Indication that a link refers to an ideogram which is not present in the
    karyotype.
    """
    pass


class InvalidConfigurationError(IdeorderError):
    """Indication that an impossible or inconsistent configuration was given,
    e.g. a relative round parameter in the first round.
    """
    pass


class InsufficientMovableIdeogramsError(IdeorderError):
    """Indication that a flip was requested but fewer than two ideograms are
    free to move.
    """
    pass
