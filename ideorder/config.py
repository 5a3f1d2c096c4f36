"""Configuration of an ordering run.

All options are gathered into a single immutable :py:class:`.Config` which is
constructed once (from a YAML file and/or command line arguments) and passed
explicitly to the components which need it.

The simulation schedule is given as a list of round descriptors, e.g.::

    simulation:
      - warmup: true
      - iterations: 1000
        min_flips: 1
        max_flips: 5
        temp0: 0.01
      - iterations: r2
        max_flips: r0.5

A parameter given as ``r<factor>`` is relative: it is resolved by multiplying
the value the same parameter had in the previous round. Parameters which are
omitted keep the value they had in the previous round.
"""

import collections
import io
import math
import re

from enum import Enum

import sentinel
import yaml

from ideorder.exceptions import InvalidConfigurationError


"""Marks a round parameter which was not given and so keeps the value it had
in the previous round.
"""
Inherit = sentinel.create("Inherit")


class Optimize(Enum):
    """The direction in which the crossing score is optimised."""

    minimize = "minimize"
    maximize = "maximize"

    def is_better(self, new, old):
        """Is the score ``new`` strictly better than ``old``?"""
        if self is Optimize.minimize:
            return new < old
        else:
            return new > old

    def is_improvement(self, delta):
        """Does a change of ``delta`` in score constitute an improvement?"""
        return self.is_better(delta, 0)

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidConfigurationError(
                "optimize must be 'minimize' or 'maximize', not "
                "'{}'".format(value))


class RoundParameters(collections.namedtuple(
        "RoundParameters",
        "iterations min_flips max_flips temp0 warmup optimize")):
    """The fully resolved parameters of a single round.

    Attributes
    ----------
    iterations : int
        The number of annealing steps.
    min_flips : int
    max_flips : int
        The range of the number of flips used to produce a candidate order.
        The maximum is used at the start of a round and the number of flips
        decreases towards the minimum as the round progresses.
    temp0 : float
        The initial annealing temperature.
    warmup : bool
        If True, the round uses the deterministic warmup heuristic and the
        annealing parameters are ignored.
    optimize : :py:class:`.Optimize`
    """

    __slots__ = ()


"""Values used for parameters not given in the first round."""
DEFAULT_ROUND = RoundParameters(iterations=1000, min_flips=1, max_flips=5,
                                temp0=0.01, warmup=False,
                                optimize=Optimize.minimize)

_INTEGER_PARAMETERS = ("iterations", "min_flips", "max_flips")

_RELATIVE_RE = re.compile(r"^r(?P<factor>[0-9]*\.?[0-9]+(?:e-?[0-9]+)?)$",
                          re.IGNORECASE)


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def _finite(name, number, integer):
    """Check a resolved parameter is a finite number, rounding integers."""
    if math.isinf(number) or math.isnan(number):
        raise InvalidConfigurationError(
            "Round parameter {} must be finite, not {}".format(name, number))
    return _round_half_up(number) if integer else number


def _parse_number(name, value, integer):
    """Parse an absolute parameter value."""
    if isinstance(value, bool):
        raise InvalidConfigurationError(
            "Round parameter {} must be a number, not {}".format(name, value))
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(
            "Round parameter {} has invalid value '{}'".format(name, value))
    return _finite(name, number, integer)


def _parse_bool(name, value):
    if isinstance(value, bool):
        return value
    elif str(value).lower() in ("1", "yes", "true", "on"):
        return True
    elif str(value).lower() in ("0", "no", "false", "off"):
        return False
    else:
        raise InvalidConfigurationError(
            "Round parameter {} must be a boolean, not '{}'".format(
                name, value))


def resolve_parameter(name, value, previous):
    """Resolve a single (numeric) round parameter.

    Parameters
    ----------
    name : str
        The parameter's name, used in error messages and to decide whether
        the value is an integer.
    value
        The value given in the round descriptor: a number, a numeric string,
        a relative value ``"r<factor>"`` or :py:data:`.Inherit`.
    previous
        The resolved value of the parameter in the previous round or None if
        this is the first round.

    Raises
    ------
    InvalidConfigurationError
        If a relative value is given in the first round or the value is not
        understood.
    """
    integer = name in _INTEGER_PARAMETERS

    if value is Inherit:
        return previous

    relative = _RELATIVE_RE.match(value) if isinstance(value, str) else None
    if relative is None:
        return _parse_number(name, value, integer)

    if previous is None:
        raise InvalidConfigurationError(
            "Round parameter {}={} is relative but there is no previous "
            "round to take a value from".format(name, value))
    return _finite(name, previous * float(relative.group("factor")), integer)


def validate_round(parameters, number):
    """Check that a set of round parameters makes sense.

    Raises
    ------
    InvalidConfigurationError
    """
    if parameters.iterations < 0:
        raise InvalidConfigurationError(
            "Round {}: iterations must not be negative, got {}".format(
                number, parameters.iterations))
    if parameters.temp0 < 0:
        raise InvalidConfigurationError(
            "Round {}: temp0 must not be negative, got {}".format(
                number, parameters.temp0))
    if parameters.min_flips < 0 or parameters.max_flips < 0:
        raise InvalidConfigurationError(
            "Round {}: min_flips and max_flips must not be negative, "
            "got {} and {}".format(number, parameters.min_flips,
                                   parameters.max_flips))
    if parameters.max_flips < parameters.min_flips:
        raise InvalidConfigurationError(
            "Round {}: max_flips ({}) is less than min_flips ({})".format(
                number, parameters.max_flips, parameters.min_flips))


def resolve_rounds(descriptors, optimize=Optimize.minimize):
    """Resolve a list of round descriptors into round parameters.

    Parameters
    ----------
    descriptors : [{name: value, ...}, ...]
        Round descriptors as given in the configuration. Descriptors with a
        true ``skip`` entry are ignored entirely.
    optimize : :py:class:`.Optimize`
        The optimisation direction used by rounds which don't give one.

    Returns
    -------
    [:py:class:`.RoundParameters`, ...]

    Raises
    ------
    InvalidConfigurationError
    """
    rounds = []
    previous = None
    for descriptor in descriptors:
        descriptor = dict(descriptor)
        if _parse_bool("skip", descriptor.pop("skip", False)):
            continue

        unknown = set(descriptor).difference(RoundParameters._fields)
        if unknown:
            raise InvalidConfigurationError(
                "Round {}: unknown parameter(s) {}".format(
                    len(rounds) + 1, ", ".join(sorted(unknown))))

        values = {}
        for name in _INTEGER_PARAMETERS + ("temp0",):
            value = descriptor.get(name, Inherit)
            if previous is None and value is Inherit:
                value = getattr(DEFAULT_ROUND, name)
            values[name] = resolve_parameter(name, value,
                                             getattr(previous, name, None))

        # NB: warmup is never inherited, each warmup round must ask for it.
        if "warmup" in descriptor:
            values["warmup"] = _parse_bool("warmup", descriptor["warmup"])
        else:
            values["warmup"] = DEFAULT_ROUND.warmup

        if "optimize" in descriptor:
            values["optimize"] = Optimize.from_value(descriptor["optimize"])
        elif previous is not None:
            values["optimize"] = previous.optimize
        else:
            values["optimize"] = Optimize.from_value(optimize)

        parameters = RoundParameters(**values)
        validate_round(parameters, len(rounds) + 1)
        rounds.append(parameters)
        previous = parameters

    return rounds


class Config(collections.namedtuple(
        "Config",
        "select_file select_regex select_names "
        "init_order_regex init_order_names "
        "static_regex static_names "
        "optimize warmup_sort_preorder seed simulation")):
    """The complete, immutable configuration of an ordering run.

    Attributes
    ----------
    select_file : None or str
        A file listing the ideograms to be ordered.
    select_regex : None or str or [str, ...]
    select_names : None or str or [str, ...]
        Regular expressions/names selecting the ideograms to be ordered.
    init_order_regex : None or str or [str, ...]
    init_order_names : None or str or [str, ...]
        Directives refining the initial order.
    static_regex : None or str or [str, ...]
    static_names : None or str or [str, ...]
        Ideograms which may not be moved by annealing.
    optimize : :py:class:`.Optimize`
    warmup_sort_preorder : bool
        Sort explicitly ordered ideograms by ascending link degree before a
        warmup round.
    seed : None or int
        Seed for the random number generator.
    simulation : ({name: value, ...}, ...)
        Round descriptors, see :py:func:`.resolve_rounds`.
    """

    __slots__ = ()

    def rounds(self):
        """Get the resolved parameters for every (non-skipped) round."""
        return resolve_rounds(self.simulation, self.optimize)


"""Default values for every configuration option."""
DEFAULTS = {
    "select_file": None,
    "select_regex": None,
    "select_names": None,
    "init_order_regex": None,
    "init_order_names": None,
    "static_regex": None,
    "static_names": None,
    "optimize": Optimize.minimize,
    "warmup_sort_preorder": False,
    "seed": None,
    "simulation": ({}, ),
}


def make_config(**options):
    """Construct a :py:class:`.Config`, filling in defaults for any options
    not given.

    Raises
    ------
    InvalidConfigurationError
        If an unknown option is given.
    """
    unknown = set(options).difference(Config._fields)
    if unknown:
        raise InvalidConfigurationError(
            "Unknown configuration option(s): {}".format(
                ", ".join(sorted(unknown))))

    values = dict(DEFAULTS)
    values.update(options)
    values["optimize"] = Optimize.from_value(values["optimize"])
    values["warmup_sort_preorder"] = _parse_bool(
        "warmup_sort_preorder", values["warmup_sort_preorder"])
    if values["seed"] is not None:
        try:
            values["seed"] = int(values["seed"])
        except (TypeError, ValueError, OverflowError):
            raise InvalidConfigurationError(
                "seed must be an integer, not '{}'".format(values["seed"]))

    simulation = values["simulation"]
    if simulation is None or isinstance(simulation, (dict, str)) or not all(
            isinstance(d, dict) for d in simulation):
        raise InvalidConfigurationError(
            "simulation must be a list of round descriptors")
    values["simulation"] = tuple(dict(d) for d in simulation)

    return Config(**values)


"""Nested sections of the YAML document and the options they map onto."""
_SECTIONS = {
    "select": {"file": "select_file", "regex": "select_regex",
               "names": "select_names"},
    "init_order": {"regex": "init_order_regex", "names": "init_order_names"},
    "static": {"regex": "static_regex", "names": "static_names"},
}


def config_from_dict(document):
    """Build a :py:class:`.Config` from a (parsed YAML) dictionary."""
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise InvalidConfigurationError(
            "Configuration must be a mapping of options")

    options = {}
    for key, value in document.items():
        if key in _SECTIONS:
            if not isinstance(value, dict):
                raise InvalidConfigurationError(
                    "Section {} must be a mapping".format(key))
            for sub_key, sub_value in value.items():
                if sub_key not in _SECTIONS[key]:
                    raise InvalidConfigurationError(
                        "Unknown option {}.{}".format(key, sub_key))
                options[_SECTIONS[key][sub_key]] = sub_value
        elif key in ("optimize", "warmup_sort_preorder", "seed",
                     "simulation"):
            options[key] = value
        else:
            raise InvalidConfigurationError(
                "Unknown configuration option {}".format(key))

    return make_config(**options)


def load_config(f):
    """Load a :py:class:`.Config` from a YAML file (filename or file object).

    Raises
    ------
    InvalidConfigurationError
        If the file is not valid YAML or contains unknown options.
    """
    try:
        if hasattr(f, "read"):
            document = yaml.safe_load(f)
        else:
            with io.open(f, "r") as fp:
                document = yaml.safe_load(fp)
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(
            "Could not parse configuration: {}".format(e))

    return config_from_dict(document)
