"""A command-line utility which orders the ideograms of a karyotype to minimise
(or maximise) the number of crossing links.

Installed as "ideorder" by setuptools.
"""

import sys
import argparse
import logging

import ideorder

from ideorder.config import Optimize, make_config, load_config

from ideorder.exceptions import IdeorderError

from ideorder.karyotype import read_karyotype, read_links

from ideorder.order import optimize_order

from ideorder.order.score import NumpyScorer, PythonScorer


"""The scorers which may be chosen with --scorer."""
SCORERS = {
    "numpy": NumpyScorer,
    "python": PythonScorer,
}

"""Command line arguments which override configuration options."""
OVERRIDES = ("select_file", "select_regex", "select_names",
             "init_order_regex", "init_order_names",
             "static_regex", "static_names", "seed")


def build_config(args):
    """Build the run's configuration from a configuration file (if given) with
    any command line options laid over it.
    """
    if args.config is not None:
        config = load_config(args.config)
    else:
        config = make_config()

    overrides = {name: getattr(args, name) for name in OVERRIDES
                 if getattr(args, name) is not None}
    if args.optimize is not None:
        overrides["optimize"] = Optimize(args.optimize)
    if args.sort_preorder:
        overrides["warmup_sort_preorder"] = True
    if args.round:
        overrides["simulation"] = tuple(parse_round(r) for r in args.round)

    return config._replace(**overrides)


def parse_round(text):
    """Parse a round descriptor of the form "name=value,name=value"."""
    descriptor = {}
    for item in text.split(","):
        if not item.strip():
            continue
        name, _, value = item.partition("=")
        descriptor[name.strip()] = value.strip() if value else "true"
    return descriptor


def format_report(report):
    """Format a single round report for humans."""
    parameters = report.parameters
    if parameters.warmup:
        kind = "warmup"
    else:
        kind = "anneal iterations={} flips={}-{} temp0={:g}".format(
            parameters.iterations, parameters.min_flips,
            parameters.max_flips, parameters.temp0)
    return "round {} ({}, {}): init {} final {} change {:0.1f}%".format(
        report.number, kind, parameters.optimize.value,
        report.score.init, report.score.final, report.score.change)


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Order ideograms to minimise (or maximise) the number of "
                    "crossing links between them.")
    parser.add_argument("--version", "-V", action="version",
                        version="%(prog)s {}".format(ideorder.__version__))

    parser.add_argument("--karyotype", "-k", type=str, required=True,
                        metavar="FILENAME",
                        help="karyotype file defining the ideograms")
    parser.add_argument("--links", "-l", type=str, required=True,
                        metavar="FILENAME",
                        help="link file")
    parser.add_argument("--config", "-c", type=str, metavar="FILENAME",
                        help="YAML configuration file")
    parser.add_argument("--output", "-o", type=str, default="-",
                        metavar="FILENAME",
                        help="filename to write the order to or - for "
                             "stdout (default: %(default)s)")
    parser.add_argument("--scorer", choices=sorted(SCORERS), default="numpy",
                        help="crossing-link scorer implementation "
                             "(default: %(default)s)")
    parser.add_argument("--seed", type=int,
                        help="seed for the random number generator")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="log progress (repeat for more detail)")

    optimize_group = parser.add_mutually_exclusive_group()
    optimize_group.add_argument("--minimize", dest="optimize",
                                action="store_const", const="minimize",
                                help="minimise crossing links (default)")
    optimize_group.add_argument("--maximize", dest="optimize",
                                action="store_const", const="maximize",
                                help="maximise crossing links")

    select_group = parser.add_argument_group(
        "ideogram selection arguments",
        description="By default all linked ideograms are ordered. If any of "
                    "these are given, the union of the ideograms they "
                    "select is ordered instead.")
    select_group.add_argument("--select-file", dest="select_file",
                              metavar="FILENAME",
                              help="file listing ideograms to order")
    select_group.add_argument("--select-regex", dest="select_regex",
                              metavar="REGEX,...",
                              help="order ideograms matching any of these "
                                   "case-insensitive regexes")
    select_group.add_argument("--select", dest="select_names",
                              metavar="NAME,...",
                              help="order these ideograms")

    init_group = parser.add_argument_group("initial order arguments")
    init_group.add_argument("--init-order-regex", dest="init_order_regex",
                            metavar="REGEX,...",
                            help="start with ideograms matching each regex "
                                 "in turn")
    init_group.add_argument("--init-order", dest="init_order_names",
                            metavar="NAME,...",
                            help="start with these ideograms")
    init_group.add_argument("--sort-preorder", action="store_true",
                            help="place the initial ideograms in ascending "
                                 "order of link count in warmup rounds")

    static_group = parser.add_argument_group("static ideogram arguments")
    static_group.add_argument("--static-regex", dest="static_regex",
                              metavar="REGEX,...",
                              help="never move ideograms matching any of "
                                   "these regexes")
    static_group.add_argument("--static", dest="static_names",
                              metavar="NAME,...",
                              help="never move these ideograms")

    parser.add_argument("--round", "-r", action="append", metavar="ROUND",
                        help="a simulation round, e.g. 'warmup' or "
                             "'iterations=1000,max_flips=5,temp0=0.01'; "
                             "replaces the configured rounds (repeatable)")

    args = parser.parse_args(args)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(name)s: %(message)s")

    try:
        config = build_config(args)
        ideograms = read_karyotype(args.karyotype)
        links = read_links(args.links, ideograms)
        order, score, reports = optimize_order(
            config, ideograms, links, scorer=SCORERS[args.scorer])
    except (IdeorderError, IOError) as e:
        sys.stderr.write("{}: error: {}\n".format(parser.prog, e))
        return 1

    for report in reports:
        sys.stderr.write(format_report(report) + "\n")
    sys.stderr.write("final: init {} final {} change {:0.1f}%\n".format(
        score.init, score.final, score.change))

    try:
        if args.output == "-":
            sys.stdout.write(",".join(order) + "\n")
        else:
            with open(args.output, "w") as output:
                output.write(",".join(order) + "\n")
    except IOError as e:
        sys.stderr.write("{}: error: {}\n".format(parser.prog, e))
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
