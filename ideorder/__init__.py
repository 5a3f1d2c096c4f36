"""Order ideograms so as to minimise (or maximise) the number of crossing
links between them.
"""

from ideorder.version import __version__

from ideorder.karyotype import Ideogram, Link, read_karyotype, read_links

from ideorder.config import Config, Optimize, make_config, load_config

from ideorder.order import optimize_order
