import pytest

import random

from collections import OrderedDict

from ideorder.karyotype import Ideogram, Link


KARYOTYPE = """\
# Three ideograms of equal size
chr - A a 0 10 red
chr - B b 0 10 blue
chr - C c 0 10 green
band A p1 p1 0 5 gneg
"""

LINKS = """\
# id1 start1 end1 id2 start2 end2
A 2 2 B 8 8

A 8 8 C 2 2
"""


@pytest.fixture
def karyotype_text():
    return KARYOTYPE


@pytest.fixture
def links_text():
    return LINKS


@pytest.fixture
def abc_ideograms():
    return OrderedDict((name, Ideogram(name, i, 0, 10))
                       for i, name in enumerate("ABC"))


@pytest.fixture
def abc_links():
    """Two links which cross under the order A, B, C but not B, A, C."""
    return [Link("A", 0.2, "B", 0.8), Link("A", 0.8, "C", 0.2)]


def make_random_links(names, num_links, seed=1):
    """Generate a reproducible set of random links between distinct
    ideograms.
    """
    r = random.Random(seed)
    links = []
    for _ in range(num_links):
        id1, id2 = r.sample(names, 2)
        links.append(Link(id1, r.random(), id2, r.random()))
    return links


@pytest.fixture
def random_names():
    return ["c{}".format(i) for i in range(8)]


@pytest.fixture
def random_links(random_names):
    return make_random_links(random_names, 60)


@pytest.fixture
def make_links():
    return make_random_links
