import pytest

import random

from ideorder.order.flip import flip_ideograms

from ideorder.exceptions import InsufficientMovableIdeogramsError


def test_no_flips():
    order = ["a", "b", "c"]
    new_order = flip_ideograms(order, 0, [0, 1, 2], random.Random(1))
    assert new_order == order
    assert new_order is not order


def test_no_flips_with_no_movable():
    # Zero flips never need any movable ideograms
    assert flip_ideograms(["a", "b"], 0, [], random.Random(1)) == ["a", "b"]


def test_single_flip_of_two():
    # With only two movable positions, a single flip must swap them
    order = ["a", "b", "c", "d"]
    assert flip_ideograms(order, 1, [1, 3], random.Random(1)) == \
        ["a", "d", "c", "b"]

    # ...and two flips swap them back
    assert flip_ideograms(order, 2, [3, 1], random.Random(1)) == order


@pytest.mark.parametrize("num_flips", [1, 2, 5, 50])
def test_static_never_move(num_flips):
    order = ["s0", "m1", "s2", "m3", "m4", "s5", "m6"]
    movable = [1, 3, 4, 6]
    r = random.Random(num_flips)
    for _ in range(100):
        new_order = flip_ideograms(order, num_flips, movable, r)
        assert sorted(new_order) == sorted(order)
        for i in (0, 2, 5):
            assert new_order[i] == order[i]

    # The input is never modified
    assert order == ["s0", "m1", "s2", "m3", "m4", "s5", "m6"]


def test_flips_move_things():
    order = list(range(10))
    r = random.Random(2)
    assert any(flip_ideograms(order, 1, order, r) != order
               for _ in range(10))


@pytest.mark.parametrize("movable", [[], [2]])
def test_insufficient_movable(movable):
    with pytest.raises(InsufficientMovableIdeogramsError) as excinfo:
        flip_ideograms(["a", "b", "c"], 1, movable, random.Random(1))
    assert "insufficient movable ideograms" in str(excinfo.value).lower()
