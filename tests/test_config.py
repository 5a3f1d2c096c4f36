import pytest

from io import StringIO

from ideorder.config import \
    Inherit, Optimize, RoundParameters, DEFAULT_ROUND, resolve_parameter, \
    resolve_rounds, validate_round, make_config, config_from_dict, \
    load_config

from ideorder.exceptions import InvalidConfigurationError


def test_optimize():
    assert Optimize.minimize.is_better(1, 2)
    assert not Optimize.minimize.is_better(2, 2)
    assert Optimize.maximize.is_better(3, 2)
    assert not Optimize.maximize.is_better(2, 2)

    assert Optimize.minimize.is_improvement(-0.1)
    assert not Optimize.minimize.is_improvement(0.0)
    assert Optimize.maximize.is_improvement(0.1)
    assert not Optimize.maximize.is_improvement(0.0)


@pytest.mark.parametrize("value,expected",
                         [("minimize", Optimize.minimize),
                          ("MAXIMIZE", Optimize.maximize),
                          (Optimize.maximize, Optimize.maximize)])
def test_optimize_from_value(value, expected):
    assert Optimize.from_value(value) is expected


def test_optimize_from_value_bad():
    with pytest.raises(InvalidConfigurationError):
        Optimize.from_value("sideways")


@pytest.mark.parametrize("name,value,previous,expected",
                         [("iterations", 10, None, 10),
                          ("iterations", "10", None, 10),
                          ("iterations", 2.5, None, 3),
                          ("iterations", "r2", 1000, 2000),
                          ("iterations", "r0.5", 5, 3),
                          ("max_flips", "r1.5", 4, 6),
                          ("temp0", "r0.5", 0.01, 0.005),
                          ("temp0", 0.1, None, 0.1),
                          ("temp0", Inherit, 0.2, 0.2)])
def test_resolve_parameter(name, value, previous, expected):
    resolved = resolve_parameter(name, value, previous)
    assert resolved == pytest.approx(expected)
    assert type(resolved) is type(expected)


def test_resolve_parameter_relative_without_previous():
    with pytest.raises(InvalidConfigurationError) as excinfo:
        resolve_parameter("iterations", "r2", None)
    assert "iterations=r2" in str(excinfo.value)


@pytest.mark.parametrize("value", ["lots", "r", "rr2", True, None,
                                   # Not finite
                                   "inf", "nan", float("inf"), "r1e999"])
def test_resolve_parameter_bad(value):
    with pytest.raises(InvalidConfigurationError):
        resolve_parameter("iterations", value, 10)


def test_resolve_rounds_defaults():
    assert resolve_rounds([{}]) == [DEFAULT_ROUND]
    assert resolve_rounds([]) == []


def test_resolve_rounds_relative():
    rounds = resolve_rounds([
        {"iterations": 1000, "min_flips": 2, "max_flips": 10, "temp0": 0.1},
        {"iterations": "r2", "max_flips": "r0.5"},
        {"temp0": "r0.1", "min_flips": 0},
    ])
    assert [r.iterations for r in rounds] == [1000, 2000, 2000]
    assert [r.min_flips for r in rounds] == [2, 2, 0]
    assert [r.max_flips for r in rounds] == [10, 5, 5]
    assert [r.temp0 for r in rounds] == pytest.approx([0.1, 0.1, 0.01])


def test_resolve_rounds_relative_first_round():
    with pytest.raises(InvalidConfigurationError):
        resolve_rounds([{"iterations": "r2"}])


def test_resolve_rounds_skip():
    # Skipped rounds are ignored entirely, including for relative values
    rounds = resolve_rounds([
        {"iterations": 100},
        {"iterations": 500, "skip": True},
        {"iterations": "r3"},
    ])
    assert [r.iterations for r in rounds] == [100, 300]

    # A skipped first round doesn't count as a previous round
    with pytest.raises(InvalidConfigurationError):
        resolve_rounds([{"iterations": 100, "skip": "yes"},
                        {"iterations": "r2"}])


def test_resolve_rounds_warmup_and_optimize():
    rounds = resolve_rounds([{"warmup": True},
                             {"optimize": "maximize"},
                             {}],
                            optimize=Optimize.minimize)
    assert [r.warmup for r in rounds] == [True, False, False]
    assert [r.optimize for r in rounds] == [Optimize.minimize,
                                            Optimize.maximize,
                                            Optimize.maximize]

    rounds = resolve_rounds([{}], optimize="maximize")
    assert rounds[0].optimize is Optimize.maximize


def test_resolve_rounds_unknown_parameter():
    with pytest.raises(InvalidConfigurationError) as excinfo:
        resolve_rounds([{"iteration": 10}])
    assert "iteration" in str(excinfo.value)


@pytest.mark.parametrize("descriptor",
                         [{"min_flips": -1},
                          {"min_flips": 6, "max_flips": 5},
                          {"max_flips": -1, "min_flips": -2},
                          {"iterations": -10},
                          {"temp0": -0.1}])
def test_resolve_rounds_invalid(descriptor):
    with pytest.raises(InvalidConfigurationError):
        resolve_rounds([descriptor])


def test_resolve_rounds_invalid_after_relative():
    # Validation happens after resolution
    with pytest.raises(InvalidConfigurationError) as excinfo:
        resolve_rounds([{"min_flips": 4, "max_flips": 5},
                        {"max_flips": "r0.5"}])
    assert "Round 2" in str(excinfo.value)


def test_validate_round():
    validate_round(RoundParameters(0, 0, 0, 0.0, False, Optimize.minimize),
                   1)


def test_make_config_defaults():
    config = make_config()
    assert config.optimize is Optimize.minimize
    assert config.select_regex is None
    assert config.seed is None
    assert config.rounds() == [DEFAULT_ROUND]


def test_make_config():
    config = make_config(optimize="maximize", seed="12",
                         simulation=[{"iterations": 10}])
    assert config.optimize is Optimize.maximize
    assert config.seed == 12
    assert config.simulation == ({"iterations": 10}, )
    assert config.rounds()[0].optimize is Optimize.maximize


@pytest.mark.parametrize("options",
                         [{"bananas": 1},
                          {"simulation": {"iterations": 10}},
                          {"simulation": [10]},
                          {"simulation": None},
                          {"seed": "abc"},
                          {"seed": float("inf")}])
def test_make_config_bad(options):
    with pytest.raises(InvalidConfigurationError):
        make_config(**options)


def test_config_is_immutable():
    config = make_config()
    with pytest.raises(AttributeError):
        config.seed = 1


def test_load_config():
    config = load_config(StringIO(
        "optimize: maximize\n"
        "select:\n"
        "  regex: ^hs\n"
        "  names: mm1,mm2\n"
        "init_order:\n"
        "  names: [hs2, hs1]\n"
        "static:\n"
        "  regex: [hs1]\n"
        "warmup_sort_preorder: true\n"
        "seed: 3\n"
        "simulation:\n"
        "  - warmup: true\n"
        "  - iterations: 1000\n"
        "    max_flips: 5\n"
        "  - iterations: r2\n"))
    assert config.optimize is Optimize.maximize
    assert config.select_regex == "^hs"
    assert config.select_names == "mm1,mm2"
    assert config.select_file is None
    assert config.init_order_names == ["hs2", "hs1"]
    assert config.static_regex == ["hs1"]
    assert config.warmup_sort_preorder is True
    assert config.seed == 3
    assert [r.iterations for r in config.rounds()] == [1000, 1000, 2000]
    assert [r.warmup for r in config.rounds()] == [True, False, False]


def test_load_config_empty():
    assert load_config(StringIO("")) == make_config()


@pytest.mark.parametrize("text",
                         ["colour: red\n",
                          "select:\n  colour: red\n",
                          "select: red\n",
                          "- 1\n- 2\n",
                          "optimize: [unbalanced\n",
                          "simulation:\n",
                          "seed: abc\n"])
def test_load_config_bad(text):
    with pytest.raises(InvalidConfigurationError):
        load_config(StringIO(text))


def test_config_from_dict():
    config = config_from_dict({"static": {"names": "chr1"}})
    assert config.static_names == "chr1"
