import pytest

from ereea.app import build_simulation, main


def test_build_simulation_default_seed():
    assert build_simulation().map.seed == 4


def test_build_simulation_given_seed():
    sim = build_simulation(99)
    assert sim.map.seed == 99
    assert sim.running is False


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as excinfo:
        main(["--seed", "abc"])
    assert excinfo.value.code == 2