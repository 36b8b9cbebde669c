import numpy as np
import pytest

from parking_garage import (AdaptivePolicy, ParkingGarageModel,
                            ParkingGarageSOW, ParkingGarageState, Policy,
                            StaticPolicy, calc_construction_cost,
                            calculate_capacity, calculate_demand, run_timestep,
                            simulate)


def test_demand_grows_linearly():
    assert calculate_demand(1, 80.0) == 750
    assert calculate_demand(11, 50.0) == 1250


def test_initial_state():
    state = ParkingGarageState()
    assert state.n_levels == 0
    assert state.year == 1
    assert state.demand == 750


def test_capacity():
    assert calculate_capacity(ParkingGarageState(n_levels=3)) == 600


def test_construction_cost():
    assert calc_construction_cost(0, 0, False) == 0
    assert calc_construction_cost(0, 3, False) == pytest.approx(3840000)
    assert calc_construction_cost(0, 3, True) == pytest.approx(3840000 * 1.05)
    assert calc_construction_cost(4, 1, False) == pytest.approx(4480000)


def test_static_policy():
    policy = StaticPolicy(4)
    assert policy.get_action(ParkingGarageState(year=1)).delta_n_levels == 4
    assert policy.get_action(ParkingGarageState(year=2)).delta_n_levels == 0


def test_adaptive_policy():
    policy = AdaptivePolicy(2)
    assert policy.get_action(ParkingGarageState(year=1)).delta_n_levels == 2

    crowded = ParkingGarageState(n_levels=4, year=5, demand=900)
    assert policy.get_action(crowded).delta_n_levels == 1
    roomy = ParkingGarageState(n_levels=5, year=5, demand=900)
    assert policy.get_action(roomy).delta_n_levels == 0


def test_base_policy_is_abstract():
    with pytest.raises(NotImplementedError):
        Policy().get_action(ParkingGarageState())


def test_first_year_static():
    state = ParkingGarageState()
    profit = run_timestep(state, ParkingGarageSOW(), StaticPolicy(4))
    assert state.n_levels == 4
    assert profit == pytest.approx(8250000 - 4160000 - 3600000 - 1600000)


def test_adaptive_expansion_step():
    state = ParkingGarageState(n_levels=4, year=2)
    profit = run_timestep(state, ParkingGarageSOW(), AdaptivePolicy(4))
    assert state.demand == 830
    assert state.n_levels == 5
    assert profit == pytest.approx(9130000 - 4480000 - 3600000 - 2000000)


def test_empty_garage_pays_only_the_lease():
    sow = ParkingGarageSOW()
    expected = -3.6 * np.sum(0.88**np.arange(20))
    assert simulate(sow, StaticPolicy(0)) == pytest.approx(expected)


def test_model():
    outcomes = ParkingGarageModel(adaptive=True)(n_levels=4)
    assert outcomes['NPV'] == pytest.approx(
        simulate(ParkingGarageSOW(), AdaptivePolicy(4)))
