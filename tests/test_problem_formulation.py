import pytest

from house_elevation_function import REFERENCE_SCENARIO
from problem_formulation import (get_model_for_problem_formulation,
                                 get_parking_garage_model, sum_over)


@pytest.fixture(scope='module')
def house_model():
    return get_model_for_problem_formulation(0)


def test_sum_over():
    assert sum_over(1, 2, 3) == 6


def test_uncertainties_and_levers(house_model):
    names = sorted(u.name for u in house_model.uncertainties)
    assert names == sorted(REFERENCE_SCENARIO)

    levers = list(house_model.levers)
    assert len(levers) == 1
    assert levers[0].name == 'elevation_ft'
    assert levers[0].lower_bound == 0
    assert levers[0].upper_bound == 14


@pytest.mark.parametrize('pf_id, names', [
    (0, ['Objective']),
    (1, ['Construction Cost', 'Expected Damages']),
    (2, ['Total Costs'])])
def test_outcomes(pf_id, names):
    model = get_model_for_problem_formulation(pf_id)
    assert [o.name for o in model.outcomes] == names


def test_unknown_formulation():
    with pytest.raises(TypeError):
        get_model_for_problem_formulation(7)


def test_parking_garage_model():
    model = get_parking_garage_model(adaptive=True)
    assert [lever.name for lever in model.levers] == ['n_levels']
    assert [o.name for o in model.outcomes] == ['NPV']
