# -*- coding: utf-8 -*-
"""
Uncertainties, levers and outcomes of the house elevation and parking
garage models, for use with the EMA workbench.
"""
from ema_workbench import (Model, ScalarOutcome, IntegerParameter,
                           RealParameter)

from funs_economy import MAX_ELEVATION_FT
from house_elevation_function import HouseElevationModel
from parking_garage import ParkingGarageModel


# sea-level rise: mm, mm/yr, mm/yr2, yr, mm/yr
SLR_UNCERTAINTIES = {'slr_a': [0, 40],
                     'slr_b': [1.5, 4.5],
                     'slr_c': [0, 0.03],
                     'slr_tstar': [2020, 2100],
                     'slr_cstar': [0, 30]}

# GEV storm surge at the gauge: ft, ft, [.]
SURGE_UNCERTAINTIES = {'surge_mu': [3, 5],
                       'surge_sigma': [0.5, 1.5],
                       'surge_xi': [0, 0.3]}

ECON_UNCERTAINTIES = {'discount_rate': [0, 0.07]}


def sum_over(*args):
    return sum(args)


def get_model_for_problem_formulation(problem_formulation_id, house=None):
    ''' Prepare HouseElevationModel for the EMA workbench: uncertainties,
    lever and problem formulation.

    0: single objective, maximized
    1: construction cost and expected damages, both minimized
    2: total costs, minimized
    '''
    function = HouseElevationModel(house=house)
    house_model = Model('houseelevation', function=function)

    uncertainties = []
    for uncert in (SLR_UNCERTAINTIES, SURGE_UNCERTAINTIES, ECON_UNCERTAINTIES):
        for name, (lower, upper) in uncert.items():
            uncertainties.append(RealParameter(name, lower, upper))

    house_model.uncertainties = uncertainties
    house_model.levers = [RealParameter('elevation_ft', 0, MAX_ELEVATION_FT)]

    if problem_formulation_id == 0:
        house_model.outcomes = [ScalarOutcome('Objective',
                                              kind=ScalarOutcome.MAXIMIZE)]
    elif problem_formulation_id == 1:
        house_model.outcomes = [
            ScalarOutcome('Construction Cost', kind=ScalarOutcome.MINIMIZE),
            ScalarOutcome('Expected Damages', kind=ScalarOutcome.MINIMIZE)]
    elif problem_formulation_id == 2:
        house_model.outcomes = [
            ScalarOutcome('Total Costs',
                          variable_name=['Construction Cost',
                                         'Expected Damages'],
                          function=sum_over, kind=ScalarOutcome.MINIMIZE)]
    else:
        raise TypeError('unknown identifier {}'.format(problem_formulation_id))
    return house_model


def get_parking_garage_model(adaptive=False):
    ''' Parking garage under uncertain demand growth and discount rate; the
    lever is the number of levels built in the first year '''
    function = ParkingGarageModel(adaptive=adaptive)
    garage_model = Model('parkinggarage', function=function)

    garage_model.uncertainties = [
        RealParameter('demand_growth_rate', 40, 120),
        RealParameter('discount_rate', 0.08, 0.16)]
    garage_model.levers = [IntegerParameter('n_levels', 0, 10)]
    garage_model.outcomes = [ScalarOutcome('NPV', kind=ScalarOutcome.MAXIMIZE)]
    return garage_model
