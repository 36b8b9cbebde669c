# -*- coding: utf-8 -*-
"""
Capacity planning for a parking garage, with a static and an adaptive
expansion policy.

Unrelated to the house elevation model; it only shares the workbench.
"""
from dataclasses import dataclass

import numpy as np

from ema_workbench import ema_logging

_logger = ema_logging.get_module_logger(__name__)

SPACES_PER_LEVEL = 200
COST_PER_SPACE = 16000
ADAPTIVE_PREMIUM = 0.05
REVENUE_PER_SPACE = 11000
OPERATING_COST_PER_SPACE = 2000
LEASE_COST = 3600000


@dataclass(frozen=True)
class ParkingGarageSOW:
    demand_growth_rate: float = 80.0
    n_years: int = 20
    discount_rate: float = 0.12


def calculate_demand(t, demand_growth_rate):
    ''' Demand is 750 spaces on opening day and grows linearly '''
    return 750 + demand_growth_rate * (t - 1)


@dataclass
class ParkingGarageState:
    n_levels: int = 0
    year: int = 1
    demand: float = calculate_demand(1, 80.0)


@dataclass(frozen=True)
class ParkingGarageAction:
    delta_n_levels: int


class Policy(object):
    def get_action(self, state):
        raise NotImplementedError('use a concrete policy')


@dataclass(frozen=True)
class StaticPolicy(Policy):
    ''' Build n_levels in the first year, never expand '''
    n_levels: int

    def get_action(self, state):
        if state.year == 1:
            return ParkingGarageAction(self.n_levels)
        return ParkingGarageAction(0)


@dataclass(frozen=True)
class AdaptivePolicy(Policy):
    ''' Build n_levels_init in the first year, then add a level whenever
    demand exceeds capacity '''
    n_levels_init: int

    def get_action(self, state):
        if state.year == 1:
            return ParkingGarageAction(self.n_levels_init)
        if state.demand > calculate_capacity(state):
            return ParkingGarageAction(1)
        return ParkingGarageAction(0)


def calculate_capacity(state):
    return SPACES_PER_LEVEL * state.n_levels


def calc_construction_cost(n_levels, delta_n_levels, is_adaptive):
    ''' Precast construction costs 16,000 USD per space, 10% more for every
    level above ground. An adaptive design pays 5% extra up front for
    footers and columns. '''
    if delta_n_levels == 0:
        cost_per_space = 0.0
    else:
        cost_per_space = COST_PER_SPACE * (1 + 0.1 * (n_levels
                                                      + delta_n_levels - 1))
    if is_adaptive:
        cost_per_space *= 1 + ADAPTIVE_PREMIUM
    return cost_per_space * SPACES_PER_LEVEL


def run_timestep(state, sow, policy):
    ''' Advance state by one year and return the profit of that year '''
    state.demand = calculate_demand(state.year, sow.demand_growth_rate)

    action = policy.get_action(state)

    # only the initial construction carries the adaptive premium
    is_adaptive = isinstance(policy, AdaptivePolicy) and state.year == 1
    constr_costs = calc_construction_cost(state.n_levels,
                                          action.delta_n_levels, is_adaptive)
    state.n_levels += action.delta_n_levels

    # spaces sold are limited by both capacity and demand
    capacity = calculate_capacity(state)
    revenue = REVENUE_PER_SPACE * min(capacity, state.demand)

    costs = constr_costs + LEASE_COST + OPERATING_COST_PER_SPACE * capacity
    return revenue - costs


def simulate(sow, policy):
    ''' NPV of profits [million USD] over sow.n_years '''
    state = ParkingGarageState()

    years = np.arange(1, sow.n_years + 1)
    profits = []
    for year in years:
        state.year = int(year)
        profits.append(run_timestep(state, sow, policy))

    discount_weights = (1 - sow.discount_rate)**(years - 1)
    npv_profits = np.sum(np.array(profits) * discount_weights)
    return npv_profits / 1e6


class ParkingGarageModel(object):
    ''' Callable evaluating one garage size under one SOW '''

    def __init__(self, adaptive=False, n_years=20):
        self.adaptive = adaptive
        self.n_years = n_years
        _logger.info('parking garage model initialized')

    def __call__(self, n_levels=5, demand_growth_rate=80.0, discount_rate=0.12):
        sow = ParkingGarageSOW(demand_growth_rate=demand_growth_rate,
                               n_years=self.n_years,
                               discount_rate=discount_rate)
        if self.adaptive:
            policy = AdaptivePolicy(int(n_levels))
        else:
            policy = StaticPolicy(int(n_levels))
        return {'NPV': simulate(sow, policy)}
