# -*- coding: utf-8 -*-
"""
Expected annual damages and net present value of elevating a house.

A state of the world (SOW) combines a sea-level rise trajectory, a storm
surge distribution and a discount rate. For every year, flood damages are
integrated over the surge distribution with the trapezoidal rule; the
yearly expected annual damages (EAD) are then discounted and added to the
cost of elevating the house.
"""
from dataclasses import dataclass

import numpy as np
from scipy.stats import genextreme

from ema_workbench import ema_logging

from funs_economy import discount, elevation_cost
from funs_house import House, load_house, m_to_ft
from funs_slr import Oddo17SLR

_logger = ema_logging.get_module_logger(__name__)

# Storm surge grid: the 0.05th to 99.95th percentile of the surge distribution
N_SURGE_POINTS = 130
SURGE_QUANTILES = (0.0005, 0.9995)

DEFAULT_DMG_FN_ID = 105
DEFAULT_AREA_FT2 = 500.0
DEFAULT_HEIGHT_ABOVE_GAUGE_FT = 4.0
DEFAULT_VALUE_USD = 250000.0
DEFAULT_YEARS = tuple(range(2024, 2084))

# uncertainties not set by the caller take these values
REFERENCE_SCENARIO = {'slr_a': 20.0, 'slr_b': 3.0, 'slr_c': 0.01,
                      'slr_tstar': 2050.0, 'slr_cstar': 10.0,
                      'surge_mu': 4.0, 'surge_sigma': 1.0, 'surge_xi': 0.1,
                      'discount_rate': 0.04}


@dataclass(frozen=True)
class Action:
    ''' How high to elevate the house [ft] '''
    delta_h_ft: float

    @classmethod
    def from_m(cls, delta_h_m):
        return cls(m_to_ft(delta_h_m))


@dataclass(frozen=True)
class SOW:
    slr: Oddo17SLR
    # frozen scipy.stats distribution of storm surge at the gauge [ft]
    surge_dist: object
    # e.g. 0.02 for 2%
    discount_rate: float


@dataclass(frozen=True)
class ModelParams:
    ''' Everything that stays fixed across simulations '''
    house: House
    years: tuple

    def __post_init__(self):
        object.__setattr__(self, 'years', tuple(int(y) for y in self.years))


def trapz(x, y):
    ''' Trapezoidal rule over the last axis of y '''
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return np.sum(np.diff(x) * (y[..., 1:] + y[..., :-1]), axis=-1) * 0.5


def surge_grid(surge_dist):
    ''' Storm surges [ft] at which the EAD integrand is evaluated '''
    lower, upper = surge_dist.ppf(SURGE_QUANTILES)
    return np.linspace(lower, upper, N_SURGE_POINTS)


def expected_annual_damages(action, sow, params):
    ''' EAD [USD] for each year in params.years '''
    house = params.house

    # the integration grid does not depend on the year, only the sea level does
    storm_surges_ft = surge_grid(sow.surge_dist)
    pdf_values = sow.surge_dist.pdf(storm_surges_ft)

    years = np.asarray(params.years, dtype=float)
    slr_ft = sow.slr.evaluate(years)[:, np.newaxis]

    depth_ft_gauge = storm_surges_ft[np.newaxis, :] + slr_ft
    depth_ft_house = depth_ft_gauge - (house.height_above_gauge_ft
                                       + action.delta_h_ft)
    damages_frac = house.ddf.evaluate(depth_ft_house) / 100.0
    weighted_damages = damages_frac * pdf_values

    return trapz(storm_surges_ft, weighted_damages) * house.value_usd


def npv_components(action, sow, params):
    ''' Construction cost and discounted expected damages [USD] '''
    construction_cost = elevation_cost.evaluate(params.house, action.delta_h_ft)

    eads = expected_annual_damages(action, sow, params)
    ead_npv = float(np.sum(discount(eads, params.years, sow.discount_rate)))
    return construction_cost, ead_npv


def run_sim(action, sow, params):
    ''' Negative of elevation cost plus discounted expected damages; higher
    is better '''
    construction_cost, ead_npv = npv_components(action, sow, params)
    return -(ead_npv + construction_cost)


def surge_distribution(mu, sigma, xi):
    ''' GEV distribution of annual maximum storm surge [ft] '''
    # scipy's shape parameter has the opposite sign of xi
    return genextreme(c=-xi, loc=mu, scale=sigma)


class HouseElevationModel(object):
    ''' Callable evaluating one elevation lever under one SOW, returning the
    outcomes of interest '''

    def __init__(self, house=None, years=DEFAULT_YEARS):
        if house is None:
            house = load_house(DEFAULT_DMG_FN_ID,
                               area_ft2=DEFAULT_AREA_FT2,
                               height_above_gauge_ft=DEFAULT_HEIGHT_ABOVE_GAUGE_FT,
                               value_usd=DEFAULT_VALUE_USD)
        self.params = ModelParams(house=house, years=years)
        _logger.info('model initialized')

    def __call__(self, elevation_ft=0.0, **kwargs):
        # kwargs are the uncertainties, by their names in REFERENCE_SCENARIO
        unknown = set(kwargs) - set(REFERENCE_SCENARIO)
        if unknown:
            raise TypeError('unknown uncertainties: {}'.format(
                                                    ', '.join(sorted(unknown))))
        u = dict(REFERENCE_SCENARIO, **kwargs)

        slr = Oddo17SLR(a=u['slr_a'], b=u['slr_b'], c=u['slr_c'],
                        t_star=u['slr_tstar'], c_star=u['slr_cstar'])
        sow = SOW(slr=slr,
                  surge_dist=surge_distribution(u['surge_mu'],
                                                u['surge_sigma'],
                                                u['surge_xi']),
                  discount_rate=u['discount_rate'])

        construction_cost, ead_npv = npv_components(Action(elevation_ft), sow,
                                                    self.params)
        _logger.debug('elevation {:.2f} ft: cost {:.0f}, damages {:.0f}'.format(
                                    elevation_ft, construction_cost, ead_npv))

        return {'Objective': -(ead_npv + construction_cost),
                'Construction Cost': construction_cost,
                'Expected Damages': ead_npv}
