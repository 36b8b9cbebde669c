# -*- coding: utf-8 -*-
"""
Cost of elevating a house and discounting of future damages.

Elevation costs follow Zarekarizi et al. (2020) and Doss-Gollin & Keller
(2023).
"""
import math
from dataclasses import dataclass

import numpy as np

# permitting, mobilization and other fixed costs [USD]
BASE_COST = 10000 + 300 + 470 + 4300 + 2175 + 3500

MAX_ELEVATION_FT = 14.0


@dataclass(frozen=True)
class ElevationCostCurve:
    ''' Cost of raising a house: a fixed base cost plus a rate per square
    foot interpolated from the elevation height '''
    elevation_thresholds: tuple = (0.0, 5.0, 8.5, 12.0, MAX_ELEVATION_FT)
    elevation_rates: tuple = (80.36, 82.5, 86.25, 103.75, 113.75)  # USD/ft2
    base_cost: float = BASE_COST

    def rate(self, delta_h_ft):
        return np.interp(delta_h_ft, self.elevation_thresholds,
                         self.elevation_rates)

    def evaluate(self, house, delta_h_ft):
        ''' Cost [USD] of elevating house by delta_h_ft '''
        if not delta_h_ft >= 0.0:
            raise ValueError('cannot lower the house (got {} ft)'.format(
                                                                delta_h_ft))
        if delta_h_ft > self.elevation_thresholds[-1]:
            raise ValueError('cannot elevate more than {} ft (got {} ft)'.format(
                                self.elevation_thresholds[-1], delta_h_ft))

        # doing nothing is free
        if math.isclose(delta_h_ft, 0.0, abs_tol=1e-9):
            return 0.0

        return self.base_cost + house.area_ft2 * float(self.rate(delta_h_ft))


elevation_cost = ElevationCostCurve()


def discount(amounts, years, rate):
    ''' Discount yearly amounts by (1 - rate) per year elapsed since the
    first year '''
    amounts = np.asarray(amounts, dtype=float)
    years = np.asarray(years, dtype=float)
    if years.size == 0:
        return amounts

    years_idx = years - years.min()
    return amounts * (1 - rate)**years_idx
