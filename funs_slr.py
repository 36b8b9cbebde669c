# -*- coding: utf-8 -*-
"""
Five-parameter model of local sea-level rise, equation 6 of

Oddo, P. C., Lee, B. S., Garner, G. G., Srikrishnan, V., Reed, P. M.,
Forest, C. E., & Keller, K. (2017). Deep uncertainties in sea-level rise and
storm surge projections: implications for coastal flood risk management.
Risk Analysis. https://doi.org/10/ghkp82
"""
from dataclasses import dataclass

import numpy as np

# 1 mm = 0.00328084 ft
MM_TO_FT = 0.00328084


@dataclass(frozen=True)
class Oddo17SLR:
    ''' Coefficients of a quadratic sea-level curve with a knee at t_star '''
    a: float
    b: float
    c: float
    t_star: float
    c_star: float

    def evaluate(self, t):
        ''' Local sea level [ft] in year(s) t '''
        t = np.asarray(t, dtype=float)

        slr_mm = (self.a
                  + self.b * (t - 2000)
                  + self.c * (t - 2000)**2
                  + self.c_star * (t > self.t_star) * (t - self.t_star))
        return slr_mm * MM_TO_FT
