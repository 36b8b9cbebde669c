# -*- coding: utf-8 -*-
"""Shared fixtures."""
import pytest
from scipy.stats import norm

from funs_house import DepthDamageFunction, House
from funs_slr import Oddo17SLR
from house_elevation_function import SOW, ModelParams


@pytest.fixture
def ddf():
    return DepthDamageFunction([-2.0, 0.0, 2.0, 4.0, 8.0],
                               [0.0, 10.0, 30.0, 50.0, 80.0])


@pytest.fixture
def house(ddf):
    return House(area_ft2=1500.0, value_usd=250000.0,
                 height_above_gauge_ft=4.0, ddf=ddf)


@pytest.fixture
def slr():
    return Oddo17SLR(a=20.0, b=3.0, c=0.01, t_star=2050.0, c_star=10.0)


@pytest.fixture
def sow(slr):
    return SOW(slr=slr, surge_dist=norm(loc=4.0, scale=1.0),
               discount_rate=0.04)


@pytest.fixture
def params(house):
    return ModelParams(house=house, years=range(2024, 2054))
