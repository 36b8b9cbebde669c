# -*- coding: utf-8 -*-
"""
Houses and their depth-damage functions.

Depth-damage tables follow the HAZUS ``haz_fl_dept.csv`` layout: one row per
damage function, metadata columns plus one column per depth named
``ft<number>[_<decimal>][m]`` (``ft04m`` is -4 ft, ``ft3_5`` is 3.5 ft).
"""
import os
from dataclasses import dataclass

import numpy as np
import pandas as pd

from ema_workbench import ema_logging

_logger = ema_logging.get_module_logger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
DEPTH_DAMAGE_FILE = os.path.join(DATA_DIR, 'haz_fl_dept.csv')

# marks a depth that is not part of a tabulated curve
NA = 'NA'

FT_PER_M = 1 / 0.3048


def m_to_ft(length_m):
    return length_m * FT_PER_M


def m2_to_ft2(area_m2):
    return area_m2 * FT_PER_M**2


@dataclass(frozen=True)
class DepthDamageFunction:
    ''' Piecewise linear depth [ft] -> damage [%] curve, flat outside the
    tabulated depths '''
    depths_ft: tuple
    damages: tuple

    def __post_init__(self):
        depths_ft = tuple(float(d) for d in self.depths_ft)
        damages = tuple(float(d) for d in self.damages)

        if len(depths_ft) != len(damages):
            raise ValueError('got {} depths but {} damages'.format(
                                len(depths_ft), len(damages)))
        if not depths_ft:
            raise ValueError('a depth-damage function needs at least one point')
        if not np.all(np.diff(depths_ft) > 0):
            raise ValueError('depths must be strictly increasing')
        if not np.all(np.isfinite(damages)):
            raise ValueError('damages must be finite')

        object.__setattr__(self, 'depths_ft', depths_ft)
        object.__setattr__(self, 'damages', damages)

    def evaluate(self, depth_ft):
        ''' Damage in percent (0-100) for flood depth(s) at the structure '''
        # np.interp holds the end values constant outside [xp[0], xp[-1]]
        return np.interp(depth_ft, self.depths_ft, self.damages)


@dataclass(frozen=True)
class House:
    area_ft2: float
    value_usd: float
    height_above_gauge_ft: float
    ddf: DepthDamageFunction

    # provenance only
    occupancy: str = ''
    dmg_fn_id: str = ''
    source: str = ''
    description: str = ''
    comment: str = ''


def parse_depth_column(col_name):
    ''' Depth [ft] encoded in a column name such as ft02m or ft3_5 '''
    depth_str = col_name[2:]
    is_negative = depth_str.endswith('m')
    if is_negative:
        depth_str = depth_str[:-1]
    depth = float(depth_str.replace('_', '.'))
    return -depth if is_negative else depth


def _metadata(row, column):
    value = row.get(column, '')
    if pd.isna(value):
        return ''
    return str(value)


def house_from_row(row, area_ft2, height_above_gauge_ft, value_usd):
    ''' Build a House from one row of a depth-damage table '''
    points = []
    for col_name, value in row.items():
        if not str(col_name).startswith('ft'):
            continue
        if pd.isna(value) or str(value).strip() in (NA, ''):
            continue
        points.append((parse_depth_column(str(col_name)), float(value)))

    # the table does not guarantee the columns are sorted by depth
    points.sort()
    depths_ft = [p[0] for p in points]
    damages = [p[1] for p in points]

    return House(area_ft2=float(area_ft2),
                 value_usd=float(value_usd),
                 height_above_gauge_ft=float(height_above_gauge_ft),
                 ddf=DepthDamageFunction(depths_ft, damages),
                 occupancy=_metadata(row, 'Occupancy'),
                 dmg_fn_id=_metadata(row, 'DmgFnId'),
                 source=_metadata(row, 'Source'),
                 description=_metadata(row, 'Description'),
                 comment=_metadata(row, 'Comment'))


def read_depth_damage_table(path=DEPTH_DAMAGE_FILE):
    ''' Read a depth-damage table, keeping 'NA' as a literal string '''
    table = pd.read_csv(path, dtype=str, keep_default_na=False)
    _logger.debug('read {} depth-damage functions from {}'.format(
                                                    len(table), path))
    return table


def load_house(dmg_fn_id, area_ft2, height_above_gauge_ft, value_usd,
               path=DEPTH_DAMAGE_FILE):
    ''' Build a House using the depth-damage function with id dmg_fn_id '''
    table = read_depth_damage_table(path)
    rows = table[table['DmgFnId'] == str(dmg_fn_id)]
    if rows.empty:
        raise KeyError('no depth-damage function with id {}'.format(dmg_fn_id))
    return house_from_row(rows.iloc[0], area_ft2=area_ft2,
                          height_above_gauge_ft=height_above_gauge_ft,
                          value_usd=value_usd)
