# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import numpy as np

from caseformat.converter.raw.build_bus import _get_bus_pos
from caseformat.idx_gen import GEN_BUS, PG, QG, QMAX, QMIN, VG, MBASE, GEN_STATUS, PMAX, PMIN, gen_cols


def _build_gen(net, bus_lookup):
    """
    Creates the gen matrix with one row per raw generator record.
    """
    raw = net.generator
    _get_bus_pos(bus_lookup, raw.i.values, "generator")

    gen = np.zeros(shape=(len(raw), gen_cols), dtype=np.float64)
    gen[:, GEN_BUS] = raw.i.values
    gen[:, PG] = raw.pg.values
    gen[:, QG] = raw.qg.values
    gen[:, QMAX] = raw.qt.values
    gen[:, QMIN] = raw.qb.values
    gen[:, VG] = raw.vs.values
    gen[:, MBASE] = raw.mbase.values
    gen[:, GEN_STATUS] = raw.stat.values != 0
    gen[:, PMAX] = raw.pt.values
    gen[:, PMIN] = raw.pb.values
    return gen
