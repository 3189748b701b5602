# -*- coding: utf-8 -*-

# Copyright 1996-2015 PSERC. All rights reserved.
# Use of this source code is governed by a BSD-style
# license that can be found in the LICENSE file.

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

"""Column positions of the gen matrix of a normalized case.

Columns:

    GEN_BUS     number of the connected bus
    PG, QG      active / reactive output (MW, MVAr)
    QMAX, QMIN  reactive output limits (MVAr)
    VG          voltage setpoint (p.u.)
    MBASE       machine MVA base
    GEN_STATUS  1 in service, 0 out of service
    PMAX, PMIN  active output limits (MW)

Loads given as generators with PMIN < 0 and PMAX == 0 are found with isload.
"""

GEN_BUS = 0
PG = 1
QG = 2
QMAX = 3
QMIN = 4
VG = 5
MBASE = 6
GEN_STATUS = 7
PMAX = 8
PMIN = 9

gen_cols = 10

# column headers of gen.csv
gen_names = ["gen_bus", "pg", "qg", "qmax", "qmin", "vg", "mbase", "gen_status", "pmax", "pmin"]


def isload(gen):
    """
    Boolean mask of the gen rows that are dispatchable loads (PMIN < 0 and PMAX == 0).
    """
    return (gen[:, PMIN] < 0) & (gen[:, PMAX] == 0)
