# -*- coding: utf-8 -*-

# Copyright 1996-2015 PSERC. All rights reserved.
# Use of this source code is governed by a BSD-style
# license that can be found in the LICENSE file.

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

"""Column positions of the bus matrix of a normalized case.

    bus[bus[:, BUS_TYPE] == REF, BUS_I]   # numbers of the slack buses
    bus[:, [PD, QD]]                      # demand of every bus in MW / MVAr

Columns:

    BUS_I      bus number, unique within a case
    BUS_TYPE   PQ (1), PV (2), REF (3) or NONE (4, isolated)
    PD, QD     active / reactive demand (MW, MVAr)
    GS, BS     shunt conductance / susceptance, as MW / MVAr drawn at 1.0 p.u.
    BUS_AREA   area number
    VM, VA     voltage magnitude (p.u.) and angle (degrees)
    BASE_KV    base voltage (kV)
    ZONE       zone number
    VMAX, VMIN voltage magnitude limits (p.u.)
"""

# bus types, same codes as the raw bus "ide" field
PQ = 1
PV = 2
REF = 3
NONE = 4

BUS_I = 0
BUS_TYPE = 1
PD = 2
QD = 3
GS = 4
BS = 5
BUS_AREA = 6
VM = 7
VA = 8
BASE_KV = 9
ZONE = 10
VMAX = 11
VMIN = 12

bus_cols = 13

# column headers of bus.csv
bus_names = ["bus_i", "type", "pd", "qd", "gs", "bs", "area", "vm", "va", "base_kv", "zone",
             "vmax", "vmin"]
