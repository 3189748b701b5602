# -*- coding: utf-8 -*-

# Copyright 1996-2015 PSERC. All rights reserved.
# Use of this source code is governed by a BSD-style
# license that can be found in the LICENSE file.

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

"""Column positions of the dcline matrix of a normalized case.

Columns:

    F_BUS, T_BUS      rectifier / inverter bus number
    BR_STATUS         1 in service, 0 out of service
    PF, PT            active flow at the rectifier / inverter end (MW)
    QF, QT            reactive injection at the rectifier / inverter end (MVAr)
    VF, VT            voltage setpoints (p.u.)
    PMIN, PMAX        limits of PF (MW)
    QMINF, QMAXF      limits of QF (MVAr)
    QMINT, QMAXT      limits of QT (MVAr)
    LOSS0, LOSS1      constant (MW) and linear (MW/MW) loss terms
"""

F_BUS = 0
T_BUS = 1
BR_STATUS = 2
PF = 3
PT = 4
QF = 5
QT = 6
VF = 7
VT = 8
PMIN = 9
PMAX = 10
QMINF = 11
QMAXF = 12
QMINT = 13
QMAXT = 14
LOSS0 = 15
LOSS1 = 16

dcline_cols = 17

# column headers of dcline.csv
dcline_names = ["f_bus", "t_bus", "br_status", "pf", "pt", "qf", "qt", "vf", "vt", "pmin",
                "pmax", "qminf", "qmaxf", "qmint", "qmaxt", "loss0", "loss1"]
