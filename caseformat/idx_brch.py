# -*- coding: utf-8 -*-

# Copyright 1996-2015 PSERC. All rights reserved.
# Use of this source code is governed by a BSD-style
# license that can be found in the LICENSE file.

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

"""Column positions of the branch matrix of a normalized case.

    is_line = (branch[:, TAP] == 0) & (branch[:, SHIFT] == 0)

Columns:

    F_BUS, T_BUS            numbers of the from / to bus
    BR_R, BR_X              series resistance / reactance (p.u. on the system base)
    BR_B                    total charging susceptance (p.u.)
    RATE_A, RATE_B, RATE_C  MVA ratings (normal, short term, emergency)
    TAP                     off-nominal ratio at the from side, 0 for lines
    SHIFT                   phase shift (degrees)
    BR_STATUS               1 in service, 0 out of service
    ANGMIN, ANGMAX          limits of the angle difference from - to (degrees)
"""

F_BUS = 0
T_BUS = 1
BR_R = 2
BR_X = 3
BR_B = 4
RATE_A = 5
RATE_B = 6
RATE_C = 7
TAP = 8
SHIFT = 9
BR_STATUS = 10
ANGMIN = 11
ANGMAX = 12

branch_cols = 13

# column headers of branch.csv
branch_names = ["f_bus", "t_bus", "br_r", "br_x", "br_b", "rate_a", "rate_b", "rate_c", "tap",
                "shift", "br_status", "angmin", "angmax"]
