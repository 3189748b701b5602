# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

"""
Enumerated codes of the raw records. Codes are checked once, when a record table enters the
conversion, and composite codes are decoded into explicit flags there.
"""

from enum import IntEnum

import numpy as np

from caseformat.auxiliary import UnsupportedCodeError


class BusTypeCode(IntEnum):
    PQ = 1
    PV = 2
    REF = 3
    ISOLATED = 4


class WindingCode(IntEnum):
    """Unit of the winding ratios windv1, windv2 and windv3."""
    BUS_BASE_PU = 1  # p.u. of the bus base voltage
    KV = 2  # winding voltage in kV


class ImpedanceCode(IntEnum):
    """Base of the transformer impedances r1_2, x1_2, ..."""
    SYSTEM_BASE = 1  # p.u. on system MVA base and bus base voltage
    WINDING_BASE = 2  # p.u. on winding MVA base and nominal winding voltage
    LOAD_LOSS = 3  # load loss in W and impedance magnitude in p.u. on winding base


class DCSetpointMode(IntEnum):
    BLOCKED = 0
    POWER = 1  # setvl in MW
    CURRENT = 2  # setvl in A


class Transformer3wStatus(IntEnum):
    ALL_OUT = 0
    ALL_IN = 1
    WINDING2_OUT = 2
    WINDING3_OUT = 3
    WINDING1_OUT = 4


# in service flags of the legs (winding 1, winding 2, winding 3), indexed by status code
_LEG_IN_SERVICE = np.array([
    [False, False, False],
    [True, True, True],
    [True, False, True],
    [True, True, False],
    [False, True, True],
])


def check_codes(codes, enum, element, field, buses=None):
    """
    Raises an UnsupportedCodeError for the first code that is no member of the enumeration.

    INPUT:
        **codes** (array) - codes, one per record

        **enum** (IntEnum) - enumeration of the valid codes

        **element** (str) - record kind, used in the error message

        **field** (str) - name of the code field

    OPTIONAL:
        **buses** (2d array, None) - bus numbers of each record, used in the error message
    """
    codes = np.asarray(codes)
    valid = [c.value for c in enum]
    invalid = ~np.isin(codes, valid)
    if np.any(invalid):
        first = np.flatnonzero(invalid)[0]
        raise UnsupportedCodeError(element, field, codes[first].item(), valid,
                                   None if buses is None else buses[first])


def decode_leg_status(stat):
    """
    Decodes three-winding transformer status codes into an (n, 3) array of in service flags,
    one column per winding leg. The codes must have been checked with check_codes before.
    """
    return _LEG_IN_SERVICE[np.asarray(stat, dtype=np.int64)]
