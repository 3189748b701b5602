# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np

from caseformat.converter.raw.build_bus import _get_bus_pos
from caseformat.converter.raw.codes import DCSetpointMode
from caseformat.idx_bus import VM
from caseformat.idx_dcline import F_BUS, T_BUS, BR_STATUS, PF, PT, VF, VT, PMIN, PMAX, QMINF, QMAXF, \
    QMINT, QMAXT, dcline_cols

logger = logging.getLogger(__name__)

# maximum commutation overlap angle assumed for the reactive power upper limit
MAX_OVERLAP_DEGREE = 60.


def dcline_p_mw(mdc, setvl, vschd):
    """
    Active power transmitted by two-terminal dc lines.

    For the power mode (mdc 1) setvl is the power in MW, for the current mode (mdc 2) it is the
    current in A and the power is |setvl| * vschd / 1000 with the scheduled dc voltage vschd in
    kV. Any other mode, including a blocked line, transmits no power.
    """
    mdc = np.asarray(mdc)
    setvl = np.abs(np.asarray(setvl, dtype=np.float64))
    vschd = np.asarray(vschd, dtype=np.float64)
    p_mw = np.zeros(len(mdc), dtype=np.float64)
    power = mdc == DCSetpointMode.POWER
    current = mdc == DCSetpointMode.CURRENT
    p_mw[power] = setvl[power]
    p_mw[current] = setvl[current] * vschd[current] / 1000.
    unknown = ~np.isin(mdc, [m.value for m in DCSetpointMode])
    if np.any(unknown):
        logger.warning("%d dc lines have an unknown control mode and transmit no power" % unknown.sum())
    return p_mw


def hvdc_q_lims(angle_max, angle_min, p_mw):
    """
    Reactive power limits of a line commutated converter terminal.

    The lower limit assumes no commutation overlap, q_min = p * tan(angle_min). The upper limit
    assumes the maximum overlap of 60 degree, with
    cos(phi) = (cos(angle_max) + cos(60 degree)) / 2 and q_max = p * tan(phi). Both limits are
    returned as magnitudes.

    INPUT:
        **angle_max**, **angle_min** - firing (rectifier) or margin (inverter) angle limits in
        degree

        **p_mw** - transmitted active power in MW

    OUTPUT:
        **q_min**, **q_max** - reactive power limits in MVAr
    """
    alpha_min = np.deg2rad(angle_min)
    alpha_max = np.deg2rad(angle_max)
    q_min = np.abs(p_mw * np.tan(alpha_min))
    cos_phi = .5 * (np.cos(alpha_max) + np.cos(np.deg2rad(MAX_OVERLAP_DEGREE)))
    q_max = np.abs(p_mw * np.tan(np.arccos(cos_phi)))
    return q_min, q_max


def _build_dclines(net, bus, bus_lookup):
    """
    Creates one dcline row per raw two-terminal dc line. Rectifier is the from end, inverter
    the to end. Voltage setpoints are the present voltage magnitudes of the converter buses, the
    active power limits are 85 % and 115 % of the transmitted power.
    """
    raw = net.two_terminal_dc
    f = _get_bus_pos(bus_lookup, raw.ipr.values, "two_terminal_dc")
    t = _get_bus_pos(bus_lookup, raw.ipi.values, "two_terminal_dc")
    p_mw = dcline_p_mw(raw.mdc.values, raw.setvl.values, raw.vschd.values)

    dcline = np.zeros(shape=(len(raw), dcline_cols), dtype=np.float64)
    dcline[:, F_BUS] = raw.ipr.values
    dcline[:, T_BUS] = raw.ipi.values
    dcline[:, BR_STATUS] = raw.mdc.values != DCSetpointMode.BLOCKED
    dcline[:, PF] = p_mw
    dcline[:, PT] = p_mw
    dcline[:, VF] = bus[f, VM]
    dcline[:, VT] = bus[t, VM]
    dcline[:, PMIN] = .85 * p_mw
    dcline[:, PMAX] = 1.15 * p_mw
    dcline[:, QMINF], dcline[:, QMAXF] = hvdc_q_lims(raw.alfmx.values, raw.alfmn.values, p_mw)
    dcline[:, QMINT], dcline[:, QMAXT] = hvdc_q_lims(raw.gammx.values, raw.gammn.values, p_mw)
    return dcline
