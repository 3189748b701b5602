# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np

from caseformat.auxiliary import MissingFieldError, NumericDomainError
from caseformat.converter.raw.build_bus import _get_bus_pos
from caseformat.converter.raw.codes import ImpedanceCode, Transformer3wStatus, WindingCode, \
    check_codes, decode_leg_status
from caseformat.converter.raw.per_unit import impedance_to_system_pu, tap_ratio, winding_ratio
from caseformat.idx_brch import F_BUS, T_BUS, BR_R, BR_X, BR_B, RATE_A, RATE_B, RATE_C, TAP, SHIFT, \
    BR_STATUS, ANGMIN, ANGMAX, branch_cols
from caseformat.idx_bus import BUS_I, BUS_TYPE, BUS_AREA, VM, VA, BASE_KV, ZONE, VMAX, VMIN, PQ, \
    NONE, bus_cols

logger = logging.getLogger(__name__)

TRAFO2W_FIELDS = ["r1_2", "x1_2", "sbase1_2", "windv1", "windv2"]
TRAFO3W_FIELDS = ["r1_2", "x1_2", "sbase1_2", "r2_3", "x2_3", "sbase2_3", "r3_1", "x3_1", "sbase3_1",
                  "windv1", "windv2", "windv3", "ang1", "ang2", "ang3", "rata1", "rata2", "rata3",
                  "ratb1", "ratb2", "ratb3", "ratc1", "ratc2", "ratc3"]


def _init_branch(n):
    branch = np.zeros(shape=(n, branch_cols), dtype=np.float64)
    branch[:, ANGMIN] = -360.
    branch[:, ANGMAX] = 360.
    return branch


def _check_required_fields(df, fields, element, buses):
    for field in fields:
        missing = df[field].isnull().values
        if np.any(missing):
            raise MissingFieldError(element, field, buses[np.flatnonzero(missing)[0]])


def _check_kv_windings(code, base_kv, element, buses):
    invalid = (np.asarray(code) == WindingCode.KV) & ~(base_kv > 0)
    if np.any(invalid):
        raise NumericDomainError(element, "basekv", buses[np.flatnonzero(invalid)[0]],
                                 "winding voltages in kV need a positive bus base voltage")


def delta_to_star(z12, z23, z31):
    """
    Converts the three loop (delta) impedances between the winding pairs of a three-winding
    transformer into the three leg (star) impedances:

        z1 = (z12 + z31 - z23) / 2
        z2 = (z12 + z23 - z31) / 2
        z3 = (z31 + z23 - z12) / 2

    so that z1 + z2 = z12, z2 + z3 = z23 and z3 + z1 = z31.
    """
    return .5 * (z12 + z31 - z23), .5 * (z12 + z23 - z31), .5 * (z31 + z23 - z12)


def _build_line_branches(net, bus_lookup):
    """
    Creates one branch row per raw non-transformer branch. Impedances and ratings are already
    on the system base. A negative to bus number marks the metered end and is used by its
    absolute value.
    """
    raw = net.branch
    _get_bus_pos(bus_lookup, raw.i.values, "branch")
    _get_bus_pos(bus_lookup, np.abs(raw.j.values), "branch")

    branch = _init_branch(len(raw))
    branch[:, F_BUS] = raw.i.values
    branch[:, T_BUS] = np.abs(raw.j.values)
    branch[:, BR_R] = raw.r.values
    branch[:, BR_X] = raw.x.values
    branch[:, BR_B] = raw.b.values
    branch[:, RATE_A] = raw.rate_a.values
    branch[:, RATE_B] = raw.rate_b.values
    branch[:, RATE_C] = raw.rate_c.values
    branch[:, BR_STATUS] = raw.st.values != 0
    return branch


def _build_trafo2w_branches(net, bus, bus_lookup, base_mva):
    """
    Creates one branch row per raw two-winding transformer (k == 0).

    The tap ratio is the ratio of the two winding ratios in p.u. of their bus base voltages,
    the impedance is converted from its impedance code base to the system base at the base
    voltage of the winding 1 bus.
    """
    raw = net.transformer[net.transformer.k.values == 0]
    if not len(raw):
        return _init_branch(0)
    buses = raw[["i", "j"]].values
    check_codes(raw.cw.values, WindingCode, "transformer", "cw", buses)
    check_codes(raw.cz.values, ImpedanceCode, "transformer", "cz", buses)
    _check_required_fields(raw, TRAFO2W_FIELDS, "transformer", buses)

    f = _get_bus_pos(bus_lookup, raw.i.values, "transformer")
    t = _get_bus_pos(bus_lookup, raw.j.values, "transformer")
    kv_f, kv_t = bus[f, BASE_KV], bus[t, BASE_KV]
    _check_kv_windings(raw.cw.values, np.minimum(kv_f, kv_t), "transformer", buses)

    r, x = impedance_to_system_pu(raw.r1_2.values, raw.x1_2.values, raw.cz.values, kv_f,
                                  raw.nomv1.values, raw.sbase1_2.values, base_mva,
                                  "transformer", buses, "x1_2")

    branch = _init_branch(len(raw))
    branch[:, F_BUS] = raw.i.values
    branch[:, T_BUS] = raw.j.values
    branch[:, BR_R] = r
    branch[:, BR_X] = x
    branch[:, RATE_A] = np.nan_to_num(raw.rata1.values.astype(np.float64))
    branch[:, RATE_B] = np.nan_to_num(raw.ratb1.values.astype(np.float64))
    branch[:, RATE_C] = np.nan_to_num(raw.ratc1.values.astype(np.float64))
    branch[:, TAP] = tap_ratio(raw.windv1.values, raw.windv2.values, raw.cw.values, kv_f, kv_t)
    branch[:, SHIFT] = np.nan_to_num(raw.ang1.values.astype(np.float64))
    branch[:, BR_STATUS] = raw.stat.values != 0
    return branch


def _first_star_bus(max_bus):
    """
    Smallest power of ten that is strictly greater than the largest bus number.
    """
    return 10 ** len(str(int(max(max_bus, 0))))


def _build_trafo3w(net, bus, bus_lookup, base_mva, first_star_bus):
    """
    Splits every raw three-winding transformer (k != 0) into a star bus and three branches.

    The star bus gets the number first_star_bus + n for the n-th three-winding transformer,
    the voltage given in vmstar / anstar, and area, zone, base voltage and voltage limits of the
    winding 1 bus. It is a PQ bus if any leg is in service, else it is isolated.

    The loop impedances 1-2, 2-3 and 3-1 are converted to the system base at the base voltage
    of the winding 1, 2 and 3 bus respectively and then converted into leg impedances. Every
    leg connects its winding bus (from) with the star bus (to) and carries the tap, phase
    shift, ratings and status of its winding.

    OUTPUT:
        **star_bus** (ndarray) - bus rows of the star buses

        **branch** (ndarray) - branch rows of the legs, legs 1, 2 and 3 of each transformer
        after another
    """
    raw = net.transformer[net.transformer.k.values != 0]
    n = len(raw)
    if not n:
        return np.zeros(shape=(0, bus_cols)), _init_branch(0)
    buses = raw[["i", "j", "k"]].values
    check_codes(raw.cw.values, WindingCode, "transformer", "cw", buses)
    check_codes(raw.cz.values, ImpedanceCode, "transformer", "cz", buses)
    check_codes(raw.stat.values, Transformer3wStatus, "transformer", "stat", buses)
    _check_required_fields(raw, TRAFO3W_FIELDS, "transformer", buses)

    pos = [_get_bus_pos(bus_lookup, raw[col].values, "transformer") for col in ("i", "j", "k")]
    kv = [bus[p, BASE_KV] for p in pos]
    _check_kv_windings(raw.cw.values, np.minimum.reduce(kv), "transformer", buses)
    cz = raw.cz.values

    r12, x12 = impedance_to_system_pu(raw.r1_2.values, raw.x1_2.values, cz, kv[0], raw.nomv1.values,
                                      raw.sbase1_2.values, base_mva, "transformer", buses, "x1_2")
    r23, x23 = impedance_to_system_pu(raw.r2_3.values, raw.x2_3.values, cz, kv[1], raw.nomv2.values,
                                      raw.sbase2_3.values, base_mva, "transformer", buses, "x2_3")
    r31, x31 = impedance_to_system_pu(raw.r3_1.values, raw.x3_1.values, cz, kv[2], raw.nomv3.values,
                                      raw.sbase3_1.values, base_mva, "transformer", buses, "x3_1")
    r_leg = delta_to_star(r12, r23, r31)
    x_leg = delta_to_star(x12, x23, x31)
    in_service = decode_leg_status(raw.stat.values)

    star_numbers = first_star_bus + np.arange(n)
    b1 = pos[0]
    star_bus = np.zeros(shape=(n, bus_cols), dtype=np.float64)
    star_bus[:, BUS_I] = star_numbers
    star_bus[:, BUS_TYPE] = np.where(in_service.any(axis=1), PQ, NONE)
    star_bus[:, VM] = np.nan_to_num(raw.vmstar.values.astype(np.float64), nan=1.)
    star_bus[:, VA] = np.nan_to_num(raw.anstar.values.astype(np.float64), nan=0.)
    for col in (BUS_AREA, ZONE, BASE_KV, VMAX, VMIN):
        star_bus[:, col] = bus[b1, col]

    branch = np.zeros(shape=(n, 3, branch_cols), dtype=np.float64)
    branch[:, :, ANGMIN] = -360.
    branch[:, :, ANGMAX] = 360.
    for w in range(3):
        winding = str(w + 1)
        leg = branch[:, w, :]
        leg[:, F_BUS] = buses[:, w]
        leg[:, T_BUS] = star_numbers
        leg[:, BR_R] = r_leg[w]
        leg[:, BR_X] = x_leg[w]
        leg[:, RATE_A] = raw["rata" + winding].values.astype(np.float64)
        leg[:, RATE_B] = raw["ratb" + winding].values.astype(np.float64)
        leg[:, RATE_C] = raw["ratc" + winding].values.astype(np.float64)
        leg[:, TAP] = winding_ratio(raw["windv" + winding].values, raw.cw.values, kv[w])
        leg[:, SHIFT] = raw["ang" + winding].values.astype(np.float64)
        leg[:, BR_STATUS] = in_service[:, w]
    logger.debug("split %d three-winding transformers at star buses %d..%d" % (
        n, star_numbers[0], star_numbers[-1]))
    return star_bus, branch.reshape(3 * n, branch_cols)
