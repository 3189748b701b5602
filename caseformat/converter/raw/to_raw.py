# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np
import pandas as pd

from caseformat.auxiliary import DanglingReferenceError
from caseformat.create.network_create import create_empty_raw_network
from caseformat.idx_brch import F_BUS, T_BUS, BR_R, BR_X, BR_B, RATE_A, RATE_B, RATE_C, TAP, SHIFT, \
    BR_STATUS
from caseformat.idx_bus import BUS_I, BUS_TYPE, PD, QD, GS, BS, BUS_AREA, VM, VA, BASE_KV, ZONE, \
    VMAX, VMIN
from caseformat.idx_dcline import F_BUS as DC_F_BUS, T_BUS as DC_T_BUS, BR_STATUS as DC_STATUS, \
    PF as DC_PF
from caseformat.idx_gen import GEN_BUS, PG, QG, QMAX, QMIN, VG, MBASE, GEN_STATUS, PMAX, PMIN, isload

logger = logging.getLogger(__name__)


def _lookup_pos(bus_lookup, numbers, element):
    pos = np.empty(len(numbers), dtype=np.int64)
    for n, number in enumerate(numbers):
        number = int(number)
        if number not in bus_lookup:
            raise DanglingReferenceError(element, number)
        pos[n] = bus_lookup[number]
    return pos


def _fill_table(net, table, data):
    structure = net[table]
    net[table] = pd.DataFrame(data, columns=structure.columns).astype(structure.dtypes.to_dict())


def _sequential_ids(keys, start=None):
    """
    Numbers the occurrences of every key, starting at start[key] + 1 (or 1), as strings.
    """
    counts = pd.Series(keys).groupby(keys).cumcount().values + 1
    if start is not None:
        counts = counts + start
    return counts.astype(str).astype(object)


def _circuit_ids(*pairs):
    """
    Assigns circuit identifiers "1", "2", ... to every occurrence of an unordered bus pair.
    The pairs of all given arrays share one counter per bus pair, in the order of the arrays.
    """
    lengths = [len(p) for p in pairs]
    all_pairs = np.concatenate([np.asarray(p, dtype=np.int64).reshape(-1, 2) for p in pairs])
    if not len(all_pairs):
        return [np.array([], dtype=object) for _ in pairs]
    key = pd.MultiIndex.from_arrays([all_pairs.min(axis=1), all_pairs.max(axis=1)])
    ckt = pd.Series(0, index=key).groupby(level=[0, 1]).cumcount().values + 1
    return np.split(ckt.astype(str).astype(object), np.cumsum(lengths)[:-1])


def to_raw(case, bus, gen, branch, dcline, bus_lookup=None):
    """
    Converts a normalized case back into a raw network.

    Every case bus becomes a raw bus. The demand of a bus becomes a load with id "1" and its
    shunt a fixed shunt with id "1". Dispatchable loads (PMIN < 0 and PMAX == 0) become further
    loads of their bus, all other generators become generator records with ids "1", "2", ...
    per bus. Branches with TAP == 0 and SHIFT == 0 become lines, all others two-winding
    transformers on the system base. Parallel lines, transformers and dc lines between the
    same two buses get the circuit ids "1", "2", ... in this order.

    INPUT:
        **case** (Case) - case metadata

        **bus**, **gen**, **branch**, **dcline** (ndarray) - the case matrices

    OPTIONAL:
        **bus_lookup** (dict, None) - bus number -> row of the bus matrix. If None, it is
        created from the bus matrix.

    OUTPUT:
        **net** (RawNetwork) - the raw network

    EXAMPLE:
        net = to_raw(*from_raw(net))
    """
    if bus_lookup is None:
        bus_lookup = {int(b): n for n, b in enumerate(bus[:, BUS_I])}
    f_hz = case.get("f_hz")
    net = create_empty_raw_network(name=case.get("name", ""), sbase=case.baseMVA,
                                   basfrq=np.nan if f_hz is None else f_hz, rev=33)
    base_mva = case.baseMVA

    logger.info("Converting case '%s' to a raw network" % net.name)
    bus_numbers = bus[:, BUS_I].astype(np.int64)
    _fill_table(net, "bus", {
        "i": bus_numbers, "name": "", "basekv": bus[:, BASE_KV],
        "ide": bus[:, BUS_TYPE].astype(np.int64), "area": bus[:, BUS_AREA].astype(np.int64),
        "zone": bus[:, ZONE].astype(np.int64), "owner": 1, "vm": bus[:, VM], "va": bus[:, VA],
        "nvhi": bus[:, VMAX], "nvlo": bus[:, VMIN], "evhi": bus[:, VMAX], "evlo": bus[:, VMIN],
    })

    # loads
    has_load = (bus[:, PD] != 0) | (bus[:, QD] != 0)
    dl = gen[isload(gen)]
    dl_pos = _lookup_pos(bus_lookup, dl[:, GEN_BUS], "gen")
    dl_buses = dl[:, GEN_BUS].astype(np.int64)
    load_start = pd.Series(has_load.astype(np.int64), index=bus_numbers).reindex(dl_buses).values
    loads = {
        "i": np.concatenate([bus_numbers[has_load], dl_buses]),
        "id": np.concatenate([np.full(has_load.sum(), "1", dtype=object),
                              _sequential_ids(dl_buses, load_start)]),
        "status": np.concatenate([np.ones(has_load.sum(), dtype=np.int64),
                                  dl[:, GEN_STATUS].astype(np.int64)]),
        "area": np.concatenate([bus[has_load, BUS_AREA], bus[dl_pos, BUS_AREA]]).astype(np.int64),
        "zone": np.concatenate([bus[has_load, ZONE], bus[dl_pos, ZONE]]).astype(np.int64),
        "pl": np.concatenate([bus[has_load, PD], -dl[:, PMIN]]),
        "ql": np.concatenate([bus[has_load, QD], -dl[:, QMIN]]),
        "ip": 0., "iq": 0., "yp": 0., "yq": 0., "owner": 1,
    }
    _fill_table(net, "load", loads)

    # fixed shunts
    has_shunt = (bus[:, GS] != 0) | (bus[:, BS] != 0)
    _fill_table(net, "fixed_shunt", {
        "i": bus_numbers[has_shunt], "id": "1", "status": 1, "gl": bus[has_shunt, GS],
        "bl": bus[has_shunt, BS],
    })

    # generators
    g = gen[~isload(gen)]
    _lookup_pos(bus_lookup, g[:, GEN_BUS], "gen")
    g_buses = g[:, GEN_BUS].astype(np.int64)
    _fill_table(net, "generator", {
        "i": g_buses, "id": _sequential_ids(g_buses), "pg": g[:, PG], "qg": g[:, QG],
        "qt": g[:, QMAX], "qb": g[:, QMIN], "vs": g[:, VG], "ireg": 0, "mbase": g[:, MBASE],
        "stat": g[:, GEN_STATUS].astype(np.int64), "pt": g[:, PMAX], "pb": g[:, PMIN],
    })

    # branches and transformers
    _lookup_pos(bus_lookup, branch[:, F_BUS], "branch")
    _lookup_pos(bus_lookup, branch[:, T_BUS], "branch")
    dc_f = _lookup_pos(bus_lookup, dcline[:, DC_F_BUS], "dcline")
    dc_t = _lookup_pos(bus_lookup, dcline[:, DC_T_BUS], "dcline")
    is_line = (branch[:, TAP] == 0) & (branch[:, SHIFT] == 0)
    line, trafo = branch[is_line], branch[~is_line]
    line_ckt, trafo_ckt, dc_ckt = _circuit_ids(line[:, [F_BUS, T_BUS]], trafo[:, [F_BUS, T_BUS]],
                                               dcline[:, [DC_F_BUS, DC_T_BUS]])

    _fill_table(net, "branch", {
        "i": line[:, F_BUS].astype(np.int64), "j": line[:, T_BUS].astype(np.int64), "ckt": line_ckt,
        "r": line[:, BR_R], "x": line[:, BR_X], "b": line[:, BR_B], "rate_a": line[:, RATE_A],
        "rate_b": line[:, RATE_B], "rate_c": line[:, RATE_C], "gi": 0., "bi": 0., "gj": 0.,
        "bj": 0., "st": line[:, BR_STATUS].astype(np.int64), "len": 0.,
    })

    n_trafo = len(trafo)
    _fill_table(net, "transformer", {
        "i": trafo[:, F_BUS].astype(np.int64), "j": trafo[:, T_BUS].astype(np.int64), "k": 0,
        "ckt": trafo_ckt, "cw": 1, "cz": 1, "cm": 1, "mag1": 0., "mag2": 0., "name": "",
        "stat": trafo[:, BR_STATUS].astype(np.int64), "r1_2": trafo[:, BR_R], "x1_2": trafo[:, BR_X],
        "sbase1_2": base_mva, "r2_3": np.nan, "x2_3": np.nan, "sbase2_3": np.nan, "r3_1": np.nan,
        "x3_1": np.nan, "sbase3_1": np.nan, "vmstar": np.nan, "anstar": np.nan,
        "windv1": np.where(trafo[:, TAP] == 0, 1., trafo[:, TAP]), "nomv1": 0.,
        "ang1": trafo[:, SHIFT], "rata1": trafo[:, RATE_A], "ratb1": trafo[:, RATE_B],
        "ratc1": trafo[:, RATE_C], "windv2": np.ones(n_trafo), "nomv2": 0., "ang2": 0.,
        "rata2": np.nan, "ratb2": np.nan, "ratc2": np.nan, "windv3": np.nan, "nomv3": np.nan,
        "ang3": np.nan, "rata3": np.nan, "ratb3": np.nan, "ratc3": np.nan,
    })
    if np.any(trafo[:, BR_B] != 0):
        logger.warning("the charging susceptance of %d transformers is not part of the raw "
                       "transformer records and is dropped" % np.sum(trafo[:, BR_B] != 0))

    # dc lines
    in_service = dcline[:, DC_STATUS] != 0
    _fill_table(net, "two_terminal_dc", {
        "name": np.array(["DCLINE %d" % (n + 1) for n in range(len(dcline))], dtype=object),
        "mdc": in_service.astype(np.int64), "rdc": 0., "setvl": dcline[:, DC_PF], "vschd": 0.,
        "vcmod": 0., "ipr": dcline[:, DC_F_BUS].astype(np.int64), "alfmx": 0., "alfmn": 0.,
        "ebasr": bus[dc_f, BASE_KV], "ipi": dcline[:, DC_T_BUS].astype(np.int64), "gammx": 0.,
        "gammn": 0., "ebasi": bus[dc_t, BASE_KV], "ckt": dc_ckt,
    })
    return net
