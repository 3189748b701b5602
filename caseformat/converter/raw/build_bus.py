# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np

from caseformat.auxiliary import ConversionError, DanglingReferenceError, DuplicateBusError
from caseformat.converter.raw.codes import BusTypeCode, check_codes
from caseformat.idx_bus import BUS_I, BUS_TYPE, PD, QD, GS, BS, BUS_AREA, VM, VA, BASE_KV, ZONE, \
    VMAX, VMIN, bus_cols

logger = logging.getLogger(__name__)


def _get_bus_pos(bus_lookup, numbers, element):
    """
    Returns the row positions of the given raw bus numbers in the bus matrix. Raises a
    DanglingReferenceError for the first number that is not a bus of the network.
    """
    numbers = np.asarray(numbers, dtype=np.int64)
    pos = np.full(len(numbers), -1, dtype=np.int64)
    known = (numbers >= 0) & (numbers < len(bus_lookup))
    pos[known] = bus_lookup[numbers[known]]
    missing = pos < 0
    if np.any(missing):
        raise DanglingReferenceError(element, numbers[np.flatnonzero(missing)[0]])
    return pos


def _build_bus(net):
    """
    Creates the bus matrix with one row per raw bus, seeded from the bus type, area, zone,
    voltage and limit fields of the raw bus records, and the lookup from bus number to row.

    INPUT:
        **net** (RawNetwork) - the raw network

    OUTPUT:
        **bus** (ndarray) - bus matrix with zero demand and shunts

        **bus_lookup** (ndarray) - bus_lookup[number] is the row of the bus, -1 for unknown
        numbers
    """
    raw = net.bus
    numbers = raw.i.values.astype(np.int64)
    if np.any(numbers <= 0):
        raise ConversionError("bus numbers must be positive", element="bus",
                              buses=numbers[numbers <= 0][:1])
    unique, counts = np.unique(numbers, return_counts=True)
    if np.any(counts > 1):
        raise DuplicateBusError(unique[counts > 1][0])
    check_codes(raw.ide.values, BusTypeCode, "bus", "ide", numbers[:, None])

    bus = np.zeros(shape=(len(raw), bus_cols), dtype=np.float64)
    bus[:, BUS_I] = numbers
    bus[:, BUS_TYPE] = raw.ide.values
    bus[:, BUS_AREA] = raw.area.values
    bus[:, ZONE] = raw.zone.values
    bus[:, VM] = raw.vm.values
    bus[:, VA] = raw.va.values
    bus[:, BASE_KV] = raw.basekv.values
    bus[:, VMAX] = np.nan_to_num(raw.nvhi.values.astype(np.float64), nan=np.inf)
    bus[:, VMIN] = np.nan_to_num(raw.nvlo.values.astype(np.float64), nan=-np.inf)

    n_zero_kv = np.sum(bus[:, BASE_KV] <= 0)
    if n_zero_kv:
        logger.warning("%d buses have no base voltage" % n_zero_kv)

    bus_lookup = -np.ones(numbers.max() + 1 if len(numbers) else 1, dtype=np.int64)
    bus_lookup[numbers] = np.arange(len(numbers))
    return bus, bus_lookup


def _add_loads(net, bus, bus_lookup):
    """
    Adds the demand of all in service loads to PD and QD of their buses. The constant current
    parts scale with the present voltage magnitude of the bus, the constant admittance parts
    with its square. A positive yq is a capacitive admittance load and lowers QD.
    """
    load = net.load
    if not len(load):
        return
    pos = _get_bus_pos(bus_lookup, load.i.values, "load")
    in_service = load.status.values != 0
    pos = pos[in_service]
    vm = bus[pos, VM]
    p = load.pl.values[in_service] + load.ip.values[in_service] * vm + load.yp.values[in_service] * vm ** 2
    q = load.ql.values[in_service] + load.iq.values[in_service] * vm - load.yq.values[in_service] * vm ** 2
    bus[:, PD] += np.bincount(pos, weights=p, minlength=len(bus))
    bus[:, QD] += np.bincount(pos, weights=q, minlength=len(bus))
    logger.debug("added %d of %d loads to the bus demand" % (in_service.sum(), len(load)))


def _add_shunts(net, bus, bus_lookup):
    """
    Adds in service fixed shunts to GS and BS and in service switched shunts, with their
    presently switched susceptance binit, to BS.
    """
    fixed = net.fixed_shunt
    if len(fixed):
        pos = _get_bus_pos(bus_lookup, fixed.i.values, "fixed_shunt")
        in_service = fixed.status.values != 0
        bus[:, GS] += np.bincount(pos[in_service], weights=fixed.gl.values[in_service],
                                  minlength=len(bus))
        bus[:, BS] += np.bincount(pos[in_service], weights=fixed.bl.values[in_service],
                                  minlength=len(bus))

    switched = net.switched_shunt
    if len(switched):
        pos = _get_bus_pos(bus_lookup, switched.i.values, "switched_shunt")
        in_service = switched.stat.values != 0
        bus[:, BS] += np.bincount(pos[in_service], weights=switched.binit.values[in_service],
                                  minlength=len(bus))


def _add_branch_shunts(net, bus, bus_lookup, base_mva):
    """
    Adds the end shunt admittances (gi, bi) and (gj, bj) of in service lines to the from and to
    bus. They are given in p.u. and added in MW / MVAr at 1 p.u. voltage.
    """
    branch = net.branch
    if not len(branch):
        return
    f = _get_bus_pos(bus_lookup, branch.i.values, "branch")
    t = _get_bus_pos(bus_lookup, np.abs(branch.j.values), "branch")
    in_service = branch.st.values != 0
    f, t = f[in_service], t[in_service]
    for col, from_values, to_values in ((GS, branch.gi.values, branch.gj.values),
                                        (BS, branch.bi.values, branch.bj.values)):
        bus[:, col] += np.bincount(f, weights=from_values[in_service] * base_mva, minlength=len(bus))
        bus[:, col] += np.bincount(t, weights=to_values[in_service] * base_mva, minlength=len(bus))
