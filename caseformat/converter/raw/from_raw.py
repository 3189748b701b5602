# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging
import multiprocessing as mp
import time
from functools import partial

import numpy as np
import pandas as pd

from caseformat.auxiliary import Case, RawNetwork
from caseformat.converter.raw.build_branch import _build_line_branches, _build_trafo2w_branches, \
    _build_trafo3w, _first_star_bus
from caseformat.converter.raw.build_bus import _add_branch_shunts, _add_loads, _add_shunts, _build_bus
from caseformat.converter.raw.build_dcline import _build_dclines
from caseformat.converter.raw.build_gen import _build_gen
from caseformat.create.network_create import create_empty_raw_network
from caseformat.idx_bus import BUS_I
from caseformat.network_schema.validation import validate_raw_network
from caseformat.validate import validate_case

logger = logging.getLogger(__name__)


def _complete_tables(net):
    """
    Returns a shallow copy of the network in which every record table exists. Missing tables
    are added empty.
    """
    empty = create_empty_raw_network()
    completed = RawNetwork(dict(net))
    for key, value in empty.items():
        if isinstance(value, pd.DataFrame) and key not in completed:
            completed[key] = value
    return completed


def from_raw(net, validate=False):
    """
    Converts a raw network into a normalized case on the system MVA base.

    The conversion runs buses first, then adds loads, fixed and switched shunts and the end
    shunts of lines to the bus records, then creates generators, lines, two-winding and
    three-winding transformers and finally two-terminal dc lines. Every three-winding
    transformer adds a star bus, numbered upwards from the smallest power of ten that is
    greater than the largest raw bus number. The star buses follow the raw buses, the
    branches are ordered lines, two-winding transformers, three-winding transformer legs.

    The raw network is not changed. If any record cannot be converted, an error derived from
    ConversionError is raised and no case is returned.

    INPUT:
        **net** (RawNetwork) - the raw network

    OPTIONAL:
        **validate** (bool, False) - validate the record tables against their schemas before
        the conversion

    OUTPUT:
        **case** (Case) - case metadata

        **bus**, **gen**, **branch**, **dcline** (ndarray) - the case matrices, see idx_bus,
        idx_gen, idx_brch and idx_dcline

    EXAMPLE:
        case, bus, gen, branch, dcline = from_raw(net)
    """
    t0 = time.time()
    net = _complete_tables(net)
    if validate:
        validate_raw_network(net)

    base_mva = float(net.sbase)
    basfrq = net.get("basfrq", np.nan)
    case = Case(name=net.get("name") or "", baseMVA=base_mva,
                f_hz=None if basfrq is None or pd.isnull(basfrq) else float(basfrq))

    bus, bus_lookup = _build_bus(net)
    _add_loads(net, bus, bus_lookup)
    _add_shunts(net, bus, bus_lookup)
    _add_branch_shunts(net, bus, bus_lookup, base_mva)

    gen = _build_gen(net, bus_lookup)

    lines = _build_line_branches(net, bus_lookup)
    trafos = _build_trafo2w_branches(net, bus, bus_lookup, base_mva)
    first_star_bus = _first_star_bus(bus[:, BUS_I].max() if len(bus) else 0)
    star_bus, trafo3w_legs = _build_trafo3w(net, bus, bus_lookup, base_mva, first_star_bus)

    dcline = _build_dclines(net, bus, bus_lookup)

    bus = np.concatenate([bus, star_bus])
    branch = np.concatenate([lines, trafos, trafo3w_legs])
    validate_case(bus, gen, branch, dcline)

    logger.info("Converted raw network '%s' in %.3f seconds: %d buses (%d star buses), %d gens, "
                "%d branches, %d dc lines" % (case.name, time.time() - t0, len(bus), len(star_bus),
                                              len(gen), len(branch), len(dcline)))
    return case, bus, gen, branch, dcline


def from_raw_many(nets, n_procs=1, validate=False):
    """
    Converts several independent raw networks. With n_procs > 1 the conversions run in a pool
    of worker processes. The results are returned in the order of the networks.

    INPUT:
        **nets** (iterable of RawNetwork) - the raw networks

    OPTIONAL:
        **n_procs** (int, 1) - number of worker processes. If None, all available cores are
        used. If 1, the networks are converted sequentially.

        **validate** (bool, False) - see from_raw

    OUTPUT:
        **results** (list) - one (case, bus, gen, branch, dcline) tuple per network
    """
    nets = list(nets)
    if n_procs is None:
        n_procs = mp.cpu_count()
    worker_func = partial(from_raw, validate=validate)
    if n_procs > 1 and len(nets) > 1:
        logger.info("Converting %d raw networks with %d processes" % (len(nets), n_procs))
        with mp.Pool(processes=min(n_procs, len(nets))) as pool:
            return pool.map(worker_func, nets)
    return [worker_func(net) for net in nets]
