# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from caseformat.auxiliary import RawNetwork
from caseformat.create._utils import _check_bus, _get_index_with_check, _set_entries

logger = logging.getLogger(__name__)


def create_generator(
    net: RawNetwork,
    bus: int,
    pg: float = 0.,
    qg: float = 0.,
    qt: float = 9999.,
    qb: float = -9999.,
    vs: float = 1.,
    id: str = "1",
    ireg: int = 0,
    mbase: float | None = None,
    stat: int = 1,
    pt: float = 9999.,
    pb: float = -9999.,
    index: int | None = None,
) -> int:
    """
    Adds one generator record in table net["generator"].

    Parameters:
        net: the raw network in which the record is created
        bus: number of the bus the generator is connected to
        pg, qg: active and reactive power output in MW / MVAr
        qt, qb: maximum and minimum reactive power output in MVAr
        vs: regulated voltage setpoint in p.u.
        id: machine identifier, unique per bus
        ireg: remote regulated bus number, 0 for the terminal bus
        mbase: machine MVA base, defaults to the system base
        stat: 1 - in service, 0 - out of service
        pt, pb: maximum and minimum active power output in MW
        index: force a specified row index if it is available

    Returns:
        the row index of the created generator

    Example:
        >>> create_generator(net, 101, pg=100., vs=1.02)
    """
    _check_bus(net, bus)
    index = _get_index_with_check(net, "generator", index)

    entries = {
        "i": bus, "id": id, "pg": pg, "qg": qg, "qt": qt, "qb": qb, "vs": vs, "ireg": ireg,
        "mbase": net.sbase if mbase is None else mbase, "stat": stat, "pt": pt, "pb": pb,
    }
    _set_entries(net, "generator", index, entries)
    return index
