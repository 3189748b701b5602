# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from caseformat.auxiliary import RawNetwork
from caseformat.create._utils import _bus_value, _check_bus, _get_index_with_check, _set_entries

logger = logging.getLogger(__name__)


def create_load(
    net: RawNetwork,
    bus: int,
    pl: float = 0.,
    ql: float = 0.,
    id: str = "1",
    status: int = 1,
    ip: float = 0.,
    iq: float = 0.,
    yp: float = 0.,
    yq: float = 0.,
    area: int | None = None,
    zone: int | None = None,
    owner: int = 1,
    index: int | None = None,
) -> int:
    """
    Adds one load record in table net["load"].

    The demand of a load is the sum of a constant power part (pl, ql), a constant current part
    (ip, iq) which scales with the bus voltage magnitude and a constant admittance part (yp, yq)
    which scales with the squared voltage magnitude. A positive yq is a capacitive admittance
    load.

    Parameters:
        net: the raw network in which the record is created
        bus: number of the bus the load is connected to
        pl, ql: constant power demand in MW / MVAr
        id: load identifier, unique per bus
        status: 1 - in service, 0 - out of service
        ip, iq: constant current demand in MW / MVAr at 1 p.u. voltage
        yp, yq: constant admittance demand in MW / MVAr at 1 p.u. voltage
        area, zone: area and zone numbers, default to the ones of the bus
        owner: owner number
        index: force a specified row index if it is available

    Returns:
        the row index of the created load

    Example:
        >>> create_load(net, 101, pl=10., ql=2.)
    """
    _check_bus(net, bus)
    index = _get_index_with_check(net, "load", index)

    entries = {
        "i": bus, "id": id, "status": status,
        "area": _bus_value(net, bus, "area") if area is None else area,
        "zone": _bus_value(net, bus, "zone") if zone is None else zone,
        "pl": pl, "ql": ql, "ip": ip, "iq": iq, "yp": yp, "yq": yq, "owner": owner,
    }
    _set_entries(net, "load", index, entries)
    return index
