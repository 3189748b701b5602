# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from caseformat.auxiliary import RawNetwork
from caseformat.create._utils import _get_index_with_check, _set_entries

logger = logging.getLogger(__name__)


def create_bus(
    net: RawNetwork,
    i: int,
    basekv: float,
    name: str = "",
    ide: int = 1,
    area: int = 1,
    zone: int = 1,
    owner: int = 1,
    vm: float = 1.,
    va: float = 0.,
    nvhi: float = 1.1,
    nvlo: float = 0.9,
    evhi: float = 1.1,
    evlo: float = 0.9,
    index: int | None = None,
) -> int:
    """
    Adds one bus record in table net["bus"].

    Parameters:
        net: the raw network in which the record is created
        i: bus number, unique in the network
        basekv: base voltage of the bus in kV
        name: name of the bus
        ide: bus type code (1 - PQ, 2 - PV, 3 - reference, 4 - isolated)
        area: area number
        zone: loss zone number
        owner: owner number
        vm: voltage magnitude in p.u.
        va: voltage angle in degree
        nvhi, nvlo: normal voltage magnitude limits in p.u.
        evhi, evlo: emergency voltage magnitude limits in p.u.
        index: force a specified row index if it is available

    Returns:
        the row index of the created bus

    Example:
        >>> create_bus(net, 101, 380., ide=3)
    """
    if i in net.bus.i.values:
        raise UserWarning(f"A bus with the number {i} already exists")
    index = _get_index_with_check(net, "bus", index)

    entries = {
        "i": i, "name": name, "basekv": basekv, "ide": ide, "area": area, "zone": zone,
        "owner": owner, "vm": vm, "va": va, "nvhi": nvhi, "nvlo": nvlo, "evhi": evhi, "evlo": evlo,
    }
    _set_entries(net, "bus", index, entries)
    return index
