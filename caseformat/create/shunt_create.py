# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from caseformat.auxiliary import RawNetwork
from caseformat.create._utils import _check_bus, _get_index_with_check, _set_entries

logger = logging.getLogger(__name__)


def create_fixed_shunt(net: RawNetwork, bus: int, gl: float = 0., bl: float = 0., id: str = "1",
                       status: int = 1, index: int | None = None) -> int:
    """
    Adds one fixed shunt record in table net["fixed_shunt"].

    Parameters:
        net: the raw network in which the record is created
        bus: number of the bus the shunt is connected to
        gl: active component of the shunt admittance in MW at 1 p.u. voltage
        bl: reactive component of the shunt admittance in MVAr at 1 p.u. voltage
        id: shunt identifier, unique per bus
        status: 1 - in service, 0 - out of service
        index: force a specified row index if it is available

    Returns:
        the row index of the created shunt
    """
    _check_bus(net, bus)
    index = _get_index_with_check(net, "fixed_shunt", index)
    _set_entries(net, "fixed_shunt", index, {"i": bus, "id": id, "status": status, "gl": gl, "bl": bl})
    return index


def create_switched_shunt(net: RawNetwork, bus: int, binit: float, stat: int = 1, modsw: int = 1,
                          vswhi: float = 1., vswlo: float = 1., index: int | None = None) -> int:
    """
    Adds one switched shunt record in table net["switched_shunt"].

    Only the presently switched susceptance binit (MVAr at 1 p.u. voltage) is part of the
    normalized case, the switching blocks are not modelled.

    Returns:
        the row index of the created shunt
    """
    _check_bus(net, bus)
    index = _get_index_with_check(net, "switched_shunt", index)
    entries = {"i": bus, "modsw": modsw, "stat": stat, "vswhi": vswhi, "vswlo": vswlo, "binit": binit}
    _set_entries(net, "switched_shunt", index, entries)
    return index
