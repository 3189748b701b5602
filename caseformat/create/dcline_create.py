# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from caseformat.auxiliary import RawNetwork
from caseformat.create._utils import _bus_value, _check_branch_buses, _get_index_with_check, _set_entries

logger = logging.getLogger(__name__)


def create_dcline(
    net: RawNetwork,
    rectifier_bus: int,
    inverter_bus: int,
    setvl: float,
    mdc: int = 1,
    vschd: float = 500.,
    rdc: float = 0.,
    vcmod: float = 0.,
    alfmx: float = 30.,
    alfmn: float = 5.,
    gammx: float = 30.,
    gammn: float = 15.,
    ebasr: float | None = None,
    ebasi: float | None = None,
    name: str | None = None,
    ckt: str = "1",
    index: int | None = None,
) -> int:
    """
    Adds one two-terminal dc line record in table net["two_terminal_dc"].

    Parameters:
        net: the raw network in which the record is created
        rectifier_bus: number of the rectifier ac bus
        inverter_bus: number of the inverter ac bus
        setvl: demand setpoint, MW for mdc 1 and A for mdc 2
        mdc: control mode, 0 - blocked, 1 - power, 2 - current
        vschd: scheduled dc voltage in kV
        rdc: dc line resistance in ohm
        vcmod: mode switch dc voltage in kV
        alfmx, alfmn: rectifier firing angle limits in degree
        gammx, gammn: inverter margin angle limits in degree
        ebasr, ebasi: converter primary base ac voltages in kV, default to the bus base voltage
        name: name of the dc line, defaults to "DCLINE <n>"
        ckt: circuit identifier
        index: force a specified row index if it is available

    Returns:
        the row index of the created dc line

    Example:
        >>> create_dcline(net, 1, 2, setvl=100., alfmx=30., alfmn=5., gammx=30., gammn=15.)
    """
    _check_branch_buses(net, "DC line %s-%s" % (rectifier_bus, inverter_bus), rectifier_bus, inverter_bus)
    index = _get_index_with_check(net, "two_terminal_dc", index)

    entries = {
        "name": "DCLINE %d" % (index + 1) if name is None else name,
        "mdc": mdc, "rdc": rdc, "setvl": setvl, "vschd": vschd, "vcmod": vcmod,
        "ipr": rectifier_bus, "alfmx": alfmx, "alfmn": alfmn,
        "ebasr": _bus_value(net, rectifier_bus, "basekv") if ebasr is None else ebasr,
        "ipi": inverter_bus, "gammx": gammx, "gammn": gammn,
        "ebasi": _bus_value(net, inverter_bus, "basekv") if ebasi is None else ebasi,
        "ckt": ckt,
    }
    _set_entries(net, "two_terminal_dc", index, entries)
    return index
