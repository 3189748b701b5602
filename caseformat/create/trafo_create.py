# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from numpy import nan

from caseformat.auxiliary import RawNetwork
from caseformat.create._utils import _check_branch_buses, _get_index_with_check, _set_entries

logger = logging.getLogger(__name__)


def _winding_entries(winding: int, windv: float, nomv: float, ang: float, rata: float, ratb: float,
                     ratc: float) -> dict:
    return {f"windv{winding}": windv, f"nomv{winding}": nomv, f"ang{winding}": ang,
            f"rata{winding}": rata, f"ratb{winding}": ratb, f"ratc{winding}": ratc}


def create_transformer(
    net: RawNetwork,
    from_bus: int,
    to_bus: int,
    r1_2: float,
    x1_2: float,
    sbase1_2: float | None = None,
    windv1: float = 1.,
    windv2: float = 1.,
    nomv1: float = 0.,
    nomv2: float = 0.,
    ang1: float = 0.,
    rata1: float = 0.,
    ratb1: float = 0.,
    ratc1: float = 0.,
    cw: int = 1,
    cz: int = 1,
    cm: int = 1,
    mag1: float = 0.,
    mag2: float = 0.,
    stat: int = 1,
    ckt: str = "1",
    name: str = "",
    index: int | None = None,
) -> int:
    """
    Adds one two-winding transformer record in table net["transformer"].

    Parameters:
        net: the raw network in which the record is created
        from_bus: number of the winding 1 bus
        to_bus: number of the winding 2 bus
        r1_2, x1_2: winding 1-2 impedance. Interpretation depends on cz: system base p.u. (1),
            winding base p.u. (2) or load loss in W and impedance magnitude in p.u. (3)
        sbase1_2: winding MVA base, defaults to the system base
        windv1, windv2: winding ratios, p.u. of the bus base voltage (cw 1) or kV (cw 2)
        nomv1, nomv2: nominal winding voltages in kV, 0 for the bus base voltage
        ang1: phase shift angle in degree
        rata1, ratb1, ratc1: ratings in MVA
        cw: winding data code
        cz: impedance data code
        cm: magnetizing admittance code
        mag1, mag2: magnetizing admittance
        stat: 1 - in service, 0 - out of service
        ckt: circuit identifier
        name: name of the transformer
        index: force a specified row index if it is available

    Returns:
        the row index of the created transformer

    Example:
        >>> create_transformer(net, 1, 2, r1_2=750000., x1_2=0.16, sbase1_2=500., windv1=419.,
        ...                    windv2=21., nomv1=419., nomv2=21., cw=2, cz=3)
    """
    _check_branch_buses(net, "Transformer %s-%s" % (from_bus, to_bus), from_bus, to_bus)
    index = _get_index_with_check(net, "transformer", index)

    entries = {
        "i": from_bus, "j": to_bus, "k": 0, "ckt": ckt, "cw": cw, "cz": cz, "cm": cm, "mag1": mag1,
        "mag2": mag2, "name": name, "stat": stat, "r1_2": r1_2, "x1_2": x1_2,
        "sbase1_2": net.sbase if sbase1_2 is None else sbase1_2,
        "r2_3": nan, "x2_3": nan, "sbase2_3": nan, "r3_1": nan, "x3_1": nan, "sbase3_1": nan,
        "vmstar": nan, "anstar": nan,
        **_winding_entries(1, windv1, nomv1, ang1, rata1, ratb1, ratc1),
        **_winding_entries(2, windv2, nomv2, 0., nan, nan, nan),
        **_winding_entries(3, nan, nan, nan, nan, nan, nan),
    }
    _set_entries(net, "transformer", index, entries)
    return index


def create_transformer3w(
    net: RawNetwork,
    bus1: int,
    bus2: int,
    bus3: int,
    r1_2: float,
    x1_2: float,
    r2_3: float,
    x2_3: float,
    r3_1: float,
    x3_1: float,
    sbase1_2: float | None = None,
    sbase2_3: float | None = None,
    sbase3_1: float | None = None,
    windv: tuple = (1., 1., 1.),
    nomv: tuple = (0., 0., 0.),
    ang: tuple = (0., 0., 0.),
    rata: tuple = (0., 0., 0.),
    ratb: tuple = (0., 0., 0.),
    ratc: tuple = (0., 0., 0.),
    vmstar: float = 1.,
    anstar: float = 0.,
    cw: int = 1,
    cz: int = 1,
    cm: int = 1,
    mag1: float = 0.,
    mag2: float = 0.,
    stat: int = 1,
    ckt: str = "1",
    name: str = "",
    index: int | None = None,
) -> int:
    """
    Adds one three-winding transformer record in table net["transformer"].

    The impedances are the measured loop impedances between the winding pairs 1-2, 2-3 and 3-1,
    each on its own MVA base. Winding data (windv, nomv, ang, rata, ratb, ratc) are given as
    tuples for the windings 1, 2 and 3.

    Parameters:
        stat: 0 - all windings out, 1 - all windings in service, 2 - winding 2 out,
            3 - winding 3 out, 4 - winding 1 out

    Returns:
        the row index of the created transformer

    Example:
        >>> create_transformer3w(net, 1, 2, 3, 0., 0.1, 0., 0.08, 0., 0.06)
    """
    _check_branch_buses(net, "Transformer %s-%s-%s" % (bus1, bus2, bus3), bus1, bus2, bus3)
    if len({bus1, bus2, bus3}) != 3:
        raise UserWarning("A three-winding transformer needs three different buses")
    index = _get_index_with_check(net, "transformer", index)

    sbase = net.sbase
    entries = {
        "i": bus1, "j": bus2, "k": bus3, "ckt": ckt, "cw": cw, "cz": cz, "cm": cm, "mag1": mag1,
        "mag2": mag2, "name": name, "stat": stat,
        "r1_2": r1_2, "x1_2": x1_2, "sbase1_2": sbase if sbase1_2 is None else sbase1_2,
        "r2_3": r2_3, "x2_3": x2_3, "sbase2_3": sbase if sbase2_3 is None else sbase2_3,
        "r3_1": r3_1, "x3_1": x3_1, "sbase3_1": sbase if sbase3_1 is None else sbase3_1,
        "vmstar": vmstar, "anstar": anstar,
    }
    for w in range(3):
        entries.update(_winding_entries(w + 1, windv[w], nomv[w], ang[w], rata[w], ratb[w], ratc[w]))
    _set_entries(net, "transformer", index, entries)
    return index
