# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from caseformat.auxiliary import RawNetwork
from caseformat.create._utils import _check_branch_buses, _get_index_with_check, _set_entries

logger = logging.getLogger(__name__)


def create_branch(
    net: RawNetwork,
    from_bus: int,
    to_bus: int,
    r: float,
    x: float,
    b: float = 0.,
    ckt: str = "1",
    rate_a: float = 0.,
    rate_b: float = 0.,
    rate_c: float = 0.,
    gi: float = 0.,
    bi: float = 0.,
    gj: float = 0.,
    bj: float = 0.,
    st: int = 1,
    length: float = 0.,
    index: int | None = None,
) -> int:
    """
    Adds one non-transformer branch record in table net["branch"].

    Impedances of raw branch records are given on the system base.

    Parameters:
        net: the raw network in which the record is created
        from_bus: number of the from bus
        to_bus: number of the to bus, a negative number marks the metered end
        r, x: series resistance and reactance in p.u.
        b: total charging susceptance in p.u.
        ckt: circuit identifier
        rate_a, rate_b, rate_c: ratings in MVA
        gi, bi: shunt admittance at the from end in p.u.
        gj, bj: shunt admittance at the to end in p.u.
        st: 1 - in service, 0 - out of service
        length: line length
        index: force a specified row index if it is available

    Returns:
        the row index of the created branch

    Example:
        >>> create_branch(net, 101, 102, r=0.01, x=0.1, b=0.02)
    """
    _check_branch_buses(net, "Branch %s-%s" % (from_bus, to_bus), from_bus, to_bus)
    if abs(to_bus) == from_bus:
        raise UserWarning("Branch from bus %s must not connect to itself" % from_bus)
    index = _get_index_with_check(net, "branch", index)

    entries = {
        "i": from_bus, "j": to_bus, "ckt": ckt, "r": r, "x": x, "b": b, "rate_a": rate_a,
        "rate_b": rate_b, "rate_c": rate_c, "gi": gi, "bi": bi, "gj": gj, "bj": bj, "st": st,
        "len": length,
    }
    _set_entries(net, "branch", index, entries)
    return index
