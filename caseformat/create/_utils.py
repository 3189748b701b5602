# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

from caseformat.auxiliary import RawNetwork, get_free_id, _preserve_dtypes

logger = logging.getLogger(__name__)


def _get_index_with_check(net: RawNetwork, table: str, index: int | None, name: str | None = None) -> int:
    if name is None:
        name = table
    if index is None:
        index = get_free_id(net[table])
    if index in net[table].index:
        raise UserWarning(f"A {name} with the id {index} already exists")
    return index


def _check_bus(net: RawNetwork, bus: int):
    if "bus" not in net:
        raise UserWarning("Node table bus does not exist")
    if bus not in net.bus.i.values:
        raise UserWarning("Cannot attach to bus %s, bus %s does not exist" % (bus, bus))


def _check_branch_buses(net: RawNetwork, element_name: str, *buses):
    missing_buses = set(abs(b) for b in buses) - set(net.bus.i.values)
    if len(missing_buses) > 0:
        raise UserWarning(f"{element_name} tries to attach to non-existing bus(es) {missing_buses}")


def _bus_value(net: RawNetwork, bus: int, column: str):
    return net.bus[column].values[net.bus.i.values == abs(bus)][0]


def _set_entries(net: RawNetwork, table: str, index: int, entries: dict, preserve_dtypes: bool = True):
    dtypes = net[table].dtypes if preserve_dtypes else None

    for col, val in entries.items():
        net[table].at[index, col] = val

    if preserve_dtypes:
        _preserve_dtypes(net[table], dtypes)
