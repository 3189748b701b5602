# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np

from caseformat.auxiliary import CaseValidationError, DanglingReferenceError, DuplicateBusError
from caseformat.idx_brch import F_BUS, T_BUS
from caseformat.idx_bus import BUS_I
from caseformat.idx_dcline import F_BUS as DC_F_BUS, T_BUS as DC_T_BUS
from caseformat.idx_gen import GEN_BUS, QMAX, QMIN, PMAX, PMIN

logger = logging.getLogger(__name__)


def _check_existing(numbers, bus_numbers, element):
    missing = ~np.isin(numbers, bus_numbers)
    if np.any(missing):
        raise DanglingReferenceError(element, numbers[np.flatnonzero(missing)[0]])


def validate_bus_numbers(bus, gen=None, branch=None, dcline=None):
    """
    Checks that bus numbers are unique and that every gen, branch and dcline connects to
    existing buses.

    INPUT:
        **bus** (ndarray) - bus matrix

    OPTIONAL:
        **gen**, **branch**, **dcline** (ndarray, None) - matrices to check against the buses

    Raises DuplicateBusError or DanglingReferenceError.
    """
    bus_numbers = bus[:, BUS_I]
    unique, counts = np.unique(bus_numbers, return_counts=True)
    if np.any(counts > 1):
        raise DuplicateBusError(unique[counts > 1][0])

    if gen is not None:
        _check_existing(gen[:, GEN_BUS], bus_numbers, "gen")
    if branch is not None:
        _check_existing(branch[:, F_BUS], bus_numbers, "branch")
        _check_existing(branch[:, T_BUS], bus_numbers, "branch")
        loops = branch[:, F_BUS] == branch[:, T_BUS]
        if np.any(loops):
            first = np.flatnonzero(loops)[0]
            raise CaseValidationError("branch %d connects bus %d to itself" % (
                first, branch[first, F_BUS]), element="branch", index=first)
    if dcline is not None:
        _check_existing(dcline[:, DC_F_BUS], bus_numbers, "dcline")
        _check_existing(dcline[:, DC_T_BUS], bus_numbers, "dcline")


def validate_gen(gen):
    """
    Checks that the reactive and active power limits of all generators are ordered,
    QMAX >= QMIN and PMAX >= PMIN.
    """
    for upper, lower, name in ((QMAX, QMIN, "qmax"), (PMAX, PMIN, "pmax")):
        invalid = gen[:, upper] < gen[:, lower]
        if np.any(invalid):
            first = np.flatnonzero(invalid)[0]
            raise CaseValidationError("gen %d: %s must be >= %s (%s < %s)" % (
                first, name, name.replace("max", "min"), gen[first, upper], gen[first, lower]),
                element="gen", index=first)


def validate_case(bus, gen, branch, dcline):
    """
    Checks the invariants of a normalized case, see validate_bus_numbers and validate_gen.
    """
    validate_bus_numbers(bus, gen, branch, dcline)
    validate_gen(gen)
