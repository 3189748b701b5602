# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np
import pytest

import caseformat as cf
from caseformat.auxiliary import CaseValidationError, DanglingReferenceError, DuplicateBusError
from caseformat.idx_brch import F_BUS, T_BUS
from caseformat.idx_bus import BUS_I
from caseformat.idx_dcline import T_BUS as DC_T_BUS
from caseformat.idx_gen import GEN_BUS, QMAX, QMIN, PMAX, PMIN
from caseformat.test.conftest import small_raw_net

logger = logging.getLogger(__name__)


@pytest.fixture
def small_case(small_net):
    return cf.from_raw(small_net)


def test_valid_case(small_case):
    case, bus, gen, branch, dcline = small_case
    cf.validate_case(bus, gen, branch, dcline)


def test_duplicate_bus(small_case):
    _, bus, gen, branch, dcline = small_case
    bus[1, BUS_I] = 1
    with pytest.raises(DuplicateBusError) as err:
        cf.validate_bus_numbers(bus)
    assert err.value.bus == 1


def test_dangling_references(small_case):
    _, bus, gen, branch, dcline = small_case
    gen[0, GEN_BUS] = 17
    with pytest.raises(DanglingReferenceError):
        cf.validate_case(bus, gen, branch, dcline)

    _, bus, gen, branch, dcline = cf.from_raw(small_raw_net())
    dcline[0, DC_T_BUS] = 8
    with pytest.raises(DanglingReferenceError) as err:
        cf.validate_case(bus, gen, branch, dcline)
    assert err.value.bus == 8


def test_branch_loop(small_case):
    _, bus, gen, branch, dcline = small_case
    branch[1, T_BUS] = branch[1, F_BUS]
    with pytest.raises(CaseValidationError) as err:
        cf.validate_case(bus, gen, branch, dcline)
    assert err.value.index == 1


@pytest.mark.parametrize("upper, lower", [(QMAX, QMIN), (PMAX, PMIN)])
def test_gen_limits(small_case, upper, lower):
    _, bus, gen, branch, dcline = small_case
    gen[2, lower] = gen[2, upper] + 1.
    with pytest.raises(CaseValidationError) as err:
        cf.validate_gen(gen)
    assert err.value.index == 2
    assert err.value.element == "gen"


def test_validate_empty_matrices():
    bus = np.array([[1, 3, 0, 0, 0, 0, 1, 1, 0, 110, 1, 1.1, 0.9]], dtype=np.float64)
    cf.validate_case(bus, np.zeros((0, 10)), np.zeros((0, 13)), np.zeros((0, 17)))


if __name__ == '__main__':
    pytest.main([__file__, "-xs"])
