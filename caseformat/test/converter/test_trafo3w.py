# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np
import pytest

import caseformat as cf
from caseformat.auxiliary import MissingFieldError, UnsupportedCodeError
from caseformat.converter.raw.build_branch import _first_star_bus, delta_to_star
from caseformat.converter.raw.codes import decode_leg_status
from caseformat.idx_brch import F_BUS, T_BUS, BR_R, BR_X, RATE_A, TAP, SHIFT, BR_STATUS
from caseformat.idx_bus import BUS_I, BUS_TYPE, BUS_AREA, VM, VA, BASE_KV, ZONE, PQ, NONE

logger = logging.getLogger(__name__)


def test_delta_to_star():
    z1, z2, z3 = delta_to_star(0.10, 0.08, 0.06)
    assert np.allclose([z1, z2, z3], [0.04, 0.06, 0.02])


def test_delta_to_star_leg_sums():
    z12 = np.array([0.1, 0.3, 0.05 + 0.2j])
    z23 = np.array([0.2, 0.1, 0.07 + 0.1j])
    z31 = np.array([0.15, 0.25, 0.02 + 0.15j])
    z1, z2, z3 = delta_to_star(z12, z23, z31)
    assert np.allclose(z1 + z2, z12)
    assert np.allclose(z2 + z3, z23)
    assert np.allclose(z3 + z1, z31)


def test_first_star_bus():
    assert _first_star_bus(3) == 10
    assert _first_star_bus(9) == 10
    assert _first_star_bus(10) == 100
    assert _first_star_bus(99) == 100
    assert _first_star_bus(999999) == 1000000
    assert _first_star_bus(0) == 10


def test_decode_leg_status():
    legs = decode_leg_status([0, 1, 2, 3, 4])
    assert np.array_equal(legs, [[False, False, False],
                                 [True, True, True],
                                 [True, False, True],
                                 [True, True, False],
                                 [False, True, True]])


def test_trafo3w_split(three_winding_net):
    case, bus, gen, branch, dcline = cf.from_raw(three_winding_net)
    assert np.array_equal(bus[:, BUS_I], [1, 2, 3, 10])
    star = bus[3]
    assert star[BUS_TYPE] == PQ
    assert star[BUS_AREA] == 5
    assert star[ZONE] == 7
    assert star[BASE_KV] == 400.
    assert star[VM] == 1.01
    assert star[VA] == -2.

    assert len(branch) == 3
    assert np.array_equal(branch[:, F_BUS], [1, 2, 3])
    assert np.array_equal(branch[:, T_BUS], [10, 10, 10])
    assert np.allclose(branch[:, BR_X], [0.04, 0.06, 0.02])
    assert np.allclose(branch[:, BR_R], 0.)
    assert np.allclose(branch[:, TAP], [1.05, 1., 0.98])
    assert np.allclose(branch[:, SHIFT], [0., 0., 30.])
    assert np.allclose(branch[:, RATE_A], [300., 200., 100.])
    assert np.array_equal(branch[:, BR_STATUS], [1, 1, 1])


@pytest.mark.parametrize("stat, legs, star_type", [
    (0, [0, 0, 0], NONE),
    (2, [1, 0, 1], PQ),
    (3, [1, 1, 0], PQ),
    (4, [0, 1, 1], PQ),
])
def test_trafo3w_status(three_winding_net, stat, legs, star_type):
    three_winding_net.transformer.loc[0, "stat"] = stat
    _, bus, _, branch, _ = cf.from_raw(three_winding_net)
    assert np.array_equal(branch[:, BR_STATUS], legs)
    assert bus[3, BUS_TYPE] == star_type


def test_trafo3w_unsupported_status(three_winding_net):
    three_winding_net.transformer.loc[0, "stat"] = 5
    with pytest.raises(UnsupportedCodeError) as err:
        cf.from_raw(three_winding_net)
    assert err.value.buses == (1, 2, 3)


def test_trafo3w_missing_field(three_winding_net):
    three_winding_net.transformer.loc[0, "x2_3"] = np.nan
    with pytest.raises(MissingFieldError) as err:
        cf.from_raw(three_winding_net)
    assert err.value.field == "x2_3"


@pytest.mark.parametrize("field", ["ang3", "rata2", "ratc1"])
def test_trafo3w_missing_leg_data(three_winding_net, field):
    three_winding_net.transformer.loc[0, field] = np.nan
    with pytest.raises(MissingFieldError) as err:
        cf.from_raw(three_winding_net)
    assert err.value.field == field


def test_trafo3w_leg_shift_and_rating(three_winding_net):
    _, _, _, branch, _ = cf.from_raw(three_winding_net)
    assert np.allclose(branch[:, SHIFT], [0., 0., 30.])
    assert np.allclose(branch[:, RATE_A], [300., 200., 100.])


def test_trafo3w_winding_base_and_kv_windings(three_winding_net):
    three_winding_net.transformer.loc[0, ["cw", "cz"]] = [2, 2]
    three_winding_net.transformer.loc[0, ["windv1", "windv2", "windv3"]] = [420., 110., 20.5]
    three_winding_net.transformer.loc[0, ["sbase1_2", "sbase2_3", "sbase3_1"]] = [200., 100., 50.]
    _, _, _, branch, _ = cf.from_raw(three_winding_net)
    assert np.allclose(branch[:, TAP], [420. / 400., 1., 20.5 / 20.])
    x12, x23, x31 = 0.10 * 100. / 200., 0.08, 0.06 * 100. / 50.
    assert np.allclose(branch[:, BR_X], delta_to_star(x12, x23, x31))


def test_star_bus_numbering_with_several_transformers(three_winding_net):
    net = three_winding_net
    cf.create_bus(net, 12, 110.)
    cf.create_transformer3w(net, 12, 2, 3, 0., 0.1, 0., 0.1, 0., 0.1)
    cf.create_transformer(net, 1, 12, 0.001, 0.05)
    _, bus, _, branch, _ = cf.from_raw(net)
    assert np.array_equal(bus[:, BUS_I], [1, 2, 3, 12, 100, 101])
    # lines, two-winding transformers, legs of the three-winding transformers
    assert np.array_equal(branch[:, F_BUS], [1, 1, 2, 3, 12, 2, 3])
    assert np.array_equal(branch[:, T_BUS], [12, 100, 100, 100, 101, 101, 101])


if __name__ == '__main__':
    pytest.main([__file__, "-xs"])
