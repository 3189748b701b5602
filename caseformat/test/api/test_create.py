# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np
import pytest

import caseformat as cf

logger = logging.getLogger(__name__)


def test_create_empty_raw_network():
    net = cf.create_empty_raw_network(name="empty", sbase=50., basfrq=60., rev=34)
    assert net.name == "empty"
    assert net.sbase == 50.
    assert net.basfrq == 60.
    assert net.rev == 34
    for table in ["bus", "load", "fixed_shunt", "switched_shunt", "generator", "branch",
                  "transformer", "two_terminal_dc"]:
        assert table in net
        assert len(net[table]) == 0

    with pytest.raises(ValueError):
        cf.create_empty_raw_network(sbase=0.)


def test_create_bus():
    net = cf.create_empty_raw_network()
    b1 = cf.create_bus(net, 101, 230., name="North", ide=3)
    b2 = cf.create_bus(net, 205, 115., area=2, vm=0.99)
    assert b1 == 0
    assert b2 == 1
    assert list(net.bus.i) == [101, 205]
    assert net.bus.i.dtype == np.int64
    assert net.bus.ide.dtype == np.int64
    assert net.bus.name.at[0] == "North"
    assert net.bus.area.at[1] == 2
    assert net.bus.vm.at[1] == 0.99

    with pytest.raises(UserWarning):
        cf.create_bus(net, 101, 230.)
    with pytest.raises(UserWarning):
        cf.create_bus(net, 300, 230., index=1)


def test_create_load_takes_area_and_zone_of_bus():
    net = cf.create_empty_raw_network()
    cf.create_bus(net, 1, 110., area=3, zone=4)
    idx = cf.create_load(net, 1, pl=10., ql=2.)
    assert net.load.area.at[idx] == 3
    assert net.load.zone.at[idx] == 4
    assert net.load.id.at[idx] == "1"
    assert net.load.status.dtype == np.int64

    with pytest.raises(UserWarning):
        cf.create_load(net, 2, pl=10.)


def test_create_shunts():
    net = cf.create_empty_raw_network()
    cf.create_bus(net, 1, 110.)
    cf.create_fixed_shunt(net, 1, gl=1., bl=2.)
    cf.create_switched_shunt(net, 1, binit=5., stat=0)
    assert net.fixed_shunt.bl.at[0] == 2.
    assert net.switched_shunt.binit.at[0] == 5.
    assert net.switched_shunt.stat.at[0] == 0


def test_create_generator_defaults_to_system_base():
    net = cf.create_empty_raw_network(sbase=50.)
    cf.create_bus(net, 1, 110.)
    cf.create_generator(net, 1, pg=10.)
    cf.create_generator(net, 1, pg=10., id="2", mbase=80.)
    assert list(net.generator.mbase) == [50., 80.]
    assert list(net.generator.id) == ["1", "2"]


def test_create_branch():
    net = cf.create_empty_raw_network()
    cf.create_bus(net, 1, 110.)
    cf.create_bus(net, 2, 110.)
    cf.create_branch(net, 1, -2, r=0.01, x=0.1, b=0.02, length=12.)
    assert net.branch.j.at[0] == -2
    assert net.branch.len.at[0] == 12.
    with pytest.raises(UserWarning):
        cf.create_branch(net, 1, 3, r=0.01, x=0.1)


def test_create_transformers():
    net = cf.create_empty_raw_network()
    for number, kv in [(1, 400.), (2, 110.), (3, 20.)]:
        cf.create_bus(net, number, kv)
    t2 = cf.create_transformer(net, 1, 2, r1_2=0.001, x1_2=0.1)
    t3 = cf.create_transformer3w(net, 1, 2, 3, 0., 0.1, 0., 0.08, 0., 0.06, windv=(1.05, 1., 1.))
    assert net.transformer.k.at[t2] == 0
    assert net.transformer.k.at[t3] == 3
    assert net.transformer.sbase1_2.at[t2] == 100.
    assert np.isnan(net.transformer.windv3.at[t2])
    assert net.transformer.windv1.at[t3] == 1.05
    assert net.transformer.sbase3_1.at[t3] == 100.
    assert net.transformer.k.dtype == np.int64

    with pytest.raises(UserWarning):
        cf.create_transformer3w(net, 1, 2, 2, 0., 0.1, 0., 0.08, 0., 0.06)


def test_create_dcline():
    net = cf.create_empty_raw_network()
    cf.create_bus(net, 1, 400.)
    cf.create_bus(net, 2, 230.)
    idx = cf.create_dcline(net, 1, 2, setvl=100.)
    assert net.two_terminal_dc.name.at[idx] == "DCLINE 1"
    assert net.two_terminal_dc.ebasr.at[idx] == 400.
    assert net.two_terminal_dc.ebasi.at[idx] == 230.
    idx = cf.create_dcline(net, 2, 1, setvl=100., name="back")
    assert net.two_terminal_dc.name.at[idx] == "back"


if __name__ == '__main__':
    pytest.main([__file__, "-xs"])
