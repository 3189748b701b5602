# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import numpy as np
import pytest

import caseformat as cf


def entsoe2_net(cz=3):
    """
    Two bus network with one 500 MVA generator step-up transformer 419 kV / 21 kV, given with
    winding voltages in kV. cz 3 gives the impedance as load loss (750 kW) and magnitude, cz 2
    as resistance and reactance on the winding base.
    """
    net = cf.create_empty_raw_network(name="entsoe2", sbase=100., basfrq=50.)
    cf.create_bus(net, 1, 380., name="HV", ide=3)
    cf.create_bus(net, 2, 21., name="GEN", ide=1)
    cf.create_generator(net, 2, pg=400., qg=50., qt=300., qb=-200., vs=1.02, mbase=500., pt=450.,
                        pb=0.)
    if cz == 3:
        r1_2, x1_2 = 750000., 0.16
    else:
        r1_2, x1_2 = 0.0015, np.sqrt(0.16 ** 2 - 0.0015 ** 2)
    cf.create_transformer(net, 1, 2, r1_2=r1_2, x1_2=x1_2, sbase1_2=500., windv1=419., windv2=21.,
                          nomv1=419., nomv2=21., rata1=500., cw=2, cz=cz)
    return net


def small_raw_net():
    """
    Four bus network with loads, shunts, generators, a line, a two-winding transformer and a
    dc line, all on the system base.
    """
    net = cf.create_empty_raw_network(name="small", sbase=100., basfrq=60.)
    cf.create_bus(net, 1, 230., ide=3, vm=1.02)
    cf.create_bus(net, 2, 230., ide=2, area=2, zone=3)
    cf.create_bus(net, 3, 115., ide=1, vm=0.98, va=-5.)
    cf.create_bus(net, 4, 115., ide=1)
    cf.create_generator(net, 1, pg=150., qg=10., qt=100., qb=-50., vs=1.02, pt=300., pb=10.)
    cf.create_generator(net, 2, pg=80., qt=60., qb=-30., vs=1.01, mbase=120., pt=100., pb=0.)
    cf.create_generator(net, 2, pg=20., id="2", stat=0, pt=40., pb=0.)
    cf.create_load(net, 3, pl=90., ql=30.)
    cf.create_load(net, 4, pl=60., ql=20.)
    cf.create_fixed_shunt(net, 3, gl=1., bl=15.)
    cf.create_switched_shunt(net, 4, binit=10.)
    cf.create_branch(net, 1, 2, r=0.01, x=0.1, b=0.02, rate_a=250.)
    cf.create_branch(net, 3, 4, r=0.02, x=0.08, b=0.01, rate_a=120., ckt="1")
    cf.create_transformer(net, 2, 3, r1_2=0.001, x1_2=0.05, windv1=1.025, windv2=1., ang1=0.,
                          rata1=200.)
    cf.create_dcline(net, 1, 4, setvl=50., mdc=1, alfmx=30., alfmn=5., gammx=30., gammn=15.)
    return net


@pytest.fixture
def entsoe2():
    return entsoe2_net(cz=3)


@pytest.fixture
def small_net():
    return small_raw_net()


@pytest.fixture
def three_winding_net():
    net = cf.create_empty_raw_network(name="trafo3w", sbase=100.)
    cf.create_bus(net, 1, 400., ide=3, area=5, zone=7)
    cf.create_bus(net, 2, 110.)
    cf.create_bus(net, 3, 20.)
    cf.create_transformer3w(net, 1, 2, 3, r1_2=0., x1_2=0.10, r2_3=0., x2_3=0.08, r3_1=0.,
                            x3_1=0.06, windv=(1.05, 1., 0.98), ang=(0., 0., 30.),
                            rata=(300., 200., 100.), vmstar=1.01, anstar=-2.)
    return net
