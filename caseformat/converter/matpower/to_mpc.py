# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np
from scipy.io import savemat

logger = logging.getLogger(__name__)


def to_mpc(case, bus, gen, branch, dcline=None, filename=None):
    """
    This function converts a normalized case to a matpower case file (.mat) version 2.
    Bus numbers of the case are kept, they are already 1-based.

    INPUT:
        **case** (Case) - case metadata

        **bus**, **gen**, **branch** (ndarray) - the case matrices

    OPTIONAL:
        **dcline** (ndarray, None) - dc lines. Only written if there are any.

        **filename** (str, None) - File path + name of the mat file which will be created. If None
            the mpc will only be returned

    EXAMPLE:
        case, bus, gen, branch, dcline = from_raw(net)
        to_mpc(case, bus, gen, branch, dcline, "case.mat")

    """
    mpc = dict()
    mpc["mpc"] = _case2mpc(case, bus, gen, branch, dcline)
    if filename is not None:
        logger.info("Writing matpower case '%s' to %s" % (case.name, filename))
        savemat(filename, mpc)

    return mpc


def _case2mpc(case, bus, gen, branch, dcline):
    mpc = dict()
    # version is a string
    mpc["version"] = str(case.version)
    # baseMVA has to be a float instead of int
    mpc["baseMVA"] = float(case.baseMVA)
    mpc["bus"] = np.array(bus, dtype=np.float64)
    mpc["gen"] = np.array(gen, dtype=np.float64)
    mpc["branch"] = np.array(branch, dtype=np.float64)
    if dcline is not None and len(dcline):
        mpc["dcline"] = np.array(dcline, dtype=np.float64)
    if case.get("f") is not None:
        mpc["f"] = float(case.f)
    return mpc
