# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import numpy as np

from caseformat.auxiliary import NumericDomainError
from caseformat.converter.raw.codes import ImpedanceCode, WindingCode, check_codes


def rebase_impedance(z, v_old, v_new, s_old, s_new):
    """
    Converts per unit impedances from one base to another:

        z_new = z_old * (v_old / v_new)**2 * (s_new / s_old)

    All arguments may be scalars or arrays of equal length.
    """
    return z * (v_old / v_new) ** 2 * (s_new / s_old)


def reactance_from_magnitude(z_mag, r, element="transformer", buses=None, field="x"):
    """
    Recovers the reactance from the impedance magnitude and the resistance,
    x = sqrt(|z|**2 - r**2). An impedance magnitude smaller than the resistance has no real
    solution and raises a NumericDomainError for the first offending record.
    """
    z_mag = np.asarray(z_mag, dtype=np.float64)
    r = np.asarray(r, dtype=np.float64)
    x_square = z_mag ** 2 - r ** 2
    invalid = ~(x_square >= 0)
    if np.any(invalid):
        first = np.flatnonzero(np.atleast_1d(invalid))[0]
        raise NumericDomainError(
            element, field, None if buses is None else buses[first],
            "impedance magnitude %s is smaller than resistance %s" % (
                np.atleast_1d(z_mag)[first], np.atleast_1d(r)[first]))
    return np.sqrt(x_square)


def impedance_to_system_pu(r, x, code, base_kv, nom_kv, sbase_winding, sbase_system,
                           element="transformer", buses=None, field="x1_2"):
    """
    Converts transformer impedances to per unit on the system MVA base and the bus base voltage.

    INPUT:
        **r, x** (array) - resistance and reactance, or load loss in W and impedance magnitude
        for code 3

        **code** (array) - impedance code of each record, see ImpedanceCode

        **base_kv** (array) - base voltage of the bus the impedance refers to

        **nom_kv** (array) - nominal winding voltage, 0 or NaN for the bus base voltage

        **sbase_winding** (array) - winding MVA base

        **sbase_system** (float) - system MVA base

    OPTIONAL:
        **element**, **buses**, **field** - identify the records in error messages

    OUTPUT:
        **r, x** (array) - resistance and reactance in system per unit
    """
    r, x, base_kv, nom_kv, sbase_winding = (np.array(a, dtype=np.float64, ndmin=1) for a in np.broadcast_arrays(
        r, x, base_kv, nom_kv, sbase_winding))
    code = np.array(code, ndmin=1)
    check_codes(code, ImpedanceCode, element, "cz", buses)

    on_winding_base = code != ImpedanceCode.SYSTEM_BASE
    nom_kv = np.where(np.isnan(nom_kv) | (nom_kv == 0), base_kv, nom_kv)
    invalid = on_winding_base & ~((base_kv > 0) & (sbase_winding > 0))
    if np.any(invalid):
        first = np.flatnonzero(invalid)[0]
        raise NumericDomainError(element, "sbase" if base_kv[first] > 0 else "basekv",
                                 None if buses is None else buses[first],
                                 "winding base impedances need a positive base voltage and MVA base")

    load_loss = code == ImpedanceCode.LOAD_LOSS
    if np.any(load_loss):
        r[load_loss] = 1e-6 * r[load_loss] / sbase_winding[load_loss]
        x[load_loss] = reactance_from_magnitude(
            x[load_loss], r[load_loss], element, None if buses is None else np.asarray(buses)[load_loss],
            field)

    scale = np.ones_like(r)
    scale[on_winding_base] = rebase_impedance(1., nom_kv[on_winding_base], base_kv[on_winding_base],
                                              sbase_winding[on_winding_base], sbase_system)
    return r * scale, x * scale


def winding_ratio(windv, code, base_kv):
    """
    Winding ratio in p.u. of the bus base voltage. windv is given either in p.u. already
    (WindingCode.BUS_BASE_PU) or in kV (WindingCode.KV). The codes must have been checked before.
    """
    windv = np.asarray(windv, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(np.asarray(code) == WindingCode.KV, windv / base_kv, windv)


def tap_ratio(windv1, windv2, code, base_kv1, base_kv2):
    """
    Off-nominal tap ratio of a two-winding transformer, the ratio of the two winding ratios in
    p.u. of their bus base voltages. For code 1 this is windv1 / windv2, for code 2
    (windv1 / base_kv1) / (windv2 / base_kv2).
    """
    return winding_ratio(windv1, code, base_kv1) / winding_ratio(windv2, code, base_kv2)
