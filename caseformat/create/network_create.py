# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
from numpy import nan

from caseformat.auxiliary import RawNetwork
from caseformat.network_structure import get_structure_dict

logger = logging.getLogger(__name__)


def _create_dataframes(data: dict) -> dict:
    for key in data:
        if isinstance(data[key], dict):
            data[key] = pd.DataFrame(columns=list(data[key].keys()),
                                     index=pd.Index([], dtype=np.int64)).astype(data[key])
    return data


def create_empty_raw_network(name: str = "", sbase: float = 100., basfrq: float = nan,
                             rev: int = 33) -> RawNetwork:
    """
    This function initializes the raw network datastructure.

    OPTIONAL:
        **name** (string, "") - name of the case

        **sbase** (float, 100.) - system MVA base

        **basfrq** (float, nan) - system frequency in hertz, nan if unknown

        **rev** (int, 33) - revision of the raw format the records were read from. It is carried
        along only, the records themselves are always in one canonical layout.

    OUTPUT:
        **net** (RawNetwork) - raw network with empty record tables

    EXAMPLE:
        net = create_empty_raw_network(sbase=100.)

    """
    if not sbase > 0:
        raise ValueError("sbase must be positive, got %s" % sbase)
    structure = get_structure_dict()
    structure["name"] = name
    structure["sbase"] = float(sbase)
    structure["basfrq"] = basfrq
    structure["rev"] = int(rev)
    return RawNetwork(_create_dataframes(structure))
