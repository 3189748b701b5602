# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

from numpy import nan

from caseformat.network_schema import RAW_TABLES
from caseformat.network_schema.tools import get_dtypes


def get_structure_dict(required_only: bool = True) -> dict:
    """
    This function returns the structure dict of the raw network
    """
    structure = {element: get_dtypes(schema, required_only) for element, schema in RAW_TABLES.items()}
    structure.update({
        "name": "",
        "sbase": 100.,
        "basfrq": nan,
        "rev": 33,
    })
    return structure
