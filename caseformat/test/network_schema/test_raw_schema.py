# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging

import numpy as np
import pandas as pd
import pandera as pa
import pytest

import caseformat as cf
from caseformat.network_schema import RAW_TABLES
from caseformat.network_schema.tools import get_dtypes
from caseformat.test.conftest import small_raw_net

logger = logging.getLogger(__name__)


def test_valid_network(small_net, three_winding_net):
    cf.validate_raw_network(small_net)
    cf.validate_raw_network(three_winding_net)


def test_empty_network():
    cf.validate_raw_network(cf.create_empty_raw_network())


def test_structure_matches_schemas():
    net = cf.create_empty_raw_network()
    for element, schema in RAW_TABLES.items():
        assert list(net[element].columns) == list(schema.columns)
        assert net[element].dtypes.to_dict() == get_dtypes(schema)
    assert net.bus.name.dtype == np.dtype(object)


def test_get_dtypes_pandas_string_and_extension_dtypes():
    schema = pa.DataFrameSchema({
        "name": pa.Column(str),
        "label": pa.Column(pd.StringDtype()),
        "count": pa.Column("Int64"),
        "vm": pa.Column(float),
        "x": pa.Column(float, required=False),
    })
    dtypes = get_dtypes(schema)
    assert dtypes == {"name": np.dtype(object), "label": np.dtype(object),
                      "count": pd.Int64Dtype(), "vm": np.dtype(np.float64)}
    assert "x" in get_dtypes(schema, required_only=False)


@pytest.mark.parametrize("element, column, invalid_value", [
    ("bus", "ide", 5),
    ("bus", "i", -1),
    ("bus", "vm", 0.),
    ("bus", "nvlo", 1.5),
    ("load", "status", 2),
    ("fixed_shunt", "status", -1),
    ("switched_shunt", "vswlo", 2.),
    ("generator", "mbase", 0.),
    ("generator", "stat", 3),
    ("branch", "j", 1),
    ("branch", "rate_a", -1.),
    ("transformer", "cw", 3),
    ("transformer", "cz", 0),
    ("transformer", "stat", 2),
    ("transformer", "sbase1_2", 0.),
    ("two_terminal_dc", "mdc", 3),
    ("two_terminal_dc", "alfmx", 95.),
])
def test_invalid_values(element, column, invalid_value):
    net = small_raw_net()
    net[element].loc[net[element].index[0], column] = invalid_value
    with pytest.raises((ValueError, pa.errors.SchemaError)):
        cf.validate_raw_network(net)


def test_missing_required_value():
    net = small_raw_net()
    net.transformer.loc[0, "windv1"] = np.nan
    with pytest.raises((ValueError, pa.errors.SchemaError)):
        cf.validate_raw_network(net)


@pytest.mark.parametrize("element, column", [
    ("load", "i"),
    ("fixed_shunt", "i"),
    ("generator", "i"),
    ("branch", "j"),
    ("transformer", "i"),
    ("two_terminal_dc", "ipi"),
])
def test_dangling_bus_references(element, column):
    net = small_raw_net()
    net[element].loc[net[element].index[0], column] = 42
    with pytest.raises((ValueError, pa.errors.SchemaError)) as err:
        cf.validate_raw_network(net)
    assert "42" in str(err.value)


def test_negative_metered_end_is_a_reference():
    net = small_raw_net()
    net.branch.loc[0, "j"] = -2
    cf.validate_raw_network(net)


def test_three_winding_transformer_buses(three_winding_net):
    three_winding_net.transformer.loc[0, "k"] = 2
    with pytest.raises((ValueError, pa.errors.SchemaError)):
        cf.validate_raw_network(three_winding_net)


def test_from_raw_validates_on_request():
    net = small_raw_net()
    net.bus.loc[0, "vm"] = -1.
    cf.from_raw(net)
    with pytest.raises((ValueError, pa.errors.SchemaError)):
        cf.from_raw(net, validate=True)


if __name__ == '__main__':
    pytest.main([__file__, "-xs"])
