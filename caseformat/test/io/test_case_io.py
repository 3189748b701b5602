# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import logging
import os
import zipfile

import numpy as np
import pandas as pd
import pytest

import caseformat as cf
from caseformat.idx_bus import bus_names

logger = logging.getLogger(__name__)


@pytest.fixture
def small_case(small_net):
    return cf.from_raw(small_net)


def _assert_case_equal(expected, actual):
    assert actual[0].name == expected[0].name
    assert actual[0].version == expected[0].version
    assert actual[0].baseMVA == expected[0].baseMVA
    assert actual[0].f_hz == expected[0].f_hz
    assert actual[0].f == expected[0].f
    for a, b in zip(expected[1:], actual[1:]):
        assert a.shape == b.shape
        assert np.allclose(a, b, rtol=0, atol=1e-12)


def test_case_dir(tmp_path, small_case):
    dirname = os.path.join(tmp_path, "small")
    cf.to_case_dir(dirname, *small_case, readme="small test case")
    assert sorted(os.listdir(dirname)) == ["README", "branch.csv", "bus.csv", "case.csv",
                                           "dcline.csv", "gen.csv"]
    bus = pd.read_csv(os.path.join(dirname, "bus.csv"))
    assert list(bus.columns) == bus_names
    _assert_case_equal(small_case, cf.from_case_dir(dirname))


def test_case_zip(tmp_path, small_case):
    filename = os.path.join(tmp_path, "small.zip")
    cf.to_case_zip(filename, *small_case)
    with zipfile.ZipFile(filename) as zf:
        assert "case.csv" in zf.namelist()
        assert "README" not in zf.namelist()
    _assert_case_equal(small_case, cf.from_case_zip(filename))


def test_infinite_voltage_limits(tmp_path):
    net = cf.create_empty_raw_network(name="inf")
    cf.create_bus(net, 1, 110., ide=3, nvhi=np.nan, nvlo=np.nan)
    case = cf.from_raw(net)
    filename = os.path.join(tmp_path, "inf.zip")
    cf.to_case_zip(filename, *case)
    _assert_case_equal(case, cf.from_case_zip(filename))


@pytest.mark.parametrize("name", ["2024", "inf", "nan", ""])
def test_case_name_and_version_stay_text(tmp_path, small_net, name):
    small_net.name = name
    case = cf.from_raw(small_net)
    filename = os.path.join(tmp_path, "named.zip")
    cf.to_case_zip(filename, *case)
    case2 = cf.from_case_zip(filename)[0]
    assert case2.name == name
    assert case2.version == "2"
    assert case2.f_hz == 60.
    assert case2.f is None


def test_optional_matrices_are_empty(tmp_path, small_case):
    case, bus, gen, branch, dcline = small_case
    dirname = os.path.join(tmp_path, "buses_only")
    cf.to_case_dir(dirname, case, bus, None, None)
    _, bus2, gen2, branch2, dcline2 = cf.from_case_dir(dirname)
    assert np.allclose(bus2, bus)
    assert gen2.shape == (0, 10)
    assert branch2.shape == (0, 13)
    assert dcline2.shape == (0, 17)


def test_missing_bus_file(tmp_path, small_case):
    dirname = os.path.join(tmp_path, "broken")
    cf.to_case_dir(dirname, *small_case)
    os.remove(os.path.join(dirname, "bus.csv"))
    with pytest.raises(FileNotFoundError):
        cf.from_case_dir(dirname)


def test_missing_column(tmp_path, small_case):
    dirname = os.path.join(tmp_path, "broken")
    cf.to_case_dir(dirname, *small_case)
    gen = pd.read_csv(os.path.join(dirname, "gen.csv")).drop(columns=["mbase"])
    gen.to_csv(os.path.join(dirname, "gen.csv"), index=False)
    with pytest.raises(ValueError):
        cf.from_case_dir(dirname)


def test_newer_case_version(tmp_path, small_case, caplog):
    case, bus, gen, branch, dcline = small_case
    case.version = "3"
    filename = os.path.join(tmp_path, "v3.zip")
    cf.to_case_zip(filename, case, bus, gen, branch, dcline)
    with caplog.at_level(logging.WARNING):
        case2 = cf.from_case_zip(filename)[0]
    assert case2.version == "3"
    assert "newer" in caplog.text


if __name__ == '__main__':
    pytest.main([__file__, "-xs"])
