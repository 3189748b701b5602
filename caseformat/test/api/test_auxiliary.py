# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import copy
import logging
import pickle

import pytest

import caseformat as cf
from caseformat.auxiliary import Case, ConversionError, DanglingReferenceError, \
    MissingFieldError, NumericDomainError, UnsupportedCodeError

logger = logging.getLogger(__name__)


def test_case_metadata():
    case = Case(name="c", baseMVA=50, f_hz=50.)
    assert case.version == "2"
    assert case.baseMVA == 50.
    assert case.f is None
    assert case["f_hz"] == 50.
    with pytest.raises(ValueError):
        Case(baseMVA=0.)
    with pytest.raises(ValueError):
        Case(baseMVA=-100.)


def test_raw_network_copy(small_net):
    net = small_net.deepcopy()
    net.bus.loc[0, "vm"] = 0.5
    assert small_net.bus.vm.at[0] == 1.02
    net2 = copy.deepcopy(small_net)
    assert isinstance(net2, cf.RawNetwork)
    assert net2.name == "small"


def test_raw_network_pickles(small_net):
    net = pickle.loads(pickle.dumps(small_net))
    assert net.sbase == 100.
    assert net.bus.equals(small_net.bus)


def test_error_attributes():
    err = UnsupportedCodeError("transformer", "cw", 3, [1, 2], buses=[10, 20])
    assert isinstance(err, ConversionError)
    assert err.buses == (10, 20)
    assert "cw" in str(err)
    assert "10, 20" in str(err)

    err = DanglingReferenceError("load", 7)
    assert err.bus == 7
    assert err.buses == (7,)

    err = MissingFieldError("transformer", "windv2", [1, 2, 3])
    assert err.field == "windv2"
    assert "windv2" in str(err)

    err = NumericDomainError("transformer", "x1_2", [1, 2], "negative")
    assert "negative" in str(err)


def test_errors_pickle():
    for err in [UnsupportedCodeError("transformer", "cw", 3, [1, 2], buses=[10, 20]),
                DanglingReferenceError("load", 7),
                MissingFieldError("transformer", "windv2", [1, 2, 3])]:
        restored = pickle.loads(pickle.dumps(err))
        assert type(restored) is type(err)
        assert str(restored) == str(err)
        assert restored.buses == err.buses


if __name__ == '__main__':
    pytest.main([__file__, "-xs"])
