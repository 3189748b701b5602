# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.


# Additional copyright for modified code by Brendan Curran-Johnson (ADict class):
# Copyright (c) 2013 Brendan Curran-Johnson
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
# (https://github.com/bcj/AttrDict/blob/master/LICENSE.txt)

import copy
import logging
from collections.abc import MutableMapping

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class ADict(dict, MutableMapping):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # to prevent overwrite of internal attributes by new keys
        # see _valid_name()
        self._setattr('_allow_invalid_attributes', False)

    def _build(self, obj, **kwargs):
        """
        We only want dict like elements to be treated as recursive AttrDicts.
        """
        return obj

    # --- taken from AttrDict

    def __getstate__(self):
        return self.copy(), self._allow_invalid_attributes

    def __dir__(self):
        return list(self.keys())

    def __setstate__(self, state):
        mapping, allow_invalid_attributes = state
        self.update(mapping)
        self._setattr('_allow_invalid_attributes', allow_invalid_attributes)

    # --- taken from MutableAttr

    def _setattr(self, key, value):
        """
        Add an attribute to the object, without attempting to add it as
        a key to the mapping (i.e. internals)
        """
        super(MutableMapping, self).__setattr__(key, value)

    def __setattr__(self, key, value):
        """
        Add an attribute.

        key: The name of the attribute
        value: The attributes contents
        """
        if self._valid_name(key):
            self[key] = value
        elif getattr(self, '_allow_invalid_attributes', True):
            super(MutableMapping, self).__setattr__(key, value)
        else:
            raise TypeError(
                "'{cls}' does not allow attribute creation.".format(
                    cls=self.__class__.__name__
                )
            )

    def __getattr__(self, key):
        """
        Access an item as an attribute.
        """
        if key not in self or not self._valid_name(key):
            raise AttributeError(
                "'{cls}' instance has no attribute '{name}'".format(
                    cls=self.__class__.__name__, name=key
                )
            )

        return self._build(self[key])

    def __deepcopy__(self, memo):
        cls = self.__class__
        result = cls.__new__(cls)
        memo[id(self)] = result
        for k, v in self.items():
            dict.__setitem__(result, k, copy.deepcopy(v, memo))
        result._setattr('_allow_invalid_attributes', self._allow_invalid_attributes)
        return result

    @classmethod
    def _valid_name(cls, key):
        """
        Check whether a key is a valid attribute name.

        A key may be used as an attribute if:
         * It is a string
         * The key doesn't overlap with any class attributes (for Attr,
            those would be 'get', 'items', 'keys', 'values', 'mro', and
            'register').
        """
        return isinstance(key, str) and not hasattr(cls, key)


class RawNetwork(ADict):
    """
    In-memory raw network: metadata (name, sbase, basfrq, rev) plus one DataFrame per record
    type. Bus references in every table are raw bus numbers, never row positions.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if len(args) and isinstance(args[0], self.__class__):
            net = args[0]
            self.clear()
            self.update(**net.deepcopy())

    def deepcopy(self):
        return copy.deepcopy(self)

    def __repr__(self):  # pragma: no cover
        r = "This raw network includes the following record tables:"
        for tb in list(self.keys()):
            if not tb.startswith("_") and isinstance(self[tb], pd.DataFrame) and len(self[tb]) > 0:
                length = len(self[tb])
                r += "\n   - %s (%s %s)" % (tb, length, "elements" if length > 1 else "element")
        return r


class Case(ADict):
    """
    Container level metadata of a normalized case.

    **name** (str, "casename") - case name

    **version** (str, "2") - format version tag

    **baseMVA** (float, 100.) - system MVA base all per unit quantities are expressed on

    **f** (float, None) - total system cost, None when unknown

    **f_hz** (float, None) - system frequency in hertz, None when unknown
    """

    def __init__(self, name="casename", version="2", baseMVA=100., f=None, f_hz=None):
        if not baseMVA > 0:
            raise ValueError("baseMVA must be positive, got %s" % baseMVA)
        super().__init__(name=name, version=str(version), baseMVA=float(baseMVA), f=f,
                         f_hz=f_hz)

    def __repr__(self):  # pragma: no cover
        return "Case(name=%r, version=%r, baseMVA=%s)" % (self.name, self.version, self.baseMVA)


def _preserve_dtypes(df, dtypes):
    for item, dtype in list(dtypes.items()):
        if df.dtypes.at[item] != dtype:
            try:
                df[item] = df[item].astype(dtype)
            except (ValueError, TypeError):
                df[item] = df[item].astype(float)


def get_free_id(df):
    """
    Returns next free ID in a dataframe
    """
    return np.int64(0) if len(df) == 0 else df.index.values.max() + 1


def _format_buses(buses):
    if buses is None:
        return ""
    return " (buses %s)" % ", ".join(str(int(b)) for b in np.atleast_1d(buses))


class cfException(Exception):
    """
    General caseformat custom parent exception.
    """

    def __reduce__(self):
        # keyword constructors of the subclasses cannot be rebuilt from args alone
        return _rebuild_exception, (self.__class__, self.args, self.__dict__)


def _rebuild_exception(cls, args, state):
    err = Exception.__new__(cls)
    err.args = args
    err.__dict__.update(state)
    return err


class ConversionError(cfException):
    """
    Parent of all errors that abort a raw/case conversion. Carries the record kind, the buses
    of the offending record and, where known, the field name.
    """

    def __init__(self, message, element=None, buses=None, field=None):
        super().__init__(message)
        self.element = element
        self.buses = None if buses is None else tuple(int(b) for b in np.atleast_1d(buses))
        self.field = field


class DanglingReferenceError(ConversionError):
    """
    A record refers to a bus number that is not part of the bus table.
    """

    def __init__(self, element, bus):
        self.bus = int(bus)
        super().__init__("%s refers to bus %d which does not exist" % (element, self.bus),
                         element=element, buses=[bus])


class UnsupportedCodeError(ConversionError):
    """
    An enumerated code (winding code, impedance code, status code) is outside its valid set.
    """

    def __init__(self, element, field, code, valid, buses=None):
        self.code = code
        self.valid = tuple(valid)
        super().__init__(
            "unsupported %s code %s on %s%s, expected one of %s" % (
                field, code, element, _format_buses(buses), list(self.valid)),
            element=element, buses=buses, field=field)


class NumericDomainError(ConversionError):
    """
    A value cannot be computed in the real domain, e.g. a reactance from an impedance magnitude
    smaller than the resistance.
    """

    def __init__(self, element, field, buses=None, detail=""):
        super().__init__("%s of %s%s is outside its numeric domain%s" % (
            field, element, _format_buses(buses), ": " + detail if detail else ""),
            element=element, buses=buses, field=field)


class MissingFieldError(ConversionError):
    """
    A field required for the conversion of a record is missing.
    """

    def __init__(self, element, field, buses=None):
        super().__init__("%s%s is missing required field '%s'" % (
            element, _format_buses(buses), field), element=element, buses=buses, field=field)


class CaseValidationError(cfException):
    """
    A normalized case violates one of its invariants.
    """

    def __init__(self, message, element=None, index=None):
        super().__init__(message)
        self.element = element
        self.index = index


class DuplicateBusError(CaseValidationError):
    def __init__(self, bus):
        self.bus = int(bus)
        super().__init__("bus number %d is not unique" % self.bus, element="bus")
