# -*- coding: utf-8 -*-

# Copyright (c) 2016-2026 by University of Kassel and Fraunhofer Institute for Energy Economics
# and Energy System Technology (IEE), Kassel. All rights reserved.

import io
import logging
import os
import zipfile

import numpy as np
import pandas as pd
from packaging.version import InvalidVersion, Version

from caseformat.auxiliary import Case
from caseformat.idx_brch import branch_cols, branch_names
from caseformat.idx_bus import bus_cols, bus_names
from caseformat.idx_dcline import dcline_cols, dcline_names
from caseformat.idx_gen import gen_cols, gen_names

logger = logging.getLogger(__name__)

CASE_FILE = "case.csv"
README_FILE = "README"
MATRIX_FILES = {
    "bus": ("bus.csv", bus_names, bus_cols),
    "gen": ("gen.csv", gen_names, gen_cols),
    "branch": ("branch.csv", branch_names, branch_cols),
    "dcline": ("dcline.csv", dcline_names, dcline_cols),
}
SUPPORTED_CASE_VERSION = Version("2")
# name and version stay text even if they look like numbers
CASE_DTYPES = {"casename": str, "version": str}


def _case_to_df(case):
    return pd.DataFrame([{
        "casename": case.name, "version": case.version, "base_mva": case.baseMVA,
        "f": np.nan if case.get("f") is None else case.f,
        "f_hz": np.nan if case.get("f_hz") is None else case.f_hz,
    }])


def _df_to_case(df):
    if len(df) != 1:
        raise ValueError("%s must contain exactly one case record, found %d" % (CASE_FILE, len(df)))
    row = df.iloc[0]
    version = str(row.get("version", "2"))
    try:
        if Version(version) > SUPPORTED_CASE_VERSION:
            logger.warning("case format version %s is newer than the supported version %s" % (
                version, SUPPORTED_CASE_VERSION))
    except InvalidVersion:
        logger.warning("case format version '%s' cannot be interpreted" % version)

    def _optional(key):
        value = row.get(key, np.nan)
        return None if pd.isnull(value) else float(value)

    name = row.get("casename", "casename")
    return Case(name="" if pd.isnull(name) else str(name), version=version,
                baseMVA=float(row.get("base_mva", 100.)), f=_optional("f"), f_hz=_optional("f_hz"))


def _matrix_to_csv(matrix, names):
    return pd.DataFrame(np.asarray(matrix, dtype=np.float64).reshape(-1, len(names)),
                        columns=names).to_csv(index=False)


def _csv_to_matrix(buffer, names, cols):
    df = pd.read_csv(buffer)
    missing = [n for n in names if n not in df.columns]
    if missing:
        raise ValueError("missing columns %s" % missing)
    return df[names].values.astype(np.float64).reshape(-1, cols)


def _case_files(case, bus, gen, branch, dcline):
    files = {CASE_FILE: _case_to_df(case).to_csv(index=False)}
    for key, matrix in (("bus", bus), ("gen", gen), ("branch", branch), ("dcline", dcline)):
        if matrix is None:
            continue
        filename, names, _ = MATRIX_FILES[key]
        files[filename] = _matrix_to_csv(matrix, names)
    return files


def _read_case_files(read):
    """
    Reads case, bus, gen, branch and dcline using read(filename), which returns a file-like
    object or None for a missing file. case.csv and bus.csv are mandatory.
    """
    case_buffer = read(CASE_FILE)
    if case_buffer is None:
        raise FileNotFoundError("case container has no %s" % CASE_FILE)
    case = _df_to_case(pd.read_csv(case_buffer, dtype=CASE_DTYPES, keep_default_na=False,
                                   na_values={"f": [""], "f_hz": [""]}))

    matrices = {}
    for key, (filename, names, cols) in MATRIX_FILES.items():
        buffer = read(filename)
        if buffer is None:
            if key == "bus":
                raise FileNotFoundError("case container has no %s" % filename)
            matrices[key] = np.zeros(shape=(0, cols), dtype=np.float64)
        else:
            matrices[key] = _csv_to_matrix(buffer, names, cols)
    return case, matrices["bus"], matrices["gen"], matrices["branch"], matrices["dcline"]


def to_case_dir(dirname, case, bus, gen, branch, dcline=None, readme=None):
    """
    Writes a case as CSV files (case.csv, bus.csv, gen.csv, branch.csv and, if given,
    dcline.csv and README) into a directory, which is created if it does not exist.

    EXAMPLE:
        >>> to_case_dir("entsoe2", *from_raw(net))
    """
    os.makedirs(dirname, exist_ok=True)
    for filename, content in _case_files(case, bus, gen, branch, dcline).items():
        with open(os.path.join(dirname, filename), "w", newline="") as f:
            f.write(content)
    if readme is not None:
        with open(os.path.join(dirname, README_FILE), "w") as f:
            f.write(readme)


def from_case_dir(dirname):
    """
    Reads a case written by to_case_dir. Missing gen, branch or dcline files are read as empty
    matrices.

    OUTPUT:
        **case**, **bus**, **gen**, **branch**, **dcline**
    """
    def _read(filename):
        path = os.path.join(dirname, filename)
        return path if os.path.isfile(path) else None

    return _read_case_files(_read)


def to_case_zip(filename, case, bus, gen, branch, dcline=None, readme=None):
    """
    Writes a case as CSV files into a zip archive, see to_case_dir.

    EXAMPLE:
        >>> to_case_zip("entsoe2.case", *from_raw(net))
    """
    with zipfile.ZipFile(filename, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in _case_files(case, bus, gen, branch, dcline).items():
            zf.writestr(name, content)
        if readme is not None:
            zf.writestr(README_FILE, readme)


def from_case_zip(filename):
    """
    Reads a case written by to_case_zip, see from_case_dir.
    """
    with zipfile.ZipFile(filename, "r") as zf:
        names = set(zf.namelist())

        def _read(name):
            return io.StringIO(zf.read(name).decode("utf-8")) if name in names else None

        return _read_case_files(_read)
