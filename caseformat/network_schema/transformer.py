import pandera.pandas as pa

_winding_columns = {}
for _w in (1, 2, 3):
    _winding_columns.update({
        f"windv{_w}": pa.Column(float, nullable=_w == 3,
                                description=f"winding {_w} off-nominal ratio (p.u. of bus base for cw 1, kV for cw 2)"),
        f"nomv{_w}": pa.Column(float, nullable=True,
                               description=f"winding {_w} nominal voltage [kV], 0 or NaN for the bus base voltage"),
        f"ang{_w}": pa.Column(float, nullable=True, description=f"winding {_w} phase shift angle [degree]"),
        f"rata{_w}": pa.Column(float, nullable=True, description=f"winding {_w} rating A [MVA]"),
        f"ratb{_w}": pa.Column(float, nullable=True, description=f"winding {_w} rating B [MVA]"),
        f"ratc{_w}": pa.Column(float, nullable=True, description=f"winding {_w} rating C [MVA]"),
    })

_transformer_columns = {
    "i": pa.Column(int, pa.Check.gt(0), description="winding 1 bus number", metadata={"foreign_key": "bus.i"}),
    "j": pa.Column(int, pa.Check.gt(0), description="winding 2 bus number", metadata={"foreign_key": "bus.i"}),
    "k": pa.Column(int, pa.Check.ge(0), description="winding 3 bus number, 0 for a two-winding transformer",
                   metadata={"foreign_key": "bus.i"}),
    "ckt": pa.Column(str, description="circuit identifier"),
    "cw": pa.Column(int, pa.Check.isin([1, 2]),
                    description="winding data code (1 - p.u. of bus base voltage, 2 - kV)"),
    "cz": pa.Column(int, pa.Check.isin([1, 2, 3]),
                    description="impedance data code (1 - system base p.u., 2 - winding base p.u., "
                                "3 - load loss in W and impedance magnitude in p.u.)"),
    "cm": pa.Column(int, pa.Check.isin([1, 2]), description="magnetizing admittance code"),
    "mag1": pa.Column(float, description="magnetizing conductance"),
    "mag2": pa.Column(float, description="magnetizing susceptance"),
    "name": pa.Column(str, nullable=True, description="name of the transformer"),
    "stat": pa.Column(int, pa.Check.isin([0, 1, 2, 3, 4]),
                      description="status (0 - all out, 1 - all in, 2 - winding 2 out, 3 - winding 3 out, "
                                  "4 - winding 1 out)"),
    "r1_2": pa.Column(float, description="winding 1-2 resistance (load loss in W for cz 3)"),
    "x1_2": pa.Column(float, description="winding 1-2 reactance (impedance magnitude for cz 3)"),
    "sbase1_2": pa.Column(float, pa.Check.gt(0), description="winding 1-2 MVA base"),
    "r2_3": pa.Column(float, nullable=True, description="winding 2-3 resistance"),
    "x2_3": pa.Column(float, nullable=True, description="winding 2-3 reactance"),
    "sbase2_3": pa.Column(float, pa.Check.gt(0), nullable=True, description="winding 2-3 MVA base"),
    "r3_1": pa.Column(float, nullable=True, description="winding 3-1 resistance"),
    "x3_1": pa.Column(float, nullable=True, description="winding 3-1 reactance"),
    "sbase3_1": pa.Column(float, pa.Check.gt(0), nullable=True, description="winding 3-1 MVA base"),
    "vmstar": pa.Column(float, nullable=True, description="star bus voltage magnitude [p.u.]"),
    "anstar": pa.Column(float, nullable=True, description="star bus voltage angle [degree]"),
    **_winding_columns,
}

transformer_schema = pa.DataFrameSchema(
    _transformer_columns,
    checks=[
        pa.Check(lambda df: df["i"] != df["j"], error="Column 'i' must differ from column 'j'"),
        pa.Check(lambda df: (df["k"] == 0) | ((df["k"] != df["i"]) & (df["k"] != df["j"])),
                 error="Column 'k' must differ from columns 'i' and 'j'"),
        pa.Check(lambda df: (df["k"] != 0) | df["stat"].isin([0, 1]),
                 error="two-winding transformers only know the status codes 0 and 1"),
    ],
    strict=False,
)
