import pandera.pandas as pa

branch_schema = pa.DataFrameSchema(
    {
        "i": pa.Column(int, pa.Check.gt(0), description="from bus number", metadata={"foreign_key": "bus.i"}),
        "j": pa.Column(int, pa.Check.ne(0), description="to bus number, negative for the metered end",
                       metadata={"foreign_key": "bus.i"}),
        "ckt": pa.Column(str, description="circuit identifier"),
        "r": pa.Column(float, description="series resistance [p.u.]"),
        "x": pa.Column(float, description="series reactance [p.u.]"),
        "b": pa.Column(float, description="total charging susceptance [p.u.]"),
        "rate_a": pa.Column(float, pa.Check.ge(0), description="rating A [MVA]"),
        "rate_b": pa.Column(float, pa.Check.ge(0), description="rating B [MVA]"),
        "rate_c": pa.Column(float, pa.Check.ge(0), description="rating C [MVA]"),
        "gi": pa.Column(float, description="line shunt conductance at the from end [p.u.]"),
        "bi": pa.Column(float, description="line shunt susceptance at the from end [p.u.]"),
        "gj": pa.Column(float, description="line shunt conductance at the to end [p.u.]"),
        "bj": pa.Column(float, description="line shunt susceptance at the to end [p.u.]"),
        "st": pa.Column(int, pa.Check.isin([0, 1]), description="1 - in service, 0 - out of service"),
        "len": pa.Column(float, pa.Check.ge(0), description="line length"),
    },
    checks=[
        pa.Check(lambda df: df["i"] != df["j"].abs(), error="Column 'i' must differ from column 'j'"),
    ],
    strict=False,
)
