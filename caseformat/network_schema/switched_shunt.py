import pandera.pandas as pa

from caseformat.network_schema.tools import create_lower_equals_column_check

switched_shunt_schema = pa.DataFrameSchema(
    {
        "i": pa.Column(int, pa.Check.gt(0), description="number of the bus the shunt is connected to",
                       metadata={"foreign_key": "bus.i"}),
        "modsw": pa.Column(int, pa.Check.ge(0), description="control mode"),
        "stat": pa.Column(int, pa.Check.isin([0, 1]), description="1 - in service, 0 - out of service"),
        "vswhi": pa.Column(float, description="controlled voltage upper limit [p.u.]"),
        "vswlo": pa.Column(float, description="controlled voltage lower limit [p.u.]"),
        "binit": pa.Column(float, description="initial switched susceptance [MVAr at 1 p.u.]"),
    },
    checks=[create_lower_equals_column_check(first_element="vswlo", second_element="vswhi")],
    strict=False,
)
